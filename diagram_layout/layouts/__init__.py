"""
Layout algorithms for layout graphs.

All layout functions modify node positions in-place:
- tree_layout: Hierarchical forest layout
- layered_layout: Sugiyama-style layered digraph layout
- force_layout: Spring-electrical simulation
- circular_layout: Nodes around a circle
- grid_layout: Uniform row/column grid
"""

from .tree import tree_layout
from .layered import LayeredLayoutResult, layered_layout
from .force import force_layout
from .circular import circular_layout
from .grid import grid_dimensions, grid_layout

__all__ = [
    "tree_layout",
    "layered_layout",
    "LayeredLayoutResult",
    "force_layout",
    "circular_layout",
    "grid_layout",
    "grid_dimensions",
]
