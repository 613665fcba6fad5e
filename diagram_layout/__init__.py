"""
Diagram Layout - Automatic layout algorithms for diagrams.

This package computes node positions for a graph of sized boxes and
directed links. Callers build a LayoutGraph (or adapt a Diagram), pick a
layout config and run it through `apply_layout`.
"""

from .geometry import Point, Size, Rect, rotate_point, bounding_box, segments_intersect
from .models import Node, Edge, Diagram
from .graph import LayoutNode, LayoutLink, LayoutGraph
from .config import (
    # Enums
    TreeAlignment,
    LayoutDirection,
    GridAlignment,
    # Configs
    TreeLayoutConfig,
    LayeredDigraphLayoutConfig,
    ForceDirectedLayoutConfig,
    CircularLayoutConfig,
    GridLayoutConfig,
    LayoutConfig,
    parse_layout_config,
)
from .layouts import (
    tree_layout,
    layered_layout,
    LayeredLayoutResult,
    force_layout,
    circular_layout,
    grid_layout,
    grid_dimensions,
)
from .engine import apply_layout, apply_layout_to_group, layout_diagram
from .validation import validate_graph, validate_tree, validation_summary, ValidationIssue, IssueSeverity
from .analysis import find_connected_components, count_link_crossings
from .logging_config import setup_logging

__all__ = [
    # Geometry
    "Point",
    "Size",
    "Rect",
    "rotate_point",
    "bounding_box",
    "segments_intersect",
    # Models
    "Node",
    "Edge",
    "Diagram",
    # Graph view
    "LayoutNode",
    "LayoutLink",
    "LayoutGraph",
    # Config
    "TreeAlignment",
    "LayoutDirection",
    "GridAlignment",
    "TreeLayoutConfig",
    "LayeredDigraphLayoutConfig",
    "ForceDirectedLayoutConfig",
    "CircularLayoutConfig",
    "GridLayoutConfig",
    "LayoutConfig",
    "parse_layout_config",
    # Layouts
    "tree_layout",
    "layered_layout",
    "LayeredLayoutResult",
    "force_layout",
    "circular_layout",
    "grid_layout",
    "grid_dimensions",
    "apply_layout",
    "apply_layout_to_group",
    "layout_diagram",
    # Validation
    "validate_graph",
    "validate_tree",
    "validation_summary",
    "ValidationIssue",
    "IssueSeverity",
    # Analysis
    "find_connected_components",
    "count_link_crossings",
    "setup_logging",
]
