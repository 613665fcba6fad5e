"""
Layout dispatch - one entry point for every layout strategy.

The config object decides which algorithm runs:

    apply_layout(graph, GridLayoutConfig(columns=3))
    apply_layout(graph, parse_layout_config({"kind": "force", "seed": 7}))
"""

import logging
from typing import Iterable, Optional

from .config import (
    CircularLayoutConfig,
    ForceDirectedLayoutConfig,
    GridLayoutConfig,
    LayeredDigraphLayoutConfig,
    LayoutConfig,
    TreeLayoutConfig,
)
from .geometry import Point
from .graph import LayoutGraph, LayoutNode
from .layouts import circular_layout, force_layout, grid_layout, layered_layout, tree_layout
from .models import Diagram

logger = logging.getLogger(__name__)


def apply_layout(graph: LayoutGraph, config: LayoutConfig) -> None:
    """
    Run the layout described by `config` on `graph`.

    An empty graph is left alone.

    Raises:
        TypeError: `config` is not one of the layout config models
    """
    if isinstance(config, TreeLayoutConfig):
        layout = tree_layout
    elif isinstance(config, LayeredDigraphLayoutConfig):
        layout = layered_layout
    elif isinstance(config, ForceDirectedLayoutConfig):
        layout = force_layout
    elif isinstance(config, CircularLayoutConfig):
        layout = circular_layout
    elif isinstance(config, GridLayoutConfig):
        layout = grid_layout
    else:
        raise TypeError(f"Unsupported layout config: {type(config).__name__}")

    if not graph.nodes:
        return
    layout(graph, config)


def apply_layout_to_group(
    graph: LayoutGraph,
    nodes: Iterable[LayoutNode],
    config: LayoutConfig,
    origin: Optional[Point] = None
) -> LayoutGraph:
    """
    Lay out a subset of the graph as if it were a graph of its own.

    Links crossing the subset boundary are ignored. Nodes outside the subset
    are not touched.

    Args:
        graph: The full graph
        nodes: Member nodes forming the group
        config: Layout to run on the group
        origin: If given, the group's bounding box top-left is moved here.
            Ignored for a force layout with locked members, which must
            stay where they are.

    Returns:
        The group subgraph (sharing node objects with `graph`)
    """
    group = graph.subgraph(nodes)
    logger.debug("Group layout on %d of %d nodes", len(group), len(graph))
    apply_layout(group, config)

    if origin is None or not group.nodes:
        return group

    if isinstance(config, ForceDirectedLayoutConfig) and any(n.locked for n in group.nodes):
        logger.debug("Locked nodes in group, not moving it to the origin")
    else:
        bounds = group.bounds()
        group.translate(origin.x - bounds.left, origin.y - bounds.top)
    return group


def layout_diagram(diagram: Diagram, config: LayoutConfig) -> bool:
    """
    Lay out a Diagram's nodes in place.

    Returns:
        True if the layout ran, False if the diagram has no nodes
    """
    if not diagram.nodes:
        return False

    graph = LayoutGraph.from_diagram(diagram)
    apply_layout(graph, config)
    graph.apply_positions()
    return True
