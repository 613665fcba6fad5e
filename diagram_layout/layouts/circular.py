"""Circular layout: nodes evenly spaced around a circle."""

import logging
import math

from ..config import CircularLayoutConfig
from ..graph import LayoutGraph, LayoutNode
from .common import ordered_nodes

logger = logging.getLogger(__name__)


def circle_radius(nodes: list[LayoutNode], config: CircularLayoutConfig) -> float:
    """
    Radius for the circle.

    With `auto_radius`, the circumference is sized so each node gets its
    larger dimension plus `node_spacing`, never below `min_radius`.
    """
    if not config.auto_radius:
        return config.radius

    average = sum(max(n.size.width, n.size.height) for n in nodes) / len(nodes)
    circumference = len(nodes) * (average + config.node_spacing)
    return max(circumference / (2 * math.pi), config.min_radius)


def circular_layout(graph: LayoutGraph, config: CircularLayoutConfig) -> list[LayoutNode]:
    """
    Place node centers on a circle, starting at `start_angle` and going clockwise.

    Args:
        graph: Graph to arrange (modified in-place)
        config: Circle settings

    Returns:
        The graph's nodes
    """
    if not graph.nodes:
        return graph.nodes

    nodes = ordered_nodes(graph.nodes, config.sort_nodes, config.node_comparator)
    radius = circle_radius(nodes, config)
    step = 360.0 / len(nodes)
    logger.debug("Circular layout: %d nodes, radius %.1f", len(nodes), radius)

    for i, node in enumerate(nodes):
        angle = math.radians(config.start_angle + i * step)
        node.center_at(radius * math.cos(angle), radius * math.sin(angle))

    graph.center_on_origin()
    return graph.nodes
