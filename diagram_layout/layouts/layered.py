"""
Layered digraph layout (Sugiyama framework) for flowcharts.

Steps, in order:
1. Cycle removal: reverse DFS back edges so the graph is acyclic
2. Layer assignment: longest-path layering by in-degree relaxation
3. Crossing reduction: barycenter sweeps, forward then backward
4. Coordinate assignment: centered layers, stacked along the flow direction
5. Restore: reversed links get their original direction back

Fully deterministic for a given input order and configuration.
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Hashable

from ..analysis import count_layer_crossings, find_back_edges
from ..config import LayeredDigraphLayoutConfig, LayoutDirection
from ..graph import LayoutGraph, LayoutLink

logger = logging.getLogger(__name__)


@dataclass
class LayeredLayoutResult:
    """What a layered layout run decided, for diagnostics."""
    layers: list[list[Hashable]] = field(default_factory=list)
    reversed_links: int = 0
    crossings: int = 0


def remove_cycles(graph: LayoutGraph) -> list[LayoutLink]:
    """Reverse every back edge in place and return the reversed links."""
    back_edges = find_back_edges(graph)
    for link in back_edges:
        link.reverse()
    if back_edges:
        logger.debug("Reversed %d links to break cycles", len(back_edges))
    return back_edges


def restore_links(reversed_links: list[LayoutLink]) -> None:
    for link in reversed_links:
        link.reverse()


def assign_layers(count: int, edges: list[tuple[int, int]]) -> list[list[int]]:
    """
    Longest-path layering of an acyclic graph.

    Nodes without incoming edges start at layer 0. A node is queued once all
    of its incoming edges have been processed, so every edge ends up pointing
    to a strictly greater layer. Self loops are ignored.

    Returns:
        Node indices per layer, each layer in input order
    """
    in_degree = [0] * count
    successors: list[list[int]] = [[] for _ in range(count)]
    for src, dst in edges:
        if src == dst:
            continue
        in_degree[dst] += 1
        successors[src].append(dst)

    layer_of = [-1] * count
    queue = deque()
    for index in range(count):
        if in_degree[index] == 0:
            layer_of[index] = 0
            queue.append(index)

    while queue:
        current = queue.popleft()
        for target in successors[current]:
            layer_of[target] = max(layer_of[target], layer_of[current] + 1)
            in_degree[target] -= 1
            if in_degree[target] == 0:
                queue.append(target)

    # Only reachable if the graph still had a cycle
    for index in range(count):
        if layer_of[index] < 0:
            logger.warning("Node at index %d was never layered, placing it in layer 0", index)
            layer_of[index] = 0

    layers: list[list[int]] = [[] for _ in range(max(layer_of) + 1)] if count else []
    for index in range(count):
        layers[layer_of[index]].append(index)
    return layers


def _order_by_barycenter(
    layer: list[int],
    reference: list[int],
    neighbors: list[list[int]]
) -> None:
    position = {node: order for order, node in enumerate(reference)}
    default = len(reference) / 2.0

    barycenter: dict[int, float] = {}
    for node in layer:
        indices = [position[n] for n in neighbors[node] if n in position]
        barycenter[node] = sum(indices) / len(indices) if indices else default

    # list.sort is stable: ties keep their current relative order
    layer.sort(key=barycenter.__getitem__)


def reduce_crossings(
    layers: list[list[int]],
    edges: list[tuple[int, int]],
    count: int,
    iterations: int
) -> None:
    """Reorder layers in place with forward and backward barycenter sweeps."""
    predecessors: list[list[int]] = [[] for _ in range(count)]
    successors: list[list[int]] = [[] for _ in range(count)]
    for src, dst in edges:
        if src == dst:
            continue
        predecessors[dst].append(src)
        successors[src].append(dst)

    for _ in range(iterations):
        for i in range(1, len(layers)):
            _order_by_barycenter(layers[i], layers[i - 1], predecessors)
        for i in range(len(layers) - 2, -1, -1):
            _order_by_barycenter(layers[i], layers[i + 1], successors)


def assign_coordinates(
    graph: LayoutGraph,
    layers: list[list[int]],
    config: LayeredDigraphLayoutConfig
) -> None:
    """
    Position nodes layer by layer, then move the bounding box to the origin.

    Within a layer nodes are packed with `node_spacing`, centered on zero.
    Each layer is as deep as its largest node along the flow direction.
    """
    direction = config.direction
    horizontal = direction in (LayoutDirection.RIGHT, LayoutDirection.LEFT)
    depth = 0.0

    for layer in layers:
        if not layer:
            continue

        nodes = [graph.nodes[i] for i in layer]
        breadths = [n.size.height if horizontal else n.size.width for n in nodes]
        total = sum(breadths) + (len(nodes) - 1) * config.node_spacing
        cursor = -total / 2

        for node, breadth in zip(nodes, breadths):
            width, height = node.size.width, node.size.height
            if direction == LayoutDirection.DOWN:
                node.move_to(cursor, depth)
            elif direction == LayoutDirection.UP:
                node.move_to(cursor, -(depth + height))
            elif direction == LayoutDirection.RIGHT:
                node.move_to(depth, cursor)
            else:
                node.move_to(-(depth + width), cursor)
            cursor += breadth + config.node_spacing

        extent = max(n.size.width if horizontal else n.size.height for n in nodes)
        depth += extent + config.layer_spacing

    bounds = graph.bounds()
    graph.translate(-bounds.left, -bounds.top)


def layered_layout(graph: LayoutGraph, config: LayeredDigraphLayoutConfig) -> LayeredLayoutResult:
    """
    Arrange nodes in ranked layers along the configured direction.

    Links that close a cycle are reversed while the layout runs and restored
    before returning, so the caller's link directions are unchanged.

    Args:
        graph: Graph to arrange (modified in-place)
        config: Layered layout settings

    Returns:
        LayeredLayoutResult with the final layer order
    """
    if not graph.nodes:
        return LayeredLayoutResult()

    count = len(graph.nodes)
    logger.debug("Layered layout: %d nodes, %d links", count, len(graph.links))

    reversed_links = remove_cycles(graph)
    try:
        edges = graph.edges()
        layers = assign_layers(count, edges)
        # Long edges are drawn straight through intermediate layers; no dummy nodes
        reduce_crossings(layers, edges, count, config.crossing_reduction_iterations)
        crossings = count_layer_crossings(layers, edges)
        assign_coordinates(graph, layers, config)
    finally:
        restore_links(reversed_links)

    return LayeredLayoutResult(
        layers=[[graph.nodes[i].key for i in layer] for layer in layers],
        reversed_links=len(reversed_links),
        crossings=crossings
    )
