"""
Tree layout for hierarchical diagrams such as org charts.

Works on a logical frame where x runs across siblings and y runs down the
layers, then maps that frame onto the diagram plane according to the
configured growth angle.
"""

import logging
import math
from dataclasses import dataclass, field
from functools import cmp_to_key

from ..analysis import find_roots
from ..config import TreeAlignment, TreeLayoutConfig
from ..geometry import Point, rotate_point
from ..graph import LayoutGraph, LayoutNode

logger = logging.getLogger(__name__)


@dataclass
class TreeShape:
    """A node's place in the tree plus the footprint of its subtree."""
    index: int
    width: float    # Node extent across the layer (logical frame)
    height: float   # Node extent along the growth direction
    children: list["TreeShape"] = field(default_factory=list)
    total_width: float = 0.0
    total_height: float = 0.0

    def children_width(self, spacing: float) -> float:
        return sum(c.total_width for c in self.children) + (len(self.children) - 1) * spacing


def _normalized_angle(angle: float) -> float:
    return angle % 360.0


def _is_horizontal(angle: float) -> bool:
    return _normalized_angle(angle) in (0.0, 180.0)


def _child_candidates(
    index: int,
    graph: LayoutGraph,
    children_of: list[list[int]],
    config: TreeLayoutConfig
) -> list[int]:
    candidates = children_of[index]
    if config.sort_children and config.child_comparator is not None and len(candidates) > 1:
        comparator = config.child_comparator
        candidates = sorted(
            candidates,
            key=cmp_to_key(lambda a, b: comparator(graph.nodes[a], graph.nodes[b]))
        )
    return candidates


def _new_shape(index: int, graph: LayoutGraph, config: TreeLayoutConfig) -> TreeShape:
    node = graph.nodes[index]
    size = node.size.swapped() if _is_horizontal(config.angle) else node.size
    return TreeShape(index=index, width=size.width, height=size.height)


def build_tree(
    root: int,
    graph: LayoutGraph,
    children_of: list[list[int]],
    claimed: list[bool],
    config: TreeLayoutConfig
) -> TreeShape:
    """
    Build the shape of the subtree under `root` with a depth-first walk.

    A node already claimed by an earlier branch (shared child, or a cycle
    back up the tree) is not descended into again. Each shape is measured
    when the walk leaves it, so its children are always measured first.
    """
    claimed[root] = True
    root_shape = _new_shape(root, graph, config)
    stack = [(root_shape, iter(_child_candidates(root, graph, children_of, config)))]

    while stack:
        shape, pending = stack[-1]
        for child in pending:
            if claimed[child]:
                continue
            claimed[child] = True
            child_shape = _new_shape(child, graph, config)
            shape.children.append(child_shape)
            stack.append((child_shape, iter(_child_candidates(child, graph, children_of, config))))
            break
        else:
            _measure(shape, config)
            stack.pop()

    return root_shape


def _measure(shape: TreeShape, config: TreeLayoutConfig) -> None:
    if not shape.children:
        shape.total_width = shape.width
        shape.total_height = shape.height
        return

    shape.total_width = max(shape.width, shape.children_width(config.node_spacing))
    deepest = max(c.total_height for c in shape.children)
    shape.total_height = shape.height + config.layer_spacing + deepest


def _place(
    root: TreeShape,
    x: float,
    y: float,
    allocated: float,
    graph: LayoutGraph,
    config: TreeLayoutConfig
) -> None:
    spacing = config.node_spacing
    alignment = config.alignment
    stack = [(root, x, y, allocated)]

    while stack:
        shape, x, y, allocated = stack.pop()

        if alignment == TreeAlignment.CENTER_CHILDREN and shape.children:
            span = shape.children_width(spacing)
            node_x = x + (allocated - span) / 2 + span / 2 - shape.width / 2
        elif alignment == TreeAlignment.START:
            node_x = x
        elif alignment == TreeAlignment.END:
            node_x = x + allocated - shape.width
        else:
            node_x = x + (allocated - shape.width) / 2

        _transform(graph.nodes[shape.index], node_x, y, shape, config.angle)

        if not shape.children:
            continue

        child_y = y + shape.height + config.layer_spacing
        child_x = x
        if alignment == TreeAlignment.CENTER_CHILDREN:
            child_x = x + (allocated - shape.children_width(spacing)) / 2

        for child in shape.children:
            stack.append((child, child_x, child_y, child.total_width))
            child_x += child.total_width + spacing


def _transform(node: LayoutNode, x: float, y: float, shape: TreeShape, angle: float) -> None:
    """Map a logical top-left corner onto the diagram plane."""
    angle = _normalized_angle(angle)

    if angle == 90.0:
        node.move_to(x, y)
    elif angle == 270.0:
        node.move_to(x, -(y + shape.height))
    elif angle == 0.0:
        node.move_to(y, x)
    elif angle == 180.0:
        node.move_to(-(y + shape.height), x)
    else:
        # Rotate the downward layout; 90 degrees is the identity
        center = Point(x + shape.width / 2, y + shape.height / 2)
        rotated = rotate_point(center, Point.zero(), math.radians(angle - 90.0))
        node.center_at(rotated.x, rotated.y)


def tree_layout(graph: LayoutGraph, config: TreeLayoutConfig) -> list[LayoutNode]:
    """
    Arrange a forest so parents sit over their children.

    Nodes with no incoming links are roots; when there are none (a pure
    cycle), the first node is used. Root trees are laid out left to right in
    root order. Nodes that no root reaches are laid out afterwards as extra
    trees, in input order.

    Args:
        graph: Graph to arrange (modified in-place)
        config: Tree layout settings

    Returns:
        The graph's nodes
    """
    nodes = graph.nodes
    if not nodes:
        return nodes

    count = len(nodes)
    children_of: list[list[int]] = [[] for _ in range(count)]
    for src, dst in graph.edges():
        if src != dst:
            children_of[src].append(dst)

    roots = find_roots(graph)
    if not roots:
        logger.debug("No root found, using first node as the root")
        roots = [0]

    logger.debug("Tree layout: %d nodes, %d roots", count, len(roots))

    claimed = [False] * count
    offset = 0.0

    def lay_out(root: int) -> None:
        nonlocal offset
        shape = build_tree(root, graph, children_of, claimed, config)
        _place(shape, offset, 0.0, shape.total_width, graph, config)
        offset += shape.total_width + config.tree_spacing

    for root in roots:
        if not claimed[root]:
            lay_out(root)

    for index in range(count):
        if not claimed[index]:
            logger.debug("Node %r unreachable from roots, laying out as extra tree", nodes[index].key)
            lay_out(index)

    return nodes

