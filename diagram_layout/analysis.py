"""
Graph analysis - structural queries the layout algorithms build on.

Provides analysis functions over a LayoutGraph:
- Roots (nodes without incoming links)
- Back edges found by depth-first search (cycle breaking)
- Connected components
- Crossing counts, both per layer ordering and geometric
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Hashable, Iterable, Optional

from .geometry import segments_intersect
from .graph import LayoutGraph, LayoutLink


@dataclass
class ConnectedComponent:
    """A connected component in the layout graph."""
    node_keys: list[Hashable] = field(default_factory=list)
    edge_count: int = 0

    @property
    def size(self) -> int:
        return len(self.node_keys)


def outgoing_links(graph: LayoutGraph) -> list[list[tuple[LayoutLink, int]]]:
    """
    Adjacency list of (link, target index) per node index, in link order.

    Links that are unbound or leave the graph are not included.
    """
    adjacency: list[list[tuple[LayoutLink, int]]] = [[] for _ in graph.nodes]
    for link in graph.links:
        src = graph.index_of(link.from_node)
        dst = graph.index_of(link.to_node)
        if src is None or dst is None:
            continue
        adjacency[src].append((link, dst))
    return adjacency


def find_roots(graph: LayoutGraph) -> list[int]:
    """
    Indices of nodes with no incoming link, in input order.

    A self loop does not count as an incoming link.
    """
    has_parent = [False] * len(graph.nodes)
    for src, dst in graph.edges():
        if src != dst:
            has_parent[dst] = True
    return [i for i, parented in enumerate(has_parent) if not parented]


def find_back_edges(
    graph: LayoutGraph,
    starts: Optional[Iterable[int]] = None
) -> list[LayoutLink]:
    """
    Find the links that close a cycle, using depth-first search.

    Each unvisited start node (all nodes in input order by default) begins a
    new search. A link whose target is still on the current search path is a
    back edge; reversing every back edge makes the graph acyclic.

    Args:
        graph: The graph to search
        starts: Node indices to start from (default: every node)

    Returns:
        Back-edge links in discovery order
    """
    adjacency = outgoing_links(graph)
    count = len(graph.nodes)
    visited = [False] * count
    on_path = [False] * count
    back_edges: list[LayoutLink] = []

    if starts is None:
        starts = range(count)

    for start in starts:
        if visited[start]:
            continue

        visited[start] = on_path[start] = True
        stack = [(start, iter(adjacency[start]))]

        while stack:
            current, pending = stack[-1]
            for link, target in pending:
                if not visited[target]:
                    visited[target] = on_path[target] = True
                    stack.append((target, iter(adjacency[target])))
                    break
                if on_path[target]:
                    back_edges.append(link)
            else:
                on_path[current] = False
                stack.pop()

    return back_edges


def find_connected_components(graph: LayoutGraph) -> list[ConnectedComponent]:
    """
    Find all connected components, treating links as undirected.

    Args:
        graph: The graph to analyze

    Returns:
        List of ConnectedComponent objects, in order of their first node
    """
    if not graph.nodes:
        return []

    adjacency: list[set[int]] = [set() for _ in graph.nodes]
    for src, dst in graph.edges():
        adjacency[src].add(dst)
        adjacency[dst].add(src)

    component_of = [-1] * len(graph.nodes)
    components: list[ConnectedComponent] = []

    for start in range(len(graph.nodes)):
        if component_of[start] >= 0:
            continue

        component = ConnectedComponent()
        component_of[start] = len(components)
        queue = deque([start])
        while queue:
            current = queue.popleft()
            component.node_keys.append(graph.nodes[current].key)
            for neighbor in sorted(adjacency[current]):
                if component_of[neighbor] < 0:
                    component_of[neighbor] = len(components)
                    queue.append(neighbor)
        components.append(component)

    for src, _ in graph.edges():
        components[component_of[src]].edge_count += 1

    return components


def count_layer_crossings(layers: list[list[int]], edges: Iterable[tuple[int, int]]) -> int:
    """
    Count edge crossings between adjacent layers for a given ordering.

    Edges are node index pairs; only edges joining consecutive layers are
    counted (in either direction).
    """
    layer_of: dict[int, int] = {}
    position: dict[int, int] = {}
    for layer_index, layer in enumerate(layers):
        for order, node in enumerate(layer):
            layer_of[node] = layer_index
            position[node] = order

    between: dict[int, list[tuple[int, int]]] = {}
    for src, dst in edges:
        if src not in layer_of or dst not in layer_of:
            continue
        if layer_of[src] > layer_of[dst]:
            src, dst = dst, src
        if layer_of[dst] - layer_of[src] != 1:
            continue
        between.setdefault(layer_of[src], []).append((position[src], position[dst]))

    crossings = 0
    for pairs in between.values():
        for i, (a_top, a_bottom) in enumerate(pairs):
            for b_top, b_bottom in pairs[i + 1:]:
                if (a_top - b_top) * (a_bottom - b_bottom) < 0:
                    crossings += 1
    return crossings


def count_link_crossings(graph: LayoutGraph) -> int:
    """
    Count crossings between straight links drawn center to center.

    Links sharing an endpoint are never counted as crossing.
    """
    segments = []
    for src, dst in graph.edges():
        if src == dst:
            continue
        segments.append((src, dst, graph.nodes[src].center, graph.nodes[dst].center))

    crossings = 0
    for i, (a_src, a_dst, a1, a2) in enumerate(segments):
        for b_src, b_dst, b1, b2 in segments[i + 1:]:
            if {a_src, a_dst} & {b_src, b_dst}:
                continue
            if segments_intersect(a1, a2, b1, b2):
                crossings += 1
    return crossings
