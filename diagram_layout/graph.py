"""
Graph view consumed by the layout algorithms.

A LayoutGraph is built fresh by the caller for each layout run, either by
hand or from a Diagram via `LayoutGraph.from_diagram`. Layouts read node
sizes and link endpoints from it and write node positions back into it.

Each node gets a dense integer index when it is added; algorithms keep their
per-node scratch data in plain lists indexed by it.
"""

from dataclasses import dataclass, field
from typing import Any, Hashable, Iterable, Optional, TYPE_CHECKING

from .geometry import Point, Rect, Size

if TYPE_CHECKING:
    from .models import Diagram


@dataclass(eq=False)
class LayoutNode:
    """A sized box that a layout can move. `position` is the top-left corner."""
    key: Hashable
    size: Size = field(default_factory=lambda: Size(100, 50))
    position: Point = field(default_factory=Point.zero)
    locked: bool = False
    source: Any = None  # The full node this one was adapted from

    @property
    def bounds(self) -> Rect:
        return Rect.from_point_size(self.position, self.size)

    @property
    def center(self) -> Point:
        return self.bounds.center

    def move_to(self, x: float, y: float) -> None:
        self.position = Point(x, y)

    def center_at(self, x: float, y: float) -> None:
        """Place the node so its center (not its corner) lands on (x, y)."""
        self.position = Point(x - self.size.width / 2, y - self.size.height / 2)


@dataclass(eq=False)
class LayoutLink:
    """A directed connection. Unbound links have a None endpoint."""
    from_node: Optional[LayoutNode] = None
    to_node: Optional[LayoutNode] = None
    source: Any = None

    @property
    def is_bound(self) -> bool:
        return self.from_node is not None and self.to_node is not None

    def reverse(self) -> None:
        self.from_node, self.to_node = self.to_node, self.from_node


class LayoutGraph:
    """
    Ordered, key-unique set of nodes plus the links between them.

    Node order is significant: it is the tie-break order wherever a layout
    needs a stable ordering.
    """

    def __init__(
        self,
        nodes: Iterable[LayoutNode] = (),
        links: Iterable[LayoutLink] = ()
    ):
        self.nodes: list[LayoutNode] = []
        self.links: list[LayoutLink] = []
        self._index: dict[Hashable, int] = {}

        for node in nodes:
            self.add_node(node)
        for link in links:
            self.add_link(link)

    def __len__(self) -> int:
        return len(self.nodes)

    # --- Construction ---

    def add_node(self, node: LayoutNode) -> LayoutNode:
        """Add a node; keys must be unique within the graph."""
        if node.key in self._index:
            raise ValueError(f"Node with key {node.key!r} already exists")
        self._index[node.key] = len(self.nodes)
        self.nodes.append(node)
        return node

    def add_link(self, link: LayoutLink) -> LayoutLink:
        self.links.append(link)
        return link

    def connect(self, from_key: Hashable, to_key: Hashable) -> LayoutLink:
        """Add a link between two nodes of this graph, looked up by key."""
        return self.add_link(LayoutLink(self.node(from_key), self.node(to_key)))

    # --- Lookup ---

    def node(self, key: Hashable) -> Optional[LayoutNode]:
        index = self._index.get(key)
        return self.nodes[index] if index is not None else None

    def index_of(self, node: Optional[LayoutNode]) -> Optional[int]:
        """
        Dense index of `node` in this graph.

        Returns None for None and for node objects that are not members of
        this graph (even if another member shares their key).
        """
        if node is None:
            return None
        index = self._index.get(node.key)
        if index is None or self.nodes[index] is not node:
            return None
        return index

    def edges(self) -> list[tuple[int, int]]:
        """
        Index pairs (from, to) of every link whose ends are both in the graph.

        Unbound links and links to foreign nodes are skipped silently.
        """
        pairs = []
        for link in self.links:
            src = self.index_of(link.from_node)
            dst = self.index_of(link.to_node)
            if src is None or dst is None:
                continue
            pairs.append((src, dst))
        return pairs

    def subgraph(self, nodes: Iterable[LayoutNode]) -> "LayoutGraph":
        """
        A graph over the given member nodes sharing the same node objects.

        Only links with both ends inside the subset are carried over.
        """
        sub = LayoutGraph()
        for node in nodes:
            if self.index_of(node) is not None and sub.index_of(node) is None:
                sub.add_node(node)
        for link in self.links:
            if sub.index_of(link.from_node) is not None and sub.index_of(link.to_node) is not None:
                sub.add_link(link)
        return sub

    # --- Geometry ---

    def bounds(self) -> Rect:
        """Union of all node bounding boxes."""
        if not self.nodes:
            return Rect()
        result = self.nodes[0].bounds
        for node in self.nodes[1:]:
            result = result.union(node.bounds)
        return result

    def translate(self, dx: float, dy: float) -> None:
        offset = Point(dx, dy)
        for node in self.nodes:
            node.position = node.position + offset

    def center_on_origin(self) -> None:
        """Move every node so the bounding box center sits at (0, 0)."""
        if not self.nodes:
            return
        center = self.bounds().center
        self.translate(-center.x, -center.y)

    def required_group_size(self, padding: float = 10, header: float = 30) -> Size:
        """Size a group box needs to enclose all nodes, plus padding and a title bar."""
        bounds = self.bounds()
        return Size(bounds.width + 2 * padding, bounds.height + 2 * padding + header)

    # --- Diagram adapter ---

    @classmethod
    def from_diagram(cls, diagram: "Diagram") -> "LayoutGraph":
        """
        Build a graph view over a Diagram's nodes and edges.

        Edges pointing at unknown node IDs become unbound at that end.
        """
        graph = cls()
        for node in diagram.nodes:
            graph.add_node(LayoutNode(
                key=node.id,
                size=Size(node.width, node.height),
                position=Point(node.x, node.y),
                locked=node.locked,
                source=node
            ))
        for edge in diagram.edges:
            graph.add_link(LayoutLink(
                from_node=graph.node(edge.source) if edge.source is not None else None,
                to_node=graph.node(edge.target) if edge.target is not None else None,
                source=edge
            ))
        return graph

    def apply_positions(self) -> int:
        """
        Write positions back to the source nodes.

        Returns:
            Number of source nodes updated
        """
        updated = 0
        for node in self.nodes:
            if node.source is None:
                continue
            node.source.x = node.position.x
            node.source.y = node.position.y
            updated += 1
        return updated
