"""Tests for the graph view and the Diagram adapter."""

import pytest

from diagram_layout import Diagram, Edge, LayoutGraph, LayoutLink, LayoutNode, Node, Point, Rect, Size


class TestLayoutGraph:

    def test_duplicate_key_rejected(self):
        graph = LayoutGraph([LayoutNode("a")])
        with pytest.raises(ValueError, match="already exists"):
            graph.add_node(LayoutNode("a"))

    def test_index_of_requires_membership(self):
        graph = LayoutGraph([LayoutNode("a"), LayoutNode("b")])
        impostor = LayoutNode("a")
        assert graph.index_of(graph.node("b")) == 1
        assert graph.index_of(impostor) is None
        assert graph.index_of(None) is None

    def test_edges_skip_unbound_and_foreign_links(self, make_graph):
        graph = make_graph("AB", [("A", "B")])
        graph.add_link(LayoutLink(graph.node("A"), None))
        graph.add_link(LayoutLink(None, None))
        graph.add_link(LayoutLink(graph.node("B"), LayoutNode("outsider")))
        assert graph.edges() == [(0, 1)]

    def test_subgraph_drops_boundary_links(self, make_graph):
        graph = make_graph("ABC", [("A", "B"), ("B", "C")])
        sub = graph.subgraph([graph.node("A"), graph.node("B")])
        assert [n.key for n in sub.nodes] == ["A", "B"]
        assert sub.edges() == [(0, 1)]
        assert sub.node("A") is graph.node("A")

    def test_bounds(self):
        graph = LayoutGraph([
            LayoutNode("a", size=Size(10, 10), position=Point(0, 0)),
            LayoutNode("b", size=Size(10, 20), position=Point(30, 5)),
        ])
        assert graph.bounds() == Rect(0, 0, 40, 25)
        assert LayoutGraph().bounds() == Rect()

    def test_center_on_origin(self):
        graph = LayoutGraph([
            LayoutNode("a", size=Size(10, 10), position=Point(100, 100)),
            LayoutNode("b", size=Size(10, 10), position=Point(130, 100)),
        ])
        graph.center_on_origin()
        assert graph.bounds().center == Point(0, 0)

    def test_required_group_size(self):
        graph = LayoutGraph([
            LayoutNode("a", size=Size(50, 50), position=Point(0, 0)),
            LayoutNode("b", size=Size(50, 50), position=Point(100, 0)),
        ])
        assert graph.required_group_size() == Size(170, 100)

    def test_link_reverse(self):
        a, b = LayoutNode("a"), LayoutNode("b")
        link = LayoutLink(a, b)
        link.reverse()
        assert link.from_node is b
        assert link.to_node is a

    def test_node_center_at(self):
        node = LayoutNode("a", size=Size(20, 10))
        node.center_at(0, 0)
        assert node.position == Point(-10, -5)
        assert node.center == Point(0, 0)


class TestDiagramAdapter:

    def test_from_diagram_and_write_back(self):
        diagram = Diagram(
            nodes=[Node(id="a", x=1, y=2, width=30, height=40, locked=True), Node(id="b")],
            edges=[Edge(source="a", target="b"), Edge(source="a", target="missing")]
        )
        graph = LayoutGraph.from_diagram(diagram)

        assert graph.node("a").size == Size(30, 40)
        assert graph.node("a").locked
        assert graph.edges() == [(0, 1)]
        assert graph.links[1].to_node is None

        graph.node("b").move_to(500, 600)
        assert graph.apply_positions() == 2
        assert diagram.get_node("b").x == 500
        assert diagram.get_node("b").y == 600

    def test_edge_accepts_legacy_keys(self):
        edge = Edge(**{"from": "a", "to": "b"})
        assert edge.source == "a"
        assert edge.target == "b"

    def test_node_rejects_negative_size(self):
        with pytest.raises(ValueError):
            Node(width=-1)

    def test_node_rejects_non_finite_position(self):
        with pytest.raises(ValueError):
            Node(x=float("nan"))

    def test_edge_bound_flag(self):
        assert Edge(source="a", target="b").is_bound
        assert not Edge(source="a").is_bound
