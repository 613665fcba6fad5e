"""Tests for the force-directed layout."""

import math

import pytest

from diagram_layout import ForceDirectedLayoutConfig, LayoutGraph, LayoutNode, Point, Size, force_layout


def fixed_start(**overrides):
    settings = {"randomize_initial_positions": False, "seed": 1}
    settings.update(overrides)
    return ForceDirectedLayoutConfig(**settings)


class TestForceLayout:

    def test_empty_graph_is_noop(self):
        assert force_layout(LayoutGraph(), ForceDirectedLayoutConfig()) == []

    def test_zero_iterations_only_centers(self):
        graph = LayoutGraph([
            LayoutNode("a", size=Size(100, 50), position=Point(0, 0)),
            LayoutNode("b", size=Size(100, 50), position=Point(300, 100)),
        ])
        force_layout(graph, fixed_start(iterations=0))

        # Bounding box was (0, 0)-(400, 150), center (200, 75)
        assert graph.node("a").position == Point(-200, -75)
        assert graph.node("b").position == Point(100, 25)

    def test_single_node_settles_at_origin(self):
        graph = LayoutGraph([LayoutNode("only", size=Size(80, 40))])
        force_layout(graph, ForceDirectedLayoutConfig(seed=3))

        center = graph.node("only").center
        assert center.x == pytest.approx(0, abs=1e-9)
        assert center.y == pytest.approx(0, abs=1e-9)

    def test_locked_node_never_moves(self, make_graph):
        graph = make_graph("ABCD", [("A", "B"), ("B", "C"), ("C", "D")])
        anchor = graph.node("B")
        anchor.locked = True
        anchor.move_to(123.5, -42.25)

        force_layout(graph, ForceDirectedLayoutConfig(iterations=80, seed=5))
        assert anchor.position == Point(123.5, -42.25)

    def test_coincident_nodes_separate_without_nan(self, make_graph):
        graph = make_graph("AB")
        force_layout(graph, fixed_start(iterations=10))

        a, b = graph.nodes
        for node in graph.nodes:
            assert math.isfinite(node.position.x)
            assert math.isfinite(node.position.y)
        assert a.center.distance_to(b.center) > 1

    def test_unlinked_nodes_repel(self):
        graph = LayoutGraph([
            LayoutNode("a", position=Point(0, 0)),
            LayoutNode("b", position=Point(10, 0)),
        ])
        force_layout(graph, fixed_start(iterations=20))
        assert graph.node("a").center.distance_to(graph.node("b").center) > 10

    def test_linked_pair_settles_near_spring_length(self, make_graph):
        graph = make_graph("AB", [("A", "B")])
        force_layout(graph, ForceDirectedLayoutConfig(iterations=200, seed=11))

        distance = graph.node("A").center.distance_to(graph.node("B").center)
        assert 95 < distance < 110

    def test_result_centered(self, make_graph):
        graph = make_graph("ABCDE", [("A", "B"), ("B", "C"), ("C", "A"), ("D", "E")])
        force_layout(graph, ForceDirectedLayoutConfig(seed=2))

        center = graph.bounds().center
        assert center.x == pytest.approx(0, abs=1e-6)
        assert center.y == pytest.approx(0, abs=1e-6)

    def test_same_seed_same_result(self, make_graph, snapshot):
        links = [("A", "B"), ("B", "C"), ("C", "D"), ("D", "A")]
        first = make_graph("ABCD", links)
        second = make_graph("ABCD", links)
        force_layout(first, ForceDirectedLayoutConfig(seed=42))
        force_layout(second, ForceDirectedLayoutConfig(seed=42))
        assert snapshot(first) == snapshot(second)

    def test_sizes_untouched(self, make_graph):
        graph = make_graph("ABC", [("A", "B")], width=60, height=20)
        force_layout(graph, ForceDirectedLayoutConfig(seed=9))
        assert all(n.size == Size(60, 20) for n in graph.nodes)
