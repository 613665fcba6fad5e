"""Pytest configuration and fixtures for layout tests."""

import pytest

from diagram_layout import LayoutGraph, LayoutNode, Size


def build_graph(keys, links=(), width=100, height=50):
    """Graph with equal-size nodes and links given as (from_key, to_key) pairs."""
    graph = LayoutGraph(LayoutNode(key, size=Size(width, height)) for key in keys)
    for src, dst in links:
        graph.connect(src, dst)
    return graph


def positions(graph):
    """Snapshot of node positions keyed by node key."""
    return {node.key: node.position for node in graph.nodes}


@pytest.fixture
def snapshot():
    """Function returning {key: position} for a graph."""
    return positions


@pytest.fixture
def make_graph():
    """Factory fixture wrapping build_graph."""
    return build_graph


@pytest.fixture
def chain():
    """A -> B -> C."""
    return build_graph("ABC", [("A", "B"), ("B", "C")])


@pytest.fixture
def triangle_cycle():
    """A -> B -> C -> A."""
    return build_graph("ABC", [("A", "B"), ("B", "C"), ("C", "A")])
