"""Tests for the hash-based mutable graph."""

from graphwalk.core.graph.mutable import HashMutableGraph
from graphwalk.core.traversal import bfs


def test_add_edges():
    """Test that labelled edges are listed in insertion order."""
    g = HashMutableGraph()
    g.add_edge((1, "a", 2))
    g.add_edge((1, "b", 3))
    assert list(g.graph.children(1)) == [(1, "a", 2), (1, "b", 3)]
    assert g.graph.dest((1, "a", 2)) == 2
    assert len(g) == 1


def test_view_sees_mutations():
    """Test that a view obtained earlier reflects later edges."""
    g = HashMutableGraph()
    view = g.graph
    assert list(view.children(1)) == []
    g.add_edge((1, "x", 2))
    assert view.successors(1) == [2]


def test_remove_vertex():
    """Test that removing a vertex drops only its outgoing edges."""
    g = HashMutableGraph()
    g.add_edge((1, "a", 2))
    g.add_edge((2, "b", 3))
    g.remove(2)
    assert list(g.graph.children(2)) == []
    assert g.graph.successors(1) == [2]
    g.remove(42)


def test_children_returns_copy():
    """Test that callers cannot alter stored edges through children."""
    g = HashMutableGraph()
    g.add_edge((1, "a", 2))
    g.graph.children(1).clear()
    assert g.graph.successors(1) == [2]


def test_traversal_over_mutable_graph():
    """Test running an algorithm on the live view."""
    g = HashMutableGraph()
    for edge in [(1, "a", 2), (1, "b", 3), (2, "c", 4)]:
        g.add_edge(edge)
    assert list(bfs(g.graph, [1])) == [1, 2, 3, 4]


def test_custom_vertex_equality():
    """Test case-insensitive vertices."""
    g = HashMutableGraph(eq=lambda a, b: a.lower() == b.lower(), hash=lambda s: hash(s.lower()))
    g.add_edge(("A", 1, "b"))
    assert g.graph.successors("a") == ["b"]
