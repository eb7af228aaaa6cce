"""Tests for lazy spanning trees."""

from itertools import count

from graphwalk.core.graph import make_tuple
from graphwalk.core.algorithms.spanning_tree import LazyTree, spanning_tree


def test_root_only_until_forced(counting_graph):
    """Test that building a tree expands nothing."""
    tree = spanning_tree(counting_graph.graph, 1)
    assert tree.vertex == 1
    assert not tree.is_forced
    assert counting_graph.calls == {}


def test_children_forced_once(counting_graph):
    """Test that children are computed once and cached."""
    tree = spanning_tree(counting_graph.graph, 1)
    first = tree.children
    second = tree.children
    assert first is second
    assert tree.is_forced
    assert counting_graph.calls == {1: 1}
    assert [child.vertex for _, child in first] == [2, 3]
    assert [edge for edge, _ in first] == [(1, 2), (1, 3)]


def test_shared_marks_in_forcing_order(counting_graph):
    """Test that a vertex is attached below the first node forced to reach it."""
    tree = spanning_tree(counting_graph.graph, 1)
    (_, two), (_, three) = tree.children
    assert [c.vertex for _, c in three.children] == [4]
    assert two.children == []


def test_fold_preorder(diamond_graph):
    """Test folding every vertex in pre-order."""
    tree = spanning_tree(diamond_graph, 1)
    assert tree.fold_v(lambda acc, v: acc + [v], []) == [1, 2, 4, 3]


def test_map_vertices(diamond_graph):
    """Test mapping vertices while keeping laziness."""
    tree = spanning_tree(diamond_graph, 1).map_v(lambda v: v * 10)
    assert isinstance(tree, LazyTree)
    assert not tree.is_forced
    assert tree.fold_v(lambda acc, v: acc + v, 0) == 100


def test_infinite_graph():
    """Test that a tree of an infinite graph can be explored partially."""
    graph = make_tuple(lambda n: [2 * n, 2 * n + 1])
    tree = spanning_tree(graph, 1)
    node = tree
    for expected in count(2):
        node = node.children[0][1]
        assert node.vertex == 2 ** (expected - 1)
        if expected == 6:
            break


def test_cycle_terminates(cycle_graph):
    """Test that the root is not expanded again through a cycle."""
    tree = spanning_tree(cycle_graph, 1)
    assert tree.fold_v(lambda acc, v: acc + [v], []) == [1, 2, 3]
