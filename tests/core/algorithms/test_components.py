"""Tests for strongly connected components."""

import pytest

from graphwalk.core.exceptions import SequenceReusedError
from graphwalk.core.graph import HashTable, of_dict
from graphwalk.core.algorithms.components import scc


def test_cycle_with_exit(scc_graph):
    """Test that the sink component comes before the component pointing to it."""
    components = [sorted(c) for c in scc(scc_graph, ["a"])]
    assert components == [["d"], ["a", "b", "c"]]


def test_single_vertex_components(diamond_graph):
    """Test that a DAG has one component per vertex."""
    components = list(scc(diamond_graph, [1]))
    assert sorted(v for c in components for v in c) == [1, 2, 3, 4]
    assert all(len(c) == 1 for c in components)
    assert components[-1] == [1]


def test_condensation_order():
    """Test that components come after every component they point into."""
    adjacency = {1: [2], 2: [1, 3], 3: [4], 4: [5], 5: [3, 6], 6: []}
    graph = of_dict(adjacency)
    components = list(scc(graph, [1]))
    assert sorted(sorted(c) for c in components) == [[1, 2], [3, 4, 5], [6]]

    position = {v: i for i, c in enumerate(components) for v in c}
    for v, ws in adjacency.items():
        for w in ws:
            assert position[w] <= position[v]


def test_each_vertex_once_with_many_seeds(scc_graph):
    """Test that overlapping seeds do not duplicate vertices."""
    components = list(scc(scc_graph, ["d", "c", "a"]))
    vertices = [v for c in components for v in c]
    assert sorted(vertices) == ["a", "b", "c", "d"]


def test_deep_chain_does_not_recurse():
    """Test a chain deeper than the recursion limit."""
    n = 5000
    graph = of_dict({i: [i + 1] for i in range(n)})
    components = list(scc(graph, [0]))
    assert len(components) == n + 1
    assert components[0] == [n]


def test_state_table(scc_graph):
    """Test that per-vertex state is kept in the caller's table."""
    table = HashTable()
    list(scc(scc_graph, ["a"], tbl=table))
    assert table.get("a").index == 0
    assert not table.get("d").on_stack


def test_result_cannot_be_reused(scc_graph):
    """Test that components are single-consumption."""
    seq = scc(scc_graph, ["a"])
    list(seq)
    with pytest.raises(SequenceReusedError):
        list(seq)
