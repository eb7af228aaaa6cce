"""Tests for Dijkstra traversal."""

import random

import pytest

from graphwalk.core.exceptions import SequenceReusedError
from graphwalk.core.graph import GraphView, HashTable, of_dict
from graphwalk.core.traversal.shortest_path import ShortestPathStep, dijkstra


def weight(edge):
    return edge[1]


def test_weighted_distances(weighted_graph):
    """Test that a longer path with a smaller total wins."""
    steps = list(dijkstra(weighted_graph, [1], dist=weight))
    assert steps == [
        ShortestPathStep(1, 0, []),
        ShortestPathStep(2, 2, [(1, 2, 2)]),
        ShortestPathStep(3, 3, [(1, 2, 2), (2, 1, 3)]),
    ]


def test_step_unpacking(weighted_graph):
    """Test that steps unpack as vertex, distance, path."""
    vertex, distance, path = list(dijkstra(weighted_graph, [1], dist=weight))[-1]
    assert (vertex, distance, len(path)) == (3, 3, 2)


def test_unit_distance_by_default(diamond_graph):
    """Test hop counts when no distance function is given."""
    distances = {step.vertex: step.distance for step in dijkstra(diamond_graph, [1])}
    assert distances == {1: 0, 2: 1, 3: 1, 4: 2}


def test_distances_non_decreasing():
    """Test that vertices come out in increasing distance."""
    graph = of_dict({0: [1, 2, 3], 1: [4], 2: [4, 5], 3: [5], 4: [6], 5: [6]})
    distances = [step.distance for step in dijkstra(graph, [0])]
    assert distances == sorted(distances)


def test_multiple_seeds(diamond_graph):
    """Test that every seed starts at distance zero."""
    distances = {v: d for v, d, _ in dijkstra(diamond_graph, [2, 3])}
    assert distances == {2: 0, 3: 0, 4: 1}


def test_path_is_consistent(weighted_graph):
    """Test that each path starts at a seed, ends at the vertex and sums to the distance."""
    for vertex, distance, path in dijkstra(weighted_graph, [1], dist=weight):
        if path:
            assert path[0][0] == 1
            assert path[-1][2] == vertex
        assert sum(weight(e) for e in path) == distance


def _random_graph(rng, n):
    edges = {
        v: [(w, rng.randint(1, 9)) for w in range(n) if w != v and rng.random() < 0.3]
        for v in range(n)
    }
    return GraphView(
        children=lambda v: [(v, w, d) for d, w in edges[v]],
        origin=lambda e: e[0],
        dest=lambda e: e[2],
    ), edges


def _brute_force(edges, n, source):
    best = {source: 0}
    for _ in range(n):
        for v, out in edges.items():
            if v not in best:
                continue
            for d, w in out:
                if best[v] + w < best.get(d, float("inf")):
                    best[d] = best[v] + w
    return best


@pytest.mark.parametrize("seed", range(10))
def test_matches_brute_force(seed):
    """Test distances against relaxation on random graphs."""
    rng = random.Random(seed)
    graph, edges = _random_graph(rng, 8)
    result = {v: d for v, d, _ in dijkstra(graph, [0], dist=weight)}
    assert result == _brute_force(edges, 8, 0)


def test_caller_supplied_table(diamond_graph):
    """Test that settled marks land in the caller's table."""
    table = HashTable()
    list(dijkstra(diamond_graph, [2], tbl=table))
    assert table.contains(4)
    assert not table.contains(1)


def test_result_cannot_be_reused(diamond_graph):
    """Test that a Dijkstra result is single-consumption."""
    seq = dijkstra(diamond_graph, [1])
    list(seq)
    with pytest.raises(SequenceReusedError):
        list(seq)


def test_equal_distances_in_insertion_order(diamond_graph):
    """Test that vertices at the same distance come out in the order they were reached."""
    steps = list(dijkstra(diamond_graph, [1]))
    assert [step.vertex for step in steps] == [1, 2, 3, 4]
    assert steps[-1].path == [(1, 2), (2, 4)]


def test_ties_follow_discovery_not_vertex_order():
    """Test ties between vertices reached through different parents."""
    graph = of_dict({0: [2, 1], 2: [4], 1: [3]})
    steps = list(dijkstra(graph, [0]))
    assert [(step.vertex, step.distance) for step in steps] == [
        (0, 0),
        (2, 1),
        (1, 1),
        (4, 2),
        (3, 2),
    ]
    assert steps[3].path == [(0, 2), (2, 4)]
    assert steps[4].path == [(0, 1), (1, 3)]
