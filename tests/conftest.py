"""Shared test fixtures."""

from typing import Dict, List

import pytest

from graphwalk.core.graph import GraphView, make_tuple, of_dict


class CountingGraph:
    """Adjacency dict whose ``children`` calls are counted per vertex."""

    def __init__(self, adjacency: Dict[int, List[int]]):
        self.adjacency = adjacency
        self.calls: Dict[int, int] = {}

    def succ(self, v: int) -> List[int]:
        self.calls[v] = self.calls.get(v, 0) + 1
        return self.adjacency.get(v, [])

    @property
    def graph(self) -> GraphView:
        return make_tuple(self.succ)


@pytest.fixture
def cycle_graph() -> GraphView:
    """Fixture providing the cycle 1 -> 2 -> 3 -> 1."""
    return of_dict({1: [2], 2: [3], 3: [1]})


@pytest.fixture
def diamond_graph() -> GraphView:
    """Fixture providing the DAG 1 -> {2, 3} -> 4."""
    return of_dict({1: [2, 3], 2: [4], 3: [4]})


@pytest.fixture
def scc_graph() -> GraphView:
    """Fixture providing a three vertex cycle a, b, c with an exit to d."""
    return of_dict({"a": ["b"], "b": ["c"], "c": ["a", "d"]})


@pytest.fixture
def weighted_graph() -> GraphView:
    """Fixture providing edges (origin, weight, dest)."""
    edges = {1: [(2, 2), (3, 5)], 2: [(3, 1)]}
    return GraphView(
        children=lambda v: [(v, w, d) for d, w in edges.get(v, [])],
        origin=lambda e: e[0],
        dest=lambda e: e[2],
    )


@pytest.fixture
def counting_graph() -> CountingGraph:
    """Fixture providing the diamond DAG with children calls counted."""
    return CountingGraph({1: [2, 3], 2: [4], 3: [4]})


@pytest.fixture
def infinite_graph() -> GraphView:
    """Fixture providing the infinite chain n -> n + 1."""
    return make_tuple(lambda n: [n + 1])
