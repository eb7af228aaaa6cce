"""
Mutable graph backed by a hash table.

The MutableGraph interface exposes exactly what callers need to grow and
shrink a graph in place: a view for the algorithms, ``add_edge`` and
``remove``. HashMutableGraph stores labelled edges ``(origin, label, dest)``
in a HashTable keyed by origin. Views obtained from ``graph`` read the table
on every ``children`` call, so mutations are visible through them at once.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Generic, List, Optional, Tuple, TypeVar

from .base import GraphView
from .tables import HashTable

logger = logging.getLogger(__name__)

V = TypeVar("V")
L = TypeVar("L")
E = TypeVar("E")

LabelledEdge = Tuple[V, L, V]


class MutableGraph(ABC, Generic[V, E]):
    """Graph that can be modified in place."""

    @property
    @abstractmethod
    def graph(self) -> GraphView[V, E]:
        """Live view of the graph."""

    @abstractmethod
    def add_edge(self, edge: E) -> None:
        """Add an edge."""

    @abstractmethod
    def remove(self, v: V) -> None:
        """Remove a vertex and its outgoing edges."""


class HashMutableGraph(MutableGraph[V, Tuple[V, L, V]]):
    """Mutable graph with labelled edges, stored in a hash table.

    ``remove(v)`` drops the outgoing edges of ``v`` only; edges from other
    vertices into ``v`` stay until removed by the caller.

    Args:
        eq (Optional[Callable[[V, V], bool]]): Equality on vertices
        hash (Optional[Callable[[V], int]]): Hash on vertices

    Example:
        >>> g = HashMutableGraph()
        >>> g.add_edge((1, "a", 2))
        >>> list(g.graph.children(1))
        [(1, 'a', 2)]
    """

    def __init__(
        self,
        eq: Optional[Callable[[V, V], bool]] = None,
        hash: Optional[Callable[[V], int]] = None,
    ):
        self._table: HashTable[V, List[Tuple[V, L, V]]] = HashTable(eq=eq, hash=hash)
        self._view: GraphView[V, Tuple[V, L, V]] = GraphView(
            children=self._children,
            origin=lambda e: e[0],
            dest=lambda e: e[2],
        )

    def _children(self, v: V) -> List[Tuple[V, L, V]]:
        if not self._table.contains(v):
            return []
        return list(self._table.get(v))

    @property
    def graph(self) -> GraphView[V, Tuple[V, L, V]]:
        return self._view

    def add_edge(self, edge: Tuple[V, L, V]) -> None:
        origin = edge[0]
        if self._table.contains(origin):
            self._table.get(origin).append(edge)
        else:
            self._table.set(origin, [edge])

    def remove(self, v: V) -> None:
        logger.debug(f"Removing outgoing edges of {v!r}")
        self._table.remove(v)

    def __len__(self) -> int:
        """Number of vertices with outgoing edges."""
        return len(self._table)
