"""
Generic traversal engine.

Every vertex-producing traversal in the library is an instance of one loop:
pop a vertex from a bag, yield it, push its unvisited children. The bag alone
decides the order:

- StackBag gives depth-first order (``dfs``)
- QueueBag gives breadth-first order (``bfs``)
- HeapBag gives best-first order

Vertices are marked when pushed, not when popped, so a vertex is never queued
twice and every vertex is produced at most once per traversal. Results are
OnceSequence objects: they are lazy, nothing runs before the first pull, and
they cannot be restarted.
"""

import logging
from typing import Any, Iterable, Iterator, Optional, TypeVar

from ..graph.bags import Bag, QueueBag, StackBag
from ..graph.base import GraphView
from ..graph.tables import HashTable, Table, TableTagSet, TagSet
from ..sequence import OnceSequence, once
from .utils import make_memory_guard

logger = logging.getLogger(__name__)

V = TypeVar("V")
E = TypeVar("E")


def tags_of(tbl: Optional[Table[V, Any]]) -> TagSet[V]:
    """Tag set backed by ``tbl``, or by a fresh HashTable."""
    return TableTagSet(tbl if tbl is not None else HashTable())


@once("traversal")
def generic_tag(
    graph: GraphView[V, E],
    tags: TagSet[V],
    bag: Bag[V],
    seeds: Iterable[V],
    max_memory_mb: Optional[float] = None,
) -> Iterator[V]:
    """Traverse ``graph`` from ``seeds`` using ``bag`` to pick the next vertex.

    Args:
        graph (GraphView[V, E]): The graph to traverse
        tags (TagSet[V]): Visited marks, owned by this traversal
        bag (Bag[V]): Frontier, owned by this traversal
        seeds (Iterable[V]): Starting vertices
        max_memory_mb (Optional[float]): Abort with MemoryError past this
            much memory growth

    Yields:
        V: Each reachable vertex once, in pop order
    """
    guard = make_memory_guard(max_memory_mb)
    for v in seeds:
        if not tags.get_tag(v):
            tags.set_tag(v)
            bag.push(v)
    logger.debug(f"Starting traversal with {len(bag)} seed(s)")

    count = 0
    while not bag.is_empty():
        if guard is not None:
            guard.check_memory()
        v = bag.pop()
        count += 1
        yield v
        for e in graph.children(v):
            child = graph.dest(e)
            if not tags.get_tag(child):
                tags.set_tag(child)
                bag.push(child)

    logger.debug(f"Traversal finished after {count} vertices")


def generic(
    graph: GraphView[V, E],
    bag: Bag[V],
    seeds: Iterable[V],
    tbl: Optional[Table[V, Any]] = None,
    max_memory_mb: Optional[float] = None,
) -> OnceSequence[V]:
    """Same as ``generic_tag``, with visited marks kept in ``tbl``.

    A fresh HashTable is used when ``tbl`` is not given.
    """
    return generic_tag(graph, tags_of(tbl), bag, seeds, max_memory_mb=max_memory_mb)


def dfs(
    graph: GraphView[V, E],
    seeds: Iterable[V],
    tbl: Optional[Table[V, Any]] = None,
    max_memory_mb: Optional[float] = None,
) -> OnceSequence[V]:
    """Depth-first traversal: the generic engine with a stack."""
    return generic(graph, StackBag(), seeds, tbl=tbl, max_memory_mb=max_memory_mb)


def dfs_tag(
    graph: GraphView[V, E],
    tags: TagSet[V],
    seeds: Iterable[V],
    max_memory_mb: Optional[float] = None,
) -> OnceSequence[V]:
    return generic_tag(graph, tags, StackBag(), seeds, max_memory_mb=max_memory_mb)


def bfs(
    graph: GraphView[V, E],
    seeds: Iterable[V],
    tbl: Optional[Table[V, Any]] = None,
    max_memory_mb: Optional[float] = None,
) -> OnceSequence[V]:
    """Breadth-first traversal: the generic engine with a queue."""
    return generic(graph, QueueBag(), seeds, tbl=tbl, max_memory_mb=max_memory_mb)


def bfs_tag(
    graph: GraphView[V, E],
    tags: TagSet[V],
    seeds: Iterable[V],
    max_memory_mb: Optional[float] = None,
) -> OnceSequence[V]:
    return generic_tag(graph, tags, QueueBag(), seeds, max_memory_mb=max_memory_mb)
