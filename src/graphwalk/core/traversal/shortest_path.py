"""
Dijkstra traversal in increasing distance order.

The frontier is a HeapBag of ``(vertex, distance, path)`` entries ordered by
accumulated distance; entries of equal distance come out in insertion order.
A vertex is marked when it is popped, since the first entry pushed for a
vertex is not necessarily its shortest one. Later entries for an already
marked vertex are skipped.

Edge distances must be strictly positive. Zero or negative distances break the
ordering and are not checked.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

from ..constants import DEFAULT_EDGE_DISTANCE
from ..graph.bags import HeapBag
from ..graph.base import GraphView
from ..graph.tables import Table, TagSet
from ..sequence import OnceSequence, once
from .engine import tags_of
from .utils import EMPTY_PATH, EdgePath, make_memory_guard

logger = logging.getLogger(__name__)

V = TypeVar("V")
E = TypeVar("E")

DistanceFunc = Callable[[Any], int]


@dataclass(frozen=True)
class ShortestPathStep(Generic[V, E]):
    """
    A vertex reached by Dijkstra's algorithm.

    Unpacks as ``vertex, distance, path``.

    Attributes:
        vertex (V): The vertex
        distance (int): Smallest distance from the seeds
        path (List[E]): Edges of one shortest path, starting at a seed
    """

    vertex: V
    distance: int
    path: List[E]

    def __iter__(self) -> Iterator[Any]:
        return iter((self.vertex, self.distance, self.path))


def _constant_distance(_edge: Any) -> int:
    return DEFAULT_EDGE_DISTANCE


def _by_distance(a: Tuple[Any, int, Any], b: Tuple[Any, int, Any]) -> bool:
    return a[1] <= b[1]


@once("dijkstra")
def dijkstra_tag(
    graph: GraphView[V, E],
    tags: TagSet[V],
    seeds: Iterable[V],
    dist: Optional[DistanceFunc] = None,
    max_memory_mb: Optional[float] = None,
) -> Iterator[ShortestPathStep[V, E]]:
    """Traverse ``graph`` in increasing distance from ``seeds``, using tags.

    Args:
        graph (GraphView[V, E]): The graph to traverse
        tags (TagSet[V]): Settled marks, owned by this traversal
        seeds (Iterable[V]): Vertices at distance 0
        dist (Optional[DistanceFunc]): Strictly positive distance of an edge,
            1 for every edge by default
        max_memory_mb (Optional[float]): Abort with MemoryError past this
            much memory growth

    Yields:
        ShortestPathStep[V, E]: Each reachable vertex once, with its distance
            and a shortest path
    """
    dist = dist or _constant_distance
    guard = make_memory_guard(max_memory_mb)
    queue: HeapBag[Tuple[V, int, EdgePath[E]]] = HeapBag(_by_distance)
    for v in seeds:
        queue.push((v, 0, EMPTY_PATH))

    settled = 0
    while not queue.is_empty():
        if guard is not None:
            guard.check_memory()
        v, d, path = queue.pop()
        if tags.get_tag(v):
            continue
        tags.set_tag(v)
        settled += 1
        yield ShortestPathStep(v, d, path.to_list())
        for e in graph.children(v):
            child = graph.dest(e)
            if not tags.get_tag(child):
                queue.push((child, d + dist(e), path.extend(e)))

    logger.debug(f"Dijkstra settled {settled} vertices")


def dijkstra(
    graph: GraphView[V, E],
    seeds: Iterable[V],
    dist: Optional[DistanceFunc] = None,
    tbl: Optional[Table[V, Any]] = None,
    max_memory_mb: Optional[float] = None,
) -> OnceSequence[ShortestPathStep[V, E]]:
    """Dijkstra traversal with settled marks kept in ``tbl``."""
    return dijkstra_tag(graph, tags_of(tbl), seeds, dist=dist, max_memory_mb=max_memory_mb)
