"""Topological sort and cycle detection on the depth-first event trace.

A vertex exits only after every vertex reachable from it has exited, so the
reverse of the exit order puts each vertex before all of its successors. A BACK
edge in the trace reaches a vertex that is still on the current path, which
closes a cycle: sorting stops and raises CycleDetectedError instead of
returning a partial order.
"""

import logging
from typing import Any, Callable, Iterable, List, Optional, TypeVar

from ..exceptions import CycleDetectedError
from ..graph.base import GraphView
from ..graph.tables import Table, TagSet
from ..traversal.engine import tags_of
from ..traversal.events import EdgeEvent, EdgeKind, Exit, dfs_events_tag

logger = logging.getLogger(__name__)

V = TypeVar("V")
E = TypeVar("E")


def topo_sort_tag(
    graph: GraphView[V, E],
    tags: TagSet[V],
    seeds: Iterable[V],
    eq: Optional[Callable[[V, V], bool]] = None,
    rev: bool = False,
) -> List[V]:
    """Sort the vertices reachable from ``seeds`` topologically, using tags.

    Args:
        graph (GraphView[V, E]): The graph
        tags (TagSet[V]): Discovery marks, owned by this call
        seeds (Iterable[V]): Starting vertices
        eq (Optional[Callable[[V, V], bool]]): Equality on vertices
        rev (bool): If True, ``v -> v'`` means ``v'`` comes before ``v``

    Returns:
        List[V]: Every reachable vertex once; for each edge ``v -> v'``,
            ``v`` comes first (last when ``rev`` is set)

    Raises:
        CycleDetectedError: If the reachable subgraph has a cycle
    """
    finished: List[V] = []
    for event in dfs_events_tag(graph, tags, seeds, eq=eq):
        if isinstance(event, Exit):
            finished.append(event.vertex)
        elif isinstance(event, EdgeEvent) and event.kind is EdgeKind.BACK:
            logger.debug(f"Cycle closed by edge {event.edge!r}")
            raise CycleDetectedError(
                f"Graph has a cycle through edge {event.edge!r}", edge=event.edge
            )
    if not rev:
        finished.reverse()
    return finished


def topo_sort(
    graph: GraphView[V, E],
    seeds: Iterable[V],
    tbl: Optional[Table[V, Any]] = None,
    eq: Optional[Callable[[V, V], bool]] = None,
    rev: bool = False,
) -> List[V]:
    """Topological sort with discovery marks kept in ``tbl``.

    Example:
        >>> g = of_dict({1: [2, 3], 2: [4], 3: [4]})
        >>> topo_sort(g, [1])
        [1, 3, 2, 4]
    """
    return topo_sort_tag(graph, tags_of(tbl), seeds, eq=eq, rev=rev)


def is_dag(
    graph: GraphView[V, E],
    seeds: Iterable[V],
    tbl: Optional[Table[V, Any]] = None,
) -> bool:
    """Whether the subgraph reachable from ``seeds`` is acyclic."""
    for event in dfs_events_tag(graph, tags_of(tbl), seeds):
        if isinstance(event, EdgeEvent) and event.kind is EdgeKind.BACK:
            return False
    return True
