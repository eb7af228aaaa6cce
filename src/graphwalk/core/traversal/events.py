"""
Detailed depth-first traversal as a stream of events.

The event trace is the complete record of a depth-first walk:

- Enter(v, index, path): ``v`` is discovered; ``index`` counts discoveries
  from 0 and ``path`` holds the edges from the root of its tree
- Exit(v): every child of ``v`` has been examined
- EdgeEvent(e, kind): edge ``e`` was examined from the current vertex;
  ``kind`` is FORWARD when its destination was undiscovered, BACK when the
  destination is an ancestor still on the current path (a cycle), CROSS when
  it was already finished elsewhere

The walk keeps an explicit stack of frames instead of recursing, so its depth
is bounded by memory rather than by the interpreter's recursion limit.
"""

import logging
import operator
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar, Union

from ..graph.base import GraphView
from ..graph.tables import Table, TagSet
from ..sequence import OnceSequence, once
from .engine import tags_of
from .utils import EMPTY_PATH, EdgePath

logger = logging.getLogger(__name__)

V = TypeVar("V")
E = TypeVar("E")


class EdgeKind(Enum):
    """Classification of an edge relative to the depth-first tree."""

    FORWARD = auto()
    BACK = auto()
    CROSS = auto()


class VertexPhase(Enum):
    """Whether a vertex event is an entry or an exit."""

    ENTER = auto()
    EXIT = auto()


@dataclass(frozen=True)
class Enter(Generic[V, E]):
    """A vertex is discovered."""

    vertex: V
    index: int
    path: EdgePath[E]


@dataclass(frozen=True)
class Exit(Generic[V]):
    """A vertex is finished."""

    vertex: V


@dataclass(frozen=True)
class EdgeEvent(Generic[E]):
    """An edge is examined."""

    edge: E
    kind: EdgeKind


Event = Union[Enter, Exit, EdgeEvent]


def get_vertex(event: Event) -> Optional[Tuple[Any, VertexPhase]]:
    """Return ``(vertex, phase)`` for Enter and Exit events, None otherwise."""
    if isinstance(event, Enter):
        return event.vertex, VertexPhase.ENTER
    if isinstance(event, Exit):
        return event.vertex, VertexPhase.EXIT
    return None


def get_enter(event: Event) -> Optional[Any]:
    return event.vertex if isinstance(event, Enter) else None


def get_exit(event: Event) -> Optional[Any]:
    return event.vertex if isinstance(event, Exit) else None


def get_edge(event: Event) -> Optional[Any]:
    return event.edge if isinstance(event, EdgeEvent) else None


def get_edge_kind(event: Event) -> Optional[Tuple[Any, EdgeKind]]:
    return (event.edge, event.kind) if isinstance(event, EdgeEvent) else None


class _Frame(Generic[V, E]):
    """A vertex being explored, with its remaining children."""

    __slots__ = ("vertex", "children", "path")

    def __init__(self, vertex: V, children: Iterator[E], path: EdgePath[E]):
        self.vertex = vertex
        self.children = children
        self.path = path


_DONE = object()


@once("event trace")
def dfs_events_tag(
    graph: GraphView[V, E],
    tags: TagSet[V],
    seeds: Iterable[V],
    eq: Optional[Callable[[V, V], bool]] = None,
) -> Iterator[Event]:
    """Full depth-first traversal using a tag set.

    Args:
        graph (GraphView[V, E]): The graph to traverse
        tags (TagSet[V]): Discovery marks, owned by this traversal
        seeds (Iterable[V]): Roots, explored in order
        eq (Optional[Callable[[V, V], bool]]): Equality used to find a
            destination on the current path, defaults to ``==``

    Yields:
        Event: Enter, Exit and EdgeEvent events in walk order
    """
    eq = eq or operator.eq
    index = 0
    for root in seeds:
        if tags.get_tag(root):
            continue
        logger.debug(f"Entering depth-first tree rooted at {root!r}")
        tags.set_tag(root)
        yield Enter(root, index, EMPTY_PATH)
        index += 1
        stack: List[_Frame[V, E]] = [_Frame(root, iter(graph.children(root)), EMPTY_PATH)]

        while stack:
            frame = stack[-1]
            edge = next(frame.children, _DONE)
            if edge is _DONE:
                stack.pop()
                yield Exit(frame.vertex)
                continue

            child = graph.dest(edge)
            if not tags.get_tag(child):
                yield EdgeEvent(edge, EdgeKind.FORWARD)
                tags.set_tag(child)
                path = frame.path.extend(edge)
                yield Enter(child, index, path)
                index += 1
                stack.append(_Frame(child, iter(graph.children(child)), path))
            elif any(eq(f.vertex, child) for f in stack):
                yield EdgeEvent(edge, EdgeKind.BACK)
            else:
                yield EdgeEvent(edge, EdgeKind.CROSS)


def dfs_events(
    graph: GraphView[V, E],
    seeds: Iterable[V],
    tbl: Optional[Table[V, Any]] = None,
    eq: Optional[Callable[[V, V], bool]] = None,
) -> OnceSequence[Event]:
    """Full depth-first traversal with discovery marks kept in ``tbl``."""
    return dfs_events_tag(graph, tags_of(tbl), seeds, eq=eq)
