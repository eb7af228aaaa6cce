"""
Graph views: the structural adapter consumed by every algorithm.

A GraphView makes any data structure traversable by providing three pure
functions: ``children`` maps a vertex to its outgoing edges, ``origin`` and
``dest`` relate an edge to its endpoints. Algorithms never look at a concrete
representation, only at a view.

Within one traversal ``children(v)`` must return the same edges every time it
is called for the same ``v``; results are undefined otherwise.
"""

import operator
from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    List,
    Mapping,
    Optional,
    Tuple,
    TypeVar,
)

V = TypeVar("V")
E = TypeVar("E")
L = TypeVar("L")

Equality = Callable[[Any, Any], bool]


@dataclass(frozen=True)
class GraphView(Generic[V, E]):
    """
    Directed graph with vertices of type ``V`` and edges of type ``E``.

    Attributes:
        children (Callable[[V], Iterable[E]]): Outgoing edges of a vertex
        origin (Callable[[E], V]): Source vertex of an edge
        dest (Callable[[E], V]): Target vertex of an edge
    """

    children: Callable[[V], Iterable[E]]
    origin: Callable[[E], V]
    dest: Callable[[E], V]

    def successors(self, v: V) -> List[V]:
        """Destinations of the outgoing edges of ``v``, in edge order."""
        return [self.dest(e) for e in self.children(v)]


def make(
    children: Callable[[V], Iterable[E]],
    origin: Callable[[E], V],
    dest: Callable[[E], V],
) -> GraphView[V, E]:
    """Make a graph by providing its three functions."""
    return GraphView(children=children, origin=origin, dest=dest)


def _first(edge: Tuple[Any, ...]) -> Any:
    return edge[0]


def _last(edge: Tuple[Any, ...]) -> Any:
    return edge[-1]


def make_tuple(succ: Callable[[V], Iterable[V]]) -> GraphView[V, Tuple[V, V]]:
    """Make a graph whose edges are ``(origin, dest)`` pairs.

    Args:
        succ (Callable[[V], Iterable[V]]): Maps a vertex to its successors

    Returns:
        GraphView[V, Tuple[V, V]]: The graph view
    """
    return GraphView(
        children=lambda v: ((v, w) for w in succ(v)),
        origin=_first,
        dest=_last,
    )


def make_labelled_tuple(
    succ: Callable[[V], Iterable[Tuple[L, V]]]
) -> GraphView[V, Tuple[V, L, V]]:
    """Make a graph whose edges are ``(origin, label, dest)`` triples.

    Args:
        succ (Callable[[V], Iterable[Tuple[L, V]]]): Maps a vertex to
            ``(label, successor)`` pairs

    Returns:
        GraphView[V, Tuple[V, L, V]]: The graph view
    """
    return GraphView(
        children=lambda v: ((v, label, w) for label, w in succ(v)),
        origin=_first,
        dest=_last,
    )


def of_list(
    edges: Iterable[Tuple[V, V]], eq: Optional[Equality] = None
) -> GraphView[V, Tuple[V, V]]:
    """Make a graph from a list of ``(a, b)`` pairs, each an edge ``a -> b``.

    Children are found by scanning the list, so vertices need not be hashable.

    Args:
        edges (Iterable[Tuple[V, V]]): The edges
        eq (Optional[Equality]): Equality on vertices, defaults to ``==``

    Returns:
        GraphView[V, Tuple[V, V]]: The graph view
    """
    eq = eq or operator.eq
    pairs = list(edges)
    return GraphView(
        children=lambda v: [(a, b) for a, b in pairs if eq(a, v)],
        origin=_first,
        dest=_last,
    )


def of_dict(table: Mapping[V, Iterable[V]]) -> GraphView[V, Tuple[V, V]]:
    """Make a graph from a mapping of vertices to lists of children.

    Vertices missing from the mapping have no children.
    """
    return make_tuple(lambda v: table.get(v, ()))


def of_fun(func: Callable[[V], Iterable[V]]) -> GraphView[V, Tuple[V, V]]:
    """Make a graph from a function mapping a vertex to its children.

    The function is assumed to be deterministic.
    """
    return make_tuple(func)


def _divisors(n: int) -> List[int]:
    return [d for d in range(1, n) if n % d == 0]


divisors_graph: GraphView[int, Tuple[int, int]] = make_tuple(_divisors)
"""``n`` points to all its strict divisors (``1 <= d < n``)."""

