"""Strongly connected component analysis.

This module finds the strongly connected components reachable from a set of
seed vertices using Tarjan's algorithm. A strongly connected component (SCC)
is a maximal set of vertices that are all mutually reachable following edge
direction.

The algorithm is run over an explicit stack of frames so that the depth of the
graph is limited by memory and not by the interpreter's recursion limit.
Components are produced lazily, as soon as their root finishes, which yields
them in topological order of the condensation: if a component C1 has an edge
into a component C2, then C2 is yielded before C1.
"""

import logging
from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

from ..graph.base import GraphView
from ..graph.tables import HashTable, Table
from ..sequence import OnceSequence, once

logger = logging.getLogger(__name__)

V = TypeVar("V")
E = TypeVar("E")


@dataclass
class SccState:
    """
    Per-vertex state of Tarjan's algorithm.

    Attributes:
        index (int): Discovery index of the vertex
        lowlink (int): Smallest discovery index reachable from the vertex's
            subtree through at most one back edge
        on_stack (bool): Whether the vertex waits on the component stack
    """

    index: int
    lowlink: int
    on_stack: bool = True


class _Frame(Generic[V, E]):
    """A vertex being explored, with its remaining children."""

    __slots__ = ("vertex", "state", "children", "stack_base")

    def __init__(self, vertex: V, state: SccState, children: Iterator[E], stack_base: int):
        self.vertex = vertex
        self.state = state
        self.children = children
        self.stack_base = stack_base


_DONE = object()


@once("strongly connected components")
def _tarjan(
    graph: GraphView[V, E],
    tbl: Table[V, SccState],
    seeds: Iterable[V],
) -> Iterator[List[V]]:
    counter = 0
    component_stack: List[V] = []
    emitted = 0

    def discover(v: V) -> _Frame[V, E]:
        nonlocal counter
        state = SccState(index=counter, lowlink=counter)
        counter += 1
        tbl.set(v, state)
        frame = _Frame(v, state, iter(graph.children(v)), len(component_stack))
        component_stack.append(v)
        return frame

    for root in seeds:
        if tbl.contains(root):
            continue
        frames: List[_Frame[V, E]] = [discover(root)]

        while frames:
            frame = frames[-1]
            edge = next(frame.children, _DONE)
            if edge is not _DONE:
                child = graph.dest(edge)
                if not tbl.contains(child):
                    frames.append(discover(child))
                else:
                    child_state = tbl.get(child)
                    if child_state.on_stack:
                        frame.state.lowlink = min(frame.state.lowlink, child_state.index)
                continue

            # every child explored
            frames.pop()
            state = frame.state
            if frames:
                parent = frames[-1].state
                parent.lowlink = min(parent.lowlink, state.lowlink)
            if state.lowlink == state.index:
                component = component_stack[frame.stack_base:]
                del component_stack[frame.stack_base:]
                for v in component:
                    tbl.get(v).on_stack = False
                emitted += 1
                logger.debug(f"Component {emitted} has {len(component)} vertices")
                yield component

    logger.debug(f"Found {emitted} strongly connected components")


def scc(
    graph: GraphView[V, E],
    seeds: Iterable[V],
    tbl: Optional[Table[V, SccState]] = None,
) -> OnceSequence[List[V]]:
    """Find the strongly connected components reachable from ``seeds``.

    Args:
        graph (GraphView[V, E]): The graph to analyze
        seeds (Iterable[V]): Starting vertices
        tbl (Optional[Table[V, SccState]]): Table holding the per-vertex
            state; a fresh HashTable when not given

    Returns:
        OnceSequence[List[V]]: Components, each a list of mutually reachable
            vertices, in topological order of the condensation (a component
            comes after every component it has an edge into)

    Example:
        >>> g = of_dict({"a": ["b"], "b": ["c"], "c": ["a", "d"]})
        >>> [sorted(c) for c in scc(g, ["a"])]
        [['d'], ['a', 'b', 'c']]

    Note:
        - Each reachable vertex appears in exactly one component
        - A vertex without a cycle through it forms a single-vertex component
        - Iterating the result a second time raises SequenceReusedError
    """
    return _tarjan(graph, tbl if tbl is not None else HashTable(), seeds)
