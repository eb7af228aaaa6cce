"""
Graph export in the DOT (graphviz) format.

The exporter drives one depth-first event traversal to enumerate every vertex
and edge reachable from the roots exactly once, then writes a named directed
graph block::

    digraph "name" {
      v0 [label="42"];
      v1 [];
      v0 -> v1 [color="red"];
    }

Vertex identifiers are assigned in discovery order. The per-vertex state
(identifier and explored flag) lives in a table that callers may supply, so
vertices only need whatever that table needs: a hash by default, a total order
with a MapTable.

Example:
    >>> with_out("/tmp/divisors.dot", lambda out: pp(
    ...     divisors_graph, out, 42, attrs_v=lambda i: [Attribute.label(str(i))]))
"""

import io
import logging
from dataclasses import dataclass
from typing import IO, Any, Callable, Iterable, List, Optional, TypeVar, Union

from ..constants import DEFAULT_GRAPH_NAME, VERTEX_ID_PREFIX
from ..graph.base import GraphView
from ..graph.tables import HashTable, Table, TagSet
from ..traversal.events import EdgeEvent, Enter, dfs_events_tag

logger = logging.getLogger(__name__)

V = TypeVar("V")
E = TypeVar("E")
R = TypeVar("R")


@dataclass(frozen=True)
class Attribute:
    """
    A DOT attribute ``name=value``.

    String values are quoted on output; integer values are written as is.

    Attributes:
        name (str): Attribute name
        value (Union[str, int]): Attribute value
    """

    name: str
    value: Union[str, int]

    @classmethod
    def color(cls, value: str) -> "Attribute":
        return cls("color", value)

    @classmethod
    def shape(cls, value: str) -> "Attribute":
        return cls("shape", value)

    @classmethod
    def weight(cls, value: int) -> "Attribute":
        return cls("weight", value)

    @classmethod
    def style(cls, value: str) -> "Attribute":
        return cls("style", value)

    @classmethod
    def label(cls, value: str) -> "Attribute":
        return cls("label", value)

    @classmethod
    def other(cls, name: str, value: str) -> "Attribute":
        return cls(name, value)

    def render(self) -> str:
        if isinstance(self.value, int) and not isinstance(self.value, bool):
            return f"{self.name}={self.value}"
        return f"{self.name}={quote(str(self.value))}"


def quote(text: str) -> str:
    """Quote a DOT string, escaping backslashes and double quotes."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _render_attrs(attrs: Iterable[Attribute]) -> str:
    return "[" + ",".join(a.render() for a in attrs) + "]"


@dataclass
class VertexState:
    """
    Export state of a vertex.

    Attributes:
        id (int): Identifier assigned in discovery order
        explored (bool): Whether the traversal has entered the vertex
    """

    id: int
    explored: bool = False


class _StateTags(TagSet[V]):
    """Tag set reading the explored flag of the export state table."""

    def __init__(self, table: Table[V, VertexState], new_state: Callable[[V], VertexState]):
        self._table = table
        self._new_state = new_state

    def get_tag(self, v: V) -> bool:
        return self._table.contains(v) and self._table.get(v).explored

    def set_tag(self, v: V) -> None:
        self._new_state(v).explored = True


def _write(out: IO[Any], text: str) -> None:
    if isinstance(out, (io.RawIOBase, io.BufferedIOBase)):
        out.write(text.encode("utf-8"))
    else:
        out.write(text)


def pp_seq(
    graph: GraphView[V, E],
    out: IO[Any],
    seeds: Iterable[V],
    attrs_v: Optional[Callable[[V], List[Attribute]]] = None,
    attrs_e: Optional[Callable[[E], List[Attribute]]] = None,
    name: str = DEFAULT_GRAPH_NAME,
    tbl: Optional[Table[V, VertexState]] = None,
    eq: Optional[Callable[[V, V], bool]] = None,
) -> None:
    """Write the part of ``graph`` reachable from ``seeds`` to ``out``.

    Args:
        graph (GraphView[V, E]): The graph to export
        out (IO[Any]): Text or binary sink; binary sinks receive UTF-8
        seeds (Iterable[V]): Roots of the export
        attrs_v (Optional[Callable[[V], List[Attribute]]]): Vertex attributes
        attrs_e (Optional[Callable[[E], List[Attribute]]]): Edge attributes
        name (str): Name of the graph
        tbl (Optional[Table[V, VertexState]]): Per-vertex export state
        eq (Optional[Callable[[V, V], bool]]): Equality on vertices
    """
    attrs_v = attrs_v or (lambda _v: [])
    attrs_e = attrs_e or (lambda _e: [])
    table: Table[V, VertexState] = tbl if tbl is not None else HashTable()
    counter = 0

    def state_of(v: V) -> VertexState:
        nonlocal counter
        if table.contains(v):
            return table.get(v)
        state = VertexState(id=counter)
        counter += 1
        table.set(v, state)
        return state

    def vertex_id(v: V) -> str:
        return f"{VERTEX_ID_PREFIX}{state_of(v).id}"

    vertex_lines: List[str] = []
    edge_lines: List[str] = []
    for event in dfs_events_tag(graph, _StateTags(table, state_of), seeds, eq=eq):
        if isinstance(event, Enter):
            v = event.vertex
            vertex_lines.append(f"  {vertex_id(v)} {_render_attrs(attrs_v(v))};")
        elif isinstance(event, EdgeEvent):
            e = event.edge
            src, dst = vertex_id(graph.origin(e)), vertex_id(graph.dest(e))
            edge_lines.append(f"  {src} -> {dst} {_render_attrs(attrs_e(e))};")

    logger.debug(f"Exporting {len(vertex_lines)} vertices and {len(edge_lines)} edges")
    _write(out, f"digraph {quote(name)} {{\n")
    for line in vertex_lines + edge_lines:
        _write(out, line + "\n")
    _write(out, "}\n")


def pp(
    graph: GraphView[V, E],
    out: IO[Any],
    root: V,
    attrs_v: Optional[Callable[[V], List[Attribute]]] = None,
    attrs_e: Optional[Callable[[E], List[Attribute]]] = None,
    name: str = DEFAULT_GRAPH_NAME,
    tbl: Optional[Table[V, VertexState]] = None,
    eq: Optional[Callable[[V, V], bool]] = None,
) -> None:
    """Write the part of ``graph`` reachable from ``root`` to ``out``."""
    pp_seq(graph, out, [root], attrs_v=attrs_v, attrs_e=attrs_e, name=name, tbl=tbl, eq=eq)


def with_out(path: str, func: Callable[[IO[str]], R]) -> R:
    """Open ``path`` for writing and return ``func`` applied to the file."""
    with open(path, "w", encoding="utf-8") as out:
        return func(out)
