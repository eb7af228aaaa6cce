"""Command Line Interface for graphwalk.

This module runs the library's algorithms on a graph described in JSON. The
description lists edges as ``[source, target]`` or ``[source, target, weight]``
and may list extra vertices:

    {"vertices": ["x"], "edges": [["a", "b"], ["b", "c", 4]]}

The CLI supports the following commands:
    - dfs / bfs: Print reachable vertices in traversal order
    - dijkstra: Print reachable vertices with their distance
    - topo: Print a topological order, failing on cycles
    - scc: Print strongly connected components, one per line
    - dot: Export the reachable graph in DOT format

JSON input can be provided either as a direct string or as a file path prefixed with '@'.
Seeds are chosen with ``--from`` (repeatable); by default every vertex is a seed.

Example Usage:
    python -m graphwalk topo @data/deps.json
    python -m graphwalk dijkstra '{"edges": [[1, 2, 2], [1, 3, 5], [2, 3, 1]]}' --from 1
    python -m graphwalk dot @data/deps.json --name deps --output deps.dot
"""

import argparse
import json
import logging
import os
import sys
from typing import Any, Dict, List, Optional, Sequence, Tuple

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from .core.algorithms import scc, topo_sort
from .core.constants import DEFAULT_EDGE_DISTANCE, DEFAULT_GRAPH_NAME
from .core.exceptions import GraphOperationError, ResourceNotFoundError, ValidationError
from .core.export import Attribute, pp_seq, with_out
from .core.graph import GraphView, make
from .core.traversal import bfs, dfs, dijkstra

logger = logging.getLogger(__name__)

Vertex = Any
WeightedEdge = Tuple[Vertex, Vertex, int]

_VERTEX = {"type": ["string", "integer"]}

GRAPH_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {
        "vertices": {"type": "array", "items": _VERTEX},
        "edges": {
            "type": "array",
            "items": {
                "type": "array",
                "items": [_VERTEX, _VERTEX, {"type": "integer", "minimum": 1}],
                "minItems": 2,
                "maxItems": 3,
            },
        },
    },
    "required": ["edges"],
    "additionalProperties": False,
}


def parse_json_input(json_str: str) -> dict:
    """Parse JSON input from either a string or file.

    Args:
        json_str (str): Either a JSON string or a file path prefixed with '@'.
                       Relative file paths are resolved against the current
                       working directory.

    Returns:
        dict: Parsed JSON data.

    Raises:
        ValidationError: If the JSON is invalid or the specified file cannot be read.
    """
    if json_str.startswith("@"):
        file_path = json_str[1:]
        if not os.path.isabs(file_path):
            file_path = os.path.join(os.getcwd(), file_path)

        if not os.path.exists(file_path):
            raise ValidationError(f"File not found: {file_path}")

        if not os.path.isfile(file_path):
            raise ValidationError(f"Not a file: {file_path}")

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Invalid JSON in {file_path}: {e}")
        except (OSError, UnicodeDecodeError) as e:
            raise ValidationError(f"Cannot read {file_path}: {e}")

    try:
        return json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON input: {e}")


class GraphDescription:
    """Graph loaded from a validated JSON description.

    Attributes:
        vertices (List[Vertex]): Every vertex, in order of first appearance
        edges (List[WeightedEdge]): ``(source, target, weight)`` triples
    """

    def __init__(self, data: Dict[str, Any]):
        """
        Validate and load a description.

        Args:
            data (Dict[str, Any]): Parsed JSON document

        Raises:
            ValidationError: If the document does not match GRAPH_SCHEMA
        """
        try:
            json_validate(instance=data, schema=GRAPH_SCHEMA)
        except JsonSchemaError as e:
            raise ValidationError(f"Invalid graph description: {e.message}")

        self.edges: List[WeightedEdge] = [
            (edge[0], edge[1], edge[2] if len(edge) == 3 else DEFAULT_EDGE_DISTANCE)
            for edge in data["edges"]
        ]
        self._adjacency: Dict[Vertex, List[WeightedEdge]] = {}
        self.vertices: List[Vertex] = []
        for v in data.get("vertices", []):
            self._add_vertex(v)
        for edge in self.edges:
            self._add_vertex(edge[0])
            self._add_vertex(edge[1])
            self._adjacency[edge[0]].append(edge)
        logger.info(f"Loaded graph with {len(self.vertices)} vertices and {len(self.edges)} edges")

    def _add_vertex(self, v: Vertex) -> None:
        if v not in self._adjacency:
            self._adjacency[v] = []
            self.vertices.append(v)

    @property
    def graph(self) -> GraphView[Vertex, WeightedEdge]:
        return make(
            children=lambda v: self._adjacency.get(v, []),
            origin=lambda e: e[0],
            dest=lambda e: e[1],
        )

    def resolve_seeds(self, names: Optional[Sequence[str]]) -> List[Vertex]:
        """Map ``--from`` arguments to vertices; all vertices when empty.

        Raises:
            ValidationError: If a name matches no vertex, or matches both an
                integer and a string vertex
        """
        if not names:
            return list(self.vertices)
        by_name: Dict[str, List[Vertex]] = {}
        for v in self.vertices:
            by_name.setdefault(str(v), []).append(v)
        seeds = []
        for name in names:
            matches = by_name.get(name, [])
            if not matches:
                raise ValidationError(f"Unknown vertex: {name}")
            if len(matches) > 1:
                raise ValidationError(
                    f"Ambiguous vertex: {name} names both {matches[0]!r} and {matches[1]!r}"
                )
            seeds.append(matches[0])
        return seeds


def write_dot(description: GraphDescription, seeds: List[Vertex], name: str, out: Any) -> None:
    """Export the reachable part of ``description`` with labels and weights."""
    pp_seq(
        description.graph,
        out,
        seeds,
        attrs_v=lambda v: [Attribute.label(str(v))],
        attrs_e=lambda e: [Attribute.weight(e[2])] if e[2] != DEFAULT_EDGE_DISTANCE else [],
        name=name,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(prog="graphwalk", description="Graph traversal CLI")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    def add_command(name: str, help_text: str) -> argparse.ArgumentParser:
        command = subparsers.add_parser(name, help=help_text)
        command.add_argument("data", help="JSON string or @filename containing the graph")
        command.add_argument(
            "--from",
            dest="seeds",
            action="append",
            metavar="VERTEX",
            help="Start vertex (repeatable, default: every vertex)",
        )
        return command

    add_command("dfs", "Print vertices in depth-first order")
    add_command("bfs", "Print vertices in breadth-first order")
    add_command("dijkstra", "Print vertices with their distance from the seeds")
    topo = add_command("topo", "Print a topological order")
    topo.add_argument("--rev", action="store_true", help="Reverse the dependency relation")
    add_command("scc", "Print strongly connected components")
    dot = add_command("dot", "Export the graph in DOT format")
    dot.add_argument("--name", default=DEFAULT_GRAPH_NAME, help="Name of the exported graph")
    dot.add_argument("--output", help="Write to this file instead of stdout")

    return parser


def run(args: argparse.Namespace) -> None:
    """Execute a parsed command, printing results to stdout."""
    description = GraphDescription(parse_json_input(args.data))
    seeds = description.resolve_seeds(args.seeds)
    graph = description.graph

    if args.command == "dfs":
        for v in dfs(graph, seeds):
            print(v)
    elif args.command == "bfs":
        for v in bfs(graph, seeds):
            print(v)
    elif args.command == "dijkstra":
        for v, distance, _path in dijkstra(graph, seeds, dist=lambda e: e[2]):
            print(f"{v}\t{distance}")
    elif args.command == "topo":
        print(" ".join(str(v) for v in topo_sort(graph, seeds, rev=args.rev)))
    elif args.command == "scc":
        for component in scc(graph, seeds):
            print(" ".join(str(v) for v in component))
    elif args.command == "dot":
        if args.output:
            with_out(args.output, lambda out: write_dot(description, seeds, args.name, out))
            logger.info(f"Wrote {args.output}")
        else:
            write_dot(description, seeds, args.name, sys.stdout)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the CLI application.

    Returns:
        int: Process exit status
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        run(args)
    except (ValidationError, GraphOperationError, ResourceNotFoundError) as e:
        print(str(e), file=sys.stderr)
        return 1
    return 0
