"""
Custom exceptions for the graph traversal engine.

This module defines the hierarchy of custom exceptions used throughout the library.
Each exception type corresponds to a specific category of contract violation that
may occur while traversing or analysing a graph. None of them are transient: the
engine performs pure in-memory computation, so callers are expected to fix the
call site rather than retry.
"""

from typing import Any, Optional


class ValidationError(Exception):
    """
    Raised when input data validation fails.

    This exception is raised by the command line interface when a graph
    description does not match the expected JSON schema.

    Examples:
        * Edge given as a single vertex instead of a pair
        * Non-positive edge weight
        * Malformed JSON document
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class GraphOperationError(Exception):
    """
    Raised when a graph algorithm cannot complete.

    This is the base class for errors raised by the traversal engine and the
    algorithms built on top of it.

    Examples:
        * Topological sort of a cyclic graph
        * Re-iteration of a single-consumption sequence
        * Popping an empty frontier
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class CycleDetectedError(GraphOperationError):
    """
    Raised when a topological sort meets a cycle.

    The subgraph reachable from the seeds is not acyclic, so no ordering
    exists. The back edge that closed the cycle is kept in ``edge``.

    Examples:
        * Edges ``1 -> 2 -> 3 -> 1`` sorted from ``1``
        * A self-loop ``v -> v``
    """

    def __init__(self, message: str, edge: Optional[Any] = None):
        super().__init__(message)
        self.edge = edge


class SequenceReusedError(GraphOperationError):
    """
    Raised when a single-consumption sequence is iterated a second time.

    Traversal results own their frontier and visited table; once pulled
    they cannot be restarted. Call the algorithm again for a fresh pass.

    Examples:
        * ``list(seq)`` followed by another ``list(seq)``
        * Two ``for`` loops over the same ``dfs(...)`` result
    """


class EmptyFrontierError(GraphOperationError):
    """
    Raised when popping from an empty bag.

    The traversal engine checks ``is_empty`` before popping, so this only
    happens when a bag is used directly.
    """


class ResourceNotFoundError(Exception):
    """
    Raised when a requested resource is not found.

    Examples:
        * Key lookup in a table that never stored it
        * Vertex lookup in an ordered map
    """


class KeyNotFoundError(ResourceNotFoundError):
    """
    Raised when a table lookup is made for an absent key.

    Tables never return a default value for a missing key; the absent
    key is kept in ``key``.

    Examples:
        * ``HashTable().get("a")`` on an empty table
        * ``OrderedMap.get`` for a vertex that was removed
    """

    def __init__(self, key: Any):
        super().__init__(f"Key {key!r} not found")
        self.key = key
