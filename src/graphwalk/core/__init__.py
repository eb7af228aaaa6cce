"""Core graph functionality."""

from .exceptions import (
    CycleDetectedError,
    EmptyFrontierError,
    GraphOperationError,
    KeyNotFoundError,
    ResourceNotFoundError,
    SequenceReusedError,
    ValidationError,
)
from .sequence import OnceSequence
from .graph import GraphView, HashMutableGraph, HashTable, MapTable, PersistentGraph
from .traversal import bfs, dfs, dfs_events, dijkstra, generic
from .algorithms import LazyTree, is_dag, scc, spanning_tree, topo_sort
from .export import Attribute, pp, pp_seq

__all__ = [
    "CycleDetectedError",
    "EmptyFrontierError",
    "GraphOperationError",
    "KeyNotFoundError",
    "ResourceNotFoundError",
    "SequenceReusedError",
    "ValidationError",
    "OnceSequence",
    "GraphView",
    "HashMutableGraph",
    "HashTable",
    "MapTable",
    "PersistentGraph",
    "bfs",
    "dfs",
    "dfs_events",
    "dijkstra",
    "generic",
    "LazyTree",
    "is_dag",
    "scc",
    "spanning_tree",
    "topo_sort",
    "Attribute",
    "pp",
    "pp_seq",
]
