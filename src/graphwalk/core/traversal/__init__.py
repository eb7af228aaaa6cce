"""
Traversal engine: generic bag-driven walks, event traces and Dijkstra.
"""

from .engine import bfs, bfs_tag, dfs, dfs_tag, generic, generic_tag
from .events import (
    EdgeEvent,
    EdgeKind,
    Enter,
    Event,
    Exit,
    VertexPhase,
    dfs_events,
    dfs_events_tag,
    get_edge,
    get_edge_kind,
    get_enter,
    get_exit,
    get_vertex,
)
from .shortest_path import ShortestPathStep, dijkstra, dijkstra_tag
from .utils import EdgePath, MemoryManager

__all__ = [
    "bfs",
    "bfs_tag",
    "dfs",
    "dfs_tag",
    "generic",
    "generic_tag",
    "EdgeEvent",
    "EdgeKind",
    "Enter",
    "Event",
    "Exit",
    "VertexPhase",
    "dfs_events",
    "dfs_events_tag",
    "get_edge",
    "get_edge_kind",
    "get_enter",
    "get_exit",
    "get_vertex",
    "ShortestPathStep",
    "dijkstra",
    "dijkstra_tag",
    "EdgePath",
    "MemoryManager",
]
