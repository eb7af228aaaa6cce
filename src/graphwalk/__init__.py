"""
graphwalk - Representation-agnostic graph traversal and analysis

This package lets any data structure be treated as a directed graph through a
three-function view, and runs a family of algorithms on that view:

- Depth-first, breadth-first and best-first traversals from one generic engine
- Detailed depth-first event traces with edge classification
- Dijkstra shortest paths, topological sort and cycle detection
- Strongly connected components and lazy spanning trees
- Export to the DOT format
- Persistent (ordered map) and mutable (hash table) graph representations
"""

__version__ = "0.1.0"
__author__ = "graphwalk Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 9):
    raise RuntimeError("graphwalk requires Python 3.9 or higher")

# Import commonly used components for easier access
from .core.graph import GraphView, make, make_tuple, of_dict, of_fun, of_list
from .core.traversal import bfs, dfs, dijkstra
from .core.algorithms import scc, topo_sort

__all__ = [
    "GraphView",
    "make",
    "make_tuple",
    "of_dict",
    "of_fun",
    "of_list",
    "bfs",
    "dfs",
    "dijkstra",
    "scc",
    "topo_sort",
]
