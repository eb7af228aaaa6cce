"""Graph algorithms built on the traversal engine."""

from .components import SccState, scc
from .spanning_tree import LazyTree, spanning_tree, spanning_tree_tag
from .topological import is_dag, topo_sort, topo_sort_tag

__all__ = [
    "SccState",
    "scc",
    "LazyTree",
    "spanning_tree",
    "spanning_tree_tag",
    "is_dag",
    "topo_sort",
    "topo_sort_tag",
]
