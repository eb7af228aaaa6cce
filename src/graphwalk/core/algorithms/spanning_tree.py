"""Lazy spanning trees.

A LazyTree node holds a vertex and a list of ``(edge, subtree)`` pairs that is
computed on first access and cached on the node. Building a spanning tree only
marks the root; each ``children`` access expands one more vertex, following
the depth-first visiting rule: a vertex already reached anywhere in the same
tree is not expanded again. The marks live in one tag set shared by the whole
tree, so the shape of the tree depends on the order in which nodes are forced.
"""

import logging
from functools import cached_property
from typing import Any, Callable, Generic, List, Optional, Tuple, TypeVar

from ..graph.base import GraphView
from ..graph.tables import Table, TagSet
from ..traversal.engine import tags_of

logger = logging.getLogger(__name__)

V = TypeVar("V")
W = TypeVar("W")
E = TypeVar("E")
A = TypeVar("A")


class LazyTree(Generic[V, E]):
    """
    Tree node whose children are computed once, on demand.

    Attributes:
        vertex (V): The vertex at this node
    """

    def __init__(self, vertex: V, expand: Callable[[], List[Tuple[E, "LazyTree[V, E]"]]]):
        """
        Initialize a node.

        Args:
            vertex (V): The vertex at this node
            expand (Callable[[], List[Tuple[E, LazyTree[V, E]]]]): Computes the
                children; called at most once
        """
        self.vertex = vertex
        self._expand = expand

    @cached_property
    def children(self) -> List[Tuple[E, "LazyTree[V, E]"]]:
        """The ``(edge, subtree)`` pairs below this node, forced on first read."""
        children = self._expand()
        self._expand = None  # type: ignore[assignment]
        return children

    @property
    def is_forced(self) -> bool:
        """Whether the children have been computed."""
        return "children" in self.__dict__

    def map_v(self, func: Callable[[V], W]) -> "LazyTree[W, E]":
        """Return a tree with ``func`` applied to every vertex.

        The result is as lazy as this tree: forcing a mapped node forces the
        node it was mapped from.
        """
        return LazyTree(
            func(self.vertex),
            lambda: [(e, child.map_v(func)) for e, child in self.children],
        )

    def fold_v(self, func: Callable[[A, V], A], acc: A) -> A:
        """Fold ``func`` over every vertex in pre-order, forcing the whole tree."""
        stack: List[LazyTree[V, E]] = [self]
        while stack:
            node = stack.pop()
            acc = func(acc, node.vertex)
            stack.extend(child for _, child in reversed(node.children))
        return acc

    def __repr__(self) -> str:
        state = "forced" if self.is_forced else "lazy"
        return f"LazyTree({self.vertex!r}, {state})"


def spanning_tree_tag(graph: GraphView[V, E], tags: TagSet[V], root: V) -> LazyTree[V, E]:
    """Lazy spanning tree rooted at ``root``, using tags for memoization.

    Args:
        graph (GraphView[V, E]): The graph
        tags (TagSet[V]): Marks shared by the whole tree
        root (V): Root vertex

    Returns:
        LazyTree[V, E]: The root node; nothing below it is computed yet
    """

    def make_node(v: V) -> LazyTree[V, E]:
        def expand() -> List[Tuple[E, LazyTree[V, E]]]:
            logger.debug(f"Expanding spanning tree node {v!r}")
            children: List[Tuple[E, LazyTree[V, E]]] = []
            for e in graph.children(v):
                child = graph.dest(e)
                if not tags.get_tag(child):
                    tags.set_tag(child)
                    children.append((e, make_node(child)))
            return children

        return LazyTree(v, expand)

    tags.set_tag(root)
    return make_node(root)


def spanning_tree(
    graph: GraphView[V, E],
    root: V,
    tbl: Optional[Table[V, Any]] = None,
) -> LazyTree[V, E]:
    """Lazy spanning tree rooted at ``root``; ``tbl`` holds the marks."""
    return spanning_tree_tag(graph, tags_of(tbl), root)
