"""
Persistent graph on totally ordered vertices.

This module provides two immutable structures with structural sharing:

- OrderedMap: a height-balanced (AVL) binary search tree ordered by a caller
  supplied three-way comparison. Updates copy only the path from the root to
  the changed node, so older versions stay valid and share the rest.
- PersistentGraph: an adjacency map ``vertex -> ordered set of successors``
  built on OrderedMap. Every update returns a new graph value.

Removing a vertex drops its outgoing edges only. Edges from other vertices
into the removed vertex are left in place and must be removed explicitly with
``remove_edge``.
"""

from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

from ..exceptions import KeyNotFoundError
from .base import GraphView

K = TypeVar("K")
V = TypeVar("V")

Comparator = Callable[[Any, Any], int]


def default_cmp(a: Any, b: Any) -> int:
    """Three-way comparison using the natural ordering of the values."""
    return (a > b) - (a < b)


class _Node:
    """Immutable tree node."""

    __slots__ = ("key", "value", "left", "right", "height")

    def __init__(self, key: Any, value: Any, left: Optional["_Node"], right: Optional["_Node"]):
        self.key = key
        self.value = value
        self.left = left
        self.right = right
        self.height = 1 + max(_height(left), _height(right))


def _height(node: Optional[_Node]) -> int:
    return node.height if node is not None else 0


def _balance(key: Any, value: Any, left: Optional[_Node], right: Optional[_Node]) -> _Node:
    """Build a node, applying at most a double rotation to restore balance."""
    hl, hr = _height(left), _height(right)
    if hl > hr + 1:
        assert left is not None
        if _height(left.left) >= _height(left.right):
            return _Node(left.key, left.value, left.left, _Node(key, value, left.right, right))
        lr = left.right
        assert lr is not None
        return _Node(
            lr.key,
            lr.value,
            _Node(left.key, left.value, left.left, lr.left),
            _Node(key, value, lr.right, right),
        )
    if hr > hl + 1:
        assert right is not None
        if _height(right.right) >= _height(right.left):
            return _Node(right.key, right.value, _Node(key, value, left, right.left), right.right)
        rl = right.left
        assert rl is not None
        return _Node(
            rl.key,
            rl.value,
            _Node(key, value, left, rl.left),
            _Node(right.key, right.value, rl.right, right.right),
        )
    return _Node(key, value, left, right)


def _insert(node: Optional[_Node], key: Any, value: Any, cmp: Comparator) -> _Node:
    if node is None:
        return _Node(key, value, None, None)
    c = cmp(key, node.key)
    if c < 0:
        return _balance(node.key, node.value, _insert(node.left, key, value, cmp), node.right)
    if c > 0:
        return _balance(node.key, node.value, node.left, _insert(node.right, key, value, cmp))
    return _Node(key, value, node.left, node.right)


def _pop_min(node: _Node) -> Tuple[Any, Any, Optional[_Node]]:
    if node.left is None:
        return node.key, node.value, node.right
    key, value, left = _pop_min(node.left)
    return key, value, _balance(node.key, node.value, left, node.right)


def _remove(node: Optional[_Node], key: Any, cmp: Comparator) -> Optional[_Node]:
    if node is None:
        return None
    c = cmp(key, node.key)
    if c < 0:
        left = _remove(node.left, key, cmp)
        return node if left is node.left else _balance(node.key, node.value, left, node.right)
    if c > 0:
        right = _remove(node.right, key, cmp)
        return node if right is node.right else _balance(node.key, node.value, node.left, right)
    if node.left is None:
        return node.right
    if node.right is None:
        return node.left
    min_key, min_value, right = _pop_min(node.right)
    return _balance(min_key, min_value, node.left, right)


def _find(node: Optional[_Node], key: Any, cmp: Comparator) -> Optional[_Node]:
    while node is not None:
        c = cmp(key, node.key)
        if c == 0:
            return node
        node = node.left if c < 0 else node.right
    return None


class OrderedMap(Generic[K, V]):
    """Immutable sorted mapping with structural sharing.

    Attributes:
        cmp (Comparator): Three-way comparison on keys; negative, zero or
            positive like the classic ``cmp`` function
    """

    __slots__ = ("_root", "_size", "cmp")

    def __init__(self, cmp: Optional[Comparator] = None, _root: Optional[_Node] = None, _size: int = 0):
        self.cmp = cmp or default_cmp
        self._root = _root
        self._size = _size

    def _with(self, root: Optional[_Node], size: int) -> "OrderedMap[K, V]":
        return OrderedMap(self.cmp, root, size)

    def set(self, key: K, value: V) -> "OrderedMap[K, V]":
        """Return a map where ``key`` is bound to ``value``."""
        size = self._size if self.contains(key) else self._size + 1
        return self._with(_insert(self._root, key, value, self.cmp), size)

    def remove(self, key: K) -> "OrderedMap[K, V]":
        """Return a map without ``key``; unchanged if absent."""
        if not self.contains(key):
            return self
        return self._with(_remove(self._root, key, self.cmp), self._size - 1)

    def get(self, key: K) -> V:
        """Return the value bound to ``key``.

        Raises:
            KeyNotFoundError: If the key is absent
        """
        node = _find(self._root, key, self.cmp)
        if node is None:
            raise KeyNotFoundError(key)
        return node.value

    def find(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Return the value bound to ``key``, or ``default``."""
        node = _find(self._root, key, self.cmp)
        return default if node is None else node.value

    def contains(self, key: K) -> bool:
        return _find(self._root, key, self.cmp) is not None

    def items(self) -> Iterator[Tuple[K, V]]:
        """Iterate over ``(key, value)`` pairs in key order."""
        stack: List[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key, node.value
            node = node.right

    def keys(self) -> Iterator[K]:
        for key, _ in self.items():
            yield key

    def __iter__(self) -> Iterator[K]:
        return self.keys()

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self._size

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedMap):
            return NotImplemented
        if len(self) != len(other):
            return False
        for (k1, v1), (k2, v2) in zip(self.items(), other.items()):
            if self.cmp(k1, k2) != 0 or v1 != v2:
                return False
        return True

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"OrderedMap({{{body}}})"


class PersistentGraph(Generic[V]):
    """Immutable adjacency map on totally ordered vertices.

    Vertices are kept in two places: as keys of the adjacency map when they
    have outgoing edges, and in a set of explicitly added vertices. Both are
    ordered maps sharing the same comparison.

    Example:
        >>> g = PersistentGraph.of_list([(1, 2), (2, 3)])
        >>> g.add_edge(3, 1).to_list()
        [(1, 2), (2, 3), (3, 1)]
    """

    __slots__ = ("_adj", "_explicit", "cmp")

    def __init__(
        self,
        cmp: Optional[Comparator] = None,
        _adj: Optional[OrderedMap] = None,
        _explicit: Optional[OrderedMap] = None,
    ):
        """
        Initialize an empty graph, or wrap existing maps.

        Args:
            cmp (Optional[Comparator]): Total order on vertices
        """
        self.cmp = cmp or default_cmp
        self._adj: OrderedMap[V, OrderedMap[V, None]] = (
            _adj if _adj is not None else OrderedMap(self.cmp)
        )
        self._explicit: OrderedMap[V, None] = (
            _explicit if _explicit is not None else OrderedMap(self.cmp)
        )

    @classmethod
    def empty(cls, cmp: Optional[Comparator] = None) -> "PersistentGraph[V]":
        return cls(cmp)

    def _with(self, adj: OrderedMap, explicit: OrderedMap) -> "PersistentGraph[V]":
        return PersistentGraph(self.cmp, adj, explicit)

    def _successors(self, v: V) -> OrderedMap:
        return self._adj.find(v, OrderedMap(self.cmp))

    def as_graph(self) -> GraphView[V, Tuple[V, V]]:
        """Graph view of this value; edges are ``(origin, dest)`` pairs."""

        def children(v: V) -> Iterator[Tuple[V, V]]:
            for dest in self._successors(v).keys():
                yield (v, dest)

        return GraphView(children=children, origin=lambda e: e[0], dest=lambda e: e[1])

    def add_edge(self, v1: V, v2: V) -> "PersistentGraph[V]":
        """Return a graph with the edge ``v1 -> v2`` added."""
        succ = self._successors(v1).set(v2, None)
        return self._with(self._adj.set(v1, succ), self._explicit)

    def remove_edge(self, v1: V, v2: V) -> "PersistentGraph[V]":
        """Return a graph without the edge ``v1 -> v2``; unchanged if absent."""
        succ = self._adj.find(v1)
        if succ is None or not succ.contains(v2):
            return self
        succ = succ.remove(v2)
        adj = self._adj.set(v1, succ) if len(succ) else self._adj.remove(v1)
        return self._with(adj, self._explicit)

    def add(self, v: V) -> "PersistentGraph[V]":
        """Return a graph containing ``v``, possibly with no outgoing edge."""
        return self._with(self._adj, self._explicit.set(v, None))

    def remove(self, v: V) -> "PersistentGraph[V]":
        """Return a graph without ``v`` and its outgoing edges.

        Edges from other vertices into ``v`` are kept.
        """
        return self._with(self._adj.remove(v), self._explicit.remove(v))

    def union(self, other: "PersistentGraph[V]") -> "PersistentGraph[V]":
        """Return a graph holding the vertices and edges of both graphs."""
        adj = self._adj
        for v, succ in other._adj.items():
            merged = adj.find(v)
            if merged is None:
                merged = succ
            else:
                for dest in succ.keys():
                    merged = merged.set(dest, None)
            adj = adj.set(v, merged)
        explicit = self._explicit
        for v in other._explicit.keys():
            explicit = explicit.set(v, None)
        return self._with(adj, explicit)

    def has_edge(self, v1: V, v2: V) -> bool:
        return self._successors(v1).contains(v2)

    def vertices(self) -> Iterator[V]:
        """Iterate over every vertex in order: added vertices, edge origins
        and edge destinations."""
        seen: OrderedMap[V, None] = self._explicit
        for v, succ in self._adj.items():
            seen = seen.set(v, None)
            for dest in succ.keys():
                seen = seen.set(dest, None)
        return seen.keys()

    def to_seq(self) -> Iterator[Tuple[V, V]]:
        """Iterate over edges, ordered by origin then destination."""
        for v, succ in self._adj.items():
            for dest in succ.keys():
                yield (v, dest)

    def to_list(self) -> List[Tuple[V, V]]:
        return list(self.to_seq())

    def add_list(self, edges: Iterable[Tuple[V, V]]) -> "PersistentGraph[V]":
        """Return a graph with every ``(v1, v2)`` pair of ``edges`` added."""
        graph = self
        for v1, v2 in edges:
            graph = graph.add_edge(v1, v2)
        return graph

    @classmethod
    def of_list(
        cls, edges: Iterable[Tuple[V, V]], cmp: Optional[Comparator] = None
    ) -> "PersistentGraph[V]":
        return cls(cmp).add_list(edges)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PersistentGraph):
            return NotImplemented
        return self._adj == other._adj and self._explicit == other._explicit

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PersistentGraph(edges={self.to_list()!r})"
