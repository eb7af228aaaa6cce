"""
Capability tables and tag sets.

Traversals keep per-vertex state (visited marks, discovery indices, export ids)
in small key/value stores that the caller can pick:

- HashTable: backed by a dict; uses the caller's equality and hash functions
  when given, the vertex type's own otherwise.
- MapTable: backed by a persistent OrderedMap; needs only a total order, so it
  works for unhashable vertices.
- TagSet: boolean marks, either stored in a table (TableTagSet) or directly on
  the vertex objects (AttributeTagSet).

A table or tag set belongs to exactly one traversal call and must not be shared
between traversals that run at the same time.
"""

import builtins
import operator
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Generic, Hashable, Optional, TypeVar

from ..exceptions import KeyNotFoundError
from .persistent import Comparator, OrderedMap

K = TypeVar("K")
A = TypeVar("A")


class Table(ABC, Generic[K, A]):
    """Mutable table with keys ``K`` and values ``A``."""

    @abstractmethod
    def contains(self, key: K) -> bool:
        """Whether ``key`` has a binding."""

    @abstractmethod
    def get(self, key: K) -> A:
        """Return the value bound to ``key``.

        Raises:
            KeyNotFoundError: If ``key`` was never set
        """

    @abstractmethod
    def set(self, key: K, value: A) -> None:
        """Bind ``key`` to ``value``, erasing any previous binding."""

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]


class _Key:
    """Key wrapper routing ``==`` and ``hash`` to caller supplied functions."""

    __slots__ = ("value", "_eq", "_hash")

    def __init__(self, value: Any, eq: Callable[[Any, Any], bool], hash_func: Callable[[Any], int]):
        self.value = value
        self._eq = eq
        self._hash = hash_func

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _Key) and self._eq(self.value, other.value)

    def __hash__(self) -> int:
        return self._hash(self.value)


class HashTable(Table[K, A]):
    """Hash-based table.

    Args:
        eq (Optional[Callable[[K, K], bool]]): Equality on keys
        hash (Optional[Callable[[K], int]]): Hash on keys, consistent with ``eq``
    """

    def __init__(
        self,
        eq: Optional[Callable[[K, K], bool]] = None,
        hash: Optional[Callable[[K], int]] = None,
    ):
        self._custom = eq is not None or hash is not None
        self._eq = eq or operator.eq
        self._hash = hash or builtins.hash
        self._data: Dict[Hashable, A] = {}

    def _wrap(self, key: K) -> Hashable:
        if self._custom:
            return _Key(key, self._eq, self._hash)
        return key  # type: ignore[return-value]

    def contains(self, key: K) -> bool:
        return self._wrap(key) in self._data

    def get(self, key: K) -> A:
        try:
            return self._data[self._wrap(key)]
        except KeyError:
            raise KeyNotFoundError(key) from None

    def set(self, key: K, value: A) -> None:
        self._data[self._wrap(key)] = value

    def remove(self, key: K) -> None:
        """Drop the binding of ``key`` if any."""
        self._data.pop(self._wrap(key), None)

    def __len__(self) -> int:
        return len(self._data)


class MapTable(Table[K, A]):
    """Ordered-map-based table; keys need a total order, not a hash.

    Args:
        cmp (Optional[Comparator]): Three-way comparison on keys
    """

    def __init__(self, cmp: Optional[Comparator] = None):
        self._map: OrderedMap[K, A] = OrderedMap(cmp)

    def contains(self, key: K) -> bool:
        return self._map.contains(key)

    def get(self, key: K) -> A:
        return self._map.get(key)

    def set(self, key: K, value: A) -> None:
        self._map = self._map.set(key, value)

    def __len__(self) -> int:
        return len(self._map)


def mk_table(
    eq: Optional[Callable[[K, K], bool]] = None,
    hash: Optional[Callable[[K], int]] = None,
) -> HashTable[K, Any]:
    """Default table implementation: a HashTable."""
    return HashTable(eq=eq, hash=hash)


def mk_map(cmp: Optional[Comparator] = None) -> MapTable[K, Any]:
    """Table backed by a persistent ordered map."""
    return MapTable(cmp=cmp)


class TagSet(ABC, Generic[K]):
    """Boolean marks on vertices."""

    @abstractmethod
    def get_tag(self, v: K) -> bool:
        """Whether ``v`` is marked."""

    @abstractmethod
    def set_tag(self, v: K) -> None:
        """Mark ``v``."""


class TableTagSet(TagSet[K]):
    """Tag set storing marks as bindings of a table."""

    def __init__(self, table: Optional[Table[K, Any]] = None):
        self.table: Table[K, Any] = table if table is not None else HashTable()

    def get_tag(self, v: K) -> bool:
        return self.table.contains(v)

    def set_tag(self, v: K) -> None:
        self.table.set(v, True)


class AttributeTagSet(TagSet[K]):
    """Tag set storing marks directly on the vertex objects.

    Each instance writes its own token, so marks left on vertices by an
    earlier traversal are not seen by a new tag set.

    Args:
        attribute (str): Name of the attribute written on each vertex
    """

    def __init__(self, attribute: str = "_graphwalk_tag"):
        self.attribute = attribute
        self._token = object()

    def get_tag(self, v: K) -> bool:
        return getattr(v, self.attribute, None) is self._token

    def set_tag(self, v: K) -> None:
        setattr(v, self.attribute, self._token)
