"""
Bags of pending vertices.

A bag is the frontier of a traversal: the set of vertices that have been
discovered but not yet expanded. The order in which a bag gives them back
decides the traversal order:

- QueueBag: first in, first out (breadth-first)
- StackBag: last in, first out (depth-first)
- HeapBag: smallest first according to a caller supplied ``leq`` (best-first)
"""

from abc import ABC, abstractmethod
from collections import deque
from heapq import heappop, heappush
from typing import Callable, Deque, Generic, List, TypeVar

from ..exceptions import EmptyFrontierError

T = TypeVar("T")


class Bag(ABC, Generic[T]):
    """Mutable ordering strategy over pending items."""

    @abstractmethod
    def push(self, item: T) -> None:
        """Add an item."""

    @abstractmethod
    def pop(self) -> T:
        """Remove and return the next item.

        Raises:
            EmptyFrontierError: If the bag is empty
        """

    @abstractmethod
    def __len__(self) -> int:
        """Number of pending items."""

    def is_empty(self) -> bool:
        return len(self) == 0


class QueueBag(Bag[T]):
    """First in, first out."""

    def __init__(self) -> None:
        self._items: Deque[T] = deque()

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        if not self._items:
            raise EmptyFrontierError("Cannot pop from an empty queue")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)


class StackBag(Bag[T]):
    """Last in, first out."""

    def __init__(self) -> None:
        self._items: List[T] = []

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        if not self._items:
            raise EmptyFrontierError("Cannot pop from an empty stack")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)


class _HeapEntry(Generic[T]):
    """Heap slot ordered by ``leq``, then by insertion order."""

    __slots__ = ("item", "count", "leq")

    def __init__(self, item: T, count: int, leq: Callable[[T, T], bool]):
        self.item = item
        self.count = count
        self.leq = leq

    def __lt__(self, other: "_HeapEntry[T]") -> bool:
        if not self.leq(self.item, other.item):
            return False
        if not self.leq(other.item, self.item):
            return True
        # equal priority: earlier insertion wins
        return self.count < other.count


class HeapBag(Bag[T]):
    """Priority queue where ``leq(x, y)`` means ``x`` comes out before ``y``.

    Items of equal priority come out in insertion order.

    Args:
        leq (Callable[[T, T], bool]): Total preorder on items
    """

    def __init__(self, leq: Callable[[T, T], bool]):
        self._leq = leq
        self._queue: List[_HeapEntry[T]] = []
        self._counter = 0  # Unique counter to break ties

    def push(self, item: T) -> None:
        heappush(self._queue, _HeapEntry(item, self._counter, self._leq))
        self._counter += 1

    def pop(self) -> T:
        if not self._queue:
            raise EmptyFrontierError("Cannot pop from an empty heap")
        return heappop(self._queue).item

    def __len__(self) -> int:
        return len(self._queue)
