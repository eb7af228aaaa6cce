"""
Utility functions for traversals.
"""

import gc
import logging
import os
import time
from typing import Any, Generic, Iterator, List, Optional, TypeVar

import psutil  # type: ignore # Missing stubs

from ..constants import MEMORY_CHECK_INTERVAL

# Configure logging
logger = logging.getLogger(__name__)

E = TypeVar("E")


class EdgePath(Generic[E]):
    """Immutable path of edges from a root, shared between extensions.

    Each path keeps its last edge and a link to the path it extends, so
    extending costs O(1) and sibling paths share their common prefix.
    Iterating yields edges from the root onwards.
    """

    __slots__ = ("edge", "prev", "length")

    def __init__(self, edge: Any = None, prev: Optional["EdgePath[E]"] = None):
        self.edge = edge
        self.prev = prev
        self.length = 0 if prev is None else prev.length + 1

    def extend(self, edge: E) -> "EdgePath[E]":
        """Return the path followed by ``edge``."""
        return EdgePath(edge, self)

    def to_list(self) -> List[E]:
        """Efficiently reconstruct the edges from the root."""
        edges: List[E] = []
        current: Optional[EdgePath[E]] = self
        while current is not None and current.prev is not None:
            edges.append(current.edge)
            current = current.prev
        edges.reverse()
        return edges

    def __iter__(self) -> Iterator[E]:
        return iter(self.to_list())

    def __len__(self) -> int:
        return self.length

    def __eq__(self, other: object) -> bool:
        if isinstance(other, EdgePath):
            return self.to_list() == other.to_list()
        if isinstance(other, (list, tuple)):
            return self.to_list() == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"EdgePath({self.to_list()!r})"


EMPTY_PATH: EdgePath[Any] = EdgePath()


class MemoryManager:
    """Memory guard for traversals of large or infinite graphs.

    Samples the resident set size of the process at most once per
    ``check_interval`` seconds and raises MemoryError when growth since the
    guard was created exceeds ``max_memory_mb``.
    """

    def __init__(self, max_memory_mb: Optional[float] = None, check_interval: float = MEMORY_CHECK_INTERVAL):
        """Initialize memory manager."""
        # Force garbage collection at start
        gc.collect()

        self.max_memory = max_memory_mb * 1024 * 1024 if max_memory_mb is not None else None
        self.start_memory = get_memory_usage()
        self._peak_memory = self.start_memory
        self._last_check = time.monotonic()
        self._check_interval = check_interval

    def check_memory(self) -> None:
        """Check if memory usage exceeds limit."""
        current_time = time.monotonic()
        if current_time - self._last_check < self._check_interval:
            return

        self._last_check = current_time
        if self.max_memory is None:
            return

        current = get_memory_usage()
        self._peak_memory = max(self._peak_memory, current)

        if current - self.start_memory > self.max_memory:
            # Try to reclaim memory
            gc.collect()
            current = get_memory_usage()

            if current - self.start_memory > self.max_memory:
                logger.debug(f"Memory limit exceeded: {current / 1024 / 1024:.1f}MB in use")
                raise MemoryError(
                    f"Memory usage grew by {(current - self.start_memory) / 1024 / 1024:.1f}MB, "
                    f"exceeding limit of {self.max_memory / 1024 / 1024:.1f}MB"
                )

    @property
    def peak_memory_mb(self) -> float:
        """Get peak memory usage in MB."""
        return self._peak_memory / 1024 / 1024


def make_memory_guard(max_memory_mb: Optional[float]) -> Optional[MemoryManager]:
    """Build a guard when a limit is given, None otherwise."""
    if max_memory_mb is None:
        return None
    return MemoryManager(max_memory_mb)


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    mem_info = process.memory_info()
    return int(mem_info.rss)  # Explicitly convert to int for type safety
