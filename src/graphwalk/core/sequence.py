"""
Single-consumption sequences.

Traversals own a frontier and a visited table that are mutated as results are
pulled. Their results are therefore wrapped in a OnceSequence: a lazy iterator
that may be iterated from the start exactly once. A second ``iter()`` call,
whether or not the first pass finished, raises SequenceReusedError instead of
silently producing an empty or restarted sequence.
"""

from functools import wraps
from typing import Callable, Generic, Iterator, Optional, TypeVar

from .exceptions import SequenceReusedError

T = TypeVar("T")


class OnceSequence(Generic[T]):
    """Lazy iterator that refuses to be restarted.

    Nothing runs until the first item is requested. ``next()`` may be called
    repeatedly to pull items one at a time; starting a new iteration with
    ``iter()`` after the sequence has been started is an error.

    Attributes:
        name (str): Label used in error messages
    """

    __slots__ = ("_factory", "_iterator", "_started", "name")

    def __init__(self, factory: Callable[[], Iterator[T]], name: str = "sequence"):
        """
        Initialize the sequence.

        Args:
            factory (Callable[[], Iterator[T]]): Builds the underlying iterator
                on first use
            name (str): Label used in error messages
        """
        self._factory = factory
        self._iterator: Optional[Iterator[T]] = None
        self._started = False
        self.name = name

    @property
    def started(self) -> bool:
        """Whether the sequence has been pulled from."""
        return self._started

    def _ensure_iterator(self) -> Iterator[T]:
        if self._iterator is None:
            self._started = True
            self._iterator = self._factory()
        return self._iterator

    def __iter__(self) -> Iterator[T]:
        if self._started:
            raise SequenceReusedError(f"{self.name} can only be iterated once")
        self._ensure_iterator()
        return self

    def __next__(self) -> T:
        return next(self._ensure_iterator())

    def __repr__(self) -> str:
        state = "started" if self._started else "fresh"
        return f"OnceSequence({self.name}, {state})"


def once(name: str) -> Callable[[Callable[..., Iterator[T]]], Callable[..., OnceSequence[T]]]:
    """Decorate a generator function so that it returns a OnceSequence.

    Arguments are bound immediately; the generator body only runs once the
    result is pulled.

    Args:
        name (str): Label used in error messages

    Returns:
        Decorator wrapping the generator function
    """

    def decorator(func: Callable[..., Iterator[T]]) -> Callable[..., OnceSequence[T]]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> OnceSequence[T]:
            return OnceSequence(lambda: func(*args, **kwargs), name=name)

        return wrapper

    return decorator
