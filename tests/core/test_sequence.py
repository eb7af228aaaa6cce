"""Tests for single-consumption sequences."""

import pytest

from graphwalk.core.exceptions import SequenceReusedError
from graphwalk.core.sequence import OnceSequence, once


def test_sequence_is_lazy():
    """Test that the factory only runs on the first pull."""
    calls = []

    def factory():
        calls.append(1)
        return iter([1, 2, 3])

    seq = OnceSequence(factory)
    assert calls == []
    assert not seq.started
    assert next(seq) == 1
    assert calls == [1]
    assert seq.started


def test_second_iteration_raises():
    """Test that iterating a consumed sequence raises."""
    seq = OnceSequence(lambda: iter([1, 2]), name="numbers")
    assert list(seq) == [1, 2]
    with pytest.raises(SequenceReusedError, match="numbers can only be iterated once"):
        list(seq)


def test_partial_consumption_then_iteration_raises():
    """Test that a partially pulled sequence cannot be restarted."""
    seq = OnceSequence(lambda: iter([1, 2, 3]))
    assert next(seq) == 1
    with pytest.raises(SequenceReusedError):
        iter(seq)


def test_next_continues_after_partial_pull():
    """Test that next() keeps pulling from the same iterator."""
    seq = OnceSequence(lambda: iter("abc"))
    assert next(seq) == "a"
    assert next(seq) == "b"
    assert next(seq) == "c"
    with pytest.raises(StopIteration):
        next(seq)


def test_once_decorator():
    """Test that decorated generators return lazy OnceSequences."""
    ran = []

    @once("countdown")
    def countdown(n):
        ran.append(n)
        while n > 0:
            yield n
            n -= 1

    seq = countdown(3)
    assert isinstance(seq, OnceSequence)
    assert seq.name == "countdown"
    assert ran == []
    assert list(seq) == [3, 2, 1]
    assert ran == [3]
    assert countdown.__name__ == "countdown"
