"""
Tests for custom exceptions.
"""

import pytest

from graphwalk.core.exceptions import (
    CycleDetectedError,
    EmptyFrontierError,
    GraphOperationError,
    KeyNotFoundError,
    ResourceNotFoundError,
    SequenceReusedError,
    ValidationError,
)


def test_validation_error_message():
    """Test validation error message formatting."""
    error = ValidationError("test message")
    assert str(error) == "Validation Error: test message"


def test_graph_operation_error_message():
    """Test graph operation error message formatting."""
    error = GraphOperationError("test message")
    assert str(error) == "Graph Operation Error: test message"


@pytest.mark.parametrize("error_type", [CycleDetectedError, SequenceReusedError, EmptyFrontierError])
def test_graph_operation_subclasses(error_type):
    """Test that algorithm errors share the graph operation prefix."""
    error = error_type("boom")
    assert isinstance(error, GraphOperationError)
    assert str(error) == "Graph Operation Error: boom"


def test_cycle_detected_error_keeps_edge():
    """Test that the closing edge is kept on the error."""
    error = CycleDetectedError("cycle", edge=(3, 1))
    assert error.edge == (3, 1)
    assert CycleDetectedError("cycle").edge is None


def test_key_not_found_error():
    """Test key not found error message and hierarchy."""
    error = KeyNotFoundError("a")
    assert isinstance(error, ResourceNotFoundError)
    assert error.key == "a"
    assert str(error) == "Key 'a' not found"
