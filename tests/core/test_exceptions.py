"""
Tests for custom exceptions.
"""

import pytest

from wgraph.core.exceptions import (
    ConfigurationError,
    GraphOperationError,
    InvalidArgumentError,
    RepresentationInvariantError,
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


def test_invalid_argument_error_hierarchy():
    """Test that invalid arguments are both validation and value errors."""
    error = InvalidArgumentError("weight must be non-negative, got -1")

    assert isinstance(error, ValidationError)
    assert isinstance(error, ValueError)
    assert str(error) == "Validation Error: weight must be non-negative, got -1"


def test_representation_invariant_error_hierarchy():
    """Test that invariant violations surface as assertion failures."""
    error = RepresentationInvariantError("duplicate edge")

    assert isinstance(error, GraphOperationError)
    assert isinstance(error, AssertionError)
    assert str(error) == "Graph Operation Error: duplicate edge"


def test_configuration_error_is_plain_exception():
    """Test that configuration errors are not validation errors."""
    error = ConfigurationError("bad backing")

    assert not isinstance(error, ValidationError)
    with pytest.raises(ConfigurationError, match="bad backing"):
        raise error
