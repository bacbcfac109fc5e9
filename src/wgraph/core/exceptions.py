"""
Custom exceptions for the weighted graph library.

This module defines the hierarchy of exceptions raised by the graph backings.
Only a small part of the library raises at all: every query and most mutations
report "nothing to do" through boolean or empty return values, so the
exceptions below cover argument validation, configuration mistakes, and
internal consistency failures.
"""


class ValidationError(Exception):
    """
    Raised when input data fails validation.

    Examples:
        * Malformed edge records
        * Non-integer edge weights
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class InvalidArgumentError(ValidationError, ValueError):
    """
    Raised when a graph operation receives an argument it cannot accept.

    The only operation with a documented failure is setting an edge with a
    negative weight. The check runs before the graph is touched, so a rejected
    call leaves no partial mutation behind.

    Examples:
        * ``graph.set("a", "b", -1)``
        * ``graph.set("a", "b", 2.5)``
    """


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    Examples:
        * Graph integrity violations
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class RepresentationInvariantError(GraphOperationError, AssertionError):
    """
    Raised when a backing's internal storage breaks its representation invariant.

    This is a defect in the backing, not a usage error. It is raised by the
    self-check that runs after each mutation when invariant checking is
    enabled, and is not meant to be caught.

    Examples:
        * An edge whose endpoint is not a vertex
        * Two stored edges for the same ordered pair
        * A stored edge with weight zero
    """


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    Examples:
        * Unknown backing name
    """
