"""
Common validation helpers shared by the graph models and backings.

Weights are non-negative integers. Zero never describes a stored edge: it is
the input meaning "delete this edge" and the output meaning "no edge existed".
"""

from typing import Any

from ...utils.validation.base import is_integer
from ..exceptions import InvalidArgumentError

NO_EDGE = 0


def validate_weight(value: Any, minimum: int = NO_EDGE) -> None:
    """Validate that a weight is an integer no smaller than minimum."""
    if not is_integer(value):
        raise InvalidArgumentError(f"weight must be an integer, got {type(value).__name__}")
    if value < minimum:
        if minimum == NO_EDGE:
            raise InvalidArgumentError(f"weight must be non-negative, got {value}")
        raise InvalidArgumentError(f"weight must be at least {minimum}, got {value}")


def validate_label(label: Any) -> None:
    """Validate that a vertex label is defined."""
    if label is None:
        raise InvalidArgumentError("vertex label must not be None")
