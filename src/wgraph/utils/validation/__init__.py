"""
Validation package for the weighted graph library.

This package provides validation rules and the integrity validator that
checks a backing's representation invariant.
"""

from .base import (
    ValidationResult,
    ValidationRule,
    RangeRule,
    CustomRule,
    is_integer,
)
from .integrity import GraphIntegrityValidator

__all__ = [
    "ValidationResult",
    "ValidationRule",
    "RangeRule",
    "CustomRule",
    "is_integer",
    "GraphIntegrityValidator",
]
