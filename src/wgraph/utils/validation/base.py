"""
Base Validation Components

This module provides the ValidationResult container used to report validation
outcomes and a small hierarchy of ValidationRule classes used by the graph
integrity checks.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional


@dataclass
class ValidationResult:
    """
    Container for validation results.

    Attributes:
        is_valid (bool): Whether the validation passed successfully
        errors (List[str]): List of validation error messages
        context (Optional[Dict[str, Any]]): Additional context about the validation
    """

    is_valid: bool
    errors: List[str]
    context: Optional[Dict[str, Any]] = None


class ValidationRule:
    """
    Base class for all validation rules.

    Subclasses override validate() to implement specific validation logic.

    Attributes:
        error_message (str): Message to display when validation fails
    """

    def __init__(self, error_message: str):
        self.error_message = error_message

    def validate(self, value: Any) -> bool:
        """
        Validate a value against the rule.

        Raises:
            NotImplementedError: If the subclass doesn't implement this method
        """
        raise NotImplementedError("Validation rules must implement validate()")

    def check(self, value: Any) -> Optional[str]:
        """Return the formatted error message if value fails the rule, else None."""
        if self.validate(value):
            return None
        return self.error_message.format(value=value)


class RangeRule(ValidationRule):
    """
    Rule for validating numeric ranges.

    The range is open-ended above; min_value can be None to leave it unbounded.

    Attributes:
        min_value (Optional[float]): Minimum allowed value
    """

    def __init__(
        self,
        min_value: Optional[float] = None,
        error_message: str = "",
    ):
        super().__init__(error_message)
        self.min_value = min_value

    def validate(self, value: Any) -> bool:
        if not isinstance(value, (int, float)):
            return False
        if self.min_value is not None and value < self.min_value:
            return False
        return True


class CustomRule(ValidationRule):
    """
    Rule for custom validation functions.

    Attributes:
        validator_func: Custom validation function that returns a boolean
    """

    def __init__(self, validator_func: Callable[[Any], bool], error_message: str):
        super().__init__(error_message)
        self.validator_func = validator_func

    def validate(self, value: Any) -> bool:
        return self.validator_func(value)


def is_integer(value: Any) -> bool:
    """Return True for int values, excluding bool."""
    return isinstance(value, int) and not isinstance(value, bool)
