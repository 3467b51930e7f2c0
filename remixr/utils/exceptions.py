"""
remixr/utils/exceptions.py

Custom exceptions for remixr.

Contains:
- RemixrError: Base exception
- InvalidBudgetError: Negative or non-integer traversal/sample budgets
- UnsupportedFileFormat: Capture file of an unknown type

Failures inside the inspected structure are never raised; they are captured as sentinels.
"""


class RemixrError(Exception):
    """
    Base exception for all remixr errors.
    """


class InvalidBudgetError(RemixrError, ValueError):
    """
    Raised when a caller passes an invalid budget (e.g. a negative max_depth).
    This is a caller contract violation and is reported synchronously.
    """


class UnsupportedFileFormat(RemixrError):
    """
    Raised when a capture file has an unsupported type.
    """


def validate_budget(name: str, value: int) -> int:
    """
    Validate a traversal or sample budget.
    Args:
        name: Parameter name, used in the error message.
        value: The budget value.
    Returns:
        The validated value.
    Raises:
        InvalidBudgetError: If the value is not a non-negative integer.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidBudgetError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise InvalidBudgetError(f"{name} must be non-negative, got {value}")
    return value
