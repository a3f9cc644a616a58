"""Validation of command-line argument values."""

from typing import Any, Optional

from .errors import CLIValidationError

LINE_ENDING_CHOICES = ("auto", "lf", "crlf")


def validate_int(
    value: Any,
    *,
    allow_none: bool = False,
    min_value: Optional[int] = None
) -> Optional[int]:
    """
    Validate and convert value to integer with optional range checking.

    Args:
        value: Value to validate
        allow_none: Whether None is acceptable
        min_value: Minimum acceptable value (inclusive)

    Returns:
        Integer value or None if allow_none=True and value is None

    Raises:
        CLIValidationError: If value is not an integer or out of range

    Examples:
        >>> validate_int(80, min_value=1)
        80
    """
    if value is None:
        if allow_none:
            return None
        raise CLIValidationError(
            "Integer value cannot be None",
            hint="Provide a valid integer"
        )

    if not isinstance(value, int) or isinstance(value, bool):
        raise CLIValidationError(
            f"Expected integer value, got {type(value).__name__}",
            hint="Provide an integer value"
        )

    if min_value is not None and value < min_value:
        raise CLIValidationError(
            f"Value {value} is below minimum {min_value}",
            hint=f"Use a value >= {min_value}"
        )

    return value
