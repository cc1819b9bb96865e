"""
Validation functions for configuration values.

Every validator returns the normalised value or raises ``ValidationError``
naming the offending field.
"""

from pathlib import Path
from typing import Any, Callable, Optional, TypeVar

from .exceptions import ValidationError

N = TypeVar("N", int, float)


def _invalid(field_name: str, value: Any, reason: str) -> ValidationError:
    return ValidationError(f"{field_name} {reason}", field_name=field_name, value=value)


def _bounded_number(
    value: Any,
    convert: Callable[[Any], N],
    kind: str,
    min_value: N,
    max_value: Optional[N],
    field_name: str,
) -> N:
    # TOML booleans are ints in Python; reject them explicitly.
    if isinstance(value, bool):
        raise _invalid(field_name, value, f"must be a valid {kind}, got {value}")
    try:
        number = convert(value)
    except (ValueError, TypeError):
        raise _invalid(field_name, value, f"must be a valid {kind}, got {value!r}") from None
    if number < min_value:
        raise _invalid(field_name, value, f"must be >= {min_value}, got {number}")
    if max_value is not None and number > max_value:
        raise _invalid(field_name, value, f"must be <= {max_value}, got {number}")
    return number


def validate_positive_integer(
    value: Any,
    min_value: int = 1,
    max_value: Optional[int] = None,
    field_name: str = "value"
) -> int:
    """
    Validate that a value is an integer within bounds.

    Args:
        value: Value to validate
        min_value: Minimum allowed value (inclusive)
        max_value: Maximum allowed value (inclusive), None for no limit
        field_name: Name of the field being validated

    Returns:
        Validated integer value

    Raises:
        ValidationError: If validation fails
    """
    return _bounded_number(value, int, "integer", min_value, max_value, field_name)


def validate_positive_float(
    value: Any,
    min_value: float = 0.0,
    max_value: Optional[float] = None,
    field_name: str = "value"
) -> float:
    """Validate that a value is a number within bounds; integers are accepted."""
    return _bounded_number(value, float, "number", min_value, max_value, field_name)


def validate_bool(value: Any, field_name: str = "value") -> bool:
    """Validate that a value is a real boolean (TOML ``true``/``false``)."""
    if not isinstance(value, bool):
        raise _invalid(field_name, value, f"must be a boolean, got {value!r}")
    return value


def validate_host(value: Any, field_name: str = "host") -> str:
    """Validate a host name: a non-empty string without a scheme or path."""
    if not isinstance(value, str) or not value.strip():
        raise _invalid(field_name, value, "must be a non-empty string")
    if "/" in value:
        raise _invalid(field_name, value, f"must be a bare host name, got {value!r}")
    return value.strip()


def validate_directory(value: Any, field_name: str = "directory") -> Path:
    """Validate a directory setting. The directory does not need to exist."""
    if not isinstance(value, (str, Path)) or not str(value).strip():
        raise _invalid(field_name, value, "must be a non-empty path")
    path = Path(value).expanduser()
    if path.exists() and not path.is_dir():
        raise _invalid(field_name, value, f"is not a directory: {path}")
    return path
