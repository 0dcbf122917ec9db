"""
Input Normalization Utilities
=============================

Single source of truth for input normalization.
All parsing of external inputs happens here, nowhere else.

Usage:
    from utils.normalize import to_int, to_positive_int, ValidationError

    page = to_positive_int(request.args.get("page"), default=1)
"""

from datetime import date, datetime, timezone
from typing import Optional, Union


class ValidationError(ValueError):
    """Raised when input cannot be normalized to expected type."""

    def __init__(self, message: str, field: str = None, received_value=None):
        super().__init__(message)
        self.field = field
        self.received_value = received_value


def to_int(
    value: Optional[Union[str, int]],
    *,
    default: Optional[int] = None,
    field: str = None
) -> Optional[int]:
    """
    Convert string to int, with explicit None handling.

    Args:
        value: Input string (typically from request.args.get())
        default: Value to return if input is None or empty
        field: Field name for error messages

    Returns:
        Parsed integer or default

    Raises:
        ValidationError: If value cannot be converted to int
    """
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        raise ValidationError(
            f"Expected int, got bool: {value!r}",
            field=field,
            received_value=value
        )
    try:
        return int(value)
    except (ValueError, TypeError):
        raise ValidationError(
            f"Expected int, got {type(value).__name__}: {value!r}",
            field=field,
            received_value=value
        )


def to_positive_int(value, *, default: Optional[int]) -> Optional[int]:
    """
    Lenient positive-int parsing for pagination params.

    Anything that is not a positive integer (missing, non-numeric, zero,
    negative) falls back to the default instead of raising.

    Examples:
        >>> to_positive_int("3", default=1)
        3
        >>> to_positive_int("abc", default=10)
        10
        >>> to_positive_int("0", default=1)
        1
    """
    try:
        parsed = to_int(value, default=default)
    except ValidationError:
        return default
    if parsed is None or parsed < 1:
        return default
    return parsed


def to_utc_datetime(
    value: Optional[Union[str, date, datetime]],
    *,
    field: str = None
) -> datetime:
    """
    Convert an ISO string or datetime to a timezone-aware UTC datetime.

    Naive inputs are taken to be UTC already. Offsets are converted, so
    "2021-11-27T20:29:54+05:30" becomes 2021-11-27T14:59:54Z.

    Raises:
        ValidationError: If value is empty or cannot be parsed
    """
    if value is None or value == "":
        raise ValidationError("Expected ISO datetime, got empty value", field=field, received_value=value)
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    else:
        try:
            parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
        except (ValueError, TypeError):
            raise ValidationError(
                f"Expected ISO datetime, got {type(value).__name__}: {value!r}",
                field=field,
                received_value=value
            )
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)
