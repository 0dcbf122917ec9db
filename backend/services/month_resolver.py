"""
Month Resolver - month name → index and UTC window

Every read endpoint resolves the month first; an unknown name fails with
InvalidMonth before any store access.

Usage:
    from services.month_resolver import resolve

    window = resolve("March")          # reference year 2024
    window.month_index                 # 3
    window.start, window.end           # 2024-03-01Z, 2024-04-01Z
"""

from dataclasses import dataclass
from datetime import datetime, timezone

from constants import MONTH_NAMES, DEFAULT_REFERENCE_YEAR, get_month_index
from utils.normalize import ValidationError


class InvalidMonth(ValidationError):
    """Month name is not one of the twelve canonical English names."""

    def __init__(self, received_value=None):
        super().__init__(
            "Invalid month value",
            field="month",
            received_value=received_value,
        )


@dataclass(frozen=True)
class MonthWindow:
    """
    Calendar month in the reference year.

    start is inclusive, end is exclusive; end is always the first instant of
    the following month.
    """
    month_index: int
    start: datetime
    end: datetime

    def contains(self, instant: datetime) -> bool:
        return self.start <= instant < self.end


def _first_instant(year: int, month: int) -> datetime:
    return datetime(year, month, 1, tzinfo=timezone.utc)


def next_month_start(year: int, month: int) -> datetime:
    """First instant of the month after (year, month). December rolls over."""
    if month == 12:
        return _first_instant(year + 1, 1)
    return _first_instant(year, month + 1)


def resolve(month_name, reference_year: int = DEFAULT_REFERENCE_YEAR) -> MonthWindow:
    """
    Resolve a canonical month name to its MonthWindow.

    Args:
        month_name: Exact, case-sensitive full English month name
        reference_year: Year the window is anchored to

    Raises:
        InvalidMonth: For anything other than the twelve canonical names
    """
    if not isinstance(month_name, str) or month_name not in MONTH_NAMES:
        raise InvalidMonth(month_name)

    month_index = get_month_index(month_name)
    return MonthWindow(
        month_index=month_index,
        start=_first_instant(reference_year, month_index),
        end=next_month_start(reference_year, month_index),
    )
