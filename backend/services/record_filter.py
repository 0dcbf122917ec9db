"""
Record Filter - typed query values shared by every store.

A TransactionQuery is an immutable predicate. The in-memory store evaluates
it with `matches()`; the SQL store translates the same fields into
SQLAlchemy conditions (see db/sql_store.py). Unset fields do not constrain.

Two month semantics coexist:
- month_index: calendar month of dateOfSale, any year (listing)
- date_from/date_to: exact [start, end) instant range (aggregates)
"""

from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Optional

from models.record import TransactionRecord
from services.month_resolver import MonthWindow


def text_contains(haystack: Optional[str], needle: str) -> bool:
    """Case-insensitive literal substring match."""
    if haystack is None:
        return False
    return needle.lower() in haystack.lower()


def matches(record: TransactionRecord, window: MonthWindow, search_text: str = "") -> bool:
    """
    Listing predicate: month of dateOfSale (year ignored) equals the window's
    month AND (search empty OR title/description contains search).
    """
    if record.date_of_sale.astimezone(timezone.utc).month != window.month_index:
        return False
    if not search_text:
        return True
    return text_contains(record.title, search_text) or text_contains(record.description, search_text)


@dataclass(frozen=True)
class TransactionQuery:
    month_index: Optional[int] = None
    search: str = ""
    date_from: Optional[datetime] = None    # inclusive
    date_to: Optional[datetime] = None      # exclusive
    sold: Optional[bool] = None
    category: Optional[str] = None
    price_min: Optional[float] = None       # inclusive
    price_max: Optional[float] = None       # exclusive

    @classmethod
    def for_listing(cls, window: MonthWindow, search: str = "") -> 'TransactionQuery':
        """Year-agnostic month match plus optional search text."""
        return cls(month_index=window.month_index, search=search or "")

    @classmethod
    def for_window(cls, window: MonthWindow) -> 'TransactionQuery':
        """Exact [start, end) range of the window."""
        return cls(date_from=window.start, date_to=window.end)

    def narrow(self, **changes) -> 'TransactionQuery':
        return replace(self, **changes)

    def matches(self, record: TransactionRecord) -> bool:
        sale_at = record.date_of_sale.astimezone(timezone.utc)

        if self.month_index is not None and sale_at.month != self.month_index:
            return False
        if self.search and not (
            text_contains(record.title, self.search)
            or text_contains(record.description, self.search)
        ):
            return False
        if self.date_from is not None and sale_at < self.date_from:
            return False
        if self.date_to is not None and sale_at >= self.date_to:
            return False
        if self.sold is not None and record.sold is not self.sold:
            return False
        if self.category is not None and record.category != self.category:
            return False
        if self.price_min is not None and record.price < self.price_min:
            return False
        if self.price_max is not None and record.price >= self.price_max:
            return False
        return True
