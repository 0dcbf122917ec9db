"""
Transaction listing - paginated, month-filtered, searchable.

Month matching here is year-agnostic: any March record matches "March".
"""

import math
from dataclasses import dataclass
from typing import List

from constants import DEFAULT_PAGE, DEFAULT_PER_PAGE, DEFAULT_REFERENCE_YEAR
from db.store import TransactionStore
from models.record import TransactionRecord
from services.month_resolver import resolve
from services.record_filter import TransactionQuery
from utils.normalize import to_positive_int


@dataclass(frozen=True)
class TransactionPage:
    records: List[TransactionRecord]
    total_pages: int
    total_records: int
    page: int
    per_page: int

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.page > 1


def list_transactions(
    store: TransactionStore,
    month,
    search: str = "",
    page=DEFAULT_PAGE,
    per_page=DEFAULT_PER_PAGE,
    *,
    reference_year: int = DEFAULT_REFERENCE_YEAR,
    default_per_page: int = DEFAULT_PER_PAGE,
) -> TransactionPage:
    """
    Get one page of transactions for a month, optionally narrowed by search.

    Args:
        store: Record store to scan
        month: Canonical month name (validated before any store access)
        search: Case-insensitive substring of title or description
        page: 1-based page number; invalid values fall back to 1
        per_page: Page size; invalid values fall back to default_per_page

    Returns:
        TransactionPage (records may be empty past the last page)

    Raises:
        InvalidMonth: If month is not canonical
        StoreUnavailable: If the store query fails
    """
    window = resolve(month, reference_year)
    page_num = to_positive_int(page, default=DEFAULT_PAGE)
    per_page_num = to_positive_int(per_page, default=default_per_page)

    query = TransactionQuery.for_listing(window, search or "")
    records = store.find(query, offset=(page_num - 1) * per_page_num, limit=per_page_num)
    total_records = store.count(query)

    return TransactionPage(
        records=records,
        total_pages=math.ceil(total_records / per_page_num),
        total_records=total_records,
        page=page_num,
        per_page=per_page_num,
    )
