"""
Monthly aggregates - statistics, bar chart and pie chart data.

All three reducers scan exactly the records whose dateOfSale falls in
[window.start, window.end) of the reference year. This is an exact
month+year range, unlike the year-agnostic listing filter.

Usage:
    from services.aggregation_service import get_summary, get_histogram

    summary = get_summary(store, "March")
    summary.total_amount, summary.count, summary.total_not_sold
"""

import logging
from dataclasses import dataclass
from typing import List

from constants import DEFAULT_REFERENCE_YEAR
from db.store import TransactionStore
from services.month_resolver import resolve
from services.price_buckets import PRICE_BUCKETS
from services.record_filter import TransactionQuery

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT TYPES
# =============================================================================

@dataclass(frozen=True)
class SalesSummary:
    total_amount: float
    count: int
    total_not_sold: int


@dataclass(frozen=True)
class BucketCount:
    label: str
    count: int


@dataclass(frozen=True)
class CategoryCount:
    category: str
    count: int


# =============================================================================
# REDUCERS
# =============================================================================

def get_summary(
    store: TransactionStore,
    month,
    *,
    reference_year: int = DEFAULT_REFERENCE_YEAR,
) -> SalesSummary:
    """
    Total sale amount and count of sold items, plus count of unsold items.

    A record is counted toward exactly one side depending on its sold flag;
    records outside the window contribute to neither.

    Raises:
        InvalidMonth: If month is not canonical
        StoreUnavailable: If a store query fails
    """
    window = resolve(month, reference_year)
    in_window = TransactionQuery.for_window(window)

    sold = in_window.narrow(sold=True)
    summary = SalesSummary(
        total_amount=store.sum_price(sold),
        count=store.count(sold),
        total_not_sold=store.count(in_window.narrow(sold=False)),
    )

    logger.debug(
        "summary month=%s total_amount=%s count=%d not_sold=%d",
        month, summary.total_amount, summary.count, summary.total_not_sold,
    )
    return summary


def get_histogram(
    store: TransactionStore,
    month,
    *,
    reference_year: int = DEFAULT_REFERENCE_YEAR,
) -> List[BucketCount]:
    """
    Count in-window records per fixed price bucket, sold status ignored.

    Returns all ten buckets in fixed order, zero-count buckets included.
    """
    window = resolve(month, reference_year)
    in_window = TransactionQuery.for_window(window)

    return [
        BucketCount(
            label=bucket.label,
            count=store.count(in_window.narrow(price_min=bucket.lower, price_max=bucket.upper)),
        )
        for bucket in PRICE_BUCKETS
    ]


def get_category_counts(
    store: TransactionStore,
    month,
    *,
    reference_year: int = DEFAULT_REFERENCE_YEAR,
) -> List[CategoryCount]:
    """
    Group in-window records by exact category value.

    Categories are not normalized; order is whatever the store returns.
    Empty window returns [].
    """
    window = resolve(month, reference_year)
    in_window = TransactionQuery.for_window(window)

    return [
        CategoryCount(category=category, count=count)
        for category, count in store.count_by_category(in_window)
    ]
