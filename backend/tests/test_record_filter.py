"""
Record Filter Tests

Covers the listing predicate (year-agnostic month + search) and the
TransactionQuery fields used by the aggregates.
"""

from datetime import datetime, timedelta, timezone

import pytest

from services.month_resolver import resolve
from services.record_filter import TransactionQuery, matches, text_contains


def utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


class TestMatches:

    def test_month_match_ignores_year(self, make_record):
        window = resolve("March", 2024)
        assert matches(make_record(date_of_sale=utc(2019, 3, 2)), window)
        assert matches(make_record(date_of_sale=utc(2024, 3, 2)), window)

    def test_other_month_never_matches(self, make_record):
        window = resolve("March", 2024)
        record = make_record(title="bag", date_of_sale=utc(2024, 4, 1))
        assert not matches(record, window)
        assert not matches(record, window, "bag")

    def test_empty_search_matches_everything_in_month(self, make_record):
        window = resolve("March")
        assert matches(make_record(title="anything"), window, "")

    def test_search_title_case_insensitive(self, make_record):
        window = resolve("March")
        assert matches(make_record(title="Leather BAG"), window, "bag")

    def test_search_description_case_insensitive(self, make_record):
        window = resolve("March")
        assert matches(make_record(title="Shoes", description="fits in a Bag"), window, "BAG")

    def test_search_miss(self, make_record):
        window = resolve("March")
        assert not matches(make_record(title="Shoes", description="Red"), window, "bag")

    def test_search_is_literal_not_pattern(self, make_record):
        window = resolve("March")
        assert not matches(make_record(title="abc"), window, "a.c")
        assert matches(make_record(title="price (USD)"), window, "(usd)")

    def test_month_uses_utc(self, make_record):
        window = resolve("March")
        # 2024-04-01 02:00 at +05:30 is still March 31 in UTC
        local = datetime(2024, 4, 1, 2, 0, tzinfo=timezone(timedelta(hours=5, minutes=30)))
        assert matches(make_record(date_of_sale=local), window)


class TestTransactionQuery:

    def test_empty_query_matches_all(self, sample_records):
        assert all(TransactionQuery().matches(r) for r in sample_records)

    def test_for_listing(self, sample_records):
        query = TransactionQuery.for_listing(resolve("March"), "bag")
        titles = [r.title for r in sample_records if query.matches(r)]
        assert titles == ["Leather Bag", "Running Shoes", "Backpack"]

    def test_for_window_is_exact_range(self, sample_records):
        query = TransactionQuery.for_window(resolve("March", 2024))
        titles = [r.title for r in sample_records if query.matches(r)]
        assert titles == ["Leather Bag", "Running Shoes", "Laptop"]

    def test_sold_flag(self, sample_records):
        query = TransactionQuery.for_window(resolve("March", 2024)).narrow(sold=False)
        assert [r.title for r in sample_records if query.matches(r)] == ["Running Shoes"]

    def test_price_bounds_half_open(self, make_record):
        query = TransactionQuery(price_min=101, price_max=201)
        assert not query.matches(make_record(price=100.99))
        assert query.matches(make_record(price=101))
        assert query.matches(make_record(price=200.5))
        assert not query.matches(make_record(price=201))

    def test_unbounded_price_max(self, make_record):
        assert TransactionQuery(price_min=901).matches(make_record(price=1_000_000))

    def test_category_exact(self, make_record):
        query = TransactionQuery(category="electronics")
        assert query.matches(make_record(category="electronics"))
        assert not query.matches(make_record(category="Electronics"))
        assert not query.matches(make_record(category="electronics "))

    def test_narrow_returns_new_query(self):
        base = TransactionQuery(month_index=3)
        narrowed = base.narrow(sold=True)
        assert base.sold is None
        assert narrowed.sold is True
        assert narrowed.month_index == 3

    def test_query_is_immutable(self):
        with pytest.raises(Exception):
            TransactionQuery().search = "x"


def test_text_contains_none_haystack():
    assert text_contains(None, "x") is False
