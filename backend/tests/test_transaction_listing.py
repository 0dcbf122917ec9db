"""
Transaction Listing Tests

Invariants tested:
1. page size never exceeds perPage
2. totalPages == ceil(matchCount / perPage)
3. invalid page / perPage fall back to 1 / 10
4. month is validated before the store is touched
5. insertion order is preserved
"""

import math
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from db.memory_store import InMemoryTransactionStore
from services.month_resolver import InvalidMonth
from services.transaction_listing import list_transactions


def _march_catalog(make_record, n):
    return InMemoryTransactionStore([
        make_record(title=f"Item {i}", date_of_sale=datetime(2020 + i % 5, 3, 1 + i % 28, tzinfo=timezone.utc))
        for i in range(n)
    ])


class TestPagination:

    def test_second_page_of_ten(self, make_record):
        store = _march_catalog(make_record, 25)

        result = list_transactions(store, "March", "", 2, 10)

        assert len(result.records) == 10
        assert [r.title for r in result.records] == [f"Item {i}" for i in range(10, 20)]
        assert result.total_pages == 3
        assert result.total_records == 25

    @pytest.mark.parametrize("n", [0, 1, 9, 10, 11, 20, 21])
    def test_total_pages_is_ceiling(self, make_record, n):
        store = _march_catalog(make_record, n)

        result = list_transactions(store, "March", page=2, per_page=10)

        assert len(result.records) <= 10
        assert result.total_pages == math.ceil(n / 10)

    def test_page_past_end_is_empty_not_error(self, make_record):
        store = _march_catalog(make_record, 5)

        result = list_transactions(store, "March", page=7, per_page=10)

        assert result.records == []
        assert result.total_pages == 1
        assert result.page == 7

    @pytest.mark.parametrize("page,per_page", [
        ("abc", "xyz"), ("0", "0"), ("-2", "-5"), (None, None), ("", ""), ("1.5", "2.5"),
    ])
    def test_invalid_pagination_uses_defaults(self, make_record, page, per_page):
        store = _march_catalog(make_record, 15)

        result = list_transactions(store, "March", "", page, per_page)

        assert result.page == 1
        assert result.per_page == 10
        assert len(result.records) == 10

    def test_string_numbers_are_parsed(self, make_record):
        store = _march_catalog(make_record, 15)
        result = list_transactions(store, "March", "", "2", "5")
        assert (result.page, result.per_page) == (2, 5)
        assert [r.title for r in result.records] == [f"Item {i}" for i in range(5, 10)]

    def test_default_per_page_override(self, make_record):
        store = _march_catalog(make_record, 15)
        result = list_transactions(store, "March", per_page="bad", default_per_page=4)
        assert result.per_page == 4
        assert result.total_pages == 4

    def test_has_next_and_prev(self, make_record):
        store = _march_catalog(make_record, 25)
        first = list_transactions(store, "March", page=1)
        last = list_transactions(store, "March", page=3)
        assert first.has_next and not first.has_prev
        assert last.has_prev and not last.has_next


class TestFiltering:

    def test_bag_search_in_march(self, memory_store):
        result = list_transactions(memory_store, "March", "bag")
        assert [r.title for r in result.records] == ["Leather Bag", "Running Shoes", "Backpack"]
        assert result.total_records == 3

    def test_empty_search_returns_all_march_records_any_year(self, memory_store):
        result = list_transactions(memory_store, "March", "")
        assert [r.title for r in result.records] == ["Leather Bag", "Running Shoes", "Laptop", "Backpack"]

    def test_none_search_treated_as_empty(self, memory_store):
        assert list_transactions(memory_store, "March", None).total_records == 4

    def test_records_carry_store_ids(self, memory_store):
        result = list_transactions(memory_store, "April")
        assert [r.id for r in result.records] == [5]


class TestValidation:

    def test_invalid_month_raises_before_store_access(self):
        store = MagicMock()
        with pytest.raises(InvalidMonth):
            list_transactions(store, "march")
        store.find.assert_not_called()
        store.count.assert_not_called()
