"""
In-memory TransactionStore.

Records live in a plain list in insertion order; ids are assigned
sequentially starting at 1 on every replace. No locking: a read running
concurrently with replace_all may see the old or the new list.
"""

from collections import Counter
from typing import Iterable, List, Optional, Tuple

from db.store import TransactionStore
from models.record import TransactionRecord
from services.record_filter import TransactionQuery


class InMemoryTransactionStore(TransactionStore):

    def __init__(self, records: Optional[Iterable[TransactionRecord]] = None):
        self._records: List[TransactionRecord] = []
        if records is not None:
            self.replace_all(records)

    def replace_all(self, records: Iterable[TransactionRecord]) -> int:
        self._records = []
        self._records = [
            record.with_id(i)
            for i, record in enumerate(records, start=1)
        ]
        return len(self._records)

    def _scan(self, query: TransactionQuery) -> List[TransactionRecord]:
        return [r for r in self._records if query.matches(r)]

    def find(self, query, offset=0, limit=None):
        matched = self._scan(query)
        if limit is None:
            return matched[offset:]
        return matched[offset:offset + limit]

    def count(self, query):
        return len(self._scan(query))

    def sum_price(self, query):
        return sum(r.price for r in self._scan(query))

    def count_by_category(self, query) -> List[Tuple[str, int]]:
        counts = Counter(r.category for r in self._scan(query))
        return list(counts.items())
