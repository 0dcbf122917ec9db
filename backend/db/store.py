"""
TransactionStore - the capability set the core needs from persistence.

Implementations:
- db.sql_store.SqlTransactionStore (Flask-SQLAlchemy, production)
- db.memory_store.InMemoryTransactionStore (tests, STORE_BACKEND=memory)

The Flask app holds exactly one store in app.extensions; services receive it
as an explicit argument and never look it up themselves.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Tuple

from flask import current_app

from models.record import TransactionRecord
from services.record_filter import TransactionQuery

STORE_EXTENSION_KEY = 'transaction_store'


class StoreUnavailable(Exception):
    """Record store (or bulk-load source) could not be reached or queried."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class TransactionStore(ABC):

    @abstractmethod
    def replace_all(self, records: Iterable[TransactionRecord]) -> int:
        """Clear every record, then insert records. Returns the number inserted."""

    @abstractmethod
    def find(
        self,
        query: TransactionQuery,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> List[TransactionRecord]:
        """Matching records in insertion order."""

    @abstractmethod
    def count(self, query: TransactionQuery) -> int:
        ...

    @abstractmethod
    def sum_price(self, query: TransactionQuery) -> float:
        """Sum of price over matching records; 0 when none match."""

    @abstractmethod
    def count_by_category(self, query: TransactionQuery) -> List[Tuple[str, int]]:
        """(category, count) for each distinct category among matching records."""


def get_store() -> TransactionStore:
    """Store registered on the current Flask app."""
    return current_app.extensions[STORE_EXTENSION_KEY]
