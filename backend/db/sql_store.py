"""
SQL TransactionStore backed by Flask-SQLAlchemy.

TransactionQuery fields are translated into SQLAlchemy conditions, one
condition per set field, combined with and_(). Dates are stored as naive UTC, so aware
bounds are converted before comparison.

Every SQLAlchemyError is re-raised as StoreUnavailable with the original
exception chained; nothing is retried here.
"""

import functools
import logging
from datetime import datetime, timezone
from typing import Any, Iterable, List, Tuple

from sqlalchemy import and_, extract, func, or_
from sqlalchemy.exc import SQLAlchemyError

from db.store import StoreUnavailable, TransactionStore
from models.record import TransactionRecord
from models.transaction import Transaction
from services.record_filter import TransactionQuery

logger = logging.getLogger(__name__)


def _naive_utc(instant: datetime) -> datetime:
    if instant.tzinfo is None:
        return instant
    return instant.astimezone(timezone.utc).replace(tzinfo=None)


def build_conditions(query: TransactionQuery) -> List[Any]:
    """
    Build SQLAlchemy filter conditions from a TransactionQuery.

    Returns:
        List of SQLAlchemy conditions to be combined with and_().
    """
    conditions: List[Any] = []

    if query.month_index is not None:
        conditions.append(extract('month', Transaction.date_of_sale) == query.month_index)

    if query.search:
        conditions.append(or_(
            Transaction.title.icontains(query.search, autoescape=True),
            Transaction.description.icontains(query.search, autoescape=True),
        ))

    if query.date_from is not None:
        conditions.append(Transaction.date_of_sale >= _naive_utc(query.date_from))
    if query.date_to is not None:
        conditions.append(Transaction.date_of_sale < _naive_utc(query.date_to))

    if query.sold is not None:
        conditions.append(Transaction.sold.is_(query.sold))

    if query.category is not None:
        conditions.append(Transaction.category == query.category)

    if query.price_min is not None:
        conditions.append(Transaction.price >= query.price_min)
    if query.price_max is not None:
        conditions.append(Transaction.price < query.price_max)

    return conditions


def _translate_errors(operation: str):
    def decorator(fn):
        @functools.wraps(fn)
        def wrapper(self, *args, **kwargs):
            try:
                return fn(self, *args, **kwargs)
            except SQLAlchemyError as e:
                self.session.rollback()
                logger.exception("store_error operation=%s", operation)
                raise StoreUnavailable(f"Record store failed during {operation}", cause=e) from e
        return wrapper
    return decorator


class SqlTransactionStore(TransactionStore):
    """
    Args:
        session: SQLAlchemy session (db.session inside a Flask app context)
    """

    def __init__(self, session):
        self.session = session

    def _filtered(self, query: TransactionQuery, *entities):
        q = self.session.query(*entities) if entities else self.session.query(Transaction)
        conditions = build_conditions(query)
        if conditions:
            q = q.filter(and_(*conditions))
        return q

    @_translate_errors("replace_all")
    def replace_all(self, records: Iterable[TransactionRecord]) -> int:
        rows = [Transaction.from_record(r) for r in records]
        self.session.query(Transaction).delete(synchronize_session=False)
        self.session.add_all(rows)
        self.session.commit()
        return len(rows)

    @_translate_errors("find")
    def find(self, query, offset=0, limit=None) -> List[TransactionRecord]:
        q = self._filtered(query).order_by(Transaction.id).offset(offset)
        if limit is not None:
            q = q.limit(limit)
        return [row.to_record() for row in q.all()]

    @_translate_errors("count")
    def count(self, query) -> int:
        return self._filtered(query, func.count(Transaction.id)).scalar() or 0

    @_translate_errors("sum_price")
    def sum_price(self, query) -> float:
        total = self._filtered(query, func.coalesce(func.sum(Transaction.price), 0)).scalar()
        return float(total or 0)

    @_translate_errors("count_by_category")
    def count_by_category(self, query) -> List[Tuple[str, int]]:
        rows = (
            self._filtered(query, Transaction.category, func.count(Transaction.id))
            .group_by(Transaction.category)
            .all()
        )
        return [(category, int(count)) for category, count in rows]
