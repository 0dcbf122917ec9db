"""
TransactionRecord - store-agnostic view of one sale transaction.

Both store implementations return these, so services never touch ORM
instances directly. `date_of_sale` is always timezone-aware UTC.
"""
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class TransactionRecord:
    title: str
    description: str
    price: float
    date_of_sale: datetime
    category: str
    sold: bool
    id: Optional[int] = None

    def with_id(self, record_id: int) -> 'TransactionRecord':
        return replace(self, id=record_id)

    def content_key(self):
        """Field values ignoring the store-assigned identity."""
        return (
            self.title,
            self.description,
            self.price,
            self.date_of_sale,
            self.category,
            self.sold,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary using the public field names."""
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'price': self.price,
            'dateOfSale': self.date_of_sale,
            'category': self.category,
            'sold': self.sold,
        }
