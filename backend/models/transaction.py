"""
Transaction Model - Maps to seed JSON fields and the transactions table

Seed Field Mapping:
  JSON Field     → DB Column        Notes
  ─────────────────────────────────────────────────────────────
  title          → title            Required
  description    → description      Required
  price          → price            Required, non-negative
  dateOfSale     → date_of_sale     Required, stored as naive UTC
  category       → category         Required, stored verbatim
  sold           → sold             Required
  id             → (ignored)        Identity is assigned by the database
"""
from datetime import timezone

from models.database import db
from models.record import TransactionRecord


class Transaction(db.Model):
    __tablename__ = 'transactions'

    id = db.Column(db.Integer, primary_key=True)

    title = db.Column(db.Text, nullable=False)
    description = db.Column(db.Text, nullable=False)
    price = db.Column(db.Float, nullable=False)
    date_of_sale = db.Column(db.DateTime, index=True, nullable=False)
    category = db.Column(db.String(255), index=True, nullable=False)
    sold = db.Column(db.Boolean, index=True, nullable=False)

    @classmethod
    def from_record(cls, record: TransactionRecord) -> 'Transaction':
        """Build an ORM row from a record; the id is left to the database."""
        return cls(
            title=record.title,
            description=record.description,
            price=record.price,
            date_of_sale=record.date_of_sale.astimezone(timezone.utc).replace(tzinfo=None),
            category=record.category,
            sold=record.sold,
        )

    def to_record(self) -> TransactionRecord:
        return TransactionRecord(
            id=self.id,
            title=self.title,
            description=self.description,
            price=self.price,
            date_of_sale=self.date_of_sale.replace(tzinfo=timezone.utc),
            category=self.category,
            sold=bool(self.sold),
        )

    def __repr__(self):
        return f'<Transaction {self.id}: {self.title} ({self.date_of_sale})>'
