"""
Models package - SQLAlchemy models and plain record types
"""
from models.database import db
from models.record import TransactionRecord
from models.transaction import Transaction

__all__ = [
    'db',
    'TransactionRecord',
    'Transaction',
]
