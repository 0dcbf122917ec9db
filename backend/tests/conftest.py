"""
Root pytest configuration for backend tests.

Provides:
- Shared fixtures (make_record, sample_records, memory_store, app, client)
- A SQLite-backed app for SQL store tests (sql_app)
"""

import sys
from datetime import datetime, timezone
from pathlib import Path

# Add backend directory to Python path so imports like
# `from services.month_resolver import ...` and `from db.store import ...` work
backend_dir = Path(__file__).parent.parent
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

import pytest

REFERENCE_YEAR = 2024


def utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


@pytest.fixture
def make_record():
    """Factory for TransactionRecord with sensible defaults."""
    from models.record import TransactionRecord

    def _make(
        title="Item",
        description="Description",
        price=10.0,
        date_of_sale=None,
        category="electronics",
        sold=True,
    ):
        return TransactionRecord(
            title=title,
            description=description,
            price=price,
            date_of_sale=date_of_sale or utc(REFERENCE_YEAR, 3, 15),
            category=category,
            sold=sold,
        )

    return _make


@pytest.fixture
def sample_records(make_record):
    """
    Mixed catalog. March 2024 (the aggregate window) holds exactly the first
    three records; the 2021 backpack is March but outside the window.
    """
    return [
        make_record("Leather Bag", "Brown leather", 100, utc(2024, 3, 5), "accessories", True),
        make_record("Running Shoes", "Shoes that fit in a gym bag", 50, utc(2024, 3, 10), "footwear", False),
        make_record("Laptop", "Fast and light", 200, utc(2024, 3, 31, 23, 59, 59), "electronics", True),
        make_record("Backpack", "School BAG with pockets", 1000, utc(2021, 3, 15), "accessories", True),
        make_record("Phone", "Smart phone", 101, utc(2024, 4, 1), "electronics", False),
        make_record("Jacket", "Warm winter jacket", 901, utc(2024, 2, 29), "men's clothing", True),
        make_record("Ring", "Gold ring", 350, utc(2024, 12, 31, 12), "jewelery", True),
    ]


@pytest.fixture
def memory_store(sample_records):
    from db.memory_store import InMemoryTransactionStore
    return InMemoryTransactionStore(sample_records)


@pytest.fixture
def app(memory_store):
    """Create test Flask application backed by the in-memory store."""
    from app import create_app

    app = create_app(
        {
            'TESTING': True,
            'STORE_BACKEND': 'memory',
            'REFERENCE_YEAR': REFERENCE_YEAR,
            'SEED_SOURCE_URL': 'https://seed.example.test/transactions.json',
        },
        store=memory_store,
    )
    return app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def sql_app():
    """Flask app using the SQL store on in-memory SQLite."""
    from app import create_app
    from models.database import db

    app = create_app({
        'TESTING': True,
        'STORE_BACKEND': 'sql',
        'SQLALCHEMY_DATABASE_URI': 'sqlite://',
        'SQLALCHEMY_ENGINE_OPTIONS': {},
        'REFERENCE_YEAR': REFERENCE_YEAR,
    })
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def sql_store(sql_app, sample_records):
    """SQL store loaded with sample_records, inside an app context."""
    from db.store import get_store

    with sql_app.app_context():
        store = get_store()
        store.replace_all(sample_records)
        yield store
