"""
Seed Loader - bulk replace of the transaction catalog.

Source: a JSON array of product transactions (default: the public
product_transaction.json on S3). Each element looks like:

    {
        "id": 1,
        "title": "Fjallraven Foldsack No. 1 Backpack, Fits 15 Laptops",
        "price": 329.85,
        "description": "Your perfect pack for everyday use ...",
        "category": "men's clothing",
        "image": "https://...",
        "sold": false,
        "dateOfSale": "2021-11-27T20:29:54+05:30"
    }

The source id and image are ignored; ids are assigned by the store.

Flow:
    fetch_seed_records(url)  -> list of raw dicts (SeedSourceUnavailable)
    parse_seed_records(raw)  -> list of TransactionRecord (SeedDataError)
    load_seed_data(store, raw) -> {"recordsLoaded": n}

All records are validated before the store is cleared, so a bad batch
leaves the existing catalog untouched.
"""

import logging
import time
from typing import Any, Dict, List, Optional, Sequence

import requests
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from constants import SEED_SOURCE_URL, SEED_TIMEOUT_SECONDS
from db.store import StoreUnavailable, TransactionStore
from models.record import TransactionRecord
from utils.normalize import ValidationError, to_utc_datetime

logger = logging.getLogger(__name__)


class SeedSourceUnavailable(StoreUnavailable):
    """Remote seed source could not be fetched or did not return a JSON array."""
    pass


class SeedDataError(ValidationError):
    """A source record is missing a field or has an invalid value."""
    pass


class SeedTransaction(BaseModel):
    """One raw source record. Every field is required."""
    model_config = ConfigDict(
        populate_by_name=True,
        extra='ignore',
    )

    title: str
    description: str
    price: float = Field(ge=0)
    date_of_sale: Any = Field(alias='dateOfSale')
    category: str
    sold: bool

    @field_validator('date_of_sale', mode='before')
    @classmethod
    def parse_date_of_sale(cls, v):
        return to_utc_datetime(v, field='dateOfSale')

    def to_record(self) -> TransactionRecord:
        return TransactionRecord(
            title=self.title,
            description=self.description,
            price=self.price,
            date_of_sale=self.date_of_sale,
            category=self.category,
            sold=self.sold,
        )


def fetch_seed_records(
    url: str = SEED_SOURCE_URL,
    *,
    timeout: float = SEED_TIMEOUT_SECONDS,
    session: Optional[requests.Session] = None,
) -> List[Dict[str, Any]]:
    """
    Download the raw seed array.

    Raises:
        SeedSourceUnavailable: Network/HTTP failure or non-array payload.
    """
    http = session or requests.Session()
    start = time.time()
    try:
        response = http.get(url, timeout=timeout)
        response.raise_for_status()
        payload = response.json()
    except (requests.RequestException, ValueError) as e:
        logger.error("seed_fetch_failed url=%s err=%s", url, str(e)[:200])
        raise SeedSourceUnavailable(f"Failed to fetch seed data from {url}", cause=e) from e

    if not isinstance(payload, list):
        raise SeedSourceUnavailable(
            f"Seed source returned {type(payload).__name__}, expected a JSON array"
        )

    logger.info(
        "seed_fetch_complete url=%s records=%d duration_s=%.2f",
        url, len(payload), time.time() - start,
    )
    return payload


def parse_seed_records(source_records: Sequence[Any]) -> List[TransactionRecord]:
    """
    Validate every raw record.

    Raises:
        SeedDataError: On the first invalid record (field names its index).
    """
    records = []
    for i, raw in enumerate(source_records):
        try:
            records.append(SeedTransaction.model_validate(raw).to_record())
        except PydanticValidationError as e:
            first = e.errors()[0]
            loc = ".".join(str(part) for part in first.get('loc', ()))
            raise SeedDataError(
                f"Invalid seed record at index {i}: {loc or 'record'}: {first.get('msg')}",
                field=f"sourceRecords[{i}]" + (f".{loc}" if loc else ""),
                received_value=first.get('input'),
            ) from e
    return records


def load_seed_data(store: TransactionStore, source_records: Sequence[Any]) -> Dict[str, int]:
    """
    Replace the entire catalog with source_records.

    Loading the same input twice yields the same content (ids aside).

    Raises:
        SeedDataError: Invalid input (store untouched)
        StoreUnavailable: Store failure during replace
    """
    records = parse_seed_records(source_records)
    loaded = store.replace_all(records)
    logger.info("seed_load_complete records=%d", loaded)
    return {"recordsLoaded": loaded}


def initialize_from_source(
    store: TransactionStore,
    url: str = SEED_SOURCE_URL,
    *,
    timeout: float = SEED_TIMEOUT_SECONDS,
) -> Dict[str, int]:
    """Fetch the remote seed array and bulk-load it."""
    return load_seed_data(store, fetch_seed_records(url, timeout=timeout))
