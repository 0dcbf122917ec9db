"""
Pydantic models for /transactions params and responses.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from utils.normalize import to_positive_int
from .base import BaseParamsModel, CamelResponseModel


# =============================================================================
# PARAM MODELS
# =============================================================================

class TransactionListParams(BaseParamsModel):
    """
    Query params for GET /api/transactions.

    page / perPage never fail validation: anything that is not a positive
    integer becomes None and the listing service applies its defaults.
    """
    month: Optional[str] = None
    search: str = ""
    page: Optional[int] = None
    per_page: Optional[int] = Field(default=None, alias='perPage')

    @field_validator('search', mode='before')
    @classmethod
    def none_to_empty(cls, v):
        return v if v is not None else ""

    @field_validator('page', mode='before')
    @classmethod
    def lenient_page(cls, v):
        return to_positive_int(v, default=None)

    @field_validator('per_page', mode='before')
    @classmethod
    def lenient_per_page(cls, v):
        return to_positive_int(v, default=None)


# =============================================================================
# RESPONSE MODELS (for serialization)
# =============================================================================

class TransactionItem(CamelResponseModel):
    """A single transaction row, using the public field names."""

    id: Optional[int] = None
    title: str
    description: str
    price: float
    date_of_sale: datetime = Field(alias='dateOfSale')
    category: str
    sold: bool


class TransactionListResponse(CamelResponseModel):
    """
    Full response model for /transactions.

    Use: TransactionListResponse.from_page(page).model_dump(by_alias=True, mode='json')
    """

    transactions: List[TransactionItem]
    total_pages: int = Field(alias='totalPages')
    total_records: int = Field(alias='totalRecords')
    page: int
    per_page: int = Field(alias='perPage')
    has_next: bool = Field(alias='hasNext')
    has_prev: bool = Field(alias='hasPrev')

    @classmethod
    def from_page(cls, result) -> 'TransactionListResponse':
        """Factory method to create response from a TransactionPage."""
        return cls(
            transactions=[TransactionItem.model_validate(r.to_dict()) for r in result.records],
            total_pages=result.total_pages,
            total_records=result.total_records,
            page=result.page,
            per_page=result.per_page,
            has_next=result.has_next,
            has_prev=result.has_prev,
        )
