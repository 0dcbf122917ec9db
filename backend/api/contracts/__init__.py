"""
Contract package - request param and response models for the public API.
"""

from .pydantic_models import (
    TransactionListParams,
    TransactionListResponse,
    MonthParams,
    SummaryResponse,
    BucketCountItem,
    CategoryCountItem,
    dump_list,
)

__all__ = [
    'TransactionListParams',
    'TransactionListResponse',
    'MonthParams',
    'SummaryResponse',
    'BucketCountItem',
    'CategoryCountItem',
    'dump_list',
]
