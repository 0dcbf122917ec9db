"""
Pydantic models for API params and responses.

Usage:
    from api.contracts.pydantic_models import TransactionListParams

    params = TransactionListParams.model_validate(request.args.to_dict())
"""

from .base import BaseParamsModel, CamelResponseModel
from .transactions import TransactionListParams, TransactionItem, TransactionListResponse
from .charts import MonthParams, SummaryResponse, BucketCountItem, CategoryCountItem, dump_list

__all__ = [
    'BaseParamsModel',
    'CamelResponseModel',
    'TransactionListParams',
    'TransactionItem',
    'TransactionListResponse',
    'MonthParams',
    'SummaryResponse',
    'BucketCountItem',
    'CategoryCountItem',
    'dump_list',
]
