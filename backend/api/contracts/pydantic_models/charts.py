"""
Pydantic models for /statistics, /bar-chart and /pie-chart.
"""

from typing import List, Optional

from pydantic import Field

from .base import BaseParamsModel, CamelResponseModel


class MonthParams(BaseParamsModel):
    """Query params shared by the three aggregate endpoints."""
    month: Optional[str] = None


class SummaryResponse(CamelResponseModel):
    total_amount: float = Field(alias='totalAmount')
    count: int
    total_not_sold: int = Field(alias='totalNotSold')

    @classmethod
    def from_summary(cls, summary) -> 'SummaryResponse':
        return cls(
            total_amount=summary.total_amount,
            count=summary.count,
            total_not_sold=summary.total_not_sold,
        )


class BucketCountItem(CamelResponseModel):
    label: str
    count: int


class CategoryCountItem(CamelResponseModel):
    category: str
    count: int


def dump_list(model_cls, items) -> List[dict]:
    """Serialize service dataclasses through a response model."""
    return [
        model_cls.model_validate(item, from_attributes=True).model_dump(by_alias=True, mode='json')
        for item in items
    ]
