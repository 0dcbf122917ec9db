"""
Price Buckets - fixed histogram partition for the bar chart.

Pure module (no I/O). Buckets are half-open [lower, upper) where upper is
the next bucket's lower bound, so every non-negative price lands in exactly
one bucket:

    100    -> '0-100'
    100.5  -> '0-100'
    101    -> '101-200'
    1000   -> '901-above'
"""

from dataclasses import dataclass
from typing import List, Optional

from constants import PRICE_BUCKET_BOUNDS


@dataclass(frozen=True)
class PriceBucket:
    label: str
    lower: float
    upper: Optional[float] = None   # None = unbounded

    def contains(self, price: float) -> bool:
        if price < self.lower:
            return False
        return self.upper is None or price < self.upper


def _build_buckets() -> List[PriceBucket]:
    buckets = []
    for i, (lower, label) in enumerate(PRICE_BUCKET_BOUNDS):
        upper = PRICE_BUCKET_BOUNDS[i + 1][0] if i + 1 < len(PRICE_BUCKET_BOUNDS) else None
        buckets.append(PriceBucket(label=label, lower=lower, upper=upper))
    return buckets


PRICE_BUCKETS = tuple(_build_buckets())
