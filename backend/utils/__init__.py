"""
Utility modules for the backend.
"""
from .normalize import (
    ValidationError,
    to_int,
    to_positive_int,
    to_utc_datetime,
)

__all__ = [
    'ValidationError',
    'to_int',
    'to_positive_int',
    'to_utc_datetime',
]
