"""
Centralized Constants - SINGLE SOURCE OF TRUTH

Month names, price bucket boundaries, pagination defaults and the seed
source location are defined here and imported elsewhere.

DO NOT duplicate these definitions in other files.
"""

# =============================================================================
# CALENDAR MONTHS
# =============================================================================

# Canonical month names, in calendar order. Matching is exact and
# case-sensitive: "March" is valid, "march" / "Mar" / "3" are not.
MONTH_NAMES = [
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December',
]

# Year used to build month windows for the aggregate endpoints.
# Must stay constant within a deployment.
DEFAULT_REFERENCE_YEAR = 2024


def get_month_index(month_name: str) -> int:
    """
    Get the 1-based calendar index for a canonical month name.

    Args:
        month_name: Full English month name (e.g., 'March')

    Returns:
        1-12, or 0 if the name is not canonical
    """
    if month_name in MONTH_NAMES:
        return MONTH_NAMES.index(month_name) + 1
    return 0


# =============================================================================
# PRICE BUCKETS (bar chart)
# =============================================================================

# (lower bound inclusive, display label). Each bucket ends where the next one
# starts; the last bucket is open-ended.
PRICE_BUCKET_BOUNDS = [
    (0, '0-100'),
    (101, '101-200'),
    (201, '201-300'),
    (301, '301-400'),
    (401, '401-500'),
    (501, '501-600'),
    (601, '601-700'),
    (701, '701-800'),
    (801, '801-900'),
    (901, '901-above'),
]


# =============================================================================
# PAGINATION
# =============================================================================

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 10


# =============================================================================
# SEED DATA
# =============================================================================

SEED_SOURCE_URL = 'https://s3.amazonaws.com/roxiler.com/product_transaction.json'
SEED_TIMEOUT_SECONDS = 30
