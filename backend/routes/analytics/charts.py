"""
Chart Endpoints

Endpoints:
- /bar-chart - Count of in-month transactions per fixed price bucket
- /pie-chart - Count of in-month transactions per category
"""

from flask import request, jsonify
from routes.analytics import analytics_bp, reference_year
from api.contracts import MonthParams, BucketCountItem, CategoryCountItem, dump_list
from db.store import get_store
from services.aggregation_service import get_histogram, get_category_counts


@analytics_bp.route("/bar-chart", methods=["GET"])
def bar_chart():
    """
    Price-range histogram for a month.

    Always returns the ten buckets in order (0-100 ... 901-above),
    including empty ones.
    """
    params = MonthParams.model_validate(request.args.to_dict())
    buckets = get_histogram(get_store(), params.month, reference_year=reference_year())
    return jsonify(dump_list(BucketCountItem, buckets))


@analytics_bp.route("/pie-chart", methods=["GET"])
def pie_chart():
    """
    Category breakdown for a month.

    One entry per distinct category present; [] for a month with no sales.
    """
    params = MonthParams.model_validate(request.args.to_dict())
    categories = get_category_counts(get_store(), params.month, reference_year=reference_year())
    return jsonify(dump_list(CategoryCountItem, categories))
