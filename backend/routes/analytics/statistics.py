"""
Statistics Endpoint

Endpoints:
- /statistics - Sold amount / count and unsold count for a month
"""

from flask import request, jsonify
from routes.analytics import analytics_bp, reference_year
from api.contracts import MonthParams, SummaryResponse
from db.store import get_store
from services.aggregation_service import get_summary


@analytics_bp.route("/statistics", methods=["GET"])
def statistics():
    """
    Monthly sales summary over [start, end) of the month in the reference year.

    Query params:
        - month: Full month name, case-sensitive (required)

    Response:
        {"totalAmount": 300.0, "count": 2, "totalNotSold": 1}
    """
    params = MonthParams.model_validate(request.args.to_dict())
    summary = get_summary(get_store(), params.month, reference_year=reference_year())
    return jsonify(SummaryResponse.from_summary(summary).model_dump(by_alias=True, mode='json'))
