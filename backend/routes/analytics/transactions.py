"""
Transaction List Endpoint

Endpoints:
- /transactions - Paginated transactions for a month, with free-text search
"""

import time
from flask import request, jsonify, current_app
from routes.analytics import analytics_bp, reference_year
from api.contracts import TransactionListParams, TransactionListResponse
from db.store import get_store


@analytics_bp.route("/transactions", methods=["GET"])
def list_transactions():
    """
    List transactions sold in a calendar month (any year).

    Query params:
        - month: Full month name, case-sensitive (required, e.g. 'March')
        - search: Case-insensitive text matched against title and description
        - page: Page number (default 1; invalid values fall back to 1)
        - perPage: Records per page (default 10; invalid values fall back)

    Example:
        GET /api/transactions?month=March&search=bag&page=2&perPage=10
    """
    start = time.time()
    from services.transaction_listing import list_transactions as fetch_page

    params = TransactionListParams.model_validate(request.args.to_dict())

    result = fetch_page(
        get_store(),
        params.month,
        params.search,
        params.page,
        params.per_page,
        reference_year=reference_year(),
        default_per_page=current_app.config['DEFAULT_PER_PAGE'],
    )
    response = TransactionListResponse.from_page(result).model_dump(by_alias=True, mode='json')

    elapsed = time.time() - start
    current_app.logger.debug(
        "GET /api/transactions month=%s page=%d completed in %.4fs",
        params.month, result.page, elapsed,
    )
    return jsonify(response)
