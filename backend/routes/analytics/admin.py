"""
Admin and Health Endpoints

Endpoints:
- /initialize - Fetch seed source and replace the catalog
- /health - Store reachability and record count
- /ping - Liveness check, no store access
"""

import time
from flask import jsonify, current_app
from routes.analytics import analytics_bp
from db.store import get_store
from services.record_filter import TransactionQuery


@analytics_bp.route("/initialize", methods=["GET", "POST"])
def initialize():
    """
    Replace every transaction with the seed source contents.

    Not safe to run concurrently with itself or with reads; intended for a
    maintenance window.
    """
    start = time.time()
    from services.seed_loader import initialize_from_source

    result = initialize_from_source(
        get_store(),
        current_app.config['SEED_SOURCE_URL'],
        timeout=current_app.config['SEED_TIMEOUT_SECONDS'],
    )

    elapsed = time.time() - start
    current_app.logger.info(
        "GET /api/initialize loaded %d records in %.4fs", result['recordsLoaded'], elapsed
    )
    return jsonify({
        "message": "Database initialized with seed data.",
        "recordsLoaded": result['recordsLoaded'],
    })


@analytics_bp.route("/health", methods=["GET"])
def health():
    """Health check endpoint. Store failures surface as 503 via the error envelope."""
    record_count = get_store().count(TransactionQuery())
    return jsonify({
        "status": "healthy",
        "recordCount": record_count,
        "storeBackend": current_app.config['STORE_BACKEND'],
    })


@analytics_bp.route("/ping", methods=["GET"])
def ping():
    """Dead-simple connectivity check - no DB required."""
    return jsonify({"ok": True})
