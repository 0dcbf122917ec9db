"""
Error envelope middleware - Standardize all error responses.

Provides consistent error response format:
{
    "error": {
        "code": "INVALID_MONTH",
        "message": "Invalid month value",
        "requestId": "uuid",
        "field": "month"
    }
}

Domain exceptions raised by services propagate out of the route handlers
and are mapped here; routes do not catch them.
"""

import logging
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from api.middleware.request_context import get_request_id, REQUEST_ID_HEADER
from db.store import StoreUnavailable
from services.month_resolver import InvalidMonth
from services.seed_loader import SeedDataError, SeedSourceUnavailable
from utils.normalize import ValidationError


logger = logging.getLogger('api.middleware.error')


# Error codes reference
ERROR_CODES = {
    # Client errors (4xx)
    "BAD_REQUEST": 400,
    "NOT_FOUND": 404,
    "METHOD_NOT_ALLOWED": 405,
    "INVALID_MONTH": 400,
    "INVALID_PARAMS": 400,
    "INVALID_SEED_DATA": 400,

    # Server errors (5xx)
    "INTERNAL_ERROR": 500,
    "SERVICE_UNAVAILABLE": 503,
}


def make_error_response(
    code: str,
    message: str,
    status_code: int = None,
    field: str = None,
):
    """
    Create a standardized error response.

    Args:
        code: Error code (e.g., "INVALID_MONTH")
        message: Human-readable error message
        status_code: HTTP status code (defaults based on error code)
        field: Optional field name that caused the error

    Returns:
        Tuple of (response, status_code)
    """
    request_id = get_request_id()

    if status_code is None:
        status_code = ERROR_CODES.get(code, 500)

    error = {
        "error": {
            "code": code,
            "message": message,
            "requestId": request_id,
        }
    }
    if field:
        error["error"]["field"] = field

    response = jsonify(error)
    if request_id:
        response.headers[REQUEST_ID_HEADER] = request_id

    return response, status_code


def setup_error_handlers(app: Flask) -> None:
    """
    Set up standardized error handlers on Flask app.

    Handles:
    - InvalidMonth / SeedDataError / other ValidationError (400)
    - StoreUnavailable, including SeedSourceUnavailable (503)
    - HTTP exceptions (404, 405, etc.) with their own status
    - Unhandled Python exceptions (500)
    """

    @app.errorhandler(InvalidMonth)
    def handle_invalid_month(error):
        return make_error_response("INVALID_MONTH", str(error), field=error.field)

    @app.errorhandler(SeedDataError)
    def handle_seed_data_error(error):
        return make_error_response("INVALID_SEED_DATA", str(error), field=error.field)

    @app.errorhandler(ValidationError)
    def handle_validation_error(error):
        return make_error_response("INVALID_PARAMS", str(error), field=error.field)

    @app.errorhandler(StoreUnavailable)
    def handle_store_unavailable(error):
        logger.error(
            "store_unavailable request_id=%s error=%s cause=%r",
            get_request_id(), error, error.cause,
        )
        if isinstance(error, SeedSourceUnavailable):
            message = "Failed to initialize database."
        else:
            message = "Record store is unavailable"
        return make_error_response("SERVICE_UNAVAILABLE", message)

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        # "Not Found" -> "NOT_FOUND"
        code = error.name.upper().replace(' ', '_')
        return make_error_response(code, error.description, status_code=error.code)

    @app.errorhandler(Exception)
    def handle_generic_error(error):
        logger.exception(
            "Unhandled error: %s", error,
            extra={
                "event": "unhandled_error",
                "request_id": get_request_id(),
                "error_type": type(error).__name__,
            }
        )
        return make_error_response("INTERNAL_ERROR", "An unexpected error occurred")
