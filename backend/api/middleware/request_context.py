"""
Request context middleware - request ids and usage logging.

Every request gets g.request_id (incoming X-Request-ID or a fresh UUID),
echoed back in the response header. API requests are logged to the
"api.request" logger subject to sampling / watchlist:

Env vars:
  - REQUEST_LOG_ENABLED (default: true)
  - REQUEST_LOG_SAMPLE_RATE (default: 0.0)
  - REQUEST_LOG_ENDPOINTS (comma-separated path prefixes to always log)
"""

import logging
import os
import random
import time
import uuid
from typing import List

from flask import Flask, g, request


logger = logging.getLogger("api.request")

REQUEST_ID_HEADER = 'X-Request-ID'


def _parse_watchlist(raw: str) -> List[str]:
    if not raw:
        return []
    return [p.strip() for p in raw.split(",") if p.strip()]


def _should_log(path: str, watchlist: List[str], sample_rate: float) -> bool:
    if watchlist and any(path.startswith(prefix) for prefix in watchlist):
        return True
    if sample_rate <= 0:
        return False
    if sample_rate >= 1:
        return True
    return random.random() <= sample_rate


def get_request_id():
    return getattr(g, 'request_id', None)


def setup_request_context_middleware(app: Flask) -> None:
    """Register request-id injection and request logging on app."""
    enabled = os.environ.get("REQUEST_LOG_ENABLED", "true").lower() == "true"
    try:
        sample_rate = float(os.environ.get("REQUEST_LOG_SAMPLE_RATE", "0.0"))
    except ValueError:
        sample_rate = 0.0
    watchlist = _parse_watchlist(os.environ.get("REQUEST_LOG_ENDPOINTS", ""))

    @app.before_request
    def _begin_request():
        g.request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        g.request_start = time.perf_counter()

    @app.after_request
    def _finish_request(response):
        request_id = get_request_id()
        if request_id:
            response.headers[REQUEST_ID_HEADER] = request_id

        path = request.path
        if not enabled or not path.startswith("/api"):
            return response
        if not _should_log(path, watchlist, sample_rate):
            return response

        duration_ms = None
        if hasattr(g, "request_start"):
            duration_ms = round((time.perf_counter() - g.request_start) * 1000, 2)

        logger.info(
            "api_request path=%s method=%s status=%s duration_ms=%s request_id=%s",
            path,
            request.method,
            response.status_code,
            duration_ms,
            request_id,
        )
        return response
