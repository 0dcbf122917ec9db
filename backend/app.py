"""
Flask Application Factory - Sale Transaction Insights API

Serves a read-only catalog of sale transactions plus monthly statistics and
chart data. The record store is created here once per app and handed to
the services through app.extensions; nothing else holds it.

Store backends (STORE_BACKEND):
- sql: Flask-SQLAlchemy over DATABASE_URL (PostgreSQL in production)
- memory: process-local list, empty until /api/initialize or `cli.py seed`
"""

import logging
import os

from flask import Flask
from flask_cors import CORS

from config import Config
from models.database import db
from db.store import STORE_EXTENSION_KEY


def _configure_logging(level_name: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _build_store(app: Flask):
    backend = app.config['STORE_BACKEND']

    if backend == 'memory':
        from db.memory_store import InMemoryTransactionStore
        print("   ✓ Using in-memory transaction store")
        return InMemoryTransactionStore()

    if backend != 'sql':
        raise RuntimeError(f"Unknown STORE_BACKEND {backend!r}; expected 'sql' or 'memory'")

    db.init_app(app)

    with app.app_context():
        from models.transaction import Transaction  # noqa: F401  (registers table)

        env = (os.environ.get("ENV") or os.environ.get("FLASK_ENV") or os.environ.get("APP_ENV") or "").lower()
        is_prod = env in {"prod", "production"}
        allow_create = app.config.get("TESTING") or not is_prod
        if allow_create:
            db.create_all()
            print("✓ Database initialized")
        else:
            print("✓ Database ready (schema creation disabled in non-dev environments)")

    from db.sql_store import SqlTransactionStore
    return SqlTransactionStore(db.session)


def create_app(overrides=None, store=None):
    """
    Build the Flask app.

    Args:
        overrides: Config values applied on top of Config (tests, scripts)
        store: Pre-built TransactionStore; skips backend construction
    """
    app = Flask(__name__)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)

    _configure_logging(app.config['LOG_LEVEL'])

    # Initialize CORS - allow all origins on the API
    CORS(app,
         resources={r"/api/*": {"origins": "*"}},
         methods=["GET", "POST", "OPTIONS"],
         allow_headers=["Content-Type", "X-Request-ID"],
         expose_headers=["X-Request-ID"],
         supports_credentials=False,
         send_wildcard=True)

    # === API MIDDLEWARE ===
    from api.middleware import setup_request_context_middleware, setup_error_handlers
    setup_request_context_middleware(app)
    setup_error_handlers(app)

    app.extensions[STORE_EXTENSION_KEY] = store if store is not None else _build_store(app)

    # Register routes
    from routes.analytics import analytics_bp
    app.register_blueprint(analytics_bp, url_prefix='/api')

    return app


if __name__ == '__main__':
    app = create_app()
    port = int(os.environ.get('PORT', 5000))
    app.run(host='0.0.0.0', port=port, debug=app.config['DEBUG'])
