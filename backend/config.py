import os
from urllib.parse import urlparse, parse_qs, urlencode, urlunparse
from dotenv import load_dotenv

from constants import (
    DEFAULT_PER_PAGE,
    DEFAULT_REFERENCE_YEAR,
    SEED_SOURCE_URL,
    SEED_TIMEOUT_SECONDS,
)

load_dotenv()

DEFAULT_DATABASE_URL = 'postgresql://localhost:5432/transactions'


def get_database_url():
    """
    Get and normalize DATABASE_URL.

    PostgreSQL is the production database. SQLite URLs are accepted for
    local development and tests.

    For Render/cloud PostgreSQL, automatically adds sslmode=require if missing.
    """
    database_url = os.getenv('DATABASE_URL') or DEFAULT_DATABASE_URL

    valid_prefixes = ('postgresql://', 'postgresql+psycopg2://', 'postgres://', 'sqlite://')
    if not database_url.startswith(valid_prefixes):
        raise RuntimeError(
            f"DATABASE_URL must be a PostgreSQL or SQLite URL, got: {database_url[:50]}..."
        )

    if database_url.startswith('sqlite://'):
        return database_url

    # Handle Render's postgres:// format (SQLAlchemy requires postgresql://)
    if database_url.startswith('postgres://'):
        database_url = database_url.replace('postgres://', 'postgresql://', 1)

    # For cloud PostgreSQL (non-localhost), ensure SSL is enabled
    parsed = urlparse(database_url)
    is_localhost = parsed.hostname in ('localhost', '127.0.0.1', None)

    if not is_localhost:
        query_params = parse_qs(parsed.query)
        if 'sslmode' not in query_params:
            query_params['sslmode'] = ['require']
            new_query = urlencode(query_params, doseq=True)
            database_url = urlunparse((
                parsed.scheme, parsed.netloc, parsed.path,
                parsed.params, new_query, parsed.fragment
            ))

    return database_url


def get_engine_options(database_url):
    """Pool settings for PostgreSQL; SQLite uses the driver defaults."""
    if database_url.startswith('sqlite://'):
        return {}
    return {
        'pool_pre_ping': True,      # Verify connection is alive before using
        'pool_recycle': 300,        # Recycle connections every 5 minutes
        'pool_timeout': 60,
        'pool_size': 5,
        'max_overflow': 10,
        'connect_args': {
            'connect_timeout': 30,
            'options': '-c statement_timeout=300000',  # 5 min query timeout
        }
    }


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key')
    DEBUG = os.getenv('FLASK_DEBUG', 'False').lower() == 'true'
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

    # 'sql' (Flask-SQLAlchemy) or 'memory' (process-local list)
    STORE_BACKEND = os.getenv('STORE_BACKEND', 'sql').lower()

    SQLALCHEMY_DATABASE_URI = get_database_url()
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = get_engine_options(SQLALCHEMY_DATABASE_URI)

    REFERENCE_YEAR = int(os.getenv('REFERENCE_YEAR', str(DEFAULT_REFERENCE_YEAR)))
    DEFAULT_PER_PAGE = int(os.getenv('DEFAULT_PER_PAGE', str(DEFAULT_PER_PAGE)))

    SEED_SOURCE_URL = os.getenv('SEED_SOURCE_URL', SEED_SOURCE_URL)
    SEED_TIMEOUT_SECONDS = float(os.getenv('SEED_TIMEOUT_SECONDS', str(SEED_TIMEOUT_SECONDS)))
