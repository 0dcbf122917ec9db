"""
Analytics API Routes - Split into domain-specific modules

This package organizes the endpoints into logical domains:
- transactions.py: Paginated, searchable transaction list
- statistics.py: Monthly sales summary
- charts.py: Bar chart (price buckets) and pie chart (categories)
- admin.py: Seed initialization, health, ping

All modules share the same blueprint (analytics_bp) registered at /api.
"""

from flask import Blueprint, current_app

# Create the shared blueprint
analytics_bp = Blueprint('analytics', __name__)


def reference_year() -> int:
    return current_app.config['REFERENCE_YEAR']


# Import all route modules to register their routes with the blueprint
from routes.analytics import transactions
from routes.analytics import statistics
from routes.analytics import charts
from routes.analytics import admin
