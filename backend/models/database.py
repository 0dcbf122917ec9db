"""
Shared Flask-SQLAlchemy handle.

Initialized against the app in create_app() via db.init_app(app).
"""
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()
