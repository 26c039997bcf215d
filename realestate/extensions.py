"""
Flask Extensions

Admin identity is resolved per request from a server-side session row;
Flask-Login only carries the session token in the signed cookie.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance
db = SQLAlchemy()

# Session middleware for the admin principal
login_manager = LoginManager()
