"""
Admin Blueprint

Login, logout and listing management for the single admin account.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from realestate.admin import routes  # noqa: E402, F401
