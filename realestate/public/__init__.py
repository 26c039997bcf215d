"""
Public Blueprint

Listing page, listings JSON and uploaded images.
"""

from flask import Blueprint

public_bp = Blueprint('public', __name__)

from realestate.public import routes  # noqa: E402, F401
