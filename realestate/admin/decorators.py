"""
Admin Decorators

One authorization check guards every admin route. Pages and form posts
redirect to the login page; JSON endpoints answer 401.
"""

from functools import wraps
from flask import jsonify, redirect, url_for
from flask_login import current_user


def admin_required(f):
    """Decorator for admin pages: redirect to login when not authenticated."""
    @wraps(f)
    def wrapper(*args, **kwargs):
        if not current_user.is_authenticated:
            return redirect(url_for('admin.login'))
        return f(*args, **kwargs)
    return wrapper


def admin_api_required(f):
    """Decorator for admin JSON endpoints: 401 when not authenticated."""
    @wraps(f)
    def wrapper(*args, **kwargs):
        if not current_user.is_authenticated:
            return jsonify({'error': 'Authentication required'}), 401
        return f(*args, **kwargs)
    return wrapper
