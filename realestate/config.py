"""
Configuration settings for the Real Estate Listings site
"""
import os
from datetime import timedelta


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Flask application configuration"""

    # Session signing secret. Left empty here so create_app() can generate
    # one at startup when the environment does not provide it.
    SECRET_KEY = os.environ.get('SECRET_KEY')

    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'real_estate.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Uploaded listing images
    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER') or os.path.join(basedir, 'uploads')
    MAX_IMAGE_BYTES = int(os.environ.get('MAX_IMAGE_BYTES') or 80000)
    ALLOWED_IMAGE_FORMATS = frozenset({'JPEG', 'PNG', 'GIF', 'WEBP'})

    # Admin credentials (single operator account, no credential store)
    ADMIN_USERNAME = os.environ.get('ADMIN_USERNAME') or 'admin'
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD')

    # Server-side admin sessions expire after this many hours
    ADMIN_SESSION_HOURS = int(os.environ.get('ADMIN_SESSION_HOURS') or 8)
    PERMANENT_SESSION_LIFETIME = timedelta(hours=ADMIN_SESSION_HOURS)

    SESSION_COOKIE_SECURE = _env_flag('SESSION_COOKIE_SECURE')
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    ADMIN_USERNAME = 'admin'
    ADMIN_PASSWORD = 'letmein'
    SESSION_COOKIE_SECURE = False
