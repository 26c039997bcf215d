"""
Admin Authentication Service

A single operator account is configured through the environment. A
successful credential check opens a server-side session whose random token
is the only thing the client holds; validity is always decided by looking
the token up here.
"""

import hmac
import logging
import secrets
from datetime import timedelta

from flask import current_app
from flask_login import UserMixin
from sqlalchemy.exc import SQLAlchemyError

from realestate.errors import InvalidCredentials, StorageFailure
from realestate.extensions import db
from realestate.models import AdminSession
from realestate.models.session import utcnow

logger = logging.getLogger(__name__)

# 32 random bytes -> 256 bits of entropy
TOKEN_BYTES = 32


class Principal(UserMixin):
    """The authenticated admin attached to a request."""

    def __init__(self, username, session_token=None):
        self.username = username
        self.session_token = session_token

    def get_id(self):
        return self.session_token

    def __repr__(self):
        return f'<Principal {self.username}>'


def _matches(given, expected):
    return hmac.compare_digest(given.encode('utf-8'), expected.encode('utf-8'))


def authenticate(username, password):
    """Check a login submission against the configured admin pair.

    Returns a Principal on success. Raises InvalidCredentials otherwise, with
    the same message whether the username or the password was wrong.
    """
    expected_user = current_app.config.get('ADMIN_USERNAME')
    expected_password = current_app.config.get('ADMIN_PASSWORD')

    if not expected_user or not expected_password:
        logger.warning('Admin login attempted but ADMIN_USERNAME/ADMIN_PASSWORD are not configured')
        raise InvalidCredentials()

    # Compare both fields every time so timing does not reveal which one failed
    user_ok = _matches(username or '', expected_user)
    password_ok = _matches(password or '', expected_password)
    if not (user_ok and password_ok):
        raise InvalidCredentials()

    return Principal(expected_user)


def start_session(principal):
    """Open a server-side session for an authenticated principal."""
    lifetime = timedelta(hours=current_app.config['ADMIN_SESSION_HOURS'])
    now = utcnow()
    record = AdminSession(
        token=secrets.token_hex(TOKEN_BYTES),
        username=principal.username,
        created_at=now,
        expires_at=now + lifetime,
    )
    try:
        db.session.add(record)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Could not create admin session')
        raise StorageFailure()

    logger.info('Admin session opened for %s', principal.username)
    return Principal(principal.username, record.token)


def resolve_session(token):
    """Map a session token to its Principal, or None if it is unknown or expired."""
    if not token:
        return None

    record = db.session.get(AdminSession, token)
    if record is None:
        return None

    if record.is_expired():
        logger.info('Admin session for %s expired', record.username)
        db.session.delete(record)
        db.session.commit()
        return None

    return Principal(record.username, record.token)


def end_session(token):
    """Invalidate a session. Unknown tokens are ignored."""
    if not token:
        return
    deleted = AdminSession.query.filter_by(token=token).delete()
    db.session.commit()
    if deleted:
        logger.info('Admin session closed')


def purge_expired_sessions():
    """Delete every expired session row and return how many were removed."""
    count = AdminSession.query.filter(AdminSession.expires_at <= utcnow()).delete()
    db.session.commit()
    return count
