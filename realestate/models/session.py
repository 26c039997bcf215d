"""
Admin Session Model
"""

from datetime import datetime, timezone

from realestate.extensions import db


def utcnow():
    # Naive UTC, matching what SQLite hands back for DateTime columns
    return datetime.now(timezone.utc).replace(tzinfo=None)


class AdminSession(db.Model):
    """Server-side record of an authenticated admin session"""
    __tablename__ = 'admin_sessions'

    token = db.Column(db.String(64), primary_key=True)
    username = db.Column(db.String(100), nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    expires_at = db.Column(db.DateTime, nullable=False)

    def is_expired(self, now=None):
        return (now or utcnow()) >= self.expires_at

    def __repr__(self):
        return f'<AdminSession {self.username} until {self.expires_at}>'
