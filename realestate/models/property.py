"""
Property Model
"""

import math

from sqlalchemy.orm import validates

from realestate.extensions import db

BOOKING_STATES = ('available', 'soldout')


def _number(key, value, whole=False):
    # bool is an int subclass; True must not turn into 1
    if isinstance(value, bool):
        raise ValueError(f'{key} must be a number')
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f'{key} must be a number')
    if not math.isfinite(number):
        raise ValueError(f'{key} must be a finite number')
    if whole:
        if not number.is_integer():
            raise ValueError(f'{key} must be a whole number')
        return int(number)
    return number


def _positive(key, value, whole=False):
    number = _number(key, value, whole)
    if number <= 0:
        raise ValueError(f'{key} must be greater than zero')
    return number


class Property(db.Model):
    """A single real-estate listing"""
    __tablename__ = 'properties'

    REQUIRED_FIELDS = ('title', 'description', 'rate', 'sqft', 'beds', 'baths', 'rating', 'booking')
    UPDATABLE_FIELDS = REQUIRED_FIELDS + ('status',)

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False)
    rate = db.Column(db.Float, nullable=False)
    image_path = db.Column(db.String(255), nullable=False)
    status = db.Column(db.String(20), nullable=False, default='available')
    sqft = db.Column(db.Integer, nullable=False)
    beds = db.Column(db.Integer, nullable=False)
    baths = db.Column(db.Float, nullable=False)
    rating = db.Column(db.Float, nullable=False)
    booking = db.Column(db.String(20), nullable=False)
    created_at = db.Column(db.DateTime, default=db.func.current_timestamp())

    @validates('title', 'description')
    def validate_text(self, key, value):
        value = str(value).strip() if value is not None else ''
        if not value:
            raise ValueError(f'{key} is required')
        return value

    @validates('rate')
    def validate_rate(self, key, value):
        rate = _number(key, value)
        if rate < 0:
            raise ValueError('rate cannot be negative')
        return rate

    @validates('sqft', 'beds')
    def validate_count(self, key, value):
        return _positive(key, value, whole=True)

    @validates('baths')
    def validate_baths(self, key, value):
        return _positive(key, value)

    @validates('rating')
    def validate_rating(self, key, value):
        rating = _number(key, value)
        if not 0 <= rating <= 5:
            raise ValueError('rating must be between 0 and 5')
        return rating

    @validates('status', 'booking')
    def validate_state(self, key, value):
        value = str(value).strip().lower() if value is not None else ''
        if value not in BOOKING_STATES:
            raise ValueError(f'{key} must be one of: {", ".join(BOOKING_STATES)}')
        return value

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'rate': self.rate,
            'image_path': self.image_path,
            'status': self.status,
            'sqft': self.sqft,
            'beds': self.beds,
            'baths': self.baths,
            'rating': self.rating,
            'booking': self.booking,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f'<Property {self.id} {self.title!r}>'
