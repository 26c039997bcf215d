"""
Models Package

Exports all models for easy importing.
"""

from realestate.models.property import Property, BOOKING_STATES
from realestate.models.session import AdminSession

__all__ = ['Property', 'AdminSession', 'BOOKING_STATES']
