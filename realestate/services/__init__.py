"""
Services Package

Exports all services for easy importing.
"""

from realestate.services.auth import (
    Principal, authenticate, start_session, resolve_session, end_session, purge_expired_sessions,
)
from realestate.services.file_store import FileStore
from realestate.services.property_store import PropertyStore
from realestate.services.properties import PropertyService, property_service

__all__ = [
    'Principal',
    'authenticate',
    'start_session',
    'resolve_session',
    'end_session',
    'purge_expired_sessions',
    'FileStore',
    'PropertyStore',
    'PropertyService',
    'property_service',
]
