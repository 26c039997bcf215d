"""
Property Store

Persistent collection of Property records on top of the SQLAlchemy session.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from realestate.errors import InvalidFields, NotFound, StorageFailure
from realestate.models import Property

logger = logging.getLogger(__name__)


class PropertyStore:

    def __init__(self, session):
        self.session = session

    def _commit(self, action):
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            logger.exception('Could not %s property', action)
            raise StorageFailure()

    def create(self, fields):
        """Insert a new Property and return it with its assigned id."""
        missing = [name for name in Property.REQUIRED_FIELDS + ('image_path',)
                   if fields.get(name) in (None, '')]
        if missing:
            raise InvalidFields(f'Missing required fields: {", ".join(missing)}')

        values = {name: fields[name] for name in Property.UPDATABLE_FIELDS + ('image_path',)
                  if fields.get(name) not in (None, '')}
        try:
            prop = Property(**values)
        except ValueError as e:
            raise InvalidFields(str(e))

        self.session.add(prop)
        self._commit('create')
        return prop

    def get(self, property_id):
        try:
            return self.session.get(Property, property_id)
        except SQLAlchemyError:
            logger.exception('Could not load property %s', property_id)
            raise StorageFailure()

    def list(self):
        try:
            return self.session.query(Property).order_by(Property.id).all()
        except SQLAlchemyError:
            logger.exception('Could not list properties')
            raise StorageFailure()

    def update(self, property_id, fields):
        """Apply only the given fields and return the full updated record.

        Fields outside Property.UPDATABLE_FIELDS (id, image_path, ...) are ignored.
        """
        prop = self.get(property_id)
        if prop is None:
            raise NotFound()

        try:
            for name in Property.UPDATABLE_FIELDS:
                if name in fields:
                    setattr(prop, name, fields[name])
        except ValueError as e:
            self.session.rollback()
            raise InvalidFields(str(e))

        self._commit('update')
        return prop

    def delete(self, property_id):
        prop = self.get(property_id)
        if prop is None:
            raise NotFound()
        self.session.delete(prop)
        self._commit('delete')
