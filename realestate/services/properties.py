"""
Property Service

Keeps Property records and their image files in step: a record always
points at exactly one stored image.
"""

import logging

from flask import current_app

from realestate.errors import (
    FileIOFailure, FileNotFound, FileTooLarge, InvalidFields, InvalidUpload,
    NotFound, StorageFailure, WrongFileType,
)
from realestate.extensions import db
from realestate.models import Property
from realestate.services.property_store import PropertyStore

logger = logging.getLogger(__name__)


class PropertyService:

    def __init__(self, store, files):
        self.store = store
        self.files = files

    def list_listings(self):
        return self.store.list()

    def get_listing(self, property_id):
        prop = self.store.get(property_id)
        if prop is None:
            raise NotFound()
        return prop

    def create_listing(self, file_bytes, original_name, fields):
        """Store the image, then the record that references it.

        Field problems are reported before anything is written. If the record
        cannot be saved, the image that was just stored is removed again.
        """
        if not file_bytes:
            raise InvalidUpload('No file uploaded')

        fields = dict(fields)
        fields.pop('image_path', None)
        _check_fields(fields)

        limit = self.files.size_limit
        try:
            key = self.files.save(file_bytes, original_name)
        except FileTooLarge:
            raise InvalidUpload(f'File must be an image and should be less than {limit // 1000}KB')
        except WrongFileType:
            raise InvalidUpload('File must be an image')
        except FileIOFailure as e:
            logger.error('Error uploading file %r: %s', original_name, e)
            raise StorageFailure('Error uploading file')

        fields['image_path'] = key
        try:
            return self.store.create(fields)
        except (InvalidFields, StorageFailure):
            self._discard(key)
            raise

    def _discard(self, key):
        try:
            self.files.delete(key)
            logger.info('Removed image %s after failed save', key)
        except FileNotFound:
            pass
        except FileIOFailure as e:
            logger.error('Image %s is orphaned, cleanup failed: %s', key, e)

    def update_listing(self, property_id, fields):
        return self.store.update(property_id, fields)

    def delete_listing(self, property_id):
        """Delete a record together with its image.

        An image that is already gone is tolerated. Any other failure to
        remove the image leaves the record in place.
        """
        prop = self.store.get(property_id)
        if prop is None:
            raise NotFound()

        if prop.image_path:
            try:
                self.files.delete(prop.image_path)
            except FileNotFound:
                logger.warning('Image %s for property %s was already missing',
                               prop.image_path, property_id)
            except FileIOFailure as e:
                logger.error('Error deleting image %s for property %s: %s',
                             prop.image_path, property_id, e)
                raise StorageFailure('Error deleting property and image')

        self.store.delete(property_id)
        logger.info('Deleted property %s', property_id)


def _check_fields(fields):
    # Run the model validators without touching the session
    missing = [name for name in Property.REQUIRED_FIELDS if fields.get(name) in (None, '')]
    if missing:
        raise InvalidFields(f'Missing required fields: {", ".join(missing)}')
    probe = Property()
    try:
        for name in Property.UPDATABLE_FIELDS:
            if fields.get(name) not in (None, ''):
                setattr(probe, name, fields[name])
    except ValueError as e:
        raise InvalidFields(str(e))


def property_service():
    """Build a PropertyService for the current application."""
    return PropertyService(PropertyStore(db.session), current_app.extensions['file_store'])
