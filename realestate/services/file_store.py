"""
File Store

Filesystem-backed storage for listing images, addressed by FileKey.
"""

import io
import logging
import os
import uuid
import warnings

from PIL import Image, UnidentifiedImageError
from werkzeug.security import safe_join
from werkzeug.utils import secure_filename

from realestate.errors import FileIOFailure, FileNotFound, FileTooLarge, WrongFileType

logger = logging.getLogger(__name__)


class FileStore:
    """Stores uploaded images under a single directory."""

    def __init__(self, root, size_limit, allowed_formats=('JPEG', 'PNG', 'GIF', 'WEBP')):
        self.root = os.path.abspath(root)
        self.size_limit = size_limit
        self.allowed_formats = frozenset(allowed_formats)

    def path_for(self, key):
        """Absolute path for a key, or None if the key would escape the root."""
        if not key or os.path.basename(key) != key:
            return None
        return safe_join(self.root, key)

    def exists(self, key):
        path = self.path_for(key)
        return path is not None and os.path.isfile(path)

    def keys(self):
        if not os.path.isdir(self.root):
            return []
        return sorted(
            name for name in os.listdir(self.root)
            if os.path.isfile(os.path.join(self.root, name))
        )

    def _check_image(self, data):
        try:
            # Oversized pixel dimensions are rejected, not just warned about
            with warnings.catch_warnings():
                warnings.simplefilter('error', Image.DecompressionBombWarning)
                with Image.open(io.BytesIO(data)) as img:
                    fmt = img.format
                    img.verify()
        except (Image.DecompressionBombError, Image.DecompressionBombWarning) as e:
            raise WrongFileType(f'Image dimensions too large: {e}')
        except (UnidentifiedImageError, OSError, SyntaxError, ValueError) as e:
            raise WrongFileType(f'Not a readable image: {e}')
        if fmt not in self.allowed_formats:
            raise WrongFileType(f'Image format {fmt} is not allowed')

    def save(self, data, original_name, size_limit=None):
        """Validate and write image bytes, returning the new FileKey.

        Raises:
            FileTooLarge: data exceeds the size limit
            WrongFileType: data is not an allowed image format
            FileIOFailure: the file could not be written
        """
        limit = size_limit if size_limit is not None else self.size_limit
        if limit is not None and len(data) > limit:
            raise FileTooLarge(f'{len(data)} bytes exceeds the {limit} byte limit')
        if not data:
            raise WrongFileType('Empty file')
        self._check_image(data)

        name = secure_filename(original_name or '') or 'image'
        key = f'{uuid.uuid4().hex}-{name}'
        path = os.path.join(self.root, key)

        try:
            os.makedirs(self.root, exist_ok=True)
            with open(path, 'wb') as fh:
                fh.write(data)
        except OSError as e:
            # Don't leave a partial file behind
            if os.path.exists(path):
                os.remove(path)
            raise FileIOFailure(str(e))

        logger.info('Stored image %s (%d bytes)', key, len(data))
        return key

    def delete(self, key):
        """Remove a stored file.

        Raises:
            FileNotFound: nothing is stored under this key
            FileIOFailure: the file exists but could not be removed
        """
        path = self.path_for(key)
        if path is None:
            raise FileNotFound(key)
        try:
            os.remove(path)
        except FileNotFoundError:
            raise FileNotFound(key)
        except OSError as e:
            raise FileIOFailure(str(e))
        logger.info('Deleted image %s', key)
