"""
Error types shared by the services and the HTTP layer.
"""


class AuthError(Exception):
    """Base class for authentication failures."""


class InvalidCredentials(AuthError):
    """Username or password did not match the configured admin pair."""

    def __init__(self, message='Incorrect username or password'):
        super().__init__(message)
        self.message = message


class FileError(Exception):
    """Base class for File Store failures."""


class FileNotFound(FileError):
    pass


class FileTooLarge(FileError):
    pass


class WrongFileType(FileError):
    pass


class FileIOFailure(FileError):
    pass


class ServiceError(Exception):
    """Base class for errors surfaced by the property service.

    ``message`` is safe to show to clients; internal detail goes to the log.
    """
    status_code = 500
    message = 'Internal Server Error'

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidUpload(ServiceError):
    status_code = 400
    message = 'Invalid upload'


class InvalidFields(ServiceError):
    status_code = 400
    message = 'Invalid property fields'


class NotFound(ServiceError):
    status_code = 404
    message = 'Property not found'


class StorageFailure(ServiceError):
    status_code = 500
    message = 'Internal Server Error'
