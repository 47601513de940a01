# Exception hierarchy for the bucket loader
#   Core functions raise these; only the runner modules turn them into an exit code

class LoaderError(Exception):

    def __init__(self, message, details=None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

class ConfigError(LoaderError):
    """Missing or contradictory parameters, or a bucket/object not in the expected state."""

class FileAccessError(LoaderError):
    """Local file could not be opened, created or copied."""

class StorageConnectionError(LoaderError):
    """Client construction, stream open/close, metadata fetch or deadline failures."""

################################################################
# Raised by storage backends, translated by transfer_tools
################################################################

class StorageError(Exception):
    pass

class NotFoundError(StorageError):
    pass

class BucketNotFound(NotFoundError):
    pass

class ObjectNotFound(NotFoundError):
    pass
