"""Exceptions raised by the storage layer."""


class StorageError(RuntimeError):
    """Unexpected filesystem failure while serving a storage operation."""


class ObjectNotFoundError(StorageError):
    """The requested object does not exist."""


class InvalidPathError(ValueError):
    """A bucket name or object key would resolve outside its container."""
