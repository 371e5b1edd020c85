"""Storage module for the filesystem-backed object store."""

from .exceptions import InvalidPathError, ObjectNotFoundError, StorageError
from .mime_types import ExtensionMap
from .object_store import BucketDeletion, ObjectStore
from .paths import PathResolver

__all__ = [
    "BucketDeletion",
    "ExtensionMap",
    "InvalidPathError",
    "ObjectNotFoundError",
    "ObjectStore",
    "PathResolver",
    "StorageError",
]
