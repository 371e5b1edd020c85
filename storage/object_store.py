"""
Filesystem-backed bucket and object storage.

Buckets are directories directly under the configured storage root and
objects are files inside them. There is no index or metadata file: the
directory tree is the whole source of truth.

No locking is done around filesystem calls. Concurrent writes to the same
key race at the filesystem level and the last writer wins.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List

from config.storage_config import StorageConfig

from .exceptions import ObjectNotFoundError, StorageError
from .paths import PathResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BucketDeletion:
    """Outcome of a delete-if-empty bucket request."""

    deleted: bool
    is_empty: bool
    exists: bool


class ObjectStore:
    """Bucket/object operations over a single storage root."""

    def __init__(self, config: StorageConfig):
        self.config = config
        self.paths = PathResolver(config.root)

    @property
    def root(self) -> Path:
        return self.paths.root

    def initialize(self) -> None:
        """Create the storage root if it does not exist yet."""
        try:
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.exception("Failed to create storage root %s: %s", self.root, exc)
            raise StorageError(f"Cannot create storage root: {exc}") from exc
        logger.debug("Storage root ready at %s", self.root)

    # ------------------------------------------------------------------
    # Path resolution
    # ------------------------------------------------------------------

    def bucket_path(self, bucket: str) -> Path:
        return self.paths.bucket_path(bucket)

    def object_path(self, bucket: str, key: str) -> Path:
        return self.paths.object_path(bucket, key)

    # ------------------------------------------------------------------
    # Buckets
    # ------------------------------------------------------------------

    def bucket_exists(self, bucket: str) -> bool:
        return self.bucket_path(bucket).is_dir()

    def ensure_bucket_exists(self, bucket: str) -> Path:
        """Create the bucket directory if needed. Safe to call repeatedly."""
        bucket_path = self.bucket_path(bucket)
        try:
            bucket_path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.exception("Failed to create bucket %s: %s", bucket, exc)
            raise StorageError(f"Bucket creation failed: {exc}") from exc
        return bucket_path

    def create_bucket(self, bucket: str) -> bool:
        """
        Create a new bucket.

        Returns:
            True if the bucket was created, False if it already existed
        """
        bucket_path = self.bucket_path(bucket)
        if bucket_path.exists():
            return False
        try:
            bucket_path.mkdir(parents=True)
        except FileExistsError:
            return False
        except OSError as exc:
            logger.exception("Failed to create bucket %s: %s", bucket, exc)
            raise StorageError(f"Bucket creation failed: {exc}") from exc
        logger.info("Created bucket %s", bucket)
        return True

    def delete_bucket(self, bucket: str) -> BucketDeletion:
        """
        Delete a bucket only if it is empty.

        Removal failures on an empty bucket are logged and reported through
        the result rather than raised.
        """
        bucket_path = self.bucket_path(bucket)
        if not bucket_path.is_dir():
            return BucketDeletion(deleted=False, is_empty=False, exists=False)

        if self.list_objects(bucket_path):
            return BucketDeletion(deleted=False, is_empty=False, exists=True)

        try:
            bucket_path.rmdir()
        except OSError as exc:
            logger.error("Error deleting bucket %s: %s", bucket, exc)
            return BucketDeletion(deleted=False, is_empty=True, exists=True)

        logger.info("Deleted bucket %s", bucket)
        return BucketDeletion(deleted=True, is_empty=True, exists=True)

    def list_buckets(self) -> List[str]:
        """List the directories directly under the storage root."""
        try:
            with os.scandir(self.root) as entries:
                return [entry.name for entry in entries if entry.is_dir(follow_symlinks=False)]
        except OSError as exc:
            logger.exception("Failed to list buckets under %s: %s", self.root, exc)
            raise StorageError(f"Bucket listing failed: {exc}") from exc

    # ------------------------------------------------------------------
    # Objects
    # ------------------------------------------------------------------

    def object_exists(self, path: Path) -> bool:
        return Path(path).is_file()

    def save_object(self, path: Path, data: bytes) -> None:
        """
        Write the whole payload to path, creating or overwriting the file.

        Missing parent directories (nested keys) are created. A failed write
        leaves the file in whatever state the underlying call left it.

        Raises:
            StorageError: If the write fails
        """
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as exc:
            logger.exception("Failed to write object %s: %s", path, exc)
            raise StorageError(f"Object write failed: {exc}") from exc
        logger.debug("Wrote %d bytes to %s", len(data), path)

    def read_object(self, path: Path) -> bytes:
        """
        Read the full contents of an object.

        Raises:
            ObjectNotFoundError: If the object does not exist
            StorageError: If the read fails
        """
        path = Path(path)
        try:
            return path.read_bytes()
        except (FileNotFoundError, IsADirectoryError) as exc:
            raise ObjectNotFoundError(f"Object not found: {path}") from exc
        except OSError as exc:
            logger.exception("Failed to read object %s: %s", path, exc)
            raise StorageError(f"Object read failed: {exc}") from exc

    def delete_object(self, path: Path) -> None:
        """
        Remove an object.

        Raises:
            ObjectNotFoundError: If the object does not exist
            StorageError: If the unlink fails
        """
        path = Path(path)
        try:
            path.unlink()
        except FileNotFoundError as exc:
            raise ObjectNotFoundError(f"Object not found: {path}") from exc
        except OSError as exc:
            logger.exception("Failed to delete object %s: %s", path, exc)
            raise StorageError(f"Object delete failed: {exc}") from exc
        logger.debug("Deleted %s", path)

    def list_objects(self, bucket_path: Path) -> List[str]:
        """
        List the direct children of a bucket directory.

        Names come back in the order the filesystem reports them.
        """
        try:
            return os.listdir(bucket_path)
        except OSError as exc:
            logger.exception("Failed to list %s: %s", bucket_path, exc)
            raise StorageError(f"Bucket listing failed: {exc}") from exc
