"""
Mapping from bucket names and object keys to filesystem paths.

Layout:
    <root>/
    └── {bucket}/
        └── {key}        (key may contain "/" to create nested folders)

Bucket names are a single path segment. Keys are relative paths that must
stay inside their bucket directory.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath

from .exceptions import InvalidPathError

_FORBIDDEN_BUCKET_CHARS = ("/", "\\", "\x00")


def validate_bucket_name(bucket: str) -> str:
    """Return the bucket name if it is a single safe path segment."""
    if not bucket or bucket in (".", ".."):
        raise InvalidPathError(f"Invalid bucket name: {bucket!r}")
    if any(char in bucket for char in _FORBIDDEN_BUCKET_CHARS):
        raise InvalidPathError(f"Invalid bucket name: {bucket!r}")
    return bucket


def normalize_key(key: str) -> PurePosixPath:
    """Normalize an object key into a relative POSIX path.

    Backslashes are treated as separators. Absolute keys, ``..`` segments
    and keys that collapse to nothing are rejected.
    """
    if not key or "\x00" in key:
        raise InvalidPathError(f"Invalid object key: {key!r}")

    candidate = PurePosixPath(key.replace("\\", "/"))
    if candidate.is_absolute():
        raise InvalidPathError(f"Object key must be relative: {key!r}")
    if ".." in candidate.parts:
        raise InvalidPathError(f"Object key must not contain '..': {key!r}")
    if not candidate.parts:
        raise InvalidPathError(f"Invalid object key: {key!r}")
    return candidate


class PathResolver:
    """Resolve buckets and objects to paths under a fixed storage root."""

    def __init__(self, root: Path):
        self.root = Path(root)

    def bucket_path(self, bucket: str) -> Path:
        path = self.root / validate_bucket_name(bucket)
        # A symlinked bucket must still resolve directly under the root.
        if path.resolve().parent != self.root.resolve():
            raise InvalidPathError(f"Bucket escapes storage root: {bucket!r}")
        return path

    def object_path(self, bucket: str, key: str) -> Path:
        bucket_dir = self.bucket_path(bucket)
        path = bucket_dir.joinpath(*normalize_key(key).parts)

        # Symlinks inside the bucket must not lead outside it.
        resolved_bucket = bucket_dir.resolve()
        resolved = path.resolve()
        if resolved == resolved_bucket:
            raise InvalidPathError(f"Invalid object key: {key!r}")
        try:
            resolved.relative_to(resolved_bucket)
        except ValueError:
            raise InvalidPathError(
                f"Object key escapes bucket {bucket!r}: {key!r}"
            ) from None
        return path
