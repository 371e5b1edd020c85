"""Storage service configuration.

Settings are read from the environment once at process start and carried
around in a ``StorageConfig`` instead of module-level globals.

Environment Variables:
    OBJECT_STORE_ROOT: Directory holding all buckets (default: uploads)
    OBJECT_STORE_MIME_TYPES_FILE: JSON file extending the media-type table
    HOST: Bind address (default: 0.0.0.0)
    PORT: Listening port (default: 3000)
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from services.settings_helpers import get_int_setting, get_setting

DEFAULT_STORAGE_ROOT = "uploads"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000


@dataclass(frozen=True)
class StorageConfig:
    """Process-wide settings for the object store and its HTTP server."""

    root: Path
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    mime_types_file: Optional[Path] = None


def load_storage_config() -> StorageConfig:
    """Build a StorageConfig from environment variables."""
    mime_types_file = get_setting("OBJECT_STORE_MIME_TYPES_FILE", None)
    return StorageConfig(
        root=Path(get_setting("OBJECT_STORE_ROOT", DEFAULT_STORAGE_ROOT)).expanduser(),
        host=get_setting("HOST", DEFAULT_HOST),
        port=get_int_setting("PORT", DEFAULT_PORT),
        mime_types_file=Path(mime_types_file) if mime_types_file else None,
    )
