"""
Media-type to file-extension table used when naming uploaded objects.

The defaults below are static data. Extra entries can be supplied as a JSON
object through OBJECT_STORE_MIME_TYPES_FILE, e.g.:

    {
        "application/x-parquet": "parquet",
        "image/heic": ["heic", "heif"]
    }

Entries from the file replace the defaults for the same media type. The
first extension listed for a type is the one appended to keys.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Mapping, Optional, Tuple, Union

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS: Dict[str, Tuple[str, ...]] = {
    # Images
    "image/jpeg": ("jpg", "jpeg"),
    "image/png": ("png",),
    "image/gif": ("gif",),
    "image/webp": ("webp",),
    "image/svg+xml": ("svg",),
    "image/bmp": ("bmp",),
    "image/tiff": ("tiff", "tif"),
    "image/x-icon": ("ico",),
    "image/avif": ("avif",),
    # Text
    "text/plain": ("txt",),
    "text/html": ("html", "htm"),
    "text/css": ("css",),
    "text/csv": ("csv",),
    "text/markdown": ("md", "markdown"),
    "text/xml": ("xml",),
    "text/javascript": ("js", "mjs"),
    "application/javascript": ("js", "mjs"),
    "application/json": ("json",),
    "application/xml": ("xml",),
    "application/x-yaml": ("yaml", "yml"),
    # Documents
    "application/pdf": ("pdf",),
    "application/msword": ("doc",),
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": ("docx",),
    "application/vnd.ms-excel": ("xls",),
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet": ("xlsx",),
    "application/vnd.ms-powerpoint": ("ppt",),
    "application/vnd.openxmlformats-officedocument.presentationml.presentation": ("pptx",),
    "application/rtf": ("rtf",),
    "application/vnd.oasis.opendocument.text": ("odt",),
    # Audio
    "audio/mpeg": ("mp3",),
    "audio/wav": ("wav",),
    "audio/x-wav": ("wav",),
    "audio/ogg": ("ogg", "oga"),
    "audio/aac": ("aac",),
    "audio/flac": ("flac",),
    "audio/webm": ("weba",),
    # Video
    "video/mp4": ("mp4",),
    "video/webm": ("webm",),
    "video/ogg": ("ogv",),
    "video/quicktime": ("mov",),
    "video/x-msvideo": ("avi",),
    "video/x-matroska": ("mkv",),
    "video/mpeg": ("mpeg", "mpg"),
    # Archives
    "application/zip": ("zip",),
    "application/x-tar": ("tar",),
    "application/gzip": ("gz",),
    "application/x-gzip": ("gz",),
    "application/x-bzip2": ("bz2",),
    "application/x-7z-compressed": ("7z",),
    "application/vnd.rar": ("rar",),
    "application/x-rar-compressed": ("rar",),
}


def normalize_media_type(media_type: Optional[str]) -> str:
    """Lower-case a media type and drop any parameters after ';'."""
    if not media_type:
        return ""
    return media_type.split(";", 1)[0].strip().lower()


def _normalize_extensions(media_type: str, value: Union[str, list, tuple]) -> Tuple[str, ...]:
    items = [value] if isinstance(value, str) else value
    if not isinstance(items, (list, tuple)) or not all(isinstance(item, str) for item in items):
        raise ValueError(f"Invalid extensions for {media_type!r}: {value!r}")
    extensions = tuple(item.strip().lstrip(".").lower() for item in items)
    if not extensions or not all(extensions):
        raise ValueError(f"Invalid extensions for {media_type!r}: {value!r}")
    return extensions


class ExtensionMap:
    """Lookup table from media type to known file extensions."""

    def __init__(self, table: Optional[Mapping[str, Union[str, list, tuple]]] = None):
        source = DEFAULT_EXTENSIONS if table is None else table
        self._table: Dict[str, Tuple[str, ...]] = {
            normalize_media_type(media_type): _normalize_extensions(media_type, extensions)
            for media_type, extensions in source.items()
        }

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "ExtensionMap":
        """Build the default table, merged with entries from a JSON file.

        Raises:
            ValueError: If the file is not a JSON object of media types
        """
        extension_map = cls()
        if path is None:
            return extension_map

        with open(path, "r", encoding="utf-8") as f:
            overrides = json.load(f)
        if not isinstance(overrides, dict):
            raise ValueError(f"{path} must contain a JSON object")

        extension_map.update(overrides)
        logger.info("Loaded %d media type(s) from %s", len(overrides), path)
        return extension_map

    def update(self, entries: Mapping[str, Union[str, list, tuple]]) -> None:
        for media_type, extensions in entries.items():
            self._table[normalize_media_type(media_type)] = _normalize_extensions(media_type, extensions)

    def extensions_for(self, media_type: Optional[str]) -> Tuple[str, ...]:
        return self._table.get(normalize_media_type(media_type), ())

    def extension_for(self, media_type: Optional[str]) -> Optional[str]:
        """Return the preferred extension for a media type, if known."""
        extensions = self.extensions_for(media_type)
        return extensions[0] if extensions else None

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, media_type: object) -> bool:
        return isinstance(media_type, str) and normalize_media_type(media_type) in self._table
