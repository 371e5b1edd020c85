"""Object key resolution for uploads.

Keys are picked in this order:
1. No key supplied: the uploaded file's original filename is used.
2. The key already ends with an extension known for the payload's media
   type (case-insensitive): the key is used as is.
3. Otherwise the preferred extension for the media type is appended. Unknown
   media types leave the key unchanged.
"""

from typing import Optional

from storage.mime_types import ExtensionMap


class MissingObjectKeyError(ValueError):
    """Neither a key nor an original filename was supplied."""


def has_known_extension(key: str, media_type: Optional[str], extension_map: ExtensionMap) -> bool:
    lowered = key.lower()
    return any(lowered.endswith(f".{ext}") for ext in extension_map.extensions_for(media_type))


def resolve_object_key(
    key: Optional[str],
    filename: Optional[str],
    media_type: Optional[str],
    extension_map: ExtensionMap,
) -> str:
    """Pick the key an uploaded payload is stored under."""
    if not key:
        if not filename:
            raise MissingObjectKeyError("No object key given and the upload has no filename")
        return filename

    if has_known_extension(key, media_type, extension_map):
        return key

    extension = extension_map.extension_for(media_type)
    if extension is None:
        return key
    return f"{key}.{extension}"
