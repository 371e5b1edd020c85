"""FastAPI dependencies shared by the route modules.

The store and media-type table are created once in the application lifespan
and kept on ``app.state``.
"""

from fastapi import Request

from storage.mime_types import ExtensionMap
from storage.object_store import ObjectStore


def get_object_store(request: Request) -> ObjectStore:
    return request.app.state.object_store


def get_extension_map(request: Request) -> ExtensionMap:
    return request.app.state.extension_map
