"""Object API routes.

Endpoints for uploading, downloading, listing and deleting objects. Bucket
names and keys come from the path (or the ``key`` query parameter for
uploads); keys may contain "/" to create nested folders.
"""

import logging
import mimetypes
from typing import Optional

from fastapi import APIRouter, Depends, File, Query, UploadFile
from fastapi.responses import FileResponse

from api.dependencies import get_extension_map, get_object_store
from models.api_models import (
    DeleteObjectResponse,
    ErrorResponse,
    ObjectListResponse,
    UploadResponse,
)
from services.response_helpers import bad_request, internal_error, not_found
from services.upload_naming import MissingObjectKeyError, resolve_object_key
from storage.exceptions import InvalidPathError, ObjectNotFoundError, StorageError
from storage.mime_types import ExtensionMap
from storage.object_store import ObjectStore

logger = logging.getLogger("uvicorn")

router = APIRouter(
    tags=["objects"],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


@router.put("/upload/{bucket}", response_model=UploadResponse)
async def upload_object(
    bucket: str,
    key: Optional[str] = Query(None, description="Object key; defaults to the uploaded filename"),
    file: Optional[UploadFile] = File(None),
    store: ObjectStore = Depends(get_object_store),
    extension_map: ExtensionMap = Depends(get_extension_map),
) -> UploadResponse:
    """Upload an object, creating the bucket if needed.

    The payload is read from the multipart field ``file``. When ``key`` has
    no extension matching the payload's media type, one is appended.
    """
    if file is None:
        bad_request("No file uploaded.")

    try:
        object_key = resolve_object_key(key, file.filename, file.content_type, extension_map)
        path = store.object_path(bucket, object_key)
    except (MissingObjectKeyError, InvalidPathError) as e:
        bad_request(str(e))

    data = await file.read()
    try:
        store.ensure_bucket_exists(bucket)
        store.save_object(path, data)
    except StorageError as e:
        logger.error(f"Upload to {bucket}/{object_key} failed: {e}")
        internal_error("Error saving file.")

    logger.info(f"Stored {bucket}/{object_key} ({len(data)} bytes, {file.content_type})")
    return UploadResponse(
        message=f"File {object_key} uploaded to bucket {bucket}.",
        bucket=bucket,
        key=object_key,
        size=len(data),
        mimetype=file.content_type,
    )


@router.get("/download/{bucket}/{key:path}", response_class=FileResponse)
def download_object(
    bucket: str,
    key: str,
    store: ObjectStore = Depends(get_object_store),
):
    """Download an object's bytes."""
    try:
        path = store.object_path(bucket, key)
    except InvalidPathError as e:
        bad_request(str(e))

    if not store.object_exists(path):
        not_found("File not found.")

    media_type, _ = mimetypes.guess_type(key)
    return FileResponse(path, media_type=media_type or "application/octet-stream")


@router.get("/list/{bucket}", response_model=ObjectListResponse)
def list_objects(
    bucket: str,
    store: ObjectStore = Depends(get_object_store),
) -> ObjectListResponse:
    """List the direct children of a bucket."""
    try:
        bucket_path = store.bucket_path(bucket)
    except InvalidPathError as e:
        bad_request(str(e))

    if not store.bucket_exists(bucket):
        not_found("Bucket not found.")

    try:
        files = store.list_objects(bucket_path)
    except StorageError as e:
        logger.error(f"Listing bucket {bucket} failed: {e}")
        internal_error("Error reading bucket.")

    return ObjectListResponse(bucket=bucket, files=files)


@router.delete("/delete/{bucket}/{key:path}", response_model=DeleteObjectResponse)
def delete_object(
    bucket: str,
    key: str,
    store: ObjectStore = Depends(get_object_store),
) -> DeleteObjectResponse:
    """Delete an object."""
    try:
        path = store.object_path(bucket, key)
    except InvalidPathError as e:
        bad_request(str(e))

    if not store.object_exists(path):
        not_found("File not found.")

    try:
        store.delete_object(path)
    except ObjectNotFoundError:
        not_found("File not found.")
    except StorageError as e:
        logger.error(f"Deleting {bucket}/{key} failed: {e}")
        internal_error("Error deleting file.")

    return DeleteObjectResponse(
        message=f"File {key} deleted from bucket {bucket}.",
        bucket=bucket,
        key=key,
    )
