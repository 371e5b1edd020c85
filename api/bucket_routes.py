"""Bucket API routes.

Endpoints for listing, creating and deleting buckets. Buckets are also
created implicitly by the first upload into them.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from api.dependencies import get_object_store
from models.api_models import CreateBucketResponse, DeleteBucketResponse, ErrorResponse
from services.response_helpers import bad_request, conflict, internal_error, not_found
from storage.exceptions import InvalidPathError, StorageError
from storage.object_store import ObjectStore

logger = logging.getLogger("uvicorn")

router = APIRouter(
    prefix="/buckets",
    tags=["buckets"],
    responses={500: {"model": ErrorResponse}},
)


@router.get("", response_model=List[str])
def list_buckets(store: ObjectStore = Depends(get_object_store)) -> List[str]:
    """List all buckets under the storage root."""
    try:
        return store.list_buckets()
    except StorageError as e:
        logger.error(f"Listing buckets failed: {e}")
        internal_error("Error listing buckets.")


@router.post(
    "/{bucket}",
    status_code=201,
    response_model=CreateBucketResponse,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
def create_bucket(bucket: str, store: ObjectStore = Depends(get_object_store)) -> CreateBucketResponse:
    """Create an empty bucket."""
    try:
        created = store.create_bucket(bucket)
    except InvalidPathError as e:
        bad_request(str(e))
    except StorageError as e:
        logger.error(f"Creating bucket {bucket} failed: {e}")
        internal_error("Error creating bucket.")

    if not created:
        conflict(f"Bucket {bucket} already exists.", "bucket_exists")

    return CreateBucketResponse(
        message=f"Bucket {bucket} created.",
        bucket=bucket,
        created=True,
    )


@router.delete(
    "/{bucket}",
    response_model=DeleteBucketResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
def delete_bucket(bucket: str, store: ObjectStore = Depends(get_object_store)) -> DeleteBucketResponse:
    """Delete a bucket. Only empty buckets can be deleted."""
    try:
        result = store.delete_bucket(bucket)
    except InvalidPathError as e:
        bad_request(str(e))
    except StorageError as e:
        logger.error(f"Deleting bucket {bucket} failed: {e}")
        internal_error("Error deleting bucket.")

    if not result.exists:
        not_found("Bucket not found.")
    if not result.is_empty:
        conflict(f"Bucket {bucket} is not empty.", "bucket_not_empty")
    if not result.deleted:
        internal_error("Error deleting bucket.")

    return DeleteBucketResponse(
        message=f"Bucket {bucket} deleted.",
        bucket=bucket,
        deleted=result.deleted,
        is_empty=result.is_empty,
        exists=result.exists,
    )
