"""API model definitions for object store request/response objects."""

from .api_models import (  # noqa: F401
    UploadResponse,
    ObjectListResponse,
    DeleteObjectResponse,
    CreateBucketResponse,
    DeleteBucketResponse,
    RouteInfo,
    HealthResponse,
    ErrorDetail,
    ErrorBody,
    ErrorResponse,
)
