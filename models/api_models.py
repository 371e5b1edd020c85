from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class APIModel(BaseModel):
    model_config = ConfigDict(extra="allow")


class UploadResponse(APIModel):
    message: str
    bucket: str
    key: str
    size: int = Field(..., description="Payload size in bytes")
    mimetype: Optional[str] = Field(None, description="Media type declared by the upload")


class ObjectListResponse(APIModel):
    bucket: str
    files: List[str]


class DeleteObjectResponse(APIModel):
    message: str
    bucket: str
    key: str


class CreateBucketResponse(APIModel):
    message: str
    bucket: str
    created: bool


class DeleteBucketResponse(APIModel):
    """Result of a delete-if-empty bucket request."""

    message: str
    bucket: str
    deleted: bool
    is_empty: bool
    exists: bool


class RouteInfo(APIModel):
    method: str
    path: str
    description: Optional[str] = None


class HealthResponse(APIModel):
    status: str = "ok"
    service: str
    version: str
    routes: List[RouteInfo]


class ErrorDetail(BaseModel):
    type: str
    message: str
    code: Optional[str] = None


class ErrorBody(BaseModel):
    error: ErrorDetail


class ErrorResponse(BaseModel):
    """Body of every error response raised through storage_error."""

    detail: ErrorBody
