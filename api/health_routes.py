"""Health check API routes.

Liveness endpoint that also describes the routes the service exposes.
"""

from fastapi import APIRouter, Request

from models.api_models import HealthResponse, RouteInfo

router = APIRouter(tags=["health"])

_HTTP_METHODS = ("get", "put", "post", "delete", "patch", "head", "options")


def _describe_routes(request: Request) -> list[RouteInfo]:
    """List every documented operation from the app's OpenAPI schema."""
    routes = []
    for path, operations in request.app.openapi().get("paths", {}).items():
        for method, operation in operations.items():
            if method not in _HTTP_METHODS:
                continue
            description = (operation.get("description") or "").strip()
            routes.append(
                RouteInfo(
                    method=method.upper(),
                    path=path,
                    description=description.splitlines()[0] if description else operation.get("summary"),
                )
            )
    return routes


@router.get("/health", response_model=HealthResponse)
async def health(request: Request) -> HealthResponse:
    """Report liveness and the available routes."""
    return HealthResponse(
        status="ok",
        service=request.app.title,
        version=request.app.version,
        routes=_describe_routes(request),
    )
