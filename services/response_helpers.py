"""Response helper functions.

Utilities for building storage error responses.
"""

from typing import NoReturn, Optional

from fastapi import HTTPException


def storage_error(
    error_type: str,
    message: str,
    status_code: int = 400,
    code: Optional[str] = None,
) -> NoReturn:
    """Raise an HTTPException with the service's error body format.

    Body shape: {"detail": {"error": {"type", "message", "code"}}}
    """
    raise HTTPException(
        status_code=status_code,
        detail={
            "error": {
                "type": error_type,
                "message": message,
                "code": code,
            }
        },
    )


def not_found(message: str) -> NoReturn:
    storage_error("not_found", message, 404)


def bad_request(message: str) -> NoReturn:
    storage_error("invalid_request_error", message, 400)


def conflict(message: str, code: Optional[str] = None) -> NoReturn:
    storage_error("conflict", message, 409, code)


def internal_error(message: str) -> NoReturn:
    storage_error("internal_server_error", message, 500)
