"""
dscommerce.api.errors

Mapping of domain errors to HTTP responses.

Responsibilities:
- Own the status-code table for the error taxonomy.
- Render a uniform error body: {timestamp, status, error, path}.
"""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_403_FORBIDDEN,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from dscommerce.errors import DomainError, Forbidden, NotFound, Unauthenticated
from dscommerce.observability.logging import get_logger

log = get_logger(__name__)

DOMAIN_ERROR_STATUS_MAP: dict[type[DomainError], int] = {
    NotFound: HTTP_404_NOT_FOUND,
    Forbidden: HTTP_403_FORBIDDEN,
    Unauthenticated: HTTP_401_UNAUTHORIZED,
}


def status_for(error: DomainError) -> int:
    for error_type, status in DOMAIN_ERROR_STATUS_MAP.items():
        if isinstance(error, error_type):
            return status
    return HTTP_400_BAD_REQUEST


def _body(request: Request, status: int, message: str) -> dict[str, object]:
    return {
        "timestamp": datetime.now(tz=UTC).isoformat(),
        "status": status,
        "error": message,
        "path": request.url.path,
    }


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status = status_for(exc)
    log.info("request_rejected", status=status, code=exc.code)
    headers = {"WWW-Authenticate": "Bearer"} if status == HTTP_401_UNAUTHORIZED else None
    return JSONResponse(
        status_code=status,
        content=_body(request, status, exc.message),
        headers=headers,
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # ServerErrorMiddleware re-raises after this response, so the server logs the traceback.
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content=_body(request, HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"),
    )


# --- Module Notes -----------------------------------------------------------
# This is the only place that knows about status codes; the core raises
# `dscommerce.errors` types and never builds HTTP responses.
