"""
dscommerce.auth.deps

FastAPI dependency functions for authentication.

Responsibilities:
- Convert a bearer token into a verified claims mapping.
- Report every token problem as `Unauthenticated`.
"""

from __future__ import annotations

from typing import Any

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from dscommerce.api.deps import settings_dep
from dscommerce.auth.jwt import JwtConfig, JwtValidationError, decode_claims
from dscommerce.errors import Unauthenticated
from dscommerce.settings import Settings

_bearer = HTTPBearer(auto_error=False)


def _jwt_cfg(settings: Settings) -> JwtConfig:
    return JwtConfig(
        alg=settings.jwt_alg,
        secret=settings.jwt_secret,
        audience=settings.jwt_audience,
    )


def get_claims(
    creds: HTTPAuthorizationCredentials | None = Depends(_bearer),
    settings: Settings = Depends(settings_dep),
) -> dict[str, Any]:
    if creds is None or not creds.credentials:
        raise Unauthenticated("Missing bearer token")

    try:
        return decode_claims(cfg=_jwt_cfg(settings), token=creds.credentials)
    except JwtValidationError as e:
        raise Unauthenticated(f"Invalid token: {e}") from e


# --- Module Notes -----------------------------------------------------------
# Claims are resolved into an `Identity` by the service layer, inside the same
# DB session that serves the rest of the request.
