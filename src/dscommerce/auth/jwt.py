"""
dscommerce.auth.jwt

JWT validation helpers.

Responsibilities:
- Verify signature and expiry of bearer tokens issued by the authorization server.
- Hand the verified claims to the auth core untouched.

Note:
- Token issuance lives in the authorization server, not in this service.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import jwt
from jwt import InvalidTokenError


@dataclass(frozen=True, slots=True)
class JwtConfig:
    alg: str
    secret: str
    audience: str | None = None


class JwtValidationError(Exception):
    pass


def decode_claims(*, cfg: JwtConfig, token: str) -> dict[str, Any]:
    try:
        return jwt.decode(
            token,
            cfg.secret,
            algorithms=[cfg.alg],
            audience=cfg.audience,
            options={"require": ["exp"]},
        )
    except InvalidTokenError as e:
        raise JwtValidationError(str(e)) from e


# --- Module Notes -----------------------------------------------------------
# Only `exp` is required here; which claims identify the caller is decided by
# `auth.principal`, which reads `username`.
