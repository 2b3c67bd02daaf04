"""
dscommerce.auth.principal

Resolve "who is calling" from verified token claims.

Responsibilities:
- Read the `username` claim.
- Look the caller up in the identity store (one lookup per call, no caching).
- Fold every resolution failure into `Unauthenticated`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dscommerce.auth.models import Identity, IdentityLookup
from dscommerce.errors import Unauthenticated
from dscommerce.observability.logging import get_logger

log = get_logger(__name__)

USERNAME_CLAIM = "username"


def resolve(claims: Mapping[str, Any], identity_lookup: IdentityLookup) -> Identity:
    username = claims.get(USERNAME_CLAIM)
    if not isinstance(username, str):
        log.info("principal_unresolved", reason="missing_username_claim")
        raise Unauthenticated("Email not found")

    try:
        identity = identity_lookup(username)
    except Exception as e:
        log.warning("principal_lookup_failed", error=type(e).__name__)
        raise Unauthenticated("Email not found") from e

    if identity is None:
        log.info("principal_unresolved", reason="unknown_user")
        raise Unauthenticated("Email not found")
    if not identity.roles:
        log.info("principal_unresolved", reason="no_roles")
        raise Unauthenticated("Email not found")
    return identity


# --- Module Notes -----------------------------------------------------------
# Callers that need the current principal call `resolve` again; the caller is
# always passed explicitly and never stored in process-wide state.
