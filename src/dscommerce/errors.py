"""
dscommerce.errors

Error taxonomy shared by the identity and order-access core.

Responsibilities:
- Define the three terminal failure kinds raised by the core.
- Keep transport concerns (status codes) out; see `api.errors`.
"""

from __future__ import annotations


class DomainError(Exception):
    """
    Base class for failures that propagate unchanged to the HTTP boundary.
    """

    code: str = "domain_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFound(DomainError):
    # Requested entity is absent.
    code = "not_found"


class Forbidden(DomainError):
    # Caller is authenticated but not allowed to touch the resource.
    code = "forbidden"


class Unauthenticated(DomainError):
    # No identity could be resolved from the presented claims.
    code = "unauthenticated"


# --- Module Notes -----------------------------------------------------------
# None of these are retried internally. `Unauthenticated` is deliberately coarse:
# malformed claims, unknown users and lookup faults all surface as this one kind.
