"""
dscommerce.auth.models

Auth domain models.

Responsibilities:
- Define `Role`, `Identity` and the raw `RoleRow` credential projection.
- Define the collaborator lookup signatures consumed by the auth core.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

ADMIN_AUTHORITY = "ROLE_ADMIN"
CLIENT_AUTHORITY = "ROLE_CLIENT"


@dataclass(frozen=True, slots=True)
class Role:
    """
    A permission grant. Two roles are the same role when their authority
    strings match exactly (case-sensitive); the numeric id is not compared.
    """

    id: int = field(compare=False)
    authority: str


@dataclass(frozen=True, slots=True)
class Identity:
    """
    Authenticated caller identity. `email` is the external lookup key, `id`
    the internal one (absent when built from credential rows alone).
    """

    email: str
    password_hash: str
    roles: frozenset[Role]
    id: int | None = None
    display_name: str = ""

    def has_role(self, authority: str) -> bool:
        return any(role.authority == authority for role in self.roles)

    def has_any_role(self, *authorities: str) -> bool:
        return any(self.has_role(a) for a in authorities)

    @property
    def is_admin(self) -> bool:
        return self.has_role(ADMIN_AUTHORITY)


@dataclass(frozen=True, slots=True)
class RoleRow:
    # One row per (identity, role) pair as returned by the credential query.
    email: str
    password_hash: str
    role_id: int
    authority: str


IdentityLookup = Callable[[str], Identity | None]
RoleRowLookup = Callable[[str], Sequence[RoleRow]]


# --- Module Notes -----------------------------------------------------------
# Identities are rebuilt on every request; nothing here is cached.
