"""
dscommerce.auth.roles

Collapse credential rows into a single identity.
"""

from __future__ import annotations

from collections.abc import Sequence

from dscommerce.auth.models import Identity, Role, RoleRow
from dscommerce.errors import NotFound


def aggregate(rows: Sequence[RoleRow], email: str) -> Identity:
    """
    Build one `Identity` for `email` out of its (email, hash, role) rows.

    The password hash is taken from the first row. Rows are not cross-checked:
    differing hashes or a role id mapped to two authorities are accepted as-is.
    """

    if not rows:
        raise NotFound(email)

    roles = frozenset(Role(id=row.role_id, authority=row.authority) for row in rows)
    return Identity(email=email, password_hash=rows[0].password_hash, roles=roles)
