"""
dscommerce.db.repositories.users

Identity store lookups.

Responsibilities:
- Point lookup of an `Identity` by email.
- The credential query: one `RoleRow` per (user, role) pair for an email.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from dscommerce.auth.models import Identity, Role, RoleRow
from dscommerce.db.models import RoleModel, UserModel


class UserRepo:
    def __init__(self, session: Session) -> None:
        self._session = session

    def find_by_email(self, email: str) -> Identity | None:
        stmt = (
            select(UserModel)
            .options(selectinload(UserModel.roles))
            .where(UserModel.email == email)
        )
        user = self._session.execute(stmt).scalar_one_or_none()
        if user is None:
            return None
        return Identity(
            id=user.id,
            display_name=user.name,
            email=user.email,
            password_hash=user.password,
            roles=frozenset(Role(id=r.id, authority=r.authority) for r in user.roles),
        )

    def search_role_rows(self, email: str) -> list[RoleRow]:
        # Inner join: a user without roles yields no rows, same as an unknown email.
        stmt = (
            select(UserModel.email, UserModel.password, RoleModel.id, RoleModel.authority)
            .join(UserModel.roles)
            .where(UserModel.email == email)
            .order_by(RoleModel.id)
        )
        return [
            RoleRow(email=row_email, password_hash=password, role_id=role_id, authority=authority)
            for row_email, password, role_id, authority in self._session.execute(stmt)
        ]
