"""
dscommerce.services.user_service

Identity-facing use cases.

Responsibilities:
- Load a user's credentials and roles by email (credential loading entry point).
- Return the calling user's own profile.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from dscommerce.auth.models import ADMIN_AUTHORITY, CLIENT_AUTHORITY, Identity
from dscommerce.auth.policy import require_any_role
from dscommerce.auth.principal import resolve
from dscommerce.auth.roles import aggregate
from dscommerce.db.repositories.users import UserRepo


class UserService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session

    async def load_user_by_username(self, username: str) -> Identity:
        return await self._session.run_sync(_load_user_by_username, username)

    async def find_me(self, claims: Mapping[str, Any]) -> Identity:
        return await self._session.run_sync(_find_me, claims)


def _load_user_by_username(session: Session, username: str) -> Identity:
    rows = UserRepo(session).search_role_rows(username)
    return aggregate(rows, username)


def _find_me(session: Session, claims: Mapping[str, Any]) -> Identity:
    me = resolve(claims, UserRepo(session).find_by_email)
    require_any_role(me, ADMIN_AUTHORITY, CLIENT_AUTHORITY)
    return me


# --- Module Notes -----------------------------------------------------------
# `run_sync` hands the synchronous core a plain `Session` bound to this request's
# connection, so lookups stay point reads on the request's own transaction.
