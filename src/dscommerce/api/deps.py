"""
dscommerce.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for settings and DB sessions.
- Encapsulate app.state access patterns (settings/sessionmaker).
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from dscommerce.db.session import read_only_scope
from dscommerce.settings import Settings


def settings_dep(request: Request) -> Settings:
    # Set in `create_app`, so tests can inject their own Settings.
    return request.app.state.settings  # type: ignore[attr-defined]


def sessionmaker_from_app(request: Request) -> async_sessionmaker[AsyncSession]:
    # Created in the app lifespan (see `dscommerce.api.app.create_app`).
    return request.app.state.sessionmaker  # type: ignore[attr-defined]


async def read_only_session(
    session_factory: async_sessionmaker[AsyncSession] = Depends(sessionmaker_from_app),
) -> AsyncIterator[AsyncSession]:
    async with read_only_scope(session_factory) as session:
        yield session
