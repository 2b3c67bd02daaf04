from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from dscommerce.db.repositories.orders import OrderRepo
from dscommerce.db.repositories.users import UserRepo
from dscommerce.orders.guard import authorize_view
from dscommerce.orders.models import Order


class OrderService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, order_id: int, claims: Mapping[str, Any]) -> Order:
        return await self._session.run_sync(_find_by_id, order_id, claims)


def _find_by_id(session: Session, order_id: int, claims: Mapping[str, Any]) -> Order:
    return authorize_view(
        order_id,
        claims,
        order_lookup=OrderRepo(session).find_by_id,
        identity_lookup=UserRepo(session).find_by_email,
    )
