"""
dscommerce.api.routers.orders

Order read endpoints.

Responsibilities:
- Expose `GET /orders/{id}` behind the self-or-admin ownership gate.
- Attach per-item subtotals and the order total to the response.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from sqlalchemy.ext.asyncio import AsyncSession

from dscommerce.api.deps import read_only_session
from dscommerce.auth.deps import get_claims
from dscommerce.orders import totals
from dscommerce.orders.models import Order, OrderLine
from dscommerce.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ClientResponse(_CamelModel):
    id: int
    name: str


class OrderItemResponse(_CamelModel):
    product_id: int
    name: str
    price: Decimal
    quantity: int
    sub_total: Decimal

    @classmethod
    def from_line(cls, line: OrderLine) -> OrderItemResponse:
        return cls(
            product_id=line.product_id,
            name=line.name,
            price=line.unit_price,
            quantity=line.quantity,
            sub_total=totals.subtotal(line),
        )


class OrderResponse(_CamelModel):
    id: int
    moment: datetime
    status: str
    client: ClientResponse
    items: list[OrderItemResponse]
    total: Decimal

    @classmethod
    def from_order(cls, order: Order) -> OrderResponse:
        return cls(
            id=order.id,
            moment=order.moment,
            status=order.status.value,
            client=ClientResponse(id=order.owning_identity_id, name=order.client_name),
            items=[OrderItemResponse.from_line(line) for line in order.items],
            total=totals.total(order.items),
        )


@router.get("/{order_id}", response_model=OrderResponse)
async def find_order_by_id(
    order_id: int,
    claims: dict[str, Any] = Depends(get_claims),
    session: AsyncSession = Depends(read_only_session),
) -> OrderResponse:
    order = await OrderService(session=session).find_by_id(order_id, claims)
    return OrderResponse.from_order(order)
