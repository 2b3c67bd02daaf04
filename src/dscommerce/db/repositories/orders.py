from __future__ import annotations

from datetime import UTC

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload, selectinload

from dscommerce.db.models import OrderItemModel, OrderModel
from dscommerce.orders.models import Order, OrderLine


class OrderRepo:
    def __init__(self, session: Session) -> None:
        self._session = session

    def find_by_id(self, order_id: int) -> Order | None:
        stmt = (
            select(OrderModel)
            .options(
                joinedload(OrderModel.client),
                selectinload(OrderModel.items).joinedload(OrderItemModel.product),
            )
            .where(OrderModel.id == order_id)
        )
        row = self._session.execute(stmt).unique().scalar_one_or_none()
        if row is None:
            return None
        return Order(
            id=row.id,
            owning_identity_id=row.client_id,
            moment=row.moment.replace(tzinfo=UTC),
            status=row.status,
            client_name=row.client.name,
            items=tuple(
                OrderLine(
                    product_id=item.product_id,
                    name=item.product.name,
                    unit_price=item.price,
                    quantity=item.quantity,
                )
                for item in row.items
            ),
        )
