"""
dscommerce.db.seed

Demo data for dev/test databases.

Responsibilities:
- Insert two users (a client, and a client who is also admin), a few products
  and orders owned by each, once per empty database.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from dscommerce.auth.models import ADMIN_AUTHORITY, CLIENT_AUTHORITY
from dscommerce.db.models import (
    OrderItemModel,
    OrderModel,
    ProductModel,
    RoleModel,
    UserModel,
)
from dscommerce.observability.logging import get_logger
from dscommerce.orders.models import OrderStatus

log = get_logger(__name__)

# bcrypt("123456"); only stored, never checked by this service.
DEMO_PASSWORD_HASH = "$2a$10$N7SkKCa3r17ga.i.dF9iy.BFUBL2n3b6Z1CWSZWi/qy7ABq/E6VpO"


async def seed_demo_data(engine: AsyncEngine) -> bool:
    """
    Returns False when users already exist (nothing is inserted).
    """

    async with AsyncSession(engine, expire_on_commit=False) as session:
        existing = await session.scalar(select(func.count()).select_from(UserModel))
        if existing:
            return False

        client_role = RoleModel(id=1, authority=CLIENT_AUTHORITY)
        admin_role = RoleModel(id=2, authority=ADMIN_AUTHORITY)

        maria = UserModel(
            id=1,
            name="Maria Brown",
            email="maria@gmail.com",
            phone="988888888",
            birth_date=date(2001, 7, 25),
            password=DEMO_PASSWORD_HASH,
            roles=[client_role],
        )
        alex = UserModel(
            id=2,
            name="Alex Green",
            email="alex@gmail.com",
            phone="977777777",
            birth_date=date(1987, 12, 13),
            password=DEMO_PASSWORD_HASH,
            roles=[client_role, admin_role],
        )

        lotr = ProductModel(id=1, name="The Lord of the Rings", price=Decimal("90.50"))
        tv = ProductModel(id=2, name="Smart TV", price=Decimal("2190.00"))
        macbook = ProductModel(id=3, name="Macbook Pro", price=Decimal("1250.00"))

        order_1 = OrderModel(
            id=1,
            moment=datetime(2022, 7, 25, 13, 0),
            status=OrderStatus.paid,
            client=maria,
            items=[
                OrderItemModel(product=lotr, quantity=2, price=Decimal("90.50")),
                OrderItemModel(product=macbook, quantity=1, price=Decimal("1250.00")),
            ],
        )
        order_2 = OrderModel(
            id=2,
            moment=datetime(2022, 7, 29, 15, 50),
            status=OrderStatus.delivered,
            client=alex,
            items=[OrderItemModel(product=tv, quantity=1, price=Decimal("2190.00"))],
        )
        order_3 = OrderModel(
            id=3,
            moment=datetime(2022, 8, 3, 14, 20),
            status=OrderStatus.waiting_payment,
            client=maria,
            items=[OrderItemModel(product=macbook, quantity=1, price=Decimal("1250.00"))],
        )

        session.add_all([maria, alex, lotr, tv, macbook, order_1, order_2, order_3])
        await session.commit()

    log.info("demo_data_seeded", users=2, orders=3)
    return True


# --- Module Notes -----------------------------------------------------------
# Moments are stored as naive UTC, matching how `db.models.OrderModel.moment` is read.
