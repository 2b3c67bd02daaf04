"""
dscommerce.orders.models

Order domain models (read-only views of persisted orders).
"""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal


class OrderStatus(enum.StrEnum):
    waiting_payment = "WAITING_PAYMENT"
    paid = "PAID"
    shipped = "SHIPPED"
    delivered = "DELIVERED"
    canceled = "CANCELED"


@dataclass(frozen=True, slots=True)
class OrderLine:
    """
    One item of an order. `unit_price` is the price captured when the order
    was placed, not the product's current price.
    """

    product_id: int
    name: str
    unit_price: Decimal
    quantity: int


@dataclass(frozen=True, slots=True)
class Order:
    id: int
    owning_identity_id: int
    moment: datetime
    status: OrderStatus
    client_name: str = ""
    items: tuple[OrderLine, ...] = field(default_factory=tuple)


OrderLookup = Callable[[int], Order | None]
