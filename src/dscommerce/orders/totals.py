"""
dscommerce.orders.totals

Order total aggregation.

All amounts are `Decimal`; summing binary floats drifts on repeated additions.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from dscommerce.orders.models import OrderLine


def subtotal(line: OrderLine) -> Decimal:
    return line.unit_price * line.quantity


def total(lines: Iterable[OrderLine]) -> Decimal:
    return sum((subtotal(line) for line in lines), Decimal("0"))
