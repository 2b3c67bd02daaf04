from __future__ import annotations

from decimal import Decimal

from dscommerce.orders.models import OrderLine
from dscommerce.orders.totals import subtotal, total


def _line(price: str, quantity: int, product_id: int = 1) -> OrderLine:
    return OrderLine(product_id=product_id, name="p", unit_price=Decimal(price), quantity=quantity)


def test_subtotal_is_price_times_quantity() -> None:
    assert subtotal(_line("10.0", 2)) == Decimal("20.0")


def test_total_of_no_lines_is_zero() -> None:
    assert total([]) == 0
    assert isinstance(total([]), Decimal)


def test_total_sums_subtotals() -> None:
    assert total([_line("10.0", 2), _line("5.0", 1, product_id=2)]) == Decimal("25.0")


def test_total_has_no_binary_float_drift() -> None:
    lines = [_line("0.10", 1, product_id=i) for i in range(10)]

    assert total(lines) == Decimal("1.00")
    assert total(lines + [_line("0.20", 1, product_id=99)]) == Decimal("1.30")
