"""
Order financial calculator.

All amounts are integer cents. Tax is a fixed 8.25% of the subtotal, rounded
half-up to the nearest cent (ROUND_HALF_UP; every amount here is non-negative,
so this is the same as rounding half away from zero). Averages in the
analytics reports use the same rounding.

Usage:
    from orders.calculators import calculate_totals, derive_financials

    # At order creation, from canonical menu prices
    totals = calculate_totals([{"price_cents": 1000, "quantity": 2}])

    # On every read, from the stored total and the item snapshots
    financials = derive_financials(order.total_cents, order.items.all())
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Iterable, Union

TAX_RATE = Decimal("0.0825")

Line = Union[Dict[str, Any], Any]


def round_half_up(value: Union[Decimal, int, str]) -> int:
    """Round to the nearest integer, halves going up."""
    return int(Decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def average_cents(total_cents: int, count: int) -> int:
    """round(total / count), or 0 when there is nothing to average."""
    if count <= 0:
        return 0
    return round_half_up(Decimal(total_cents) / Decimal(count))


def _line_value(line: Line, field: str) -> int:
    if isinstance(line, dict):
        return int(line[field])
    return int(getattr(line, field))


def calculate_subtotal(lines: Iterable[Line]) -> int:
    """
    Sum of price_cents * quantity.

    Lines may be mappings or objects (e.g. OrderItem) exposing `price_cents`
    and `quantity`.
    """
    return sum(
        _line_value(line, "price_cents") * _line_value(line, "quantity")
        for line in lines
    )


def calculate_tax(subtotal_cents: int) -> int:
    return round_half_up(Decimal(subtotal_cents) * TAX_RATE)


def calculate_totals(lines: Iterable[Line]) -> Dict[str, int]:
    """
    Returns subtotal_cents, tax_cents and total_cents for a set of lines.

    Callers are responsible for passing canonical prices; this function never
    looks anything up.
    """
    subtotal_cents = calculate_subtotal(lines)
    tax_cents = calculate_tax(subtotal_cents)
    return {
        "subtotal_cents": subtotal_cents,
        "tax_cents": tax_cents,
        "total_cents": subtotal_cents + tax_cents,
    }


def derive_financials(total_cents: int, lines: Iterable[Line]) -> Dict[str, int]:
    """
    Rebuilds subtotal and tax for a stored order.

    The subtotal comes from the item price snapshots; tax is whatever the
    stored total holds above it, never negative.
    """
    subtotal_cents = calculate_subtotal(lines)
    return {
        "subtotal_cents": subtotal_cents,
        "tax_cents": max(total_cents - subtotal_cents, 0),
    }
