# app/services/pricing.py
#
# Line subtotals and grand total for a cart. Pure: no session, no I/O.

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, NamedTuple

CENT = Decimal("0.01")

# Largest amount a Numeric(20, 2) subtotal or total column holds
MAX_TOTAL = Decimal("999999999999999999.99")


class PricedLines(NamedTuple):
    subtotals: list[Decimal]
    total: Decimal


def to_money(value) -> Decimal:
    # str() first so a float price like 699.99 does not carry binary noise
    if isinstance(value, Decimal):
        amount = value
    else:
        amount = Decimal(str(value))
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def calculate_totals(lines: Iterable[tuple]) -> PricedLines:
    """
    Price a sequence of ``(unit_price, quantity)`` pairs.

    Each subtotal is ``unit_price * quantity`` and the total is their sum,
    all kept as two-place Decimals.
    """
    subtotals = []
    total = Decimal("0.00")

    for unit_price, quantity in lines:
        subtotal = to_money(to_money(unit_price) * quantity)
        subtotals.append(subtotal)
        total += subtotal

    return PricedLines(subtotals=subtotals, total=total)
