"""Order Pricing — pure subtotal/total computation for order lines.

Invariants:
    - subtotal = (unit_price + sum(add-on prices)) * quantity, rounded to cents
    - total = sum(subtotals), rounded to cents
    - Prices come from the snapshot captured at order time, never the live catalog
"""

from collections.abc import Iterable


def price_line(
    unit_price: float, add_on_prices: Iterable[float], quantity: int,
) -> float:
    return round((unit_price + sum(add_on_prices)) * quantity, 2)


def order_total(subtotals: Iterable[float]) -> float:
    return round(sum(subtotals), 2)
