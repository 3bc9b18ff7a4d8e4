"""Domain service: inventory valuation.

Pure folds over a set of products.  Sums are returned unrounded; callers
round once, on the final figure.

None of these functions filter by ``is_active``; callers decide which
products are in scope.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal
from functools import reduce
from operator import add

from invledger.domain.model.product import Product
from invledger.domain.model.value_objects import Money

NOTHING = Money(Decimal("0"))


@dataclass
class CategorySummary:
    category: str
    product_count: int = 0
    total_value: Money = NOTHING


def _total(amounts: list[Money]) -> Money:
    return reduce(add, amounts) if amounts else NOTHING


def inventory_value(products: Iterable[Product]) -> Money:
    """Sum of ``price * stock`` over *products*."""
    return _total([p.inventory_value for p in products])


def total_stock(products: Iterable[Product]) -> int:
    return sum(p.stock for p in products)


def average_price(products: Iterable[Product]) -> Money:
    """Arithmetic mean of prices; zero for an empty set."""
    prices = [p.price for p in products]
    if not prices:
        return NOTHING
    return _total(prices) / len(prices)


def summarize_by_category(products: Iterable[Product]) -> list[CategorySummary]:
    """Group products by category label.

    Groups come back in the order their category was first seen.
    """
    groups: dict[str, CategorySummary] = {}
    for product in products:
        label = product.category_label
        summary = groups.get(label)
        if summary is None:
            summary = groups[label] = CategorySummary(
                category=label, total_value=product.inventory_value
            )
        else:
            summary.total_value += product.inventory_value
        summary.product_count += 1
    return list(groups.values())


def count_at_or_below(products: Iterable[Product], threshold: int) -> int:
    return sum(1 for p in products if p.stock <= threshold)
