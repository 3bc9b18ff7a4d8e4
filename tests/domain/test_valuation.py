"""Unit tests for the valuation domain service."""

from decimal import Decimal

import pytest

from invledger.domain.exceptions import ValidationError
from invledger.domain.model.product import UNCATEGORIZED, Product
from invledger.domain.model.value_objects import Money
from invledger.domain.service import valuation


def _p(price: str, stock: int, category: str | None = None) -> Product:
    return Product(
        id=None, sku=f"SKU-{price}-{stock}", name="Item", price=Money.of(price),
        store_id="1", stock=stock, category=category,
    )


class TestInventoryValue:

    def test_sums_price_times_stock(self):
        products = [_p("100", 10), _p("50", 5), _p("200", 3)]
        assert valuation.inventory_value(products) == Money(Decimal("1850"))

    def test_is_not_rounded(self):
        assert valuation.inventory_value([_p("10.005", 1), _p("10.005", 1)]).amount == Decimal("20.010")

    def test_empty_is_zero(self):
        assert valuation.inventory_value([]).amount == Decimal("0")


class TestTotals:

    def test_total_stock(self):
        assert valuation.total_stock([_p("1", 3), _p("1", 4)]) == 7

    def test_average_price(self):
        assert valuation.average_price([_p("10", 1), _p("20", 0)]).amount == Decimal("15")

    def test_average_price_of_nothing_is_zero(self):
        assert valuation.average_price([]).amount == Decimal("0")

    def test_count_at_or_below(self):
        products = [_p("1", 5), _p("1", 10), _p("1", 11)]
        assert valuation.count_at_or_below(products, 10) == 2


class TestSummarizeByCategory:

    def test_groups_in_first_seen_order(self):
        products = [
            _p("1", 1, "Zumos"),
            _p("1", 1, "Alimentos"),
            _p("1", 1, "Zumos"),
            _p("1", 1, "Bebidas"),
        ]
        summaries = valuation.summarize_by_category(products)
        assert [s.category for s in summaries] == ["Zumos", "Alimentos", "Bebidas"]
        assert [s.product_count for s in summaries] == [2, 1, 1]

    def test_missing_and_blank_categories_share_a_bucket(self):
        products = [_p("2", 1, None), _p("3", 1, ""), _p("4", 1, "Bebidas")]
        summaries = valuation.summarize_by_category(products)
        assert summaries[0].category == UNCATEGORIZED
        assert summaries[0].product_count == 2
        assert summaries[0].total_value == Money(Decimal("5"))

    def test_empty(self):
        assert valuation.summarize_by_category([]) == []


class TestCurrency:

    def test_mixed_currencies_cannot_be_summed(self):
        euro = Product(
            id=None, sku="EUR-1", name="Item", price=Money(Decimal("2"), "EUR"),
            store_id="1", stock=1,
        )
        with pytest.raises(ValidationError, match="Cannot combine"):
            valuation.inventory_value([_p("1", 1), euro])

    def test_average_price_keeps_currency(self):
        euro = Product(
            id=None, sku="EUR-1", name="Item", price=Money(Decimal("3"), "EUR"),
            store_id="1", stock=0,
        )
        assert valuation.average_price([euro]).currency == "EUR"
