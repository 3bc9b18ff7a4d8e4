"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Monetary figures are
already rounded to cents.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from invledger.domain.model.product import AdjustmentMode, Product


@dataclass(frozen=True)
class StockAdjustmentResult:
    """Output: the stock transition produced by one adjustment."""

    product: Product  # snapshot after the write
    previous_stock: int
    new_stock: int
    mode: AdjustmentMode
    quantity: int
    reason: str | None = None


@dataclass(frozen=True)
class CategoryStatsDTO:
    category: str
    product_count: int
    total_value: Decimal


@dataclass(frozen=True)
class StoreStatsDTO:
    store_id: str
    store_name: str
    total_products: int
    total_inventory_value: Decimal
    products_by_category: list[CategoryStatsDTO]
    low_stock_products: int
    low_stock_threshold: int


@dataclass(frozen=True)
class StoreRevenueDTO:
    store_id: str
    store_name: str
    total_inventory_value: Decimal
    total_products: int
    total_stock: int
    average_product_price: Decimal


@dataclass(frozen=True)
class LowStockItemDTO:
    """Output: one product at or below the low-stock threshold."""

    product_id: str
    sku: str
    name: str
    stock: int
    store_id: str
    store_name: str | None  # None when the owning store record is missing
