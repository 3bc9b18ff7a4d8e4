"""Application service: Store Stats use case (query).

Read-only summary of one store's active catalog: how many products,
what the stock is worth, how that splits across categories and how
many products need reordering.
"""

from __future__ import annotations

from invledger.application.dto import CategoryStatsDTO, StoreStatsDTO
from invledger.domain.exceptions import EntityNotFoundError
from invledger.domain.model.product import validate_quantity
from invledger.domain.repository.product_repository import ProductRepository
from invledger.domain.repository.store_repository import StoreRepository
from invledger.domain.service import valuation

DEFAULT_LOW_STOCK_THRESHOLD = 10


class GetStoreStatsHandler:

    def __init__(
        self,
        store_repo: StoreRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._store_repo = store_repo
        self._product_repo = product_repo

    def handle(
        self,
        store_id: str,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> StoreStatsDTO:
        validate_quantity(low_stock_threshold, "Low-stock threshold")

        store = self._store_repo.get_by_id(store_id)
        if store is None or not store.is_active:
            raise EntityNotFoundError(f"Store with ID '{store_id}' not found")

        products = [
            p for p in self._product_repo.list_by_store(store_id, active_only=True)
            if p.is_active
        ]

        categories = [
            CategoryStatsDTO(
                category=summary.category,
                product_count=summary.product_count,
                total_value=summary.total_value.rounded().amount,
            )
            for summary in valuation.summarize_by_category(products)
        ]

        return StoreStatsDTO(
            store_id=store.id,
            store_name=store.name,
            total_products=len(products),
            total_inventory_value=valuation.inventory_value(products).rounded().amount,
            products_by_category=categories,
            low_stock_products=valuation.count_at_or_below(products, low_stock_threshold),
            low_stock_threshold=low_stock_threshold,
        )
