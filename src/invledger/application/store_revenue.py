"""Application service: Store Revenue use case (query)."""

from __future__ import annotations

from invledger.application.dto import StoreRevenueDTO
from invledger.domain.exceptions import EntityNotFoundError
from invledger.domain.repository.product_repository import ProductRepository
from invledger.domain.repository.store_repository import StoreRepository
from invledger.domain.service import valuation


class GetStoreRevenueHandler:

    def __init__(
        self,
        store_repo: StoreRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._store_repo = store_repo
        self._product_repo = product_repo

    def handle(self, store_id: str) -> StoreRevenueDTO:
        """Inventory value, unit count and average price for a store.

        A store without active products reports zeros across the board.
        """
        store = self._store_repo.get_by_id(store_id)
        if store is None or not store.is_active:
            raise EntityNotFoundError(f"Store with ID '{store_id}' not found")

        products = [
            p for p in self._product_repo.list_by_store(store_id, active_only=True)
            if p.is_active
        ]

        return StoreRevenueDTO(
            store_id=store.id,
            store_name=store.name,
            total_inventory_value=valuation.inventory_value(products).rounded().amount,
            total_products=len(products),
            total_stock=valuation.total_stock(products),
            average_product_price=valuation.average_price(products).rounded().amount,
        )
