"""Application service: product lookups (query).

Inactive products are treated exactly like missing ones.
"""

from __future__ import annotations

from invledger.domain.exceptions import EntityNotFoundError
from invledger.domain.model.product import Product
from invledger.domain.repository.product_repository import ProductRepository
from invledger.domain.repository.store_repository import StoreRepository


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def by_id(self, product_id: str) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None or not product.is_active:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        return product

    def by_sku(self, sku: str) -> Product:
        product = self._product_repo.get_by_sku(sku)
        if product is None or not product.is_active:
            raise EntityNotFoundError(f"Product with SKU '{sku}' not found")
        return product


class ListStoreProductsHandler:

    def __init__(
        self,
        store_repo: StoreRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._store_repo = store_repo
        self._product_repo = product_repo

    def handle(self, store_id: str) -> list[Product]:
        store = self._store_repo.get_by_id(store_id)
        if store is None or not store.is_active:
            raise EntityNotFoundError(f"Store with ID '{store_id}' not found")
        return [
            p for p in self._product_repo.list_by_store(store_id, active_only=True)
            if p.is_active
        ]
