"""Application service: Add Product use case."""

from __future__ import annotations

import structlog

from invledger.domain.exceptions import DuplicateSkuError, EntityNotFoundError
from invledger.domain.model.product import Product
from invledger.domain.model.value_objects import Money
from invledger.domain.repository.product_repository import ProductRepository
from invledger.domain.repository.store_repository import StoreRepository

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        store_repo: StoreRepository,
    ) -> None:
        self._product_repo = product_repo
        self._store_repo = store_repo

    def handle(
        self,
        store_id: str,
        sku: str,
        name: str,
        price: str,
        stock: int = 0,
        category: str | None = None,
        description: str | None = None,
    ) -> Product:
        """Add a new product to a store's catalog."""
        store = self._store_repo.get_by_id(store_id)
        if store is None or not store.is_active:
            raise EntityNotFoundError(f"Store with ID '{store_id}' not found")

        product = Product.create(
            store_id=store.id,
            sku=sku,
            name=name,
            price=Money.of(price),
            stock=stock,
            category=category,
            description=description,
        )

        # SKUs stay reserved by soft-deleted products too
        if self._product_repo.get_by_sku(product.sku) is not None:
            raise DuplicateSkuError(f"SKU '{product.sku}' is already in use")

        saved = self._product_repo.save(product)
        logger.info("Product added", product_id=saved.id, sku=saved.sku, store_id=store.id)
        return saved
