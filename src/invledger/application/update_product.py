"""Application service: Update Product use case.

Changes catalog details of an active product: name, SKU, price,
category, description and owning store.  Stock is never touched here;
it only moves through stock adjustments.
"""

from __future__ import annotations

import structlog

from invledger.application.adjust_stock import DEFAULT_MAX_RETRIES
from invledger.application.product_writes import edit_active_product
from invledger.domain.exceptions import DuplicateSkuError, EntityNotFoundError, ValidationError
from invledger.domain.model.product import Product
from invledger.domain.model.value_objects import Money
from invledger.domain.repository.product_repository import ProductRepository
from invledger.domain.repository.store_repository import StoreRepository

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        store_repo: StoreRepository,
        max_retries: int = DEFAULT_MAX_RETRIES,
    ) -> None:
        self._product_repo = product_repo
        self._store_repo = store_repo
        self._max_retries = max_retries

    def handle(
        self,
        product_id: str,
        name: str | None = None,
        sku: str | None = None,
        price: str | None = None,
        category: str | None = None,
        description: str | None = None,
        store_id: str | None = None,
    ) -> Product:
        """Update the given fields; ``None`` leaves a field as it is.

        An empty string clears ``category`` or ``description``.
        Reassigning to another store requires that store to be active.
        """
        if all(v is None for v in (name, sku, price, category, description, store_id)):
            raise ValidationError("Nothing to update")

        new_price = Money.of(price) if price is not None else None

        if store_id is not None:
            target = self._store_repo.get_by_id(store_id)
            if target is None or not target.is_active:
                raise EntityNotFoundError(f"Store with ID '{store_id}' not found")

        if sku is not None:
            holder = self._product_repo.get_by_sku(sku.strip())
            if holder is not None and holder.id != product_id:
                raise DuplicateSkuError(f"SKU '{sku.strip()}' is already in use")

        def change(product: Product) -> None:
            if name is not None:
                product.rename(name)
            if sku is not None:
                product.change_sku(sku)
            if new_price is not None:
                product.update_price(new_price)
            if category is not None:
                product.recategorize(category)
            if description is not None:
                product.describe(description)
            if store_id is not None:
                product.move_to_store(store_id)

        updated = edit_active_product(
            self._product_repo, product_id, change, max_retries=self._max_retries
        )
        logger.info(
            "Product updated",
            product_id=product_id,
            sku=updated.sku,
            store_id=updated.store_id,
        )
        return updated
