"""Application service: Find Low Stock use case (query).

System-wide scan used for reorder alerts.  Results are ordered by
ascending stock; products with equal stock keep the order the
repository returned them in.
"""

from __future__ import annotations

from invledger.application.dto import LowStockItemDTO
from invledger.application.store_stats import DEFAULT_LOW_STOCK_THRESHOLD
from invledger.domain.model.product import validate_quantity
from invledger.domain.model.store import Store
from invledger.domain.repository.product_repository import ProductRepository
from invledger.domain.repository.store_repository import StoreRepository


class FindLowStockHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        store_repo: StoreRepository,
    ) -> None:
        self._product_repo = product_repo
        self._store_repo = store_repo

    def handle(self, threshold: int = DEFAULT_LOW_STOCK_THRESHOLD) -> list[LowStockItemDTO]:
        validate_quantity(threshold, "Low-stock threshold")

        products = [
            p for p in self._product_repo.list_low_stock(threshold)
            if p.is_active and p.stock <= threshold
        ]
        products.sort(key=lambda p: p.stock)

        stores: dict[str, Store | None] = {}
        items: list[LowStockItemDTO] = []
        for product in products:
            if product.store_id not in stores:
                stores[product.store_id] = self._store_repo.get_by_id(product.store_id)
            store = stores[product.store_id]
            items.append(
                LowStockItemDTO(
                    product_id=product.id,
                    sku=product.sku,
                    name=product.name,
                    stock=product.stock,
                    store_id=product.store_id,
                    store_name=store.name if store is not None else None,
                )
            )
        return items
