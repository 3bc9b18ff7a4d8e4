"""Application service: Remove Product use case.

Removal is a soft delete: the record stays (keeping its SKU reserved)
but disappears from lookups, reports and low-stock alerts.
"""

from __future__ import annotations

import structlog

from invledger.application.adjust_stock import DEFAULT_MAX_RETRIES
from invledger.application.product_writes import edit_active_product
from invledger.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class RemoveProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        max_retries: int = DEFAULT_MAX_RETRIES,
    ) -> None:
        self._product_repo = product_repo
        self._max_retries = max_retries

    def handle(self, product_id: str) -> None:
        product = edit_active_product(
            self._product_repo,
            product_id,
            lambda p: p.deactivate(),
            max_retries=self._max_retries,
        )
        logger.info("Product removed", product_id=product_id, sku=product.sku)
