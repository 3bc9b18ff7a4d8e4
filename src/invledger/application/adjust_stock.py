"""Application service: Adjust Stock use case.

Applies exactly one stock mutation to exactly one product and reports
the transition.  The read-modify-write is made safe against concurrent
writers by the repository's compare-and-swap (``save_if_stock``): if the
stored stock moved since it was read, the whole step is redone against
the fresh value, so a decrease is re-checked against the latest stock.
"""

from __future__ import annotations

import structlog

from invledger.application.dto import StockAdjustmentResult
from invledger.domain.exceptions import ConcurrentUpdateError, EntityNotFoundError
from invledger.domain.model.product import AdjustmentMode, validate_quantity
from invledger.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)

DEFAULT_MAX_RETRIES = 5


class AdjustStockHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        max_retries: int = DEFAULT_MAX_RETRIES,
    ) -> None:
        if max_retries < 1:
            raise ValueError("max_retries must be at least 1")
        self._product_repo = product_repo
        self._max_retries = max_retries

    def handle(
        self,
        product_id: str,
        quantity: int,
        mode: AdjustmentMode | str,
        reason: str | None = None,
    ) -> StockAdjustmentResult:
        """Increase, decrease or overwrite a product's stock.

        Raises ValidationError for a bad quantity or mode,
        EntityNotFoundError for a missing or inactive product and
        InsufficientStockError when a decrease exceeds current stock.
        Nothing is written in any of those cases.
        """
        validate_quantity(quantity)
        mode = AdjustmentMode.parse(mode)

        for attempt in range(1, self._max_retries + 1):
            product = self._product_repo.get_by_id(product_id)
            if product is None or not product.is_active:
                raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

            previous_stock = product.stock
            product.apply_adjustment(mode, quantity)

            saved = self._product_repo.save_if_stock(product, expected_stock=previous_stock)
            if saved is None:
                logger.warning(
                    "Stock changed during adjustment, retrying",
                    product_id=product_id,
                    attempt=attempt,
                    max_retries=self._max_retries,
                )
                continue

            logger.info(
                "Stock adjusted",
                product_id=product_id,
                sku=saved.sku,
                mode=mode.value,
                quantity=quantity,
                previous_stock=previous_stock,
                new_stock=saved.stock,
                reason=reason,
            )
            return StockAdjustmentResult(
                product=saved,
                previous_stock=previous_stock,
                new_stock=saved.stock,
                mode=mode,
                quantity=quantity,
                reason=reason,
            )

        raise ConcurrentUpdateError(
            f"Product with ID '{product_id}' was modified concurrently "
            f"{self._max_retries} times; adjustment abandoned"
        )
