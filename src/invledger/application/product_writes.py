"""Catalog edits that must not clobber concurrent stock adjustments.

A plain ``save`` of a product read a moment ago would write back the
stock it saw, undoing any adjustment that landed in between.  Edits
therefore go through the same compare-and-swap as the stock ledger,
keyed on the stock value that was read; on conflict the edit is redone
against the fresh record.
"""

from __future__ import annotations

from collections.abc import Callable

import structlog

from invledger.application.adjust_stock import DEFAULT_MAX_RETRIES
from invledger.domain.exceptions import ConcurrentUpdateError, EntityNotFoundError
from invledger.domain.model.product import Product
from invledger.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


def edit_active_product(
    product_repo: ProductRepository,
    product_id: str,
    change: Callable[[Product], None],
    max_retries: int = DEFAULT_MAX_RETRIES,
) -> Product:
    """Apply *change* to an active product and persist it, stock untouched."""
    for attempt in range(1, max_retries + 1):
        product = product_repo.get_by_id(product_id)
        if product is None or not product.is_active:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        stock_read = product.stock
        change(product)
        product.stock = stock_read

        saved = product_repo.save_if_stock(product, expected_stock=stock_read)
        if saved is not None:
            return saved
        logger.warning(
            "Stock changed during product edit, retrying",
            product_id=product_id,
            attempt=attempt,
            max_retries=max_retries,
        )

    raise ConcurrentUpdateError(
        f"Product with ID '{product_id}' was modified concurrently "
        f"{max_retries} times; edit abandoned"
    )
