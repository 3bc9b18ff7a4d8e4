"""Entry points for tests that run work in separate processes.

Kept at module level of an importable module so ``spawn`` children can
unpickle them.
"""

from __future__ import annotations

from pathlib import Path

from invledger.application.adjust_stock import AdjustStockHandler
from invledger.domain.exceptions import DomainException, RepositoryError
from invledger.domain.model.product import AdjustmentMode
from invledger.infrastructure.persistence.json_product_repository import JsonProductRepository


def increment_repeatedly(file_path: str, product_id: str, times: int) -> tuple[int, int]:
    """Add one unit *times* times; return (successes, failures)."""
    handler = AdjustStockHandler(JsonProductRepository(Path(file_path)), max_retries=1000)
    succeeded = failed = 0
    for _ in range(times):
        try:
            handler.handle(product_id, 1, AdjustmentMode.INCREASE)
        except (DomainException, RepositoryError):
            failed += 1
        else:
            succeeded += 1
    return succeeded, failed
