"""Application service: Remove Store use case.

Soft delete.  The store drops out of lookups and store reports; its
products are left as they are and still show up in the system-wide
low-stock scan.
"""

from __future__ import annotations

import structlog

from invledger.domain.exceptions import EntityNotFoundError
from invledger.domain.repository.store_repository import StoreRepository

logger = structlog.get_logger(__name__)


class RemoveStoreHandler:

    def __init__(self, store_repo: StoreRepository) -> None:
        self._store_repo = store_repo

    def handle(self, store_id: str) -> None:
        store = self._store_repo.get_by_id(store_id)
        if store is None or not store.is_active:
            raise EntityNotFoundError(f"Store with ID '{store_id}' not found")

        store.deactivate()
        self._store_repo.save(store)
        logger.info("Store removed", store_id=store_id, name=store.name)
