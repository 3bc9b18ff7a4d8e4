"""Application service: Add Store use case."""

from __future__ import annotations

import structlog

from invledger.domain.model.store import Store
from invledger.domain.repository.store_repository import StoreRepository

logger = structlog.get_logger(__name__)


class AddStoreHandler:

    def __init__(self, store_repo: StoreRepository) -> None:
        self._store_repo = store_repo

    def handle(self, name: str, address: str, city: str | None = None) -> Store:
        store = self._store_repo.save(Store.create(name=name, address=address, city=city))
        logger.info("Store added", store_id=store.id, name=store.name)
        return store
