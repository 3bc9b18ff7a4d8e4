"""Application service: Update Store use case."""

from __future__ import annotations

import structlog

from invledger.domain.exceptions import EntityNotFoundError, ValidationError
from invledger.domain.model.store import Store
from invledger.domain.repository.store_repository import StoreRepository

logger = structlog.get_logger(__name__)


class UpdateStoreHandler:

    def __init__(self, store_repo: StoreRepository) -> None:
        self._store_repo = store_repo

    def handle(
        self,
        store_id: str,
        name: str | None = None,
        address: str | None = None,
        city: str | None = None,
    ) -> Store:
        """Update the given fields; an empty ``city`` clears it."""
        if name is None and address is None and city is None:
            raise ValidationError("Nothing to update")

        store = self._store_repo.get_by_id(store_id)
        if store is None or not store.is_active:
            raise EntityNotFoundError(f"Store with ID '{store_id}' not found")

        if name is not None:
            store.rename(name)
        if address is not None or city is not None:
            store.relocate(
                address if address is not None else store.address,
                city if city is not None else store.city,
            )

        saved = self._store_repo.save(store)
        logger.info("Store updated", store_id=store_id)
        return saved
