"""Abstract repository for Store aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from invledger.domain.model.store import Store


class StoreRepository(ABC):

    @abstractmethod
    def get_by_id(self, store_id: str) -> Store | None:
        """Return a store by its ID (active or not), or None."""

    @abstractmethod
    def list_all(self, active_only: bool = True) -> list[Store]:
        """Return every store."""

    @abstractmethod
    def save(self, store: Store) -> Store:
        """Persist a new or updated store, assigning an ID if needed."""
