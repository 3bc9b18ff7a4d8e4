"""JSON-file-backed implementation of StoreRepository."""

from __future__ import annotations

from pathlib import Path

from invledger.domain.model.store import Store
from invledger.domain.repository.store_repository import StoreRepository
from invledger.infrastructure.persistence.json_file import JsonFile


class JsonStoreRepository(StoreRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- StoreRepository interface --------------------------------------------

    def get_by_id(self, store_id: str) -> Store | None:
        for raw in self._file.load():
            if raw["id"] == store_id:
                return self._to_domain(raw)
        return None

    def list_all(self, active_only: bool = True) -> list[Store]:
        return [
            self._to_domain(raw)
            for raw in self._file.load()
            if raw.get("is_active", True) or not active_only
        ]

    def save(self, store: Store) -> Store:
        with self._file.locked():
            records = self._file.load()
            if store.id is None:
                store.id = JsonFile.next_id(records)

            # Upsert: replace if exists, otherwise append
            replaced = False
            for i, raw in enumerate(records):
                if raw["id"] == store.id:
                    records[i] = self._to_raw(store)
                    replaced = True
                    break
            if not replaced:
                records.append(self._to_raw(store))

            self._file.persist(records)
        return self._to_domain(self._to_raw(store))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(store: Store) -> dict:
        return {
            "id": store.id,
            "name": store.name,
            "address": store.address,
            "city": store.city,
            "is_active": store.is_active,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Store:
        return Store(
            id=raw["id"],
            name=raw["name"],
            address=raw["address"],
            city=raw.get("city"),
            is_active=raw.get("is_active", True),
        )
