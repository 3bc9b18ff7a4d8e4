"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from invledger.domain.model.product import Product
from invledger.domain.model.value_objects import Money
from invledger.domain.repository.product_repository import ProductRepository
from invledger.infrastructure.persistence.json_file import JsonFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        for raw in self._file.load():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def get_by_sku(self, sku: str) -> Product | None:
        for raw in self._file.load():
            if raw["sku"] == sku:
                return self._to_domain(raw)
        return None

    def list_by_store(self, store_id: str, active_only: bool = True) -> list[Product]:
        return [
            self._to_domain(raw)
            for raw in self._file.load()
            if raw["store_id"] == store_id and (raw.get("is_active", True) or not active_only)
        ]

    def list_all(self, active_only: bool = True) -> list[Product]:
        return [
            self._to_domain(raw)
            for raw in self._file.load()
            if raw.get("is_active", True) or not active_only
        ]

    def list_low_stock(self, threshold: int) -> list[Product]:
        # Filter on the raw records so only matches get deserialized
        return [
            self._to_domain(raw)
            for raw in self._file.load()
            if raw.get("is_active", True) and raw["stock"] <= threshold
        ]

    def save(self, product: Product) -> Product:
        with self._file.locked():
            records = self._file.load()
            if product.id is None:
                product.id = JsonFile.next_id(records)
            self._upsert(records, product)
            self._file.persist(records)
        return self._copy(product)

    def save_if_stock(self, product: Product, expected_stock: int) -> Product | None:
        with self._file.locked():
            records = self._file.load()
            current = next((r for r in records if r["id"] == product.id), None)
            if current is None or current["stock"] != expected_stock:
                return None
            self._upsert(records, product)
            self._file.persist(records)
        return self._copy(product)

    # --- Serialization --------------------------------------------------------

    def _upsert(self, records: list[dict], product: Product) -> None:
        for i, raw in enumerate(records):
            if raw["id"] == product.id:
                records[i] = self._to_raw(product)
                return
        records.append(self._to_raw(product))

    def _copy(self, product: Product) -> Product:
        return self._to_domain(self._to_raw(product))

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "sku": product.sku,
            "name": product.name,
            "description": product.description,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "stock": product.stock,
            "category": product.category,
            "store_id": product.store_id,
            "is_active": product.is_active,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            sku=raw["sku"],
            name=raw["name"],
            description=raw.get("description"),
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            stock=raw["stock"],
            category=raw.get("category"),
            store_id=raw["store_id"],
            is_active=raw.get("is_active", True),
        )
