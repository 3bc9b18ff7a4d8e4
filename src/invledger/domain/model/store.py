"""Store aggregate: owns a collection of products."""

from __future__ import annotations

from dataclasses import dataclass

from invledger.domain.exceptions import ValidationError


@dataclass
class Store:

    id: str | None
    name: str
    address: str
    city: str | None = None
    is_active: bool = True

    @staticmethod
    def create(name: str, address: str, city: str | None = None) -> Store:
        store = Store(id=None, name="", address="")
        store.rename(name)
        store.relocate(address, city)
        return store

    def rename(self, name: str) -> None:
        if not name or not name.strip():
            raise ValidationError("Store name is required")
        self.name = name.strip()

    def relocate(self, address: str, city: str | None = None) -> None:
        if not address or not address.strip():
            raise ValidationError("Store address is required")
        self.address = address.strip()
        self.city = city.strip() if city and city.strip() else None

    def deactivate(self) -> None:
        """Soft delete.  Products keep pointing at the store."""
        if not self.is_active:
            raise ValidationError(f"Store '{self.name}' is already inactive")
        self.is_active = False
