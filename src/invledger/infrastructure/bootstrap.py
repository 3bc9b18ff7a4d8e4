"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from invledger.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from invledger.infrastructure.persistence.json_store_repository import (
    JsonStoreRepository,
)
from invledger.infrastructure.settings import get_settings


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(get_settings().DATA_DIR / "products.json")


def store_repository() -> JsonStoreRepository:
    return JsonStoreRepository(get_settings().DATA_DIR / "stores.json")
