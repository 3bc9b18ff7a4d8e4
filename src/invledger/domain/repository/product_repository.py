"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.

Implementations hand out detached copies: changing a returned Product
does nothing until it is passed back to ``save`` or ``save_if_stock``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from invledger.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID (active or not), or None."""

    @abstractmethod
    def get_by_sku(self, sku: str) -> Product | None:
        """Return a product by its SKU (active or not), or None."""

    @abstractmethod
    def list_by_store(self, store_id: str, active_only: bool = True) -> list[Product]:
        """Return the products owned by a store, in storage order."""

    @abstractmethod
    def list_all(self, active_only: bool = True) -> list[Product]:
        """Return every product, in storage order."""

    def list_low_stock(self, threshold: int) -> list[Product]:
        """Return active products with ``stock <= threshold``, in storage order.

        Implementations backed by a query engine should override this to
        filter in storage; the result set must stay the same.
        """
        return [p for p in self.list_all(active_only=True) if p.stock <= threshold]

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Persist a new or updated product, assigning an ID if needed."""

    @abstractmethod
    def save_if_stock(self, product: Product, expected_stock: int) -> Product | None:
        """Atomically persist *product* if the stored stock equals *expected_stock*.

        Returns the saved product, or None when another writer changed the
        stock since it was read.  The compare and the write must happen as
        one step with respect to other writers of the same product.
        """
