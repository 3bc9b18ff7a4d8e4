"""Product aggregate.

Products belong to a store and carry the stock count that the ledger
adjusts.  The stock invariant lives here: whatever path mutates stock,
it can never become negative.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from invledger.domain.exceptions import InsufficientStockError, ValidationError
from invledger.domain.model.value_objects import Money

UNCATEGORIZED = "Uncategorized"


class AdjustmentMode(Enum):
    INCREASE = "add"
    DECREASE = "subtract"
    SET = "set"

    @staticmethod
    def parse(value: AdjustmentMode | str) -> AdjustmentMode:
        if isinstance(value, AdjustmentMode):
            return value
        try:
            return AdjustmentMode(str(value).strip().lower())
        except ValueError:
            allowed = ", ".join(m.value for m in AdjustmentMode)
            raise ValidationError(
                f"Unknown adjustment mode {value!r} (expected one of: {allowed})"
            ) from None


def validate_quantity(quantity: int, what: str = "Quantity") -> int:
    """Return *quantity* if it is a non-negative int, else raise."""
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValidationError(
            f"{what} must be an integer, got {type(quantity).__name__}"
        )
    if quantity < 0:
        raise ValidationError(f"{what} cannot be negative, got {quantity}")
    return quantity


@dataclass
class Product:
    """A product in a store's catalog.

    Invariants:
    - ``stock`` is never negative
    - ``sku`` is unique across the system (enforced by the application layer)

    Use ``Product.create()`` for new products.  The ``__init__`` stays
    simple so repositories can reconstitute persisted records.
    """

    id: str | None
    sku: str
    name: str
    price: Money
    store_id: str
    stock: int = 0
    category: str | None = None
    description: str | None = None
    is_active: bool = True

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        store_id: str,
        sku: str,
        name: str,
        price: Money,
        stock: int = 0,
        category: str | None = None,
        description: str | None = None,
    ) -> Product:
        if not sku or not sku.strip():
            raise ValidationError("Product SKU is required")
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        validate_quantity(stock, "Initial stock")

        return Product(
            id=None,
            sku=sku.strip(),
            name=name.strip(),
            price=price,
            store_id=store_id,
            stock=stock,
            category=category.strip() if category and category.strip() else None,
            description=description,
        )

    # --- Stock mutations --------------------------------------------------------

    def increase_stock(self, quantity: int) -> None:
        validate_quantity(quantity)
        self.stock += quantity

    def decrease_stock(self, quantity: int) -> None:
        """Remove *quantity* units, all or nothing."""
        validate_quantity(quantity)
        if quantity > self.stock:
            raise InsufficientStockError(current_stock=self.stock, requested=quantity)
        self.stock -= quantity

    def set_stock(self, quantity: int) -> None:
        """Overwrite the stock count (stock-take corrections)."""
        self.stock = validate_quantity(quantity)

    def apply_adjustment(self, mode: AdjustmentMode, quantity: int) -> None:
        if mode is AdjustmentMode.INCREASE:
            self.increase_stock(quantity)
        elif mode is AdjustmentMode.DECREASE:
            self.decrease_stock(quantity)
        else:
            self.set_stock(quantity)

    # --- Catalog details --------------------------------------------------------

    def rename(self, name: str) -> None:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        self.name = name.strip()

    def change_sku(self, sku: str) -> None:
        """Uniqueness of the new SKU is checked by the application layer."""
        if not sku or not sku.strip():
            raise ValidationError("Product SKU is required")
        self.sku = sku.strip()

    def update_price(self, new_price: Money) -> None:
        """Change the price; existing stock is revalued from now on."""
        if new_price.currency != self.price.currency:
            raise ValidationError(
                f"Cannot reprice {self.price.currency} product in {new_price.currency}"
            )
        self.price = new_price

    def recategorize(self, category: str | None) -> None:
        """Set the category; ``None`` or blank clears it."""
        self.category = category.strip() if category and category.strip() else None

    def describe(self, description: str | None) -> None:
        self.description = description.strip() if description and description.strip() else None

    def move_to_store(self, store_id: str) -> None:
        """Reassign ownership; the caller checks the target store is active."""
        if not store_id:
            raise ValidationError("Target store is required")
        self.store_id = store_id

    # --- Lifecycle --------------------------------------------------------------

    def deactivate(self) -> None:
        if not self.is_active:
            raise ValidationError(f"Product '{self.sku}' is already inactive")
        self.is_active = False

    # --- Computed properties ----------------------------------------------------

    @property
    def category_label(self) -> str:
        """Category used for grouping; blanks fall into one bucket."""
        if self.category and self.category.strip():
            return self.category
        return UNCATEGORIZED

    @property
    def inventory_value(self) -> Money:
        return self.price * self.stock
