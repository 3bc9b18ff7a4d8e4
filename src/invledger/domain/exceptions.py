"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Storage failures are kept outside that hierarchy: they are not business
errors and must reach the caller untouched.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class DuplicateSkuError(ValidationError):
    """A product with the same SKU already exists."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist (or is no longer active)."""


class InsufficientStockError(DomainException):
    """A decrease would drive stock below zero."""

    def __init__(self, current_stock: int, requested: int) -> None:
        super().__init__(
            f"Insufficient stock (current stock: {current_stock}, "
            f"trying to subtract: {requested})"
        )
        self.current_stock = current_stock
        self.requested = requested


class ConcurrentUpdateError(DomainException):
    """The product kept changing underneath a stock adjustment."""


class RepositoryError(Exception):
    """Underlying storage failed."""

    def __init__(
        self, message: str = "Repository operation failed", original_exception: Exception | None = None
    ) -> None:
        super().__init__(message)
        self.original_exception = original_exception
        self.message = message

    def __str__(self) -> str:
        if self.original_exception:
            return f"{self.message} (Original error: {self.original_exception})"
        return self.message
