"""Integration tests for the AdjustStock use case."""

import random
from concurrent.futures import ThreadPoolExecutor

import pytest

from invledger.application.adjust_stock import AdjustStockHandler
from invledger.domain.exceptions import (
    ConcurrentUpdateError,
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from invledger.domain.model.product import AdjustmentMode, Product
from invledger.domain.model.value_objects import Money
from tests.fakes import FakeProductRepository, RacingProductRepository, UnguardedProductRepository


def _product(stock: int = 100, is_active: bool = True) -> Product:
    return Product(
        id="1", sku="BEB-001", name="Agua", price=Money.of("1.50"),
        store_id="1", stock=stock, is_active=is_active,
    )


def _setup(stock: int = 100, is_active: bool = True):
    repo = FakeProductRepository([_product(stock, is_active)])
    return repo, AdjustStockHandler(repo)


class TestAdjustStockModes:

    def test_increase_then_oversized_decrease(self):
        repo, handler = _setup(stock=100)

        result = handler.handle("1", 50, AdjustmentMode.INCREASE)
        assert result.previous_stock == 100
        assert result.new_stock == 150
        assert result.product.stock == 150

        with pytest.raises(InsufficientStockError) as exc_info:
            handler.handle("1", 200, AdjustmentMode.DECREASE)
        assert exc_info.value.current_stock == 150
        assert exc_info.value.requested == 200
        assert repo.stock_of("1") == 150

    def test_decrease(self):
        repo, handler = _setup(stock=10)
        result = handler.handle("1", 10, "subtract")
        assert (result.previous_stock, result.new_stock) == (10, 0)
        assert repo.stock_of("1") == 0

    def test_set_absolute(self):
        repo, handler = _setup(stock=10)
        result = handler.handle("1", 3, "set")
        assert (result.previous_stock, result.new_stock) == (10, 3)
        assert result.mode is AdjustmentMode.SET
        assert repo.stock_of("1") == 3

    def test_set_absolute_is_idempotent(self):
        repo, handler = _setup(stock=10)
        handler.handle("1", 42, AdjustmentMode.SET)
        once = repo.stock_of("1")
        second = handler.handle("1", 42, AdjustmentMode.SET)
        assert repo.stock_of("1") == once == 42
        assert second.previous_stock == second.new_stock == 42

    def test_reason_is_echoed_not_stored(self):
        repo, handler = _setup()
        result = handler.handle("1", 5, "add", reason="Goods received")
        assert result.reason == "Goods received"
        assert result.quantity == 5
        assert not hasattr(repo.get_by_id("1"), "reason")

    def test_result_snapshot_is_detached_from_store(self):
        repo, handler = _setup(stock=1)
        result = handler.handle("1", 1, "add")
        result.product.stock = 999
        assert repo.stock_of("1") == 2


class TestAdjustStockValidation:

    @pytest.mark.parametrize("quantity", [-1, 2.5, "5", None, False])
    def test_bad_quantity_rejected_without_write(self, quantity):
        repo, handler = _setup(stock=10)
        with pytest.raises(ValidationError):
            handler.handle("1", quantity, AdjustmentMode.INCREASE)
        assert repo.stock_of("1") == 10
        assert repo.save_calls == 0

    def test_unknown_mode_rejected(self):
        repo, handler = _setup(stock=10)
        with pytest.raises(ValidationError, match="Unknown adjustment mode"):
            handler.handle("1", 1, "double")
        assert repo.save_calls == 0

    def test_missing_product(self):
        _, handler = _setup()
        with pytest.raises(EntityNotFoundError, match="not found"):
            handler.handle("999", 1, AdjustmentMode.INCREASE)

    def test_inactive_product_treated_as_missing(self):
        repo, handler = _setup(is_active=False)
        with pytest.raises(EntityNotFoundError):
            handler.handle("1", 1, AdjustmentMode.INCREASE)
        assert repo.save_calls == 0

    def test_rejected_decrease_writes_nothing(self):
        repo, handler = _setup(stock=3)
        with pytest.raises(InsufficientStockError):
            handler.handle("1", 4, AdjustmentMode.DECREASE)
        assert repo.stock_of("1") == 3
        assert repo.save_calls == 0

    def test_max_retries_must_be_positive(self):
        with pytest.raises(ValueError):
            AdjustStockHandler(FakeProductRepository(), max_retries=0)


class TestAdjustStockInvariant:

    def test_random_sequences_never_go_negative(self):
        rng = random.Random(1234)
        repo, handler = _setup(stock=0)
        modes = list(AdjustmentMode)

        for _ in range(500):
            mode = rng.choice(modes)
            quantity = rng.randint(0, 20)
            before = repo.stock_of("1")
            try:
                handler.handle("1", quantity, mode)
            except InsufficientStockError:
                assert repo.stock_of("1") == before
            assert repo.stock_of("1") >= 0


class _ConflictOnceRepository(FakeProductRepository):
    """Simulates another writer landing between read and write, once."""

    def __init__(self, products, bump: int) -> None:
        super().__init__(products)
        self._bump = bump
        self.conflicts = 0

    def save_if_stock(self, product, expected_stock):
        if self.conflicts == 0:
            self.conflicts += 1
            other = FakeProductRepository.get_by_id(self, product.id)
            other.stock = self._bump
            self.save(other)
        return super().save_if_stock(product, expected_stock)


class _AlwaysConflictRepository(FakeProductRepository):

    def save_if_stock(self, product, expected_stock):
        return None


class TestAdjustStockConcurrency:

    def test_conflict_is_retried_against_fresh_stock(self):
        repo = _ConflictOnceRepository([_product(stock=10)], bump=20)
        result = AdjustStockHandler(repo).handle("1", 5, AdjustmentMode.INCREASE)
        assert repo.conflicts == 1
        assert result.previous_stock == 20
        assert result.new_stock == 25
        assert repo.stock_of("1") == 25

    def test_decrease_rechecked_after_conflict(self):
        repo = _ConflictOnceRepository([_product(stock=10)], bump=2)
        with pytest.raises(InsufficientStockError) as exc_info:
            AdjustStockHandler(repo).handle("1", 5, AdjustmentMode.DECREASE)
        assert exc_info.value.current_stock == 2
        assert repo.stock_of("1") == 2

    def test_gives_up_after_max_retries(self):
        repo = _AlwaysConflictRepository([_product(stock=10)])
        with pytest.raises(ConcurrentUpdateError, match="3 times"):
            AdjustStockHandler(repo, max_retries=3).handle("1", 1, AdjustmentMode.INCREASE)
        assert repo.stock_of("1") == 10

    def test_concurrent_increments_are_not_lost(self):
        n = 16
        repo = RacingProductRepository(n, [_product(stock=0)])
        handler = AdjustStockHandler(repo, max_retries=n + 1)

        with ThreadPoolExecutor(max_workers=n) as executor:
            futures = [
                executor.submit(handler.handle, "1", 1, AdjustmentMode.INCREASE)
                for _ in range(n)
            ]
            results = [f.result() for f in futures]

        assert repo.stock_of("1") == n
        assert sorted(r.new_stock for r in results) == list(range(1, n + 1))

    def test_unguarded_write_loses_updates(self):
        # Same race without compare-and-swap: every writer overwrites the others
        n = 8
        repo = UnguardedProductRepository(n, [_product(stock=0)])
        handler = AdjustStockHandler(repo)

        with ThreadPoolExecutor(max_workers=n) as executor:
            for f in [executor.submit(handler.handle, "1", 1, "add") for _ in range(n)]:
                f.result()

        assert repo.stock_of("1") == 1
