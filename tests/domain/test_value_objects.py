"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from invledger.domain.exceptions import ValidationError
from invledger.domain.model.value_objects import Money, round_money


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        m = Money.of("25.99")
        assert m.amount == Decimal("25.99")

    def test_of_factory_from_int(self):
        m = Money.of(10)
        assert m.amount == Decimal("10")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten")

    def test_non_finite_rejected(self):
        with pytest.raises(ValidationError, match="finite"):
            Money.of("NaN")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_zero_allowed(self):
        assert Money.of("0").amount == Decimal("0")

    def test_addition(self):
        result = Money.of("10") + Money.of("5.50")
        assert result == Money.of("15.50")

    def test_multiplication_by_int(self):
        result = Money.of("7.50") * 3
        assert result == Money.of("22.50")

    def test_multiplication_by_bool_rejected(self):
        with pytest.raises(TypeError):
            Money.of("7.50") * True

    def test_division_by_int(self):
        assert (Money.of("10") / 4) == Money.of("2.5")

    def test_division_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("10") / 2.0

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("9.5")) == "$9.50"
        assert str(Money.of("10.005")) == "$10.01"

    def test_rounded(self):
        assert Money.of("2.675").rounded() == Money.of("2.68")


# ── round_money ──────────────────────────────────────────────────────────────


class TestRoundMoney:

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("20.01", "20.01"),
            ("10.005", "10.01"),
            ("10.004", "10.00"),
            ("2.675", "2.68"),
            ("1850", "1850.00"),
            ("0", "0.00"),
        ],
    )
    def test_half_up_to_cents(self, raw, expected):
        assert round_money(Decimal(raw)) == Decimal(expected)
        assert str(round_money(Decimal(raw))) == expected
