"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from bizdash.domain.exceptions import ValidationError
from bizdash.domain.model.value_objects import Money, Quantity, to_amount


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_int(self):
        assert Money.of(10).amount == Decimal("10")

    def test_of_factory_from_float_avoids_binary_noise(self):
        assert Money.of(0.1).amount == Decimal("0.1")

    def test_of_passes_money_through(self):
        m = Money.of("3")
        assert Money.of(m) is m

    def test_of_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("abc")

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(10.5)

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("7.50") * 1.5

    def test_format_with_symbol(self):
        assert Money.of("15").format("€") == "€15.00"
        assert Money.of("9.5").format("MXN$") == "MXN$9.50"

    def test_str_defaults_to_dollar(self):
        assert str(Money.of("15")) == "$15.00"


class TestToAmount:

    def test_keeps_sign(self):
        assert to_amount("-10.50") == Decimal("-10.50")

    def test_unwraps_money(self):
        assert to_amount(Money.of("3")) == Decimal("3")

    @pytest.mark.parametrize("value", ["abc", "NaN", "Infinity"])
    def test_rejects_non_numbers(self, value):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            to_amount(value)


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(-3)

    def test_non_integer_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(2.5)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(True)

    def test_str(self):
        assert str(Quantity(7)) == "7"
