"""Unit tests for Money and Quantity."""

from decimal import Decimal

import pytest

from vyapar.domain.exceptions import ValidationError
from vyapar.domain.model.value_objects import Money, Quantity


class TestMoneyParsing:

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("90", "90"),
            ("93.50", "93.50"),
            (" ₹1,250.00 ", "1250.00"),
            (42, "42"),
            (12.5, "12.5"),
            (Decimal("7.25"), "7.25"),
        ],
    )
    def test_accepts_typed_prices(self, raw, expected):
        assert Money.of(raw).amount == Decimal(expected)

    @pytest.mark.parametrize("raw", ["ten", "", "NaN", "Infinity"])
    def test_rejects_non_numbers(self, raw):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of(raw)

    def test_rejects_negative(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money.of("-1")

    def test_amount_must_be_decimal(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(90)

    def test_defaults_to_rupees(self):
        assert Money.of("1").currency == "INR"


class TestMoneyArithmetic:

    def test_zero(self):
        assert Money.zero().is_zero
        assert not Money.of("0.01").is_zero

    def test_sum_and_line_total(self):
        assert Money.of("90") * 12 + Money.of("100") == Money.of("1180")

    @pytest.mark.parametrize("factor", [1.5, True, "2"])
    def test_only_int_factors(self, factor):
        with pytest.raises(TypeError):
            Money.of("90") * factor

    def test_ordering(self):
        cheap, dear = Money.of("85"), Money.of("90")
        assert cheap < dear <= Money.of("90.00")
        assert dear > cheap >= Money.zero()
        assert sorted([dear, Money.zero(), cheap]) == [Money.zero(), cheap, dear]

    def test_mixed_currencies_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("1"), "INR") + Money(Decimal("1"), "USD")
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("1"), "INR") < Money(Decimal("2"), "USD")

    def test_display(self):
        assert str(Money.of("90")) == "₹90.00"
        assert str(Money.of("4.5")) == "₹4.50"


class TestQuantity:

    def test_positive(self):
        assert Quantity(12).value == 12
        assert str(Quantity(12)) == "12"

    @pytest.mark.parametrize("value", [0, -4])
    def test_below_one_rejected(self, value):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(value)

    @pytest.mark.parametrize("value", [True, 2.0, "3"])
    def test_non_integers_rejected(self, value):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(value)
