"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from checkout.domain.exceptions import InvalidAmount, ValidationError
from checkout.domain.model.value_objects import Money, Quantity, Vat, vat_amount


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")

    @pytest.mark.parametrize("value", ["0", "1", "0.1", "+5", ".5", "1e3", 10, Decimal("2.5")])
    def test_of_factory_accepts(self, value):
        assert Money.of(value).amount == Decimal(str(value))

    @pytest.mark.parametrize(
        "value",
        [
            "not-a-number", "-1", "", "NaN", "Infinity", None, True, 1.5, -3,
            "1_000", " 12 ", "1 2", "12\n", "١٢",
        ],
    )
    def test_of_factory_rejects(self, value):
        with pytest.raises(InvalidAmount):
            Money.of(value)

    def test_negative_amount_rejected(self):
        with pytest.raises(InvalidAmount, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_non_decimal_amount_rejected(self):
        with pytest.raises(InvalidAmount, match="must be a Decimal"):
            Money(1)

    def test_invalid_amount_is_a_validation_error(self):
        assert issubclass(InvalidAmount, ValidationError)

    def test_addition(self):
        result = Money.of("10") + Money.of("5.50")
        assert result == Money.of("15.50")

    def test_multiplication_by_int(self):
        result = Money.of("7.50") * 3
        assert result == Money.of("22.50")

    def test_multiplication_by_decimal(self):
        assert Money.of("3.32") * Decimal("0.01") == Money.of("0.0332")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError, match="int or Decimal"):
            Money.of("1") * 0.1

    def test_decimal_sums_are_exact(self):
        total = Money.zero()
        for _ in range(10):
            total = total + Money.of("0.1")
        assert total == Money.of("1")

    def test_no_rounding_beyond_default_precision(self):
        big = Money.of("12345678901234567890.123456789")
        assert str(big * 3) == "37037036703703703670.370370367"

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("0.01", "0.01"),
            ("134.04", "134.04"),
            ("1.00", "1"),
            ("5.20", "5.2"),
            ("100", "100"),
            ("1E+2", "100"),
            ("0.00", "0"),
            ("-0", "0"),
            ("0.664", "0.664"),
        ],
    )
    def test_canonical_string(self, value, expected):
        assert str(Money.of(value)) == expected
        assert Money.of(value).canonical() == expected

    @pytest.mark.parametrize("value", ["0", "0.01", "9.99", "1E+3", "0.0000001", "42.4200"])
    def test_canonical_string_round_trips(self, value):
        m = Money.of(value)
        assert Money.of(str(m)) == m


# ── Vat ──────────────────────────────────────────────────────────────────────


class TestVat:

    @pytest.mark.parametrize("rate", [0, 4, 10, 22])
    def test_allowed_rates(self, rate):
        assert Vat.of(rate) == rate

    @pytest.mark.parametrize("rate", [5, -4, 100, "22", 22.0, None, True])
    def test_other_rates_rejected(self, rate):
        with pytest.raises(ValidationError):
            Vat.of(rate)

    @pytest.mark.parametrize("net", ["0", "1", "9.99", "123456.789"])
    def test_zero_rate_means_no_vat(self, net):
        assert vat_amount(Money.of(net), Vat.EXEMPT) == Money.zero()

    @pytest.mark.parametrize(
        "net, rate, expected",
        [
            ("1.00", Vat.SUPER_REDUCED, "0.04"),
            ("1.00", Vat.REDUCED, "0.1"),
            ("1.00", Vat.STANDARD, "0.22"),
            ("3.32", Vat.REDUCED, "0.332"),
            ("3.32", Vat.STANDARD, "0.7304"),
            ("100.00", Vat.STANDARD, "22"),
        ],
    )
    def test_vat_amount_is_exact_and_unrounded(self, net, rate, expected):
        assert str(vat_amount(Money.of(net), rate)) == expected


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        q = Quantity(5)
        assert q.value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(-3)

    @pytest.mark.parametrize("value", [0.1, 1.0, "1", None, True])
    def test_non_integer_rejected(self, value):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(value)

    def test_str(self):
        assert str(Quantity(7)) == "7"
