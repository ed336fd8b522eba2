"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    Context,
    Decimal,
    Inexact,
    InvalidOperation,
)
from enum import IntEnum

from checkout.domain.exceptions import InvalidAmount, ValidationError

CURRENCY = "EUR"

# Arithmetic context for Money: additions and multiplications of finite
# decimals are exact, and any operation that would round raises instead.
_EXACT = Context(
    prec=MAX_PREC,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
    traps=[InvalidOperation, Inexact],
)

_ONE_PERCENT = Decimal("0.01")

# Plain base-10 notation only: no whitespace, no digit separators
_DECIMAL_LITERAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount in euro.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.  Amounts are never rounded:
    ``str()`` gives the canonical form at natural precision, with no
    exponent and no trailing zeros (``Money.of("1.50")`` -> ``"1.5"``).
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise InvalidAmount(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise InvalidAmount(f"Money amount must be finite, got {self.amount}")
        if self.amount < 0:
            raise InvalidAmount(f"Money amount cannot be negative, got {self.amount}")

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return Money(_EXACT.add(self.amount, other.amount))

    def __mul__(self, factor: int | Decimal) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, (int, Decimal)):
            raise TypeError(
                f"Can only multiply Money by int or Decimal, got {type(factor).__name__}"
            )
        return Money(_EXACT.multiply(self.amount, Decimal(factor)))

    # --- Display --------------------------------------------------------------

    def canonical(self) -> str:
        if self.amount.is_zero():
            return "0"
        text = format(self.amount, "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text

    def __str__(self) -> str:
        return self.canonical()

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | int | Decimal) -> Money:
        """Parse a base-10 amount, raising InvalidAmount on anything else."""
        if isinstance(amount, bool) or not isinstance(amount, (str, int, Decimal)):
            raise InvalidAmount(f"Invalid money amount: {amount!r}")
        if isinstance(amount, str) and not _DECIMAL_LITERAL.fullmatch(amount):
            raise InvalidAmount(f"Invalid money amount: {amount!r}")
        try:
            return Money(Decimal(amount))
        except InvalidOperation as exc:
            raise InvalidAmount(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero() -> Money:
        return Money(Decimal(0))


class Vat(IntEnum):
    """VAT rates a product or a shipment can be charged, in percent."""

    EXEMPT = 0
    SUPER_REDUCED = 4
    REDUCED = 10
    STANDARD = 22

    @classmethod
    def of(cls, rate: int) -> Vat:
        if isinstance(rate, bool) or not isinstance(rate, int):
            raise ValidationError(f"VAT rate must be an integer, got {rate!r}")
        try:
            return cls(rate)
        except ValueError as exc:
            allowed = ", ".join(str(v.value) for v in cls)
            raise ValidationError(
                f"Unsupported VAT rate {rate}, expected one of {allowed}"
            ) from exc


def vat_amount(net: Money, rate: Vat) -> Money:
    """VAT due on *net*: ``net * rate * 0.01``, exact and unrounded."""
    return net * int(rate) * _ONE_PERCENT


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot order zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)
