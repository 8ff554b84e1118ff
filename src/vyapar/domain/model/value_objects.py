"""Money and Quantity value objects.

Both are frozen dataclasses that validate on construction, so an
instance in hand is always a legal price or a legal order quantity.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from functools import total_ordering

from vyapar.domain.exceptions import ValidationError

CURRENCY = "INR"
_CURRENCY_SYMBOL = "₹"


@total_ordering
@dataclass(frozen=True)
class Money:
    """A non-negative rupee amount held as a Decimal.

    Zero is a legal value: the price resolver returns it for an offer
    that has no price at the requested quantity.
    """

    amount: Decimal
    currency: str = CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < 0:
            raise ValidationError(f"Money amount cannot be negative, got {self.amount}")

    @classmethod
    def of(cls, amount: str | int | float | Decimal) -> Money:
        """Build Money from user or stored input such as ``"1,250.50"`` or ``"₹90"``."""
        text = str(amount).strip().replace(",", "").removeprefix(_CURRENCY_SYMBOL).strip()
        try:
            value = Decimal(text)
        except InvalidOperation as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        if not value.is_finite():
            raise ValidationError(f"Invalid money amount: {amount!r}")
        return cls(value)

    @classmethod
    def zero(cls) -> Money:
        return cls(Decimal("0"))

    @property
    def is_zero(self) -> bool:
        return self.amount == 0

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + self._same_currency(other).amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    def __lt__(self, other: Money) -> bool:
        return self.amount < self._same_currency(other).amount

    def __str__(self) -> str:
        return f"{_CURRENCY_SYMBOL}{self.amount:.2f}"

    def _same_currency(self, other: Money) -> Money:
        if other.currency != self.currency:
            raise ValidationError(f"Cannot combine {self.currency} with {other.currency}")
        return other


@dataclass(frozen=True)
class Quantity:
    """A whole number of units, at least one."""

    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 1:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)
