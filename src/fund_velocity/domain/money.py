from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from .errors import ParseError
from .reasons import ReasonCode

CURRENCY = "USD"
_CENT = Decimal("0.01")


class MoneyParseError(ParseError):
    def __init__(self, reason: ReasonCode = ReasonCode.INVALID_AMOUNT_FORMAT, *, detail: str | None = None) -> None:
        super().__init__(reason, detail=detail)


@dataclass(frozen=True, slots=True)
class Money:
    currency: str
    amount: Decimal

    def __post_init__(self) -> None:
        # Load amounts are non-negative by domain rule.
        if self.amount < 0:
            raise ValueError("Money amount must be non-negative")

    @classmethod
    def zero(cls, currency: str = CURRENCY) -> Money:
        return cls(currency=currency, amount=Decimal("0.00"))

    @classmethod
    def from_cents(cls, cents: int, currency: str = CURRENCY) -> Money:
        return cls(currency=currency, amount=(Decimal(cents) / 100).quantize(_CENT))

    @property
    def cents(self) -> int:
        # Integer minor units; exact because amount is always quantized to cents.
        return int((self.amount.quantize(_CENT) * 100).to_integral_value())

    def __add__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        if other.currency != self.currency:
            raise ValueError(f"Currency mismatch: {self.currency} != {other.currency}")
        return Money(currency=self.currency, amount=self.amount + other.amount)


def sum_money(values: Iterable[Money], *, currency: str = CURRENCY) -> Money:
    total = Money.zero(currency)
    for value in values:
        total = total + value
    return total


# Optional USD and/or $ prefix, whitespace anywhere; at most two decimal digits.
_AMOUNT_PATTERN = re.compile(r"^\d+(?:\.\d{1,2})?$")
_PREFIX_PATTERN = re.compile(r"^(?:USD)?\$?(?:USD)?")


def parse_money(raw: str, *, currency: str = CURRENCY) -> Money:
    if not isinstance(raw, str):
        raise MoneyParseError(detail=f"expected text, got {type(raw).__name__}")

    text = re.sub(r"\s+", "", raw)
    text = _PREFIX_PATTERN.sub("", text)

    if not _AMOUNT_PATTERN.match(text):
        raise MoneyParseError(detail=repr(raw))

    # Quantize can overflow the decimal context for very long integer parts.
    try:
        amount = Decimal(text).quantize(_CENT)
    except InvalidOperation as exc:
        raise MoneyParseError(detail=repr(raw)) from exc

    return Money(currency=currency, amount=amount)
