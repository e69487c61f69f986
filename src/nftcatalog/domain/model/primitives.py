"""Domain primitives: scalar aliases + small value objects.

Prices come from free-form strings such as ``"0.5 ETH"``. Only the leading number is
significant for comparisons; the trailing token is kept as the currency unit but the
catalog assumes a single currency and never compares units.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import TypeAlias

from nftcatalog.domain.errors import InvalidCriteriaError

ArtistId: TypeAlias = str
Amount: TypeAlias = str | int | float | Decimal

_LEADING_NUMBER = re.compile(
    r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)\s*(.*?)\s*$"
)


def artist_id_for(name: str) -> ArtistId:
    """Derive the artist identifier: lowercase with all whitespace removed."""

    return "".join(name.lower().split())


def parse_amount(value: Amount) -> Decimal:
    """Parse a numeric magnitude, rejecting anything that is not a finite number.

    Strings may carry a trailing unit (``"0.8 ETH"``); only the leading number is read.
    """

    if isinstance(value, bool):
        raise InvalidCriteriaError(f"Not a numeric amount: {value!r}")
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, int | float):
        amount = Decimal(str(value))
    else:
        match = _LEADING_NUMBER.match(value)
        if match is None:
            raise InvalidCriteriaError(f"Not a numeric amount: {value!r}")
        try:
            amount = Decimal(match.group(1))
        except InvalidOperation as exc:  # pragma: no cover - regex guards this
            raise InvalidCriteriaError(f"Not a numeric amount: {value!r}") from exc
    if not amount.is_finite():
        raise InvalidCriteriaError(f"Not a finite amount: {value!r}")
    return amount


@dataclass(frozen=True, slots=True)
class Price:
    amount: Decimal
    currency: str | None = None

    @classmethod
    def parse(cls, raw: Amount) -> Price:
        """Build a price from ``"0.5 ETH"``-style text or a bare number."""

        amount = parse_amount(raw)
        currency = None
        if isinstance(raw, str):
            match = _LEADING_NUMBER.match(raw)
            if match is not None and match.group(2):
                currency = match.group(2)
        return cls(amount=amount, currency=currency)

    def __str__(self) -> str:
        if self.currency:
            return f"{self.amount} {self.currency}"
        return str(self.amount)
