"""Money amounts and fixed-rate currency conversion.

Amounts are whole numbers in the smallest currency unit. Conversion goes
through USD using a static exchange table and truncates toward zero, so a
round trip between two currencies can lose a unit or two.
"""

from enum import Enum
from typing import Final, Union

import structlog
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..exceptions import UnsupportedCurrencyError

logger = structlog.get_logger()


class Currency(str, Enum):
    """Currencies present in the exchange table."""

    USD = "USD"
    GBP = "GBP"
    EUR = "EUR"
    CAN = "CAN"


# Exchange rate USD -> currency
FROM_USD: Final[dict[str, float]] = {
    Currency.USD.value: 1.0,
    Currency.GBP.value: 0.5,
    Currency.EUR.value: 1.5,
    Currency.CAN.value: 1.25,
}

# Exchange rate currency -> USD
TO_USD: Final[dict[str, float]] = {
    Currency.USD.value: 1.0,
    Currency.GBP.value: 2.0,
    Currency.EUR.value: 2.0 / 3.0,
    Currency.CAN.value: 0.8,
}

CurrencyCode = Union[Currency, str]


def _code(currency: CurrencyCode) -> str:
    if isinstance(currency, Currency):
        return currency.value
    return currency


class Money(BaseModel):
    """An immutable amount in a given currency.

    The currency is any code; only the members of Currency can be converted.
    Values with an unknown code still exist, they just pass through
    ``convert`` unchanged.
    """

    model_config = ConfigDict(frozen=True)

    amount: int = Field(description="Amount in the smallest unit of the currency")
    currency: str = Field(description="Currency code, e.g. USD")

    @field_validator("currency", mode="before")
    @classmethod
    def coerce_currency_code(cls, v):
        """Store Currency members as their plain code."""
        if isinstance(v, Currency):
            return v.value
        return v

    @property
    def supported(self) -> bool:
        """True when the currency appears in the exchange table."""
        return self.currency in TO_USD

    def convert(self, currency: CurrencyCode, *, strict: bool = False) -> "Money":
        """
        Convert to another currency via USD.

        Args:
            currency: Target currency code
            strict: Raise instead of returning self for unsupported codes

        Returns:
            A new Money in the target currency, or self unchanged when either
            currency is unsupported and strict is False

        Raises:
            UnsupportedCurrencyError: If strict and either code is unsupported
        """
        target = _code(currency)
        to_usd_rate = TO_USD.get(self.currency)
        from_usd_rate = FROM_USD.get(target)

        if to_usd_rate is None or from_usd_rate is None:
            if strict:
                raise UnsupportedCurrencyError(
                    "Unsupported exchange currency",
                    source=self.currency,
                    target=target,
                )
            logger.warning(
                "unsupported_exchange_currency",
                source=self.currency,
                target=target,
            )
            return self

        in_usd = self.amount * to_usd_rate
        return Money(amount=int(in_usd * from_usd_rate), currency=target)

    def add(self, other: "Money", *, strict: bool = False) -> "Money":
        """Convert self into other's currency and add; the result is in other's currency."""
        converted = self.convert(other.currency, strict=strict)
        return Money(amount=converted.amount + other.amount, currency=other.currency)

    def subtract(self, other: "Money", *, strict: bool = False) -> "Money":
        """Convert self into other's currency and subtract other from it."""
        converted = self.convert(other.currency, strict=strict)
        return Money(amount=converted.amount - other.amount, currency=other.currency)

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"
