"""Amount value object: a monetary value in a single currency."""

from decimal import Decimal

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Float, String

from commerce.domain import commerce

VALID_CURRENCIES = frozenset(
    {
        "USD",
        "EUR",
        "GBP",
        "JPY",
        "CAD",
        "AUD",
        "CHF",
        "CNY",
        "INR",
        "MXN",
        "BRL",
        "KRW",
        "SGD",
        "HKD",
        "NOK",
        "SEK",
        "DKK",
        "HUF",
        "NZD",
        "ZAR",
    }
)


def to_decimal(value) -> Decimal:
    """Convert a stored float to Decimal through its shortest repr (0.1 -> Decimal('0.1'))."""
    return Decimal(str(value))


@commerce.value_object
class Amount:
    """Value object representing a monetary value with its currency.

    Arithmetic is done in Decimal and only within one currency; mixing
    currencies is a validation error.
    """

    value = Float(required=True, min_value=0.0)
    currency = String(required=True, max_length=3)

    @invariant.post
    def currency_must_be_valid_iso_4217(self):
        if self.currency not in VALID_CURRENCIES:
            raise ValidationError({"currency": [f"Unsupported currency: {self.currency}"]})

    @classmethod
    def of(cls, value, currency):
        return cls(value=float(to_decimal(value)), currency=currency)

    @property
    def decimal(self) -> Decimal:
        return to_decimal(self.value)

    def times(self, quantity: int) -> "Amount":
        return Amount.of(self.decimal * quantity, self.currency)

    def plus(self, other: "Amount") -> "Amount":
        if other.currency != self.currency:
            raise ValidationError(
                {"currency": [f"Cannot add {other.currency} to {self.currency}"]},
            )
        return Amount.of(self.decimal + other.decimal, self.currency)

    def __str__(self) -> str:
        return f"{self.decimal} {self.currency}"
