"""Product aggregate: the catalogue record a cart line points at by SKU."""

import re
from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Integer, String

from commerce.domain import commerce
from commerce.shared.money import Amount


@commerce.entity(part_of="Product")
class ProductPrice:
    """One price a product is offered at. Higher priority prices are listed first."""

    value = Float(required=True, min_value=0.0)
    currency = String(required=True, max_length=3)
    priority = Integer(default=0)
    position = Integer(default=0)

    def to_amount(self) -> Amount:
        return Amount.of(self.value, self.currency)


@commerce.aggregate
class Product:
    sku = String(identifier=True, required=True, max_length=50)
    title = String(required=True, max_length=255)
    slug = String(max_length=200)
    prices = HasMany(ProductPrice)
    created_at = DateTime()

    @invariant.post
    def sku_must_be_valid_format(self):
        if not re.match(r"^[A-Za-z0-9][A-Za-z0-9_-]*$", self.sku or ""):
            raise ValidationError({"sku": ["SKU must be alphanumeric with optional hyphens or underscores"]})

    @classmethod
    def create(cls, sku, title, slug=None):
        return cls(sku=sku, title=title, slug=slug, created_at=datetime.now(UTC))

    def add_price(self, value, currency="USD", priority=0):
        # Validates the currency through the value object
        amount = Amount.of(value, currency)
        position = max((p.position or 0 for p in self.prices), default=0) + 1
        self.add_prices(
            ProductPrice(
                value=amount.value,
                currency=amount.currency,
                priority=priority,
                position=position,
            )
        )

    def clear_prices(self):
        for price in list(self.prices):
            self.remove_prices(price)

    @property
    def canonical_url(self) -> str:
        return f"/products/{self.slug or self.sku}"

    def candidate_prices(self) -> list[Amount]:
        """Prices in offer order: highest priority first, then as added."""
        ordered = sorted(self.prices, key=lambda p: (-(p.priority or 0), p.position or 0))
        return [price.to_amount() for price in ordered]
