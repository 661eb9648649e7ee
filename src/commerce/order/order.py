"""Order aggregate: an immutable record of a checked-out cart.

Unit and line prices are copied in at checkout and never re-resolved, so
later catalogue price changes do not touch existing orders.
"""

import json

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Integer, String, Text

from commerce.domain import commerce
from commerce.order.events import OrderPlaced
from commerce.pricing.totals import compute_totals
from commerce.shared.money import Amount


@commerce.entity(part_of="Order")
class OrderLine:
    sku = String(required=True, max_length=50)
    quantity = Integer(required=True, min_value=1)
    unit_price = Float(required=True, min_value=0.0)
    line_price = Float(required=True, min_value=0.0)
    currency = String(required=True, max_length=3)
    attributes = Text(default="{}")
    position = Integer(default=0)

    @property
    def unit_amount(self) -> Amount:
        return Amount.of(self.unit_price, self.currency)

    @property
    def line_amount(self) -> Amount:
        return Amount.of(self.line_price, self.currency)

    def to_dict_line(self) -> dict:
        return {
            "sku": self.sku,
            "quantity": self.quantity,
            "unit_price": self.unit_price,
            "line_price": self.line_price,
            "currency": self.currency,
        }


@commerce.aggregate
class Order:
    order_number = String(required=True, max_length=20)
    email = String(required=True, max_length=254)
    lines = HasMany(OrderLine)
    placed_at = DateTime(required=True)

    @invariant.post
    def email_must_be_valid(self):
        email = self.email or ""
        local_part, _, domain_part = email.partition("@")
        if not local_part or "." not in domain_part or " " in email or "@" in domain_part:
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, snapshot):
        """Create an order from an OrderSnapshot."""
        if not snapshot.lines:
            raise ValidationError({"lines": ["Cannot place an order without items"]})

        order = cls(
            order_number=snapshot.order_number,
            email=snapshot.email,
            placed_at=snapshot.placed_at,
        )
        for position, line in enumerate(snapshot.lines, start=1):
            order.add_lines(
                OrderLine(
                    sku=line.sku,
                    quantity=line.quantity,
                    unit_price=line.unit_price.value,
                    line_price=line.line_price.value,
                    currency=line.unit_price.currency,
                    attributes=json.dumps(line.attributes, sort_keys=True),
                    position=position,
                )
            )

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                order_number=order.order_number,
                email=order.email,
                lines=json.dumps([item.to_dict_line() for item in order.ordered_lines]),
                totals=json.dumps([{"value": t.value, "currency": t.currency} for t in order.totals]),
                placed_at=order.placed_at,
            )
        )
        return order

    @property
    def ordered_lines(self) -> list:
        return sorted(self.lines, key=lambda line: line.position or 0)

    @property
    def totals(self) -> list[Amount]:
        return compute_totals(line.line_amount for line in self.ordered_lines)
