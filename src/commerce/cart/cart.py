"""Shopping Cart aggregate (CQRS).

The cart is an ordered list of product lines. It is loaded once per request,
mutated in memory, and stored back as a whole document. Repeated additions of
the same product are kept as separate lines; a removal takes out the most
recently added line with the same SKU and attributes, so an add followed by
the matching remove restores the previous line sequence.
"""

import json
from datetime import UTC, datetime

from protean.fields import DateTime, HasMany, Identifier, Integer, String, Text

from commerce.cart.events import CartItemAdded, CartItemRemoved, CartUpdated
from commerce.domain import commerce


def normalize_attributes(attributes) -> dict:
    """Return attributes as a plain dict with string keys."""
    if not attributes:
        return {}
    if isinstance(attributes, str):
        attributes = json.loads(attributes)
    return {str(name): value for name, value in dict(attributes).items()}


def dump_attributes(attributes) -> str:
    return json.dumps(normalize_attributes(attributes), sort_keys=True)


@commerce.entity(part_of="ShoppingCart")
class CartItem:
    sku = String(required=True, max_length=50)
    quantity = Integer(required=True, min_value=1)
    attributes = Text(default="{}")  # JSON object, keys sorted
    position = Integer(default=0)  # line order within the cart
    added_at = DateTime()

    @property
    def attribute_map(self) -> dict:
        return normalize_attributes(self.attributes)

    def matches(self, sku, attributes) -> bool:
        """Identity of a line is its SKU plus its selected attributes."""
        return self.sku == sku and self.attribute_map == normalize_attributes(attributes)

    def to_line(self) -> dict:
        return {"sku": self.sku, "quantity": self.quantity, "attributes": self.attribute_map}


@commerce.aggregate
class ShoppingCart:
    cart_id = Identifier(identifier=True, required=True)
    items = HasMany(CartItem)
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, cart_id):
        now = datetime.now(UTC)
        return cls(cart_id=cart_id, created_at=now, updated_at=now)

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_item(self, sku, quantity, attributes=None):
        """Append a product line to the cart."""
        now = datetime.now(UTC)
        item = CartItem(
            sku=sku,
            quantity=quantity,
            attributes=dump_attributes(attributes),
            position=self._next_position(),
            added_at=now,
        )
        self.add_items(item)
        self.updated_at = now

        self.raise_(
            CartItemAdded(
                cart_id=str(self.cart_id),
                item_id=str(item.id),
                sku=sku,
                quantity=quantity,
                attributes=item.attributes,
            )
        )
        return item

    def find_item(self, sku, attributes=None):
        """Return the most recently added line matching SKU and attributes, or None."""
        return next((i for i in reversed(self.ordered_items) if i.matches(sku, attributes)), None)

    def remove_item(self, sku, attributes=None):
        """Remove a matching line. Removing a line that is not in the cart is a no-op."""
        item = self.find_item(sku, attributes)
        if item is None:
            return None

        self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemRemoved(
                cart_id=str(self.cart_id),
                item_id=str(item.id),
                sku=item.sku,
            )
        )
        return item

    def replace_items(self, lines):
        """Replace the whole cart contents.

        Args:
            lines: List of dicts with sku, quantity and optional attributes.
        """
        for item in list(self.items):
            self.remove_items(item)

        now = datetime.now(UTC)
        for position, line in enumerate(lines, start=1):
            self.add_items(
                CartItem(
                    sku=line["sku"],
                    quantity=line["quantity"],
                    attributes=dump_attributes(line.get("attributes")),
                    position=position,
                    added_at=now,
                )
            )
        self.updated_at = now

        self.raise_(
            CartUpdated(
                cart_id=str(self.cart_id),
                items=json.dumps(self.lines),
            )
        )

    def _next_position(self) -> int:
        return max((item.position or 0 for item in self.items), default=0) + 1

    @property
    def ordered_items(self) -> list:
        return sorted(self.items, key=lambda item: item.position or 0)

    @property
    def lines(self) -> list[dict]:
        return [item.to_line() for item in self.ordered_items]

    @property
    def is_empty(self) -> bool:
        return not self.items
