"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Identifier, String, Text

from commerce.domain import commerce


@commerce.event(part_of="Order")
class OrderPlaced:
    """A cart was checked out into an order; prices are frozen from here on."""

    __version__ = 1

    order_id = Identifier(required=True)
    order_number = String(required=True, max_length=20)
    email = String(required=True, max_length=254)
    lines = Text(required=True)  # JSON: list of {sku, quantity, unit_price, line_price, currency}
    totals = Text(required=True)  # JSON: list of {value, currency}
    placed_at = DateTime(required=True)
