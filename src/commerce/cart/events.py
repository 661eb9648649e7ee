"""Domain events for the ShoppingCart aggregate."""

from protean.fields import Identifier, Integer, String, Text

from commerce.domain import commerce


@commerce.event(part_of="ShoppingCart")
class CartItemAdded:
    """A product line was appended to the shopping cart."""

    __version__ = 1

    cart_id = Identifier(required=True)
    item_id = Identifier(required=True)
    sku = String(required=True, max_length=50)
    quantity = Integer(required=True)
    attributes = Text()  # JSON object of attribute name -> value


@commerce.event(part_of="ShoppingCart")
class CartItemRemoved:
    """A product line was removed from the shopping cart."""

    __version__ = 1

    cart_id = Identifier(required=True)
    item_id = Identifier(required=True)
    sku = String(required=True, max_length=50)


@commerce.event(part_of="ShoppingCart")
class CartUpdated:
    """The cart contents were replaced wholesale from a submitted cart form."""

    __version__ = 1

    cart_id = Identifier(required=True)
    items = Text(required=True)  # JSON: list of {sku, quantity, attributes}
