"""Whole-cart update: command and handler."""

from protean import handle
from protean.fields import String, Text

from commerce.cart.cart import ShoppingCart
from commerce.cart.parsing import decoded, parse_cart, validated
from commerce.cart.schemas import CartLineUpdateModel, CartUpdateModel
from commerce.cart.store import get_cart_store
from commerce.catalog import get_catalog
from commerce.domain import commerce


@commerce.command(part_of="ShoppingCart")
class UpdateCart:
    """Replace the cart with the lines submitted from the cart form."""

    cart_id = String(max_length=255)
    session_key = String(max_length=255, default="")
    lines = Text(required=True)  # JSON: list of {sku, quantity, attributes}


@commerce.command_handler(part_of=ShoppingCart)
class ManageCartHandler:
    @handle(UpdateCart)
    def update_cart(self, command):
        model = validated(CartUpdateModel, lines=decoded(list[CartLineUpdateModel], command.lines, "lines"))
        lines = parse_cart(model, get_catalog())

        store = get_cart_store()
        session_key = command.session_key or ""
        cart = store.retrieve(command.cart_id, session_key)
        cart.replace_items(lines)
        store.store(cart, command.cart_id, session_key)
        return str(cart.cart_id)
