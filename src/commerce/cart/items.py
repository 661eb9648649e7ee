"""Cart item management: commands and handler."""

import structlog
from protean import handle
from protean.fields import Integer, String, Text

from commerce.cart.cart import ShoppingCart
from commerce.cart.parsing import decoded, not_found_error, parse_cart_line, validated
from commerce.cart.schemas import AttributeValue, CartLineUpdateModel
from commerce.cart.store import get_cart_store
from commerce.catalog import get_catalog
from commerce.domain import commerce
from commerce.notification import notify_item_added
from commerce.pricing import get_price_source
from commerce.pricing.totals import unpriced_error

logger = structlog.get_logger(__name__)


@commerce.command(part_of="ShoppingCart")
class AddToCart:
    cart_id = String(max_length=255)  # Optional external cart key
    session_key = String(max_length=255, default="")
    sku = String(required=True, max_length=50)
    quantity = Integer(default=1, min_value=1)
    attributes = Text()  # JSON object of attribute name -> value


@commerce.command(part_of="ShoppingCart")
class RemoveFromCart:
    cart_id = String(max_length=255)
    session_key = String(max_length=255, default="")
    sku = String(required=True, max_length=50)
    attributes = Text()


def _line_model(command, quantity) -> CartLineUpdateModel:
    attributes = decoded(dict[str, AttributeValue], command.attributes, "attributes") if command.attributes else {}
    return validated(CartLineUpdateModel, sku=command.sku, quantity=quantity, attributes=attributes)


@commerce.command_handler(part_of=ShoppingCart)
class ManageCartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        line = parse_cart_line(_line_model(command, command.quantity), get_catalog())
        if line is None:
            raise not_found_error(command.sku)

        # Price check happens before the cart is even loaded
        priced = get_price_source().add_prices([line])[0]
        if not priced.has_price:
            raise unpriced_error(line["sku"])

        store = get_cart_store()
        session_key = command.session_key or ""
        cart = store.retrieve(command.cart_id, session_key)
        cart.add_item(sku=line["sku"], quantity=line["quantity"], attributes=line["attributes"])
        store.store(cart, command.cart_id, session_key)

        notify_item_added(
            {**line, "prices": [{"value": p.value, "currency": p.currency} for p in priced.candidate_prices]},
            store.derive_id(command.cart_id, session_key),
        )
        logger.info("cart_item_added", cart_key=str(cart.cart_id), sku=line["sku"], quantity=line["quantity"])
        return str(cart.cart_id)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        # Products gone from the catalogue must still be removable
        model = _line_model(command, 1)

        store = get_cart_store()
        session_key = command.session_key or ""
        cart = store.retrieve(command.cart_id, session_key)
        if cart.remove_item(sku=model.sku, attributes=model.attributes) is None:
            logger.debug("cart_item_not_present", cart_key=str(cart.cart_id), sku=model.sku)
            return str(cart.cart_id)

        store.store(cart, command.cart_id, session_key)
        return str(cart.cart_id)
