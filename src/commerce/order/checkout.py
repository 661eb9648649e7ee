"""Checkout: turn the submitted cart into an order.

Every line is validated and priced before anything is stored. The resolved
prices go straight into the order snapshot and are never looked up again.
"""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String, Text
from protean.utils.globals import current_domain

from commerce.cart.parsing import decoded, parse_cart, validated
from commerce.cart.schemas import CartLineUpdateModel, CartUpdateModel
from commerce.cart.store import get_cart_store
from commerce.catalog import get_catalog
from commerce.domain import commerce
from commerce.order.order import Order
from commerce.order.sink import get_order_sink
from commerce.order.snapshot import build_order_snapshot
from commerce.pricing import get_price_source, get_strategy
from commerce.pricing.totals import price_lines

logger = structlog.get_logger(__name__)

GENERIC_ORDER_ERROR = "Error ordering"


@commerce.command(part_of="Order")
class PlaceOrder:
    cart_id = String(max_length=255)
    session_key = String(max_length=255, default="")
    lines = Text(required=True)  # JSON: list of {sku, quantity, attributes}
    email = String(required=True, max_length=254)


@commerce.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        submitted = decoded(list[CartLineUpdateModel], command.lines, "lines")
        model = validated(CartUpdateModel, lines=submitted, email=command.email)
        lines = parse_cart(model, get_catalog())
        priced = price_lines(get_price_source().add_prices(lines), get_strategy())

        store = get_cart_store()
        session_key = command.session_key or ""
        cart = store.retrieve(command.cart_id, session_key)
        cart.replace_items(lines)
        store.store(cart, command.cart_id, session_key)

        snapshot = build_order_snapshot(priced, model.email)
        result = get_order_sink().submit(snapshot)
        if not result.success:
            message = result.errors[0] if result.errors else GENERIC_ORDER_ERROR
            raise ValidationError({"order": [message]})

        logger.info(
            "order_placed",
            order_id=result.order_id,
            order_number=snapshot.order_number,
            line_count=len(snapshot.lines),
        )
        return result.order_id


def get_order(order_id: str) -> Order:
    """Load a placed order. Raises ObjectNotFoundError for unknown ids."""
    return current_domain.repository_for(Order).get(order_id)
