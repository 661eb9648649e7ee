"""Cart queries: the priced cart view and the raw stored cart."""

from dataclasses import dataclass, field

import structlog

from commerce.cart.cart import ShoppingCart
from commerce.cart.store import get_cart_store
from commerce.catalog import get_catalog
from commerce.pricing import get_price_source, get_strategy
from commerce.pricing.totals import compute_totals, price_line
from commerce.shared.money import Amount

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CartLineView:
    sku: str
    product_name: str
    product_url: str
    quantity: int
    unit_price: Amount
    line_price: Amount
    attributes: dict = field(default_factory=dict)


@dataclass(frozen=True)
class CartView:
    """A cart priced for display.

    Lines whose product left the catalogue or has no price are listed in
    ``unavailable`` and contribute nothing to ``totals``.
    """

    id: str | None
    lines: tuple[CartLineView, ...] = ()
    totals: tuple[Amount, ...] = ()
    unavailable: tuple[str, ...] = ()


def get_cart(cart_id: str | None = None, session_key: str = "") -> ShoppingCart:
    return get_cart_store().retrieve(cart_id, session_key)


def view_cart(cart_id: str | None = None, session_key: str = "") -> CartView:
    cart = get_cart(cart_id, session_key)
    lines = cart.lines

    products = get_catalog().lookup_by_sku(line["sku"] for line in lines)
    priced_items = get_price_source().add_prices(lines)
    strategy = get_strategy()

    views = []
    unavailable = []
    for item in priced_items:
        product = products.get(item.sku)
        if product is None or not item.has_price:
            unavailable.append(item.sku)
            continue

        priced = price_line(item, strategy)
        views.append(
            CartLineView(
                sku=item.sku,
                product_name=product.display_name,
                product_url=product.canonical_url,
                quantity=item.quantity,
                unit_price=priced.unit_price,
                line_price=priced.line_price,
                attributes=dict(item.attributes),
            )
        )

    if unavailable:
        logger.warning("cart_lines_unavailable", cart_key=str(cart.cart_id), skus=unavailable)

    return CartView(
        id=cart_id,
        lines=tuple(views),
        totals=tuple(compute_totals(view.line_price for view in views)),
        unavailable=tuple(unavailable),
    )
