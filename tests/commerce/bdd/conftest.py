"""Shared BDD fixtures and step definitions for the commerce domain."""

import json

import pytest
from commerce.cart.items import AddToCart, RemoveFromCart
from commerce.cart.viewing import get_cart
from protean import current_domain
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then, when

CART_ID = "cart-1"
SESSION_KEY = "sess-1"


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@pytest.fixture(autouse=True)
def _ports(catalog, price_source, event_sink):
    pass


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('the catalogue offers "{sku}" at {value:g} {currency:w}'))
def catalogue_offers(catalog, price_source, sku, value, currency):
    if sku not in catalog.products:
        catalog.add(sku, sku.title())
    price_source.set_prices(sku, (value, currency))


@given(parsers.cfparse('the catalogue lists "{sku}" without a price'))
def catalogue_lists_unpriced(catalog, price_source, sku):
    catalog.add(sku, sku.title())
    price_source.clear(sku)


@given(parsers.cfparse('the cart contains {quantity:d} of "{sku}"'))
def cart_contains(sku, quantity):
    add_line(sku, quantity)


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------
def add_line(sku, quantity, attributes=None):
    return current_domain.process(
        AddToCart(
            cart_id=CART_ID,
            session_key=SESSION_KEY,
            sku=sku,
            quantity=quantity,
            attributes=json.dumps(attributes) if attributes else None,
        ),
        asynchronous=False,
    )


def remove_line(sku, attributes=None):
    return current_domain.process(
        RemoveFromCart(
            cart_id=CART_ID,
            session_key=SESSION_KEY,
            sku=sku,
            attributes=json.dumps(attributes) if attributes else None,
        ),
        asynchronous=False,
    )


def try_step(error, fn, *args, **kwargs):
    try:
        fn(*args, **kwargs)
    except ValidationError as exc:
        error["exc"] = exc


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the cart has {count:d} line"))
def cart_has_n_lines_singular(count):
    assert len(get_cart(CART_ID, SESSION_KEY).lines) == count


@then(parsers.cfparse("the cart has {count:d} lines"))
def cart_has_n_lines(count):
    assert len(get_cart(CART_ID, SESSION_KEY).lines) == count


@then("the cart is empty")
def cart_is_empty():
    assert get_cart(CART_ID, SESSION_KEY).is_empty


@then(parsers.cfparse('the request is rejected with "{message}"'))
def request_rejected(error, message):
    assert error["exc"] is not None
    flat = [m for messages in error["exc"].messages.values() for m in messages]
    assert message in flat


@then("no error is raised")
def no_error(error):
    assert error["exc"] is None


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('{quantity:d} of "{sku}" are added to the cart'))
def add_to_cart(error, sku, quantity):
    try_step(error, add_line, sku, quantity)


@when(parsers.cfparse('"{sku}" is removed from the cart'))
def remove_from_cart(error, sku):
    try_step(error, remove_line, sku)
