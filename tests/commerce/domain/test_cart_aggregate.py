"""Tests for the ShoppingCart aggregate and its line mutations."""

import json

import pytest
from commerce.cart.cart import CartItem, ShoppingCart, normalize_attributes
from commerce.cart.events import CartItemAdded, CartItemRemoved, CartUpdated
from protean.exceptions import ValidationError


def _make_cart():
    return ShoppingCart.create(cart_id="cart-001")


class TestCartCreation:
    def test_create_starts_empty(self):
        cart = _make_cart()
        assert cart.is_empty
        assert cart.lines == []

    def test_create_sets_timestamps(self):
        cart = _make_cart()
        assert cart.created_at is not None
        assert cart.updated_at is not None


class TestAddItem:
    def test_add_item(self):
        cart = _make_cart()
        cart.add_item("TSHIRT-001", 2, {"size": "M"})
        assert cart.lines == [{"sku": "TSHIRT-001", "quantity": 2, "attributes": {"size": "M"}}]

    def test_add_item_raises_event(self):
        cart = _make_cart()
        cart.add_item("TSHIRT-001", 1)
        added = [e for e in cart._events if isinstance(e, CartItemAdded)]
        assert len(added) == 1
        assert added[0].sku == "TSHIRT-001"
        assert added[0].quantity == 1
        assert json.loads(added[0].attributes) == {}

    def test_same_sku_appends_a_new_line(self):
        cart = _make_cart()
        cart.add_item("TSHIRT-001", 1)
        cart.add_item("TSHIRT-001", 2)
        assert [line["quantity"] for line in cart.lines] == [1, 2]

    def test_lines_keep_insertion_order(self):
        cart = _make_cart()
        for sku in ("C", "A", "B"):
            cart.add_item(sku, 1)
        assert [line["sku"] for line in cart.lines] == ["C", "A", "B"]

    def test_zero_quantity_rejected(self):
        cart = _make_cart()
        with pytest.raises(ValidationError):
            cart.add_item("TSHIRT-001", 0)


class TestRemoveItem:
    def test_remove_item(self):
        cart = _make_cart()
        cart.add_item("TSHIRT-001", 1)
        cart.remove_item("TSHIRT-001")
        assert cart.is_empty

    def test_remove_raises_event(self):
        cart = _make_cart()
        cart.add_item("TSHIRT-001", 1)
        cart._events.clear()
        cart.remove_item("TSHIRT-001")
        assert len(cart._events) == 1
        assert isinstance(cart._events[0], CartItemRemoved)

    def test_match_requires_same_attributes(self):
        cart = _make_cart()
        cart.add_item("TSHIRT-001", 1, {"size": "M"})
        cart.remove_item("TSHIRT-001", {"size": "L"})
        assert len(cart.lines) == 1

    def test_attribute_order_does_not_matter(self):
        cart = _make_cart()
        cart.add_item("TSHIRT-001", 1, {"size": "M", "color": "red"})
        cart.remove_item("TSHIRT-001", {"color": "red", "size": "M"})
        assert cart.is_empty

    def test_removing_missing_item_is_a_noop(self):
        cart = _make_cart()
        cart.add_item("TSHIRT-001", 1)
        cart._events.clear()
        before = cart.lines

        assert cart.remove_item("MUG-002") is None
        assert cart.lines == before
        assert cart._events == []

    def test_removes_most_recent_matching_line(self):
        cart = _make_cart()
        cart.add_item("TSHIRT-001", 1)
        cart.add_item("MUG-002", 1)
        cart.add_item("TSHIRT-001", 5)
        cart.remove_item("TSHIRT-001")
        assert cart.lines == [
            {"sku": "TSHIRT-001", "quantity": 1, "attributes": {}},
            {"sku": "MUG-002", "quantity": 1, "attributes": {}},
        ]

    @pytest.mark.parametrize(
        "existing",
        [[], [("TSHIRT-001", 1)], [("TSHIRT-001", 3), ("MUG-002", 1)]],
        ids=["empty", "same-sku-present", "mixed"],
    )
    def test_add_then_remove_restores_lines(self, existing):
        cart = _make_cart()
        for sku, quantity in existing:
            cart.add_item(sku, quantity)
        before = cart.lines

        cart.add_item("TSHIRT-001", 2)
        cart.remove_item("TSHIRT-001")

        assert cart.lines == before


class TestReplaceItems:
    def test_replaces_all_lines(self):
        cart = _make_cart()
        cart.add_item("TSHIRT-001", 1)
        cart.replace_items([{"sku": "MUG-002", "quantity": 3}, {"sku": "POSTER-003", "quantity": 1}])
        assert [line["sku"] for line in cart.lines] == ["MUG-002", "POSTER-003"]

    def test_raises_cart_updated(self):
        cart = _make_cart()
        cart.replace_items([{"sku": "MUG-002", "quantity": 3, "attributes": {"gift": True}}])
        event = cart._events[-1]
        assert isinstance(event, CartUpdated)
        assert json.loads(event.items) == [{"sku": "MUG-002", "quantity": 3, "attributes": {"gift": True}}]

    def test_replace_with_nothing_empties_cart(self):
        cart = _make_cart()
        cart.add_item("TSHIRT-001", 1)
        cart.replace_items([])
        assert cart.is_empty


class TestCartItem:
    def test_attribute_map(self):
        item = CartItem(sku="TSHIRT-001", quantity=1, attributes='{"size": "M"}')
        assert item.attribute_map == {"size": "M"}

    def test_matches(self):
        item = CartItem(sku="TSHIRT-001", quantity=1, attributes='{"size": "M"}')
        assert item.matches("TSHIRT-001", {"size": "M"})
        assert not item.matches("TSHIRT-001", None)

    def test_normalize_attributes(self):
        assert normalize_attributes(None) == {}
        assert normalize_attributes('{"a": 1}') == {"a": 1}
        assert normalize_attributes({1: "x"}) == {"1": "x"}
