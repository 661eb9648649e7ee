import pytest
from commerce.cart.store import RepositoryCartStore, set_cart_store


class CountingCartStore(RepositoryCartStore):
    """Repository cart store that counts how often it is used."""

    def __init__(self):
        self.retrieved = 0
        self.stored = 0

    def retrieve(self, cart_id, session_key=""):
        self.retrieved += 1
        return super().retrieve(cart_id, session_key)

    def store(self, cart, cart_id, session_key=""):
        self.stored += 1
        super().store(cart, cart_id, session_key)


@pytest.fixture()
def cart_store():
    store = CountingCartStore()
    set_cart_store(store)
    return store
