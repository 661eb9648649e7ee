"""Cart persistence port and its Protean repository adapter.

Carts are addressed by an explicit identity: the optional external cart id
plus the shopper's session key. Both are folded into one stable derived id, so
no code path depends on ambient session state.
"""

from abc import ABC, abstractmethod
from uuid import NAMESPACE_URL, uuid5

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from commerce.cart.cart import ShoppingCart

logger = structlog.get_logger(__name__)

_CART_NAMESPACE = uuid5(NAMESPACE_URL, "storefront:shopping-cart")


class CartStore(ABC):
    """Abstract cart storage."""

    def derive_id(self, cart_id: str | None, session_key: str = "") -> str:
        """Stable storage key for a cart id within a shopper session."""
        return str(uuid5(_CART_NAMESPACE, f"{session_key}/{cart_id or ''}"))

    @abstractmethod
    def retrieve(self, cart_id: str | None, session_key: str = "") -> ShoppingCart:
        """Load the cart, or return a new empty one when none is stored."""
        ...

    @abstractmethod
    def store(self, cart: ShoppingCart, cart_id: str | None, session_key: str = "") -> None:
        """Persist the whole cart, replacing whatever was stored."""
        ...


class RepositoryCartStore(CartStore):
    """Stores carts through the domain's ShoppingCart repository."""

    def retrieve(self, cart_id: str | None, session_key: str = "") -> ShoppingCart:
        key = self.derive_id(cart_id, session_key)
        try:
            return current_domain.repository_for(ShoppingCart).get(key)
        except ObjectNotFoundError:
            logger.debug("cart_not_found_creating_empty", cart_key=key)
            return ShoppingCart.create(cart_id=key)

    def store(self, cart: ShoppingCart, cart_id: str | None, session_key: str = "") -> None:
        key = self.derive_id(cart_id, session_key)
        if str(cart.cart_id) != key:
            raise ValueError(f"Cart {cart.cart_id} cannot be stored under key {key}")
        current_domain.repository_for(ShoppingCart).add(cart)
        logger.info("cart_stored", cart_key=key, line_count=len(cart.items))


_current_store: CartStore | None = None


def get_cart_store() -> CartStore:
    """Return the active cart store. Defaults to RepositoryCartStore."""
    global _current_store
    if _current_store is None:
        _current_store = RepositoryCartStore()
    return _current_store


def set_cart_store(store: CartStore) -> None:
    global _current_store
    _current_store = store


def reset_cart_store() -> None:
    global _current_store
    _current_store = None
