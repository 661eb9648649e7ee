"""Product catalogue port (abstract interface)."""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class ProductInfo:
    """What a cart needs to know about a product to display a line."""

    sku: str
    display_name: str
    canonical_url: str


class ProductCatalog(ABC):
    """Abstract product lookup."""

    @abstractmethod
    def lookup_by_sku(self, skus: Iterable[str]) -> dict[str, ProductInfo]:
        """Return product info for every known SKU. Unknown SKUs are simply absent."""
        ...
