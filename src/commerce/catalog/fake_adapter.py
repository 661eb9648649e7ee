"""In-memory product catalogue for development and testing."""

from collections.abc import Iterable

from commerce.catalog.port import ProductCatalog, ProductInfo


class FakeProductCatalog(ProductCatalog):
    """Catalogue seeded at runtime; records every lookup."""

    def __init__(self) -> None:
        self.products: dict[str, ProductInfo] = {}
        self.calls: list[list[str]] = []

    def add(self, sku: str, display_name: str, canonical_url: str | None = None) -> ProductInfo:
        info = ProductInfo(sku=sku, display_name=display_name, canonical_url=canonical_url or f"/products/{sku}")
        self.products[sku] = info
        return info

    def remove(self, sku: str) -> None:
        self.products.pop(sku, None)

    def lookup_by_sku(self, skus: Iterable[str]) -> dict[str, ProductInfo]:
        requested = list(skus)
        self.calls.append(requested)
        return {sku: self.products[sku] for sku in requested if sku in self.products}
