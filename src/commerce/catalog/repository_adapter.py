"""Product catalogue backed by the Product aggregate repository."""

from collections.abc import Iterable

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from commerce.catalog.port import ProductCatalog, ProductInfo
from commerce.catalog.product import Product


class RepositoryProductCatalog(ProductCatalog):
    def lookup_by_sku(self, skus: Iterable[str]) -> dict[str, ProductInfo]:
        repo = current_domain.repository_for(Product)
        found = {}
        for sku in dict.fromkeys(skus):
            try:
                product = repo.get(sku)
            except ObjectNotFoundError:
                continue
            found[sku] = ProductInfo(
                sku=sku,
                display_name=product.title,
                canonical_url=product.canonical_url,
            )
        return found
