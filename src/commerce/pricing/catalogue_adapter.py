"""Price source reading the price list of the Product aggregate."""

from collections.abc import Iterable

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from commerce.catalog.product import Product
from commerce.pricing.port import PriceSource
from commerce.shared.money import Amount


class CataloguePriceSource(PriceSource):
    def prices_for(self, skus: Iterable[str]) -> dict[str, list[Amount]]:
        repo = current_domain.repository_for(Product)
        prices = {}
        for sku in skus:
            try:
                prices[sku] = repo.get(sku).candidate_prices()
            except ObjectNotFoundError:
                prices[sku] = []
        return prices
