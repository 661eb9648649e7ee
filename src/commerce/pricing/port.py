"""Price source port (abstract interface).

A price source attaches the candidate prices on offer to each cart line.
Lookups are independent per SKU; the base class batches them by unique SKU
and maps results back so the output always mirrors the input order.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

import structlog

from commerce.shared.money import Amount

logger = structlog.get_logger(__name__)


def as_line(item) -> dict:
    """Accept either a CartItem entity or a plain line dict."""
    if isinstance(item, dict):
        return {
            "sku": item["sku"],
            "quantity": item["quantity"],
            "attributes": dict(item.get("attributes") or {}),
        }
    return item.to_line()


@dataclass(frozen=True)
class PricedItem:
    """A cart line together with every price it could be sold at."""

    sku: str
    quantity: int
    attributes: dict = field(default_factory=dict)
    candidate_prices: tuple[Amount, ...] = ()

    @property
    def has_price(self) -> bool:
        return bool(self.candidate_prices)


class PriceSource(ABC):
    """Abstract price lookup."""

    def add_prices(self, items: Sequence) -> list[PricedItem]:
        """Attach candidate prices to each item, preserving input length and order."""
        lines = [as_line(item) for item in items]
        skus = list(dict.fromkeys(line["sku"] for line in lines))
        prices = self.prices_for(skus) if skus else {}

        priced = [
            PricedItem(
                sku=line["sku"],
                quantity=line["quantity"],
                attributes=line["attributes"],
                candidate_prices=tuple(prices.get(line["sku"], ())),
            )
            for line in lines
        ]

        unpriced = [item.sku for item in priced if not item.has_price]
        if unpriced:
            logger.info("items_without_price", skus=unpriced)
        return priced

    @abstractmethod
    def prices_for(self, skus: Iterable[str]) -> dict[str, list[Amount]]:
        """Return candidate prices per SKU. SKUs without prices may be omitted."""
        ...
