"""Line and grand total calculation."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from protean.exceptions import ValidationError

from commerce.pricing.port import PricedItem
from commerce.pricing.strategy import PriceSelectionStrategy
from commerce.shared.money import Amount


@dataclass(frozen=True)
class PricedLine:
    item: PricedItem
    unit_price: Amount
    line_price: Amount

    @property
    def sku(self) -> str:
        return self.item.sku

    @property
    def quantity(self) -> int:
        return self.item.quantity


def line_price(unit_price: Amount, quantity: int) -> Amount:
    return unit_price.times(quantity)


def unpriced_error(sku: str) -> ValidationError:
    return ValidationError({"sku": [f"Can't add product {sku} because it doesn't have a price."]})


def price_line(item: PricedItem, strategy: PriceSelectionStrategy) -> PricedLine:
    if not item.has_price:
        raise unpriced_error(item.sku)
    unit_price = strategy.select_price(item.candidate_prices)
    return PricedLine(item=item, unit_price=unit_price, line_price=line_price(unit_price, item.quantity))


def price_lines(items: Sequence[PricedItem], strategy: PriceSelectionStrategy) -> list[PricedLine]:
    """Select a unit price for every item. Any item without candidates is rejected."""
    return [price_line(item, strategy) for item in items]


def compute_totals(line_prices: Iterable[Amount]) -> list[Amount]:
    """Sum line prices per currency, in the order currencies are first seen."""
    sums: dict[str, Amount] = {}
    for amount in line_prices:
        total = sums.get(amount.currency)
        sums[amount.currency] = amount if total is None else total.plus(amount)
    return list(sums.values())
