"""Configurable in-memory price source for development and testing."""

from collections.abc import Iterable

from commerce.pricing.port import PriceSource
from commerce.shared.money import Amount


class FakePriceSource(PriceSource):
    """Price table set at runtime. Every lookup batch is recorded in ``calls``."""

    def __init__(self) -> None:
        self.table: dict[str, list[Amount]] = {}
        self.calls: list[list[str]] = []

    def set_prices(self, sku: str, *prices: tuple) -> None:
        """Register candidates as (value, currency) pairs, replacing earlier ones."""
        self.table[sku] = [Amount.of(value, currency) for value, currency in prices]

    def clear(self, sku: str) -> None:
        self.table.pop(sku, None)

    def prices_for(self, skus: Iterable[str]) -> dict[str, list[Amount]]:
        requested = list(skus)
        self.calls.append(requested)
        return {sku: list(self.table[sku]) for sku in requested if sku in self.table}
