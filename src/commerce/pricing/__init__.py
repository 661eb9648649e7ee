"""Pricing factories.

get_price_source() / set_price_source() swap the candidate price lookup:
- CataloguePriceSource, reading Product price lists (default)
- FakePriceSource for development and testing

get_strategy() / set_strategy() swap the rule that picks one candidate.
LowestPriceStrategy is the default.
"""

from commerce.pricing.catalogue_adapter import CataloguePriceSource
from commerce.pricing.port import PricedItem, PriceSource
from commerce.pricing.strategy import LowestPriceStrategy, PriceSelectionStrategy

__all__ = [
    "PriceSelectionStrategy",
    "PriceSource",
    "PricedItem",
    "get_price_source",
    "get_strategy",
    "reset_price_source",
    "reset_strategy",
    "set_price_source",
    "set_strategy",
]

_current_source: PriceSource | None = None
_current_strategy: PriceSelectionStrategy | None = None


def get_price_source() -> PriceSource:
    """Return the current price source. Defaults to CataloguePriceSource."""
    global _current_source
    if _current_source is None:
        _current_source = CataloguePriceSource()
    return _current_source


def set_price_source(source: PriceSource) -> None:
    global _current_source
    _current_source = source


def reset_price_source() -> None:
    global _current_source
    _current_source = None


def get_strategy() -> PriceSelectionStrategy:
    """Return the current price selection strategy. Defaults to LowestPriceStrategy."""
    global _current_strategy
    if _current_strategy is None:
        _current_strategy = LowestPriceStrategy()
    return _current_strategy


def set_strategy(strategy: PriceSelectionStrategy) -> None:
    global _current_strategy
    _current_strategy = strategy


def reset_strategy() -> None:
    global _current_strategy
    _current_strategy = None
