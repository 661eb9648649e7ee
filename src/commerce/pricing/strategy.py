"""Price selection strategies.

A strategy picks exactly one price out of a non-empty candidate list and
never makes up a price of its own. Strategies are interchangeable: callers
only ever use ``select_price``.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from protean.exceptions import InvalidOperationError

from commerce.shared.money import Amount


class PriceSelectionStrategy(ABC):
    def select_price(self, candidates: Sequence[Amount]) -> Amount:
        candidates = list(candidates)
        if not candidates:
            raise InvalidOperationError("Cannot select a price from an empty candidate list")
        if len(candidates) == 1:
            return candidates[0]
        return self.choose(candidates)

    @abstractmethod
    def choose(self, candidates: list[Amount]) -> Amount:
        """Pick one of two or more candidates."""
        ...


class FirstPriceStrategy(PriceSelectionStrategy):
    """The first listed candidate wins."""

    def choose(self, candidates: list[Amount]) -> Amount:
        return candidates[0]


class LowestPriceStrategy(PriceSelectionStrategy):
    """The numerically lowest candidate wins; ties go to the first listed.

    Values are compared as numbers regardless of currency.
    """

    def choose(self, candidates: list[Amount]) -> Amount:
        return min(candidates, key=lambda amount: amount.decimal)


class PreferredCurrencyStrategy(PriceSelectionStrategy):
    """Lowest price in the preferred currency, else whatever the fallback picks."""

    def __init__(self, currency: str, fallback: PriceSelectionStrategy | None = None) -> None:
        self.currency = currency
        self.fallback = fallback or LowestPriceStrategy()

    def choose(self, candidates: list[Amount]) -> Amount:
        preferred = [amount for amount in candidates if amount.currency == self.currency]
        if preferred:
            return min(preferred, key=lambda amount: amount.decimal)
        return self.fallback.select_price(candidates)
