"""Cart event sink port.

Interested parties (marketing automations, analytics) hear about cart
activity through this port. Delivery is fire-and-forget.
"""

from abc import ABC, abstractmethod


class EventSink(ABC):
    @abstractmethod
    def item_added(self, line: dict, correlation_key: str) -> None:
        """A product line was added to the cart identified by ``correlation_key``."""
        ...
