"""Order sink port and its Protean repository adapter.

The sink accepts an order snapshot and reports success, or failure with the
human readable validation messages collected while creating the order.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

import structlog
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from commerce.order.order import Order
from commerce.order.snapshot import OrderSnapshot

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class OrderResult:
    success: bool
    order_id: str | None = None
    errors: list[str] = field(default_factory=list)


class OrderSink(ABC):
    @abstractmethod
    def submit(self, snapshot: OrderSnapshot) -> OrderResult:
        """Create an order from the snapshot."""
        ...


def flatten_messages(exc: ValidationError) -> list[str]:
    messages = exc.messages if isinstance(exc.messages, dict) else {"_entity": exc.messages}
    flat = []
    for field_messages in messages.values():
        if isinstance(field_messages, list | tuple):
            flat.extend(str(message) for message in field_messages)
        else:
            flat.append(str(field_messages))
    return flat


class RepositoryOrderSink(OrderSink):
    """Persists orders through the domain's Order repository."""

    def submit(self, snapshot: OrderSnapshot) -> OrderResult:
        try:
            order = Order.place(snapshot)
        except ValidationError as exc:
            errors = flatten_messages(exc)
            logger.info("order_rejected", order_number=snapshot.order_number, errors=errors)
            return OrderResult(success=False, errors=errors)

        current_domain.repository_for(Order).add(order)
        return OrderResult(success=True, order_id=str(order.id))


_current_sink: OrderSink | None = None


def get_order_sink() -> OrderSink:
    """Return the active order sink. Defaults to RepositoryOrderSink."""
    global _current_sink
    if _current_sink is None:
        _current_sink = RepositoryOrderSink()
    return _current_sink


def set_order_sink(sink: OrderSink) -> None:
    global _current_sink
    _current_sink = sink


def reset_order_sink() -> None:
    global _current_sink
    _current_sink = None
