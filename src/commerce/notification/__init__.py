"""Event sink factory and fire-and-forget publishing helpers.

NullEventSink is the default, so callers never check whether a sink exists.
"""

import structlog

from commerce.notification.adapters import NullEventSink
from commerce.notification.port import EventSink

logger = structlog.get_logger(__name__)

_current_sink: EventSink | None = None


def get_event_sink() -> EventSink:
    global _current_sink
    if _current_sink is None:
        _current_sink = NullEventSink()
    return _current_sink


def set_event_sink(sink: EventSink) -> None:
    global _current_sink
    _current_sink = sink


def reset_event_sink() -> None:
    global _current_sink
    _current_sink = None


def cart_correlation_key(cart_key: str) -> str:
    return f"ShoppingCart-{cart_key}"


def notify_item_added(line: dict, cart_key: str) -> None:
    """Tell the event sink about an added line. Sink failures are logged, never raised."""
    correlation_key = cart_correlation_key(cart_key)
    try:
        get_event_sink().item_added(line, correlation_key)
    except Exception:
        logger.warning("event_sink_delivery_failed", correlation_key=correlation_key, sku=line.get("sku"), exc_info=True)
