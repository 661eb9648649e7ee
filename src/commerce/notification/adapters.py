"""Event sink adapters."""

from commerce.notification.port import EventSink


class NullEventSink(EventSink):
    """Discards every notification. Used when nobody listens."""

    def item_added(self, line: dict, correlation_key: str) -> None:
        return None


class RecordingEventSink(EventSink):
    """Keeps notifications in memory for tests, optionally failing on demand."""

    def __init__(self) -> None:
        self.events: list[dict] = []
        self.should_fail: bool = False

    def item_added(self, line: dict, correlation_key: str) -> None:
        if self.should_fail:
            raise RuntimeError("Event sink unavailable")
        self.events.append({"name": "ProductAddedToCart", "line": line, "correlation_key": correlation_key})
