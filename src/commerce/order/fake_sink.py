"""Configurable fake order sink for development and testing."""

from uuid import uuid4

from commerce.order.sink import OrderResult, OrderSink
from commerce.order.snapshot import OrderSnapshot


class FakeOrderSink(OrderSink):
    """Accepts or rejects every snapshot as configured, keeping what it received."""

    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.errors: list[str] = ["Order could not be created"]
        self.received: list[OrderSnapshot] = []

    def configure(self, should_succeed: bool, errors: list[str] | None = None) -> None:
        self.should_succeed = should_succeed
        if errors is not None:
            self.errors = errors

    def submit(self, snapshot: OrderSnapshot) -> OrderResult:
        self.received.append(snapshot)
        if self.should_succeed:
            return OrderResult(success=True, order_id=f"fake_ord_{uuid4().hex[:12]}")
        return OrderResult(success=False, errors=list(self.errors))
