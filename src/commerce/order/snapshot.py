"""Order snapshot: the frozen, priced contents of a cart at checkout time."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime

from commerce.pricing.totals import PricedLine, compute_totals
from commerce.shared.money import Amount


@dataclass(frozen=True)
class OrderLineSnapshot:
    sku: str
    quantity: int
    unit_price: Amount
    line_price: Amount
    attributes: dict = field(default_factory=dict)


@dataclass(frozen=True)
class OrderSnapshot:
    order_number: str
    email: str | None
    lines: tuple[OrderLineSnapshot, ...]
    placed_at: datetime

    @property
    def totals(self) -> list[Amount]:
        return compute_totals(line.line_price for line in self.lines)


def generate_order_number(now: datetime) -> str:
    """Human readable ``yy-MMdd-<seconds since midnight>`` token.

    Seconds are rounded to the nearest whole second (half to even), so two
    orders placed within the same second can share a number.
    """
    seconds = round(now.hour * 3600 + now.minute * 60 + now.second + now.microsecond / 1_000_000)
    return f"{now:%y}-{now:%m%d}-{seconds}"


def build_order_snapshot(
    priced_lines: Sequence[PricedLine],
    email: str | None,
    now: datetime | None = None,
) -> OrderSnapshot:
    now = now or datetime.now().astimezone()
    return OrderSnapshot(
        order_number=generate_order_number(now),
        email=email,
        lines=tuple(
            OrderLineSnapshot(
                sku=line.sku,
                quantity=line.quantity,
                unit_price=line.unit_price,
                line_price=line.line_price,
                attributes=dict(line.item.attributes),
            )
            for line in priced_lines
        ),
        placed_at=now,
    )
