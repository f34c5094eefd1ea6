"""Order aggregate: an immutable historical record of a checkout.

An order owns its lines.  Each line is a snapshot of the product and the
price resolved at the moment of commit; nothing on an order refers back to
live catalog or band price rows for pricing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from partsportal.domain.exceptions import ValidationError
from partsportal.domain.model.product import PartType
from partsportal.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    """Statuses an order can be read back with.

    The core only ever writes SUSPENDED (accepted, awaiting downstream
    fulfillment confirmation).  Transitions belong to the fulfillment
    system and are deliberately absent here.
    """

    SUSPENDED = "SUSPENDED"
    PROCESSING = "PROCESSING"
    SHIPPED = "SHIPPED"
    CANCELLED = "CANCELLED"


@dataclass(frozen=True)
class OrderLine:
    """Captures product and price at checkout time."""

    line_no: int
    product_id: str
    product_code_snapshot: str
    description_snapshot: str
    part_type_snapshot: PartType
    quantity: Quantity
    unit_price_snapshot: Money  # frozen at commit
    band_code_snapshot: str
    min_price_applied: bool

    @property
    def line_total(self) -> Money:
        return self.unit_price_snapshot * self.quantity.value


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class OrderHeader:
    """Aggregate root for placed orders.

    Use ``OrderHeader.create()`` for new orders.  The plain constructor is
    what repositories use to reconstitute stored orders without
    re-validating.
    """

    id: int | None
    order_no: str
    dealer_account_id: str
    dealer_user_id: str
    status: OrderStatus
    lines: tuple[OrderLine, ...]
    subtotal: Money
    total: Money
    po_ref: str | None = None
    notes: str | None = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        order_no: str,
        dealer_account_id: str,
        dealer_user_id: str,
        lines: list[OrderLine],
        po_ref: str | None = None,
        notes: str | None = None,
    ) -> OrderHeader:
        """Create a new SUSPENDED order from already-priced lines."""
        if not order_no:
            raise ValidationError("Order number is required")
        if not lines:
            raise ValidationError("Order must contain at least one line")

        subtotal = Money.zero()
        for line in lines:
            subtotal = subtotal + line.line_total

        now = _utcnow()
        return OrderHeader(
            id=None,
            order_no=order_no,
            dealer_account_id=dealer_account_id,
            dealer_user_id=dealer_user_id,
            status=OrderStatus.SUSPENDED,
            lines=tuple(lines),
            subtotal=subtotal,
            # No tax or shipping inside the core
            total=subtotal,
            po_ref=_clean(po_ref),
            notes=_clean(notes),
            created_at=now,
            updated_at=now,
        )

    @property
    def line_count(self) -> int:
        return len(self.lines)


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None
