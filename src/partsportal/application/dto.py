"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between callers (CLI, BFF) and the application layer
without exposing domain internals.  Money is pre-formatted, e.g. "£15.00".
"""

from __future__ import annotations

from dataclasses import dataclass

from partsportal.domain.model.order import OrderHeader
from partsportal.domain.service.pricing import PriceResult


@dataclass(frozen=True)
class PriceDTO:
    """Output: one product's price for a dealer (or why there is none)."""

    product_code: str
    description: str | None
    part_type: str | None
    qty: int
    unit_price: str | None
    total_price: str | None
    currency: str
    band_code: str | None
    minimum_price_applied: bool
    available: bool
    reason: str | None = None
    message: str | None = None

    @staticmethod
    def from_result(result: PriceResult) -> PriceDTO:
        return PriceDTO(
            product_code=result.product_code,
            description=result.description,
            part_type=result.part_type.value if result.part_type else None,
            qty=result.qty,
            unit_price=str(result.unit_price) if result.unit_price is not None else None,
            total_price=str(result.total_price) if result.total_price is not None else None,
            currency=result.currency,
            band_code=result.band_code,
            minimum_price_applied=result.minimum_price_applied,
            available=result.available,
            reason=result.error_code,
            message=result.error_message,
        )


@dataclass(frozen=True)
class CartItemDTO:
    """Output: a cart line with its live price."""

    id: int
    product_id: str
    product_code: str | None
    description: str | None
    part_type: str | None
    quantity: int
    unit_price: str | None
    line_total: str | None
    band_code: str | None
    minimum_price_applied: bool
    available: bool
    reason: str | None = None


@dataclass(frozen=True)
class CartDTO:
    """Output: a cart as displayed to the dealer user."""

    id: int
    dealer_user_id: str
    dealer_account_id: str
    items: list[CartItemDTO]
    item_count: int
    subtotal: str  # available lines only


@dataclass(frozen=True)
class OrderLineDTO:
    line_no: int
    product_code: str
    description: str
    part_type: str
    quantity: int
    unit_price: str
    line_total: str
    band_code: str
    min_price_applied: bool


@dataclass(frozen=True)
class OrderDTO:
    """Output: a placed order."""

    id: int
    order_no: str
    dealer_account_id: str
    dealer_user_id: str
    status: str
    po_ref: str | None
    notes: str | None
    lines: list[OrderLineDTO]
    subtotal: str
    total: str
    created_at: str

    @staticmethod
    def from_order(order: OrderHeader) -> OrderDTO:
        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            order_no=order.order_no,
            dealer_account_id=order.dealer_account_id,
            dealer_user_id=order.dealer_user_id,
            status=order.status.value,
            po_ref=order.po_ref,
            notes=order.notes,
            lines=[
                OrderLineDTO(
                    line_no=line.line_no,
                    product_code=line.product_code_snapshot,
                    description=line.description_snapshot,
                    part_type=line.part_type_snapshot.value,
                    quantity=line.quantity.value,
                    unit_price=str(line.unit_price_snapshot),
                    line_total=str(line.line_total),
                    band_code=line.band_code_snapshot,
                    min_price_applied=line.min_price_applied,
                )
                for line in order.lines
            ],
            subtotal=str(order.subtotal),
            total=str(order.total),
            created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        )
