"""Mapper functions to convert between SQLAlchemy rows and domain entities."""

from decimal import Decimal

from partsportal.domain.model.cart import Cart, CartItem
from partsportal.domain.model.dealer import (
    BandAssignment,
    DealerAccount,
    DealerStatus,
    Entitlement,
)
from partsportal.domain.model.order import OrderHeader, OrderLine, OrderStatus
from partsportal.domain.model.product import BandPrice, PartType, Product, ReferencePrice
from partsportal.domain.model.value_objects import Money, Quantity
from partsportal.infrastructure.persistence.models import (
    BandAssignmentRow,
    BandPriceRow,
    CartItemRow,
    CartRow,
    DealerAccountRow,
    OrderHeaderRow,
    OrderLineRow,
    ProductRow,
)


def _money(value, currency: str | None = None) -> Money:
    amount = value if isinstance(value, Decimal) else Decimal(str(value))
    if currency is None:
        return Money(amount)
    return Money(amount, currency)


def dealer_to_domain(row: DealerAccountRow) -> DealerAccount:
    """Convert a dealer row; unknown entitlement values map to None."""
    try:
        entitlement = Entitlement(row.entitlement)
    except ValueError:
        entitlement = None
    return DealerAccount(
        id=row.id,
        account_no=row.account_no,
        name=row.name,
        status=DealerStatus(row.status),
        entitlement=entitlement,
    )


def band_assignment_to_domain(row: BandAssignmentRow) -> BandAssignment:
    return BandAssignment(
        dealer_account_id=row.dealer_account_id,
        part_type=PartType(row.part_type),
        band_code=row.band_code,
    )


def product_to_domain(row: ProductRow) -> Product:
    reference = None
    if row.reference_price is not None:
        minimum = row.reference_price.minimum_price
        reference = ReferencePrice(
            minimum_price=_money(minimum) if minimum is not None else None
        )
    return Product(
        id=row.id,
        product_code=row.product_code,
        description=row.description,
        part_type=PartType(row.part_type),
        is_active=bool(row.is_active),
        reference_price=reference,
    )


def band_price_to_domain(row: BandPriceRow) -> BandPrice:
    return BandPrice(
        product_id=row.product_id,
        band_code=row.band_code,
        price=_money(row.price),
    )


def cart_item_to_domain(row: CartItemRow) -> CartItem:
    return CartItem(
        id=row.id,
        cart_id=row.cart_id,
        product_id=row.product_id,
        quantity=Quantity(row.qty),
    )


def cart_to_domain(row: CartRow) -> Cart:
    return Cart(
        id=row.id,
        dealer_user_id=row.dealer_user_id,
        dealer_account_id=row.dealer_account_id,
        items=[cart_item_to_domain(item) for item in row.items],
    )


def order_to_domain(row: OrderHeaderRow) -> OrderHeader:
    return OrderHeader(
        id=row.id,
        order_no=row.order_no,
        dealer_account_id=row.dealer_account_id,
        dealer_user_id=row.dealer_user_id,
        status=OrderStatus(row.status),
        lines=tuple(
            OrderLine(
                line_no=line.line_no,
                product_id=line.product_id,
                product_code_snapshot=line.product_code_snapshot,
                description_snapshot=line.description_snapshot,
                part_type_snapshot=PartType(line.part_type_snapshot),
                quantity=Quantity(line.qty),
                unit_price_snapshot=_money(line.unit_price_snapshot, row.currency),
                band_code_snapshot=line.band_code_snapshot,
                min_price_applied=bool(line.min_price_applied),
            )
            for line in row.lines
        ),
        subtotal=_money(row.subtotal, row.currency),
        total=_money(row.total, row.currency),
        po_ref=row.po_ref,
        notes=row.notes,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def order_to_row(order: OrderHeader) -> OrderHeaderRow:
    """Build a new row graph for an order that has not been stored yet."""
    return OrderHeaderRow(
        order_no=order.order_no,
        dealer_account_id=order.dealer_account_id,
        dealer_user_id=order.dealer_user_id,
        status=order.status.value,
        po_ref=order.po_ref,
        notes=order.notes,
        currency=order.total.currency,
        subtotal=order.subtotal.amount,
        total=order.total.amount,
        created_at=order.created_at,
        updated_at=order.updated_at,
        lines=[
            OrderLineRow(
                line_no=line.line_no,
                product_id=line.product_id,
                product_code_snapshot=line.product_code_snapshot,
                description_snapshot=line.description_snapshot,
                part_type_snapshot=line.part_type_snapshot.value,
                qty=line.quantity.value,
                unit_price_snapshot=line.unit_price_snapshot.amount,
                band_code_snapshot=line.band_code_snapshot,
                min_price_applied=line.min_price_applied,
            )
            for line in order.lines
        ],
    )
