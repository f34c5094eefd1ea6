"""Application service: Place Order (checkout) use case.

Converts the dealer user's cart into an immutable order inside one unit of
work.  Every line is re-priced at commit time; prices are never read from
the cart.  Unlike the bulk pricing path, a failure on any single line aborts
the whole order and leaves the cart untouched.
"""

from __future__ import annotations

import logging

from partsportal.application.dto import OrderDTO
from partsportal.domain.exceptions import (
    EmptyCartError,
    ProductNotFoundError,
    TransactionFailureError,
    ValidationError,
)
from partsportal.domain.model.order import OrderHeader, OrderLine
from partsportal.domain.repository.unit_of_work import UnitOfWork
from partsportal.domain.service.order_numbers import OrderNumberGenerator
from partsportal.domain.service.pricing import PriceResolutionEngine

logger = logging.getLogger("partsportal.checkout")


class PlaceOrderHandler:

    def __init__(self, uow: UnitOfWork, order_numbers: OrderNumberGenerator) -> None:
        self._uow = uow
        self._order_numbers = order_numbers

    def handle(
        self,
        dealer_user_id: str,
        dealer_account_id: str,
        po_ref: str | None = None,
        notes: str | None = None,
    ) -> OrderDTO:
        """Place an order from the user's cart.

        Steps (all-or-nothing):
        1. Load and lock the cart; it must have at least one line.
        2. Re-price every line for this dealer at its cart quantity.
        3. Snapshot each line and build a SUSPENDED order.
        4. Persist the order and empty the cart.
        """
        try:
            with self._uow:
                order = self._place(dealer_user_id, dealer_account_id, po_ref, notes)
                self._uow.commit()
        except Exception as exc:
            logger.warning(
                "Checkout aborted for user %s (dealer %s): %s",
                dealer_user_id, dealer_account_id, exc,
            )
            raise

        logger.info(
            "Order %s placed for dealer %s: %d lines, total %s",
            order.order_no, dealer_account_id, order.line_count, order.total,
        )
        return OrderDTO.from_order(order)

    def _place(
        self,
        dealer_user_id: str,
        dealer_account_id: str,
        po_ref: str | None,
        notes: str | None,
    ) -> OrderHeader:
        cart = self._uow.carts.get_for_checkout(dealer_user_id)
        if cart is None or cart.is_empty:
            raise EmptyCartError("Cart is empty")
        if cart.dealer_account_id != dealer_account_id:
            raise ValidationError(
                f"Cart of user {dealer_user_id} does not belong to dealer "
                f"{dealer_account_id}"
            )

        engine = PriceResolutionEngine(self._uow.catalog)
        lines: list[OrderLine] = []

        for line_no, item in enumerate(cart.items, start=1):
            product = self._uow.catalog.get_product(item.product_id)
            if product is None:
                raise ProductNotFoundError(f"Product not found: {item.product_id}")

            price = engine.resolve_price(
                dealer_account_id, product.product_code, item.quantity.value
            )
            lines.append(
                OrderLine(
                    line_no=line_no,
                    product_id=product.id,
                    product_code_snapshot=product.product_code,
                    description_snapshot=product.description,
                    part_type_snapshot=product.part_type,
                    quantity=item.quantity,
                    unit_price_snapshot=price.unit_price,  # type: ignore[arg-type]
                    band_code_snapshot=price.band_code,  # type: ignore[arg-type]
                    min_price_applied=price.minimum_price_applied,
                )
            )

        order = OrderHeader.create(
            order_no=self._order_numbers.next_order_no(),
            dealer_account_id=dealer_account_id,
            dealer_user_id=dealer_user_id,
            lines=lines,
            po_ref=po_ref,
            notes=notes,
        )
        saved = self._uow.orders.add(order)

        removed = self._uow.carts.clear(cart.id)
        if removed == 0:
            # Another checkout consumed the cart after we loaded it
            raise EmptyCartError("Cart is empty")
        if removed != len(cart.items):
            raise TransactionFailureError(
                f"Cart {cart.id} changed during checkout "
                f"(expected {len(cart.items)} lines, removed {removed})"
            )

        return saved
