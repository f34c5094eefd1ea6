"""Application service: Update Cart Item use case."""

from __future__ import annotations

import logging

from partsportal.domain.exceptions import CartItemNotFoundError
from partsportal.domain.model.cart import CartItem
from partsportal.domain.model.value_objects import Quantity
from partsportal.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger("partsportal.cart")


class UpdateCartItemHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, dealer_user_id: str, cart_item_id: int, qty: int) -> CartItem:
        """Set the quantity of one of the user's cart lines.

        The quantity must be positive; removing a line is a separate use
        case.  A line in another user's cart is reported as not found.
        """
        quantity = Quantity(qty)

        with self._uow:
            ensure_owned(self._uow, dealer_user_id, cart_item_id)
            item = self._uow.carts.update_item(cart_item_id, quantity.value)
            if item is None:
                raise CartItemNotFoundError(f"Cart item #{cart_item_id} not found")
            self._uow.commit()

        logger.info("Cart item %d set to qty %s", cart_item_id, quantity)
        return item


def ensure_owned(uow: UnitOfWork, dealer_user_id: str, cart_item_id: int) -> CartItem:
    """Return the cart line if it sits in the user's cart."""
    item = uow.carts.get_item(cart_item_id)
    cart = uow.carts.get_by_user(dealer_user_id)
    if item is None or cart is None or item.cart_id != cart.id:
        raise CartItemNotFoundError(f"Cart item #{cart_item_id} not found")
    return item
