"""Application service: Remove Cart Item use case."""

from __future__ import annotations

import logging

from partsportal.application.update_cart_item import ensure_owned
from partsportal.domain.exceptions import CartItemNotFoundError
from partsportal.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger("partsportal.cart")


class RemoveCartItemHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, dealer_user_id: str, cart_item_id: int) -> None:
        with self._uow:
            ensure_owned(self._uow, dealer_user_id, cart_item_id)
            if not self._uow.carts.remove_item(cart_item_id):
                raise CartItemNotFoundError(f"Cart item #{cart_item_id} not found")
            self._uow.commit()

        logger.info("Cart item %d removed", cart_item_id)
