"""Application service: Clear Cart use case.

Empties the user's cart but keeps the cart itself for reuse.
"""

from __future__ import annotations

import logging

from partsportal.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger("partsportal.cart")


class ClearCartHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, dealer_user_id: str) -> int:
        """Delete every line of the user's cart and return how many went.

        A user without a cart has nothing to clear; that is not an error.
        """
        with self._uow:
            cart = self._uow.carts.get_by_user(dealer_user_id)
            if cart is None:
                return 0
            removed = self._uow.carts.clear(cart.id)
            self._uow.commit()

        logger.info("Cart %s cleared: %d lines removed", cart.id, removed)
        return removed
