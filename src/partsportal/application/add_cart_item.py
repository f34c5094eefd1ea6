"""Application service: Add Cart Item use case.

Adding a product that is already in the cart merges into the existing line
(quantities add up); it never creates a duplicate line.  The merge is done
by the repository as a single conditional write.
"""

from __future__ import annotations

import logging

from partsportal.domain.exceptions import ProductNotFoundError
from partsportal.domain.model.cart import CartItem
from partsportal.domain.model.value_objects import Quantity
from partsportal.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger("partsportal.cart")


class AddCartItemHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        dealer_user_id: str,
        dealer_account_id: str,
        product_id: str,
        qty: int,
    ) -> CartItem:
        quantity = Quantity(qty)

        with self._uow:
            if self._uow.catalog.get_product(product_id) is None:
                raise ProductNotFoundError(f"Product not found: {product_id}")

            cart = self._uow.carts.get_or_create(dealer_user_id, dealer_account_id)
            item = self._uow.carts.add_item(cart.id, product_id, quantity.value)
            self._uow.commit()

        logger.info(
            "Cart %s: added %d x %s (line %d now %s)",
            cart.id, quantity.value, product_id, item.id, item.quantity,
        )
        return item
