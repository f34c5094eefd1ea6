"""Application service: Show Order use case (query)."""

from __future__ import annotations

from partsportal.application.dto import OrderDTO
from partsportal.domain.exceptions import OrderNotFoundError
from partsportal.domain.repository.unit_of_work import UnitOfWork


class ShowOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, dealer_account_id: str, order_no: str) -> OrderDTO:
        """Return one of the dealer's orders.

        Another dealer's order is reported as not found.
        """
        with self._uow:
            order = self._uow.orders.get_by_order_no(order_no)

        if order is None or order.dealer_account_id != dealer_account_id:
            raise OrderNotFoundError(f"Order {order_no} not found")
        return OrderDTO.from_order(order)
