"""Application service: List Orders use case (query)."""

from __future__ import annotations

from partsportal.application.dto import OrderDTO
from partsportal.domain.repository.unit_of_work import UnitOfWork


class ListOrdersHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, dealer_account_id: str) -> list[OrderDTO]:
        with self._uow:
            orders = self._uow.orders.list_for_dealer(dealer_account_id)
        return [OrderDTO.from_order(order) for order in orders]
