"""Abstract repository for the OrderHeader aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from partsportal.domain.model.order import OrderHeader


class OrderRepository(ABC):

    @abstractmethod
    def add(self, order: OrderHeader) -> OrderHeader:
        """Persist a new order and return it with its ID assigned.

        Orders are immutable; there is no update.
        """

    @abstractmethod
    def get_by_order_no(self, order_no: str) -> OrderHeader | None:
        """Return an order by its order number, or None if not found."""

    @abstractmethod
    def list_for_dealer(self, dealer_account_id: str) -> list[OrderHeader]:
        """Return a dealer account's orders, newest first."""
