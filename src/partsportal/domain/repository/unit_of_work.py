"""Abstract unit of work: one transaction spanning every repository.

Usage::

    with uow:
        ...
        uow.commit()

Leaving the block without calling ``commit()`` (normally or through an
exception) rolls everything back.  Create one unit of work per request.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from partsportal.domain.repository.cart_repository import CartRepository
from partsportal.domain.repository.catalog_repository import CatalogRepository
from partsportal.domain.repository.order_repository import OrderRepository


class UnitOfWork(ABC):

    catalog: CatalogRepository
    carts: CartRepository
    orders: OrderRepository

    def __enter__(self) -> UnitOfWork:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        # Rolling back after a commit is a no-op
        self.rollback()

    @abstractmethod
    def commit(self) -> None:
        """Make every change in this unit of work durable."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard every uncommitted change."""
