"""SQLAlchemy-backed unit of work: one session, one transaction."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from partsportal.domain.exceptions import TransactionFailureError
from partsportal.domain.repository.unit_of_work import UnitOfWork
from partsportal.infrastructure.persistence.sql_cart_repository import SqlCartRepository
from partsportal.infrastructure.persistence.sql_catalog_repository import (
    SqlCatalogRepository,
)
from partsportal.infrastructure.persistence.sql_order_repository import (
    SqlOrderRepository,
)

logger = logging.getLogger("partsportal.persistence")


class SqlAlchemyUnitOfWork(UnitOfWork):

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory
        self._session: Session | None = None

    def __enter__(self) -> UnitOfWork:
        self._session = self._session_factory()
        self.catalog = SqlCatalogRepository(self._session)
        self.carts = SqlCartRepository(self._session)
        self.orders = SqlOrderRepository(self._session)
        return super().__enter__()

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            super().__exit__(exc_type, exc, tb)
        finally:
            self._session.close()
            self._session = None

        if isinstance(exc, SQLAlchemyError):
            logger.error("Transaction rolled back: %s", exc)
            raise TransactionFailureError(f"Transaction failed: {exc}") from exc

    def commit(self) -> None:
        self._session.commit()

    def rollback(self) -> None:
        self._session.rollback()
