"""SQLAlchemy-backed implementation of OrderRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from partsportal.domain.model.order import OrderHeader
from partsportal.domain.repository.order_repository import OrderRepository
from partsportal.infrastructure.persistence.mappers import order_to_domain, order_to_row
from partsportal.infrastructure.persistence.models import OrderHeaderRow


class SqlOrderRepository(OrderRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def add(self, order: OrderHeader) -> OrderHeader:
        row = order_to_row(order)
        self._session.add(row)
        # Surface a duplicate order_no here, inside the unit of work
        self._session.flush()
        return order_to_domain(row)

    def get_by_order_no(self, order_no: str) -> OrderHeader | None:
        stmt = (
            select(OrderHeaderRow)
            .where(OrderHeaderRow.order_no == order_no)
            .options(selectinload(OrderHeaderRow.lines))
        )
        row = self._session.execute(stmt).scalar_one_or_none()
        return order_to_domain(row) if row is not None else None

    def list_for_dealer(self, dealer_account_id: str) -> list[OrderHeader]:
        stmt = (
            select(OrderHeaderRow)
            .where(OrderHeaderRow.dealer_account_id == dealer_account_id)
            .options(selectinload(OrderHeaderRow.lines))
            .order_by(OrderHeaderRow.created_at.desc(), OrderHeaderRow.id.desc())
        )
        return [order_to_domain(row) for row in self._session.execute(stmt).scalars()]
