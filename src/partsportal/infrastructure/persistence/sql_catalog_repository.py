"""SQLAlchemy-backed implementation of CatalogRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from partsportal.domain.model.dealer import BandAssignment, DealerAccount
from partsportal.domain.model.product import BandPrice, PartType, Product
from partsportal.domain.repository.catalog_repository import CatalogRepository
from partsportal.infrastructure.persistence.mappers import (
    band_assignment_to_domain,
    band_price_to_domain,
    dealer_to_domain,
    product_to_domain,
)
from partsportal.infrastructure.persistence.models import (
    BandAssignmentRow,
    BandPriceRow,
    DealerAccountRow,
    ProductRow,
)


class SqlCatalogRepository(CatalogRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_dealer(self, dealer_account_id: str) -> DealerAccount | None:
        row = self._session.get(DealerAccountRow, dealer_account_id)
        return dealer_to_domain(row) if row is not None else None

    def get_product(self, product_id: str) -> Product | None:
        stmt = (
            select(ProductRow)
            .where(ProductRow.id == product_id)
            .options(selectinload(ProductRow.reference_price))
        )
        row = self._session.execute(stmt).scalar_one_or_none()
        return product_to_domain(row) if row is not None else None

    def get_product_by_code(self, product_code: str) -> Product | None:
        stmt = (
            select(ProductRow)
            .where(ProductRow.product_code == product_code)
            .options(selectinload(ProductRow.reference_price))
        )
        row = self._session.execute(stmt).scalar_one_or_none()
        return product_to_domain(row) if row is not None else None

    def get_band_assignment(
        self, dealer_account_id: str, part_type: PartType
    ) -> BandAssignment | None:
        stmt = select(BandAssignmentRow).where(
            BandAssignmentRow.dealer_account_id == dealer_account_id,
            BandAssignmentRow.part_type == part_type.value,
        )
        row = self._session.execute(stmt).scalar_one_or_none()
        return band_assignment_to_domain(row) if row is not None else None

    def get_band_price(self, product_id: str, band_code: str) -> BandPrice | None:
        stmt = select(BandPriceRow).where(
            BandPriceRow.product_id == product_id,
            BandPriceRow.band_code == band_code,
        )
        row = self._session.execute(stmt).scalar_one_or_none()
        return band_price_to_domain(row) if row is not None else None
