"""Application services: price lookups for a dealer.

``ResolvePriceHandler`` is the single-item path (errors propagate);
``ResolvePricesHandler`` is the bulk path used by search results and
basket refreshes (per-product failures are reported, not raised).
"""

from __future__ import annotations

from datetime import date

from partsportal.application.dto import PriceDTO
from partsportal.domain.repository.unit_of_work import UnitOfWork
from partsportal.domain.service.pricing import PriceResolutionEngine


class ResolvePriceHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        dealer_account_id: str,
        product_code: str,
        qty: int = 1,
        as_of: date | None = None,
    ) -> PriceDTO:
        with self._uow:
            engine = PriceResolutionEngine(self._uow.catalog)
            result = engine.resolve_price(dealer_account_id, product_code, qty, as_of)
        return PriceDTO.from_result(result)


class ResolvePricesHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        dealer_account_id: str,
        product_codes: list[str],
        as_of: date | None = None,
    ) -> list[PriceDTO]:
        """Return one PriceDTO per distinct product code, in request order."""
        with self._uow:
            engine = PriceResolutionEngine(self._uow.catalog)
            results = engine.resolve_prices(dealer_account_id, product_codes, as_of)
        return [PriceDTO.from_result(result) for result in results.values()]
