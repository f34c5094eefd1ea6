"""Domain service: Price Resolution.

Works out what a dealer pays for a product:

  1. product must exist and be active
  2. dealer's entitlement must cover the product's part type
  3. dealer must have a band for that part type
  4. product must have a price for that band
  5. the product's minimum price (if any) is applied as a floor
  6. total = unit price * qty

Resolution is read-only and keeps no state between calls, so it is safe to
run in parallel and gives identical results for identical inputs while the
underlying data is unchanged.  Nothing is cached.

There are two entry points with intentionally different failure handling:
``resolve_price`` raises on the first problem, ``resolve_prices`` records a
per-product failure and carries on with the rest.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from partsportal.domain.exceptions import (
    BandPriceNotFoundError,
    DealerNotFoundError,
    DomainException,
    EntitlementDeniedError,
    ProductNotFoundError,
)
from partsportal.domain.model.dealer import DealerAccount
from partsportal.domain.model.product import PartType, Product
from partsportal.domain.model.value_objects import CURRENCY, Money, Quantity
from partsportal.domain.repository.catalog_repository import CatalogRepository
from partsportal.domain.service.band_assignment import BandAssignmentResolver
from partsportal.domain.service.entitlement import can_view

logger = logging.getLogger("partsportal.pricing")


@dataclass(frozen=True)
class PriceResult:
    """Outcome of pricing one product for one dealer.

    Unavailable results (bulk path only) have ``available=False``, no prices,
    and say why in ``error_code`` / ``error_message``.
    """

    product_code: str
    qty: int
    available: bool
    product_id: str | None = None
    description: str | None = None
    part_type: PartType | None = None
    unit_price: Money | None = None
    total_price: Money | None = None
    currency: str = CURRENCY
    band_code: str | None = None
    minimum_price_applied: bool = False
    error_code: str | None = None
    error_message: str | None = None

    @staticmethod
    def unavailable(
        product_code: str,
        qty: int,
        error: DomainException,
        product: Product | None = None,
    ) -> PriceResult:
        return PriceResult(
            product_code=product_code,
            qty=qty,
            available=False,
            product_id=product.id if product else None,
            description=product.description if product else None,
            part_type=product.part_type if product else None,
            error_code=error.code,
            error_message=str(error),
        )


class _ProductPricingError(Exception):
    """Carries the product (when known) alongside a per-item failure."""

    def __init__(self, error: DomainException, product: Product | None) -> None:
        super().__init__(str(error))
        self.error = error
        self.product = product


class PriceResolutionEngine:

    def __init__(self, catalog: CatalogRepository) -> None:
        self._catalog = catalog
        self._bands = BandAssignmentResolver(catalog)

    # --- Public API -----------------------------------------------------------

    def resolve_price(
        self,
        dealer_account_id: str,
        product_code: str,
        qty: int = 1,
        as_of: date | None = None,
    ) -> PriceResult:
        """Price a single product.  Any failure is raised.

        ``as_of`` is accepted for time-windowed price lists; it does not
        change the outcome yet.
        """
        quantity = Quantity(qty)
        dealer = self._load_dealer(dealer_account_id)
        try:
            return self._resolve(dealer, product_code, quantity, as_of)
        except _ProductPricingError as exc:
            raise exc.error from None

    def resolve_prices(
        self,
        dealer_account_id: str,
        product_codes: list[str],
        as_of: date | None = None,
    ) -> dict[str, PriceResult]:
        """Price many products (qty 1 each), isolating per-product failures.

        Dealer-level problems (unknown or inactive dealer) still raise,
        because they would fail every entry the same way.
        """
        dealer = self._load_dealer(dealer_account_id)
        quantity = Quantity(1)

        results: dict[str, PriceResult] = {}
        for code in product_codes:
            if code in results:
                continue
            try:
                results[code] = self._resolve(dealer, code, quantity, as_of)
            except _ProductPricingError as exc:
                logger.warning(
                    "Price unavailable for %s (dealer %s): %s",
                    code, dealer.id, exc.error.code,
                )
                results[code] = PriceResult.unavailable(
                    code, quantity.value, exc.error, exc.product
                )
        return results

    # --- Internal helpers -----------------------------------------------------

    def _load_dealer(self, dealer_account_id: str) -> DealerAccount:
        dealer = self._catalog.get_dealer(dealer_account_id)
        if dealer is None:
            raise DealerNotFoundError(f"Dealer account not found: {dealer_account_id}")
        dealer.ensure_active()
        return dealer

    def _resolve(
        self,
        dealer: DealerAccount,
        product_code: str,
        quantity: Quantity,
        as_of: date | None,
    ) -> PriceResult:
        product = self._catalog.get_product_by_code(product_code)
        try:
            if product is None:
                raise ProductNotFoundError(f"Product not found: {product_code}")
            product.ensure_active()

            if not can_view(dealer, product.part_type):
                raise EntitlementDeniedError(
                    f"Product {product_code} is not available to dealer "
                    f"{dealer.account_no}"
                )

            band_code = self._bands.resolve_band(dealer.id, product.part_type)

            band_price = self._catalog.get_band_price(product.id, band_code)
            if band_price is None:
                raise BandPriceNotFoundError(
                    f"No price for product {product_code} at band {band_code}"
                )
        except DomainException as exc:
            raise _ProductPricingError(exc, product) from exc

        # Floor applies after the band lookup, never before
        unit_price = band_price.price
        minimum_applied = False
        floor = product.minimum_price
        if floor is not None and unit_price < floor:
            unit_price = floor
            minimum_applied = True

        logger.debug(
            "Resolved %s for dealer %s: band=%s unit=%s min_applied=%s as_of=%s",
            product_code, dealer.id, band_code, unit_price, minimum_applied, as_of,
        )

        return PriceResult(
            product_code=product.product_code,
            qty=quantity.value,
            available=True,
            product_id=product.id,
            description=product.description,
            part_type=product.part_type,
            unit_price=unit_price,
            total_price=unit_price * quantity.value,
            currency=unit_price.currency,
            band_code=band_code,
            minimum_price_applied=minimum_applied,
        )
