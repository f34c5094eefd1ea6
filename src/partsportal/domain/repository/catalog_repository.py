"""Abstract read access to the catalog and dealer accounts.

Defined in the domain layer so the domain never depends on
infrastructure.  The catalog is maintained elsewhere (admin imports);
the core only reads it, and expects strongly consistent reads.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from partsportal.domain.model.dealer import BandAssignment, DealerAccount
from partsportal.domain.model.product import BandPrice, PartType, Product


class CatalogRepository(ABC):

    @abstractmethod
    def get_dealer(self, dealer_account_id: str) -> DealerAccount | None:
        """Return a dealer account by ID, or None."""

    @abstractmethod
    def get_product(self, product_id: str) -> Product | None:
        """Return a product by its surrogate ID, or None."""

    @abstractmethod
    def get_product_by_code(self, product_code: str) -> Product | None:
        """Return a product by its business key, or None."""

    @abstractmethod
    def get_band_assignment(
        self, dealer_account_id: str, part_type: PartType
    ) -> BandAssignment | None:
        """Return the dealer's band for a part type, or None."""

    @abstractmethod
    def get_band_price(self, product_id: str, band_code: str) -> BandPrice | None:
        """Return the product's price point for a band, or None."""
