"""Domain service: Band Assignment resolution."""

from __future__ import annotations

from partsportal.domain.exceptions import BandAssignmentNotFoundError
from partsportal.domain.model.product import PartType
from partsportal.domain.repository.catalog_repository import CatalogRepository


class BandAssignmentResolver:

    def __init__(self, catalog: CatalogRepository) -> None:
        self._catalog = catalog

    def resolve_band(self, dealer_account_id: str, part_type: PartType) -> str:
        """Return the band code assigned to the dealer for ``part_type``.

        Raises BandAssignmentNotFoundError when there is none; there is no
        default band.
        """
        assignment = self._catalog.get_band_assignment(dealer_account_id, part_type)
        if assignment is None:
            raise BandAssignmentNotFoundError(
                f"Dealer {dealer_account_id} has no band assignment "
                f"for part type {part_type.value}"
            )
        return assignment.band_code
