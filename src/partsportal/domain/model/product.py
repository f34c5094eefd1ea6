"""Product catalog entries and their price points.

Products live independently of carts and orders.  Prices change, products
are deactivated; none of that may leak into an order once it is placed,
because order lines capture a snapshot at checkout time.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from partsportal.domain.exceptions import ProductInactiveError
from partsportal.domain.model.value_objects import Money


class PartType(Enum):
    GENUINE = "GENUINE"
    AFTERMARKET = "AFTERMARKET"
    BRANDED = "BRANDED"


@dataclass(frozen=True)
class ReferencePrice:
    """Reference pricing for a product; only the floor matters to the core."""

    minimum_price: Money | None = None


@dataclass(frozen=True)
class BandPrice:
    """Absolute unit price of a product for one band."""

    product_id: str
    band_code: str
    price: Money


@dataclass(frozen=True)
class Product:
    """A catalog item, identified for business purposes by ``product_code``."""

    id: str
    product_code: str
    description: str
    part_type: PartType
    is_active: bool = True
    reference_price: ReferencePrice | None = None

    @property
    def minimum_price(self) -> Money | None:
        if self.reference_price is None:
            return None
        return self.reference_price.minimum_price

    def ensure_active(self) -> None:
        if not self.is_active:
            raise ProductInactiveError(f"Product is inactive: {self.product_code}")
