"""Entitlement rules: which part classifications a dealer may see and buy."""

from __future__ import annotations

from partsportal.domain.model.dealer import DealerAccount, Entitlement
from partsportal.domain.model.product import PartType


def can_view(dealer: DealerAccount, part_type: PartType) -> bool:
    """Return True if the dealer's entitlement covers ``part_type``.

    - GENUINE_ONLY      -> GENUINE only
    - AFTERMARKET_ONLY  -> everything except GENUINE
    - SHOW_ALL          -> everything
    - anything else     -> nothing (fail closed)
    """
    entitlement = dealer.entitlement
    if entitlement == Entitlement.GENUINE_ONLY:
        return part_type == PartType.GENUINE
    if entitlement == Entitlement.AFTERMARKET_ONLY:
        return part_type in (PartType.AFTERMARKET, PartType.BRANDED)
    if entitlement == Entitlement.SHOW_ALL:
        return isinstance(part_type, PartType)
    return False
