"""Dealer accounts and their price band assignments.

Accounts are provisioned and edited outside the core; here they are
read-only inputs to entitlement and band resolution.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from partsportal.domain.exceptions import DealerInactiveError
from partsportal.domain.model.product import PartType


class DealerStatus(Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    SUSPENDED = "SUSPENDED"


class Entitlement(Enum):
    GENUINE_ONLY = "GENUINE_ONLY"
    AFTERMARKET_ONLY = "AFTERMARKET_ONLY"
    SHOW_ALL = "SHOW_ALL"


@dataclass(frozen=True)
class DealerAccount:
    """A trading account.

    ``entitlement`` is ``None`` when the stored value is not one the core
    recognises; entitlement checks treat that as "deny everything".
    """

    id: str
    account_no: str
    name: str
    status: DealerStatus
    entitlement: Entitlement | None

    @property
    def is_active(self) -> bool:
        return self.status == DealerStatus.ACTIVE

    def ensure_active(self) -> None:
        """Raise DealerInactiveError unless the account may trade."""
        if not self.is_active:
            raise DealerInactiveError(
                f"Dealer account {self.account_no} is {self.status.value}"
            )


@dataclass(frozen=True)
class BandAssignment:
    """(dealer, part type) -> band code.  At most one per pair."""

    dealer_account_id: str
    part_type: PartType
    band_code: str
