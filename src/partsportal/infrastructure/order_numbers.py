"""Default order number generator: UTC timestamp plus a random suffix."""

from __future__ import annotations

import secrets
from datetime import datetime, timezone

from partsportal.domain.service.order_numbers import OrderNumberGenerator


class TimestampOrderNumberGenerator(OrderNumberGenerator):
    """Yields ``ORD-YYYYMMDD-HHMMSSffffff-XXXX``.

    Numbers sort by creation time; the suffix separates orders placed in the
    same microsecond.  The unique constraint on ``order_headers.order_no``
    is the final guarantee.
    """

    prefix = "ORD"

    def next_order_no(self) -> str:
        now = datetime.now(timezone.utc)
        suffix = secrets.token_hex(2).upper()
        return f"{self.prefix}-{now:%Y%m%d}-{now:%H%M%S%f}-{suffix}"
