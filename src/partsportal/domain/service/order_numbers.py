"""Port for order number generation.

Implementations must produce globally unique tokens; the storage layer
backs that up with a unique constraint.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class OrderNumberGenerator(ABC):

    @abstractmethod
    def next_order_no(self) -> str:
        """Return a new, never-before-issued order number."""
