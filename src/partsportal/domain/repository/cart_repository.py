"""Abstract repository for the Cart aggregate.

Implementations must make ``get_or_create`` and ``add_item`` atomic at the
storage layer (a single conditional write), never a read-then-write pair.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from partsportal.domain.model.cart import Cart, CartItem


class CartRepository(ABC):

    @abstractmethod
    def get_or_create(self, dealer_user_id: str, dealer_account_id: str) -> Cart:
        """Return the user's cart, creating an empty one if none exists."""

    @abstractmethod
    def get_by_user(self, dealer_user_id: str) -> Cart | None:
        """Return the user's cart with its items, or None."""

    @abstractmethod
    def get_for_checkout(self, dealer_user_id: str) -> Cart | None:
        """Like ``get_by_user`` but locks the cart for the current unit of work."""

    @abstractmethod
    def get_item(self, cart_item_id: int) -> CartItem | None:
        """Return a single cart line, or None."""

    @abstractmethod
    def add_item(self, cart_id: int, product_id: str, qty: int) -> CartItem:
        """Insert a line or increment the existing line for the product."""

    @abstractmethod
    def update_item(self, cart_item_id: int, qty: int) -> CartItem | None:
        """Set a line's quantity.  Returns None if the line does not exist."""

    @abstractmethod
    def remove_item(self, cart_item_id: int) -> bool:
        """Delete a line.  Returns False if the line did not exist."""

    @abstractmethod
    def clear(self, cart_id: int) -> int:
        """Delete every line of a cart and return how many were deleted."""
