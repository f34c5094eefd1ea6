"""Cart aggregate: a dealer user's working basket.

A cart belongs to one dealer *user* (not the account) and holds product
references and quantities only.  It never stores prices: they are resolved
live every time the cart is displayed and again at checkout.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from partsportal.domain.model.value_objects import Quantity


@dataclass(frozen=True)
class CartItem:
    id: int
    cart_id: int
    product_id: str
    quantity: Quantity


@dataclass(frozen=True)
class Cart:
    """Snapshot of a cart as loaded from storage.

    Mutations go through the CartRepository so that the storage layer can
    make them atomic (the add-to-cart upsert in particular).
    """

    id: int
    dealer_user_id: str
    dealer_account_id: str
    items: list[CartItem] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity.value for item in self.items)
