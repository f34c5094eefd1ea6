"""SQLAlchemy-backed implementation of CartRepository.

Cart creation and add-to-cart are single ``INSERT .. ON CONFLICT``
statements, so concurrent requests for the same user or the same product
cannot lose updates or create duplicates.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import delete, select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session, selectinload

from partsportal.domain.model.cart import Cart, CartItem
from partsportal.domain.repository.cart_repository import CartRepository
from partsportal.infrastructure.persistence.mappers import (
    cart_item_to_domain,
    cart_to_domain,
)
from partsportal.infrastructure.persistence.models import CartItemRow, CartRow

_carts = CartRow.__table__
_items = CartItemRow.__table__


class SqlCartRepository(CartRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- CartRepository interface ---------------------------------------------

    def get_or_create(self, dealer_user_id: str, dealer_account_id: str) -> Cart:
        now = datetime.now(timezone.utc)
        stmt = (
            self._insert()(_carts)
            .values(
                dealer_user_id=dealer_user_id,
                dealer_account_id=dealer_account_id,
                created_at=now,
                updated_at=now,
            )
            .on_conflict_do_nothing(index_elements=["dealer_user_id"])
        )
        self._session.execute(stmt)
        return cart_to_domain(self._load(dealer_user_id))

    def get_by_user(self, dealer_user_id: str) -> Cart | None:
        row = self._load(dealer_user_id)
        return cart_to_domain(row) if row is not None else None

    def get_for_checkout(self, dealer_user_id: str) -> Cart | None:
        row = self._load(dealer_user_id, for_update=True)
        return cart_to_domain(row) if row is not None else None

    def get_item(self, cart_item_id: int) -> CartItem | None:
        row = self._load_item(_items.c.id == cart_item_id)
        return cart_item_to_domain(row) if row is not None else None

    def add_item(self, cart_id: int, product_id: str, qty: int) -> CartItem:
        stmt = self._insert()(_items).values(
            cart_id=cart_id, product_id=product_id, qty=qty
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["cart_id", "product_id"],
            set_={"qty": _items.c.qty + stmt.excluded.qty},
        )
        self._session.execute(stmt)
        self._touch(cart_id)
        row = self._load_item(
            (_items.c.cart_id == cart_id) & (_items.c.product_id == product_id)
        )
        return cart_item_to_domain(row)

    def update_item(self, cart_item_id: int, qty: int) -> CartItem | None:
        result = self._session.execute(
            update(_items).where(_items.c.id == cart_item_id).values(qty=qty)
        )
        if result.rowcount == 0:
            return None
        row = self._load_item(_items.c.id == cart_item_id)
        self._touch(row.cart_id)
        return cart_item_to_domain(row)

    def remove_item(self, cart_item_id: int) -> bool:
        result = self._session.execute(
            delete(_items).where(_items.c.id == cart_item_id)
        )
        return result.rowcount > 0

    def clear(self, cart_id: int) -> int:
        result = self._session.execute(delete(_items).where(_items.c.cart_id == cart_id))
        self._touch(cart_id)
        return result.rowcount

    # --- Internal helpers -----------------------------------------------------

    def _insert(self):
        """Return the dialect's insert() construct supporting ON CONFLICT."""
        dialect = self._session.get_bind().dialect.name
        if dialect == "postgresql":
            return postgresql.insert
        if dialect == "sqlite":
            return sqlite.insert
        raise NotImplementedError(f"No atomic upsert for database dialect '{dialect}'")

    def _load(self, dealer_user_id: str, for_update: bool = False) -> CartRow | None:
        stmt = (
            select(CartRow)
            .where(CartRow.dealer_user_id == dealer_user_id)
            .options(selectinload(CartRow.items))
            .execution_options(populate_existing=True)
        )
        if for_update:
            stmt = stmt.with_for_update()
        return self._session.execute(stmt).scalar_one_or_none()

    def _load_item(self, criteria) -> CartItemRow | None:
        stmt = (
            select(CartItemRow)
            .where(criteria)
            .execution_options(populate_existing=True)
        )
        return self._session.execute(stmt).scalar_one_or_none()

    def _touch(self, cart_id: int) -> None:
        self._session.execute(
            update(_carts)
            .where(_carts.c.id == cart_id)
            .values(updated_at=datetime.now(timezone.utc))
        )
