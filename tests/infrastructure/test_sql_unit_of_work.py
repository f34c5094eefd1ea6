"""Tests for the SQLAlchemy repositories and unit of work."""

import threading

import pytest

from partsportal.application.add_cart_item import AddCartItemHandler
from partsportal.application.clear_cart import ClearCartHandler
from partsportal.application.get_cart import GetCartHandler
from partsportal.application.place_order import PlaceOrderHandler
from partsportal.application.remove_cart_item import RemoveCartItemHandler
from partsportal.application.show_order import ShowOrderHandler
from partsportal.domain.exceptions import (
    CartItemNotFoundError,
    EmptyCartError,
    EntitlementDeniedError,
    TransactionFailureError,
)
from partsportal.domain.model.order import OrderStatus
from partsportal.domain.model.product import PartType
from partsportal.domain.model.value_objects import Money
from partsportal.domain.service.order_numbers import OrderNumberGenerator
from partsportal.domain.service.pricing import PriceResolutionEngine
from partsportal.infrastructure.order_numbers import TimestampOrderNumberGenerator
from partsportal.infrastructure.persistence.models import (
    BandPriceRow,
    DealerAccountRow,
    OrderHeaderRow,
)
from partsportal.infrastructure.persistence.sql_unit_of_work import SqlAlchemyUnitOfWork


class FixedOrderNumber(OrderNumberGenerator):

    def next_order_no(self) -> str:
        return "ORD-FIXED"


def _cart_lines(uow, user="U1"):
    with uow:
        cart = uow.carts.get_by_user(user)
    if cart is None:
        return []
    return [(item.product_id, item.quantity.value) for item in cart.items]


class TestCatalogRepository:

    def test_product_with_floor(self, uow):
        with uow:
            product = uow.catalog.get_product_by_code("Q-200")
        assert product.id == "q"
        assert product.part_type == PartType.GENUINE
        assert product.minimum_price == Money.of("55.00")

    def test_product_without_reference_price(self, uow):
        with uow:
            assert uow.catalog.get_product("p").minimum_price is None

    def test_band_lookups(self, uow):
        with uow:
            assignment = uow.catalog.get_band_assignment("D1", PartType.GENUINE)
            missing = uow.catalog.get_band_assignment("D1", PartType.BRANDED)
            price = uow.catalog.get_band_price("p", "2")
        assert assignment.band_code == "2"
        assert missing is None
        assert price.price == Money.of("100.00")

    def test_unknown_entitlement_fails_closed(self, seeded):
        with seeded() as session:
            session.add(DealerAccountRow(
                id="D7", account_no="ACC-D7", name="Odd", status="ACTIVE",
                entitlement="VIP",
            ))
            session.commit()

        uow = SqlAlchemyUnitOfWork(seeded)
        with uow:
            dealer = uow.catalog.get_dealer("D7")
            assert dealer.entitlement is None
            with pytest.raises(EntitlementDeniedError):
                PriceResolutionEngine(uow.catalog).resolve_price("D7", "P-100")


class TestCartRepository:

    def test_get_or_create_is_idempotent(self, uow):
        with uow:
            first = uow.carts.get_or_create("U1", "D1")
            second = uow.carts.get_or_create("U1", "D1")
            uow.commit()
        assert first.id == second.id

    def test_add_merges_quantities(self, uow):
        AddCartItemHandler(uow).handle("U1", "D1", "p", 3)
        AddCartItemHandler(uow).handle("U1", "D1", "p", 3)
        assert _cart_lines(uow) == [("p", 6)]

    def test_uncommitted_changes_are_discarded(self, uow):
        with uow:
            cart = uow.carts.get_or_create("U1", "D1")
            uow.carts.add_item(cart.id, "p", 2)
        assert _cart_lines(uow) == []

    def test_update_and_remove(self, uow):
        item = AddCartItemHandler(uow).handle("U1", "D1", "p", 1)
        with uow:
            updated = uow.carts.update_item(item.id, 9)
            missing = uow.carts.update_item(9999, 1)
            uow.commit()
        assert updated.quantity.value == 9
        assert missing is None

        with uow:
            assert uow.carts.remove_item(item.id) is True
            assert uow.carts.remove_item(item.id) is False
            uow.commit()
        assert _cart_lines(uow) == []

    def test_live_cart_view(self, uow):
        AddCartItemHandler(uow).handle("U1", "D1", "q", 2)
        dto = GetCartHandler(uow).handle("U1", "D1")
        assert dto.items[0].unit_price == "£55.00"
        assert dto.subtotal == "£110.00"


class TestCartConcurrency:

    def test_parallel_adds_lose_no_updates(self, uow, seeded):
        AddCartItemHandler(uow).handle("U1", "D1", "p", 1)

        workers = 8
        barrier = threading.Barrier(workers)
        errors: list[Exception] = []

        def add_one() -> None:
            handler = AddCartItemHandler(SqlAlchemyUnitOfWork(seeded))
            barrier.wait()
            try:
                handler.handle("U1", "D1", "p", 1)
            except Exception as exc:
                errors.append(exc)

        threads = [threading.Thread(target=add_one) for _ in range(workers)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert _cart_lines(uow) == [("p", workers + 1)]


class TestCartOwnershipAndClear:

    def test_foreign_line_untouched(self, uow):
        mine = AddCartItemHandler(uow).handle("U1", "D1", "p", 3)
        AddCartItemHandler(uow).handle("U2", "D1", "q", 1)

        with pytest.raises(CartItemNotFoundError):
            RemoveCartItemHandler(uow).handle("U2", mine.id)
        assert _cart_lines(uow) == [("p", 3)]

    def test_clear_keeps_cart_shell(self, uow):
        AddCartItemHandler(uow).handle("U1", "D1", "p", 3)
        AddCartItemHandler(uow).handle("U1", "D1", "q", 1)
        with uow:
            cart_id = uow.carts.get_by_user("U1").id

        assert ClearCartHandler(uow).handle("U1") == 2

        with uow:
            cart = uow.carts.get_by_user("U1")
        assert cart.id == cart_id
        assert cart.is_empty


class TestCheckout:

    def test_order_persisted_and_cart_cleared(self, uow):
        add = AddCartItemHandler(uow)
        add.handle("U1", "D1", "p", 3)
        add.handle("U1", "D1", "q", 1)

        dto = PlaceOrderHandler(uow, TimestampOrderNumberGenerator()).handle(
            "U1", "D1", po_ref="PO-1"
        )

        assert dto.total == "£355.00"
        assert _cart_lines(uow) == []
        with uow:
            order = uow.orders.get_by_order_no(dto.order_no)
        assert order.status == OrderStatus.SUSPENDED
        assert [l.line_no for l in order.lines] == [1, 2]
        assert order.lines[1].min_price_applied is True
        assert order.po_ref == "PO-1"

    def test_snapshot_survives_price_change(self, uow, seeded):
        AddCartItemHandler(uow).handle("U1", "D1", "p", 1)
        dto = PlaceOrderHandler(uow, TimestampOrderNumberGenerator()).handle("U1", "D1")

        with seeded() as session:
            row = session.query(BandPriceRow).filter_by(product_id="p", band_code="2").one()
            row.price = 1
            session.commit()

        shown = ShowOrderHandler(uow).handle("D1", dto.order_no)
        assert shown.lines[0].unit_price == "£100.00"

    def test_second_checkout_finds_empty_cart(self, uow):
        AddCartItemHandler(uow).handle("U1", "D1", "p", 1)
        handler = PlaceOrderHandler(uow, TimestampOrderNumberGenerator())
        handler.handle("U1", "D1")
        with pytest.raises(EmptyCartError):
            handler.handle("U1", "D1")

    def test_storage_failure_rolls_back(self, uow, seeded):
        handler = PlaceOrderHandler(uow, FixedOrderNumber())
        AddCartItemHandler(uow).handle("U1", "D1", "p", 1)
        handler.handle("U1", "D1")

        AddCartItemHandler(uow).handle("U1", "D1", "q", 2)
        with pytest.raises(TransactionFailureError):
            handler.handle("U1", "D1")

        assert _cart_lines(uow) == [("q", 2)]
        with seeded() as session:
            assert session.query(OrderHeaderRow).count() == 1
