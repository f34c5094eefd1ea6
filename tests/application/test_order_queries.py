"""Integration tests for order history and price lookup use cases."""

import pytest

from partsportal.application.add_cart_item import AddCartItemHandler
from partsportal.application.list_orders import ListOrdersHandler
from partsportal.application.place_order import PlaceOrderHandler
from partsportal.application.resolve_prices import ResolvePriceHandler, ResolvePricesHandler
from partsportal.application.show_order import ShowOrderHandler
from partsportal.domain.exceptions import EntitlementDeniedError, OrderNotFoundError
from partsportal.domain.model.dealer import Entitlement
from partsportal.domain.model.product import PartType
from tests.fakes import FakeUnitOfWork, SequentialOrderNumberGenerator


def _setup() -> FakeUnitOfWork:
    uow = FakeUnitOfWork()
    uow.catalog.add_dealer("D1", bands={PartType.GENUINE: "2"})
    uow.catalog.add_dealer("D2", entitlement=Entitlement.AFTERMARKET_ONLY,
                           bands={PartType.GENUINE: "2"})
    uow.catalog.add_product("p", "P-100", PartType.GENUINE, prices={"2": "100.00"})
    return uow


def _place(uow: FakeUnitOfWork, numbers: SequentialOrderNumberGenerator, qty: int) -> str:
    AddCartItemHandler(uow).handle("U1", "D1", "p", qty)
    return PlaceOrderHandler(uow, numbers).handle("U1", "D1").order_no


class TestShowOrder:

    def test_show_own_order(self):
        uow = _setup()
        order_no = _place(uow, SequentialOrderNumberGenerator(), 2)
        dto = ShowOrderHandler(uow).handle("D1", order_no)
        assert dto.order_no == order_no
        assert dto.total == "£200.00"

    def test_other_dealers_order_is_not_found(self):
        uow = _setup()
        order_no = _place(uow, SequentialOrderNumberGenerator(), 2)
        with pytest.raises(OrderNotFoundError):
            ShowOrderHandler(uow).handle("D2", order_no)

    def test_unknown_order(self):
        uow = _setup()
        with pytest.raises(OrderNotFoundError, match="ORD-NOPE"):
            ShowOrderHandler(uow).handle("D1", "ORD-NOPE")


class TestListOrders:

    def test_newest_first(self):
        uow = _setup()
        numbers = SequentialOrderNumberGenerator()
        first = _place(uow, numbers, 1)
        second = _place(uow, numbers, 2)

        dtos = ListOrdersHandler(uow).handle("D1")
        assert [d.order_no for d in dtos] == [second, first]

    def test_no_orders(self):
        assert ListOrdersHandler(_setup()).handle("D2") == []


class TestPriceLookupHandlers:

    def test_single_lookup(self):
        dto = ResolvePriceHandler(_setup()).handle("D1", "P-100", qty=2)
        assert dto.unit_price == "£100.00"
        assert dto.total_price == "£200.00"
        assert dto.part_type == "GENUINE"
        assert dto.available is True

    def test_single_lookup_raises(self):
        with pytest.raises(EntitlementDeniedError):
            ResolvePriceHandler(_setup()).handle("D2", "P-100")

    def test_bulk_lookup_reports_reasons(self):
        dtos = ResolvePricesHandler(_setup()).handle("D2", ["P-100", "NOPE"])
        assert [(d.product_code, d.reason) for d in dtos] == [
            ("P-100", "ENTITLEMENT_DENIED"),
            ("NOPE", "PRODUCT_NOT_FOUND"),
        ]
        assert all(d.unit_price is None for d in dtos)
