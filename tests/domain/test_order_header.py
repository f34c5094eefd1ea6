"""Unit tests for the OrderHeader aggregate."""

import pytest

from partsportal.domain.exceptions import ValidationError
from partsportal.domain.model.order import OrderHeader, OrderLine, OrderStatus
from partsportal.domain.model.product import PartType
from partsportal.domain.model.value_objects import Money, Quantity


def _make_line(line_no: int = 1, qty: int = 1, price: str = "15.00") -> OrderLine:
    """Helper to build a valid line snapshot."""
    return OrderLine(
        line_no=line_no,
        product_id=f"p{line_no}",
        product_code_snapshot=f"CODE-{line_no}",
        description_snapshot="Widget",
        part_type_snapshot=PartType.GENUINE,
        quantity=Quantity(qty),
        unit_price_snapshot=Money.of(price),
        band_code_snapshot="2",
        min_price_applied=False,
    )


class TestOrderCreation:

    def test_new_order_is_suspended(self):
        order = OrderHeader.create("ORD-1", "D1", "U1", [_make_line()])
        assert order.status == OrderStatus.SUSPENDED
        assert order.id is None  # assigned by repository

    def test_subtotal_is_sum_of_lines_and_total_equals_subtotal(self):
        order = OrderHeader.create(
            "ORD-1", "D1", "U1",
            [_make_line(1, qty=3, price="100.00"), _make_line(2, qty=2, price="2.50")],
        )
        assert order.subtotal == Money.of("305.00")
        assert order.total == order.subtotal
        assert order.line_count == 2

    def test_no_lines_rejected(self):
        with pytest.raises(ValidationError, match="at least one line"):
            OrderHeader.create("ORD-1", "D1", "U1", [])

    def test_order_number_required(self):
        with pytest.raises(ValidationError, match="Order number"):
            OrderHeader.create("", "D1", "U1", [_make_line()])

    def test_blank_po_ref_and_notes_become_none(self):
        order = OrderHeader.create("ORD-1", "D1", "U1", [_make_line()], po_ref="  ", notes="")
        assert order.po_ref is None
        assert order.notes is None

    def test_po_ref_is_trimmed(self):
        order = OrderHeader.create("ORD-1", "D1", "U1", [_make_line()], po_ref=" PO-77 ")
        assert order.po_ref == "PO-77"


class TestOrderImmutability:

    def test_header_cannot_be_mutated(self):
        order = OrderHeader.create("ORD-1", "D1", "U1", [_make_line()])
        with pytest.raises(AttributeError):
            order.status = OrderStatus.SHIPPED

    def test_line_cannot_be_mutated(self):
        line = _make_line()
        with pytest.raises(AttributeError):
            line.unit_price_snapshot = Money.of("1.00")

    def test_lines_are_a_tuple(self):
        order = OrderHeader.create("ORD-1", "D1", "U1", [_make_line()])
        assert isinstance(order.lines, tuple)

    def test_line_total(self):
        assert _make_line(qty=3, price="15.00").line_total == Money.of("45.00")
