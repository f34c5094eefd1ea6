"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from partsportal.application.dto import OrderDTO
from partsportal.application.list_orders import ListOrdersHandler
from partsportal.application.place_order import PlaceOrderHandler
from partsportal.application.show_order import ShowOrderHandler
from partsportal.domain.exceptions import DomainException
from partsportal.infrastructure.bootstrap import order_number_generator, unit_of_work


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.order_no}  (status={dto.status})")
    click.echo(f"Dealer:   {dto.dealer_account_id}  User: {dto.dealer_user_id}")
    click.echo(f"Created:  {dto.created_at}")
    if dto.po_ref:
        click.echo(f"PO ref:   {dto.po_ref}")
    if dto.notes:
        click.echo(f"Notes:    {dto.notes}")
    click.echo()
    click.echo(f"  {'Code':<16} {'Band':<5} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*50}")
    for line in dto.lines:
        marker = "*" if line.min_price_applied else ""
        click.echo(
            f"  {line.product_code:<16} {line.band_code:<5} {line.quantity:>5} "
            f"{line.unit_price:>10} {line.line_total:>10}{marker}"
        )
    click.echo(f"  {'-'*50}")
    click.echo(f"  {'Order Total':<28} {dto.total:>21}")
    if any(line.min_price_applied for line in dto.lines):
        click.echo("  * minimum price applied")


@click.command("place")
@click.option("--user", "user_id", required=True, help="Dealer user ID.")
@click.option("--dealer", "dealer_id", required=True, help="Dealer account ID.")
@click.option("--po-ref", default=None, help="Purchase order reference.")
@click.option("--notes", default=None, help="Order notes.")
def order_place(user_id: str, dealer_id: str, po_ref: str | None, notes: str | None) -> None:
    """Check out the user's cart as a new order."""
    handler = PlaceOrderHandler(
        uow=unit_of_work(),
        order_numbers=order_number_generator(),
    )

    try:
        dto = handler.handle(user_id, dealer_id, po_ref=po_ref, notes=notes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.order_no} placed.")
    click.echo()
    _display_order(dto)


@click.command("show")
@click.option("--dealer", "dealer_id", required=True, help="Dealer account ID.")
@click.option("--order-no", required=True, help="Order number to display.")
def order_show(dealer_id: str, order_no: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(uow=unit_of_work())

    try:
        dto = handler.handle(dealer_id, order_no)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
@click.option("--dealer", "dealer_id", required=True, help="Dealer account ID.")
def order_list(dealer_id: str) -> None:
    """List a dealer's orders, newest first."""
    handler = ListOrdersHandler(uow=unit_of_work())

    try:
        dtos = handler.handle(dealer_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not dtos:
        click.echo("No orders found.")
        return

    click.echo(f"{'Order':<34} {'Status':<10} {'Lines':>5} {'Total':>12}  Created")
    click.echo("-" * 80)
    for dto in dtos:
        click.echo(
            f"{dto.order_no:<34} {dto.status:<10} {len(dto.lines):>5} "
            f"{dto.total:>12}  {dto.created_at}"
        )
