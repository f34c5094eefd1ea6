"""CLI commands for the Cart aggregate."""

from __future__ import annotations

import click

from partsportal.application.add_cart_item import AddCartItemHandler
from partsportal.application.clear_cart import ClearCartHandler
from partsportal.application.get_cart import GetCartHandler
from partsportal.application.remove_cart_item import RemoveCartItemHandler
from partsportal.application.update_cart_item import UpdateCartItemHandler
from partsportal.domain.exceptions import DomainException
from partsportal.infrastructure.bootstrap import unit_of_work


@click.command("show")
@click.option("--user", "user_id", required=True, help="Dealer user ID.")
@click.option("--dealer", "dealer_id", required=True, help="Dealer account ID.")
def cart_show(user_id: str, dealer_id: str) -> None:
    """Show the cart with current prices."""
    handler = GetCartHandler(uow=unit_of_work())

    try:
        dto = handler.handle(user_id, dealer_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not dto.items:
        click.echo("Cart is empty.")
        return

    click.echo(f"  {'Line':<6} {'Code':<16} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*51}")
    for item in dto.items:
        if item.available:
            click.echo(
                f"  {item.id:<6} {item.product_code:<16} {item.quantity:>5} "
                f"{item.unit_price:>10} {item.line_total:>10}"
            )
        else:
            code = item.product_code or item.product_id
            click.echo(
                f"  {item.id:<6} {code:<16} {item.quantity:>5} "
                f"{'unavailable':>10} {item.reason}"
            )
    click.echo(f"  {'-'*51}")
    click.echo(f"  {'Subtotal':<29} {dto.subtotal:>21}")


@click.command("add")
@click.option("--user", "user_id", required=True, help="Dealer user ID.")
@click.option("--dealer", "dealer_id", required=True, help="Dealer account ID.")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--qty", default=1, type=int, show_default=True, help="Quantity to add.")
def cart_add(user_id: str, dealer_id: str, product_id: str, qty: int) -> None:
    """Add a product to the cart (merges with an existing line)."""
    handler = AddCartItemHandler(uow=unit_of_work())

    try:
        item = handler.handle(user_id, dealer_id, product_id, qty)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart line #{item.id}: {item.product_id} x {item.quantity}")


@click.command("update")
@click.option("--user", "user_id", required=True, help="Dealer user ID.")
@click.option("--item", "item_id", required=True, type=int, help="Cart line ID.")
@click.option("--qty", required=True, type=int, help="New quantity.")
def cart_update(user_id: str, item_id: int, qty: int) -> None:
    """Set the quantity of a cart line."""
    handler = UpdateCartItemHandler(uow=unit_of_work())

    try:
        item = handler.handle(user_id, item_id, qty)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart line #{item.id}: {item.product_id} x {item.quantity}")


@click.command("remove")
@click.option("--user", "user_id", required=True, help="Dealer user ID.")
@click.option("--item", "item_id", required=True, type=int, help="Cart line ID.")
def cart_remove(user_id: str, item_id: int) -> None:
    """Remove a line from the cart."""
    handler = RemoveCartItemHandler(uow=unit_of_work())

    try:
        handler.handle(user_id, item_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart line #{item_id} removed.")


@click.command("clear")
@click.option("--user", "user_id", required=True, help="Dealer user ID.")
def cart_clear(user_id: str) -> None:
    """Remove every line from the cart."""
    handler = ClearCartHandler(uow=unit_of_work())

    try:
        removed = handler.handle(user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart cleared ({removed} lines removed).")
