import logging

import click

from partsportal.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_show,
    cart_update,
)
from partsportal.infrastructure.cli.db_commands import db_init
from partsportal.infrastructure.cli.order_commands import (
    order_list,
    order_place,
    order_show,
)
from partsportal.infrastructure.cli.price_commands import price_list, price_quote


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output.")
def cli(verbose: bool) -> None:
    """Parts Portal: dealer pricing, carts and orders"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def db() -> None:
    """Manage the database."""


@cli.group()
def price() -> None:
    """Look up dealer prices."""


@cli.group()
def cart() -> None:
    """Manage a dealer user's cart."""


@cli.group()
def order() -> None:
    """Place and review orders."""


# Register subcommands
db.add_command(db_init)
price.add_command(price_list)
price.add_command(price_quote)
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cart.add_command(cart_update)
order.add_command(order_list)
order.add_command(order_place)
order.add_command(order_show)
