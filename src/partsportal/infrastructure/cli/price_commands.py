"""CLI commands for price lookups."""

from __future__ import annotations

from datetime import datetime

import click

from partsportal.application.resolve_prices import (
    ResolvePriceHandler,
    ResolvePricesHandler,
)
from partsportal.domain.exceptions import DomainException
from partsportal.infrastructure.bootstrap import unit_of_work


def _parse_date(raw: str | None):
    if raw is None:
        return None
    try:
        return datetime.strptime(raw, "%Y-%m-%d").date()
    except ValueError:
        raise click.BadParameter(f"Invalid date '{raw}'. Expected YYYY-MM-DD.")


@click.command("quote")
@click.option("--dealer", "dealer_id", required=True, help="Dealer account ID.")
@click.option("--code", "product_code", required=True, help="Product code.")
@click.option("--qty", default=1, type=int, show_default=True, help="Quantity.")
@click.option("--as-of", "as_of", default=None, help="Pricing date (YYYY-MM-DD).")
def price_quote(dealer_id: str, product_code: str, qty: int, as_of: str | None) -> None:
    """Price one product for a dealer."""
    handler = ResolvePriceHandler(uow=unit_of_work())

    try:
        dto = handler.handle(dealer_id, product_code, qty, _parse_date(as_of))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{dto.product_code}  {dto.description}  ({dto.part_type})")
    click.echo(f"  Band:       {dto.band_code}")
    floor = "  (minimum price applied)" if dto.minimum_price_applied else ""
    click.echo(f"  Unit price: {dto.unit_price}{floor}")
    click.echo(f"  Qty:        {dto.qty}")
    click.echo(f"  Total:      {dto.total_price}")


@click.command("list")
@click.option("--dealer", "dealer_id", required=True, help="Dealer account ID.")
@click.option("--as-of", "as_of", default=None, help="Pricing date (YYYY-MM-DD).")
@click.argument("codes", nargs=-1, required=True)
def price_list(dealer_id: str, as_of: str | None, codes: tuple[str, ...]) -> None:
    """Price several products; unavailable ones show the reason."""
    handler = ResolvePricesHandler(uow=unit_of_work())

    try:
        dtos = handler.handle(dealer_id, list(codes), _parse_date(as_of))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{'Code':<16} {'Band':<6} {'Price':>10}  Note")
    click.echo("-" * 50)
    for dto in dtos:
        if dto.available:
            note = "min price" if dto.minimum_price_applied else ""
            click.echo(f"{dto.product_code:<16} {dto.band_code:<6} {dto.unit_price:>10}  {note}")
        else:
            click.echo(f"{dto.product_code:<16} {'-':<6} {'-':>10}  {dto.reason}")
