"""CLI commands for database housekeeping."""

from __future__ import annotations

import click

from partsportal.infrastructure.bootstrap import database_url, session_factory


@click.command("init")
def db_init() -> None:
    """Create the schema (idempotent)."""
    url = database_url()
    session_factory(url)
    click.echo(f"Database ready: {url}")
