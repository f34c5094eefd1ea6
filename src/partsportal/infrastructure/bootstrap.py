"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from sqlalchemy.orm import Session, sessionmaker

from partsportal.infrastructure.order_numbers import TimestampOrderNumberGenerator
from partsportal.infrastructure.persistence.models import create_session_factory
from partsportal.infrastructure.persistence.sql_unit_of_work import (
    SqlAlchemyUnitOfWork,
)

DATABASE_URL_ENV = "PARTS_PORTAL_DATABASE_URL"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def database_url() -> str:
    """Database URL from the environment, else a SQLite file under data/."""
    url = os.environ.get(DATABASE_URL_ENV)
    if url:
        return url
    _DATA_DIR.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{_DATA_DIR / 'portal.db'}"


@lru_cache(maxsize=None)
def session_factory(url: str) -> sessionmaker[Session]:
    return create_session_factory(url)


def unit_of_work() -> SqlAlchemyUnitOfWork:
    """A fresh unit of work; use one per request or command."""
    return SqlAlchemyUnitOfWork(session_factory(database_url()))


def order_number_generator() -> TimestampOrderNumberGenerator:
    return TimestampOrderNumberGenerator()
