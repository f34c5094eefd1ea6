"""Shared pytest fixtures for the SQLAlchemy-backed tests."""

import os
import tempfile

import pytest

from partsportal.infrastructure.persistence.models import create_session_factory
from partsportal.infrastructure.persistence.sql_unit_of_work import SqlAlchemyUnitOfWork
from tests.infrastructure.catalog_seed import seed_catalog


@pytest.fixture
def db_url():
    """A throwaway SQLite database file."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    yield f"sqlite:///{db_path}"

    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def session_factory(db_url):
    factory = create_session_factory(db_url)
    yield factory
    factory.kw["bind"].dispose()


@pytest.fixture
def seeded(session_factory):
    """Session factory with the sample catalog loaded."""
    seed_catalog(session_factory)
    return session_factory


@pytest.fixture
def uow(seeded):
    return SqlAlchemyUnitOfWork(seeded)
