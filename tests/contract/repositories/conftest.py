"""Fixtures for repository contract tests.

Every test runs once against the in-memory unit of work and once against the
SQLAlchemy unit of work on a migrated SQLite file.
"""

from collections.abc import Iterator

import pytest

from panelseed.adapters.crypto import FernetSecretCipher
from panelseed.adapters.unit_of_work import InMemoryUnitOfWork, SqlAlchemyUnitOfWork
from panelseed.domain.models import Zone
from panelseed.interfaces.unit_of_work import AbstractUnitOfWork

# pylint: disable=redefined-outer-name


@pytest.fixture(params=["memory", "sqlalchemy"])
def uow(request: pytest.FixtureRequest) -> Iterator[AbstractUnitOfWork]:
    """A unit of work over an empty store, entered for the test's duration."""
    match request.param:
        case "memory":
            unit: AbstractUnitOfWork = InMemoryUnitOfWork()
        case "sqlalchemy":
            engine = request.getfixturevalue("sqlite_engine_file")
            unit = SqlAlchemyUnitOfWork(engine, FernetSecretCipher("contract-key"))
        case _:
            raise ValueError(f"unknown unit of work type: {request.param}")
    with unit:
        yield unit


@pytest.fixture
def zone(uow: AbstractUnitOfWork) -> Zone:
    """A stored location."""
    return uow.zones.add(Zone(short="local", long="Local Datacenter"))
