"""Unit of Work implementations for PANELSEED.

Provides a context-managed UnitOfWork over a SQLAlchemy Connection and the
SQLAlchemy repositories, plus an in-memory counterpart with the same
commit/rollback semantics for tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.exc import SQLAlchemyError

from panelseed.domain.errors import PersistenceError
from panelseed.interfaces.unit_of_work import AbstractUnitOfWork

from .repositories import (
    InMemoryAllocationRepository,
    InMemoryNodeRepository,
    InMemoryPanelData,
    InMemoryPrincipalRepository,
    InMemoryZoneRepository,
    SqlAlchemyAllocationRepository,
    SqlAlchemyNodeRepository,
    SqlAlchemyPrincipalRepository,
    SqlAlchemyZoneRepository,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine

    from panelseed.interfaces.crypto import SecretCipher


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """SQLAlchemy-backed Unit of Work."""

    def __init__(self, engine: Engine, cipher: SecretCipher):
        self.engine = engine
        self.cipher = cipher
        self.connection: Connection

    def __enter__(self):
        self.connection = self.engine.connect()
        self.principals = SqlAlchemyPrincipalRepository(self.connection)
        self.zones = SqlAlchemyZoneRepository(self.connection)
        self.nodes = SqlAlchemyNodeRepository(self.connection, self.cipher)
        self.allocations = SqlAlchemyAllocationRepository(self.connection)
        return super().__enter__()

    def __exit__(self, *args):
        try:
            super().__exit__(*args)
        finally:
            self.connection.close()

    def commit(self):
        try:
            self.connection.commit()
        except SQLAlchemyError as e:
            raise PersistenceError("commit", str(getattr(e, "orig", None) or e)) from e

    def rollback(self):
        self.connection.rollback()


class InMemoryUnitOfWork(AbstractUnitOfWork):
    """In-memory Unit of Work.

    Writes go to a working copy of the committed data; ``commit()`` publishes
    the working copy and ``rollback()`` discards it.
    """

    def __init__(self, data: InMemoryPanelData | None = None):
        self.committed_data = data if data is not None else InMemoryPanelData()
        self.commits = 0
        self._bind(self.committed_data.copy())

    def _bind(self, data: InMemoryPanelData) -> None:
        self.data = data
        self.principals = InMemoryPrincipalRepository(data)
        self.zones = InMemoryZoneRepository(data)
        self.nodes = InMemoryNodeRepository(data)
        self.allocations = InMemoryAllocationRepository(data)

    def commit(self):
        self.committed_data = self.data.copy()
        self.commits += 1

    def rollback(self):
        self._bind(self.committed_data.copy())
