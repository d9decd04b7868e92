"""Unit of Work interface for PANELSEED.

Defines the AbstractUnitOfWork contract: a context-managed unit of work
exposing the panel repositories and abstract commit/rollback methods.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .repositories import (
        AllocationRepository,
        NodeRepository,
        PrincipalRepository,
        ZoneRepository,
    )


class AbstractUnitOfWork(abc.ABC):
    """Contract for a transactional unit of work."""

    principals: PrincipalRepository
    zones: ZoneRepository
    nodes: NodeRepository
    allocations: AllocationRepository

    def __enter__(self) -> AbstractUnitOfWork:
        """Enter the unit of work context and return the unit.

        Implementations may acquire transactional resources here.
        """
        return self

    def __exit__(self, *args):
        """Exit the unit of work context.

        Default behavior is to roll back on exit.
        """
        self.rollback()

    @abc.abstractmethod
    def commit(self):
        """Persist changes and finalize the transaction.

        Raises:
            PersistenceError: If the store rejects the commit.
        """

    @abc.abstractmethod
    def rollback(self):
        """Revert changes and clean up transactional resources."""
