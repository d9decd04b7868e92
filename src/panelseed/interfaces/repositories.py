"""Repository contracts for the panel store.

Each repository covers one record type and offers exactly what the seeder and
the config renderer need: lookup by unique key, an existence check, and
insert. There is no update or delete; records are created once and never
mutated by this project.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from panelseed.domain.models import PortAllocation, Principal, ResourceNode, Zone


class PrincipalRepository(abc.ABC):
    """Admin accounts keyed by email."""

    @abc.abstractmethod
    def get_by_email(self, email: str) -> Principal | None:
        """Return the account with ``email``, or ``None`` if absent."""

    @abc.abstractmethod
    def add(self, principal: Principal) -> Principal:
        """Insert ``principal`` and return it with its store id.

        Raises:
            PersistenceError: If the store rejects the insert.
        """


class ZoneRepository(abc.ABC):
    """Locations keyed by short code."""

    @abc.abstractmethod
    def get_by_short(self, short: str) -> Zone | None:
        """Return the location with short code ``short``, or ``None``."""

    @abc.abstractmethod
    def add(self, zone: Zone) -> Zone:
        """Insert ``zone`` and return it with its store id.

        Raises:
            PersistenceError: If the store rejects the insert.
        """


class NodeRepository(abc.ABC):
    """Resource nodes keyed by name.

    Implementations own the at-rest protection of the daemon token: it is
    encrypted on :meth:`add` and handed back in plaintext by :meth:`get_by_name`.
    """

    @abc.abstractmethod
    def get_by_name(self, name: str) -> ResourceNode | None:
        """Return the node called ``name`` with decrypted credentials, or ``None``.

        Raises:
            SecretDecryptionError: If the stored token cannot be decrypted.
        """

    @abc.abstractmethod
    def add(self, node: ResourceNode) -> ResourceNode:
        """Insert ``node`` and return it with its store id.

        The referenced location must already exist.

        Raises:
            PersistenceError: If the store rejects the insert.
        """


class AllocationRepository(abc.ABC):
    """Port allocations keyed by (node id, bind address, port)."""

    @abc.abstractmethod
    def exists(self, node_id: int, ip: str, port: int) -> bool:
        """Return True if an allocation for ``(node_id, ip, port)`` exists."""

    @abc.abstractmethod
    def add(self, allocation: PortAllocation) -> PortAllocation:
        """Insert ``allocation`` and return it with its store id.

        The referenced node must already exist.

        Raises:
            PersistenceError: If the store rejects the insert.
        """

    @abc.abstractmethod
    def list_for_node(self, node_id: int) -> list[PortAllocation]:
        """Return every allocation on ``node_id`` ordered by port."""
