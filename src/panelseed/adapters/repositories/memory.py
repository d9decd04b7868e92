"""In-memory repository implementations for testing purposes.

The repositories share one :class:`InMemoryPanelData` so that cross-record
constraints (unique keys, location/node references) behave like the SQL
store and violations raise :class:`PersistenceError`.

Note: This implementation is not thread-safe and is intended
solely for use in single-threaded test scenarios.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from panelseed.domain.errors import PersistenceError
from panelseed.domain.models import PortAllocation, Principal, ResourceNode, Zone
from panelseed.interfaces.repositories import (
    AllocationRepository,
    NodeRepository,
    PrincipalRepository,
    ZoneRepository,
)


@dataclass
class InMemoryPanelData:
    """Tables of the in-memory store, keyed by record id."""

    principals: dict[int, Principal] = field(default_factory=dict)
    zones: dict[int, Zone] = field(default_factory=dict)
    nodes: dict[int, ResourceNode] = field(default_factory=dict)
    allocations: dict[int, PortAllocation] = field(default_factory=dict)
    last_id: int = 0

    def next_id(self) -> int:
        """Return a fresh id, unique across all tables."""
        self.last_id += 1
        return self.last_id

    def copy(self) -> InMemoryPanelData:
        """Return a shallow snapshot suitable for rollback."""
        return InMemoryPanelData(
            principals=dict(self.principals),
            zones=dict(self.zones),
            nodes=dict(self.nodes),
            allocations=dict(self.allocations),
            last_id=self.last_id,
        )


class InMemoryPrincipalRepository(PrincipalRepository):
    """Admin accounts held in memory."""

    def __init__(self, data: InMemoryPanelData):
        self.data = data

    def get_by_email(self, email: str) -> Principal | None:
        for principal in self.data.principals.values():
            if principal.email == email:
                return principal
        return None

    def add(self, principal: Principal) -> Principal:
        operation = f"create admin user {principal.email}"
        for existing in self.data.principals.values():
            if existing.email == principal.email:
                raise PersistenceError(operation, "duplicate email")
            if existing.username == principal.username:
                raise PersistenceError(operation, "duplicate username")
        stored = replace(principal, id=self.data.next_id())
        self.data.principals[stored.id] = stored
        return stored


class InMemoryZoneRepository(ZoneRepository):
    """Locations held in memory."""

    def __init__(self, data: InMemoryPanelData):
        self.data = data

    def get_by_short(self, short: str) -> Zone | None:
        for zone in self.data.zones.values():
            if zone.short == short:
                return zone
        return None

    def add(self, zone: Zone) -> Zone:
        if self.get_by_short(zone.short) is not None:
            raise PersistenceError(f"create location {zone.short}", "duplicate short")
        stored = replace(zone, id=self.data.next_id())
        self.data.zones[stored.id] = stored
        return stored


class InMemoryNodeRepository(NodeRepository):
    """Resource nodes held in memory.

    Tokens are kept in plaintext; there is no "at rest" to protect here.
    """

    def __init__(self, data: InMemoryPanelData):
        self.data = data

    def get_by_name(self, name: str) -> ResourceNode | None:
        for node in self.data.nodes.values():
            if node.name == name:
                return node
        return None

    def add(self, node: ResourceNode) -> ResourceNode:
        operation = f"create node {node.name}"
        if node.location_id not in self.data.zones:
            raise PersistenceError(operation, f"unknown location {node.location_id}")
        if self.get_by_name(node.name) is not None:
            raise PersistenceError(operation, "duplicate name")
        stored = replace(node, id=self.data.next_id())
        self.data.nodes[stored.id] = stored
        return stored


class InMemoryAllocationRepository(AllocationRepository):
    """Port allocations held in memory."""

    def __init__(self, data: InMemoryPanelData):
        self.data = data

    def exists(self, node_id: int, ip: str, port: int) -> bool:
        return any(
            (a.node_id, a.ip, a.port) == (node_id, ip, port)
            for a in self.data.allocations.values()
        )

    def add(self, allocation: PortAllocation) -> PortAllocation:
        operation = f"create allocation {allocation.ip}:{allocation.port}"
        if allocation.node_id not in self.data.nodes:
            raise PersistenceError(operation, f"unknown node {allocation.node_id}")
        if self.exists(allocation.node_id, allocation.ip, allocation.port):
            raise PersistenceError(operation, "duplicate allocation")
        stored = replace(allocation, id=self.data.next_id())
        self.data.allocations[stored.id] = stored
        return stored

    def list_for_node(self, node_id: int) -> list[PortAllocation]:
        return sorted(
            (a for a in self.data.allocations.values() if a.node_id == node_id),
            key=lambda a: (a.port, a.ip),
        )
