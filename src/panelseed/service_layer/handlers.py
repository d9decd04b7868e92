"""Command handlers.

``provision_panel`` is the idempotent seeder. It walks four phases in
dependency order (admin → location → node → allocations). Each phase looks
the record up by its unique key, inserts it only when absent, and commits
before the next phase starts, so a failure part-way leaves earlier phases in
place and a re-run picks up where the last one stopped.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from panelseed.domain.errors import PersistenceError
from panelseed.domain.models import (
    WILDCARD_IP,
    PortAllocation,
    Principal,
    ResourceNode,
    Zone,
)

from .commands import ProvisionPanel

if TYPE_CHECKING:
    from panelseed.interfaces.crypto import PasswordHasher
    from panelseed.interfaces.id_generator import CredentialGenerator, IdGenerator
    from panelseed.interfaces.unit_of_work import AbstractUnitOfWork

logger = logging.getLogger(__name__)


class Entity(Enum):
    """Record kinds touched by the seeder, in creation order."""

    ADMIN = "admin user"
    LOCATION = "location"
    NODE = "node"
    ALLOCATIONS = "allocations"


@dataclass(frozen=True)
class StepOutcome:
    """What one provisioning phase did.

    Attributes:
        entity: The record kind.
        key: The unique key looked up (email, short code, node name, or the
            node name for allocations).
        created: Number of records inserted; 0 means everything already existed.
        record_id: Store id of the (single) record, when there is one.
    """

    entity: Entity
    key: str
    created: int
    record_id: int | None = None

    @property
    def existed(self) -> bool:
        """True if the phase performed no write."""
        return self.created == 0


@dataclass
class ProvisioningReport:
    """Outcome of a whole provisioning run."""

    steps: list[StepOutcome] = field(default_factory=list)

    def outcome(self, entity: Entity) -> StepOutcome:
        """Return the outcome recorded for ``entity``."""
        for step in self.steps:
            if step.entity is entity:
                return step
        raise KeyError(entity)

    @property
    def allocations_created(self) -> int:
        """Number of port allocations inserted by this run."""
        return self.outcome(Entity.ALLOCATIONS).created


Observer = Callable[[StepOutcome], None]


def provision_panel(  # pylint: disable=too-many-arguments
    cmd: ProvisionPanel,
    uow: AbstractUnitOfWork,
    hasher: PasswordHasher,
    id_generator: IdGenerator,
    credential_generator: CredentialGenerator,
    observer: Observer | None = None,
) -> ProvisioningReport:
    """Converge the store on the seed state described by ``cmd``.

    Existing records are never updated: a stale name or password on an
    existing admin, or a differing fqdn on an existing node, is left as is.
    Node credentials are generated only when the node is created.

    Raises:
        PersistenceError: If a write or commit fails. Phases committed before
            the failure are kept.
    """
    report = ProvisioningReport()

    def record(outcome: StepOutcome) -> None:
        report.steps.append(outcome)
        if observer is not None:
            observer(outcome)

    with uow:
        admin_step = _ensure_admin(cmd, uow, hasher, id_generator)
        uow.commit()
        record(admin_step)

        zone_step, zone = _ensure_location(cmd, uow)
        uow.commit()
        record(zone_step)

        node_step, node = _ensure_node(cmd, uow, zone, id_generator, credential_generator)
        uow.commit()
        record(node_step)

        allocation_step = _ensure_allocations(cmd, uow, node)
        uow.commit()
        record(allocation_step)

    return report


def _ensure_admin(
    cmd: ProvisionPanel,
    uow: AbstractUnitOfWork,
    hasher: PasswordHasher,
    id_generator: IdGenerator,
) -> StepOutcome:
    if existing := uow.principals.get_by_email(cmd.admin_email):
        logger.info("Admin user %s already exists (id=%s)", cmd.admin_email, existing.id)
        return StepOutcome(Entity.ADMIN, cmd.admin_email, 0, existing.id)

    principal = uow.principals.add(
        Principal(
            uuid=id_generator.new_id(),
            email=cmd.admin_email,
            username=cmd.admin_username,
            password_hash=hasher.hash(cmd.admin_password),
            name_first=cmd.admin_first_name,
            name_last=cmd.admin_last_name,
            root_admin=True,
        )
    )
    logger.info("Created admin user %s (id=%s)", principal.email, principal.id)
    return StepOutcome(Entity.ADMIN, cmd.admin_email, 1, principal.id)


def _ensure_location(
    cmd: ProvisionPanel, uow: AbstractUnitOfWork
) -> tuple[StepOutcome, Zone]:
    if existing := uow.zones.get_by_short(cmd.location_short):
        logger.info("Location %s already exists (id=%s)", existing.short, existing.id)
        return StepOutcome(Entity.LOCATION, cmd.location_short, 0, existing.id), existing

    zone = uow.zones.add(Zone(short=cmd.location_short, long=cmd.location_long))
    logger.info("Created location %s (%s, id=%s)", zone.short, zone.long, zone.id)
    return StepOutcome(Entity.LOCATION, cmd.location_short, 1, zone.id), zone


def _ensure_node(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    cmd: ProvisionPanel,
    uow: AbstractUnitOfWork,
    zone: Zone,
    id_generator: IdGenerator,
    credential_generator: CredentialGenerator,
) -> tuple[StepOutcome, ResourceNode]:
    if existing := uow.nodes.get_by_name(cmd.node_name):
        logger.info("Node %s already exists (id=%s)", existing.name, existing.id)
        return StepOutcome(Entity.NODE, cmd.node_name, 0, existing.id), existing

    if zone.id is None:
        raise PersistenceError(f"create node {cmd.node_name}", "location has no id")
    node = uow.nodes.add(
        ResourceNode(
            uuid=id_generator.new_id(),
            name=cmd.node_name,
            location_id=zone.id,
            fqdn=cmd.node_fqdn,
            scheme=cmd.node_scheme,
            memory=cmd.node_memory,
            disk=cmd.node_disk,
            daemon_listen=cmd.node_daemon_listen,
            daemon_sftp=cmd.node_daemon_sftp,
            credentials=credential_generator.new_credentials(),
        )
    )
    logger.info("Created node %s (id=%s)", node.name, node.id)
    return StepOutcome(Entity.NODE, cmd.node_name, 1, node.id), node


def _ensure_allocations(
    cmd: ProvisionPanel, uow: AbstractUnitOfWork, node: ResourceNode
) -> StepOutcome:
    if node.id is None:
        raise PersistenceError(f"create allocations on {node.name}", "node has no id")
    created = 0
    for port in cmd.allocation_ports:
        if uow.allocations.exists(node.id, WILDCARD_IP, port):
            logger.debug("Allocation %s:%s already exists", WILDCARD_IP, port)
            continue
        uow.allocations.add(PortAllocation(node_id=node.id, ip=WILDCARD_IP, port=port))
        created += 1
    logger.info(
        "Created %d of %d allocations on node %s",
        created,
        len(cmd.allocation_ports),
        node.name,
    )
    return StepOutcome(Entity.ALLOCATIONS, node.name, created, node.id)


COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    ProvisionPanel: provision_panel,
}
