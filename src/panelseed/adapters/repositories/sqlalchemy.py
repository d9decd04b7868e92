"""Repository implementations using SQLAlchemy Core.

All repositories share the unit of work's `Connection`; nothing here commits.
Store errors raised by any statement are translated to :class:`PersistenceError` so
callers never depend on SQLAlchemy's exception hierarchy.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Any

from sqlalchemy import exists, insert, select
from sqlalchemy.exc import SQLAlchemyError

from panelseed.adapters.db.schema import allocations, locations, nodes, users
from panelseed.domain.errors import PersistenceError, SecretDecryptionError
from panelseed.domain.models import (
    DaemonCredentials,
    PortAllocation,
    Principal,
    ResourceNode,
    Zone,
)
from panelseed.interfaces.repositories import (
    AllocationRepository,
    NodeRepository,
    PrincipalRepository,
    ZoneRepository,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Result, Row
    from sqlalchemy.sql import Executable
    from sqlalchemy.sql.dml import Insert

    from panelseed.interfaces.crypto import SecretCipher

logger = logging.getLogger(__name__)


def _execute(connection: Connection, stmt: Executable, operation: str) -> Result[Any]:
    """Run ``stmt``, translating store errors to :class:`PersistenceError`."""
    try:
        return connection.execute(stmt)
    except SQLAlchemyError as e:
        logger.debug("Statement failed while trying to %s", operation, exc_info=True)
        raise PersistenceError(operation, str(getattr(e, "orig", None) or e)) from e


def _execute_insert(connection: Connection, stmt: Insert, operation: str) -> int:
    """Run ``stmt`` and return the new primary key."""
    result = _execute(connection, stmt, operation)
    return int(result.inserted_primary_key[0])


class SqlAlchemyPrincipalRepository(PrincipalRepository):
    """Admin accounts stored in the ``users`` table."""

    def __init__(self, connection: Connection):
        self.connection = connection

    def get_by_email(self, email: str) -> Principal | None:
        stmt = select(users).where(users.c.email == email)
        operation = f"look up admin user {email}"
        if not (row := _execute(self.connection, stmt, operation).fetchone()):
            return None
        return Principal(
            id=row.id,
            uuid=row.uuid,
            email=row.email,
            username=row.username,
            password_hash=row.password,
            name_first=row.name_first,
            name_last=row.name_last,
            root_admin=bool(row.root_admin),
            language=row.language,
        )

    def add(self, principal: Principal) -> Principal:
        stmt = insert(users).values(
            uuid=principal.uuid,
            email=principal.email,
            username=principal.username,
            password=principal.password_hash,
            name_first=principal.name_first,
            name_last=principal.name_last,
            root_admin=principal.root_admin,
            language=principal.language,
        )
        new_id = _execute_insert(
            self.connection, stmt, f"create admin user {principal.email}"
        )
        return replace(principal, id=new_id)


class SqlAlchemyZoneRepository(ZoneRepository):
    """Locations stored in the ``locations`` table."""

    def __init__(self, connection: Connection):
        self.connection = connection

    def get_by_short(self, short: str) -> Zone | None:
        stmt = select(locations).where(locations.c.short == short)
        operation = f"look up location {short}"
        if not (row := _execute(self.connection, stmt, operation).fetchone()):
            return None
        return Zone(id=row.id, short=row.short, long=row.long)

    def add(self, zone: Zone) -> Zone:
        stmt = insert(locations).values(short=zone.short, long=zone.long)
        new_id = _execute_insert(self.connection, stmt, f"create location {zone.short}")
        return replace(zone, id=new_id)


class SqlAlchemyNodeRepository(NodeRepository):
    """Resource nodes stored in the ``nodes`` table.

    The daemon token goes through ``cipher`` on the way in and out; the
    ``daemon_token`` column only ever holds ciphertext.
    """

    def __init__(self, connection: Connection, cipher: SecretCipher):
        self.connection = connection
        self.cipher = cipher

    def get_by_name(self, name: str) -> ResourceNode | None:
        stmt = select(nodes).where(nodes.c.name == name)
        operation = f"look up node {name}"
        if not (row := _execute(self.connection, stmt, operation).fetchone()):
            return None
        return self._to_node(row)

    def add(self, node: ResourceNode) -> ResourceNode:
        stmt = insert(nodes).values(
            uuid=node.uuid,
            public=node.public,
            name=node.name,
            description=node.description,
            location_id=node.location_id,
            fqdn=node.fqdn,
            scheme=node.scheme,
            behind_proxy=node.behind_proxy,
            maintenance_mode=node.maintenance_mode,
            memory=node.memory,
            memory_overallocate=node.memory_overallocate,
            disk=node.disk,
            disk_overallocate=node.disk_overallocate,
            upload_size=node.upload_size,
            daemon_listen=node.daemon_listen,
            daemon_sftp=node.daemon_sftp,
            daemon_base=node.daemon_base,
            daemon_token_id=node.credentials.token_id,
            daemon_token=self.cipher.encrypt(node.credentials.token),
        )
        new_id = _execute_insert(self.connection, stmt, f"create node {node.name}")
        return replace(node, id=new_id)

    def _to_node(self, row: Row[Any]) -> ResourceNode:
        try:
            token = self.cipher.decrypt(row.daemon_token)
        except ValueError as e:
            raise SecretDecryptionError("nodes.daemon_token") from e
        return ResourceNode(
            id=row.id,
            uuid=row.uuid,
            name=row.name,
            location_id=row.location_id,
            fqdn=row.fqdn,
            scheme=row.scheme,
            memory=row.memory,
            disk=row.disk,
            daemon_listen=row.daemon_listen,
            daemon_sftp=row.daemon_sftp,
            credentials=DaemonCredentials(token_id=row.daemon_token_id, token=token),
            description=row.description,
            public=bool(row.public),
            behind_proxy=bool(row.behind_proxy),
            maintenance_mode=bool(row.maintenance_mode),
            memory_overallocate=row.memory_overallocate,
            disk_overallocate=row.disk_overallocate,
            upload_size=row.upload_size,
            daemon_base=row.daemon_base,
        )


class SqlAlchemyAllocationRepository(AllocationRepository):
    """Port allocations stored in the ``allocations`` table."""

    def __init__(self, connection: Connection):
        self.connection = connection

    def exists(self, node_id: int, ip: str, port: int) -> bool:
        stmt = select(
            exists().where(
                allocations.c.node_id == node_id,
                allocations.c.ip == ip,
                allocations.c.port == port,
            )
        )
        operation = f"look up allocation {ip}:{port}"
        return bool(_execute(self.connection, stmt, operation).scalar())

    def add(self, allocation: PortAllocation) -> PortAllocation:
        stmt = insert(allocations).values(
            node_id=allocation.node_id,
            ip=allocation.ip,
            ip_alias=allocation.ip_alias,
            port=allocation.port,
            server_id=allocation.server_id,
        )
        new_id = _execute_insert(
            self.connection,
            stmt,
            f"create allocation {allocation.ip}:{allocation.port}",
        )
        return replace(allocation, id=new_id)

    def list_for_node(self, node_id: int) -> list[PortAllocation]:
        stmt = (
            select(allocations)
            .where(allocations.c.node_id == node_id)
            .order_by(allocations.c.port, allocations.c.ip)
        )
        return [
            PortAllocation(
                id=row.id,
                node_id=row.node_id,
                ip=row.ip,
                ip_alias=row.ip_alias,
                port=row.port,
                server_id=row.server_id,
            )
            for row in _execute(self.connection, stmt, f"list allocations on node {node_id}")
        ]
