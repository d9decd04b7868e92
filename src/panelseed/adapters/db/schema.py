"""Panel store schema.

Defines the four panel tables PANELSEED provisions and reads. Column names
follow the panel's own schema so a seeded database is recognisable to the
panel application.

Constraints (enforced here):

| Constraint                          | Purpose                              |
|-------------------------------------|--------------------------------------|
| UNIQUE(users.email)                 | one admin per email                  |
| UNIQUE(locations.short)             | one location per short code          |
| UNIQUE(nodes.name)                  | one node per name                    |
| UNIQUE(nodes.daemon_token_id)       | token ids identify a node            |
| FK(nodes.location_id)               | node requires an existing location   |
| UNIQUE(allocations.node_id, ip, port) | one allocation per node/address/port |
| FK(allocations.node_id)             | allocation requires an existing node |
| CHECK(port range)                   | ports are 1..65535                   |
"""

from __future__ import annotations

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Identity,
    Integer,
    String,
    Table,
    Text,
    UniqueConstraint,
    false,
    text,
)

from .metadata import metadata
from .sa_types import BIGINT_PK, UTCDateTime

__all__ = ["users", "locations", "nodes", "allocations"]


def _timestamps() -> list[Column]:
    return [
        Column(
            "created_at",
            UTCDateTime(),
            nullable=False,
            server_default=text("CURRENT_TIMESTAMP"),
            comment="Server-assigned UTC creation timestamp.",
        ),
        Column(
            "updated_at",
            UTCDateTime(),
            nullable=False,
            server_default=text("CURRENT_TIMESTAMP"),
            comment="Server-assigned UTC timestamp of the last write.",
        ),
    ]


users = Table(
    "users",
    metadata,
    Column("id", BIGINT_PK, Identity(start=1), primary_key=True),
    Column("uuid", String(36), nullable=False, unique=True),
    Column("email", String(191), nullable=False, unique=True),
    Column("username", String(191), nullable=False, unique=True),
    Column("password", Text, nullable=False, comment="bcrypt hash."),
    Column("name_first", String(191), nullable=False),
    Column("name_last", String(191), nullable=False),
    Column("root_admin", Boolean, nullable=False, server_default=false()),
    Column("language", String(5), nullable=False, server_default="en"),
    *_timestamps(),
    comment="Panel accounts.",
)

locations = Table(
    "locations",
    metadata,
    Column("id", BIGINT_PK, Identity(start=1), primary_key=True),
    Column("short", String(60), nullable=False, unique=True),
    Column("long", Text, nullable=True),
    *_timestamps(),
    comment="Deployment locations grouping nodes.",
)

nodes = Table(
    "nodes",
    metadata,
    Column("id", BIGINT_PK, Identity(start=1), primary_key=True),
    Column("uuid", String(36), nullable=False, unique=True),
    Column("public", Boolean, nullable=False),
    Column("name", String(191), nullable=False, unique=True),
    Column("description", Text, nullable=True),
    Column(
        "location_id",
        BIGINT_PK,
        ForeignKey("locations.id"),
        nullable=False,
    ),
    Column("fqdn", String(191), nullable=False),
    Column("scheme", String(5), nullable=False, server_default="https"),
    Column("behind_proxy", Boolean, nullable=False, server_default=false()),
    Column("maintenance_mode", Boolean, nullable=False, server_default=false()),
    Column("memory", Integer, nullable=False, comment="MiB."),
    Column("memory_overallocate", Integer, nullable=False, server_default="0"),
    Column("disk", Integer, nullable=False, comment="MiB."),
    Column("disk_overallocate", Integer, nullable=False, server_default="0"),
    Column("upload_size", Integer, nullable=False, server_default="100"),
    Column("daemon_listen", Integer, nullable=False, server_default="8080"),
    Column("daemon_sftp", Integer, nullable=False, server_default="2022"),
    Column("daemon_base", String(191), nullable=False),
    Column("daemon_token_id", String(16), nullable=False, unique=True),
    Column(
        "daemon_token",
        Text,
        nullable=False,
        comment="Fernet ciphertext of the 64 character daemon token.",
    ),
    *_timestamps(),
    CheckConstraint("scheme IN ('http', 'https')", name="scheme"),
    comment="Resource nodes running the daemon agent.",
)

allocations = Table(
    "allocations",
    metadata,
    Column("id", BIGINT_PK, Identity(start=1), primary_key=True),
    Column(
        "node_id",
        BIGINT_PK,
        ForeignKey("nodes.id"),
        nullable=False,
    ),
    Column("ip", String(191), nullable=False),
    Column("ip_alias", Text, nullable=True),
    Column("port", Integer, nullable=False),
    Column("server_id", BIGINT_PK, nullable=True, comment="Assigned workload."),
    *_timestamps(),
    UniqueConstraint("node_id", "ip", "port"),
    CheckConstraint("port BETWEEN 1 AND 65535", name="port_range"),
    comment="Reserved (address, port) pairs on nodes.",
)
