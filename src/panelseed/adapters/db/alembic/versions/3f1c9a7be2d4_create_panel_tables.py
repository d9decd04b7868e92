"""create panel tables

Revision ID: 3f1c9a7be2d4
Revises:
Create Date: 2026-10-19 09:12:44.518203

"""

# pylint: disable=invalid-name

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

from panelseed.adapters.db.sa_types import BIGINT_PK, UTCDateTime

# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "3f1c9a7be2d4"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            UTCDateTime(),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
            comment="Server-assigned UTC creation timestamp.",
        ),
        sa.Column(
            "updated_at",
            UTCDateTime(),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
            comment="Server-assigned UTC timestamp of the last write.",
        ),
    ]


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "users",
        sa.Column("id", BIGINT_PK, sa.Identity(start=1), nullable=False),
        sa.Column("uuid", sa.String(length=36), nullable=False),
        sa.Column("email", sa.String(length=191), nullable=False),
        sa.Column("username", sa.String(length=191), nullable=False),
        sa.Column("password", sa.Text(), nullable=False, comment="bcrypt hash."),
        sa.Column("name_first", sa.String(length=191), nullable=False),
        sa.Column("name_last", sa.String(length=191), nullable=False),
        sa.Column("root_admin", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("language", sa.String(length=5), nullable=False, server_default="en"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_users")),
        sa.UniqueConstraint("uuid", name=op.f("uq_users_uuid")),
        sa.UniqueConstraint("email", name=op.f("uq_users_email")),
        sa.UniqueConstraint("username", name=op.f("uq_users_username")),
        comment="Panel accounts.",
    )

    op.create_table(
        "locations",
        sa.Column("id", BIGINT_PK, sa.Identity(start=1), nullable=False),
        sa.Column("short", sa.String(length=60), nullable=False),
        sa.Column("long", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_locations")),
        sa.UniqueConstraint("short", name=op.f("uq_locations_short")),
        comment="Deployment locations grouping nodes.",
    )

    op.create_table(
        "nodes",
        sa.Column("id", BIGINT_PK, sa.Identity(start=1), nullable=False),
        sa.Column("uuid", sa.String(length=36), nullable=False),
        sa.Column("public", sa.Boolean(), nullable=False),
        sa.Column("name", sa.String(length=191), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("location_id", BIGINT_PK, nullable=False),
        sa.Column("fqdn", sa.String(length=191), nullable=False),
        sa.Column("scheme", sa.String(length=5), nullable=False, server_default="https"),
        sa.Column(
            "behind_proxy", sa.Boolean(), nullable=False, server_default=sa.false()
        ),
        sa.Column(
            "maintenance_mode", sa.Boolean(), nullable=False, server_default=sa.false()
        ),
        sa.Column("memory", sa.Integer(), nullable=False, comment="MiB."),
        sa.Column(
            "memory_overallocate", sa.Integer(), nullable=False, server_default="0"
        ),
        sa.Column("disk", sa.Integer(), nullable=False, comment="MiB."),
        sa.Column("disk_overallocate", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("upload_size", sa.Integer(), nullable=False, server_default="100"),
        sa.Column("daemon_listen", sa.Integer(), nullable=False, server_default="8080"),
        sa.Column("daemon_sftp", sa.Integer(), nullable=False, server_default="2022"),
        sa.Column("daemon_base", sa.String(length=191), nullable=False),
        sa.Column("daemon_token_id", sa.String(length=16), nullable=False),
        sa.Column(
            "daemon_token",
            sa.Text(),
            nullable=False,
            comment="Fernet ciphertext of the 64 character daemon token.",
        ),
        *_timestamps(),
        sa.CheckConstraint("scheme IN ('http', 'https')", name=op.f("ck_nodes_scheme")),
        sa.ForeignKeyConstraint(
            ["location_id"],
            ["locations.id"],
            name=op.f("fk_nodes_location_id_locations"),
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_nodes")),
        sa.UniqueConstraint("uuid", name=op.f("uq_nodes_uuid")),
        sa.UniqueConstraint("name", name=op.f("uq_nodes_name")),
        sa.UniqueConstraint("daemon_token_id", name=op.f("uq_nodes_daemon_token_id")),
        comment="Resource nodes running the daemon agent.",
    )

    op.create_table(
        "allocations",
        sa.Column("id", BIGINT_PK, sa.Identity(start=1), nullable=False),
        sa.Column("node_id", BIGINT_PK, nullable=False),
        sa.Column("ip", sa.String(length=191), nullable=False),
        sa.Column("ip_alias", sa.Text(), nullable=True),
        sa.Column("port", sa.Integer(), nullable=False),
        sa.Column("server_id", BIGINT_PK, nullable=True, comment="Assigned workload."),
        *_timestamps(),
        sa.CheckConstraint(
            "port BETWEEN 1 AND 65535", name=op.f("ck_allocations_port_range")
        ),
        sa.ForeignKeyConstraint(
            ["node_id"],
            ["nodes.id"],
            name=op.f("fk_allocations_node_id_nodes"),
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_allocations")),
        sa.UniqueConstraint(
            "node_id", "ip", "port", name=op.f("uq_allocations_node_id_ip_port")
        ),
        comment="Reserved (address, port) pairs on nodes.",
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_table("allocations")
    op.drop_table("nodes")
    op.drop_table("locations")
    op.drop_table("users")
