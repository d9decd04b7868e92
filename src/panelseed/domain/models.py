"""Panel records handled by PANELSEED.

Each record mirrors one row of the panel store. ``id`` is ``None`` until the
record has been inserted; repositories return copies carrying the
store-assigned id.
"""

from __future__ import annotations

from dataclasses import dataclass

# pylint: disable=too-many-instance-attributes

WILDCARD_IP = "0.0.0.0"
DEFAULT_LANGUAGE = "en"
DEFAULT_NODE_DESCRIPTION = "Auto-configured node"
DEFAULT_UPLOAD_SIZE_MB = 100
DEFAULT_DAEMON_BASE = "/var/lib/pterodactyl/volumes"
MIN_PORT = 1
MAX_PORT = 65535


@dataclass(frozen=True)
class Principal:
    """Administrative account, unique by email."""

    uuid: str
    email: str
    username: str
    password_hash: str
    name_first: str
    name_last: str
    root_admin: bool = True
    language: str = DEFAULT_LANGUAGE
    id: int | None = None


@dataclass(frozen=True)
class Zone:
    """Deployment location grouping nodes, unique by short code."""

    short: str
    long: str
    id: int | None = None


@dataclass(frozen=True)
class DaemonCredentials:
    """Token pair the node agent uses to authenticate against the panel."""

    token_id: str
    token: str

    def __repr__(self) -> str:
        return f"DaemonCredentials(token_id={self.token_id!r}, token='***')"


@dataclass(frozen=True)
class ResourceNode:
    """Managed host able to run workloads, unique by name."""

    uuid: str
    name: str
    location_id: int
    fqdn: str
    scheme: str
    memory: int
    disk: int
    daemon_listen: int
    daemon_sftp: int
    credentials: DaemonCredentials
    description: str = DEFAULT_NODE_DESCRIPTION
    public: bool = True
    behind_proxy: bool = True
    maintenance_mode: bool = False
    memory_overallocate: int = 0
    disk_overallocate: int = 0
    upload_size: int = DEFAULT_UPLOAD_SIZE_MB
    daemon_base: str = DEFAULT_DAEMON_BASE
    id: int | None = None


@dataclass(frozen=True)
class PortAllocation:
    """Reserved (address, port) pair on a node, unique by (node, ip, port)."""

    node_id: int
    port: int
    ip: str = WILDCARD_IP
    ip_alias: str | None = None
    server_id: int | None = None
    id: int | None = None
