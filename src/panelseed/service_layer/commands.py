"""Module defining Commands."""

from __future__ import annotations

from dataclasses import dataclass

from panelseed.domain.errors import ConfigurationError
from panelseed.domain.models import MAX_PORT, MIN_PORT

# pylint: disable=too-many-instance-attributes

SCHEMES = ("http", "https")


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


@dataclass(frozen=True)
class ProvisionPanel(Command):
    """Command to converge the panel store on the desired seed state.

    Field validation runs at construction so a malformed setting fails before
    anything is written. Error names refer to the environment variables the
    CLI reads each field from.
    """

    admin_email: str
    admin_username: str
    admin_password: str
    admin_first_name: str
    admin_last_name: str
    location_short: str
    location_long: str
    node_name: str
    node_fqdn: str
    node_scheme: str
    node_memory: int
    node_disk: int
    node_daemon_listen: int
    node_daemon_sftp: int
    allocation_ports: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        for env_name, value in (
            ("ADMIN_EMAIL", self.admin_email),
            ("ADMIN_USERNAME", self.admin_username),
            ("ADMIN_PASSWORD", self.admin_password),
            ("ADMIN_FIRST_NAME", self.admin_first_name),
            ("ADMIN_LAST_NAME", self.admin_last_name),
            ("NODE_LOCATION_SHORT", self.location_short),
            ("NODE_LOCATION", self.location_long),
            ("NODE_NAME", self.node_name),
            ("NODE_FQDN", self.node_fqdn),
        ):
            if not value or not value.strip():
                raise ConfigurationError(env_name, "must not be empty")
        if "@" not in self.admin_email:
            raise ConfigurationError(
                "ADMIN_EMAIL", f"{self.admin_email!r} is not an email address"
            )
        if self.node_scheme not in SCHEMES:
            raise ConfigurationError(
                "NODE_SCHEME", f"{self.node_scheme!r} is not one of {', '.join(SCHEMES)}"
            )
        for env_name, amount in (
            ("NODE_MEMORY", self.node_memory),
            ("NODE_DISK", self.node_disk),
        ):
            if amount < 0:
                raise ConfigurationError(env_name, f"{amount} must not be negative")
        for env_name, port in (
            ("NODE_DAEMON_LISTEN", self.node_daemon_listen),
            ("NODE_DAEMON_SFTP", self.node_daemon_sftp),
            *(("ALLOCATION_PORTS", p) for p in self.allocation_ports),
        ):
            if not MIN_PORT <= port <= MAX_PORT:
                raise ConfigurationError(
                    env_name, f"{port} is outside the range {MIN_PORT}-{MAX_PORT}"
                )

    def __repr__(self) -> str:
        return (
            f"ProvisionPanel(admin_email={self.admin_email!r}, "
            f"location_short={self.location_short!r}, node_name={self.node_name!r}, "
            f"allocation_ports={self.allocation_ports!r}, admin_password='***')"
        )
