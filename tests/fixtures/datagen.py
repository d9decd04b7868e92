"""Fixtures for generating test data."""

from collections.abc import Callable
from typing import Any

import pytest

from panelseed.domain.models import DaemonCredentials, ResourceNode
from panelseed.service_layer.commands import ProvisionPanel

# pylint: disable=redefined-outer-name

APP_KEY = "test-app-key"

# Environment the seeder reads, mirroring the container defaults.
SEED_ENV = {
    "ADMIN_EMAIL": "admin@example.com",
    "ADMIN_USERNAME": "admin",
    "ADMIN_PASSWORD": "s3cret-Passw0rd",
    "ADMIN_FIRST_NAME": "Ada",
    "ADMIN_LAST_NAME": "Admin",
    "NODE_LOCATION": "Local Datacenter",
    "NODE_NAME": "node-1",
    "NODE_FQDN": "wings.example.com",
    "NODE_SCHEME": "http",
    "NODE_MEMORY": "4096",
    "NODE_DISK": "20000",
    "NODE_DAEMON_LISTEN": "8080",
    "NODE_DAEMON_SFTP": "2022",
    "ALLOCATION_PORTS": "25565, 25566,,25567",
}


@pytest.fixture
def make_provision_command() -> Callable[..., ProvisionPanel]:
    """Factory fixture: a valid ``ProvisionPanel`` with keyword overrides.

    Example:
        make_provision_command(allocation_ports=(), node_name="node-2")
    """

    def _make(**overrides: Any) -> ProvisionPanel:
        base: dict[str, Any] = {
            "admin_email": "admin@example.com",
            "admin_username": "admin",
            "admin_password": "s3cret-Passw0rd",
            "admin_first_name": "Ada",
            "admin_last_name": "Admin",
            "location_short": "local",
            "location_long": "Local Datacenter",
            "node_name": "node-1",
            "node_fqdn": "wings.example.com",
            "node_scheme": "http",
            "node_memory": 4096,
            "node_disk": 20000,
            "node_daemon_listen": 8080,
            "node_daemon_sftp": 2022,
            "allocation_ports": (25565, 25566, 25567),
        }
        base.update(overrides)
        return ProvisionPanel(**base)

    return _make


@pytest.fixture
def make_node() -> Callable[..., ResourceNode]:
    """Factory fixture: an unsaved ``ResourceNode`` with keyword overrides."""

    def _make(**overrides: Any) -> ResourceNode:
        base: dict[str, Any] = {
            "uuid": "00000000-0000-0000-0000-000000000001",
            "name": "node-1",
            "location_id": 1,
            "fqdn": "wings.example.com",
            "scheme": "http",
            "memory": 4096,
            "disk": 20000,
            "daemon_listen": 8080,
            "daemon_sftp": 2022,
            "credentials": DaemonCredentials(
                token_id="tokid00000000001", token="t" * 64
            ),
        }
        base.update(overrides)
        return ResourceNode(**base)

    return _make


@pytest.fixture
def seed_env(sqlite_url_migrated: str) -> dict[str, str]:
    """Full seeding environment pointing at a freshly migrated SQLite file."""
    return {
        **SEED_ENV,
        "PANELSEED_DB_URL": sqlite_url_migrated,
        "PANELSEED_APP_KEY": APP_KEY,
    }
