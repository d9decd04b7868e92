"""Unit tests for panel records."""

import dataclasses

import pytest

from panelseed.domain.models import (
    DEFAULT_DAEMON_BASE,
    WILDCARD_IP,
    DaemonCredentials,
    PortAllocation,
)


def test_node_defaults(make_node) -> None:
    """Seeded nodes are public, proxied, live and never overallocated."""
    node = make_node()
    assert node.description == "Auto-configured node"
    assert node.public is True
    assert node.behind_proxy is True
    assert node.maintenance_mode is False
    assert (node.memory_overallocate, node.disk_overallocate) == (0, 0)
    assert node.upload_size == 100
    assert node.daemon_base == DEFAULT_DAEMON_BASE
    assert node.id is None


def test_allocation_defaults_to_wildcard_address() -> None:
    """Allocations bind every interface and start unassigned."""
    allocation = PortAllocation(node_id=1, port=25565)
    assert allocation.ip == WILDCARD_IP
    assert allocation.ip_alias is None
    assert allocation.server_id is None


def test_credentials_repr_hides_token() -> None:
    """The daemon token never shows up in reprs (and so in logs)."""
    credentials = DaemonCredentials(token_id="abcdefghijklmnop", token="supersecret")
    assert "supersecret" not in repr(credentials)
    assert "abcdefghijklmnop" in repr(credentials)


def test_records_are_immutable(make_node) -> None:
    """Records are frozen; repositories hand back new copies instead."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        make_node().name = "other"  # type: ignore[misc]
