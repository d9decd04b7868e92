"""Read-side views.

Renders the node agent's configuration file from the stored node record.
The daemon token is read through the node repository, which hands it back
decrypted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import yaml

from panelseed.domain.errors import NodeNotFoundError
from panelseed.domain.models import WILDCARD_IP

if TYPE_CHECKING:
    from panelseed.domain.models import ResourceNode
    from panelseed.interfaces.unit_of_work import AbstractUnitOfWork

DEFAULT_REMOTE = "http://panel:80"


def build_node_config(node: ResourceNode, remote: str = DEFAULT_REMOTE) -> dict[str, Any]:
    """Map a node record onto the agent's nested configuration structure."""
    return {
        "debug": False,
        "uuid": node.uuid,
        "token_id": node.credentials.token_id,
        "token": node.credentials.token,
        "api": {
            "host": WILDCARD_IP,
            "port": int(node.daemon_listen),
            "ssl": {
                "enabled": False,
            },
            "upload_limit": int(node.upload_size),
        },
        "system": {
            "data": node.daemon_base,
            "sftp": {
                "bind_port": int(node.daemon_sftp),
            },
        },
        "allowed_mounts": [],
        "remote": remote,
    }


def node_config(
    node_name: str, uow: AbstractUnitOfWork, remote: str = DEFAULT_REMOTE
) -> dict[str, Any]:
    """Fetch ``node_name`` and return its agent configuration.

    Raises:
        NodeNotFoundError: If no node is called ``node_name``.
        SecretDecryptionError: If the stored daemon token cannot be decrypted.
    """
    with uow:
        if (node := uow.nodes.get_by_name(node_name)) is None:
            raise NodeNotFoundError(node_name)
    return build_node_config(node, remote)


def to_yaml(config: dict[str, Any]) -> str:
    """Serialize ``config`` as block-style YAML, keeping key order."""
    return yaml.safe_dump(
        config,
        default_flow_style=False,
        sort_keys=False,
        indent=2,
        allow_unicode=True,
    )


def render_node_config(
    node_name: str, uow: AbstractUnitOfWork, remote: str = DEFAULT_REMOTE
) -> str:
    """Return the YAML configuration document for ``node_name``.

    Raises:
        NodeNotFoundError: If no node is called ``node_name``.
    """
    return to_yaml(node_config(node_name, uow, remote))
