"""``panelseed seed``: idempotently provision the panel store.

Every option is read from the environment variable the container images
already set (``ADMIN_EMAIL``, ``NODE_NAME``, ...). Progress lines go to
stdout, one per phase; diagnostics go to stderr through logging.

Failure modes
- Missing or malformed setting → ``ClickException`` naming the variable.
- Store error part-way (write failure, undecryptable node token) →
  ``ClickException``; earlier phases stay committed.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from panelseed import config
from panelseed.bootstrap import bootstrap
from panelseed.domain.errors import ConfigurationError, StoreError
from panelseed.service_layer.commands import SCHEMES, ProvisionPanel
from panelseed.service_layer.handlers import Entity

from .helpers import info, success

if TYPE_CHECKING:
    from panelseed.service_layer.handlers import StepOutcome

logger = logging.getLogger(__name__)


def _parse_ports(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter,  # pylint: disable=unused-argument
    value: str | None,
) -> tuple[int, ...]:
    try:
        return config.parse_port_list("ALLOCATION_PORTS", value or "")
    except ConfigurationError as e:
        raise click.BadParameter(e.reason) from e


def _report(cmd: ProvisionPanel):
    """Return an observer echoing one progress line per phase for ``cmd``."""

    def observe(step: StepOutcome) -> None:
        if step.entity is Entity.ADMIN:
            if step.existed:
                info("Admin user already exists.", err=False)
            else:
                success(f"Admin user created: {cmd.admin_email}", err=False)
        elif step.entity is Entity.LOCATION:
            if step.existed:
                info("Location already exists.", err=False)
            else:
                success(
                    f"Location created: {cmd.location_long} ({cmd.location_short})",
                    err=False,
                )
        elif step.entity is Entity.NODE:
            if step.existed:
                info("Node already exists.", err=False)
            else:
                success(f"Node created: {cmd.node_name} (ID: {step.record_id})", err=False)
        elif not cmd.allocation_ports:
            info("No allocation ports configured.", err=False)
        elif step.existed:
            info("Allocations already exist.", err=False)
        else:
            success(f"Created {step.created} allocations.", err=False)

    return observe


@click.command()
@click.option("--admin-email", envvar="ADMIN_EMAIL", required=True, show_envvar=True)
@click.option("--admin-username", envvar="ADMIN_USERNAME", required=True, show_envvar=True)
@click.option(
    "--admin-password",
    envvar="ADMIN_PASSWORD",
    required=True,
    show_envvar=True,
    help="Plaintext password; stored only as a bcrypt hash.",
)
@click.option(
    "--admin-first-name", envvar="ADMIN_FIRST_NAME", required=True, show_envvar=True
)
@click.option(
    "--admin-last-name", envvar="ADMIN_LAST_NAME", required=True, show_envvar=True
)
@click.option(
    "--location-short",
    envvar="NODE_LOCATION_SHORT",
    default=config.DEFAULT_LOCATION_SHORT,
    show_default=True,
    show_envvar=True,
    help="Short code the location is looked up by.",
)
@click.option(
    "--location",
    "location_long",
    envvar="NODE_LOCATION",
    required=True,
    show_envvar=True,
    help="Human-readable location description.",
)
@click.option("--node-name", envvar="NODE_NAME", required=True, show_envvar=True)
@click.option("--node-fqdn", envvar="NODE_FQDN", required=True, show_envvar=True)
@click.option(
    "--node-scheme",
    envvar="NODE_SCHEME",
    type=click.Choice(SCHEMES),
    required=True,
    show_envvar=True,
)
@click.option(
    "--node-memory", envvar="NODE_MEMORY", type=int, required=True, show_envvar=True
)
@click.option("--node-disk", envvar="NODE_DISK", type=int, required=True, show_envvar=True)
@click.option(
    "--node-daemon-listen",
    envvar="NODE_DAEMON_LISTEN",
    type=int,
    required=True,
    show_envvar=True,
)
@click.option(
    "--node-daemon-sftp",
    envvar="NODE_DAEMON_SFTP",
    type=int,
    required=True,
    show_envvar=True,
)
@click.option(
    "--allocation-ports",
    envvar="ALLOCATION_PORTS",
    callback=_parse_ports,
    default="",
    show_envvar=True,
    help="Comma-separated ports to allocate on 0.0.0.0 (e.g. 25565,25566).",
)
def seed(  # pylint: disable=too-many-arguments, too-many-locals, too-many-positional-arguments
    admin_email: str,
    admin_username: str,
    admin_password: str,
    admin_first_name: str,
    admin_last_name: str,
    location_short: str,
    location_long: str,
    node_name: str,
    node_fqdn: str,
    node_scheme: str,
    node_memory: int,
    node_disk: int,
    node_daemon_listen: int,
    node_daemon_sftp: int,
    allocation_ports: tuple[int, ...],
) -> None:
    """Create the admin user, location, node and allocations if missing."""
    try:
        cmd = ProvisionPanel(
            admin_email=admin_email,
            admin_username=admin_username,
            admin_password=admin_password,
            admin_first_name=admin_first_name,
            admin_last_name=admin_last_name,
            location_short=location_short,
            location_long=location_long,
            node_name=node_name,
            node_fqdn=node_fqdn,
            node_scheme=node_scheme,
            node_memory=node_memory,
            node_disk=node_disk,
            node_daemon_listen=node_daemon_listen,
            node_daemon_sftp=node_daemon_sftp,
            allocation_ports=allocation_ports,
        )
        app = bootstrap(observer=_report(cmd))
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    try:
        app.message_bus.handle(cmd)
    except StoreError as e:
        logger.error("Seeding stopped: %s", e)
        raise click.ClickException(str(e)) from e

    success("Seeding completed successfully!", err=False)
