"""``panelseed node-config``: print the node agent's YAML configuration.

The document is written to stdout with nothing else around it, so it can be
redirected straight into the agent's ``config.yml``.
"""

import logging

import click

from panelseed.bootstrap import bootstrap
from panelseed.domain.errors import ConfigurationError, StoreError
from panelseed.service_layer import views

logger = logging.getLogger(__name__)


@click.command("node-config")
@click.option(
    "--node-name",
    envvar="NODE_NAME",
    required=True,
    show_envvar=True,
    help="Name of the node to render.",
)
@click.option(
    "--remote",
    envvar="PANEL_REMOTE_URL",
    default=views.DEFAULT_REMOTE,
    show_default=True,
    show_envvar=True,
    help="Panel URL the agent calls back to.",
)
def node_config(node_name: str, remote: str) -> None:
    """Render the agent configuration for an existing node."""
    try:
        app = bootstrap()
        document = views.render_node_config(node_name, app.uow, remote)
    except (ConfigurationError, StoreError) as e:
        logger.debug("Cannot render configuration for %s", node_name, exc_info=True)
        raise click.ClickException(str(e)) from e
    click.echo(document, nl=False)
