"""PANELSEED CLI entry point.

Defines the top-level ``panelseed`` command (via Click-Extra) and registers
the subcommands.

Available commands
- ``panelseed seed``: idempotently create the admin user, location, node and
  port allocations from the environment.
- ``panelseed node-config``: print the node agent's YAML configuration.
- ``panelseed db``: forward-only schema management (upgrade/current/heads/status).

Examples
    $ panelseed db upgrade --force
    $ panelseed seed
    $ panelseed node-config --node-name node-1 > /etc/pterodactyl/config.yml
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from panelseed import __version__
from panelseed.logging import configure_logging, console_level, log_startup

from .db import db as db_group
from .helpers.log_level_parser import parse_log_level
from .node_config import node_config
from .seed import seed

logger = logging.getLogger(__name__)


HELP = """PANELSEED command-line interface.

    PANELSEED brings a freshly deployed game-server panel to a usable state:
    it seeds the first administrator, location, node and port allocations
    without duplicating anything on re-runs, and renders the configuration
    file the node agent needs to register with the panel.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option("-v", "--verbose", "verbose_count", count=True, help="More console output (repeatable).")
@click.option("-q", "--quiet", "quiet_count", count=True, help="Less console output (repeatable).")
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Show timestamps, logger names and source locations on the console.",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Where the flight recorder writes its buffer.",
    default=Path(user_log_dir("panelseed", appauthor=False)) / "latest.log",
    envvar="PANELSEED_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="PANELSEED_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Flight recorder size, in records.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Buffer recent DEBUG records in memory and write them to --log-path "
        "as soon as something is logged at WARNING or above."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Write the buffered records to --log-path on exit even when nothing went wrong.",
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar="PANELSEED_LOGGER_LEVELS",
    help=(
        "Minimum level for one logger, as NAME=LEVEL. Repeatable, or a "
        "comma separated list in PANELSEED_LOGGER_LEVELS."
    ),
    default=("sqlalchemy=WARNING", "alembic=WARNING"),
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def panelseed(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """PANELSEED command-line interface."""

    level = console_level(verbose_count, quiet_count)

    recorder_path = log_path if flight_recorder else None
    handlers = configure_logging(
        level=level,
        debug_mode=debug,
        color=ctx.color is not False,  # None or True => allow color
        log_path=recorder_path,
        flight_capacity=flight_recorder_capacity,
        force_flush=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=recorder_path,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


panelseed.add_command(db_group)
panelseed.add_command(seed)
panelseed.add_command(node_config)
