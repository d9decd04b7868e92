"""Logging helpers used by the PANELSEED CLI.

Console output goes through Rich on stderr so stdout stays reserved for the
seeder's progress lines and the rendered YAML document. An optional in-memory
"flight recorder" buffers DEBUG-level records and writes them to a file when
something goes wrong.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

import alembic
import sqlalchemy
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "panelseed"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Annotate third-party log records with a short prefix.

    Records from outside the project get ``record.prefix`` set to a bracketed
    top-level logger name such as "[sqlalchemy]"; project records get "".
    Never filters anything out.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def console_level(verbose: int, quiet: int) -> int:
    """Map ``-v``/``-q`` counts onto a level, starting from WARNING."""
    level = logging.WARNING - 10 * verbose + 10 * quiet
    return max(logging.DEBUG, min(logging.CRITICAL, level))


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler writing to stderr.

    Args:
        level: Minimum level for console output (overridden to DEBUG in debug_mode).
        debug_mode: When True, show timestamps, logger names and source paths.
        color: Enable color output when True (mirrors click-extra's --color).

    Returns:
        RichHandler: Configured handler suitable to attach to the root logger.
    """
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    if debug_mode:
        handler.setFormatter(
            logging.Formatter(fmt="%(asctime)s %(name)s: %(message)s")
        )
    else:
        handler.setFormatter(logging.Formatter(fmt="%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Configure and return an in-memory flight recorder backed by a file.

    Up to ``capacity`` records are buffered and written to ``path`` when a
    record at ``flush_level`` or above arrives (or on close when
    ``flush_on_close`` is set).
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(process)d] %(levelname)s %(name)s:%(lineno)d: %(message)s"
        )
    )

    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def configure_logging(  # pylint: disable=too-many-arguments
    *,
    level: int,
    debug_mode: bool,
    color: bool,
    log_path: Path | None,
    flight_capacity: int,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> list[logging.Handler]:
    """Install the console handler (and flight recorder) on the root logger.

    Args:
        level: Console level.
        debug_mode: Developer diagnostics on the console.
        color: Allow colored console output.
        log_path: Flight recorder file, or ``None`` to disable the recorder.
        flight_capacity: Flight recorder buffer size in records.
        force_flush: Flush the flight recorder on exit even without warnings.
        logger_levels: Per-logger minimum levels (e.g. quiet ``sqlalchemy``).

    Returns:
        The handlers attached to the root logger.
    """
    handlers: list[logging.Handler] = [
        config_console_handler(level=level, debug_mode=debug_mode, color=color)
    ]
    if log_path is not None:
        handlers.append(
            config_flight_recorder(
                path=log_path, capacity=flight_capacity, flush_on_close=force_flush
            )
        )

    logging.basicConfig(
        level=logging.DEBUG,  # capture all levels; handlers filter
        handlers=handlers,
        force=True,
    )
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)
    return handlers


def log_startup(
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    logger_levels: dict[str, int],
) -> None:
    """Log a one-line startup summary and DEBUG-level diagnostics."""
    logger.info(
        "PANELSEED %s, console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if log_path is not None else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug("Alembic: %s", alembic.__version__)
    logger.debug("SQLAlchemy: %s", sqlalchemy.__version__)
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if log_path is not None:
        logger.debug("Flight recorder: path=%s", log_path)
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
        or "<none>",
    )
