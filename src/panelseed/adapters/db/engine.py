"""Engine construction for the panel store.

Always build engines through :func:`make_engine` so SQLite connections pick
up the PRAGMAs below. Other backends are used as configured.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, make_url

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

SQLITE_NAMES = {"sqlite", "sqlite+pysqlite"}

# Run on every new DBAPI connection. foreign_keys is off by default in SQLite
# and the location/node/allocation chain relies on it.
SQLITE_PRAGMAS = (
    "foreign_keys=ON",
    "journal_mode=WAL",
    "synchronous=NORMAL",
    "temp_store=MEMORY",
)


def is_sqlite(url: str | URL) -> bool:
    """True when ``url`` points at a SQLite database."""
    return make_url(str(url)).get_backend_name() in SQLITE_NAMES


def _apply_sqlite_pragmas(dbapi_conn, _conn_record) -> None:
    cursor = dbapi_conn.cursor()
    try:
        for pragma in SQLITE_PRAGMAS:
            cursor.execute(f"PRAGMA {pragma};")
    finally:
        cursor.close()


def make_engine(url: str | URL, *, echo: bool = False) -> Engine:
    """Create an Engine for ``url``.

    Args:
        url: SQLAlchemy database URL.
        echo: Log every SQL statement (through the ``sqlalchemy.engine`` logger).
    """
    engine = create_engine(url, echo=echo)
    if is_sqlite(url):
        event.listen(engine, "connect", _apply_sqlite_pragmas)
    return engine
