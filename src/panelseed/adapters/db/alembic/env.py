"""Alembic environment for PANELSEED.

Runs the packaged migrations against the panel store.

- The URL is taken from ``-x url=...``, then the ``sqlalchemy.url`` main
  option (set by :func:`panelseed.config.build_alembic_config`), then
  ``PANELSEED_DB_URL``.
- Online runs go through :func:`panelseed.adapters.db.engine.make_engine`, so
  connections get the same SQLite PRAGMAs as the application, and use batch mode for
  SQLite's limited ``ALTER TABLE``.
- Type and server default drift are compared during autogenerate.
"""

import os
from logging.config import fileConfig

from alembic import context

import panelseed.adapters.db.schema  # noqa: F401 # pylint: disable=unused-import
from panelseed.adapters.db.engine import is_sqlite, make_engine
from panelseed.adapters.db.metadata import metadata

# pylint: disable=no-member

COMPARE_OPTIONS = {"compare_type": True, "compare_server_default": True}

if context.config.config_file_name is not None:
    fileConfig(context.config.config_file_name)


def get_url() -> str:
    """Return the database URL to migrate.

    Raises:
        RuntimeError: If no URL is configured anywhere.
    """
    candidates = (
        context.get_x_argument(as_dictionary=True).get("url"),
        context.config.get_main_option("sqlalchemy.url"),
        os.environ.get("PANELSEED_DB_URL"),
    )
    for url in candidates:
        # an unexpanded "%(...)s" placeholder from an ini file counts as unset
        if url and "%(" not in url:
            return url
    raise RuntimeError("Set PANELSEED_DB_URL to your database URL.")


def run_migrations_offline() -> None:
    """Emit the migrations as a SQL script (``db upgrade --sql``)."""
    context.configure(
        url=get_url(),
        target_metadata=metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **COMPARE_OPTIONS,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply the migrations over a live connection."""
    url = get_url()
    engine = make_engine(url)
    try:
        with engine.connect() as connection:
            context.configure(
                connection=connection,
                target_metadata=metadata,
                render_as_batch=is_sqlite(url),
                **COMPARE_OPTIONS,
            )
            with context.begin_transaction():
                context.run_migrations()
    finally:
        engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
