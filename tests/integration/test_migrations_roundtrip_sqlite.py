"""Alembic round-trip smoke test for SQLite.

Exercises the full *upgrade → downgrade* path against a temporary,
file-backed SQLite database to ensure:
  - `upgrade head` creates the four panel tables, and
  - `downgrade base` drops them again.

A file (not :memory:) keeps Alembic's schema changes visible across
connections within the test.
"""

from __future__ import annotations

from alembic import command
from sqlalchemy import create_engine, inspect

from panelseed import config

PANEL_TABLES = {"users", "locations", "nodes", "allocations"}


def test_alembic_upgrade_downgrade_roundtrip_sqlite_tmp(sqlite_url_file: str):
    """Upgrade to head (tables exist) → downgrade to base (tables dropped)."""
    command.upgrade(config.build_alembic_config(sqlite_url_file), "head")
    eng = create_engine(sqlite_url_file)

    assert PANEL_TABLES <= set(inspect(eng).get_table_names())

    command.downgrade(config.build_alembic_config(sqlite_url_file), "base")

    assert not PANEL_TABLES & set(inspect(eng).get_table_names())
    eng.dispose()


def test_migrated_constraints_follow_naming_convention(sqlite_engine_file):
    """The migration names keys and checks the way the metadata convention does."""
    inspector = inspect(sqlite_engine_file)

    uniques = {
        uc["name"] for uc in inspector.get_unique_constraints("allocations")
    } | {ix["name"] for ix in inspector.get_indexes("allocations") if ix["unique"]}
    checks = {ck["name"] for ck in inspector.get_check_constraints("allocations")}
    node_checks = {ck["name"] for ck in inspector.get_check_constraints("nodes")}

    # pylint: disable=magic-value-comparison
    assert "uq_allocations_node_id_ip_port" in uniques
    assert "ck_allocations_port_range" in checks
    assert "ck_nodes_scheme" in node_checks


def test_migrated_schema_matches_metadata_columns(sqlite_engine_file):
    """Every column declared in the metadata exists after migrating."""
    # pylint: disable=import-outside-toplevel
    from panelseed.adapters.db.metadata import metadata

    inspector = inspect(sqlite_engine_file)
    for table_name in PANEL_TABLES:
        migrated = {col["name"] for col in inspector.get_columns(table_name)}
        declared = {col.name for col in metadata.tables[table_name].columns}
        assert declared == migrated, table_name
