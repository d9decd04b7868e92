"""Unit tests for the custom SQLAlchemy column types."""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import select
from sqlalchemy.dialects.postgresql import dialect as PostgresDialect
from sqlalchemy.dialects.sqlite import dialect as SQLiteDialect

from panelseed.adapters.db.sa_types import UTCDateTime
from panelseed.adapters.db.schema import locations

SEVEN_WEST = timezone(timedelta(hours=-7))


@pytest.mark.parametrize(
    ("dialect", "expected"),
    [
        (SQLiteDialect(), datetime(2024, 1, 1, 12, 0)),
        (PostgresDialect(), datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)),
    ],
    ids=["sqlite", "postgres"],
)
def test_bind_normalizes_to_utc(dialect, expected):
    """Aware values are shifted to UTC; SQLite gets naive UTC wall time."""
    out = UTCDateTime().process_bind_param(datetime(2024, 1, 1, 5, 0, tzinfo=SEVEN_WEST), dialect)
    assert out == expected
    assert (out.tzinfo is None) is (dialect.name == "sqlite")


def test_naive_values_are_taken_as_utc():
    """A naive datetime is read back as the same wall time in UTC."""
    col_type = UTCDateTime()
    stored = col_type.process_bind_param(datetime(2024, 1, 1, 12, 0), SQLiteDialect())
    loaded = col_type.process_result_value(stored, SQLiteDialect())
    assert loaded == datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def test_none_passes_through():
    """NULL stays NULL in both directions."""
    col_type = UTCDateTime()
    assert col_type.process_bind_param(None, SQLiteDialect()) is None
    assert col_type.process_result_value(None, SQLiteDialect()) is None


def test_server_timestamps_read_back_aware(sqlite_engine_memory):
    """created_at filled by the database comes back as aware UTC."""
    with sqlite_engine_memory.begin() as cxn:
        cxn.execute(locations.insert().values(short="local", long="Local"))
        created_at = cxn.execute(select(locations.c.created_at)).scalar_one()
    assert created_at.tzinfo is not None
    assert created_at.utcoffset() == timedelta(0)
