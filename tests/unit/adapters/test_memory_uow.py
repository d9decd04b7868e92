"""Unit tests for the in-memory unit of work."""

import pytest

from panelseed.adapters.unit_of_work import InMemoryUnitOfWork
from panelseed.domain.models import Zone


def test_commit_publishes_working_copy():
    """Committed writes survive leaving the context."""
    uow = InMemoryUnitOfWork()
    with uow:
        uow.zones.add(Zone(short="local", long="Local"))
        uow.commit()

    with uow:
        assert uow.zones.get_by_short("local") is not None
    assert uow.commits == 1


def test_exit_without_commit_discards():
    """Leaving the context without commit rolls back."""
    uow = InMemoryUnitOfWork()
    with uow:
        uow.zones.add(Zone(short="local", long="Local"))

    with uow:
        assert uow.zones.get_by_short("local") is None
    assert uow.commits == 0


def test_rollback_keeps_earlier_commits():
    """Rolling back only drops writes since the last commit."""
    uow = InMemoryUnitOfWork()
    with pytest.raises(RuntimeError):
        with uow:
            uow.zones.add(Zone(short="a", long="A"))
            uow.commit()
            uow.zones.add(Zone(short="b", long="B"))
            raise RuntimeError("boom")

    with uow:
        assert uow.zones.get_by_short("a") is not None
        assert uow.zones.get_by_short("b") is None
