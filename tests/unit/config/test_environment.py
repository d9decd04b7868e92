"""Unit tests for environment lookups and Alembic configuration."""

from pathlib import Path

import pytest

from panelseed import config


def test_get_db_url_reads_environment(monkeypatch):
    """The database URL comes from PANELSEED_DB_URL."""
    monkeypatch.setenv("PANELSEED_DB_URL", "sqlite:///panel.db")
    assert config.get_db_url() == "sqlite:///panel.db"


@pytest.mark.parametrize("value", [None, ""])
def test_get_db_url_missing(monkeypatch, value):
    """Unset or empty PANELSEED_DB_URL raises DatabaseUrlNotSetError."""
    if value is None:
        monkeypatch.delenv("PANELSEED_DB_URL", raising=False)
    else:
        monkeypatch.setenv("PANELSEED_DB_URL", value)
    with pytest.raises(config.DatabaseUrlNotSetError, match="PANELSEED_DB_URL"):
        config.get_db_url()


def test_get_app_key_missing(monkeypatch):
    """Unset PANELSEED_APP_KEY raises AppKeyNotSetError."""
    monkeypatch.delenv("PANELSEED_APP_KEY", raising=False)
    with pytest.raises(config.AppKeyNotSetError):
        config.get_app_key()


def test_alembic_config_points_at_packaged_scripts():
    """The Alembic config carries the URL and the packaged script directory."""
    cfg = config.build_alembic_config("sqlite:///panel.db")
    assert cfg.get_main_option("sqlalchemy.url") == "sqlite:///panel.db"
    script_location = Path(cfg.get_main_option("script_location"))
    assert (script_location / "env.py").is_file()
    assert (script_location / "versions").is_dir()


def test_alembic_config_without_url():
    """Offline commands (e.g. heads) don't need a URL."""
    cfg = config.build_alembic_config()
    assert cfg.get_main_option("sqlalchemy.url") is None
