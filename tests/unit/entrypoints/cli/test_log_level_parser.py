"""Unit tests for the ``-L NAME=LEVEL`` option callback."""

import logging
import types

import click
import pytest

from panelseed.entrypoints.cli.helpers.log_level_parser import (
    DEFAULT_LIB_LEVELS,
    parse_log_level,
)

# click passes a context, but the callback never looks at it
CTX = types.SimpleNamespace()


def test_empty_uses_library_defaults():
    """No items means sqlalchemy and alembic are held at WARNING."""
    assert parse_log_level(CTX, None, ()) == DEFAULT_LIB_LEVELS


def test_defaults_are_not_mutated():
    """Overrides build a new mapping each call."""
    parse_log_level(CTX, None, ("sqlalchemy=DEBUG",))
    assert DEFAULT_LIB_LEVELS["sqlalchemy"] == logging.WARNING


def test_later_items_win():
    """Repeated flags for one logger keep the last level given."""
    out = parse_log_level(CTX, None, ("sqlalchemy=INFO", "sqlalchemy=ERROR"))
    assert out["sqlalchemy"] == logging.ERROR


@pytest.mark.parametrize(
    "value",
    [
        "panelseed=debug, alembic=Error",
        "panelseed=DEBUG alembic=ERROR",
        ("panelseed=DEBUG,alembic=ERROR",),
    ],
)
def test_env_style_lists_and_case(value):
    """Comma/space lists from PANELSEED_LOGGER_LEVELS parse like repeated flags."""
    out = parse_log_level(CTX, None, value)
    assert out["panelseed"] == logging.DEBUG
    assert out["alembic"] == logging.ERROR


@pytest.mark.parametrize("item", ["not-a-pair", "=INFO", "sqlalchemy=LOUD"])
def test_malformed_items_raise_bad_parameter(item):
    """Missing names, missing '=', and unknown levels are rejected."""
    with pytest.raises(click.BadParameter):
        parse_log_level(CTX, None, (item,))
