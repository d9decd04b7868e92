"""Unit and property tests for port parsing in :mod:`panelseed.config`."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from panelseed.config import parse_port, parse_port_list
from panelseed.domain.errors import ConfigurationError

valid_ports = st.integers(min_value=1, max_value=65535)


class TestParsePort:
    """Tests for single port parsing."""

    @staticmethod
    @pytest.mark.parametrize(("raw", "expected"), [("1", 1), (" 8080 ", 8080), (65535, 65535)])
    def test_accepts_valid_ports(raw, expected):
        """Integers and trimmed numeric strings in 1..65535 are accepted."""
        assert parse_port("NODE_DAEMON_LISTEN", raw) == expected

    @staticmethod
    @pytest.mark.parametrize("raw", ["0", "65536", "-1", "http", "80.5", ""])
    def test_rejects_invalid_ports(raw):
        """Out of range or non-numeric values raise ConfigurationError naming the setting."""
        with pytest.raises(ConfigurationError) as exc_info:
            parse_port("NODE_DAEMON_SFTP", raw)
        assert exc_info.value.name == "NODE_DAEMON_SFTP"


class TestParsePortList:
    """Tests for comma-separated port lists."""

    @staticmethod
    def test_trims_and_skips_empty_entries():
        """Whitespace is trimmed and empty fragments are ignored."""
        assert parse_port_list("ALLOCATION_PORTS", " 25565, 25566,,25567 ,") == (
            25565,
            25566,
            25567,
        )

    @staticmethod
    @pytest.mark.parametrize("raw", [None, "", " ", ",,"])
    def test_empty_input_is_no_ports(raw):
        """Nothing configured means no allocations."""
        assert parse_port_list("ALLOCATION_PORTS", raw) == ()

    @staticmethod
    def test_duplicates_keep_first_occurrence():
        """Repeated ports collapse to one, in first-seen order."""
        assert parse_port_list("ALLOCATION_PORTS", "3,1,3,2,1") == (3, 1, 2)

    @staticmethod
    @pytest.mark.parametrize("raw", ["25565,abc", "25565,70000", "0"])
    def test_any_bad_entry_fails_the_whole_list(raw):
        """A single malformed entry aborts parsing."""
        with pytest.raises(ConfigurationError, match="ALLOCATION_PORTS"):
            parse_port_list("ALLOCATION_PORTS", raw)


@pytest.mark.property
@given(st.lists(valid_ports, max_size=30), st.sampled_from([",", ", ", " ,", ",,"]))
def test_parse_port_list_preserves_first_seen_order(ports, separator):
    """Joining valid ports with any separator parses back to the deduplicated list."""
    raw = separator.join(str(p) for p in ports)
    assert parse_port_list("ALLOCATION_PORTS", raw) == tuple(dict.fromkeys(ports))


@pytest.mark.property
@given(st.integers().filter(lambda p: not 1 <= p <= 65535))
def test_parse_port_rejects_everything_out_of_range(port):
    """Every integer outside 1..65535 is refused."""
    with pytest.raises(ConfigurationError):
        parse_port("ALLOCATION_PORTS", port)
