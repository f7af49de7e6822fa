import pytest

from unixkit.core.offsets import (
    End,
    Start,
    format_offset,
    parse_byte_offset,
    parse_count,
    parse_line_offset,
    parse_offset,
    start_index,
)
from unixkit.errors import ConfigurationError


def test_parse_offset() -> None:
    assert parse_offset("3") == End(3)
    assert parse_offset("+3") == Start(3)
    assert parse_offset("-3") == End(3)
    assert parse_offset("0") == End(0)
    assert parse_offset("+0") == Start(0)
    assert parse_offset(str(2**64 - 1)) == End(2**64 - 1)
    assert parse_offset(f"+{2**64 - 1}") == Start(2**64 - 1)
    assert parse_offset("3.14") is None
    assert parse_offset("foo") is None
    assert parse_offset("") is None


def test_offset_errors_name_the_unit() -> None:
    with pytest.raises(ConfigurationError, match="illegal line count -- foo"):
        parse_line_offset("foo")
    with pytest.raises(ConfigurationError, match="illegal byte count -- 1.5"):
        parse_byte_offset("1.5")


def test_parse_count() -> None:
    assert parse_count("0", unit="line") == 0
    assert parse_count("12", unit="byte") == 12
    with pytest.raises(ConfigurationError, match="illegal line count -- -1"):
        parse_count("-1", unit="line")
    with pytest.raises(ConfigurationError, match="illegal byte count -- x"):
        parse_count("x", unit="byte")


def test_start_index() -> None:
    assert start_index(Start(0), 0) is None
    assert start_index(Start(0), 1) == 0
    assert start_index(End(0), 1) is None
    assert start_index(Start(1), 0) is None
    assert start_index(Start(2), 1) is None
    assert start_index(Start(1), 10) == 0
    assert start_index(Start(2), 10) == 1
    assert start_index(Start(3), 10) == 2
    assert start_index(End(1), 10) == 9
    assert start_index(End(2), 10) == 8
    assert start_index(End(3), 10) == 7
    assert start_index(End(20), 10) == 0


def test_format_offset() -> None:
    assert format_offset(Start(4)) == "+4"
    assert format_offset(End(4)) == "4"
