from __future__ import annotations

import pytest

from weblog_reader.core.errors import MalformedRecordError
from weblog_reader.core.models import LogEntry
from weblog_reader.core.parser import WeblogParser, parse_lines


def test_parse_valid_line() -> None:
    entry = WeblogParser().parse(1, "2025 3 17 9 45")
    assert entry == LogEntry(year=2025, month=3, day=17, hour=9, minute=45)


def test_parse_tolerates_extra_whitespace_and_newline() -> None:
    entry = WeblogParser().parse(1, "  2025\t3  17 9 45\r\n")
    assert entry.fields() == (2025, 3, 17, 9, 45)


def test_parse_accepts_calendar_nonsense() -> None:
    entry = WeblogParser().parse(1, "2024 2 31 10 0")
    assert entry.day == 31
    assert WeblogParser().parse(2, "2024 13 45 24 60").month == 13


def test_parse_accepts_signed_integers() -> None:
    entry = WeblogParser().parse(1, "+2025 -1 1 0 0")
    assert entry.year == 2025
    assert entry.month == -1


def test_too_few_fields() -> None:
    with pytest.raises(MalformedRecordError) as excinfo:
        WeblogParser().parse(7, "2024 13")
    err = excinfo.value
    assert err.line_no == 7
    assert err.line == "2024 13"
    assert "got 2" in str(err)


def test_too_many_fields() -> None:
    with pytest.raises(MalformedRecordError, match="got 6"):
        WeblogParser().parse(1, "2025 3 17 9 45 12")


@pytest.mark.parametrize("token", ["x", "1.5", "1_000", "0x10", "٣"])
def test_non_integer_token(token: str) -> None:
    with pytest.raises(MalformedRecordError, match="not a base-10 integer") as excinfo:
        WeblogParser().parse(3, f"2025 3 {token} 9 45")
    assert excinfo.value.line_no == 3


def test_blank_line_is_malformed() -> None:
    with pytest.raises(MalformedRecordError, match="got 0"):
        WeblogParser().parse(1, "")


def test_parse_lines_numbers_lines_from_one() -> None:
    with pytest.raises(MalformedRecordError) as excinfo:
        parse_lines(["2025 3 17 9 45", "2025 3 17 9 46", "oops"])
    assert excinfo.value.line_no == 3


def test_parse_lines_keeps_input_order() -> None:
    entries = parse_lines(["2025 3 17 9 45", "2024 1 1 0 0"])
    assert [e.year for e in entries] == [2025, 2024]


def test_overlong_integer_is_malformed() -> None:
    line = "1" * 5000 + " 1 1 1 1"
    with pytest.raises(MalformedRecordError, match="too long") as excinfo:
        WeblogParser().parse(4, line)
    assert excinfo.value.line_no == 4
    assert isinstance(excinfo.value.__cause__, ValueError)
