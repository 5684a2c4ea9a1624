from __future__ import annotations

"""
Unit tests for the Record model and row formatting.

Verifies:
1. Header layout and delimiter handling.
2. Timestamp formatting with millisecond precision.
3. Validation of messages, codes and levels.
4. Immutability of records.
"""

import dataclasses
from datetime import datetime

import pytest

from rotalog.domain.constants import LogLevel
from rotalog.domain.errors import InvalidRecordError
from rotalog.domain.records import (
    LogRecord,
    format_header,
    format_record,
    format_timestamp,
)

NOW = datetime(2024, 5, 17, 14, 30, 45, 123456)


def test_header_uses_fixed_column_order() -> None:
    assert format_header(",") == "Level,User,Date,Code,LogMessage"
    assert format_header("|") == "Level|User|Date|Code|LogMessage"


def test_timestamp_has_millisecond_precision() -> None:
    assert format_timestamp(NOW) == "2024-05-17 14:30:45.123"
    assert format_timestamp(NOW.replace(microsecond=7000)) == "2024-05-17 14:30:45.007"


def test_create_stamps_record() -> None:
    record = LogRecord.create("Operation completed successfully.", code=100, user="alice", now=NOW)

    assert record.level is LogLevel.INFO
    assert record.timestamp == "2024-05-17 14:30:45.123"
    assert format_record(record, ",") == (
        "INFO,alice,2024-05-17 14:30:45.123,100,Operation completed successfully."
    )


def test_create_accepts_level_names() -> None:
    record = LogRecord.create("disk full", level="error", user="bob", now=NOW)
    assert record.level is LogLevel.ERROR


def test_fields_round_trip_through_delimiter() -> None:
    record = LogRecord.create("hello world", level=LogLevel.WARNING, code=-3, user="u", now=NOW)
    line = format_record(record, ";")
    assert line.split(";") == ["WARNING", "u", "2024-05-17 14:30:45.123", "-3", "hello world"]


def test_delimiter_inside_message_is_not_escaped() -> None:
    record = LogRecord.create("a,b", user="u", now=NOW)
    assert format_record(record, ",").endswith(",0,a,b")


@pytest.mark.parametrize("message", ["", "   ", None])
def test_empty_message_is_rejected(message) -> None:
    with pytest.raises(InvalidRecordError):
        LogRecord.create(message, user="u", now=NOW)


def test_unknown_level_is_rejected() -> None:
    with pytest.raises(InvalidRecordError, match="Unknown log level"):
        LogRecord.create("x", level="DEBUG", user="u", now=NOW)


@pytest.mark.parametrize("code", ["7", 1.5, True])
def test_non_integer_code_is_rejected(code) -> None:
    with pytest.raises(InvalidRecordError):
        LogRecord.create("x", code=code, user="u", now=NOW)


def test_record_is_immutable() -> None:
    record = LogRecord.create("x", user="u", now=NOW)
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.message = "y"  # type: ignore[misc]
