"""Wire and database timestamp conversions."""

from datetime import datetime, timedelta, timezone

from arcade.core.timestamp import format_timestamp, parse_timestamp, to_db


def test_format_has_microseconds_and_no_zone() -> None:
    value = datetime(2023, 5, 1, 12, 30, 15, 123456, tzinfo=timezone.utc)
    assert format_timestamp(value) == "2023-05-01T12:30:15.123456"


def test_parse_is_utc() -> None:
    parsed = parse_timestamp("2023-05-01T12:30:15.123456")
    assert parsed == datetime(2023, 5, 1, 12, 30, 15, 123456, tzinfo=timezone.utc)


def test_format_converts_to_utc() -> None:
    value = datetime(2023, 5, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))
    assert format_timestamp(value) == "2023-05-01T12:00:00.000000"


def test_to_db_is_naive_utc() -> None:
    value = datetime(2023, 5, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))
    assert to_db(value) == datetime(2023, 5, 1, 12, 0)
