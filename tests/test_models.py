from __future__ import annotations

from datetime import datetime
import time

import pytest

from src.data.errors import FieldDecodeError, MalformedResponseError
from src.data.models import format_local_datetime, parse_coord, parse_local_datetime


def test_parse_coord_accepts_int_and_digit_string() -> None:
    assert parse_coord(12345) == 12345
    assert parse_coord("12345") == 12345
    assert parse_coord(0) == 0
    assert parse_coord(999_999) == 999_999


@pytest.mark.parametrize("value", [-1, 1_000_000, "abc", "-1", "1000000", "", 12.5, None, True, [1]])
def test_parse_coord_rejects_invalid_values(value) -> None:
    with pytest.raises(FieldDecodeError) as exc_info:
        parse_coord(value)

    assert repr(value) in str(exc_info.value)


def test_field_decode_error_is_malformed_response() -> None:
    with pytest.raises(MalformedResponseError):
        parse_coord("abc")


def test_parse_local_datetime_is_local_wall_time() -> None:
    parsed = parse_local_datetime("2020-01-02 03:04:05")

    assert parsed.tzinfo is not None
    assert (parsed.year, parsed.month, parsed.day) == (2020, 1, 2)
    assert (parsed.hour, parsed.minute, parsed.second) == (3, 4, 5)
    assert parsed == datetime(2020, 1, 2, 3, 4, 5).astimezone()


@pytest.mark.parametrize(
    "value",
    [
        "2020-01-02T03:04:05",
        "2020-1-2 3:4:5",
        "2020-01-02 03:04",
        "2020-13-02 03:04:05",
        "2020-01-02 03:04:05+01:00",
        "",
        20200102,
        None,
    ],
)
def test_parse_local_datetime_rejects_other_shapes(value) -> None:
    with pytest.raises(FieldDecodeError) as exc_info:
        parse_local_datetime(value)

    assert repr(value) in str(exc_info.value)


def test_datetime_round_trip() -> None:
    parsed = parse_local_datetime("2021-06-30 23:59:01")

    assert format_local_datetime(parsed) == "2021-06-30 23:59:01"
    assert parse_local_datetime(format_local_datetime(parsed)) == parsed


def test_parse_coord_rejects_overlong_digit_string() -> None:
    value = "1" * 5000

    with pytest.raises(FieldDecodeError) as exc_info:
        parse_coord(value)

    assert "invalid coordinate '1111" in str(exc_info.value)


@pytest.fixture()
def zurich_timezone(monkeypatch):
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "Europe/Zurich")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


def test_parse_local_datetime_rejects_dst_gap(zurich_timezone) -> None:
    with pytest.raises(FieldDecodeError) as exc_info:
        parse_local_datetime("2021-03-28 02:30:00")

    assert "2021-03-28 02:30:00" in str(exc_info.value)


def test_datetime_round_trip_around_dst_change(zurich_timezone) -> None:
    for value in ["2021-03-28 01:59:59", "2021-03-28 03:00:00", "2021-10-31 02:30:00"]:
        assert format_local_datetime(parse_local_datetime(value)) == value
