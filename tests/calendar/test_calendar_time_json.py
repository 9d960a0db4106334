"""Tests for CalendarTime JSON and ISO 8601 text handling."""

import json

import pytest
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from bankcal.calendar.calendar_time import (
    ZERO_TIME,
    CalendarTime,
    CalendarTimeEncoder,
    TimeParseError,
    new_time,
    now,
    parse,
)


class TestRoundTrip:

    def test_now_round_trips(self) -> None:
        t1 = now(timezone.utc)
        t2 = CalendarTime.from_json(t1.to_json())
        assert t1.equal(t2)

    def test_eastern_round_trips(self) -> None:
        t1 = new_time(datetime(2022, 7, 6, 20, 1, 9, 123456, tzinfo=ZoneInfo("America/New_York")))
        t2 = CalendarTime.from_json(t1.to_json())
        assert t1 == t2
        assert t2.time.utcoffset() == timedelta(hours=-4)

    def test_to_json_is_a_json_string(self) -> None:
        t = parse("2018-11-18T09:04:23-08:00")
        assert t.to_json() == '"2018-11-18T09:04:23-08:00"'

    def test_from_json_accepts_bytes(self) -> None:
        t = CalendarTime.from_json(b'"2018-11-27T00:54:53Z"')
        assert t == new_time(datetime(2018, 11, 27, 0, 54, 53, tzinfo=timezone.utc))


class TestParsing:

    def test_utc_z_suffix(self) -> None:
        t = CalendarTime.from_json('"2018-11-27T00:54:53Z"')
        assert not t.is_zero()

    def test_empty_is_zero(self) -> None:
        t = CalendarTime.from_json('""')
        assert t.is_zero()
        assert t.time == ZERO_TIME

    def test_rfc3339(self) -> None:
        text = datetime.now(timezone.utc).astimezone().isoformat(timespec="seconds")
        t = CalendarTime.from_json(json.dumps(text))
        assert not t.is_zero()

    def test_javascript_iso_string(self) -> None:
        # Generated with (new Date).toISOString() in Chrome and Firefox
        doc = json.loads('{"time": "2018-12-14T20:36:58.789Z"}')
        when = parse(doc["time"])
        assert str(when) == "2018-12-14 20:36:58.789000+00:00"

    def test_missing_offset_is_utc(self) -> None:
        assert parse("2018-11-27T00:54:53").tzinfo is timezone.utc

    def test_malformed_names_input(self) -> None:
        with pytest.raises(TimeParseError, match="not a time"):
            parse("not a time")

    def test_malformed_json_string(self) -> None:
        with pytest.raises(TimeParseError, match="2018-13-45"):
            CalendarTime.from_json('"2018-13-45T00:00:00Z"')

    def test_non_string_json(self) -> None:
        with pytest.raises(TimeParseError):
            CalendarTime.from_json("12345")

    def test_invalid_json(self) -> None:
        with pytest.raises(TimeParseError):
            CalendarTime.from_json("{")

    def test_undecodable_bytes_names_input(self) -> None:
        with pytest.raises(TimeParseError, match="2018") as exc_info:
            CalendarTime.from_json(b'"\xff\xfe2018"')
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_parse_error_is_value_error(self) -> None:
        assert issubclass(TimeParseError, ValueError)


class TestEncoder:

    def test_nested_document(self) -> None:
        t = parse("2018-11-18T09:04:23-08:00")
        doc = {"id": "abc", "effective": t}
        assert json.dumps(doc, cls=CalendarTimeEncoder) == (
            '{"id": "abc", "effective": "2018-11-18T09:04:23-08:00"}'
        )

    def test_other_types_still_fail(self) -> None:
        with pytest.raises(TypeError):
            json.dumps({"x": object()}, cls=CalendarTimeEncoder)
