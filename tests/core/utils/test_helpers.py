"""
Tests for prioflow.core.utils.helpers
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from prioflow.core.errors import InvalidDeadlineError
from prioflow.core.utils.helpers import (
    ensure_utc,
    format_deadline,
    parse_deadline,
    parse_iso_datetime,
)


class TestParseIsoDatetime:
    def test_zulu_suffix(self):
        assert parse_iso_datetime("2026-01-05T10:00:00Z") == datetime(
            2026, 1, 5, 10, 0, tzinfo=timezone.utc
        )

    def test_date_only(self):
        assert parse_iso_datetime("2026-01-05") == datetime(2026, 1, 5)

    @pytest.mark.parametrize("text,expected", [
        ("20260105T0930", datetime(2026, 1, 5, 9, 30)),
        ("2026-W02-1", datetime(2026, 1, 5)),
        ("2026-01-05 09:30", datetime(2026, 1, 5, 9, 30)),
    ])
    def test_extended_grammar(self, text, expected):
        assert parse_iso_datetime(text) == expected

    def test_invalid(self):
        with pytest.raises(ValueError):
            parse_iso_datetime("tomorrow")


class TestParseDeadline:
    def test_none(self):
        assert parse_deadline(None) is None

    def test_aware_datetime_converted_to_utc(self):
        plus_two = timezone(timedelta(hours=2))
        result = parse_deadline(datetime(2026, 1, 5, 12, 0, tzinfo=plus_two))
        assert result == datetime(2026, 1, 5, 10, 0, tzinfo=timezone.utc)
        assert result.tzinfo == timezone.utc

    def test_naive_datetime_is_utc(self):
        assert parse_deadline(datetime(2026, 1, 5, 12, 0)) == datetime(
            2026, 1, 5, 12, 0, tzinfo=timezone.utc
        )

    def test_date_is_midnight_utc(self):
        assert parse_deadline(date(2026, 1, 5)) == datetime(2026, 1, 5, tzinfo=timezone.utc)

    def test_string_with_offset(self):
        assert parse_deadline("2026-01-05T12:00:00+02:00") == datetime(
            2026, 1, 5, 10, 0, tzinfo=timezone.utc
        )

    def test_string_with_whitespace(self):
        assert parse_deadline(" 2026-01-05 ") == datetime(2026, 1, 5, tzinfo=timezone.utc)

    @pytest.mark.parametrize("value", ["soon", "", "2026-02-30", 3.5, True, ["2026-01-05"]])
    def test_invalid(self, value):
        with pytest.raises(InvalidDeadlineError) as exc:
            parse_deadline(value)
        assert exc.value.value == value
        assert exc.value.task_id is None

    @pytest.mark.parametrize("value", [
        datetime(1, 1, 1, tzinfo=timezone(timedelta(hours=5))),
        datetime(9999, 12, 31, 23, tzinfo=timezone(timedelta(hours=-5))),
        "0001-01-01T00:00:00+05:00",
    ])
    def test_out_of_range_after_utc_conversion(self, value):
        with pytest.raises(InvalidDeadlineError) as exc:
            parse_deadline(value)
        assert exc.value.value == value
        assert isinstance(exc.value.__cause__, OverflowError)


def test_ensure_utc_keeps_aware_instant():
    value = datetime(2026, 1, 5, 12, 0, tzinfo=timezone(timedelta(hours=-5)))
    assert ensure_utc(value) == value


@pytest.mark.parametrize("value,expected", [
    (None, "-"),
    ("2026-01-05", "2026-01-05"),
    (date(2026, 1, 5), "2026-01-05"),
    (datetime(2026, 1, 5, 9, 30), "2026-01-05T09:30:00"),
])
def test_format_deadline(value, expected):
    assert format_deadline(value) == expected
