"""Tests for date parsing and formatting."""

from datetime import date, datetime, timedelta, timezone

import pytest

from ics_builder.utils.date_utils import format_date, format_timestamp, parse_date_like
from ics_builder.utils.exceptions import InvalidDateError


class TestFormatDate:
    """DATE and DATE-TIME tokens."""

    def test_full_day_has_no_time_component(self):
        assert format_date("12/25/2013", full_day=True) == "20131225"

    def test_timed_uses_local_wall_clock(self):
        assert format_date("12/25/2013", full_day=False) == "20131225T000000"

    def test_single_digit_month_and_day_are_padded(self):
        assert format_date("4/1/2014", full_day=False) == "20140401T000000"

    def test_iso_string_with_time(self):
        assert format_date("2014-08-18T18:30:15", full_day=False) == "20140818T183015"

    def test_date_object_is_midnight(self):
        assert format_date(date(2013, 12, 25), full_day=False) == "20131225T000000"

    def test_datetime_object(self):
        value = datetime(2013, 12, 25, 9, 5, 7)
        assert format_date(value, full_day=True) == "20131225"
        assert format_date(value, full_day=False) == "20131225T090507"

    def test_aware_datetime_is_not_converted(self):
        value = datetime(2013, 12, 25, 9, 0, 0, tzinfo=timezone(timedelta(hours=5)))
        assert format_date(value, full_day=False) == "20131225T090000"

    def test_epoch_milliseconds_are_local_time(self):
        millis = 1387929600000
        expected = datetime.fromtimestamp(millis / 1000).strftime("%Y%m%dT%H%M%S")
        assert format_date(millis, full_day=False) == expected


class TestParseDateLike:
    """Rejection of values that are not dates."""

    @pytest.mark.parametrize("value", ["not a date", "2014-02-30", None, True, [2014, 8, 18]])
    def test_invalid_values_raise(self, value):
        with pytest.raises(InvalidDateError):
            parse_date_like(value)

    def test_datetime_is_returned_unchanged(self):
        value = datetime(2014, 8, 18, 10, 0)
        assert parse_date_like(value) is value


def test_format_timestamp_uses_clock():
    assert format_timestamp(lambda: datetime(2024, 1, 2, 3, 4, 5)) == "20240102T030405"


def test_format_timestamp_defaults_to_now():
    assert len(format_timestamp()) == len("20240102T030405")
