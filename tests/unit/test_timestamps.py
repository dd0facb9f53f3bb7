"""
Unit tests for the timestamp formatter (csv_normalize.transforms.timestamps).

Expected values were worked out by hand from the US DST rules: both
zones switch at 02:00 local time on the second Sunday of March and the
first Sunday of November.
"""

from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from csv_normalize.config import NormalizerConfig
from csv_normalize.exceptions import InvalidDataFormat
from csv_normalize.transforms.timestamps import format_timestamp, parse_timestamp


class TestFormatTimestamp:
    """Tests for format_timestamp() with the default Pacific -> Eastern zones."""

    # -----------------------------------------------------------------
    # Conversion
    # -----------------------------------------------------------------

    def test_afternoon_in_dst(self):
        """Both zones on daylight time: Eastern is 3 hours ahead."""
        assert format_timestamp("3/14/23 2:05:09 PM") == "2023-03-14T17:05:09-04:00"

    def test_crosses_into_next_year(self):
        assert format_timestamp("12/31/22 11:00:00 PM") == "2023-01-01T02:00:00-05:00"

    def test_crosses_into_next_day_after_fall_back(self):
        assert format_timestamp("11/5/23 10:00:00 PM") == "2023-11-06T01:00:00-05:00"

    def test_during_dst_switch_offsets_differ_by_four_hours(self):
        """At 1:30 AM Pacific on switch day the East is already on EDT."""
        assert format_timestamp("3/12/23 1:30:00 AM") == "2023-03-12T05:30:00-04:00"

    def test_midnight(self):
        assert format_timestamp("1/1/23 12:00:00 AM") == "2023-01-01T03:00:00-05:00"

    def test_noon(self):
        assert format_timestamp("1/1/23 12:30:00 PM") == "2023-01-01T15:30:00-05:00"

    def test_leap_day(self):
        assert format_timestamp("2/29/24 12:00:00 PM") == "2024-02-29T15:00:00-05:00"

    # -----------------------------------------------------------------
    # Input shape
    # -----------------------------------------------------------------

    def test_lowercase_meridiem(self):
        assert format_timestamp("3/14/23 2:05:09 pm") == "2023-03-14T17:05:09-04:00"

    def test_leading_zeros_accepted(self):
        assert format_timestamp("03/14/23 02:05:09 PM") == "2023-03-14T17:05:09-04:00"

    def test_two_digit_year_above_cutoff_is_1900s(self):
        assert format_timestamp("1/1/99 12:00:00 PM") == "1999-01-01T15:00:00-05:00"

    @pytest.mark.parametrize(
        "value",
        [
            "2/30/23 1:00:00 PM",
            "13/1/23 1:00:00 PM",
            "1/1/23 13:00:00 PM",
            "1/1/23 0:00:00 AM",
            "1/1/23 1:60:00 PM",
            "1/1/23 1:00:60 PM",
            "1/1/23 1:00:00",
            "1/1/2023 1:00:00 PM",
            "1/1/23 1:0:00 PM",
            "2023-01-01T10:00:00",
            " 1/1/23 1:00:00 PM",
            "",
        ],
    )
    def test_invalid_values_raise(self, value):
        with pytest.raises(InvalidDataFormat, match="Invalid timestamp"):
            format_timestamp(value)

    # -----------------------------------------------------------------
    # Custom zones
    # -----------------------------------------------------------------

    def test_custom_zones(self):
        config = NormalizerConfig(source_zone="UTC", target_zone="Asia/Tokyo")
        assert format_timestamp("1/1/23 12:00:00 AM", config) == "2023-01-01T09:00:00+09:00"


class TestParseTimestamp:
    """Tests for parse_timestamp()."""

    def test_returns_aware_datetime_in_zone(self):
        zone = ZoneInfo("America/Los_Angeles")
        result = parse_timestamp("3/14/23 2:05:09 PM", zone)
        assert result == datetime(2023, 3, 14, 14, 5, 9, tzinfo=zone)
        assert result.tzinfo is zone

    def test_cutoff_is_configurable(self):
        zone = ZoneInfo("UTC")
        assert parse_timestamp("1/1/70 1:00:00 AM", zone).year == 1970
        assert parse_timestamp("1/1/70 1:00:00 AM", zone, two_digit_year_cutoff=80).year == 2070
