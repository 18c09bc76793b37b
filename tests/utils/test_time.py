"""Tests for time conversion utilities."""

import math
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest

from countdown_app.utils.time import (
    MAX_TIMESTAMP_MS, from_timestamp_ms, js_round, now_ms, remaining_parts, seconds_until,
    to_timestamp_ms,
)


class TestRemainingParts:
    """Test the day/hour/minute/second decomposition."""

    def test_all_units(self):
        assert remaining_parts(90061) == {"day": 1, "hour": 1, "minute": 1, "second": 1}

    def test_stops_at_first_unit_that_absorbs_the_rest(self):
        result = remaining_parts(45)

        assert result == {"second": 45}
        assert "minute" not in result

    @pytest.mark.parametrize("diff, expected", [
        (1, {"second": 1}),
        (59, {"second": 59}),
        (60, {"second": 0, "minute": 1}),
        (61, {"second": 1, "minute": 1}),
        (3599, {"second": 59, "minute": 59}),
        (3600, {"second": 0, "minute": 0, "hour": 1}),
        (86399, {"second": 59, "minute": 59, "hour": 23}),
        (86400, {"second": 0, "minute": 0, "hour": 0, "day": 1}),
    ])
    def test_boundaries(self, diff, expected):
        assert remaining_parts(diff) == expected

    def test_days_keep_the_whole_remainder(self):
        assert remaining_parts(400 * 86400 + 5) == {"second": 5, "minute": 0, "hour": 0, "day": 400}

    def test_finest_unit_comes_first(self):
        assert list(remaining_parts(90061)) == ["second", "minute", "hour", "day"]


class TestRounding:
    """Test Math.round compatible rounding."""

    @pytest.mark.parametrize("value, expected", [
        (0.5, 1),
        (1.5, 2),
        (2.5, 3),
        (2.4999, 2),
        (-0.5, 0),
        (-1.5, -1),
        (-2.6, -3),
    ])
    def test_js_round(self, value, expected):
        assert js_round(value) == expected

    def test_seconds_until(self):
        assert seconds_until(10_500, 0) == 11
        assert seconds_until(0, 10_400) == -10
        assert seconds_until(1_000, 1_000) == 0


class TestTimestampConversion:
    """Test conversions between datetimes and epoch milliseconds."""

    def test_aware_datetime(self):
        value = datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert to_timestamp_ms(value) == 1704067200000

    def test_naive_datetime_is_local_time(self):
        value = datetime(2024, 6, 1, 8, 30)
        assert to_timestamp_ms(value) == value.timestamp() * 1000

    def test_numbers_pass_through(self):
        assert to_timestamp_ms(1234) == 1234.0
        assert to_timestamp_ms(12.5) == 12.5

    @pytest.mark.parametrize("value", [None, "2024-01-01", True, object(), {}])
    def test_non_dates_are_nan(self, value):
        assert math.isnan(to_timestamp_ms(value))

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan, 1e17, -1e17, 10 ** 400])
    def test_out_of_range_numbers_are_nan(self, value):
        assert math.isnan(to_timestamp_ms(value))

    def test_range_limit_is_inclusive(self):
        assert to_timestamp_ms(MAX_TIMESTAMP_MS) == MAX_TIMESTAMP_MS
        assert to_timestamp_ms(-MAX_TIMESTAMP_MS) == -MAX_TIMESTAMP_MS
        assert math.isnan(to_timestamp_ms(MAX_TIMESTAMP_MS + 1))

    def test_round_trip(self):
        value = datetime(2030, 5, 17, 10, 0, tzinfo=timezone.utc)
        assert from_timestamp_ms(to_timestamp_ms(value)) == value

    def test_from_timestamp_is_utc(self):
        result = from_timestamp_ms(0)
        assert result.utcoffset() == timedelta(0)

    def test_now_ms_uses_wall_clock(self):
        with patch("countdown_app.utils.time.time.time", return_value=1700000000.25):
            assert now_ms() == 1700000000250.0
