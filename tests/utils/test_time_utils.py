"""Tests for Julian date conversion and duration rendering."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from passcal.exceptions import ValidationError
from passcal.utils.time_utils import (
    ICAL_DATETIME_FORMAT,
    UID_HOUR_FORMAT,
    daynum_to_datetime,
    daynum_to_str,
    duration_seconds,
    format_duration,
)


def test_unix_epoch():
    assert daynum_to_datetime(2440587.5, UTC) == datetime(1970, 1, 1, tzinfo=UTC)

def test_known_date():
    assert daynum_to_datetime(2460001.0, UTC) == datetime(2023, 2, 25, 12, tzinfo=UTC)

def test_rounds_to_nearest_second():
    """Test that 0.6 s past the minute rounds up."""
    daynum = 2460001.0 + 0.6 / 86400
    assert daynum_to_datetime(daynum, UTC).second == 1

def test_target_zone():
    zone = timezone(timedelta(hours=-5))
    assert daynum_to_str(2460001.0, ICAL_DATETIME_FORMAT, zone) == "20230225T070000"

def test_system_zone_when_none():
    dt = daynum_to_datetime(2460001.0)
    assert dt.tzinfo is not None
    assert dt == datetime(2023, 2, 25, 12, tzinfo=UTC)

def test_hour_stamp():
    assert daynum_to_str(2460001.0, UID_HOUR_FORMAT, UTC) == "2023022512"

def test_out_of_range_day_number():
    with pytest.raises(ValidationError) as exc_info:
        daynum_to_datetime(0.0, UTC)
    assert exc_info.value.details["daynum"] == 0.0

def test_one_minute_duration():
    """Test that one minute in day units renders as 01:00."""
    assert format_duration(0.0, 1 / 1440) == "01:00"
    assert duration_seconds(0.0, 1 / 1440) == 60

@pytest.mark.parametrize("seconds,expected", [
    (0, "00:00"),
    (59, "00:59"),
    (675, "11:15"),
    (3599, "59:59"),
    (3600, "00:00"),
    (3725, "02:05"),
])
def test_duration_drops_hours(seconds, expected):
    assert format_duration(0.0, seconds / 86400) == expected

def test_duration_truncates_fraction():
    assert format_duration(0.0, 90.9 / 86400) == "01:30"

def test_negative_duration():
    assert format_duration(1.0, 0.5) == "00:00"
    assert duration_seconds(1.0, 0.5) == -43200

@pytest.mark.parametrize("daynum", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_day_number(daynum):
    with pytest.raises(ValidationError):
        daynum_to_datetime(daynum, UTC)

@pytest.mark.parametrize("aos,los", [
    (0.0, float("nan")),
    (float("nan"), 0.5),
    (0.0, float("inf")),
    (float("-inf"), 0.5),
])
def test_non_finite_duration(aos, los):
    with pytest.raises(ValidationError):
        format_duration(aos, los)
