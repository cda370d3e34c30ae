"""Time conversion helpers for Julian date day numbers."""

import math
from datetime import UTC, datetime, timedelta, tzinfo

from passcal.exceptions import ValidationError


JULIAN_UNIX_EPOCH = 2440587.5
SECONDS_PER_DAY = 86400

ICAL_DATETIME_FORMAT = "%Y%m%dT%H%M%S"
UID_HOUR_FORMAT = "%Y%m%d%H"

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def daynum_to_datetime(daynum: float, tz: tzinfo | None = None) -> datetime:
    """Convert a Julian date day number to an aware datetime.

    The day number is rounded to the nearest second. When ``tz`` is None the
    result is expressed in the system local time zone.

    Raises:
        ValidationError: If the day number is not finite or falls outside
            the range of representable calendar dates.
    """
    try:
        seconds = math.floor((daynum - JULIAN_UNIX_EPOCH) * SECONDS_PER_DAY + 0.5)
        dt = _UNIX_EPOCH + timedelta(seconds=seconds)
        return dt.astimezone(tz)
    except (OverflowError, OSError, ValueError) as e:
        raise ValidationError(
            f"Day number {daynum} cannot be represented as a calendar date",
            {"daynum": daynum, "error": str(e)}
        ) from e


def daynum_to_str(daynum: float, fmt: str, tz: tzinfo | None = None) -> str:
    """Format a Julian date day number with a strftime pattern."""
    return daynum_to_datetime(daynum, tz).strftime(fmt)


def duration_seconds(aos: float, los: float) -> int:
    """Whole seconds between two day numbers, truncated toward minus infinity."""
    if not (math.isfinite(aos) and math.isfinite(los)):
        raise ValidationError(
            "Pass duration needs finite AOS and LOS day numbers",
            {"aos": aos, "los": los}
        )
    # drop sub-millisecond float noise before truncating
    return math.floor(round((los - aos) * SECONDS_PER_DAY, 3))


def format_duration(aos: float, los: float) -> str:
    """Render a pass duration as ``MM:SS``.

    Elapsed hours are split off and not shown. Passes with ``los <= aos``
    render as ``00:00``.
    """
    total = max(duration_seconds(aos, los), 0)
    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{minutes:02d}:{seconds:02d}"
