"""Enumerations selecting how passes are rendered."""

from enum import Enum


class TimeZoneMode(Enum):
    """Whether emitted date-times are local wall-clock or tagged as UTC."""
    LOCAL = "local"
    UTC = "utc"

    @classmethod
    def from_use_local_time(cls, use_local_time: bool) -> "TimeZoneMode":
        """Map the application's "use local time" setting to a mode."""
        return cls.LOCAL if use_local_time else cls.UTC

    @property
    def tz_part(self) -> str:
        """Separator placed between a date-time property name and its value."""
        if self is TimeZoneMode.LOCAL:
            return ":"
        return ";TZID=UTC:"


class ExportFormat(Enum):
    """Output file formats."""
    ICS = 1

    @property
    def extension(self) -> str:
        return ".ics"
