"""Event builder for satellite pass events."""

from datetime import UTC, tzinfo

from passcal.models.enums import TimeZoneMode
from passcal.models.satellite_pass import Observer, PassRecord
from passcal.services.calendar.builders.calendar_builder import CalendarBuilder
from passcal.utils.logging_utils import LoggerMixin
from passcal.utils.time_utils import (
    ICAL_DATETIME_FORMAT,
    UID_HOUR_FORMAT,
    daynum_to_str,
    format_duration,
)

# Literal backslash-n: TEXT value escape for a line break
TEXT_NEWLINE = "\\n"


class PassEventBuilder(LoggerMixin):
    """Writes one VEVENT per satellite pass into a calendar builder."""
    
    def __init__(self, tz_mode: TimeZoneMode, local_tz: tzinfo | None = None) -> None:
        """Initialize builder.
        
        Args:
            tz_mode: Whether date-times are local or tagged as UTC
            local_tz: Zone used for local date-times, system zone if None
        """
        super().__init__()
        self.tz_mode = tz_mode
        self.local_tz = local_tz
        self.set_log_context(tz_mode=tz_mode.value)
    
    @property
    def zone(self) -> tzinfo | None:
        """Zone in which day numbers are rendered."""
        if self.tz_mode is TimeZoneMode.UTC:
            return UTC
        return self.local_tz
    
    def format_datetime(self, daynum: float) -> str:
        return daynum_to_str(daynum, ICAL_DATETIME_FORMAT, self.zone)
    
    def format_summary(self, satellite_pass: PassRecord, satellite_label: str) -> str:
        """Satellite label with the maximum elevation in whole degrees."""
        return f"{satellite_label} [{satellite_pass.max_elevation_deg:.0f}°]"
    
    def format_uid(
        self,
        satellite_pass: PassRecord,
        observer: Observer,
        satellite_label: str
    ) -> str:
        """Build the event UID.
        
        Format: <label><orbit number><AOS date and hour>@<latitude><longitude>
        """
        hour_stamp = daynum_to_str(satellite_pass.aos, UID_HOUR_FORMAT, self.zone)
        return (
            f"{satellite_label}{satellite_pass.orbit_number}{hour_stamp}"
            f"@{observer.latitude_deg:f}{observer.longitude_deg:f}"
        )
    
    def format_description(self, satellite_pass: PassRecord) -> str:
        """Duration and AOS/LOS azimuths joined by escaped newlines."""
        if satellite_pass.los <= satellite_pass.aos:
            self.warning(
                "Pass has no positive duration",
                satellite=satellite_pass.satellite_name,
                orbit=satellite_pass.orbit_number
            )
        lines = [
            f"Duration: {format_duration(satellite_pass.aos, satellite_pass.los)}",
            f"AOS Azimuth:  {satellite_pass.aos_azimuth_deg:6.2f}",
            f"LOS Azimuth:  {satellite_pass.los_azimuth_deg:6.2f}",
        ]
        return "".join(line + TEXT_NEWLINE for line in lines)
    
    def build(
        self,
        calendar: CalendarBuilder,
        satellite_pass: PassRecord,
        observer: Observer,
        satellite_label: str
    ) -> None:
        """Append the VEVENT for ``satellite_pass`` to ``calendar``."""
        # Render everything first so a bad timestamp leaves no partial event
        dtstart = self.format_datetime(satellite_pass.aos)
        dtend = self.format_datetime(satellite_pass.los)
        summary = self.format_summary(satellite_pass, satellite_label)
        uid = self.format_uid(satellite_pass, observer, satellite_label)
        description = self.format_description(satellite_pass)
        
        tz_part = self.tz_mode.tz_part
        calendar.begin_event()
        calendar.add_property("DTSTART", dtstart, tz_part)
        calendar.add_property("DTEND", dtend, tz_part)
        calendar.add_property("SUMMARY", summary)
        calendar.add_property("UID", uid)
        calendar.add_property("DESCRIPTION", description)
        calendar.end_event()
        
        self.debug(
            "Added pass event",
            satellite=satellite_label,
            orbit=satellite_pass.orbit_number,
            start=dtstart
        )
