"""iCalendar encoding of satellite passes."""

from collections.abc import Sequence
from datetime import tzinfo
from typing import Any

from passcal.exceptions import InvalidFormatError
from passcal.models.enums import ExportFormat, TimeZoneMode
from passcal.models.options import EncoderOptions
from passcal.models.satellite_pass import Observer, PassRecord
from passcal.services.calendar.builders import CalendarBuilder, PassEventBuilder
from passcal.utils.logging_utils import LoggerMixin


def resolve_format(fmt: Any) -> ExportFormat:
    """Map a format selector to ExportFormat.
    
    Raises:
        InvalidFormatError: If the selector is not a recognized format
    """
    if isinstance(fmt, ExportFormat):
        return fmt
    if isinstance(fmt, bool) or not isinstance(fmt, int):
        raise InvalidFormatError(f"Invalid file format: {fmt}", fmt)
    try:
        return ExportFormat(fmt)
    except ValueError:
        raise InvalidFormatError(f"Invalid file format: {fmt}", fmt) from None


class IcsEncoder(LoggerMixin):
    """Turns satellite passes into iCalendar text.
    
    The encoder is stateless between calls; options and the local zone are
    fixed at construction.
    """
    
    def __init__(
        self,
        options: EncoderOptions | None = None,
        local_tz: tzinfo | None = None
    ) -> None:
        super().__init__()
        self.options = options or EncoderOptions()
        self.local_tz = local_tz
    
    def encode_single(
        self,
        satellite_pass: PassRecord,
        observer: Observer,
        tz_mode: TimeZoneMode,
        satellite_label: str,
        fmt: ExportFormat | int = ExportFormat.ICS
    ) -> str:
        """Encode one pass as a calendar with a single event."""
        return self.encode_multiple([satellite_pass], observer, tz_mode, satellite_label, fmt)
    
    def encode_multiple(
        self,
        passes: Sequence[PassRecord],
        observer: Observer,
        tz_mode: TimeZoneMode,
        satellite_label: str,
        fmt: ExportFormat | int = ExportFormat.ICS
    ) -> str:
        """Encode passes as one calendar, one event per pass in the given order.
        
        Args:
            passes: Passes to encode, not reordered
            observer: Ground station the passes were predicted for
            tz_mode: Local or UTC date-times
            satellite_label: Name used in SUMMARY and UID
            fmt: Output format selector, only ICS is recognized
            
        Returns:
            The complete calendar document
            
        Raises:
            InvalidFormatError: If ``fmt`` is not a recognized format
            ValidationError: If a pass time cannot be rendered as a date
        """
        try:
            resolve_format(fmt)
        except InvalidFormatError as e:
            self.error(e.message, format=fmt)
            raise
        
        calendar = CalendarBuilder(self.options)
        event_builder = PassEventBuilder(tz_mode, self.local_tz)
        
        calendar.begin_calendar()
        for satellite_pass in passes:
            event_builder.build(calendar, satellite_pass, observer, satellite_label)
        calendar.end_calendar()
        
        self.debug(
            f"Encoded {calendar.event_count} passes",
            satellite=satellite_label,
            tz_mode=tz_mode.value
        )
        return calendar.getvalue()


def encode_single(
    satellite_pass: PassRecord,
    observer: Observer,
    tz_mode: TimeZoneMode,
    satellite_label: str,
    fmt: ExportFormat | int = ExportFormat.ICS,
    *,
    local_tz: tzinfo | None = None,
    options: EncoderOptions | None = None
) -> str:
    """Encode one pass. See :meth:`IcsEncoder.encode_multiple`."""
    encoder = IcsEncoder(options, local_tz)
    return encoder.encode_single(satellite_pass, observer, tz_mode, satellite_label, fmt)


def encode_multiple(
    passes: Sequence[PassRecord],
    observer: Observer,
    tz_mode: TimeZoneMode,
    satellite_label: str,
    fmt: ExportFormat | int = ExportFormat.ICS,
    *,
    local_tz: tzinfo | None = None,
    options: EncoderOptions | None = None
) -> str:
    """Encode a pass list. See :meth:`IcsEncoder.encode_multiple`."""
    encoder = IcsEncoder(options, local_tz)
    return encoder.encode_multiple(passes, observer, tz_mode, satellite_label, fmt)
