"""
Calendar builder for satellite pass calendars.
"""

import io

from icalendar.parser import foldline

from passcal.models.options import EncoderOptions
from passcal.utils.logging_utils import LoggerMixin


class CalendarBuilder(LoggerMixin):
    """Accumulates a VCALENDAR document in a single text buffer.

    Lines are appended in order and never rewritten, so the document is
    produced in one linear pass.
    """
    
    def __init__(self, options: EncoderOptions | None = None):
        """Initialize calendar builder."""
        super().__init__()
        self.options = options or EncoderOptions()
        self._buffer = io.StringIO()
        self._event_count = 0
        self._in_event = False
    
    @property
    def event_count(self) -> int:
        """Number of completed VEVENT blocks."""
        return self._event_count
    
    def add_line(self, line: str) -> None:
        """Append one content line followed by the configured line ending."""
        if self.options.fold_lines:
            line = foldline(line, fold_sep=self.options.line_ending + " ")
        self._buffer.write(line)
        self._buffer.write(self.options.line_ending)
    
    def add_property(self, name: str, value: str, separator: str = ":") -> None:
        """Append ``NAME<separator>VALUE``."""
        self.add_line(f"{name}{separator}{value}")
    
    def begin_calendar(self) -> None:
        """Write the calendar header."""
        self.add_line("BEGIN:VCALENDAR")
        self.add_property("VERSION", "2.0")
        self.add_property("CALSCALE", "GREGORIAN")
    
    def end_calendar(self) -> None:
        """Write the calendar footer."""
        self.add_line("END:VCALENDAR")
        self.debug("Built calendar", events=self._event_count)
    
    def begin_event(self) -> None:
        if self._in_event:
            raise RuntimeError("Previous VEVENT was not closed")
        self._in_event = True
        self.add_line("BEGIN:VEVENT")
    
    def end_event(self) -> None:
        if not self._in_event:
            raise RuntimeError("No open VEVENT to close")
        self.add_line("END:VEVENT")
        self._in_event = False
        self._event_count += 1
    
    def getvalue(self) -> str:
        """Return the text accumulated so far."""
        return self._buffer.getvalue()
