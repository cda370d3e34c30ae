"""
Calendar builders package.
"""

from passcal.services.calendar.builders.calendar_builder import CalendarBuilder
from passcal.services.calendar.builders.event_builder import PassEventBuilder

__all__ = [
    'CalendarBuilder',
    'PassEventBuilder'
]
