"""This module initializes the services package.

It re-exports the services and their result types to provide a flatter
import structure for the rest of the library.
"""

from timecraft.services.calendar import CalendarService
from timecraft.services.clock import ClockService
from timecraft.services.parsing import DateParsingService
from timecraft.services.timespan import TimeSpanParts, TimeSpanService

__all__ = [
    "CalendarService",
    "ClockService",
    "DateParsingService",
    "TimeSpanParts",
    "TimeSpanService",
]
