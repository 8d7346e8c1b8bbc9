"""Stateless date and time utilities.

The functions below are thin entry points over the services package, for
callers that only need a single operation.
"""

from timecraft.exceptions.parsing import ParseError, TimecraftError
from timecraft.models.date_time import CalendarFields, DateTime
from timecraft.services import CalendarService, ClockService, DateParsingService, TimeSpanService


def parse_rfc2822(text: str) -> DateTime:
    """Parses an RFC 2822 date-time string. See `DateParsingService.parse_rfc2822`."""
    return DateParsingService().parse_rfc2822(text)


def parse_iso8601(text: str) -> DateTime:
    """Parses an ISO 8601 date-time string. See `DateParsingService.parse_iso8601`."""
    return DateParsingService().parse_iso8601(text)


def is_leap_year(date_time: DateTime) -> bool:
    """Tells whether the local year of a value is a leap year."""
    return CalendarService().is_leap_year(date_time)


def format_time_span(start: DateTime, end: DateTime) -> str:
    """Formats the span between two instants as `HH:mm:ss.sss`."""
    return TimeSpanService().format_time_span(start, end)


def clock_hand_angle(date_time: DateTime) -> float:
    """Returns the angle in radians between the clock hands at a UTC time."""
    return ClockService().clock_hand_angle(date_time)


__all__ = [
    "CalendarFields",
    "DateTime",
    "ParseError",
    "TimecraftError",
    "clock_hand_angle",
    "format_time_span",
    "is_leap_year",
    "parse_iso8601",
    "parse_rfc2822",
]
