"""This module defines the DateParsingService.

It turns RFC 2822 and ISO 8601 date strings into `DateTime` values. Both
parsers are strict: anything that does not match their grammars, or names a
calendar date that does not exist, raises `ParseError` instead of being
coerced into a plausible-looking value. The RFC 2822 parser also takes the
zone-less long form `December 17, 1995 03:24:00`, read in local time.
"""

import re
from logging import Logger

from timecraft.exceptions.parsing import ParseError
from timecraft.models.date_time import DateTime
from timecraft.providers.date import DateProvider
from timecraft.providers.logging import LoggingProvider
from timecraft.services.calendar import CalendarService

_RFC2822_PATTERN = re.compile(
    r"""
    (?:(?P<weekday>[A-Za-z]{3})\s*,\s*)?
    (?P<day>\d{1,2})\s+
    (?P<month>[A-Za-z]{3})\s+
    (?P<year>\d{2,4})\s+
    (?P<hour>\d{2})\s*:\s*(?P<minute>\d{2})(?:\s*:\s*(?P<second>\d{2}))?\s+
    (?P<zone>[+-]\d{4}|[A-Za-z]{1,3}(?:[+-]\d{2}(?::?\d{2})?)?)
    """,
    re.VERBOSE | re.ASCII,
)

_LONG_FORM_PATTERN = re.compile(
    r"""
    (?P<month>[A-Za-z]{3,9})\s+(?P<day>\d{1,2})\s*,\s*(?P<year>\d{4})\s+
    (?P<hour>\d{1,2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))?
    """,
    re.VERBOSE | re.ASCII,
)

_NAMED_ZONE_PATTERN = re.compile(
    r"(?P<name>[A-Za-z]{1,3})(?:(?P<sign>[+-])(?P<hours>\d{2})(?::?(?P<minutes>\d{2}))?)?",
    re.ASCII,
)

_ISO8601_PATTERN = re.compile(
    r"""
    (?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})
    [Tt]
    (?P<hour>\d{2}):(?P<minute>\d{2})
    (?::(?P<second>\d{2})(?:[.,](?P<fraction>\d{1,9}))?)?
    (?P<zone>[Zz]|[+-]\d{2}:\d{2})
    """,
    re.VERBOSE | re.ASCII,
)

_SHIFTABLE_ZONES = ("UT", "UTC", "GMT")


class DateParsingService:
    """A service for parsing standard date-time string formats."""

    logger: Logger
    calendar: CalendarService

    def __init__(self) -> None:
        """Initializes the service with its logger and calendar helper."""
        self.logger = LoggingProvider().get_logger()
        self.calendar = CalendarService()

    def _reject(self, text: str, reason: str) -> ParseError:
        """Logs a rejected input and builds the error to raise for it.

        Args:
            text: The rejected input.
            reason: Why it was rejected.

        Returns:
            The error describing the rejection.
        """
        self.logger.debug(f"Rejected date string {text!r}: {reason}")
        return ParseError(text, reason)

    def _strip_comments(self, text: str) -> str:
        """Removes RFC 2822 comments and collapses folding whitespace.

        Comments are parenthesised and may nest; a backslash quotes the
        next character inside a comment.

        Args:
            text: The raw header value.

        Returns:
            The value without comments, with single spaces between tokens.

        Raises:
            ParseError: If the parentheses are unbalanced.
        """
        kept: list[str] = []
        depth = 0
        escaped = False
        for char in text:
            if depth:
                if escaped:
                    escaped = False
                elif char == "\\":
                    escaped = True
                elif char == "(":
                    depth += 1
                elif char == ")":
                    depth -= 1
                    if not depth:
                        kept.append(" ")
                continue
            if char == "(":
                depth = 1
            elif char == ")":
                raise self._reject(text, "unbalanced ')' outside a comment")
            else:
                kept.append(char)
        if depth:
            raise self._reject(text, "unterminated comment")
        return " ".join("".join(kept).split())

    def _rfc2822_zone_offset(self, text: str, zone: str) -> int:
        """Converts an RFC 2822 zone token to a UTC offset in minutes.

        Args:
            text: The whole input, for error reporting.
            zone: The zone token, e.g. `+0100`, `GMT`, `GMT+01`.

        Returns:
            The offset in minutes east of UTC.

        Raises:
            ParseError: If the zone is unknown or out of range.
        """
        if zone[0] in "+-":
            sign = -1 if zone[0] == "-" else 1
            hours, minutes = int(zone[1:3]), int(zone[3:5])
        else:
            match = _NAMED_ZONE_PATTERN.fullmatch(zone)
            name = match.group("name").upper() if match else ""
            if name not in DateProvider.NAMED_ZONE_OFFSETS:
                raise self._reject(text, f"unknown timezone {zone!r}")
            if not match.group("sign"):
                return DateProvider.NAMED_ZONE_OFFSETS[name]
            if name not in _SHIFTABLE_ZONES:
                raise self._reject(text, f"timezone {name} cannot carry an offset")
            sign = -1 if match.group("sign") == "-" else 1
            hours, minutes = int(match.group("hours")), int(match.group("minutes") or 0)
        if hours > 23 or minutes > 59:
            raise self._reject(text, f"timezone offset {zone!r} is out of range")
        return sign * (hours * 60 + minutes)

    def _iso8601_zone_offset(self, text: str, zone: str) -> int:
        """Converts an ISO 8601 designator (`Z` or `±HH:MM`) to minutes east of UTC.

        Raises:
            ParseError: If the offset is out of range.
        """
        if zone in ("Z", "z"):
            return 0
        sign = -1 if zone[0] == "-" else 1
        hours, minutes = int(zone[1:3]), int(zone[4:6])
        if hours > 23 or minutes > 59:
            raise self._reject(text, f"timezone offset {zone!r} is out of range")
        return sign * (hours * 60 + minutes)

    @staticmethod
    def _expand_rfc2822_year(digits: str) -> int:
        """Expands obsolete two and three digit years (RFC 2822 section 4.3).

        Args:
            digits: The year as written.

        Returns:
            The full year.
        """
        year = int(digits)
        if len(digits) == 2:
            return year + (2000 if year < 50 else 1900)
        if len(digits) == 3:
            return year + 1900
        return year

    def _build(
        self,
        text: str,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        millisecond: int,
        offset_minutes: int | None,
    ) -> DateTime:
        """Validates calendar fields and assembles the value.

        A missing offset means the fields are wall-clock time in the
        configured local timezone.

        Raises:
            ParseError: If any field is outside its calendar range.
        """
        if not 1 <= month <= 12:
            raise self._reject(text, f"month {month} is out of range")
        if not 1 <= day <= self.calendar.days_in_month(year, month):
            raise self._reject(text, f"day {day} does not exist in {year}-{month:02d}")
        if hour > 23 or minute > 59 or second > 59:
            raise self._reject(text, f"time {hour:02d}:{minute:02d}:{second:02d} is out of range")
        try:
            return DateTime.from_fields(year, month, day, hour, minute, second, millisecond, offset_minutes)
        except (ValueError, OverflowError) as e:
            raise self._reject(text, str(e)) from e

    def _parse_long_form(self, text: str, cleaned: str) -> DateTime:
        """Parses the zone-less `December 17, 1995 03:24:00` form.

        The fields are read as wall-clock time in the configured
        `LOCAL_TIMEZONE`.

        Args:
            text: The whole input, for error reporting.
            cleaned: The input without comments or folding whitespace.

        Returns:
            The parsed value.

        Raises:
            ParseError: If the string matches neither accepted grammar.
        """
        match = _LONG_FORM_PATTERN.fullmatch(cleaned)
        if not match:
            raise self._reject(text, "not an RFC 2822 date-time")

        month = DateProvider.month_number(match.group("month"))
        if month is None:
            raise self._reject(text, f"unknown month {match.group('month')!r}")

        return self._build(
            text,
            year=int(match.group("year")),
            month=month,
            day=int(match.group("day")),
            hour=int(match.group("hour")),
            minute=int(match.group("minute")),
            second=int(match.group("second") or 0),
            millisecond=0,
            offset_minutes=None,
        )

    def parse_rfc2822(self, text: str) -> DateTime:
        """Parses an RFC 2822 date-time such as `Tue, 26 Jan 2016 13:48:02 GMT`.

        The day of the week and the seconds are optional, comments are
        ignored, and the zone may be numeric (`+0100`), named (`GMT`, `EST`)
        or a universal zone followed by an offset (`GMT+01`). A day of the
        week that disagrees with the date is an error.

        The zone-less long form `December 17, 1995 03:24:00` (full or
        abbreviated month, optional seconds) is also accepted and read in the
        configured local timezone.

        Args:
            text: The string to parse.

        Returns:
            The parsed value; its local view uses the offset of the string,
            or the local timezone for the long form.

        Raises:
            ParseError: If the string is not a valid RFC 2822 date-time.
        """
        cleaned = self._strip_comments(text)
        match = _RFC2822_PATTERN.fullmatch(cleaned)
        if not match:
            return self._parse_long_form(text, cleaned)

        month = DateProvider.month_number(match.group("month"))
        if month is None:
            raise self._reject(text, f"unknown month {match.group('month')!r}")

        weekday = None
        if match.group("weekday"):
            weekday = DateProvider.weekday_number(match.group("weekday"))
            if weekday is None:
                raise self._reject(text, f"unknown day of week {match.group('weekday')!r}")

        offset = self._rfc2822_zone_offset(text, match.group("zone"))
        value = self._build(
            text,
            year=self._expand_rfc2822_year(match.group("year")),
            month=month,
            day=int(match.group("day")),
            hour=int(match.group("hour")),
            minute=int(match.group("minute")),
            second=int(match.group("second") or 0),
            millisecond=0,
            offset_minutes=offset,
        )
        if weekday is not None and value.fields().weekday != weekday:
            raise self._reject(text, f"{match.group('weekday')} does not match the date")
        return value

    def parse_iso8601(self, text: str) -> DateTime:
        """Parses an ISO 8601 extended date-time such as `2016-01-19T08:07:37Z`.

        A timezone designator, `Z` or `±HH:MM`, is mandatory. Seconds and a
        decimal fraction are optional; fractions are truncated to
        milliseconds.

        Args:
            text: The string to parse.

        Returns:
            The parsed value; its local view uses the offset of the string.

        Raises:
            ParseError: If the string is malformed or names an impossible date.
        """
        match = _ISO8601_PATTERN.fullmatch(text.strip())
        if not match:
            raise self._reject(text, "not an ISO 8601 date-time with a timezone designator")

        fraction = match.group("fraction") or ""
        offset = self._iso8601_zone_offset(text, match.group("zone"))
        return self._build(
            text,
            year=int(match.group("year")),
            month=int(match.group("month")),
            day=int(match.group("day")),
            hour=int(match.group("hour")),
            minute=int(match.group("minute")),
            second=int(match.group("second") or 0),
            millisecond=int(fraction[:3].ljust(3, "0")),
            offset_minutes=offset,
        )
