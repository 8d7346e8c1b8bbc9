"""This module defines the immutable date-time value used across the library.

A `DateTime` is an instant, stored as whole milliseconds since the Unix
epoch, together with the UTC offset of its local calendar view. Calendar
fields are derived on demand for either view, and subtracting two values
yields the elapsed milliseconds between them.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import NamedTuple
from zoneinfo import ZoneInfo

from pydantic import BaseModel, ConfigDict, Field, model_validator
from timecraft.providers.config import ConfigProvider
from timecraft.providers.date import DateProvider

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


class CalendarFields(NamedTuple):
    """The calendar decomposition of an instant in one particular view.

    Attributes:
        year: The full year.
        month: The month, from 1 to 12.
        day: The day of the month.
        hour: The hour, from 0 to 23.
        minute: The minute.
        second: The second.
        millisecond: The millisecond, from 0 to 999.
        weekday: The day of the week, 0 being Monday.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    millisecond: int
    weekday: int


def _fields_of(moment: datetime) -> CalendarFields:
    return CalendarFields(
        year=moment.year,
        month=moment.month,
        day=moment.day,
        hour=moment.hour,
        minute=moment.minute,
        second=moment.second,
        millisecond=moment.microsecond // 1000,
        weekday=moment.weekday(),
    )


def _format_offset(offset_minutes: int, separator: str) -> str:
    sign = "-" if offset_minutes < 0 else "+"
    hours, minutes = divmod(abs(offset_minutes), 60)
    return f"{sign}{hours:02d}{separator}{minutes:02d}"


class DateTime(BaseModel):
    """An immutable instant with millisecond precision and a local offset.

    Attributes:
        epoch_ms: Milliseconds elapsed since 1970-01-01T00:00:00Z.
        offset_minutes: The UTC offset, in minutes, of the local calendar view.
    """

    model_config = ConfigDict(frozen=True)

    epoch_ms: int
    offset_minutes: int = Field(
        default=0,
        ge=-DateProvider.MAX_OFFSET_MINUTES,
        le=DateProvider.MAX_OFFSET_MINUTES,
    )

    @model_validator(mode="after")
    def check_calendar_range(self) -> DateTime:
        """Ensures both calendar views fall inside the supported year range.

        Returns:
            The validated instance.

        Raises:
            ValueError: If the instant cannot be represented as a calendar date.
        """
        try:
            self.utc_datetime()
            self.to_datetime()
        except OverflowError as e:
            raise ValueError(f"Instant {self.epoch_ms} ms is outside the supported calendar range") from e
        return self

    @classmethod
    def from_epoch_ms(cls, epoch_ms: int, offset_minutes: int = 0) -> DateTime:
        """Creates a value from a raw instant.

        Args:
            epoch_ms: Milliseconds since the Unix epoch.
            offset_minutes: The UTC offset of the local view.

        Returns:
            The new value.
        """
        return cls(epoch_ms=epoch_ms, offset_minutes=offset_minutes)

    @classmethod
    def from_datetime(cls, moment: datetime) -> DateTime:
        """Creates a value from a timezone-aware standard library datetime.

        Sub-millisecond precision is truncated.

        Args:
            moment: An aware datetime.

        Returns:
            The new value, whose local view uses the datetime's offset.

        Raises:
            ValueError: If the datetime is naive.
        """
        offset = moment.utcoffset()
        if offset is None:
            raise ValueError("Naive datetimes carry no instant; attach a tzinfo first")
        return cls(
            epoch_ms=(moment - _EPOCH) // _ONE_MS,
            offset_minutes=offset // timedelta(minutes=1),
        )

    @classmethod
    def from_fields(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
        offset_minutes: int | None = None,
    ) -> DateTime:
        """Creates a value from local calendar fields.

        When no offset is given the configured `LOCAL_TIMEZONE` decides it,
        for the wall-clock moment described by the fields.

        Args:
            year: The full year.
            month: The month, from 1 to 12.
            day: The day of the month.
            hour: The hour.
            minute: The minute.
            second: The second.
            millisecond: The millisecond.
            offset_minutes: An explicit UTC offset for the fields.

        Returns:
            The new value.

        Raises:
            ValueError: If any field is out of range.
        """
        if not 0 <= millisecond <= 999:
            raise ValueError(f"millisecond must be in 0..999, got {millisecond}")
        if offset_minutes is None:
            tzinfo = ZoneInfo(ConfigProvider.get_config().LOCAL_TIMEZONE)
        else:
            tzinfo = timezone(timedelta(minutes=offset_minutes))
        moment = datetime(year, month, day, hour, minute, second, millisecond * 1000, tzinfo=tzinfo)
        return cls.from_datetime(moment)

    @classmethod
    def utc(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> DateTime:
        """Creates a value from UTC calendar fields.

        Returns:
            The new value, with a local view equal to UTC.
        """
        return cls.from_fields(year, month, day, hour, minute, second, millisecond, offset_minutes=0)

    def utc_datetime(self) -> datetime:
        """Returns the instant as an aware datetime in UTC."""
        return _EPOCH + timedelta(milliseconds=self.epoch_ms)

    def to_datetime(self) -> datetime:
        """Returns the instant as an aware datetime in the local offset."""
        return self.utc_datetime().astimezone(timezone(timedelta(minutes=self.offset_minutes)))

    def fields(self) -> CalendarFields:
        """Returns the calendar fields of the local view."""
        return _fields_of(self.to_datetime())

    def utc_fields(self) -> CalendarFields:
        """Returns the calendar fields of the UTC view."""
        return _fields_of(self.utc_datetime())

    def with_offset(self, offset_minutes: int) -> DateTime:
        """Returns the same instant seen from another UTC offset.

        Args:
            offset_minutes: The new UTC offset.

        Returns:
            A new value; this one is unchanged.
        """
        return DateTime(epoch_ms=self.epoch_ms, offset_minutes=offset_minutes)

    def elapsed_ms(self, other: DateTime) -> int:
        """Returns the milliseconds from this instant to another.

        Args:
            other: The later (or earlier) instant.

        Returns:
            `other.epoch_ms - self.epoch_ms`; negative when `other` is earlier.
        """
        return other.epoch_ms - self.epoch_ms

    def same_instant(self, other: DateTime) -> bool:
        """Tells whether two values denote the same instant, whatever their offsets."""
        return self.epoch_ms == other.epoch_ms

    def isoformat(self) -> str:
        """Serializes the value as ISO 8601 extended format with milliseconds.

        Returns:
            A string like `2016-01-19T16:07:37.000+08:00`, or with a `Z`
            designator when the local view is UTC.
        """
        f = self.fields()
        zone = "Z" if self.offset_minutes == 0 else _format_offset(self.offset_minutes, ":")
        return (
            f"{f.year:04d}-{f.month:02d}-{f.day:02d}"
            f"T{f.hour:02d}:{f.minute:02d}:{f.second:02d}.{f.millisecond:03d}{zone}"
        )

    def rfc2822(self) -> str:
        """Serializes the value as an RFC 2822 date-time.

        Returns:
            A string like `Tue, 26 Jan 2016 13:48:02 +0000`.
        """
        f = self.fields()
        weekday = DateProvider.WEEKDAY_NAMES[f.weekday]
        month = DateProvider.MONTH_NAMES[f.month - 1]
        return (
            f"{weekday}, {f.day:02d} {month} {f.year:04d} "
            f"{f.hour:02d}:{f.minute:02d}:{f.second:02d} {_format_offset(self.offset_minutes, '')}"
        )

    def __sub__(self, other: DateTime) -> int:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self.epoch_ms - other.epoch_ms

    def __lt__(self, other: DateTime) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self.epoch_ms < other.epoch_ms

    def __le__(self, other: DateTime) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self.epoch_ms <= other.epoch_ms

    def __gt__(self, other: DateTime) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self.epoch_ms > other.epoch_ms

    def __ge__(self, other: DateTime) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self.epoch_ms >= other.epoch_ms

    @property
    def year(self) -> int:
        return self.fields().year

    @property
    def month(self) -> int:
        return self.fields().month

    @property
    def day(self) -> int:
        return self.fields().day

    @property
    def hour(self) -> int:
        return self.fields().hour

    @property
    def minute(self) -> int:
        return self.fields().minute

    @property
    def second(self) -> int:
        return self.fields().second

    @property
    def millisecond(self) -> int:
        return self.fields().millisecond

    @property
    def utc_year(self) -> int:
        return self.utc_fields().year

    @property
    def utc_month(self) -> int:
        return self.utc_fields().month

    @property
    def utc_day(self) -> int:
        return self.utc_fields().day

    @property
    def utc_hour(self) -> int:
        return self.utc_fields().hour

    @property
    def utc_minute(self) -> int:
        return self.utc_fields().minute

    @property
    def utc_second(self) -> int:
        return self.utc_fields().second

    @property
    def utc_millisecond(self) -> int:
        return self.utc_fields().millisecond
