"""This module defines the TimeSpanService.

It renders the elapsed time between two instants as `HH:mm:ss.sss`.
"""

from typing import NamedTuple

from timecraft.models.date_time import DateTime
from timecraft.providers.date import DateProvider


class TimeSpanParts(NamedTuple):
    """The decomposition of a millisecond span into clock units.

    Attributes:
        negative: True when the span runs backwards in time.
        hours: Whole hours, not wrapped at 24.
        minutes: Remaining whole minutes.
        seconds: Remaining whole seconds.
        milliseconds: Remaining milliseconds.
    """

    negative: bool
    hours: int
    minutes: int
    seconds: int
    milliseconds: int


class TimeSpanService:
    """A stateless service that formats durations."""

    @staticmethod
    def split(diff_ms: int) -> TimeSpanParts:
        """Splits a span of milliseconds into hours, minutes, seconds and milliseconds.

        A negative span is split by its magnitude and flagged as negative.

        Args:
            diff_ms: The span in milliseconds.

        Returns:
            The decomposed span.
        """
        magnitude = abs(diff_ms)
        hours = magnitude // DateProvider.MS_PER_HOUR
        minutes = (magnitude % DateProvider.MS_PER_HOUR) // DateProvider.MS_PER_MINUTE
        seconds = (magnitude % DateProvider.MS_PER_MINUTE) // DateProvider.MS_PER_SECOND
        milliseconds = magnitude % DateProvider.MS_PER_SECOND
        return TimeSpanParts(diff_ms < 0, hours, minutes, seconds, milliseconds)

    def format_time_span(self, start: DateTime, end: DateTime) -> str:
        """Formats the time elapsed between two instants.

        Hours are padded to two digits but never truncated, so a 30 hour
        span renders as `30:00:00.000`. When `end` precedes `start` the
        magnitude is rendered with a leading minus sign.

        Args:
            start: The earlier instant.
            end: The later instant.

        Returns:
            The span as `HH:mm:ss.sss`.
        """
        parts = self.split(start.elapsed_ms(end))
        sign = "-" if parts.negative else ""
        return f"{sign}{parts.hours:02d}:{parts.minutes:02d}:{parts.seconds:02d}.{parts.milliseconds:03d}"
