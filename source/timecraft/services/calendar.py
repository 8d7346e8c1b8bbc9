"""This module defines the CalendarService.

It answers questions about the Gregorian calendar, such as whether a year is
a leap year and how many days a month has.
"""

from timecraft.models.date_time import DateTime

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class CalendarService:
    """A stateless service for Gregorian calendar arithmetic."""

    @staticmethod
    def is_leap(year: int) -> bool:
        """Applies the Gregorian leap year rule to a bare year.

        Args:
            year: The full year.

        Returns:
            True if the year has 366 days.
        """
        if year % 4 != 0:
            return False
        if year % 100 != 0:
            return True
        return year % 400 == 0

    def is_leap_year(self, date_time: DateTime) -> bool:
        """Tells whether the year of a date-time value is a leap year.

        Only the year of the local calendar view is consulted, so a value
        built from local fields is judged by the year it was built with.

        Args:
            date_time: The value to inspect.

        Returns:
            True if its local year is a leap year.
        """
        return self.is_leap(date_time.year)

    def days_in_month(self, year: int, month: int) -> int:
        """Returns the number of days in a month.

        Args:
            year: The full year.
            month: The month, from 1 to 12.

        Returns:
            The day count, taking leap years into account.

        Raises:
            ValueError: If the month is out of range.
        """
        if not 1 <= month <= 12:
            raise ValueError(f"month must be in 1..12, got {month}")
        if month == 2 and self.is_leap(year):
            return 29
        return _DAYS_IN_MONTH[month - 1]
