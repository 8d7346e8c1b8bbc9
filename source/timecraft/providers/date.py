"""This module provides centralized date-related constants."""


class DateProvider:
    """Provides centralized constants for date handling.

    This class centralizes unit sizes, calendar names and zone abbreviations
    to ensure consistency between the parsers, the formatters and the model.
    """

    MS_PER_SECOND = 1_000
    MS_PER_MINUTE = 60_000
    MS_PER_HOUR = 3_600_000
    MS_PER_DAY = 86_400_000

    MAX_OFFSET_MINUTES = 23 * 60 + 59

    MONTH_NAMES = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
    MONTH_FULL_NAMES = (
        "January",
        "February",
        "March",
        "April",
        "May",
        "June",
        "July",
        "August",
        "September",
        "October",
        "November",
        "December",
    )
    WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

    NAMED_ZONE_OFFSETS = {
        "UT": 0,
        "UTC": 0,
        "GMT": 0,
        "Z": 0,
        "EST": -5 * 60,
        "EDT": -4 * 60,
        "CST": -6 * 60,
        "CDT": -5 * 60,
        "MST": -7 * 60,
        "MDT": -6 * 60,
        "PST": -8 * 60,
        "PDT": -7 * 60,
    }

    @classmethod
    def month_number(cls, name: str) -> int | None:
        """Returns the 1-based month number for an English month name.

        Args:
            name: The three-letter abbreviation or the full name, in any case.

        Returns:
            The month number, or None when the name is not recognised.
        """
        key = name.capitalize()
        for names in (cls.MONTH_NAMES, cls.MONTH_FULL_NAMES):
            if key in names:
                return names.index(key) + 1
        return None

    @classmethod
    def weekday_number(cls, name: str) -> int | None:
        """Returns the weekday index (0 is Monday) for a three-letter English name.

        Args:
            name: The weekday abbreviation, in any case.

        Returns:
            The weekday index, or None when the name is not recognised.
        """
        try:
            return cls.WEEKDAY_NAMES.index(name.capitalize())
        except ValueError:
            return None
