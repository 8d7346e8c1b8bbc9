"""This module defines the ClockService.

It solves the clock angle problem: the smaller angle between the hour and
minute hands of an analog clock showing a given UTC time.
"""

import math

from timecraft.models.date_time import DateTime

HOUR_HAND_DEGREES_PER_MINUTE = 0.5
MINUTE_HAND_DEGREES_PER_MINUTE = 6


class ClockService:
    """A stateless service for analog clock geometry."""

    def clock_hand_degrees(self, date_time: DateTime) -> float:
        """Returns the angle between the clock hands in degrees.

        Only the UTC hour and minute are read. Hours above 12 are brought
        into the 12-hour dial by subtracting 12; hours 0 and 12 are left as
        they are.

        Args:
            date_time: The moment shown on the clock.

        Returns:
            The smaller angle between the hands, from 0 to 180.
        """
        hours = date_time.utc_hour
        minutes = date_time.utc_minute
        if hours > 12:
            hours -= 12
        hour_hand = HOUR_HAND_DEGREES_PER_MINUTE * (hours * 60 + minutes)
        minute_hand = MINUTE_HAND_DEGREES_PER_MINUTE * minutes
        diff = abs(hour_hand - minute_hand)
        return 360 - diff if diff > 180 else diff

    def clock_hand_angle(self, date_time: DateTime) -> float:
        """Returns the angle between the clock hands in radians.

        The conversion from degrees happens once, on the final value.

        Args:
            date_time: The moment shown on the clock.

        Returns:
            The smaller angle between the hands, from 0 to pi.
        """
        return self.clock_hand_degrees(date_time) * (math.pi / 180)
