"""This module defines the calendar, timespan and clock commands for the timecraft CLI."""

import click
from timecraft.cli.output import emit, parse_iso_argument
from timecraft.services.calendar import CalendarService
from timecraft.services.clock import ClockService
from timecraft.services.timespan import TimeSpanService


@click.command("leap-year")
@click.argument("value")
def leap_year(value: str) -> None:
    """Tells whether a year, or the year of an ISO 8601 date, is a leap year.

    Args:
        value: A bare year such as '2000' or an ISO 8601 date-time.
    """
    calendar = CalendarService()
    if value.isascii() and value.isdigit():
        result = calendar.is_leap(int(value))
    else:
        result = calendar.is_leap_year(parse_iso_argument(value))
    emit("true" if result else "false", {"leap_year": result})


@click.command("timespan")
@click.argument("start")
@click.argument("end")
def timespan(start: str, end: str) -> None:
    """Formats the time elapsed between two ISO 8601 dates as HH:mm:ss.sss.

    Args:
        start: The earlier date-time.
        end: The later date-time.
    """
    start_value = parse_iso_argument(start)
    end_value = parse_iso_argument(end)
    formatted = TimeSpanService().format_time_span(start_value, end_value)
    emit(formatted, {"timespan": formatted, "elapsed_ms": start_value.elapsed_ms(end_value)})


@click.command("clock-angle")
@click.argument("value")
def clock_angle(value: str) -> None:
    """Prints the angle between the clock hands at the UTC time of an ISO 8601 date.

    Args:
        value: The date-time to show on the clock.
    """
    clock = ClockService()
    moment = parse_iso_argument(value)
    radians = clock.clock_hand_angle(moment)
    emit(repr(radians), {"radians": radians, "degrees": clock.clock_hand_degrees(moment)})
