"""This module defines the 'parse' command group for the timecraft CLI."""

import click
from timecraft.cli.output import describe, emit
from timecraft.exceptions.parsing import ParseError
from timecraft.services.parsing import DateParsingService


@click.group("parse")
def parse_group() -> None:
    """Groups commands that parse date strings."""
    pass


@parse_group.command("rfc2822")
@click.argument("text")
def rfc2822(text: str) -> None:
    """Parses an RFC 2822 date such as 'Tue, 26 Jan 2016 13:48:02 GMT'.

    Args:
        text: The date string.
    """
    try:
        value = DateParsingService().parse_rfc2822(text)
    except ParseError as e:
        click.secho(str(e), fg="red")
        raise click.Abort()
    emit(value.isoformat(), describe(value))


@parse_group.command("iso8601")
@click.argument("text")
def iso8601(text: str) -> None:
    """Parses an ISO 8601 date such as '2016-01-19T08:07:37Z'.

    Args:
        text: The date string.
    """
    try:
        value = DateParsingService().parse_iso8601(text)
    except ParseError as e:
        click.secho(str(e), fg="red")
        raise click.Abort()
    emit(value.isoformat(), describe(value))
