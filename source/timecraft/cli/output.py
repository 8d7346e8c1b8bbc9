"""This module provides the output helpers shared by the CLI commands."""

import json
from typing import Any

import click
from timecraft.exceptions.parsing import ParseError
from timecraft.models.date_time import DateTime
from timecraft.services.parsing import DateParsingService


def emit(text: str, payload: dict[str, Any]) -> None:
    """Prints a command result in the format selected on the root group.

    Args:
        text: The human-readable rendering.
        payload: The structured rendering, used when `--output json` is set.
    """
    ctx = click.get_current_context()
    if ctx.find_root().obj is not None and ctx.find_root().obj.output_format == "json":
        click.echo(json.dumps(payload))
    else:
        click.echo(text)


def describe(value: DateTime) -> dict[str, Any]:
    """Builds the structured rendering of a date-time value.

    Args:
        value: The value to describe.

    Returns:
        Its ISO 8601 form, instant and offset.
    """
    return {"iso": value.isoformat(), "epoch_ms": value.epoch_ms, "offset_minutes": value.offset_minutes}


def parse_iso_argument(value: str) -> DateTime:
    """Parses an ISO 8601 command-line argument, aborting on malformed input.

    Args:
        value: The raw argument.

    Returns:
        The parsed value.

    Raises:
        click.Abort: If the argument is not a valid ISO 8601 date-time.
    """
    try:
        return DateParsingService().parse_iso8601(value)
    except ParseError as e:
        click.secho(str(e), fg="red")
        raise click.Abort()
