"""This module initializes the CLI application."""

from uuid import uuid4

import click
from timecraft.cli.config import config_group
from timecraft.cli.parse import parse_group
from timecraft.cli.tasks import clock_angle, leap_year, timespan
from timecraft.providers.logging import LoggingProvider


class Context:
    """A context object to pass global options to subcommands."""

    def __init__(self, output_format: str):
        """Initializes the context.

        Args:
            output_format: The desired output format (e.g., 'text', 'json').
        """
        self.output_format = output_format


def create_cli() -> click.Group:
    """Create and configure the main CLI group with all subcommands.

    Returns:
        The main Click command group for the application.
    """

    @click.group()
    @click.option(
        "--log-level",
        type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
        help="Override the default log level for this command.",
    )
    @click.option(
        "--output",
        type=click.Choice(["text", "json"], case_sensitive=False),
        default="text",
        help="Set the output format.",
    )
    @click.pass_context
    def cli(ctx: click.Context, log_level: str | None, output: str) -> None:
        """Parse, inspect and format dates and times from the command line.

        Args:
            ctx: The Click context object.
            log_level: The desired logging level.
            output: The desired output format.
        """
        logging_provider = LoggingProvider()
        logging_provider.get_logger(level_override=log_level)
        ctx.with_resource(logging_provider.set_correlation_id(uuid4().hex[:8]))
        ctx.obj = Context(output_format=output.lower())

    cli.add_command(parse_group)
    cli.add_command(leap_year)
    cli.add_command(timespan)
    cli.add_command(clock_angle)
    cli.add_command(config_group)

    return cli
