"""This module defines the 'config' command group for the timecraft CLI."""

import click
from timecraft.providers.config import ConfigProvider


@click.group("config")
def config_group() -> None:
    """Groups commands related to configuration management."""
    pass


@config_group.command("show")
def show() -> None:
    """Prints the effective configuration, after environment and .env overrides."""
    config = ConfigProvider.get_config()
    for key, value in config.model_dump().items():
        click.echo(f"{key}: {value}")
