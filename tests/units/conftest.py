"""This module contains shared fixtures for all unit tests."""

import logging
import os
from collections.abc import Generator

import pytest
from timecraft.providers.logging import LoggingProvider


@pytest.fixture(scope="session", autouse=True)
def pin_environment() -> None:
    """Pins the settings that change how values and logs are produced.

    Unit tests must not depend on the timezone or log level of the machine
    running them, nor on a stray .env file.
    """
    os.environ["LOCAL_TIMEZONE"] = "UTC"
    os.environ["LOG_LEVEL"] = "INFO"
    LoggingProvider().get_logger()


@pytest.fixture(autouse=True)
def restore_log_level() -> Generator[None, None, None]:
    """Restores the library logger level after each test."""
    logger = logging.getLogger("timecraft")
    level = logger.level
    yield
    logger.setLevel(level)
