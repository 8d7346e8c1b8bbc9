"""This module sets up the library logger.

`LoggingProvider` is a singleton that builds the `timecraft` logger on first
use. Records carry a `correlation_id` taken from thread-local storage, so the
lines written while one command runs can be grouped together.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Generator
from contextlib import contextmanager
from logging import Filter, Formatter, Logger, LogRecord, StreamHandler, _nameToLevel, getLogger

from timecraft.providers.config import ConfigProvider

LOGGER_NAME = "timecraft"
LOG_FORMAT = "%(asctime)s - %(name)s - [%(levelname)s] [%(correlation_id)s] - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_log_context = threading.local()


def _level_number(name: str, fallback: int) -> int:
    """Maps a level name such as "debug" to its number, or to the fallback."""
    return _nameToLevel.get(name.upper(), fallback)


class ContextualFilter(Filter):
    """Stamps each record with the correlation ID of the current thread."""

    def filter(self, record: LogRecord) -> bool:
        """Sets `record.correlation_id`, using "-" outside any correlation scope.

        Args:
            record: The record about to be emitted.

        Returns:
            Always True; no record is dropped.
        """
        record.correlation_id = getattr(_log_context, "correlation_id", None) or "-"
        return True


class LoggingProvider:
    """Hands out the single `timecraft` logger.

    The level comes from `LOG_LEVEL` unless the caller passes an override,
    which the command line does for its `--log-level` flag.
    """

    _instance: LoggingProvider | None = None
    _logger: Logger | None = None

    def __new__(cls) -> LoggingProvider:
        """Returns the one shared provider."""
        if not cls._instance:  # pragma: no cover
            cls._instance = super().__new__(cls)
        return cls._instance

    def _build_logger(self, level_name: str) -> Logger:
        """Sets the level, the stderr handler and the correlation filter.

        Args:
            level_name: The level to start at; unknown names mean INFO.

        Returns:
            The library logger.
        """
        logger = getLogger(LOGGER_NAME)
        logger.setLevel(_level_number(level_name, _nameToLevel["INFO"]))

        if not logger.handlers:
            handler = StreamHandler(sys.stderr)
            handler.setFormatter(Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
            logger.addHandler(handler)
            logger.addFilter(ContextualFilter())

        logger.debug(f"Logger configured with level: {level_name}")
        return logger

    def get_logger(self, level_override: str | None = None) -> Logger:
        """Returns the library logger, building it on first use.

        Args:
            level_override: An optional level name such as "DEBUG". It wins
                over `LOG_LEVEL`, also once the logger already exists.

        Returns:
            The library logger.
        """
        if not self._logger:
            self._logger = self._build_logger(level_override or ConfigProvider.get_config().LOG_LEVEL)
        elif level_override:
            self._logger.setLevel(_level_number(level_override, self._logger.level))
        return self._logger

    @contextmanager
    def set_correlation_id(self, correlation_id: str) -> Generator[None, None, None]:
        """Tags the records logged inside the block with `correlation_id`.

        Args:
            correlation_id: The ID to attach.

        Yields:
            None.
        """
        try:
            _log_context.correlation_id = correlation_id
            yield
        finally:
            _log_context.correlation_id = None
