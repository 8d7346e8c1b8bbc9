"""This module defines custom exceptions related to date parsing."""


class TimecraftError(Exception):
    """Base exception for errors raised by the timecraft library."""

    pass


class ParseError(TimecraftError, ValueError):
    """Raised when a date string does not match the expected format.

    Attributes:
        text: The input that was rejected.
        reason: A short description of what was wrong with it.
    """

    def __init__(self, text: str, reason: str) -> None:
        """Initializes the error.

        Args:
            text: The input that was rejected.
            reason: A short description of what was wrong with it.
        """
        self.text = text
        self.reason = reason
        super().__init__(f"Could not parse {text!r}: {reason}")
