"""
Exception hierarchy for the logging library

Every failure aborts the log call that triggered it.
"""

from typing import Any


class LoggingError(Exception):
    """Base class for all errors raised by android_logging."""


class InvalidLevelError(LoggingError, ValueError):
    """Raised when a level name is not one of the six known levels."""

    def __init__(self, level: Any):
        self.level = level
        super().__init__(f"Invalid log level supplied: {level}")


class UnsupportedTypeError(LoggingError, TypeError):
    """
    Raised when a log argument cannot be rendered.

    The message carries an indented dump of the offending value.
    """

    def __init__(self, message: str, value: Any = None):
        self.value = value
        super().__init__(message)


class StackResolutionError(LoggingError, RuntimeError):
    """Raised when the caller's frame cannot be determined."""
