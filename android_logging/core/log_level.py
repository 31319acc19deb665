"""
Log level enumeration

Android logcat ordering: lower value means more urgent.
"""

from enum import IntEnum
from typing import Dict, Union

from android_logging.core.exceptions import InvalidLevelError


class LogLevel(IntEnum):
    """
    Log level enumeration.

    The integer value is the level's rank. A message passes a sink
    threshold when its rank is lower than or equal to the threshold.
    """

    FATAL = 0
    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5

    def __str__(self) -> str:
        """String representation of log level."""
        return self.label

    @property
    def label(self) -> str:
        """Display name, e.g. ``"Warn"``."""
        return LEVEL_NAMES[self]

    @property
    def letter(self) -> str:
        """Single character marker used in the message prefix."""
        return self.label[0]

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert a display name to LogLevel.

        Args:
            level_str: Exact level name ("Fatal", "Error", "Warn", "Info",
                "Debug" or "Trace"); matching is case-sensitive

        Returns:
            LogLevel enum value

        Raises:
            InvalidLevelError: If level_str is not a known name
        """
        try:
            return LEVEL_FROM_NAME[level_str]
        except (KeyError, TypeError):
            raise InvalidLevelError(level_str) from None

    @classmethod
    def coerce(cls, level: Union["LogLevel", str]) -> "LogLevel":
        """Accept either a LogLevel member or its display name."""
        if isinstance(level, LogLevel):
            return level
        return cls.from_string(level)


# Mapping from log level to names
LEVEL_NAMES: Dict[LogLevel, str] = {
    LogLevel.FATAL: "Fatal",
    LogLevel.ERROR: "Error",
    LogLevel.WARN: "Warn",
    LogLevel.INFO: "Info",
    LogLevel.DEBUG: "Debug",
    LogLevel.TRACE: "Trace",
}

# Reverse mapping
LEVEL_FROM_NAME: Dict[str, LogLevel] = {v: k for k, v in LEVEL_NAMES.items()}


def rank_of(name: str) -> int:
    """Return the rank (0..5) of the named level."""
    return int(LogLevel.from_string(name))
