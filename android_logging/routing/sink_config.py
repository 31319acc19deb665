"""
Sink configuration data structure

Each sink has an enable flag and a threshold level. ``None`` in either
field means the value was never set.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from android_logging.core.log_level import LogLevel


class Sink(Enum):
    """Output destinations."""

    STDOUT = "stdout"
    STDERR = "stderr"
    QUEUE = "queue"

    def __str__(self) -> str:
        return self.value


@dataclass
class SinkConfig:
    """
    Configuration for a single sink.

    Attributes:
        enabled: True/False once configured, None while untouched
        threshold: Least urgent level the sink accepts, None if never set
    """

    enabled: Optional[bool] = None
    threshold: Optional[LogLevel] = None

    @property
    def touched(self) -> bool:
        """True once the sink was explicitly enabled or disabled."""
        return self.enabled is not None

    def accepts(self, level: LogLevel) -> bool:
        """True if the sink is enabled and level passes the threshold."""
        if self.enabled is not True or self.threshold is None:
            return False
        return level <= self.threshold

    def __repr__(self) -> str:
        """String representation."""
        threshold = self.threshold.label if self.threshold is not None else None
        return f"SinkConfig(enabled={self.enabled}, threshold={threshold})"
