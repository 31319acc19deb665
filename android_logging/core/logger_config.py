"""
Logger configuration management

A LoggerConfig passed to Logger configures every sink at construction time.
Without one, the logger applies its lazy defaults on the first log call.
"""

from dataclasses import dataclass
from typing import Optional, Union

from android_logging.core.log_level import LogLevel

LevelSpec = Optional[Union[LogLevel, str]]

DEFAULT_FILE_FUNC_PADDING = 30
DEFAULT_LINE_PADDING = 5


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    A sink whose level is None is disabled.
    """

    # Sink thresholds
    stdout_level: LevelSpec = None
    stderr_level: LevelSpec = LogLevel.DEBUG
    queue_level: LevelSpec = None

    # Prefix padding
    file_func_padding: int = DEFAULT_FILE_FUNC_PADDING
    line_padding: int = DEFAULT_LINE_PADDING

    # Structured argument indentation
    indent_size: int = 4

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.file_func_padding < 0:
            raise ValueError("file_func_padding cannot be negative")
        if self.line_padding < 0:
            raise ValueError("line_padding cannot be negative")
        if self.indent_size < 0:
            raise ValueError("indent_size cannot be negative")

        # Normalize level names to LogLevel; raises InvalidLevelError
        for name in ("stdout_level", "stderr_level", "queue_level"):
            value = getattr(self, name)
            if value is not None:
                setattr(self, name, LogLevel.coerce(value))

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration: stderr at Debug, nothing else."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging: everything to stdout."""
        return cls(stdout_level=LogLevel.TRACE, stderr_level=None)

    @classmethod
    def capture_config(cls) -> "LoggerConfig":
        """Create configuration that only retains messages in the queue."""
        return cls(stderr_level=None, queue_level=LogLevel.TRACE)

    @classmethod
    def quiet_config(cls) -> "LoggerConfig":
        """Create configuration with every sink disabled."""
        return cls(stderr_level=None)


@dataclass(frozen=True)
class PaddingConfig:
    """Widths used to pad the call site in the message prefix."""

    file_func_width: int = DEFAULT_FILE_FUNC_PADDING
    line_width: int = DEFAULT_LINE_PADDING
