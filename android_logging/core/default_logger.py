"""
Process-wide logger

Module-level shortcuts that forward to a shared Logger instance, created
on first use. Code that needs isolation should construct its own Logger.
"""

from typing import Any, Optional, Union

from android_logging.core.log_level import LogLevel
from android_logging.core.logger import Logger

_default_logger: Optional[Logger] = None


def get_logger() -> Logger:
    """Return the shared logger, creating it on first use."""
    global _default_logger
    if _default_logger is None:
        _default_logger = Logger()
    return _default_logger


def set_logger(logger: Logger) -> None:
    """Replace the shared logger."""
    global _default_logger
    _default_logger = logger


def reset_logger() -> None:
    """Discard the shared logger; the next call creates a fresh one."""
    global _default_logger
    _default_logger = None


def enable_stdout(level: Union[LogLevel, str]) -> None:
    """Enable stdout on the shared logger."""
    get_logger().enable_stdout(level)


def disable_stdout() -> None:
    """Disable stdout on the shared logger."""
    get_logger().disable_stdout()


def enable_stderr(level: Union[LogLevel, str]) -> None:
    """Enable stderr on the shared logger."""
    get_logger().enable_stderr(level)


def disable_stderr() -> None:
    """Disable stderr on the shared logger."""
    get_logger().disable_stderr()


def enable_queue(level: Union[LogLevel, str]) -> None:
    """Enable the message queue on the shared logger."""
    get_logger().enable_queue(level)


def disable_queue() -> None:
    """Disable the message queue on the shared logger."""
    get_logger().disable_queue()


def empty_queue() -> None:
    """Drop every retained message."""
    get_logger().empty_queue()


def set_padding(file_func_width: int, line_width: int) -> None:
    """Set the call site padding of the shared logger."""
    get_logger().set_padding(file_func_width, line_width)


def peek() -> str:
    """Oldest retained message, or "" if there is none."""
    return get_logger().peek()


def pop() -> str:
    """Remove and return the oldest retained message, or ""."""
    return get_logger().pop()


def F(*args: Any) -> None:
    """Log fatal message."""
    get_logger().fatal(*args)


def E(*args: Any) -> None:
    """Log error message."""
    get_logger().error(*args)


def W(*args: Any) -> None:
    """Log warning message."""
    get_logger().warn(*args)


def I(*args: Any) -> None:  # noqa: E743
    """Log info message."""
    get_logger().info(*args)


def D(*args: Any) -> None:
    """Log debug message."""
    get_logger().debug(*args)


def T(*args: Any) -> None:
    """Log trace message."""
    get_logger().trace(*args)
