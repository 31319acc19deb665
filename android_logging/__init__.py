"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Android Logging - logcat style logging for Python
Formats messages as ``<L>/<file func>(<line>): <message>`` and routes them
to stdout, stderr and an in-memory queue
"""

__version__ = "1.0.0"

from android_logging.core.logger import Logger
from android_logging.core.log_level import LogLevel, rank_of
from android_logging.core.logger_config import LoggerConfig, PaddingConfig
from android_logging.core.exceptions import (
    LoggingError,
    InvalidLevelError,
    UnsupportedTypeError,
    StackResolutionError,
)
from android_logging.core.default_logger import (
    get_logger,
    set_logger,
    reset_logger,
    enable_stdout,
    disable_stdout,
    enable_stderr,
    disable_stderr,
    enable_queue,
    disable_queue,
    empty_queue,
    set_padding,
    peek,
    pop,
    F,
    E,
    W,
    I,
    D,
    T,
)

# Import submodules (not all classes by default)
from android_logging import formatters
from android_logging import routing
from android_logging import writers

__all__ = [
    "Logger",
    "LogLevel",
    "LoggerConfig",
    "PaddingConfig",
    "rank_of",
    "LoggingError",
    "InvalidLevelError",
    "UnsupportedTypeError",
    "StackResolutionError",
    "get_logger",
    "set_logger",
    "reset_logger",
    "enable_stdout",
    "disable_stdout",
    "enable_stderr",
    "disable_stderr",
    "enable_queue",
    "disable_queue",
    "empty_queue",
    "set_padding",
    "peek",
    "pop",
    "F",
    "E",
    "W",
    "I",
    "D",
    "T",
    "formatters",
    "routing",
    "writers",
]
