"""
Core module for the logging library

This module contains the fundamental classes:
- Logger: Main logger class
- LogLevel: Log level enumeration
- LoggerConfig: Configuration management
- CallSiteResolver: Caller file/function/line lookup
"""

from android_logging.core.call_site import CallSiteInfo, CallSiteResolver
from android_logging.core.exceptions import (
    InvalidLevelError,
    LoggingError,
    StackResolutionError,
    UnsupportedTypeError,
)
from android_logging.core.log_level import LogLevel, rank_of
from android_logging.core.logger import Logger
from android_logging.core.logger_config import LoggerConfig, PaddingConfig

__all__ = [
    "Logger",
    "LogLevel",
    "LoggerConfig",
    "PaddingConfig",
    "CallSiteInfo",
    "CallSiteResolver",
    "rank_of",
    "LoggingError",
    "InvalidLevelError",
    "UnsupportedTypeError",
    "StackResolutionError",
]
