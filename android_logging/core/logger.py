"""
Main Logger class - Android logcat style logger

Every log call is synchronous: arguments are rendered, the call site is
resolved and the finished line is dispatched before the call returns.
"""

from __future__ import annotations
from typing import Any, Dict, Optional, Tuple, Union

from android_logging.core.call_site import CallSiteResolver
from android_logging.core.log_level import LogLevel
from android_logging.core.logger_config import (
    DEFAULT_FILE_FUNC_PADDING,
    DEFAULT_LINE_PADDING,
    LoggerConfig,
    PaddingConfig,
)
from android_logging.formatters.android_formatter import AndroidFormatter
from android_logging.formatters.value_renderer import ValueRenderer
from android_logging.routing.sink_config import Sink
from android_logging.routing.sink_router import SinkRouter
from android_logging.writers.console_writer import ConsoleWriter


class Logger:
    """
    Logger with stdout, stderr and in-memory queue sinks.

    Without a config the sinks start untouched and ensure_defaults()
    decides their state on the first log call: stderr at Debug if nothing
    was configured, otherwise every sink left untouched gets disabled.

    Example:
        logger = Logger()
        logger.enable_stdout("Warn")
        logger.W("disk almost full", {"free_mb": 12})
    """

    def __init__(
        self,
        config: Optional[LoggerConfig] = None,
        stdout: Optional[ConsoleWriter] = None,
        stderr: Optional[ConsoleWriter] = None,
    ):
        self._router = SinkRouter(stdout=stdout, stderr=stderr)
        self._resolver = CallSiteResolver()
        self._renderer = ValueRenderer()
        self._formatter = AndroidFormatter()
        self._padding_set = False
        self._metrics = {"logged": 0}

        if config is not None:
            self.configure(config)

    def configure(self, config: LoggerConfig) -> None:
        """Apply a complete configuration; every sink becomes configured."""
        for sink, level in (
            (Sink.STDOUT, config.stdout_level),
            (Sink.STDERR, config.stderr_level),
            (Sink.QUEUE, config.queue_level),
        ):
            if level is None:
                self._router.disable(sink)
            else:
                self._router.enable(sink, level)

        self.set_padding(config.file_func_padding, config.line_padding)
        self._renderer.indent_size = config.indent_size

    @property
    def router(self) -> SinkRouter:
        return self._router

    @property
    def padding(self) -> PaddingConfig:
        return self._resolver.padding

    # Sink configuration

    def enable_stdout(self, level: Union[LogLevel, str]) -> None:
        """Enable stdout output for messages at level or more urgent."""
        self._router.enable(Sink.STDOUT, level)

    def disable_stdout(self) -> None:
        self._router.disable(Sink.STDOUT)

    def enable_stderr(self, level: Union[LogLevel, str]) -> None:
        """Enable stderr output for messages at level or more urgent."""
        self._router.enable(Sink.STDERR, level)

    def disable_stderr(self) -> None:
        self._router.disable(Sink.STDERR)

    def enable_queue(self, level: Union[LogLevel, str]) -> None:
        """Retain messages at level or more urgent in the queue."""
        self._router.enable(Sink.QUEUE, level)

    def disable_queue(self) -> None:
        self._router.disable(Sink.QUEUE)

    def empty_queue(self) -> None:
        self._router.clear()

    def set_padding(self, file_func_width: int, line_width: int) -> None:
        """
        Set the call site padding.

        Args:
            file_func_width: Width the "file function" part is right-padded to
            line_width: Width the line number is left-padded to
        """
        self._resolver.padding = PaddingConfig(file_func_width, line_width)
        self._padding_set = True

    def set_defaults(self) -> None:
        """Stderr at Debug, stdout and queue disabled, padding (30, 5)."""
        self._install_defaults(reset_padding=True)

    def ensure_defaults(self) -> None:
        """
        Fill in whatever configuration is still missing.

        Runs at the start of every log call. Repeated calls without
        configuration changes in between leave the state unchanged.
        """
        if not any(self._router.is_touched(sink) for sink in Sink):
            self._install_defaults(reset_padding=not self._padding_set)
            return

        # Once any sink is configured, the untouched ones are turned off
        for sink in Sink:
            config = self._router.config_for(sink)
            if not config.touched:
                self._router.disable(sink)
            elif config.enabled and config.threshold is None:
                self._router.enable(sink, LogLevel.DEBUG)

    def _install_defaults(self, reset_padding: bool) -> None:
        self.enable_stderr(LogLevel.DEBUG)
        self.disable_stdout()
        self.disable_queue()
        if reset_padding:
            self.set_padding(DEFAULT_FILE_FUNC_PADDING, DEFAULT_LINE_PADDING)

    # Queue access

    def peek(self) -> str:
        """Oldest retained message, or "" if there is none."""
        return self._router.peek()

    def pop(self) -> str:
        """Remove and return the oldest retained message, or ""."""
        return self._router.pop()

    # Logging

    def log(self, level: Union[LogLevel, str], *args: Any) -> None:
        """
        Log a message built from args.

        Args:
            level: Message level or its name
            args: Values to render; joined with ","

        Raises:
            InvalidLevelError: If level is unknown
            UnsupportedTypeError: If an argument cannot be rendered
            StackResolutionError: If the call site cannot be resolved
        """
        self._log(LogLevel.coerce(level), args)

    def _log(self, level: LogLevel, args: Tuple[Any, ...]) -> None:
        self.ensure_defaults()

        rendered = [self._renderer.render(arg) for arg in args]
        call_site = self._resolver.resolve()
        message = self._formatter.format(level, call_site, rendered)

        self._router.dispatch(level, message)
        self._metrics["logged"] += 1

    def fatal(self, *args: Any) -> None:
        """Log fatal message."""
        self._log(LogLevel.FATAL, args)

    def error(self, *args: Any) -> None:
        """Log error message."""
        self._log(LogLevel.ERROR, args)

    def warn(self, *args: Any) -> None:
        """Log warning message."""
        self._log(LogLevel.WARN, args)

    def info(self, *args: Any) -> None:
        """Log info message."""
        self._log(LogLevel.INFO, args)

    def debug(self, *args: Any) -> None:
        """Log debug message."""
        self._log(LogLevel.DEBUG, args)

    def trace(self, *args: Any) -> None:
        """Log trace message."""
        self._log(LogLevel.TRACE, args)

    # logcat style short names
    F = fatal
    E = error
    W = warn
    I = info  # noqa: E741
    D = debug
    T = trace

    def get_metrics(self) -> Dict[str, int]:
        """Get logging metrics."""
        metrics = self._metrics.copy()
        metrics.update(self._router.get_metrics())
        return metrics

    def __repr__(self) -> str:
        """String representation."""
        return f"Logger({self._router!r}, padding={self.padding!r})"
