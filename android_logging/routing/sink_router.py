"""
Sink router

Applies per-sink level filtering and hands each message to every sink
that accepts it.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Union

from android_logging.core.log_level import LogLevel
from android_logging.routing.sink_config import Sink, SinkConfig
from android_logging.writers.console_writer import ConsoleWriter
from android_logging.writers.queue_writer import MessageQueue


class SinkRouter:
    """
    Routes formatted messages to the stdout, stderr and queue sinks.

    Every sink is checked independently on each dispatch, so queue capture
    and console output never exclude each other.

    Example:
        router = SinkRouter()
        router.enable(Sink.STDOUT, "Warn")
        router.disable(Sink.STDERR)
        router.dispatch(LogLevel.ERROR, "E/app.py main(   12): boom")
    """

    def __init__(
        self,
        stdout: Optional[ConsoleWriter] = None,
        stderr: Optional[ConsoleWriter] = None,
    ):
        """
        Initialize sink router.

        Args:
            stdout: Writer for the stdout sink (default: sys.stdout)
            stderr: Writer for the stderr sink (default: sys.stderr)
        """
        self._configs: Dict[Sink, SinkConfig] = {sink: SinkConfig() for sink in Sink}
        self._stdout = stdout or ConsoleWriter("stdout")
        self._stderr = stderr or ConsoleWriter("stderr")
        self._queue: Optional[MessageQueue] = None
        self._written: Dict[Sink, int] = {sink: 0 for sink in Sink}

    @property
    def queue_initialized(self) -> bool:
        """False until an enabled queue sink first sees a dispatch."""
        return self._queue is not None

    def queue_size(self) -> int:
        if self._queue is None:
            return 0
        return len(self._queue)

    def queue_snapshot(self) -> List[str]:
        """Copy of the retained messages, oldest first."""
        if self._queue is None:
            return []
        return self._queue.snapshot()

    def config_for(self, sink: Sink) -> SinkConfig:
        return self._configs[sink]

    def is_touched(self, sink: Sink) -> bool:
        return self._configs[sink].touched

    def enable(self, sink: Sink, level: Union[LogLevel, str]) -> None:
        """
        Enable a sink with a threshold.

        Args:
            sink: Sink to enable
            level: Threshold level or its name

        Raises:
            InvalidLevelError: If level is not a known name; the sink is
                left unchanged
        """
        threshold = LogLevel.coerce(level)
        config = self._configs[sink]
        config.enabled = True
        config.threshold = threshold

    def disable(self, sink: Sink) -> None:
        """Disable a sink, defaulting its threshold to Debug if never set."""
        config = self._configs[sink]
        config.enabled = False
        if config.threshold is None:
            config.threshold = LogLevel.DEBUG

    def dispatch(self, level: LogLevel, message: str) -> int:
        """
        Send a message to every sink that accepts its level.

        Args:
            level: Message level
            message: Formatted line

        Returns:
            Number of sinks written
        """
        count = 0

        if self._configs[Sink.QUEUE].enabled is True:
            if self._queue is None:
                self._queue = MessageQueue()
            if self._configs[Sink.QUEUE].accepts(level):
                self._queue.write(message)
                self._written[Sink.QUEUE] += 1
                count += 1

        if self._configs[Sink.STDOUT].accepts(level):
            self._stdout.write(message)
            self._written[Sink.STDOUT] += 1
            count += 1

        if self._configs[Sink.STDERR].accepts(level):
            self._stderr.write(message)
            self._written[Sink.STDERR] += 1
            count += 1

        return count

    def get_metrics(self) -> Dict[str, int]:
        """Messages written per sink."""
        return {str(sink): written for sink, written in self._written.items()}

    def would_write(self, sink: Sink, level: LogLevel) -> bool:
        """True if a message at level would reach sink."""
        return self._configs[sink].accepts(level)

    def peek(self) -> str:
        if self._queue is None:
            return ""
        return self._queue.peek()

    def pop(self) -> str:
        if self._queue is None:
            return ""
        return self._queue.pop()

    def clear(self) -> None:
        """Empty the queue; no-op if it was never used."""
        if self._queue is not None:
            self._queue.clear()

    def snapshot(self) -> Dict[Sink, SinkConfig]:
        """Copy of the current sink configuration."""
        return {
            sink: SinkConfig(config.enabled, config.threshold)
            for sink, config in self._configs.items()
        }

    def __repr__(self) -> str:
        """String representation."""
        configs = ", ".join(f"{sink}={config!r}" for sink, config in self._configs.items())
        return f"SinkRouter({configs})"
