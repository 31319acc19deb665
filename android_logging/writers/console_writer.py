"""Console writers for standard output and standard error"""

import sys
from typing import Optional, TextIO


class ConsoleWriter:
    """Write formatted lines to a console stream."""

    def __init__(self, stream_name: str = "stderr", stream: Optional[TextIO] = None):
        """
        Initialize console writer.

        Args:
            stream_name: Attribute of ``sys`` to write to ("stdout" or
                "stderr"); looked up on every write so redirection works
            stream: Explicit output stream, overrides stream_name
        """
        if stream is None and stream_name not in ("stdout", "stderr"):
            raise ValueError(f"Unknown console stream: {stream_name}")
        self.stream_name = stream_name
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        """Current output stream."""
        return self._stream or getattr(sys, self.stream_name)

    def write(self, message: str) -> None:
        """Write one message line."""
        stream = self.stream
        stream.write(message + "\n")
        stream.flush()

    def flush(self) -> None:
        """Flush stream."""
        self.stream.flush()

    def __repr__(self) -> str:
        """String representation."""
        return f"ConsoleWriter({self.stream_name})"
