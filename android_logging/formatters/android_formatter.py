"""
Android logcat style line formatter

Produces lines such as::

    I/app.py main                  (   12): hello,world
"""

from typing import Sequence

from android_logging.core.call_site import CallSiteInfo
from android_logging.core.log_level import LogLevel


class AndroidFormatter:
    """Build the ``<L>/<file func>(<line>): <args>`` message line."""

    separator = ","

    def prefix(self, level: LogLevel, call_site: CallSiteInfo) -> str:
        return f"{level.letter}/{call_site.file_func}({call_site.line}):"

    def format(self, level: LogLevel, call_site: CallSiteInfo, rendered: Sequence[str]) -> str:
        """
        Format a log line.

        Args:
            level: Message level
            call_site: Resolved (padded) call site
            rendered: Already rendered arguments

        Returns:
            Complete message line without trailing newline
        """
        return f"{self.prefix(level, call_site)} {self.separator.join(rendered)}"

    def __repr__(self) -> str:
        """String representation."""
        return "AndroidFormatter()"
