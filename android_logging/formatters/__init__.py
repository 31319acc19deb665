"""
Log formatters module

Renders log arguments and builds the logcat style message line.
"""

from android_logging.formatters.android_formatter import AndroidFormatter
from android_logging.formatters.circular_json import stringify, to_json_tree
from android_logging.formatters.value_renderer import ValueRenderer, indent_text

__all__ = [
    "AndroidFormatter",
    "ValueRenderer",
    "indent_text",
    "stringify",
    "to_json_tree",
]
