"""
Log argument rendering

Turns each argument of a log call into the text placed after the prefix.
Structured values are pretty-printed and indented so they nest visually
under the single-line prefix.
"""

import numbers
import re
import traceback
import types
from typing import Any, Dict

from android_logging.core.exceptions import UnsupportedTypeError
from android_logging.formatters.circular_json import stringify

DEFAULT_INDENT_SIZE = 4

_LINE_BREAKS = re.compile(r"[\r\n]+")

_CODE_TYPES = (
    types.ModuleType,
    types.GeneratorType,
    types.CoroutineType,
    types.AsyncGeneratorType,
)


def indent_text(text: str, indent_size: int = DEFAULT_INDENT_SIZE) -> str:
    """
    Indent every line of text by indent_size spaces.

    Example:
        >>> indent_text("\\n{\\n  \\"a\\": 1\\n}", 4)
        '\\n    {\\n      "a": 1\\n    }'
    """
    slice_length = 2
    if text.startswith("\n"):
        # the leading newline itself gets indented too
        slice_length += indent_size

    # "\n " makes the first line indented as well; it is sliced off below
    indented = _LINE_BREAKS.sub("\n" + " " * indent_size, "\n " + text)
    return indented[slice_length:]


def is_code_like(value: Any) -> bool:
    """True for callables, classes, modules and generators."""
    return callable(value) or isinstance(value, _CODE_TYPES)


def exception_text(exc: BaseException) -> str:
    """Header line ``Type: message`` followed by the traceback frames."""
    message = str(exc)
    header = f"{type(exc).__name__}: {message}" if message else type(exc).__name__
    frames = "".join(traceback.format_tb(exc.__traceback__))
    return (header + "\n" + frames).rstrip()


def exception_to_dict(exc: BaseException) -> Dict[str, Any]:
    """Split an exception into its first line and the trimmed remainder."""
    lines = exception_text(exc).split("\n")
    return {
        "error": lines[0],
        "stack": [line.strip() for line in lines[1:]],
    }


class ValueRenderer:
    """
    Render log arguments as text.

    The accepted kinds are closed:

    - ``None`` renders as an empty string
    - booleans and numbers render with ``str()``
    - strings are returned unchanged
    - containers and other objects render as indented JSON; objects
      without attributes become a JSON string of their str()
    - exceptions render as ``{"error": ..., "stack": [...]}``

    Functions, classes, modules and generators raise UnsupportedTypeError.
    """

    def __init__(self, indent_size: int = DEFAULT_INDENT_SIZE):
        self.indent_size = indent_size

    def render(self, value: Any) -> str:
        """
        Render a single log argument.

        Args:
            value: Argument passed to a log call

        Returns:
            Text for the message body

        Raises:
            UnsupportedTypeError: If value is a function, class, module or
                generator
        """
        if value is None:
            return ""
        if isinstance(value, (bool, numbers.Number)):
            return str(value)
        if isinstance(value, str):
            return value
        if isinstance(value, BaseException):
            return self._structured(exception_to_dict(value))
        if not is_code_like(value):
            return self._structured(value)

        dump = stringify({
            "value": repr(value),
            "type": type(value).__name__,
            "tag": f"<class '{type(value).__module__}.{type(value).__qualname__}'>",
        })
        raise UnsupportedTypeError(
            indent_text("\nUnsupported type: " + dump, self.indent_size),
            value=value,
        )

    def _structured(self, value: Any) -> str:
        return indent_text("\n" + stringify(value), self.indent_size)

    def __call__(self, value: Any) -> str:
        """Allow renderers to be used with map()."""
        return self.render(value)

    def __repr__(self) -> str:
        """String representation."""
        return f"ValueRenderer(indent_size={self.indent_size})"
