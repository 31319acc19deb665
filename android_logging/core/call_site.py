"""
Call-site resolution

Finds the source location of the code that called a logging entry point
by walking the interpreter's frames and skipping every frame that belongs
to this package.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from types import FrameType
from typing import List, Optional

from android_logging.core.exceptions import StackResolutionError
from android_logging.core.logger_config import PaddingConfig

PACKAGE_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


@dataclass(frozen=True)
class StackFrame:
    """One parsed frame: base file name, function name and line."""

    path: str
    file: str
    func: str
    line: int

    @classmethod
    def from_frame(cls, frame: FrameType) -> "StackFrame":
        code = frame.f_code
        qualname = getattr(code, "co_qualname", code.co_name)
        return cls(
            path=os.path.abspath(code.co_filename),
            file=os.path.basename(code.co_filename),
            func=qualname.split(".")[-1],
            line=frame.f_lineno,
        )


@dataclass(frozen=True)
class CallSiteInfo:
    """Call site ready for the message prefix."""

    file_func: str
    line: str
    file_name: str = ""
    function_name: str = ""
    line_number: int = 0


def capture_stack(skip: int = 0) -> List[StackFrame]:
    """
    Capture the current stack, most recent frame first.

    Args:
        skip: Number of additional frames to leave out; the frame of
            capture_stack itself is never included

    Returns:
        Parsed frames
    """
    frames: List[StackFrame] = []
    frame: Optional[FrameType] = sys._getframe(skip + 1)
    while frame is not None:
        frames.append(StackFrame.from_frame(frame))
        frame = frame.f_back
    return frames


class CallSiteResolver:
    """
    Resolve the caller of a logging entry point.

    The first captured frame is always internal. Frames are skipped while
    their file lies under internal_root; the first frame outside it is the
    call site. If every frame is internal the last one is returned without
    padding.
    """

    def __init__(
        self,
        padding: Optional[PaddingConfig] = None,
        internal_root: str = PACKAGE_ROOT,
    ):
        self.padding = padding or PaddingConfig()
        self.internal_root = os.path.abspath(internal_root)

    def is_internal(self, frame: StackFrame) -> bool:
        """True if frame belongs to the logging package."""
        if frame.path == self.internal_root:
            return True
        return frame.path.startswith(self.internal_root.rstrip(os.sep) + os.sep)

    def resolve(self) -> CallSiteInfo:
        """
        Determine the call site of the current log call.

        Returns:
            CallSiteInfo with padded file/function and line

        Raises:
            StackResolutionError: If the stack cannot be captured or parsed
        """
        try:
            stack = capture_stack()
            for frame in stack[1:]:
                if not self.is_internal(frame):
                    return CallSiteInfo(
                        file_func=f"{frame.file} {frame.func}".ljust(self.padding.file_func_width),
                        line=str(frame.line).rjust(self.padding.line_width),
                        file_name=frame.file,
                        function_name=frame.func,
                        line_number=frame.line,
                    )

            last = stack[-1]
            return CallSiteInfo(
                file_func=f"{last.file} {last.func}",
                line=str(last.line),
                file_name=last.file,
                function_name=last.func,
                line_number=last.line,
            )
        except Exception as ex:
            print(f"Call site resolution error: {ex!r}", file=sys.stderr)
            raise StackResolutionError(str(ex)) from ex

    def __repr__(self) -> str:
        """String representation."""
        return f"CallSiteResolver(padding={self.padding!r})"
