"""
In-memory message queue

Retains formatted lines in chronological order until they are popped.
The queue is unbounded; callers drain it with pop() or clear().
"""

from collections import deque
from typing import Deque, Iterator, List


class MessageQueue:
    """FIFO of formatted log lines."""

    def __init__(self):
        self._messages: Deque[str] = deque()

    def write(self, message: str) -> None:
        """Append a message (writer interface)."""
        self.push(message)

    def push(self, message: str) -> None:
        self._messages.append(message)

    def peek(self) -> str:
        """Oldest message without removing it, or "" when empty."""
        if not self._messages:
            return ""
        return self._messages[0]

    def pop(self) -> str:
        """Remove and return the oldest message, or "" when empty."""
        if not self._messages:
            return ""
        return self._messages.popleft()

    def clear(self) -> None:
        self._messages.clear()

    def snapshot(self) -> List[str]:
        """Copy of the retained messages, oldest first."""
        return list(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[str]:
        return iter(self.snapshot())

    def __repr__(self) -> str:
        """String representation."""
        return f"MessageQueue(size={len(self._messages)})"
