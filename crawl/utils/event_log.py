"""Bounded message log shown to the player."""

from __future__ import annotations

from collections import deque


class MessageLog:
    """Most-recent-first log holding at most *capacity* messages.

    Older messages fall off the end as new ones are pushed.
    """

    __slots__ = ("_buffer",)

    def __init__(self, capacity: int = 3) -> None:
        self._buffer: deque[str] = deque(maxlen=max(capacity, 1))

    def push(self, message: str) -> None:
        self._buffer.appendleft(message)

    def push_many(self, messages: list[str]) -> None:
        """Push in order, so the last message ends up first."""
        for message in messages:
            self._buffer.appendleft(message)

    def latest(self) -> tuple[str, ...]:
        return tuple(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)
