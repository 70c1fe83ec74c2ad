"""Short-lived status messages shown at the bottom of the screen."""

from __future__ import annotations

import threading
import time

MESSAGE_COOLDOWN = 1.5


class MessageLog:
    """A stack of messages; the newest is shown until it expires after ``cooldown`` seconds.

    When a message expires, the one below it starts its own cooldown.
    """

    def __init__(self, cooldown: float = MESSAGE_COOLDOWN) -> None:
        self.cooldown = cooldown
        self.messages: list[tuple[str, float]] = []
        self._lock = threading.Lock()

    def push(self, message: str) -> None:
        with self._lock:
            self.messages.append((message, time.monotonic()))

    def clear(self) -> None:
        with self._lock:
            self.messages = []

    def expire(self, now: float | None = None) -> None:
        """Drop every message whose cooldown has run out by ``now``."""
        if now is None:
            now = time.monotonic()
        with self._lock:
            while self.messages:
                _, stamp = self.messages[-1]
                if now - stamp < self.cooldown:
                    break
                self.messages.pop()
                if self.messages:
                    text, _ = self.messages[-1]
                    self.messages[-1] = (text, stamp + self.cooldown)

    def last_message(self) -> str | None:
        self.expire()
        with self._lock:
            return self.messages[-1][0] if self.messages else None


_LOG = MessageLog()


def log(message: str) -> None:
    _LOG.push(message)


def clear() -> None:
    _LOG.clear()


def last_message() -> str | None:
    return _LOG.last_message()