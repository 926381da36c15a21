"""Trailing-edge debouncer for search input."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Generic, TypeVar

log = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_DELAY = 0.3


class Debouncer(Generic[T]):
    """Publishes the latest pushed value once input has been idle for ``delay`` seconds.

    Every :meth:`push` cancels the pending timer and starts a new one, so a
    burst of pushes yields a single publish carrying the last value. There is
    no leading edge. Timers run on the event loop that is current when
    :meth:`push` is called.
    """

    def __init__(self, callback: Callable[[T], None], delay: float = DEFAULT_DELAY) -> None:
        self._callback = callback
        self.delay = delay
        self._handle: asyncio.TimerHandle | None = None
        self._value: T | None = None
        self._closed = False

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def push(self, value: T) -> None:
        if self._closed:
            raise RuntimeError("Debouncer is closed")
        self._value = value
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire)

    def cancel(self) -> None:
        """Drop the pending publish, if any."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def close(self) -> None:
        self.cancel()
        self._closed = True

    def _fire(self) -> None:
        self._handle = None
        value = self._value
        try:
            self._callback(value)  # type: ignore[arg-type]
        except Exception:
            log.exception("Error in debounced callback")
