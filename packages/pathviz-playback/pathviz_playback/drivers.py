"""Tick drivers - the host side of the cooperative playback loop."""
from __future__ import annotations

import itertools
import time
from typing import Callable, Protocol

TickCallback = Callable[[float], None]


class TickDriver(Protocol):
    def now(self) -> float: ...
    def request(self, callback: TickCallback) -> int: ...
    def cancel(self, handle: int) -> None: ...


class _CallbackQueue:
    """Pending callbacks for the next tick, in request order."""

    def __init__(self) -> None:
        self._pending: dict[int, TickCallback] = {}
        self._handles = itertools.count(1)

    @property
    def pending(self) -> int:
        return len(self._pending)

    def request(self, callback: TickCallback) -> int:
        handle = next(self._handles)
        self._pending[handle] = callback
        return handle

    def cancel(self, handle: int) -> None:
        self._pending.pop(handle, None)

    def fire(self, now: float) -> int:
        # Callbacks requested while firing wait for the next tick.
        batch = self._pending
        self._pending = {}
        for callback in batch.values():
            callback(now)
        return len(batch)


class ManualDriver(_CallbackQueue):
    """Driver advanced explicitly by a test or a host's own frame loop."""

    def __init__(self, start: float = 0.0) -> None:
        super().__init__()
        self._now = start

    def now(self) -> float:
        return self._now

    def tick(self, now: float) -> int:
        """Set the clock to `now` (ms) and fire one tick. Returns callbacks run."""
        if now < self._now:
            raise ValueError("time cannot move backwards")
        self._now = now
        return self.fire(now)

    def advance(self, ms: float) -> int:
        return self.tick(self._now + ms)


class RealtimeDriver(_CallbackQueue):
    """Blocking driver that ticks at a fixed refresh rate on the monotonic clock."""

    def __init__(self, refresh_rate: int = 60) -> None:
        if refresh_rate <= 0:
            raise ValueError("refresh_rate must be positive")
        super().__init__()
        self._dt = 1.0 / refresh_rate
        self._origin = time.monotonic()

    def now(self) -> float:
        return (time.monotonic() - self._origin) * 1000.0

    def run(self) -> None:
        """Tick until no callback is pending."""
        while self.pending:
            start = time.monotonic()
            self.fire(self.now())
            elapsed = time.monotonic() - start
            sleep_time = self._dt - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)
