"""Pacer - frames-per-second interval accounting."""
from __future__ import annotations


class Pacer:
    def __init__(self, fps: float) -> None:
        self._fps = 0.0
        self._interval = 0.0
        self._last = 0.0
        self.fps = fps

    @property
    def fps(self) -> float:
        return self._fps

    @fps.setter
    def fps(self, value: float) -> None:
        if value <= 0:
            raise ValueError("fps must be positive")
        self._fps = value
        self._interval = 1000.0 / value

    @property
    def interval(self) -> float:
        """Milliseconds between dispatches."""
        return self._interval

    @property
    def last(self) -> float:
        return self._last

    def reset(self, now: float) -> None:
        self._last = now

    def due(self, now: float) -> bool:
        """True when a full interval has elapsed since the last dispatch.

        At most one dispatch per call; the remainder of the elapsed time
        carries over so the long-run rate does not drift.
        """
        delta = now - self._last
        if delta < self._interval:
            return False
        self._last = now - (delta % self._interval)
        return True
