"""FramePlayer - time-paced delivery of search frames to a renderer."""
from __future__ import annotations

import logging
from typing import Callable, Sequence

from pathviz_grid.types import AnimationFrame, FrameKind

from pathviz_playback.drivers import TickDriver
from pathviz_playback.pacer import Pacer
from pathviz_playback.types import PlaybackState, PlaybackStats

logger = logging.getLogger(__name__)

FrameCallback = Callable[[AnimationFrame], None]
CompleteCallback = Callable[[], None]


class FramePlayer:
    """Replays a frame sequence at a fixed rate on a cooperative tick loop.

    The player never reorders, skips or repeats frames. Each tick of the
    driver dispatches at most one frame, and only once a full interval has
    elapsed since the previous dispatch.
    """

    def __init__(self, driver: TickDriver, fps: float = 60) -> None:
        self._driver = driver
        self._pacer = Pacer(fps)
        self._frames: tuple[AnimationFrame, ...] = ()
        self._cursor = 0
        self._state = PlaybackState.IDLE
        self._stats = PlaybackStats()
        self._handle: int | None = None
        self._last_tick = 0.0
        self._on_frame: FrameCallback | None = None
        self._on_complete: CompleteCallback | None = None

    # --- Properties ---

    @property
    def fps(self) -> float:
        return self._pacer.fps

    @fps.setter
    def fps(self, value: float) -> None:
        """Takes effect on the next tick, including mid-playback."""
        self._pacer.fps = value

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def remaining(self) -> int:
        return len(self._frames) - self._cursor

    @property
    def frames(self) -> tuple[AnimationFrame, ...]:
        return self._frames

    @property
    def stats(self) -> PlaybackStats:
        """Live stats object; hosts may hold on to it and read it every frame."""
        return self._stats

    # --- Control ---

    def load_frames(self, frames: Sequence[AnimationFrame]) -> None:
        self.pause()
        self._frames = tuple(frames)
        self._cursor = 0
        self._state = PlaybackState.IDLE
        self._stats.visited_count = sum(
            1 for f in self._frames if f.kind is FrameKind.VISIT
        )
        self._stats.path_length = sum(
            1 for f in self._frames if f.kind is FrameKind.PATH
        )
        self._stats.duration = 0.0

    def play(self, on_frame: FrameCallback, on_complete: CompleteCallback) -> None:
        if self._cursor >= len(self._frames):
            on_complete()
            return

        self._on_frame = on_frame
        self._on_complete = on_complete
        if self._state is PlaybackState.PLAYING:
            return

        now = self._driver.now()
        self._state = PlaybackState.PLAYING
        self._pacer.reset(now)
        self._last_tick = now
        self._handle = self._driver.request(self._tick)
        logger.debug(
            "playing from frame %d/%d at %s fps",
            self._cursor, len(self._frames), self._pacer.fps,
        )

    def pause(self) -> None:
        if self._handle is not None:
            self._driver.cancel(self._handle)
            self._handle = None
        if self._state is PlaybackState.PLAYING:
            self._state = PlaybackState.PAUSED
            logger.debug("paused at frame %d/%d", self._cursor, len(self._frames))

    def reset(self) -> None:
        self.pause()
        self._cursor = 0
        self._state = PlaybackState.IDLE
        self._stats.clear()

    def skip_to_end(
        self,
        on_frame: FrameCallback,
        on_complete: CompleteCallback | None = None,
    ) -> None:
        self.pause()
        while self._cursor < len(self._frames):
            frame = self._frames[self._cursor]
            self._cursor += 1
            on_frame(frame)
        self._state = PlaybackState.IDLE
        if on_complete is not None:
            on_complete()

    # --- Tick loop ---

    def _tick(self, now: float) -> None:
        self._handle = None
        if self._state is not PlaybackState.PLAYING:
            return

        self._stats.duration += now - self._last_tick
        self._last_tick = now

        if self._pacer.due(now):
            frame = self._frames[self._cursor]
            self._cursor += 1
            if self._on_frame is not None:
                self._on_frame(frame)
            # The callback may have paused, reset or restarted playback.
            if self._state is not PlaybackState.PLAYING or self._handle is not None:
                return
            if self._cursor >= len(self._frames):
                self._finish()
                return

        self._handle = self._driver.request(self._tick)

    def _finish(self) -> None:
        on_complete = self._on_complete
        self._state = PlaybackState.IDLE
        self._on_frame = None
        self._on_complete = None
        logger.debug("playback complete after %.1f ms", self._stats.duration)
        if on_complete is not None:
            on_complete()
