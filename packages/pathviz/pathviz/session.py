"""PathfindingSession - controller wiring grid, search and playback together."""
from __future__ import annotations

import dataclasses
import logging
import random
import time
from typing import Callable

from pathviz_grid import AnimationFrame, FrameKind, Grid, NodeState
from pathviz_playback import FramePlayer, ManualDriver, PlaybackStats, TickDriver
from pathviz_search import run_algorithm

from pathviz.config import PathfindingParams

logger = logging.getLogger(__name__)

_FRAME_STATES = {
    FrameKind.VISIT: NodeState.VISITED,
    FrameKind.PATH: NodeState.PATH,
}


class PathfindingSession:
    """One grid, one player, driven by a host's parameters.

    The host renders by passing ``on_frame``; without one, frames only
    update the grid's presentation state.
    """

    def __init__(
        self,
        params: PathfindingParams | None = None,
        driver: TickDriver | None = None,
        rng: random.Random | None = None,
        cols: int = 40,
        rows: int = 30,
    ) -> None:
        self._params = params if params is not None else PathfindingParams()
        self._params.validate()
        self._driver = driver if driver is not None else ManualDriver()
        self._grid = Grid(cols, rows, rng=rng)
        self._player = FramePlayer(self._driver, fps=self._params.animation_speed)
        self._search_ms = 0.0
        self._last_frames: list[AnimationFrame] = []

    @property
    def params(self) -> PathfindingParams:
        return self._params

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def player(self) -> FramePlayer:
        return self._player

    @property
    def driver(self) -> TickDriver:
        return self._driver

    @property
    def stats(self) -> PlaybackStats:
        return self._player.stats

    @property
    def search_ms(self) -> float:
        """Wall-clock milliseconds the last search took to produce its frames."""
        return self._search_ms

    @property
    def last_frames(self) -> list[AnimationFrame]:
        return self._last_frames

    # --- Grid ---

    def init_grid(self, cols: int, rows: int) -> None:
        self.discard_frames()
        self._grid.initialize(cols, rows)

    def init_grid_for_canvas(self, width_px: int, height_px: int) -> None:
        self.init_grid(*self._params.grid_dimensions(width_px, height_px))

    def reset_grid_state(self) -> None:
        self._grid.reset_state()

    def clear_grid(self) -> None:
        self.discard_frames()
        self._grid.clear_walls()

    def generate_random_walls(self) -> None:
        self.discard_frames()
        self._grid.randomize_walls(self._params.wall_density)

    def generate_maze(self) -> None:
        self.discard_frames()
        self._grid.generate_maze()

    # --- Search and playback ---

    def mark_frame(self, frame: AnimationFrame) -> None:
        self._grid.set_state(frame.node, _FRAME_STATES[frame.kind])

    def search(self) -> list[AnimationFrame]:
        """Run the configured algorithm and load its frames without playing."""
        self._params.validate()
        self._grid.reset_state()
        started = time.perf_counter()
        frames = run_algorithm(
            self._params.algorithm,
            self._grid,
            self._grid.start,
            self._grid.end,
            self._params.allow_diagonal,
        )
        self._search_ms = (time.perf_counter() - started) * 1000.0
        self._last_frames = frames
        self._player.fps = self._params.animation_speed
        self._player.load_frames(frames)
        logger.debug(
            "%s search: %d visited, %d on path, %.2f ms",
            self._params.algorithm,
            self.stats.visited_count,
            self.stats.path_length,
            self._search_ms,
        )
        return frames

    def run(
        self,
        on_frame: Callable[[AnimationFrame], None] | None = None,
        on_complete: Callable[[], None] | None = None,
    ) -> list[AnimationFrame]:
        frames = self.search()
        self._player.play(self._frame_handler(on_frame), on_complete or _noop)
        return frames

    def resume(
        self,
        on_frame: Callable[[AnimationFrame], None] | None = None,
        on_complete: Callable[[], None] | None = None,
    ) -> None:
        self._player.fps = self._params.animation_speed
        self._player.play(self._frame_handler(on_frame), on_complete or _noop)

    def pause(self) -> None:
        self._player.pause()

    def reset(self) -> None:
        self._player.reset()
        self._grid.reset_state()

    def discard_frames(self) -> None:
        """Stop playback and drop frames that no longer match the grid layout."""
        self._player.reset()
        self._player.load_frames([])
        self._last_frames = []
        self._grid.reset_state()

    def skip_to_end(
        self,
        on_frame: Callable[[AnimationFrame], None] | None = None,
        on_complete: Callable[[], None] | None = None,
    ) -> None:
        self._player.skip_to_end(self._frame_handler(on_frame), on_complete)

    def set_speed(self, fps: float) -> None:
        dataclasses.replace(self._params, animation_speed=fps).validate()
        self._params.animation_speed = fps
        self._player.fps = fps

    def _frame_handler(
        self, on_frame: Callable[[AnimationFrame], None] | None
    ) -> Callable[[AnimationFrame], None]:
        def handle(frame: AnimationFrame) -> None:
            self.mark_frame(frame)
            if on_frame is not None:
                on_frame(frame)
        return handle


def _noop() -> None:
    pass
