"""Algorithm lookup by name."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from pathviz_grid.types import AnimationFrame, Node

from pathviz_search.best_first import astar, dijkstra
from pathviz_search.traversal import bfs, dfs

if TYPE_CHECKING:
    from pathviz_grid import Grid

logger = logging.getLogger(__name__)

Search = Callable[["Grid", "Node | None", "Node | None", bool], list[AnimationFrame]]

ALGORITHMS: dict[str, Search] = {
    "astar": astar,
    "dijkstra": dijkstra,
    "bfs": bfs,
    "dfs": dfs,
}


def run_algorithm(
    name: str,
    grid: Grid,
    start: Node | None,
    end: Node | None,
    allow_diagonal: bool = False,
) -> list[AnimationFrame]:
    """Run the named search. Unknown names and missing markers yield no frames."""
    search = ALGORITHMS.get(name)
    if search is None:
        logger.warning("unknown algorithm %r", name)
        return []
    if start is None or end is None:
        return []
    frames = search(grid, start, end, allow_diagonal)
    logger.debug("%s produced %d frames", name, len(frames))
    return frames
