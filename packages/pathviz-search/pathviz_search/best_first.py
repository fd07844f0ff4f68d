"""A* and Dijkstra over a Grid, with a linear-scan open set."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from pathviz_grid.types import AnimationFrame, FrameKind, Node

from pathviz_search.frames import emit_path

if TYPE_CHECKING:
    from pathviz_grid import Grid


def manhattan(a: Node, b: Node) -> float:
    return float(abs(a.x - b.x) + abs(a.y - b.y))


def _best_first(
    grid: Grid,
    start: Node,
    end: Node,
    allow_diagonal: bool,
    heuristic: Callable[[Node, Node], float] | None,
) -> list[AnimationFrame]:
    grid.reset_state()
    frames: list[AnimationFrame] = []

    origin = grid.search_state(start)
    origin.g = 0.0
    origin.h = heuristic(start, end) if heuristic is not None else 0.0
    origin.f = origin.h

    # List order is the tie-break: min() keeps the first minimum it scans.
    open_list: list[Node] = [start]
    open_members: set[Node] = {start}
    closed: set[Node] = set()

    while open_list:
        current = min(open_list, key=lambda n: grid.search_state(n).f)

        if current != start:
            frames.append(AnimationFrame(FrameKind.VISIT, current))

        if current == end:
            emit_path(frames, grid, current)
            break

        open_list.remove(current)
        open_members.discard(current)
        closed.add(current)

        current_g = grid.search_state(current).g
        for neighbor in grid.neighbors(current, allow_diagonal):
            if neighbor in closed or not grid.is_walkable(neighbor):
                continue

            tentative = current_g + 1
            scratch = grid.search_state(neighbor)

            if neighbor not in open_members:
                open_list.append(neighbor)
                open_members.add(neighbor)
            elif tentative >= scratch.g:
                continue

            scratch.parent = current
            scratch.g = tentative
            scratch.h = heuristic(neighbor, end) if heuristic is not None else 0.0
            scratch.f = scratch.g + scratch.h

    return frames


def astar(
    grid: Grid,
    start: Node | None,
    end: Node | None,
    allow_diagonal: bool = False,
) -> list[AnimationFrame]:
    """A* with unit step cost and a Manhattan heuristic.

    The heuristic stays Manhattan when diagonal moves are allowed, so it is
    not admissible there and the path may be longer than the shortest one.
    """
    if start is None or end is None:
        return []
    return _best_first(grid, start, end, allow_diagonal, manhattan)


def dijkstra(
    grid: Grid,
    start: Node | None,
    end: Node | None,
    allow_diagonal: bool = False,
) -> list[AnimationFrame]:
    """Uniform-cost search: A* with h = 0, selecting by g."""
    if start is None or end is None:
        return []
    return _best_first(grid, start, end, allow_diagonal, None)
