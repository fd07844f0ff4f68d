"""Uninformed traversals: breadth-first and depth-first."""
from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from pathviz_grid.types import AnimationFrame, FrameKind, Node

from pathviz_search.frames import emit_path

if TYPE_CHECKING:
    from pathviz_grid import Grid


def bfs(
    grid: Grid,
    start: Node | None,
    end: Node | None,
    allow_diagonal: bool = False,
) -> list[AnimationFrame]:
    """Breadth-first search. Nodes are marked visited when enqueued."""
    if start is None or end is None:
        return []
    grid.reset_state()
    frames: list[AnimationFrame] = []
    queue: deque[Node] = deque([start])
    visited: set[Node] = {start}

    while queue:
        current = queue.popleft()

        if current != start:
            frames.append(AnimationFrame(FrameKind.VISIT, current))

        if current == end:
            emit_path(frames, grid, current)
            break

        for neighbor in grid.neighbors(current, allow_diagonal):
            if neighbor not in visited and grid.is_walkable(neighbor):
                visited.add(neighbor)
                grid.search_state(neighbor).parent = current
                queue.append(neighbor)

    return frames


def dfs(
    grid: Grid,
    start: Node | None,
    end: Node | None,
    allow_diagonal: bool = False,
) -> list[AnimationFrame]:
    """Depth-first search. Duplicates on the stack are dropped when popped.

    Every push of an unvisited neighbor overwrites its parent, so the path
    follows whichever node pushed it last. It is not necessarily shortest.
    """
    if start is None or end is None:
        return []
    grid.reset_state()
    frames: list[AnimationFrame] = []
    stack: list[Node] = [start]
    visited: set[Node] = set()

    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited.add(current)

        if current != start:
            frames.append(AnimationFrame(FrameKind.VISIT, current))

        if current == end:
            emit_path(frames, grid, current)
            break

        for neighbor in grid.neighbors(current, allow_diagonal):
            if neighbor not in visited and grid.is_walkable(neighbor):
                grid.search_state(neighbor).parent = current
                stack.append(neighbor)

    return frames
