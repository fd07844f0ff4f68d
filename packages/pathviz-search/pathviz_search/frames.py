"""Frame helpers shared by every search."""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from pathviz_grid.types import AnimationFrame, FrameKind, Node

if TYPE_CHECKING:
    from pathviz_grid import Grid


def reconstruct_path(grid: Grid, end: Node) -> list[Node]:
    """Follow parent links back from `end`; returned in start -> end order."""
    path: list[Node] = []
    current: Node | None = end
    while current is not None:
        path.append(current)
        current = grid.parent_of(current)
    path.reverse()
    return path


def emit_path(frames: list[AnimationFrame], grid: Grid, end: Node) -> None:
    for node in reconstruct_path(grid, end):
        frames.append(AnimationFrame(FrameKind.PATH, node))


def path_nodes(frames: Iterable[AnimationFrame]) -> list[Node]:
    return [f.node for f in frames if f.kind is FrameKind.PATH]


def visited_nodes(frames: Iterable[AnimationFrame]) -> list[Node]:
    return [f.node for f in frames if f.kind is FrameKind.VISIT]


def is_reachable(frames: Iterable[AnimationFrame]) -> bool:
    """A run found the end iff it emitted at least one Path frame."""
    return any(f.kind is FrameKind.PATH for f in frames)
