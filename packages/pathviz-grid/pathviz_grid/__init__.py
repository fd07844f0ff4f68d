"""pathviz-grid - Grid model and shared types for search visualization."""
from __future__ import annotations

from pathviz_grid.types import (
    AnimationFrame,
    FrameKind,
    Node,
    NodeState,
    NodeType,
    SearchState,
)
from pathviz_grid.grid import Grid
from pathviz_grid.maze import recursive_division

__all__ = [
    "AnimationFrame",
    "FrameKind",
    "Node",
    "NodeState",
    "NodeType",
    "SearchState",
    "Grid",
    "recursive_division",
]
