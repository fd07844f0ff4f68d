"""pathviz-search - Grid searches that record their progress as frames."""
from __future__ import annotations

from pathviz_grid.types import AnimationFrame, FrameKind
from pathviz_search.best_first import astar, dijkstra, manhattan
from pathviz_search.traversal import bfs, dfs
from pathviz_search.frames import (
    is_reachable,
    path_nodes,
    reconstruct_path,
    visited_nodes,
)
from pathviz_search.registry import ALGORITHMS, Search, run_algorithm

__all__ = [
    "AnimationFrame",
    "FrameKind",
    "astar",
    "dijkstra",
    "manhattan",
    "bfs",
    "dfs",
    "is_reachable",
    "path_nodes",
    "reconstruct_path",
    "visited_nodes",
    "ALGORITHMS",
    "Search",
    "run_algorithm",
]
