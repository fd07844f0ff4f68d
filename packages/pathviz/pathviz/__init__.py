"""pathviz - Grid pathfinding visualization engine."""
from __future__ import annotations

from pathviz.config import ConfigError, PathfindingParams
from pathviz.session import PathfindingSession

# Re-export the component packages for session users
from pathviz_grid import (
    AnimationFrame, FrameKind, Grid, Node, NodeState, NodeType, SearchState,
)
from pathviz_search import (
    ALGORITHMS, astar, bfs, dfs, dijkstra, is_reachable, path_nodes,
    run_algorithm, visited_nodes,
)
from pathviz_playback import (
    FramePlayer, ManualDriver, PlaybackState, PlaybackStats, RealtimeDriver,
    TickDriver,
)

__all__ = [
    "ConfigError",
    "PathfindingParams",
    "PathfindingSession",
    "AnimationFrame",
    "FrameKind",
    "Grid",
    "Node",
    "NodeState",
    "NodeType",
    "SearchState",
    "ALGORITHMS",
    "astar",
    "bfs",
    "dfs",
    "dijkstra",
    "is_reachable",
    "path_nodes",
    "run_algorithm",
    "visited_nodes",
    "FramePlayer",
    "ManualDriver",
    "PlaybackState",
    "PlaybackStats",
    "RealtimeDriver",
    "TickDriver",
]
