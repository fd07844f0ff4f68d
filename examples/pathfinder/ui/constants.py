"""Layout, color, and rendering constants."""
from __future__ import annotations

from pathviz_grid import NodeState, NodeType

STATUS_H = 56
FPS = 60

COLOR_BG = (20, 20, 30)
COLOR_GRID_LINE = (40, 40, 52)
COLOR_STATUS_BG = (30, 30, 40)
COLOR_TEXT = (200, 200, 200)
COLOR_TEXT_DIM = (130, 130, 140)

TYPE_COLORS: dict[NodeType, tuple[int, int, int]] = {
    NodeType.EMPTY: (235, 235, 240),
    NodeType.WALL: (45, 52, 70),
    NodeType.START: (60, 200, 100),
    NodeType.END: (230, 70, 70),
}

STATE_COLORS: dict[NodeState, tuple[int, int, int]] = {
    NodeState.VISITING: (150, 200, 250),
    NodeState.VISITED: (120, 170, 235),
    NodeState.PATH: (250, 210, 60),
}

ALGORITHM_KEYS = ["astar", "dijkstra", "bfs", "dfs"]
ALGORITHM_LABELS = {
    "astar": "A*",
    "dijkstra": "Dijkstra",
    "bfs": "BFS",
    "dfs": "DFS",
}
