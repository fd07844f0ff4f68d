"""Grid - cols x rows node matrix with start/end markers and wall layout."""
from __future__ import annotations

import logging
import random
from typing import Iterator

from pathviz_grid.maze import recursive_division
from pathviz_grid.types import Node, NodeState, NodeType, SearchState

logger = logging.getLogger(__name__)

_ORTHOGONAL = [(-1, 0), (1, 0), (0, -1), (0, 1)]
_DIAGONAL = [(-1, -1), (-1, 1), (1, -1), (1, 1)]

_ASCII = {
    NodeType.EMPTY: ".",
    NodeType.WALL: "#",
    NodeType.START: "S",
    NodeType.END: "E",
}


def _corner_inset(size: int) -> int:
    return min(5, size // 4)


class Grid:
    """Static layout and per-node search scratch, both indexed by y * cols + x."""

    def __init__(self, cols: int, rows: int, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._cols = 0
        self._rows = 0
        self._types: list[NodeType] = []
        self._scratch: list[SearchState] = []
        self._start: Node | None = None
        self._end: Node | None = None
        self.initialize(cols, rows)

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def start(self) -> Node | None:
        return self._start

    @property
    def end(self) -> Node | None:
        return self._end

    # --- Allocation ---

    def initialize(self, cols: int, rows: int) -> None:
        if cols < 1 or rows < 1:
            logger.warning("clamping degenerate grid size %dx%d", cols, rows)
        self._cols = max(1, cols)
        self._rows = max(1, rows)
        size = self._cols * self._rows
        self._types = [NodeType.EMPTY] * size
        self._scratch = [SearchState() for _ in range(size)]

        ix = _corner_inset(self._cols)
        iy = _corner_inset(self._rows)
        self._end = Node(self._cols - 1 - ix, self._rows - 1 - iy)
        self._types[self._index(self._end)] = NodeType.END
        # On a 1x1 grid both markers share the only node; START wins.
        self._start = Node(ix, iy)
        self._types[self._index(self._start)] = NodeType.START
        logger.debug(
            "allocated %dx%d grid, start=%s end=%s",
            self._cols, self._rows, self._start, self._end,
        )

    # --- Lookup ---

    def _index(self, node: Node) -> int:
        return node.y * self._cols + node.x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._cols and 0 <= y < self._rows

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise ValueError(
                f"({x}, {y}) out of bounds for {self._cols}x{self._rows} grid"
            )

    def _checked_index(self, node: Node) -> int:
        self._check_bounds(node.x, node.y)
        return node.y * self._cols + node.x

    def node(self, x: int, y: int) -> Node:
        self._check_bounds(x, y)
        return Node(x, y)

    def nodes(self) -> Iterator[Node]:
        for y in range(self._rows):
            for x in range(self._cols):
                yield Node(x, y)

    def type_of(self, node: Node) -> NodeType:
        return self._types[self._checked_index(node)]

    def is_walkable(self, node: Node) -> bool:
        return self._types[self._checked_index(node)] is not NodeType.WALL

    def walls(self) -> list[Node]:
        return [n for n in self.nodes() if self.type_of(n) is NodeType.WALL]

    def search_state(self, node: Node) -> SearchState:
        return self._scratch[self._checked_index(node)]

    def parent_of(self, node: Node) -> Node | None:
        return self._scratch[self._checked_index(node)].parent

    def set_state(self, node: Node, state: NodeState) -> None:
        self._scratch[self._checked_index(node)].state = state

    def neighbors(self, node: Node, allow_diagonal: bool = False) -> list[Node]:
        """In-bounds neighbors: left, right, up, down, then diagonals if allowed."""
        dirs = _ORTHOGONAL + _DIAGONAL if allow_diagonal else _ORTHOGONAL
        result: list[Node] = []
        for dx, dy in dirs:
            nx, ny = node.x + dx, node.y + dy
            if 0 <= nx < self._cols and 0 <= ny < self._rows:
                result.append(Node(nx, ny))
        return result

    # --- Editing ---

    def _is_marker(self, index: int) -> bool:
        return self._types[index] in (NodeType.START, NodeType.END)

    def set_wall(self, x: int, y: int, wall: bool = True) -> None:
        """Place or remove a wall. Start and End cells are left alone."""
        self._check_bounds(x, y)
        i = y * self._cols + x
        if self._is_marker(i):
            return
        self._types[i] = NodeType.WALL if wall else NodeType.EMPTY

    def toggle_wall(self, x: int, y: int) -> None:
        self._check_bounds(x, y)
        i = y * self._cols + x
        self.set_wall(x, y, self._types[i] is not NodeType.WALL)

    def move_start(self, x: int, y: int) -> bool:
        return self._move_marker(x, y, NodeType.START)

    def move_end(self, x: int, y: int) -> bool:
        return self._move_marker(x, y, NodeType.END)

    def _move_marker(self, x: int, y: int, marker: NodeType) -> bool:
        self._check_bounds(x, y)
        target = Node(x, y)
        current = self._start if marker is NodeType.START else self._end
        other = self._end if marker is NodeType.START else self._start
        if target == other:
            return False
        if current is not None and current != other:
            self._types[self._index(current)] = NodeType.EMPTY
        self._types[self._index(target)] = marker
        if marker is NodeType.START:
            self._start = target
        else:
            self._end = target
        return True

    # --- Bulk operations ---

    def reset_state(self) -> None:
        for scratch in self._scratch:
            scratch.clear()

    def clear_walls(self) -> None:
        for i, kind in enumerate(self._types):
            if kind is NodeType.WALL:
                self._types[i] = NodeType.EMPTY
        self.reset_state()

    def randomize_walls(self, density: float) -> None:
        density = min(1.0, max(0.0, density))
        self.clear_walls()
        rng = self._rng
        for i in range(len(self._types)):
            if self._is_marker(i):
                continue
            if rng.random() < density:
                self._types[i] = NodeType.WALL
        logger.debug("randomized walls at density %.2f", density)

    def generate_maze(self) -> None:
        self.clear_walls()
        for i in range(len(self._types)):
            if not self._is_marker(i):
                self._types[i] = NodeType.WALL
        recursive_division(self, self._rng)
        logger.debug("generated %dx%d maze", self._cols, self._rows)

    def fill_rect(self, x1: int, y1: int, x2: int, y2: int, kind: NodeType) -> None:
        """Set every non-marker cell of an inclusive rectangle to EMPTY or WALL."""
        for y in range(max(0, y1), min(self._rows - 1, y2) + 1):
            for x in range(max(0, x1), min(self._cols - 1, x2) + 1):
                i = y * self._cols + x
                if not self._is_marker(i):
                    self._types[i] = kind

    def render_ascii(self) -> str:
        lines = []
        for y in range(self._rows):
            row = self._types[y * self._cols:(y + 1) * self._cols]
            lines.append("".join(_ASCII[kind] for kind in row))
        return "\n".join(lines)
