"""Recursive-division maze carving."""
from __future__ import annotations

import random
from typing import TYPE_CHECKING

from pathviz_grid.types import Node, NodeType

if TYPE_CHECKING:
    from pathviz_grid.grid import Grid

_ORTHOGONAL = [(-1, 0), (1, 0), (0, -1), (0, 1)]
_DIAGONAL = [(-1, -1), (-1, 1), (1, -1), (1, 1)]


def _first_with_parity(lo: int, parity: int) -> int:
    return lo if lo % 2 == parity else lo + 1


def recursive_division(grid: Grid, rng: random.Random) -> None:
    """Open the interior of a walled grid and divide it into a perfect maze.

    The outer ring stays wall. Walls are drawn on even lines with holes on
    odd cells, so a later wall never lands on an earlier hole. Start and End
    may sit on a wall line; each is then joined to the nearest room.
    """
    grid.fill_rect(1, 1, grid.cols - 2, grid.rows - 2, NodeType.EMPTY)
    _divide(grid, rng, 1, grid.cols - 2, 1, grid.rows - 2)
    _connect(grid, grid.start)
    _connect(grid, grid.end)


def _is_room(grid: Grid, x: int, y: int) -> bool:
    # No dividing line runs along an odd index or the last interior line.
    if not (1 <= x <= grid.cols - 2 and 1 <= y <= grid.rows - 2):
        return False
    return (x % 2 == 1 or x == grid.cols - 2) and (y % 2 == 1 or y == grid.rows - 2)


def _connect(grid: Grid, marker: Node | None) -> None:
    if marker is None:
        return
    x, y = marker.x, marker.y
    if _is_room(grid, x, y):
        return
    if any(_is_room(grid, x + dx, y + dy) for dx, dy in _ORTHOGONAL):
        return
    for dx, dy in _DIAGONAL:
        if _is_room(grid, x + dx, y + dy):
            grid.set_wall(x + dx, y, wall=False)
            return



def _divide(grid: Grid, rng: random.Random, x1: int, x2: int, y1: int, y2: int) -> None:
    if x2 - x1 < 2 or y2 - y1 < 2:
        return

    horizontal = (x2 - x1) < (y2 - y1)

    if horizontal:
        y = rng.randrange(_first_with_parity(y1 + 1, 0), y2, 2)
        hole = rng.randrange(_first_with_parity(x1, 1), x2 + 1, 2)
        for x in range(x1, x2 + 1):
            if x != hole:
                grid.set_wall(x, y)
        _divide(grid, rng, x1, x2, y1, y - 1)
        _divide(grid, rng, x1, x2, y + 1, y2)
    else:
        x = rng.randrange(_first_with_parity(x1 + 1, 0), x2, 2)
        hole = rng.randrange(_first_with_parity(y1, 1), y2 + 1, 2)
        for y in range(y1, y2 + 1):
            if y != hole:
                grid.set_wall(x, y)
        _divide(grid, rng, x1, x - 1, y1, y2)
        _divide(grid, rng, x + 1, x2, y1, y2)
