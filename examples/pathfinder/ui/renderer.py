"""Grid rendering."""
from __future__ import annotations

import pygame

from pathviz_grid import Grid, NodeState, NodeType

from ui.constants import COLOR_GRID_LINE, STATE_COLORS, TYPE_COLORS


def draw_grid(surface: pygame.Surface, grid: Grid, tile: int) -> None:
    """Draw node types, overlaid with search progress on open cells."""
    for node in grid.nodes():
        kind = grid.type_of(node)
        color = TYPE_COLORS[kind]
        if kind is NodeType.EMPTY:
            state = grid.search_state(node).state
            if state is not NodeState.UNVISITED:
                color = STATE_COLORS[state]
        rect = pygame.Rect(node.x * tile, node.y * tile, tile, tile)
        pygame.draw.rect(surface, color, rect)

    width = grid.cols * tile
    height = grid.rows * tile
    for x in range(grid.cols + 1):
        pygame.draw.line(surface, COLOR_GRID_LINE, (x * tile, 0), (x * tile, height))
    for y in range(grid.rows + 1):
        pygame.draw.line(surface, COLOR_GRID_LINE, (0, y * tile), (width, y * tile))


def draw_path_line(surface: pygame.Surface, grid: Grid, tile: int) -> None:
    """Connect the centers of PATH cells in start -> end order."""
    end = grid.end
    if end is None or grid.search_state(end).state is not NodeState.PATH:
        return
    points = []
    node = end
    while node is not None:
        points.append((node.x * tile + tile // 2, node.y * tile + tile // 2))
        node = grid.parent_of(node)
    if len(points) > 1:
        pygame.draw.lines(surface, (200, 120, 20), False, points[::-1], max(2, tile // 6))
