"""Bottom status bar with playback statistics."""
from __future__ import annotations

import pygame

from pathviz import PathfindingSession

from ui.constants import ALGORITHM_LABELS, COLOR_STATUS_BG, COLOR_TEXT, COLOR_TEXT_DIM, STATUS_H

HELP = (
    "Space run/pause  S skip  R reset  C clear  W walls  M maze  "
    "1-4 algorithm  D diagonal  +/- speed  click wall  shift-click start  right-click end"
)


class StatusBar:
    """Displays the session's parameters, stats, and the last message."""

    def __init__(self) -> None:
        self._message = ""
        self._color = COLOR_TEXT
        self._font: pygame.font.Font | None = None

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont("monospace", 13)
        return self._font

    def set(self, message: str, color: tuple[int, int, int] = COLOR_TEXT) -> None:
        self._message = message
        self._color = color

    def draw(self, surface: pygame.Surface, session: PathfindingSession, top: int) -> None:
        width = surface.get_width()
        pygame.draw.rect(surface, COLOR_STATUS_BG, pygame.Rect(0, top, width, STATUS_H))

        params = session.params
        stats = session.stats
        font = self._get_font()
        line = (
            f"{ALGORITHM_LABELS[params.algorithm]:<9}"
            f"diag={'on' if params.allow_diagonal else 'off':<4}"
            f"speed={params.animation_speed:>4.0f}fps  "
            f"visited={stats.visited_count:<5} path={stats.path_length:<4} "
            f"play={stats.duration:>7.0f}ms  search={session.search_ms:.2f}ms  "
            f"[{session.player.state.value}]"
        )
        surface.blit(font.render(line, True, COLOR_TEXT), (8, top + 6))
        if self._message:
            surface.blit(font.render(self._message, True, self._color), (8, top + 22))
        surface.blit(font.render(HELP, True, COLOR_TEXT_DIM), (8, top + 38))
