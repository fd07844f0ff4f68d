"""Pathfinder - step through grid searches frame by frame with pygame.

Controls:
  Space        Run / Pause / Resume
  S            Skip to the final state
  R            Reset playback
  C            Clear walls
  W            Random walls
  M            Recursive-division maze
  1-4          A* / Dijkstra / BFS / DFS
  D            Toggle diagonal moves
  + / -        Playback speed
  Left-click   Toggle wall (shift: move start)
  Right-click  Move end
  Escape       Quit
"""
from __future__ import annotations

import argparse
import logging
import random
import sys

import pygame

from pathviz import (
    ALGORITHMS,
    ManualDriver,
    PathfindingParams,
    PathfindingSession,
    PlaybackState,
    is_reachable,
)
from ui.constants import ALGORITHM_KEYS, ALGORITHM_LABELS, COLOR_BG, FPS, STATUS_H
from ui.renderer import draw_grid, draw_path_line
from ui.status import StatusBar

SPEED_STEPS = [1, 2, 5, 10, 20, 30, 60, 120, 240, 480]


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Pathfinder - grid search visualizer")
    p.add_argument("--algorithm", choices=sorted(ALGORITHMS), default="astar")
    p.add_argument("--width", type=int, default=1000, help="Canvas width in px (default: 1000)")
    p.add_argument("--height", type=int, default=640, help="Canvas height in px (default: 640)")
    p.add_argument("--grid-size", type=int, default=20, help="Pixels per cell (10-50, default: 20)")
    p.add_argument("--speed", type=float, default=60.0, help="Playback frames per second")
    p.add_argument("--density", type=float, default=0.3, help="Random wall density (0-0.5)")
    p.add_argument("--diagonal", action="store_true", help="Allow diagonal moves")
    p.add_argument("--seed", type=int, default=None, help="Random seed for walls and mazes")
    p.add_argument("--verbose", action="store_true", help="Log playback events")
    args = p.parse_args()
    args.grid_size = max(10, min(50, args.grid_size))
    args.density = max(0.0, min(0.5, args.density))
    return args


def _next_speed(current: float, direction: int) -> float:
    if direction > 0:
        return next((s for s in SPEED_STEPS if s > current), SPEED_STEPS[-1])
    return next((s for s in reversed(SPEED_STEPS) if s < current), SPEED_STEPS[0])


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    params = PathfindingParams(
        algorithm=args.algorithm,
        grid_size=args.grid_size,
        animation_speed=args.speed,
        allow_diagonal=args.diagonal,
        wall_density=args.density,
    )
    driver = ManualDriver()
    session = PathfindingSession(params, driver=driver, rng=random.Random(args.seed))
    session.init_grid_for_canvas(args.width, args.height)

    tile = params.grid_size
    grid_w = session.grid.cols * tile
    grid_h = session.grid.rows * tile

    pygame.init()
    screen = pygame.display.set_mode((grid_w, grid_h + STATUS_H))
    pygame.display.set_caption("Pathfinder")
    clock = pygame.time.Clock()
    status = StatusBar()

    def on_complete() -> None:
        if is_reachable(session.last_frames):
            status.set(f"Path found: {session.stats.path_length} nodes", (100, 255, 100))
        else:
            status.set("No path to the end node", (255, 80, 80))

    def toggle_play() -> None:
        state = session.player.state
        if state is PlaybackState.PLAYING:
            session.pause()
            status.set("Paused")
        elif state is PlaybackState.PAUSED:
            session.resume(on_complete=on_complete)
            status.set("Resumed")
        else:
            session.run(on_complete=on_complete)
            status.set(f"Running {ALGORITHM_LABELS[params.algorithm]}")

    running = True
    while running:
        clock.tick(FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    toggle_play()
                elif event.key == pygame.K_s:
                    if session.player.remaining == 0:
                        session.search()
                    session.skip_to_end(on_complete=on_complete)
                elif event.key == pygame.K_r:
                    session.reset()
                    status.set("Reset")
                elif event.key == pygame.K_c:
                    session.clear_grid()
                    status.set("Cleared walls")
                elif event.key == pygame.K_w:
                    session.generate_random_walls()
                    status.set(f"Random walls at density {params.wall_density:.2f}")
                elif event.key == pygame.K_m:
                    session.generate_maze()
                    status.set("Generated maze")
                elif event.key in (pygame.K_1, pygame.K_2, pygame.K_3, pygame.K_4):
                    params.algorithm = ALGORITHM_KEYS[event.key - pygame.K_1]
                    session.discard_frames()
                    status.set(f"Algorithm: {ALGORITHM_LABELS[params.algorithm]}")
                elif event.key == pygame.K_d:
                    params.allow_diagonal = not params.allow_diagonal
                    session.discard_frames()
                    status.set(f"Diagonal moves {'on' if params.allow_diagonal else 'off'}")
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    session.set_speed(_next_speed(params.animation_speed, 1))
                elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    session.set_speed(_next_speed(params.animation_speed, -1))

            elif event.type == pygame.MOUSEBUTTONDOWN:
                gx, gy = event.pos[0] // tile, event.pos[1] // tile
                if not session.grid.in_bounds(gx, gy):
                    continue
                session.discard_frames()
                if event.button == 1:
                    if pygame.key.get_mods() & pygame.KMOD_SHIFT:
                        session.grid.move_start(gx, gy)
                    else:
                        session.grid.toggle_wall(gx, gy)
                elif event.button == 3:
                    session.grid.move_end(gx, gy)

        driver.tick(float(pygame.time.get_ticks()))

        screen.fill(COLOR_BG)
        draw_grid(screen, session.grid, tile)
        draw_path_line(screen, session.grid, tile)
        status.draw(screen, session, grid_h)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
