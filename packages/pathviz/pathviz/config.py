"""Host configuration for a pathfinding session."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Mapping

from pathviz_search import ALGORITHMS


class ConfigError(ValueError):
    """Raised when PathfindingParams hold an unusable value."""


@dataclass
class PathfindingParams:
    """Mutable parameters the host edits between runs.

    Attributes:
        algorithm: Search name, one of ``ALGORITHMS``.
        grid_size: Pixels per cell; only used to derive cols/rows.
        animation_speed: Playback rate in frames per second.
        allow_diagonal: Add the four diagonal neighbors to every node.
        wall_density: Wall probability for random wall generation.
    """

    algorithm: str = "astar"
    grid_size: int = 20
    animation_speed: float = 60.0
    allow_diagonal: bool = False
    wall_density: float = 0.3

    def validate(self) -> None:
        if self.algorithm not in ALGORITHMS:
            raise ConfigError(
                f"Unknown algorithm {self.algorithm!r}, "
                f"expected one of {sorted(ALGORITHMS)}"
            )
        if self.grid_size <= 0:
            raise ConfigError(f"grid_size must be positive, got {self.grid_size}")
        if self.animation_speed <= 0:
            raise ConfigError(
                f"animation_speed must be positive, got {self.animation_speed}"
            )
        if not 0.0 <= self.wall_density <= 1.0:
            raise ConfigError(
                f"wall_density must be in [0, 1], got {self.wall_density}"
            )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> PathfindingParams:
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown parameter(s): {', '.join(unknown)}")
        params = cls(**data)
        params.validate()
        return params

    def grid_dimensions(self, width_px: int, height_px: int) -> tuple[int, int]:
        """Cells that fit in a canvas of the given size, at least one per axis."""
        return (
            max(1, width_px // self.grid_size),
            max(1, height_px // self.grid_size),
        )
