"""Tests for PathfindingParams validation and canvas sizing."""
from __future__ import annotations

import pytest

from pathviz import ConfigError, PathfindingParams


class TestDefaults:
    def test_defaults_are_valid(self) -> None:
        params = PathfindingParams()
        params.validate()
        assert params.algorithm == "astar"
        assert params.grid_size == 20
        assert params.animation_speed == 60.0
        assert params.allow_diagonal is False
        assert params.wall_density == 0.3


class TestValidate:
    @pytest.mark.parametrize(
        "field,value",
        [
            ("algorithm", "greedy"),
            ("grid_size", 0),
            ("animation_speed", 0),
            ("animation_speed", -10),
            ("wall_density", -0.1),
            ("wall_density", 1.5),
        ],
    )
    def test_rejects_bad_values(self, field: str, value: object) -> None:
        params = PathfindingParams(**{field: value})
        with pytest.raises(ConfigError):
            params.validate()

    def test_config_error_is_value_error(self) -> None:
        assert issubclass(ConfigError, ValueError)

    @pytest.mark.parametrize("name", ["astar", "dijkstra", "bfs", "dfs"])
    def test_accepts_every_algorithm(self, name: str) -> None:
        PathfindingParams(algorithm=name).validate()


class TestFromMapping:
    def test_builds(self) -> None:
        params = PathfindingParams.from_mapping(
            {"algorithm": "bfs", "allow_diagonal": True, "wall_density": 0.1}
        )
        assert params.algorithm == "bfs"
        assert params.allow_diagonal is True
        assert params.wall_density == 0.1
        assert params.grid_size == 20

    def test_unknown_key(self) -> None:
        with pytest.raises(ConfigError, match="speed"):
            PathfindingParams.from_mapping({"speed": 10})

    def test_invalid_value(self) -> None:
        with pytest.raises(ConfigError):
            PathfindingParams.from_mapping({"grid_size": -4})


class TestGridDimensions:
    def test_floor_division(self) -> None:
        params = PathfindingParams(grid_size=20)
        assert params.grid_dimensions(810, 605) == (40, 30)

    def test_small_canvas_clamped(self) -> None:
        params = PathfindingParams(grid_size=50)
        assert params.grid_dimensions(10, 0) == (1, 1)
