"""Shared types for grid search and playback."""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class NodeType(Enum):
    EMPTY = 0
    WALL = 1
    START = 2
    END = 3


class NodeState(Enum):
    """Presentation state. Search algorithms never read it."""

    UNVISITED = 0
    VISITING = 1
    VISITED = 2
    PATH = 3


@dataclass(frozen=True, slots=True)
class Node:
    """Coordinate handle into a Grid. Type and scratch live in the grid."""

    x: int
    y: int


@dataclass(slots=True)
class SearchState:
    state: NodeState = NodeState.UNVISITED
    g: float = math.inf
    h: float = 0.0
    f: float = math.inf
    parent: Node | None = None

    def clear(self) -> None:
        self.state = NodeState.UNVISITED
        self.g = math.inf
        self.h = 0.0
        self.f = math.inf
        self.parent = None


class FrameKind(Enum):
    VISIT = "visit"
    PATH = "path"


@dataclass(frozen=True, slots=True)
class AnimationFrame:
    kind: FrameKind
    node: Node
