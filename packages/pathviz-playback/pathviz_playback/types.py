"""Playback state and statistics."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PlaybackState(Enum):
    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"


@dataclass
class PlaybackStats:
    """Live counters for a loaded frame sequence.

    Attributes:
        visited_count: Visit frames in the loaded sequence, fixed at load.
        path_length: Path frames in the loaded sequence, fixed at load.
        duration: Milliseconds spent playing, pauses excluded.
    """

    visited_count: int = 0
    path_length: int = 0
    duration: float = 0.0

    def clear(self) -> None:
        self.visited_count = 0
        self.path_length = 0
        self.duration = 0.0
