"""pathviz-playback - Cooperative, time-paced replay of search frames."""
from __future__ import annotations

from pathviz_playback.types import PlaybackState, PlaybackStats
from pathviz_playback.pacer import Pacer
from pathviz_playback.drivers import ManualDriver, RealtimeDriver, TickCallback, TickDriver
from pathviz_playback.player import CompleteCallback, FrameCallback, FramePlayer

__all__ = [
    "PlaybackState",
    "PlaybackStats",
    "Pacer",
    "ManualDriver",
    "RealtimeDriver",
    "TickCallback",
    "TickDriver",
    "CompleteCallback",
    "FrameCallback",
    "FramePlayer",
]
