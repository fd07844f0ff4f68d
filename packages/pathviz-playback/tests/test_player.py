"""Tests for FramePlayer pacing, pause/resume, reset, and skip-to-end."""
from __future__ import annotations

import random

import pytest

from pathviz_grid import AnimationFrame, FrameKind, Node
from pathviz_playback import FramePlayer, ManualDriver, PlaybackState


def _frames(visits: int, path: int) -> list[AnimationFrame]:
    frames = [AnimationFrame(FrameKind.VISIT, Node(i, 0)) for i in range(visits)]
    frames += [AnimationFrame(FrameKind.PATH, Node(i, 1)) for i in range(path)]
    return frames


class Recorder:
    def __init__(self) -> None:
        self.frames: list[AnimationFrame] = []
        self.completed = 0

    def on_frame(self, frame: AnimationFrame) -> None:
        self.frames.append(frame)

    def on_complete(self) -> None:
        self.completed += 1


@pytest.fixture
def driver() -> ManualDriver:
    return ManualDriver()


# --- Loading ---

def test_load_computes_stats_up_front(driver):
    player = FramePlayer(driver, fps=10)
    player.load_frames(_frames(10, 4))
    assert player.stats.visited_count == 10
    assert player.stats.path_length == 4
    assert player.stats.duration == 0.0
    assert player.cursor == 0
    assert player.remaining == 14
    assert player.state is PlaybackState.IDLE


def test_stats_fixed_while_consuming(driver):
    player = FramePlayer(driver, fps=10)
    rec = Recorder()
    player.load_frames(_frames(3, 2))
    player.play(rec.on_frame, rec.on_complete)
    driver.advance(100)
    driver.advance(100)
    assert len(rec.frames) == 2
    assert player.stats.visited_count == 3
    assert player.stats.path_length == 2


def test_load_replaces_sequence_and_stops(driver):
    player = FramePlayer(driver, fps=10)
    rec = Recorder()
    player.load_frames(_frames(5, 0))
    player.play(rec.on_frame, rec.on_complete)
    driver.advance(100)
    player.load_frames(_frames(0, 2))
    assert player.state is PlaybackState.IDLE
    assert player.cursor == 0
    assert driver.pending == 0
    driver.advance(500)
    assert len(rec.frames) == 1


# --- Timed playback ---

def test_one_frame_per_interval(driver):
    player = FramePlayer(driver, fps=10)
    rec = Recorder()
    player.load_frames(_frames(3, 0))
    player.play(rec.on_frame, rec.on_complete)

    driver.advance(50)
    assert rec.frames == []
    driver.advance(50)
    assert len(rec.frames) == 1
    driver.advance(99)
    assert len(rec.frames) == 1
    driver.advance(1)
    assert len(rec.frames) == 2


def test_late_tick_dispatches_only_one_frame(driver):
    player = FramePlayer(driver, fps=60)
    rec = Recorder()
    player.load_frames(_frames(10, 0))
    player.play(rec.on_frame, rec.on_complete)
    driver.advance(1000)
    assert len(rec.frames) == 1


def test_leftover_time_carries_over(driver):
    player = FramePlayer(driver, fps=8)  # 125 ms
    rec = Recorder()
    player.load_frames(_frames(3, 0))
    player.play(rec.on_frame, rec.on_complete)
    driver.tick(150)
    assert len(rec.frames) == 1
    # 100 ms since the last tick, but 125 ms since the carried-over deadline.
    driver.tick(250)
    assert len(rec.frames) == 2


def test_completes_once_and_stops_ticking(driver):
    player = FramePlayer(driver, fps=10)
    rec = Recorder()
    frames = _frames(2, 1)
    player.load_frames(frames)
    player.play(rec.on_frame, rec.on_complete)
    for _ in range(10):
        driver.advance(100)
    assert rec.frames == frames
    assert rec.completed == 1
    assert player.state is PlaybackState.IDLE
    assert driver.pending == 0


def test_play_on_exhausted_sequence_completes_immediately(driver):
    player = FramePlayer(driver, fps=10)
    rec = Recorder()
    player.load_frames([])
    player.play(rec.on_frame, rec.on_complete)
    assert rec.completed == 1
    assert player.state is PlaybackState.IDLE
    assert driver.pending == 0


def test_play_twice_does_not_double_dispatch(driver):
    player = FramePlayer(driver, fps=10)
    rec = Recorder()
    player.load_frames(_frames(4, 0))
    player.play(rec.on_frame, rec.on_complete)
    player.play(rec.on_frame, rec.on_complete)
    assert driver.pending == 1
    driver.advance(100)
    assert len(rec.frames) == 1


def test_speed_change_applies_mid_playback(driver):
    player = FramePlayer(driver, fps=1)
    rec = Recorder()
    player.load_frames(_frames(3, 0))
    player.play(rec.on_frame, rec.on_complete)
    driver.advance(100)
    assert rec.frames == []
    player.fps = 10
    driver.advance(1)
    assert len(rec.frames) == 1


def test_non_positive_fps_rejected(driver):
    with pytest.raises(ValueError):
        FramePlayer(driver, fps=0)
    player = FramePlayer(driver, fps=30)
    with pytest.raises(ValueError):
        player.fps = -5


# --- Pause / resume ---

def test_pause_keeps_cursor_and_resume_continues(driver):
    player = FramePlayer(driver, fps=10)
    rec = Recorder()
    frames = _frames(4, 2)
    player.load_frames(frames)
    player.play(rec.on_frame, rec.on_complete)
    driver.advance(100)
    driver.advance(100)
    player.pause()
    assert player.state is PlaybackState.PAUSED
    assert player.cursor == 2
    assert driver.pending == 0

    driver.advance(1000)
    assert len(rec.frames) == 2

    player.play(rec.on_frame, rec.on_complete)
    for _ in range(10):
        driver.advance(100)
    assert rec.frames == frames
    assert rec.completed == 1


def test_pause_from_frame_callback(driver):
    player = FramePlayer(driver, fps=10)
    seen: list[AnimationFrame] = []

    def on_frame(frame):
        seen.append(frame)
        player.pause()

    player.load_frames(_frames(5, 0))
    player.play(on_frame, lambda: None)
    driver.advance(100)
    driver.advance(100)
    assert len(seen) == 1
    assert player.state is PlaybackState.PAUSED
    assert driver.pending == 0


def test_restart_from_frame_callback_keeps_one_tick_chain(driver):
    player = FramePlayer(driver, fps=10)
    seen: list[AnimationFrame] = []

    def on_frame(frame):
        seen.append(frame)
        if len(seen) == 1:
            player.reset()
            player.play(on_frame, lambda: None)

    player.load_frames(_frames(5, 0))
    player.play(on_frame, lambda: None)
    driver.advance(100)
    assert player.cursor == 0
    assert driver.pending == 1

    player.pause()
    assert driver.pending == 0
    driver.advance(1000)
    assert len(seen) == 1


def test_pause_when_idle_is_harmless(driver):
    player = FramePlayer(driver, fps=10)
    player.pause()
    assert player.state is PlaybackState.IDLE


# --- Reset ---

def test_reset_rewinds_and_zeroes_stats(driver):
    player = FramePlayer(driver, fps=10)
    rec = Recorder()
    frames = _frames(3, 1)
    player.load_frames(frames)
    player.play(rec.on_frame, rec.on_complete)
    driver.advance(100)
    player.reset()
    assert player.cursor == 0
    assert player.state is PlaybackState.IDLE
    assert player.stats.visited_count == 0
    assert player.stats.path_length == 0
    assert player.stats.duration == 0.0
    assert player.frames == tuple(frames)
    assert player.remaining == 4


def test_replay_after_reset(driver):
    player = FramePlayer(driver, fps=10)
    frames = _frames(2, 1)
    player.load_frames(frames)
    first = Recorder()
    player.skip_to_end(first.on_frame)
    player.reset()
    second = Recorder()
    player.play(second.on_frame, second.on_complete)
    for _ in range(5):
        driver.advance(100)
    assert second.frames == frames
    assert second.completed == 1


# --- Skip to end ---

def test_skip_to_end_right_after_load(driver):
    player = FramePlayer(driver, fps=10)
    events: list[object] = []
    frames = _frames(10, 4)
    player.load_frames(frames)
    player.skip_to_end(events.append, lambda: events.append("complete"))
    assert events == [*frames, "complete"]
    assert player.remaining == 0
    assert player.state is PlaybackState.IDLE


def test_skip_to_end_mid_playback(driver):
    player = FramePlayer(driver, fps=10)
    rec = Recorder()
    frames = _frames(5, 2)
    player.load_frames(frames)
    player.play(rec.on_frame, rec.on_complete)
    driver.advance(100)
    driver.advance(100)
    player.skip_to_end(rec.on_frame)
    assert rec.frames == frames
    assert driver.pending == 0
    # The interrupted play() never reports completion on its own.
    driver.advance(1000)
    assert rec.completed == 0


def test_skip_without_complete_callback(driver):
    player = FramePlayer(driver, fps=10)
    rec = Recorder()
    player.load_frames(_frames(2, 0))
    player.skip_to_end(rec.on_frame)
    assert len(rec.frames) == 2
    player.play(rec.on_frame, rec.on_complete)
    assert rec.completed == 1


# --- Ordering law ---

@pytest.mark.parametrize("seed", range(8))
def test_interleaved_controls_deliver_each_frame_once_in_order(seed):
    rng = random.Random(seed)
    driver = ManualDriver()
    player = FramePlayer(driver, fps=rng.choice([5, 30, 60, 120]))
    rec = Recorder()
    frames = _frames(rng.randint(0, 30), rng.randint(0, 10))
    player.load_frames(frames)

    for _ in range(60):
        action = rng.random()
        if action < 0.5:
            player.play(rec.on_frame, rec.on_complete)
        elif action < 0.8:
            player.pause()
        elif action < 0.85:
            player.skip_to_end(rec.on_frame)
        driver.advance(rng.uniform(0, 250))

    player.skip_to_end(rec.on_frame)
    assert rec.frames == frames


# --- Duration ---

def test_duration_counts_only_playing_time(driver):
    player = FramePlayer(driver, fps=10)
    rec = Recorder()
    player.load_frames(_frames(10, 0))
    player.play(rec.on_frame, rec.on_complete)
    driver.advance(100)
    driver.advance(50)
    assert player.stats.duration == pytest.approx(150)

    player.pause()
    driver.advance(500)
    player.play(rec.on_frame, rec.on_complete)
    driver.advance(30)
    assert player.stats.duration == pytest.approx(180)


def test_duration_frozen_after_completion(driver):
    player = FramePlayer(driver, fps=10)
    rec = Recorder()
    player.load_frames(_frames(2, 0))
    player.play(rec.on_frame, rec.on_complete)
    driver.advance(100)
    driver.advance(100)
    assert rec.completed == 1
    assert player.stats.duration == pytest.approx(200)
    driver.advance(100)
    assert player.stats.duration == pytest.approx(200)
