"""Shared fixtures for the adventure mode tests."""

from __future__ import annotations

import pytest

from learnvim.level.models import Position


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def straight_steps(start: Position, dest: Position) -> list[Position]:
    """Unit deltas walking along x first, then along y."""
    steps = []
    dx = 1 if dest.x > start.x else -1
    steps += [Position(dx, 0)] * abs(dest.x - start.x)
    dy = 1 if dest.y > start.y else -1
    steps += [Position(0, dy)] * abs(dest.y - start.y)
    return steps


def path_steps(path: list[Position]) -> list[Position]:
    """Unit deltas along a list of adjacent cells."""
    return [b - a for a, b in zip(path, path[1:])]


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def walk():
    """Apply deltas one by one, asserting each is accepted; return the last movement."""

    def _walk(level, steps):
        movement = None
        for step in steps:
            movement = level.player_move(step)
            assert movement.valid_move, f"step {step} from {level.get_current_position()} rejected"
        return movement

    return _walk
