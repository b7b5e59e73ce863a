"""Tests for learnvim.level.targets – target placement strategies."""

from __future__ import annotations

import pytest

from learnvim.level.errors import NoOpenCellError
from learnvim.level.models import Position, Target
from learnvim.level.targets import CornerTargets, MazeTargets
from learnvim.maze.generator import Maze
from learnvim.utils.characters import DEFAULT_CHARACTERS as CHARS


def blank_grid(width: int, height: int) -> list[list[str]]:
    return [[CHARS.empty] * width for _ in range(height)]


# ---------------------------------------------------------------------------
# CornerTargets
# ---------------------------------------------------------------------------

class TestCornerTargets:
    def test_positions_100x50(self):
        targets = CornerTargets(CHARS).define_targets(100, 50)
        assert [t.position for t in targets] == [
            Position(20, 10),
            Position(79, 10),
            Position(20, 39),
            Position(79, 39),
        ]

    def test_positions_80x24(self):
        targets = CornerTargets(CHARS).define_targets(80, 24)
        assert [t.position for t in targets] == [
            Position(16, 4),
            Position(63, 4),
            Position(16, 19),
            Position(63, 19),
        ]

    def test_none_reached(self):
        targets = CornerTargets(CHARS).define_targets(100, 50)
        assert not any(t.reached for t in targets)

    def test_count(self):
        behavior = CornerTargets(CHARS)
        assert behavior.get_target_count() == 4
        assert len(behavior.define_targets(30, 30)) == 4

    def test_fresh_list_each_call(self):
        behavior = CornerTargets(CHARS)
        a = behavior.define_targets(50, 20)
        a[0].reached = True
        assert not behavior.define_targets(50, 20)[0].reached


class TestUpdateGrid:
    def test_glyphs(self):
        behavior = CornerTargets(CHARS)
        targets = behavior.define_targets(20, 10)
        targets[0].reached = True
        grid = blank_grid(20, 10)

        behavior.update_grid(grid, targets, 1)

        def at(t: Target) -> str:
            return grid[t.position.y][t.position.x]

        assert at(targets[0]) == CHARS.target_reached
        assert at(targets[1]) == CHARS.target_active
        assert at(targets[2]) == CHARS.target_inactive
        assert at(targets[3]) == CHARS.target_inactive

    def test_active_wins_over_reached(self):
        behavior = CornerTargets(CHARS)
        targets = behavior.define_targets(20, 10)
        targets[3].reached = True
        grid = blank_grid(20, 10)
        behavior.update_grid(grid, targets, 3)
        pos = targets[3].position
        assert grid[pos.y][pos.x] == CHARS.target_active


# ---------------------------------------------------------------------------
# MazeTargets
# ---------------------------------------------------------------------------

class TestMazeTargets:
    def test_single_open_interior_target(self):
        maze = Maze(21, 42, 10, 3, 2)
        targets = MazeTargets(CHARS, maze).define_targets()
        assert len(targets) == 1
        pos = targets[0].position
        local = maze.to_local(pos)
        assert 1 <= local.x < maze.width - 1
        assert 1 <= local.y < maze.height - 1
        assert maze.is_open(pos)
        assert not targets[0].reached

    def test_count(self):
        assert MazeTargets(CHARS, Maze(21, 42, 0, 0, 1)).get_target_count() == 1

    def test_reproducible_for_fresh_maze(self):
        a = MazeTargets(CHARS, Maze(25, 69, 4, 4, 2)).define_targets()
        b = MazeTargets(CHARS, Maze(25, 69, 4, 4, 2)).define_targets()
        assert a == b

    def test_ignores_grid_size(self):
        a = MazeTargets(CHARS, Maze(25, 69, 4, 4, 2)).define_targets(200, 100)
        b = MazeTargets(CHARS, Maze(25, 69, 4, 4, 2)).define_targets()
        assert a == b

    def test_no_open_cell_raises(self):
        class SealedMaze:
            def interior_open_cells(self):
                return []

        with pytest.raises(NoOpenCellError):
            MazeTargets(CHARS, SealedMaze()).define_targets()

    def test_paints_active_target(self):
        maze = Maze(15, 42, 0, 0, 1)
        behavior = MazeTargets(CHARS, maze)
        targets = behavior.define_targets()
        grid = blank_grid(15, 15)
        behavior.update_grid(grid, targets, 0)
        pos = targets[0].position
        assert grid[pos.y][pos.x] == CHARS.target_active
