"""Tests for learnvim.level.one – the maze level."""

from __future__ import annotations

import pytest

from conftest import path_steps
from learnvim.level.errors import InvalidDimensionsError, InvalidSaveStateError, MazeTooSmallError
from learnvim.level.models import Position, SavedLevel, Target
from learnvim.level.one import LevelOne, MazeLayoutConfig
from learnvim.maze.maze_core import bfs_shortest_path
from learnvim.utils.characters import DEFAULT_CHARACTERS as CHARS

UP = Position(0, -1)
LEFT = Position(-1, 0)


@pytest.fixture()
def level(clock) -> LevelOne:
    lvl = LevelOne(clock=clock)
    lvl.init(100, 40)
    return lvl


def steps_to_target(level) -> list[Position]:
    path = bfs_shortest_path(level.maze, level.get_current_position(), level.targets[0].position)
    assert path, "target unreachable"
    return path_steps(path)


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

class TestLayout:
    def test_maze_size(self):
        layout = MazeLayoutConfig()
        assert layout.maze_size(100, 40) == 40
        assert layout.maze_size(60, 40) == 28
        assert layout.maze_size(400, 200) == layout.max_size

    def test_too_small(self):
        with pytest.raises(MazeTooSmallError):
            MazeLayoutConfig().maze_size(20, 5)
        with pytest.raises(MazeTooSmallError):
            MazeLayoutConfig().maze_size(10, 40)

    def test_mismatched_config(self):
        with pytest.raises(ValueError):
            MazeLayoutConfig(seeds=(1, 2), path_widths=(1,))

    def test_mazes_side_by_side(self, level):
        first, second = level.mazes
        assert (first.offset_x, first.offset_y) == (8, 0)
        assert (second.offset_x, second.offset_y) == (51, 0)
        assert first.width == second.width == 40
        assert first.path_width == 3
        assert second.path_width == 2

    def test_centered_vertically(self, clock):
        lvl = LevelOne(clock=clock)
        lvl.init(100, 30)
        assert lvl.mazes[0].width == 30
        lvl.init(200, 60)
        assert lvl.mazes[0].width == 41
        assert lvl.mazes[0].offset_y == (60 - 41) // 2

    def test_custom_layout(self, clock):
        lvl = LevelOne(clock=clock, layout=MazeLayoutConfig(seeds=(1, 2, 3), path_widths=(1, 1, 1)))
        lvl.init(60, 20)
        assert lvl.total_mazes == 3
        assert len(lvl.mazes) == 3
        assert lvl.get_instructions() == "Maze 1/3: Reach the X using hjkl keys"


# ---------------------------------------------------------------------------
# Init
# ---------------------------------------------------------------------------

class TestInit:
    def test_fresh_state(self, level):
        assert level.in_progress()
        assert not level.is_completed()
        assert level.get_current_target() == 0
        assert level.get_start_position() == Position(11, 3)
        assert level.get_current_position() == Position(11, 3)
        assert len(level.get_targets()) == 1

    def test_instructions(self, level):
        assert level.get_instructions() == "Maze 1/2: Reach the X using hjkl keys"

    def test_grid_shows_both_mazes(self, level):
        grid = level.render()
        assert len(grid) == 40 and len(grid[0]) == 100
        assert grid[0][8] == CHARS.wall
        assert grid[0][51] == CHARS.wall
        assert grid[0][0] == CHARS.empty
        assert grid[3][11] == CHARS.cursor
        target = level.targets[0].position
        assert grid[target.y][target.x] == CHARS.target_active

    def test_target_inside_active_maze(self, level):
        assert level.maze.is_open(level.targets[0].position)

    def test_init_is_reproducible(self, clock):
        a = LevelOne(clock=clock)
        b = LevelOne(clock=clock)
        a.init(100, 40)
        b.init(100, 40)
        assert a.get_targets() == b.get_targets()
        assert a.render() == b.render()

    def test_init_too_small(self, clock):
        lvl = LevelOne(clock=clock)
        with pytest.raises(MazeTooSmallError):
            lvl.init(20, 5)
        assert not lvl.in_progress()


# ---------------------------------------------------------------------------
# Movement
# ---------------------------------------------------------------------------

class TestMovement:
    def test_wall_rejected(self, level):
        for delta in (UP, LEFT):
            movement = level.player_move(delta)
            assert not movement.valid_move
            assert movement.updated_position == Position(11, 3)
            assert movement.instruction_message == level.get_instructions()

    def test_open_move_leaves_trail(self, level):
        first = steps_to_target(level)[0]
        movement = level.player_move(first)
        assert movement.valid_move
        grid = level.render()
        assert grid[3][11] == CHARS.trail
        assert grid[movement.updated_position.y][movement.updated_position.x] == CHARS.cursor

    def test_maze_completed(self, level, walk):
        movement = walk(level, steps_to_target(level))
        assert movement.instruction_message == "Maze completed! Moving to the next maze..."
        assert not movement.completed
        assert level.get_current_target() == 1
        assert movement.updated_position == Position(53, 2)
        assert level.get_current_position() == Position(53, 2)
        assert level.maze is level.mazes[1]
        assert level.maze.is_open(level.targets[0].position)
        assert level.get_instructions() == "Maze 2/2: Reach the X using hjkl keys"

    def test_cooldown_after_maze(self, level, walk, clock):
        walk(level, steps_to_target(level))
        first = steps_to_target(level)[0]
        assert not level.player_move(first).valid_move
        clock.advance(0.5)
        assert level.player_move(first).valid_move

    def test_all_mazes_completed(self, level, walk, clock):
        walk(level, steps_to_target(level))
        clock.advance(1)
        movement = walk(level, steps_to_target(level))
        assert movement.completed
        assert movement.instruction_message == "All mazes completed! Level finished!"
        assert level.is_completed()
        assert not level.in_progress()
        assert level.get_targets()[0].reached


# ---------------------------------------------------------------------------
# Restore
# ---------------------------------------------------------------------------

class TestRestore:
    def test_invalid_dimensions(self, clock):
        with pytest.raises(InvalidDimensionsError):
            LevelOne(clock=clock).restore(SavedLevel(number=1, width=100, height=0))

    def test_maze_index_out_of_range(self, clock):
        with pytest.raises(InvalidSaveStateError):
            LevelOne(clock=clock).restore(SavedLevel(number=1, width=100, height=40, current_target=2))

    def test_same_size_keeps_position(self, level):
        first = steps_to_target(level)[0]
        level.player_move(first)

        restored = LevelOne()
        restored.restore(level.snapshot())
        assert restored.get_current_position() == level.get_current_position()
        assert restored.get_targets() == level.get_targets()
        assert restored.mazes[0].wall_set() == level.mazes[0].wall_set()

    def test_second_maze_restored(self, level, walk, clock):
        walk(level, steps_to_target(level))
        clock.advance(1)
        level.player_move(steps_to_target(level)[0])

        restored = LevelOne(clock=clock)
        restored.restore(level.snapshot())
        assert restored.get_current_target() == 1
        assert restored.maze is restored.mazes[1]
        assert restored.get_targets() == level.get_targets()
        assert restored.get_current_position() == level.get_current_position()
        assert restored.in_progress()

    def test_invalid_position_falls_back_to_start(self, clock):
        lvl = LevelOne(clock=clock)
        lvl.restore(SavedLevel(
            number=1, width=100, height=40,
            player_position=Position(0, 0),
            targets=[Target(Position(0, 0))],
            current_target=1, in_progress=True,
        ))
        assert lvl.get_current_position() == lvl.mazes[1].start_position
        assert lvl.render()[2][53] == CHARS.cursor

    def test_wall_position_falls_back_to_start(self, clock):
        lvl = LevelOne(clock=clock)
        lvl.restore(SavedLevel(
            number=1, width=100, height=40,
            player_position=Position(8, 0),
            targets=[Target(Position(0, 0))],
            in_progress=True,
        ))
        assert lvl.get_current_position() == Position(11, 3)

    def test_new_size_rebuilds_mazes(self, level):
        restored = LevelOne()
        restored.restore(level.snapshot(120, 45))
        assert restored.width == 120 and restored.height == 45
        assert len(restored.render()) == 45
        assert restored.mazes[0].width == 41
        assert restored.maze.is_open(restored.get_current_position())
        assert restored.maze.is_open(restored.targets[0].position)

    def test_too_small_restore(self, level):
        with pytest.raises(MazeTooSmallError):
            LevelOne().restore(level.snapshot(12, 6))
