"""
Level one - a row of seeded mazes, one target per maze
"""

import logging

from learnvim.level.base import Level
from learnvim.level.errors import MazeTooSmallError
from learnvim.level.targets import MazeTargets
from learnvim.maze.generator import Maze, min_maze_size
from learnvim.maze.maze_core import bfs_shortest_path
from learnvim.utils.constants import (
    LEVEL_ONE, MAZE_SEEDS, MAZE_PATH_WIDTHS, MAZE_GUTTER, MAX_MAZE_SIZE
)

logger = logging.getLogger(__name__)


class MazeLayoutConfig:
    """Layout of the maze row: one seed and one corridor width per maze"""
    def __init__(self, **kwargs):
        self.seeds = tuple(kwargs.get('seeds', MAZE_SEEDS))
        self.path_widths = tuple(kwargs.get('path_widths', MAZE_PATH_WIDTHS))
        self.gutter = kwargs.get('gutter', MAZE_GUTTER)
        self.max_size = kwargs.get('max_size', MAX_MAZE_SIZE)

        if len(self.seeds) != len(self.path_widths):
            raise ValueError("every maze needs both a seed and a path width")
        if not self.seeds:
            raise ValueError("maze layout needs at least one maze")

    @property
    def maze_count(self):
        return len(self.seeds)

    @property
    def min_size(self):
        """Smallest maze that fits the widest corridor"""
        return max(min_maze_size(pw) for pw in self.path_widths)

    def maze_size(self, width, height):
        """
        Largest square maze that fits maze_count times side by side

        Raises:
            MazeTooSmallError: the grid cannot hold the layout
        """
        n = self.maze_count
        size = min((width - (n - 1) * self.gutter) // n, height, self.max_size)
        if size < self.min_size:
            raise MazeTooSmallError(width, height, self.min_size)
        return size


class LevelOne(Level):
    """
    Sequential mazes laid out in a row

    Only the active maze counts for collisions and targets, but every
    maze is drawn. Mazes are regenerated from fixed seeds, so a level
    rebuilt at the same size has the same walls and targets.
    """
    number = LEVEL_ONE
    description = "Navigate two mazes using hjkl keys"

    def __init__(self, chars=None, clock=None, layout=None):
        super().__init__(chars, clock)
        self.layout = layout or MazeLayoutConfig()
        self.total_mazes = self.layout.maze_count
        self.mazes = []
        self.target_behavior = []

    @property
    def maze(self):
        """The maze the player is in"""
        return self.mazes[self.current_target]

    def init(self, width, height):
        self._check_dimensions(width, height)
        self._build_mazes(width, height)
        self._set_dimensions(width, height)
        self.completed = False
        self._in_progress = True
        self.movement_block = False
        self.current_target = 0
        self._reset_targets()
        self._repaint(self.get_start_position())
        logger.debug("Level one initialised at %dx%d with %d mazes", width, height, self.total_mazes)

    def player_move(self, delta):
        if self._movement_blocked():
            return self._rejected()

        new_pos = self.player + delta
        if not self._in_bounds(new_pos) or self.maze.is_wall(new_pos):
            return self._rejected()

        if self.targets[0].position == new_pos:
            self.targets[0].reached = True
            if self.current_target < self.total_mazes - 1:
                self.current_target += 1
                self._reset_targets()
                self._repaint(self.get_start_position())
                self._block_movement()
                return self._moved("Maze completed! Moving to the next maze...")

            self.completed = True
            self._in_progress = False
            self._step_player(new_pos)
            logger.debug("Level one completed")
            return self._moved("All mazes completed! Level finished!")

        self._step_player(new_pos)
        return self._moved()

    def get_start_position(self):
        return self.maze.start_position

    def get_instructions(self):
        return f"Maze {self.current_target + 1}/{self.total_mazes}: Reach the X using hjkl keys"

    def restore(self, state):
        """
        Rebuild every maze at state.width x state.height

        state.current_target is the active maze. The saved player
        position is kept only if it is an open cell of the active maze
        at the new size, otherwise the player goes to the maze start.
        """
        self._validate_state(state, self.total_mazes)
        self._build_mazes(state.width, state.height)
        self._set_dimensions(state.width, state.height)

        self.current_target = state.current_target
        self.completed = state.completed
        self._in_progress = state.in_progress
        self.movement_block = False

        self._reset_targets()
        for i, target in enumerate(self.targets):
            if i < len(state.targets):
                target.reached = state.targets[i].reached

        player = state.player_position
        if not self.maze.is_open(player):
            logger.debug("Saved position (%d, %d) is not open in maze %d, using maze start",
                         player.x, player.y, self.current_target)
            player = self.get_start_position()
        self._repaint(player)
        logger.debug("Level one restored at %dx%d in maze %d", self.width, self.height, self.current_target)

    def _build_mazes(self, width, height):
        """Generate the maze row centred on the grid, one target strategy per maze"""
        size = self.layout.maze_size(width, height)
        gutter = self.layout.gutter
        n = self.total_mazes

        first_x = (width - n * size - (n - 1) * gutter) // 2
        offset_y = (height - size) // 2

        self.mazes = [
            Maze(size, seed, first_x + i * (size + gutter), offset_y, path_width)
            for i, (seed, path_width) in enumerate(zip(self.layout.seeds, self.layout.path_widths))
        ]
        self.target_behavior = [MazeTargets(self.chars, maze) for maze in self.mazes]

    def _reset_targets(self):
        self.targets = self.target_behavior[self.current_target].define_targets()
        if logger.isEnabledFor(logging.DEBUG):
            path = bfs_shortest_path(self.maze, self.maze.start_position, self.targets[0].position)
            logger.debug("Maze %d target is %d steps from the start", self.current_target, len(path) - 1)

    def _repaint(self, player):
        self._clear_grid()
        for maze in self.mazes:
            for wall in maze.get_walls():
                if self._in_bounds(wall):
                    self.grid[wall.y][wall.x] = self.chars.wall

        self._place_player(player)
        self.target_behavior[self.current_target].update_grid(self.grid, self.targets, 0)
