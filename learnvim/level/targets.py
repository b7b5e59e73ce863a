"""
Target placement strategies

A strategy decides where the targets of a stage live, paints them onto a
render grid and reports how many a stage has.
"""

import logging
from abc import ABC, abstractmethod

from learnvim.level.errors import NoOpenCellError
from learnvim.level.models import Position, Target
from learnvim.utils.constants import CORNER_INSET, CORNER_TARGET_COUNT

logger = logging.getLogger(__name__)


class TargetBehavior(ABC):
    """Where the goals of a stage are and how they are drawn"""

    def __init__(self, chars):
        self.chars = chars

    @abstractmethod
    def define_targets(self, width, height):
        """Build the target list for a grid of the given size"""

    @abstractmethod
    def get_target_count(self):
        """Number of targets define_targets produces"""

    def update_grid(self, grid, targets, current, chars=None):
        """
        Paint targets onto the grid

        The target at index current is active, earlier reached ones are
        shown as reached and the rest as inactive.
        """
        chars = chars or self.chars
        for i, target in enumerate(targets):
            pos = target.position
            if i == current:
                grid[pos.y][pos.x] = chars.target_active
            elif target.reached:
                grid[pos.y][pos.x] = chars.target_reached
            else:
                grid[pos.y][pos.x] = chars.target_inactive


class CornerTargets(TargetBehavior):
    """Four targets inset from the corners, visited top-left, top-right, bottom-left, bottom-right"""

    def define_targets(self, width, height):
        offset_x = int(width * CORNER_INSET)
        offset_y = int(height * CORNER_INSET)

        return [
            Target(Position(offset_x, offset_y)),
            Target(Position(width - offset_x - 1, offset_y)),
            Target(Position(offset_x, height - offset_y - 1)),
            Target(Position(width - offset_x - 1, height - offset_y - 1)),
        ]

    def get_target_count(self):
        return CORNER_TARGET_COUNT


class MazeTargets(TargetBehavior):
    """
    One target inside a maze

    The cell is drawn with the maze's own seeded generator, so a freshly
    generated maze always yields the same first target.
    """

    def __init__(self, chars, maze):
        super().__init__(chars)
        self.maze = maze

    def define_targets(self, width=None, height=None):
        """
        Pick one open interior cell of the maze

        The grid size is ignored, the maze bounds decide.

        Raises:
            NoOpenCellError: the maze has no open interior cell
        """
        candidates = self.maze.interior_open_cells()
        if not candidates:
            raise NoOpenCellError(f"no open interior cell for a target in {self.maze!r}")

        pos = self.maze.rng.choice(candidates)
        logger.debug("Placed maze target at (%d, %d) from %d candidates", pos.x, pos.y, len(candidates))
        return [Target(pos)]

    def get_target_count(self):
        return 1
