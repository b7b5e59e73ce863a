"""
Level Manager - owns the live level and brokers init, resize and restore
"""

import logging

from learnvim.level.errors import InvalidSaveStateError, LevelNotFoundError
from learnvim.level.one import LevelOne
from learnvim.level.zero import LevelZero
from learnvim.utils.constants import LEVEL_ZERO

logger = logging.getLogger(__name__)

# Playable levels by number
LEVELS = {
    LevelZero.number: LevelZero,
    LevelOne.number: LevelOne,
}


class LevelManager:
    """
    Holds exactly one live level

    A level is never resized in place. When the grid size changes during
    play the manager snapshots the live level at the new size and
    restores that snapshot into a fresh instance, so target progress
    survives while targets and mazes are redefined for the new size.
    """
    def __init__(self, level_number=LEVEL_ZERO, clock=None, levels=None):
        """
        Args:
            level_number: Level to start with
            clock: Clock handed to every level (cooldown timing)
            levels: Mapping of level number to factory, defaults to LEVELS
        """
        self.clock = clock
        self.levels = dict(levels or LEVELS)
        self.current_level = self._create(level_number)

    @property
    def level_number(self):
        return self.current_level.number

    def get_current_level(self):
        return self.current_level

    def get_levels(self):
        """(number, description) of every registered level, by number"""
        return [(number, factory.description) for number, factory in sorted(self.levels.items())]

    def select_level(self, number):
        """Replace the live level with a fresh, uninitialised one"""
        self.current_level = self._create(number)
        return self.current_level

    def init_current_level(self, width, height):
        self.current_level.init(width, height)

    def init_or_resize_level(self, width, height):
        """
        Fit the live level to a new grid size

        A level that is not in progress is simply initialised again. A
        level in progress is rebuilt from a snapshot taken at the new size.
        If the rebuild raises, the previous level stays live.
        """
        if not self.current_level.in_progress():
            self.init_current_level(width, height)
            return

        snapshot = self.current_level.snapshot(width, height)
        logger.debug("Resizing level %d to %dx%d on target %d",
                     snapshot.number, width, height, snapshot.current_target)
        self._rebuild(snapshot)

    def restore_level(self, state):
        """
        Load a saved level, replacing the live one

        Raises:
            InvalidSaveStateError: the snapshot has no targets
            LevelNotFoundError: no level is registered under state.number
            InvalidDimensionsError: the snapshot size is not positive
        """
        if not state.targets:
            raise InvalidSaveStateError("invalid save state: no targets found")
        self._rebuild(state)

    def snapshot(self, width=None, height=None):
        return self.current_level.snapshot(width, height)

    def player_move(self, delta):
        return self.current_level.player_move(delta)

    def render(self):
        return self.current_level.render()

    def get_instructions(self):
        return self.current_level.get_instructions()

    def _rebuild(self, state):
        level = self._create(state.number)
        level.restore(state)
        self.current_level = level

    def _create(self, number):
        factory = self.levels.get(number)
        if factory is None:
            raise LevelNotFoundError(number)
        return factory(clock=self.clock)

    def __repr__(self):
        return f"LevelManager(level={self.current_level!r})"
