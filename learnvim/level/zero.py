"""
Level zero - an open field with four corner targets
"""

import logging

from learnvim.level.base import Level
from learnvim.level.models import Position
from learnvim.level.targets import CornerTargets
from learnvim.utils.constants import LEVEL_ZERO

logger = logging.getLogger(__name__)


class LevelZero(Level):
    """
    Single open grid, no walls

    The player starts in the centre and visits the corner targets in
    order. After each target the grid is repainted, the player goes back
    to the centre and movement is blocked for a short cooldown.
    """
    number = LEVEL_ZERO
    description = "Simple movement with hjkl keys"

    def __init__(self, chars=None, clock=None):
        super().__init__(chars, clock)
        self.target_behavior = CornerTargets(self.chars)

    def init(self, width, height):
        self._check_dimensions(width, height)
        self.completed = False
        self._in_progress = True
        self.movement_block = False
        self._set_dimensions(width, height)
        self.targets = self.target_behavior.define_targets(width, height)
        self.current_target = 0
        self._repaint(self.get_start_position())
        logger.debug("Level zero initialised at %dx%d", width, height)

    def player_move(self, delta):
        if self._movement_blocked():
            return self._rejected()

        new_pos = self.player + delta
        if not self._in_bounds(new_pos):
            return self._rejected()

        target = self.targets[self.current_target]
        if target.position == new_pos:
            target.reached = True
            if self.current_target == self.target_behavior.get_target_count() - 1:
                self.completed = True
                self._in_progress = False
                self._step_player(new_pos)
                logger.debug("Level zero completed")
                return self._moved("Level completed!")

            self.current_target += 1
            self._repaint(self.get_start_position())
            self._block_movement()
            return self._moved()

        self._step_player(new_pos)
        return self._moved()

    def get_start_position(self):
        return self._center()

    def get_instructions(self):
        return (f"Target {self.current_target + 1}/{self.target_behavior.get_target_count()}: "
                f"Reach the X using hjkl keys")

    def restore(self, state):
        """
        Rebuild at state.width x state.height

        Target positions are redefined for the new size; each keeps the
        reached flag of the saved target with the same index. A saved
        player position that no longer fits falls back to the centre.
        """
        self._validate_state(state, self.target_behavior.get_target_count())

        self._set_dimensions(state.width, state.height)
        self.current_target = state.current_target
        self.completed = state.completed
        self._in_progress = state.in_progress
        self.movement_block = False

        targets = self.target_behavior.define_targets(self.width, self.height)
        for i, target in enumerate(targets):
            if i < len(state.targets):
                target.reached = state.targets[i].reached
        self.targets = targets

        player = state.player_position
        if not self._in_bounds(player):
            player = self.get_start_position()
        self._repaint(player)
        logger.debug("Level zero restored at %dx%d on target %d", self.width, self.height, self.current_target)

    def _center(self):
        return Position(self.width // 2, self.height // 2)

    def _repaint(self, player):
        self._clear_grid()
        self._place_player(player)
        self.target_behavior.update_grid(self.grid, self.targets, self.current_target)
