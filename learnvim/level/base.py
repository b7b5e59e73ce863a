"""
Level interface shared by every stage of the adventure mode
"""

import time
from abc import ABC, abstractmethod

from learnvim.level.errors import InvalidDimensionsError, InvalidSaveStateError
from learnvim.level.models import PlayerMovement, Position, SavedLevel
from learnvim.utils.characters import DEFAULT_CHARACTERS
from learnvim.utils.constants import MOVE_COOLDOWN_S


class Level(ABC):
    """
    A playable level that owns its render grid, player and targets

    A level is unusable until init() or restore() gives it dimensions.
    Levels are never resized in place: the manager snapshots them and
    restores a fresh instance at the new size.
    """
    number = None
    description = ""

    def __init__(self, chars=None, clock=None):
        """
        Args:
            chars: Characters to paint with (default symbols if None)
            clock: Callable returning seconds, used for the movement cooldown
        """
        self.chars = chars or DEFAULT_CHARACTERS
        self.clock = clock or time.monotonic

        self.width = 0
        self.height = 0
        self.grid = []
        self.player = Position()
        self.targets = []
        self.current_target = 0

        # Level state
        self.completed = False
        self._in_progress = False

        # Movement block after a target is reached
        self.movement_block = False
        self.block_ends = 0.0

    # ========== LIFECYCLE ==========

    @abstractmethod
    def init(self, width, height):
        """
        Start the level from scratch on a width x height grid

        Raises:
            InvalidDimensionsError: width or height is not positive, the level is left untouched
        """

    @abstractmethod
    def restore(self, state):
        """
        Rebuild the level from a SavedLevel

        Raises:
            InvalidDimensionsError: state.width or state.height is not positive
            InvalidSaveStateError: the snapshot cannot describe this level
        """

    @abstractmethod
    def player_move(self, delta):
        """Apply a directional delta and return a PlayerMovement"""

    @abstractmethod
    def get_start_position(self):
        """Where the player is placed at the start of a stage"""

    @abstractmethod
    def get_instructions(self):
        """Instruction line for the current stage"""

    def get_current_target(self):
        """Index of the stage the player is working on"""
        return self.current_target

    def exit(self):
        """Leave the level, it no longer counts as in progress"""
        self._in_progress = False

    # ========== ACCESSORS ==========

    def render(self):
        """Rows of one-character display symbols"""
        return self.grid

    def render_lines(self):
        return ["".join(row) for row in self.grid]

    def get_current_position(self):
        return self.player

    def get_targets(self):
        """Copies of the current targets"""
        return [target.copy() for target in self.targets]

    def in_progress(self):
        return self._in_progress

    def is_completed(self):
        return self.completed

    def snapshot(self, width=None, height=None):
        """
        Capture the level as a SavedLevel

        Args:
            width, height: Size to record, defaults to the current size

        Returns:
            SavedLevel with copied targets
        """
        return SavedLevel(
            number=self.number,
            width=self.width if width is None else width,
            height=self.height if height is None else height,
            player_position=self.player,
            targets=self.get_targets(),
            current_target=self.get_current_target(),
            completed=self.completed,
            in_progress=self._in_progress,
        )

    # ========== GRID HELPERS ==========

    def _set_dimensions(self, width, height):
        self.width = width
        self.height = height
        self.grid = [[self.chars.empty] * width for _ in range(height)]

    def _clear_grid(self):
        for row in self.grid:
            for x in range(len(row)):
                row[x] = self.chars.empty

    def _in_bounds(self, pos):
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def _place_player(self, position):
        self.player = position
        self.grid[position.y][position.x] = self.chars.cursor

    def _step_player(self, new_pos):
        """Leave a trail at the old position and draw the cursor at new_pos"""
        self.grid[self.player.y][self.player.x] = self.chars.trail
        self.grid[new_pos.y][new_pos.x] = self.chars.cursor
        self.player = new_pos

    # ========== MOVEMENT HELPERS ==========

    def _movement_blocked(self):
        """Check the cooldown, clearing it once the deadline has passed"""
        if self.movement_block and self.clock() < self.block_ends:
            return True
        self.movement_block = False
        return False

    def _block_movement(self):
        self.movement_block = True
        self.block_ends = self.clock() + MOVE_COOLDOWN_S

    def _rejected(self):
        return PlayerMovement(
            updated_position=self.player,
            completed=self.completed,
            valid_move=False,
            instruction_message=self.get_instructions(),
        )

    def _moved(self, message=None):
        return PlayerMovement(
            updated_position=self.player,
            completed=self.completed,
            valid_move=True,
            instruction_message=message or self.get_instructions(),
        )

    # ========== RESTORE HELPERS ==========

    @staticmethod
    def _check_dimensions(width, height):
        if width <= 0 or height <= 0:
            raise InvalidDimensionsError(width, height)

    @classmethod
    def _validate_state(cls, state, target_count):
        cls._check_dimensions(state.width, state.height)
        if not 0 <= state.current_target < target_count:
            raise InvalidSaveStateError(
                f"current target {state.current_target} out of range 0..{target_count - 1}"
            )

    def __repr__(self):
        return (f"{type(self).__name__}(number={self.number}, size={self.width}x{self.height}, "
                f"current={self.get_current_target()}, completed={self.completed})")
