"""
Errors raised by the level engine

Rejected moves (out of bounds, wall, cooldown) are not errors; they are
reported through PlayerMovement.valid_move.
"""


class LevelError(Exception):
    """Base class for level engine errors"""


class InvalidDimensionsError(LevelError):
    """Width or height of a saved level is not positive"""

    def __init__(self, width, height):
        super().__init__(f"invalid dimensions in save state: {width}x{height}")
        self.width = width
        self.height = height


class InvalidSaveStateError(LevelError):
    """Snapshot cannot be restored (no targets, bad target index)"""


class MazeTooSmallError(LevelError):
    """Grid cannot fit the configured maze layout"""

    def __init__(self, width, height, required):
        super().__init__(
            f"grid too small for mazes: width={width}, height={height}, "
            f"need a maze size of at least {required}"
        )
        self.width = width
        self.height = height
        self.required = required


class NoOpenCellError(LevelError):
    """Maze has no interior cell a target can be placed on"""


class LevelNotFoundError(LevelError):
    """No level is registered under the requested number"""

    def __init__(self, number):
        super().__init__(f"level {number} not found")
        self.number = number
