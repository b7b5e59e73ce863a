"""
Maze generation - randomized depth-first carving with wide corridors

The maze is a square block of cells that starts fully walled. Macro-cells
of path_width x path_width are spaced 2 * path_width apart and carved by a
seeded depth-first backtracker, so the same arguments always give the same
walls.
"""

import logging
import random

import numpy as np

from learnvim.level.errors import MazeTooSmallError
from learnvim.level.models import Position

logger = logging.getLogger(__name__)


def min_maze_size(path_width):
    """Smallest square that holds one macro-cell inside a wall border"""
    return 2 * path_width + 1


class Maze:
    """
    Square maze placed at an offset on a larger grid

    Walls are kept in the maze's local frame and translated to absolute
    coordinates when read.
    """
    def __init__(self, size, seed, offset_x=0, offset_y=0, path_width=1):
        """
        Args:
            size: Width and height in cells
            seed: Seed for wall layout and target placement
            offset_x, offset_y: Position of the maze's top-left cell
            path_width: Corridor thickness in cells

        Raises:
            MazeTooSmallError: if size cannot hold a single macro-cell
        """
        if path_width < 1:
            raise ValueError(f"path width must be positive, got {path_width}")
        required = min_maze_size(path_width)
        if size < required:
            raise MazeTooSmallError(size, size, required)

        self.width = size
        self.height = size
        self.offset_x = offset_x
        self.offset_y = offset_y
        self.path_width = path_width
        self.seed = seed
        self.rng = random.Random(seed)

        # True = wall, indexed [y, x]
        self.grid = np.ones((size, size), dtype=bool)
        self._generate_dfs(path_width)
        self._wall_set = frozenset(self.get_walls())

        self.start_position = Position(offset_x + path_width, offset_y + path_width)
        logger.debug(
            "Generated %dx%d maze (seed=%s, path width=%d) at (%d, %d) with %d walls",
            size, size, seed, path_width, offset_x, offset_y, len(self._wall_set)
        )

    def get_walls(self):
        """Wall cells in absolute coordinates, row by row"""
        return [
            Position(int(x) + self.offset_x, int(y) + self.offset_y)
            for y, x in np.argwhere(self.grid)
        ]

    def wall_set(self):
        return self._wall_set

    def to_local(self, pos):
        return Position(pos.x - self.offset_x, pos.y - self.offset_y)

    def contains(self, pos):
        """Check if an absolute position lies inside the maze square"""
        local = self.to_local(pos)
        return 0 <= local.x < self.width and 0 <= local.y < self.height

    def is_wall(self, pos):
        """Check an absolute position, anything outside the square is open"""
        if not self.contains(pos):
            return False
        local = self.to_local(pos)
        return bool(self.grid[local.y, local.x])

    def is_open(self, pos):
        """Check that an absolute position is inside the maze and not a wall"""
        return self.contains(pos) and not self.is_wall(pos)

    def interior_open_cells(self):
        """Non-wall cells off the outer ring, absolute coordinates, row by row"""
        cells = []
        for y in range(1, self.height - 1):
            for x in range(1, self.width - 1):
                if not self.grid[y, x]:
                    cells.append(Position(x + self.offset_x, y + self.offset_y))
        return cells

    # ========== CARVING ==========

    def _generate_dfs(self, path_width):
        """
        Carve corridors with an explicit stack

        Each stack entry holds a macro-cell and its remaining shuffled
        directions, which visits cells in the same order as the recursive
        backtracker.
        """
        visited = np.zeros((self.height, self.width), dtype=bool)

        start = (path_width, path_width)
        self._clear_cell(start, visited, path_width)
        stack = [(start, self._shuffled_directions(path_width))]

        while stack:
            cell, directions = stack[-1]
            if not directions:
                stack.pop()
                continue

            dx, dy = directions.pop(0)
            nxt = (cell[0] + dx, cell[1] + dy)
            if self._can_visit(nxt, visited, path_width):
                self._clear_corridor(cell, nxt, path_width)
                self._clear_cell(nxt, visited, path_width)
                stack.append((nxt, self._shuffled_directions(path_width)))

    def _shuffled_directions(self, path_width):
        step = 2 * path_width
        directions = [
            (0, -step),  # up
            (0, step),   # down
            (-step, 0),  # left
            (step, 0),   # right
        ]
        self.rng.shuffle(directions)
        return directions

    def _can_visit(self, cell, visited, path_width):
        """Macro-cell lies inside the wall border and is not carved yet"""
        x, y = cell
        if not (path_width <= x and x + path_width < self.width):
            return False
        if not (path_width <= y and y + path_width < self.height):
            return False
        return not visited[y:y + path_width, x:x + path_width].all()

    def _clear_cell(self, cell, visited, path_width):
        x, y = cell
        visited[y:y + path_width, x:x + path_width] = True
        self.grid[y:y + path_width, x:x + path_width] = False

    def _clear_corridor(self, current, nxt, path_width):
        """Open the path_width block halfway between two macro-cells"""
        mid_x = (current[0] + nxt[0]) // 2
        mid_y = (current[1] + nxt[1]) // 2
        self.grid[mid_y:mid_y + path_width, mid_x:mid_x + path_width] = False

    def __repr__(self):
        return (f"Maze(size={self.width}, seed={self.seed}, "
                f"offset=({self.offset_x}, {self.offset_y}), path_width={self.path_width})")
