"""
Maze module - seeded corridor mazes and grid search helpers
"""

from .generator import Maze, min_maze_size
from .maze_core import bfs_reachable, bfs_shortest_path

__all__ = ['Maze', 'min_maze_size', 'bfs_reachable', 'bfs_shortest_path']
