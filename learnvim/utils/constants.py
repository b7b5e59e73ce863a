"""
Global constants for the adventure mode
"""

# Window settings
FPS = 30
WINDOW_WIDTH = 1000
WINDOW_HEIGHT = 640
MIN_WINDOW_WIDTH = 320
MIN_WINDOW_HEIGHT = 240
FONT_SIZE = 18
FONT_NAMES = "dejavusansmono,menlo,consolas,couriernew,monospace"

# Instruction panel under the grid (pixels)
PANEL_H = 48

# Movement block after a target is reached (seconds)
MOVE_COOLDOWN_S = 0.5

# Corner targets are inset 20% from every edge
CORNER_INSET = 0.2
CORNER_TARGET_COUNT = 4

# Maze level layout
MAZE_SEEDS = (42, 69)
MAZE_PATH_WIDTHS = (3, 2)
MAZE_GUTTER = 3
MAX_MAZE_SIZE = 41

# Level numbers
LEVEL_ZERO = 0
LEVEL_ONE = 1

# Save files
SAVE_DIR = "saves"
GAME_MODE_ADVENTURE = "Adventure"
SAVE_VERSION = "1.0.0"
