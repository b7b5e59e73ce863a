"""
Color palette for the adventure mode
"""

from learnvim.utils.characters import DEFAULT_CHARACTERS

# Background colors
COLOR_BG = (20, 22, 28)           # Main background
COLOR_PANEL_BG = (12, 14, 18)     # Instruction panel background

# UI colors
COLOR_WALL = (90, 96, 110)        # Maze walls
COLOR_TEXT = (210, 210, 210)      # Normal text
COLOR_TEXT_DIM = (150, 150, 150)  # Dimmed text

# Player colors
COLOR_PLAYER = (70, 140, 255)     # Cursor
COLOR_PLAYER_TRAIL = (160, 230, 255)  # Trail

# Target colors
COLOR_TARGET_ACTIVE = (255, 80, 80)
COLOR_TARGET_INACTIVE = (150, 150, 150)
COLOR_TARGET_REACHED = (60, 200, 120)


def symbol_color(symbol, chars=DEFAULT_CHARACTERS):
    """
    Map a grid symbol to its foreground color

    Args:
        symbol: One-character string from a level grid
        chars: Characters the grid was painted with

    Returns:
        RGB tuple
    """
    palette = {
        chars.cursor: COLOR_PLAYER,
        chars.trail: COLOR_PLAYER_TRAIL,
        chars.target_active: COLOR_TARGET_ACTIVE,
        chars.target_inactive: COLOR_TARGET_INACTIVE,
        chars.target_reached: COLOR_TARGET_REACHED,
        chars.wall: COLOR_WALL,
    }
    return palette.get(symbol, COLOR_TEXT)
