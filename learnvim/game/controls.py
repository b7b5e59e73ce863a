"""
Key bindings for the adventure mode
"""

import pygame

from learnvim.level.models import Position

# hjkl motions
MOVE_KEYS = {
    pygame.K_h: Position(-1, 0),   # left
    pygame.K_j: Position(0, 1),    # down
    pygame.K_k: Position(0, -1),   # up
    pygame.K_l: Position(1, 0),    # right
}

KEY_ESCAPE = pygame.K_ESCAPE
KEY_QUIT = pygame.K_q

HELP = [
    ("h", "move left"),
    ("j", "move down"),
    ("k", "move up"),
    ("l", "move right"),
    ("esc", "save and quit"),
    ("q", "quit"),
]


def key_to_delta(key):
    """Directional delta for a key code, None for anything that is not a motion"""
    return MOVE_KEYS.get(key)


def key_name(key):
    """Printable name used as the key in stats"""
    return pygame.key.name(key)


def help_line():
    return "  ".join(f"{key}: {action}" for key, action in HELP)
