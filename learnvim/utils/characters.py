"""
Display symbols painted onto a level grid
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Characters:
    """Symbol alphabet of the render grid, one character per cell"""
    empty: str = " "
    cursor: str = "$"
    trail: str = "·"
    target_active: str = "X"
    target_inactive: str = "x"
    target_reached: str = "✓"
    wall: str = "█"


DEFAULT_CHARACTERS = Characters()
