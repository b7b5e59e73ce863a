"""
Display Manager - resizable window that draws a level's character grid
"""

import logging

import pygame

from learnvim.utils.colors import COLOR_BG, COLOR_PANEL_BG, COLOR_TEXT, COLOR_TEXT_DIM, symbol_color
from learnvim.utils.constants import (
    FONT_NAMES, FONT_SIZE, MIN_WINDOW_HEIGHT, MIN_WINDOW_WIDTH, PANEL_H
)

logger = logging.getLogger(__name__)


class DisplayManager:
    """
    Owns the window and turns its pixel size into a grid size in cells
    """
    def __init__(self, chars):
        self.chars = chars
        self.screen = None
        self.screen_width = 0
        self.screen_height = 0

        self.font = None
        self.cell_w = 1
        self.cell_h = 1

        # Rendered glyph cache {(symbol, color): Surface}
        self._glyphs = {}

        # Callback for resize events
        self.resize_callback = None

    def initialize(self):
        """Load the monospace font (pygame must be initialized already)"""
        self.font = pygame.font.SysFont(FONT_NAMES, FONT_SIZE)
        self.cell_w, self.cell_h = self.font.size("M")
        logger.debug("Cell size %dx%d px", self.cell_w, self.cell_h)

    def set_resize_callback(self, callback):
        """
        Set callback function for resize events

        Args:
            callback: Function(cols, rows) called with the new grid size
        """
        self.resize_callback = callback

    def create_screen(self, width, height, title=None):
        """
        Create the resizable window

        Returns:
            pygame.Surface: The screen surface
        """
        width = max(MIN_WINDOW_WIDTH, width)
        height = max(MIN_WINDOW_HEIGHT, height)
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        self.screen_width, self.screen_height = self.screen.get_size()
        if title:
            pygame.display.set_caption(title)
        return self.screen

    def handle_resize(self, event_w, event_h):
        """
        Handle a window resize event

        Returns:
            tuple: (cols, rows) of the new grid
        """
        new_width = max(MIN_WINDOW_WIDTH, event_w)
        new_height = max(MIN_WINDOW_HEIGHT, event_h)

        if (new_width, new_height) != (self.screen_width, self.screen_height):
            # In pygame 2 the display surface is usually resized automatically.
            surface = pygame.display.get_surface()
            if surface is not None and surface.get_size() == (new_width, new_height):
                self.screen = surface
            else:
                self.screen = pygame.display.set_mode((new_width, new_height), pygame.RESIZABLE)
            self.screen_width, self.screen_height = self.screen.get_size()

            if self.resize_callback:
                self.resize_callback(*self.grid_size())

        return self.grid_size()

    def get_size(self):
        """Get current screen size"""
        return (self.screen_width, self.screen_height)

    def grid_size(self):
        """Columns and rows of cells that fit above the instruction panel"""
        cols = max(1, self.screen_width // self.cell_w)
        rows = max(1, (self.screen_height - PANEL_H) // self.cell_h)
        return cols, rows

    def draw(self, lines, instructions, help_text="", message=None):
        """
        Draw one frame

        Args:
            lines: Grid rows as strings
            instructions: Instruction line under the grid
            help_text: Key help shown under the instructions
            message: Overrides the grid with a centred notice when set
        """
        self.screen.fill(COLOR_BG)

        if message:
            surf = self.font.render(message, True, COLOR_TEXT)
            rect = surf.get_rect(center=(self.screen_width // 2, (self.screen_height - PANEL_H) // 2))
            self.screen.blit(surf, rect)
        else:
            for y, line in enumerate(lines):
                for x, symbol in enumerate(line):
                    if symbol == self.chars.empty:
                        continue
                    self.screen.blit(self._glyph(symbol), (x * self.cell_w, y * self.cell_h))

        panel_top = self.screen_height - PANEL_H
        pygame.draw.rect(self.screen, COLOR_PANEL_BG, (0, panel_top, self.screen_width, PANEL_H))
        self.screen.blit(self.font.render(instructions, True, COLOR_TEXT), (8, panel_top + 4))
        if help_text:
            self.screen.blit(self.font.render(help_text, True, COLOR_TEXT_DIM),
                             (8, panel_top + 8 + self.cell_h))

        pygame.display.flip()

    def _glyph(self, symbol):
        color = symbol_color(symbol, self.chars)
        key = (symbol, color)
        surf = self._glyphs.get(key)
        if surf is None:
            surf = self.font.render(symbol, True, color)
            self._glyphs[key] = surf
        return surf
