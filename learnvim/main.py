"""
Adventure mode - move the cursor with hjkl through open fields and mazes
"""

import argparse
import logging
import os

os.environ.setdefault('PYGAME_HIDE_SUPPORT_PROMPT', '1')

import pygame

from learnvim import __version__
from learnvim.game.controls import KEY_ESCAPE, KEY_QUIT, help_line, key_name, key_to_delta
from learnvim.game.display_manager import DisplayManager
from learnvim.game.save_manager import GameSave, SaveManager, new_save_id
from learnvim.game.stats import Stats
from learnvim.level.errors import LevelError, MazeTooSmallError
from learnvim.level.manager import LEVELS, LevelManager
from learnvim.utils.characters import DEFAULT_CHARACTERS
from learnvim.utils.constants import FPS, LEVEL_ZERO, SAVE_DIR, WINDOW_HEIGHT, WINDOW_WIDTH

logger = logging.getLogger(__name__)

GAME_TITLE = "learnvim: adventure"

WINDOWSIZECHANGED_EVENT = getattr(pygame, "WINDOWSIZECHANGED", None)


class AdventureGame:
    """
    Host loop: feeds key presses and resizes to the level manager and
    draws whatever grid the live level renders
    """
    def __init__(self, level_number=LEVEL_ZERO, player="player", save_dir=SAVE_DIR, load_id=None):
        pygame.init()

        self.display_manager = DisplayManager(DEFAULT_CHARACTERS)
        self.display_manager.initialize()
        self.display_manager.set_resize_callback(self._on_grid_resize)
        self.display_manager.create_screen(WINDOW_WIDTH, WINDOW_HEIGHT, title=f"{GAME_TITLE} v{__version__}")

        self.save_manager = SaveManager(save_dir)
        self.level_manager = LevelManager(level_number)
        self.player = player
        self.save_id = new_save_id()
        self.stats = Stats()

        self.clock = pygame.time.Clock()
        self.running = True
        self.time_accum = 0.0

        # Centred notice shown instead of the grid
        self.message = None
        self.instructions = ""

        if load_id:
            self._load(load_id)
        self._on_grid_resize(*self.display_manager.grid_size())

    def _load(self, save_id):
        """Restore a saved game, keeping a fresh level if the save is unusable"""
        game_save = self.save_manager.load(save_id)
        if game_save is None:
            logger.warning("No save %s, starting a new game", save_id)
            return
        try:
            self.level_manager.restore_level(game_save.level)
        except LevelError as e:
            logger.warning("Save %s cannot be restored: %s", save_id, e)
            return
        self.save_id = game_save.id
        self.player = game_save.player
        self.stats = game_save.stats
        logger.info("Loaded save %s (level %d)", save_id, game_save.level.number)

    def _on_grid_resize(self, cols, rows):
        """Fit the level to the grid, keeping progress of a level in play"""
        try:
            self.level_manager.init_or_resize_level(cols, rows)
        except MazeTooSmallError as e:
            logger.info("%s", e)
            self.message = "Window too small, please enlarge it"
            return
        self.message = None
        self.instructions = self.level_manager.get_instructions()

    def _save(self):
        level = self.level_manager.get_current_level()
        if not level.targets:
            return
        game_save = GameSave(
            id=self.save_id,
            player=self.player,
            level=level.snapshot(),
            stats=self.stats,
            window_size=self.display_manager.get_size(),
        )
        if not self.save_manager.save(game_save):
            logger.warning("Game could not be saved")

    def handle_events(self):
        """Handle input events"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return

            if event.type == pygame.VIDEORESIZE:
                self.display_manager.handle_resize(event.w, event.h)
                continue
            if WINDOWSIZECHANGED_EVENT is not None and event.type == WINDOWSIZECHANGED_EVENT:
                self.display_manager.handle_resize(event.x, event.y)
                continue

            if event.type == pygame.KEYDOWN:
                self._handle_keydown(event.key)

    def _handle_keydown(self, key):
        if key == KEY_ESCAPE:
            if self.level_manager.get_current_level().in_progress():
                self._save()
            self.running = False
            return
        if key == KEY_QUIT:
            self.running = False
            return

        delta = key_to_delta(key)
        self.stats.register_key(key_name(key), allowed=delta is not None)
        if delta is None or self.message:
            return

        movement = self.level_manager.player_move(delta)
        self.instructions = movement.instruction_message
        if movement.completed:
            self._save()

    def update(self, dt):
        level = self.level_manager.get_current_level()
        if not level.in_progress():
            return
        self.time_accum += dt
        while self.time_accum >= 1.0:
            self.time_accum -= 1.0
            self.stats.increment_time()

    def render(self):
        lines = self.level_manager.get_current_level().render_lines()
        self.display_manager.draw(lines, self.instructions, help_line(), self.message)

    def run(self):
        while self.running:
            dt = self.clock.tick(FPS) / 1000.0
            self.handle_events()
            if not self.running:
                break
            self.update(dt)
            self.render()
        pygame.quit()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Practice Vim motions in adventure mode.")
    parser.add_argument("--level", type=int, default=LEVEL_ZERO, choices=sorted(LEVELS),
                        help="level to play")
    parser.add_argument("--load", metavar="SAVE_ID", help="resume a saved game")
    parser.add_argument("--save-dir", default=SAVE_DIR, help="directory holding save files")
    parser.add_argument("--player", default="player", help="player name recorded in saves")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    game = AdventureGame(level_number=args.level, player=args.player,
                         save_dir=args.save_dir, load_id=args.load)
    game.run()


if __name__ == "__main__":
    main()
