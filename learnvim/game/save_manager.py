"""
Save/Load System - Saves and loads adventure games to/from JSON
"""

import json
import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from learnvim.game.stats import LifetimeStats, Stats
from learnvim.level.models import SavedLevel
from learnvim.utils.constants import GAME_MODE_ADVENTURE, SAVE_DIR, SAVE_VERSION

logger = logging.getLogger(__name__)


def new_save_id():
    return uuid.uuid4().hex


@dataclass
class GameSave:
    """One saved adventure game: who played, the level snapshot and the stats"""
    id: str
    player: str
    level: SavedLevel
    stats: Stats = field(default_factory=Stats)
    window_size: tuple = (0, 0)
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())
    game_mode: str = GAME_MODE_ADVENTURE

    def is_completed(self):
        return self.level.completed

    def to_dict(self):
        return {
            'id': self.id,
            'player': self.player,
            'timestamp': self.timestamp,
            'game_mode': self.game_mode,
            'game_state': {
                'window_size': {'width': self.window_size[0], 'height': self.window_size[1]},
                'level': self.level.to_dict(),
                'stats': self.stats.to_dict(),
            },
        }

    @classmethod
    def from_dict(cls, data):
        game_mode = data.get('game_mode', GAME_MODE_ADVENTURE)
        if game_mode != GAME_MODE_ADVENTURE:
            raise ValueError(f"unsupported game mode: {game_mode}")

        state = data['game_state']
        window = state.get('window_size') or {}
        return cls(
            id=data['id'],
            player=data['player'],
            level=SavedLevel.from_dict(state['level']),
            stats=Stats.from_dict(state.get('stats') or {}),
            window_size=(int(window.get('width', 0)), int(window.get('height', 0))),
            timestamp=data.get('timestamp', ''),
            game_mode=game_mode,
        )


class SaveManager:
    """
    Stores one JSON file per save id
    """
    def __init__(self, save_dir=SAVE_DIR):
        """
        Args:
            save_dir: Directory to store save files
        """
        self.save_dir = Path(save_dir)
        self.save_dir.mkdir(parents=True, exist_ok=True)

    def _path(self, save_id):
        return self.save_dir / f"{save_id}.json"

    def save(self, game_save):
        """
        Write a game save, replacing an earlier save with the same id

        Args:
            game_save: GameSave object

        Returns:
            bool: True if save successful
        """
        data = game_save.to_dict()
        data['metadata'] = {
            'saved_at': datetime.now().isoformat(),
            'version': SAVE_VERSION,
        }

        save_path = self._path(game_save.id)
        try:
            save_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not save game to %s: %s", save_path, e)
            return False

        logger.debug("Saved game %s (level %d)", game_save.id, game_save.level.number)
        return True

    def load(self, save_id):
        """
        Load a game save

        Args:
            save_id: Save id

        Returns:
            GameSave or None if the save is missing or unreadable
        """
        save_path = self._path(save_id)
        if not save_path.exists():
            logger.warning("Save file not found: %s", save_path)
            return None

        try:
            data = json.loads(save_path.read_text(encoding="utf-8"))
            game_save = GameSave.from_dict(data)
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.warning("Could not load game from %s: %s", save_path, e)
            return None

        return game_save

    def get_save_files(self):
        """
        Get list of available save files

        Returns:
            list: List of (save_id, metadata) tuples sorted by id
        """
        saves = []

        for save_file in sorted(self.save_dir.glob("*.json")):
            try:
                data = json.loads(save_file.read_text(encoding="utf-8"))
            except (OSError, ValueError) as e:
                logger.warning("Skipping unreadable save %s: %s", save_file, e)
                continue
            saves.append((save_file.stem, data.get('metadata', {})))

        return saves

    def all_saves(self):
        """Every readable GameSave"""
        saves = []
        for save_id, _ in self.get_save_files():
            game_save = self.load(save_id)
            if game_save is not None:
                saves.append(game_save)
        return saves

    def incomplete_saves(self):
        """Saves whose level is not finished"""
        return [s for s in self.all_saves() if not s.is_completed()]

    def has_incomplete_saves(self):
        return bool(self.incomplete_saves())

    def lifetime_stats(self, player=None):
        """
        Sum the stats of every save, or of one player's saves

        Args:
            player: Player name to filter on (None = everyone)

        Returns:
            LifetimeStats
        """
        lifetime = LifetimeStats()
        for game_save in self.all_saves():
            if player is not None and game_save.player != player:
                continue
            lifetime.merge(game_save.stats)
            lifetime.total_games += 1
        return lifetime

    def delete_save(self, save_id):
        """
        Delete a save file

        Args:
            save_id: Save id

        Returns:
            bool: True if deleted successfully
        """
        save_path = self._path(save_id)
        if not save_path.exists():
            return False
        try:
            save_path.unlink()
        except OSError as e:
            logger.warning("Could not delete %s: %s", save_path, e)
            return False
        return True
