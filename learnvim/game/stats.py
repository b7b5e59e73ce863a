"""
Per-game statistics stored next to a saved level
"""

from dataclasses import dataclass, field


@dataclass
class Stats:
    """Keystrokes and play time of one game"""
    key_presses: dict = field(default_factory=dict)
    total_keystrokes: int = 0
    time_elapsed: int = 0

    def register_key(self, key, allowed=True):
        """Count a key press, ignored when the key is not a game control"""
        if allowed:
            self.total_keystrokes += 1
            self.key_presses[key] = self.key_presses.get(key, 0) + 1

    def increment_time(self):
        """Add one second of play time"""
        self.time_elapsed += 1

    def reset(self):
        self.key_presses = {}
        self.total_keystrokes = 0

    def to_dict(self):
        return {
            'key_presses': dict(self.key_presses),
            'total_keystrokes': self.total_keystrokes,
            'time_elapsed': self.time_elapsed,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            key_presses={str(k): int(v) for k, v in (data.get('key_presses') or {}).items()},
            total_keystrokes=int(data.get('total_keystrokes', 0)),
            time_elapsed=int(data.get('time_elapsed', 0)),
        )


@dataclass
class LifetimeStats:
    """Statistics summed over many games"""
    total_keystrokes: int = 0
    total_playtime: int = 0
    total_games: int = 0
    key_presses: dict = field(default_factory=dict)

    def merge(self, stats):
        self.total_keystrokes += stats.total_keystrokes
        self.total_playtime += stats.time_elapsed
        for key, count in stats.key_presses.items():
            self.key_presses[key] = self.key_presses.get(key, 0) + count
