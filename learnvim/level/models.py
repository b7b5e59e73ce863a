"""
Value types shared by the level engine, persistence and the host loop
"""

import json
from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class Position:
    """Grid coordinate, x is the column and y the row"""
    x: int = 0
    y: int = 0

    def __add__(self, other):
        return Position(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Position(self.x - other.x, self.y - other.y)

    def to_dict(self):
        return {'x': self.x, 'y': self.y}

    @classmethod
    def from_dict(cls, data):
        return cls(int(data['x']), int(data['y']))


@dataclass
class Target:
    """Pickup point, reached is flipped in place when the player steps on it"""
    position: Position
    reached: bool = False

    def copy(self):
        return replace(self)

    def to_dict(self):
        return {'position': self.position.to_dict(), 'reached': self.reached}

    @classmethod
    def from_dict(cls, data):
        return cls(Position.from_dict(data['position']), bool(data['reached']))


@dataclass(frozen=True)
class PlayerMovement:
    """Outcome of a single directional move"""
    updated_position: Position
    completed: bool
    valid_move: bool
    instruction_message: str


@dataclass
class SavedLevel:
    """
    Snapshot of a level, enough to rebuild it at any size

    Used for save files and for resize-by-rebuild. The JSON shape is
    {number, width, height, player_position: {x, y},
     targets: [{position: {x, y}, reached}], current_target,
     completed, in_progress}.
    """
    number: int
    width: int
    height: int
    player_position: Position = field(default_factory=Position)
    targets: list = field(default_factory=list)
    current_target: int = 0
    completed: bool = False
    in_progress: bool = False

    def to_dict(self):
        return {
            'number': self.number,
            'width': self.width,
            'height': self.height,
            'player_position': self.player_position.to_dict(),
            'targets': [target.to_dict() for target in self.targets],
            'current_target': self.current_target,
            'completed': self.completed,
            'in_progress': self.in_progress,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            number=int(data['number']),
            width=int(data['width']),
            height=int(data['height']),
            player_position=Position.from_dict(data['player_position']),
            targets=[Target.from_dict(t) for t in data.get('targets') or []],
            current_target=int(data['current_target']),
            completed=bool(data['completed']),
            in_progress=bool(data['in_progress']),
        )

    def to_json(self):
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text):
        return cls.from_dict(json.loads(text))
