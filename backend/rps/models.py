from enum import Enum
from typing import Dict, Optional
import time


class Choice(str, Enum):
    ROCK = 'rock'
    PAPER = 'paper'
    SCISSORS = 'scissors'

    @classmethod
    def parse(cls, value) -> Optional['Choice']:
        """Return the matching Choice, or None for anything outside the enumeration."""
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


class Outcome(str, Enum):
    WIN = 'win'
    LOSE = 'lose'
    DRAW = 'draw'


class Player:
    def __init__(self, sid: str, name: str):
        self.sid = sid
        self.name = name
        self.choice: Optional[Choice] = None  # None until picked this round

    @property
    def has_chosen(self) -> bool:
        return self.choice is not None

    def to_dict(self):
        # The choice itself stays private until the round resolves
        return {
            'socketId': self.sid,
            'name': self.name,
            'choice': self.has_chosen,
        }


class Room:
    MAX_PLAYERS = 2

    def __init__(self, room_id: str):
        self.room_id = room_id
        self.created_at = time.time()
        self.players: Dict[str, Player] = {}  # sid -> Player, in join order

    @property
    def is_full(self) -> bool:
        return len(self.players) >= self.MAX_PLAYERS

    @property
    def is_empty(self) -> bool:
        return not self.players

    def ready_count(self) -> int:
        return sum(1 for p in self.players.values() if p.has_chosen)

    def to_dict(self):
        return {
            'roomId': self.room_id,
            'players': [p.to_dict() for p in self.players.values()],
            'readyCount': self.ready_count(),
        }
