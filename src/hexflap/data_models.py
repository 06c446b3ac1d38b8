"""
data_models.py: Data structures for the game state.
"""

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Deque, Tuple

from .constants import (
    BIRD_X, RESPAWN_Y, BIRD_BASE_WIDTH, BIRD_BASE_HEIGHT
)


class SessionState(Enum):
    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "gameOver"


class InputEvent(Enum):
    """Logical inputs; several physical sources map onto each one."""
    START = "start"
    JUMP = "jump"
    FLAP = "jump"  # alias of JUMP
    RESET = "reset"


class SoundCue(Enum):
    JUMP = "jump"
    SCORE = "score"
    GAME_OVER = "gameOver"
    START = "start"


@dataclass
class TrailPoint:
    x: float
    y: float
    life: int


@dataclass
class Player:
    """The player-controlled hex container. (x, y) is its top-left corner."""
    x: float = BIRD_X
    y: float = RESPAWN_Y
    width: float = BIRD_BASE_WIDTH
    height: float = BIRD_BASE_HEIGHT
    velocity: float = 0.0
    rotation: float = 0.0
    trail: Deque[TrailPoint] = field(default_factory=deque)

    @property
    def center(self) -> Tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """(left, top, right, bottom)"""
        return self.x, self.y, self.x + self.width, self.y + self.height


@dataclass
class Obstacle:
    """An execution unit pair: blocking above top_height and below bottom_y."""
    x: float
    top_height: float
    bottom_y: float
    scored: bool = False

    @property
    def gap(self) -> float:
        return self.bottom_y - self.top_height


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    size: float
    life: int
    max_life: int

    @property
    def alpha(self) -> float:
        return max(0.0, self.life / self.max_life)


@dataclass
class Sparkle:
    x: float
    y: float
    size: float
    life: int
    rotation: float
    rot_speed: float
    scale: float = 1.0
