"""
HEX FLAP: a side-scrolling obstacle-avoidance arcade game built on pygame.
"""

from .config import GameConfig
from .data_models import InputEvent, SessionState, SoundCue
from .session import GameSession

__version__ = "1.0.0"

__all__ = ["GameConfig", "GameSession", "InputEvent", "SessionState", "SoundCue"]
