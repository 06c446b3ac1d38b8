"""
config.py: Per-session game configuration built from the defaults in constants.
"""

from dataclasses import dataclass, replace

from . import constants as c


@dataclass(frozen=True)
class GameConfig:
    """Physics, geometry and timing values read by every engine component."""
    screen_width: int = c.SCREEN_WIDTH
    screen_height: int = c.SCREEN_HEIGHT
    bird_x: float = c.BIRD_X
    start_y: float = c.RESPAWN_Y
    bg_scroll_speed: float = c.BG_SCROLL_SPEED

    bird_base_width: float = c.BIRD_BASE_WIDTH
    bird_base_height: float = c.BIRD_BASE_HEIGHT
    bird_max_width: float = c.BIRD_MAX_WIDTH
    bird_max_height: float = c.BIRD_MAX_HEIGHT
    bird_growth_per_point: float = c.BIRD_GROWTH_PER_POINT

    gravity: float = c.GRAVITY
    jump_velocity: float = c.JUMP_VELOCITY
    max_velocity: float = c.MAX_VELOCITY
    rotation_factor: float = c.ROTATION_FACTOR
    max_rotation: float = c.MAX_ROTATION

    trail_length: int = c.TRAIL_LENGTH
    trail_life: int = c.TRAIL_LIFE

    pipe_width: float = c.PIPE_WIDTH
    pipe_gap: float = c.PIPE_GAP
    pipe_speed: float = c.PIPE_SPEED
    pipe_spawn_interval: int = c.PIPE_SPAWN_INTERVAL_TICKS
    pipe_min_height: float = c.PIPE_MIN_HEIGHT

    high_score_key: str = c.HIGH_SCORE_KEY

    def __post_init__(self):
        if self.screen_width <= 0 or self.screen_height <= 0:
            raise ValueError("viewport dimensions must be positive")
        if self.pipe_width <= 0 or self.pipe_gap <= 0 or self.pipe_min_height < 0:
            raise ValueError("pipe width and gap must be positive, min height non-negative")
        if self.pipe_spawn_interval <= 0:
            raise ValueError("pipe_spawn_interval must be a positive tick count")
        if self.trail_length <= 0:
            raise ValueError("trail_length must be positive")
        # The gap plus both minimum blocking heights must fit on screen
        if self.max_top_height < self.pipe_min_height:
            raise ValueError(
                f"gap {self.pipe_gap} with min height {self.pipe_min_height} "
                f"does not fit a {self.screen_height}px viewport")

    @property
    def max_top_height(self) -> float:
        return self.screen_height - self.pipe_gap - self.pipe_min_height

    def with_overrides(self, **changes) -> "GameConfig":
        """Returns a validated copy with the given fields replaced."""
        return replace(self, **changes)
