"""
physics_core.py: The deterministic kinematic functions and collision logic.

Collision convention: every overlap test uses strict inequalities, so boxes
that only touch along an edge do not collide, and a player resting exactly on
the top or bottom viewport edge is still in bounds.
"""

from typing import Iterable, Optional, Tuple

from .config import GameConfig
from .data_models import Player, Obstacle, TrailPoint

Box = Tuple[float, float, float, float]


class PhysicsCore:
    """
    Deterministic per-tick physics for the player plus AABB collision tests.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()

    # ---------- Integration ----------

    def apply_gravity_and_movement(self, y: float, velocity: float) -> Tuple[float, float]:
        """
        Calculates new position and velocity after one tick.
        """
        velocity += self.config.gravity
        velocity = min(velocity, self.config.max_velocity)
        y += velocity

        y = round(y, 4)
        velocity = round(velocity, 4)

        return y, velocity

    def jump(self, player: Player):
        """Overwrites the current velocity with the jump velocity."""
        player.velocity = self.config.jump_velocity

    def update_rotation(self, player: Player):
        limit = self.config.max_rotation
        player.rotation = max(-limit, min(limit, player.velocity * self.config.rotation_factor))

    def update_trail(self, player: Player):
        """Records the player's centre, evicts the oldest point and ages the rest."""
        cx, cy = player.center
        player.trail.append(TrailPoint(cx, cy, self.config.trail_life))
        while len(player.trail) > self.config.trail_length:
            player.trail.popleft()

        for point in player.trail:
            point.life -= 1
        while player.trail and player.trail[0].life <= 0:
            player.trail.popleft()

    def step_player(self, player: Player):
        """Single-tick update of the player. Mutates the player state."""
        player.y, player.velocity = self.apply_gravity_and_movement(player.y, player.velocity)
        self.update_rotation(player)
        self.update_trail(player)

    def resize_for_score(self, player: Player, score: int):
        """Grows the player box with the score, capped per axis."""
        cfg = self.config
        multiplier = 1 + score * cfg.bird_growth_per_point
        player.width = min(cfg.bird_base_width * multiplier, cfg.bird_max_width)
        player.height = min(cfg.bird_base_height * multiplier, cfg.bird_max_height)

    def reset_player(self, player: Player):
        cfg = self.config
        player.x = cfg.bird_x
        player.y = cfg.start_y
        player.width = cfg.bird_base_width
        player.height = cfg.bird_base_height
        player.velocity = 0.0
        player.rotation = 0.0
        player.trail.clear()

    # ---------- Collision ----------

    @staticmethod
    def boxes_overlap(a: Box, b: Box) -> bool:
        """Strict AABB overlap of two (left, top, right, bottom) boxes."""
        return a[0] < b[2] and a[2] > b[0] and a[1] < b[3] and a[3] > b[1]

    def obstacle_boxes(self, obstacle: Obstacle) -> Tuple[Box, Box]:
        """The upper and lower blocking regions of an obstacle."""
        left = obstacle.x
        right = obstacle.x + self.config.pipe_width
        upper = (left, 0.0, right, obstacle.top_height)
        lower = (left, obstacle.bottom_y, right, float(self.config.screen_height))
        return upper, lower

    def hits_viewport_edge(self, player: Player) -> bool:
        """True once the player box crosses the top or bottom edge."""
        return player.y < 0 or player.y + player.height > self.config.screen_height

    def hits_obstacle(self, player: Player, obstacle: Obstacle) -> bool:
        box = player.bounds
        upper, lower = self.obstacle_boxes(obstacle)
        return self.boxes_overlap(box, upper) or self.boxes_overlap(box, lower)

    def check_collision(self, player: Player, obstacles: Iterable[Obstacle]) -> bool:
        """Checks for collisions with the viewport edges or any obstacle."""

        # 1. Floor/Ceiling Collision
        if self.hits_viewport_edge(player):
            return True

        # 2. Obstacle Collision
        for obstacle in obstacles:
            if self.hits_obstacle(player, obstacle):
                return True

        return False
