"""
world_engine.py: Obstacle generation, scrolling, scoring and cosmetic effects.
"""

import math
import random
from typing import List, Optional

from .config import GameConfig
from .constants import (
    PARTICLE_LIFE, PARTICLE_GRAVITY, SPARKLE_LIFE, SCORE_SPARKLES
)
from .data_models import Player, Obstacle, Particle, Sparkle
from .physics_core import PhysicsCore


class WorldEngine(PhysicsCore):
    """
    Owns everything in the world except the player.
    Inherits core physics and collision from PhysicsCore.

    Obstacles draw from `rng` and effects from `effects_rng`, so a seeded
    `rng` reproduces the same obstacle sequence however many effects spawn.
    """

    def __init__(self, config: Optional[GameConfig] = None,
                 rng: Optional[random.Random] = None,
                 effects_rng: Optional[random.Random] = None):
        super().__init__(config)
        self.rng = rng or random.Random()
        self.effects_rng = effects_rng or random.Random()
        self.tick_count = 0
        self.bg_offset = 0.0
        self.obstacles: List[Obstacle] = []
        self.particles: List[Particle] = []
        self.sparkles: List[Sparkle] = []

    def reset(self):
        self.tick_count = 0
        self.obstacles = []
        self.particles = []
        self.sparkles = []

    # ---------- Obstacles ----------

    def random_top_height(self) -> float:
        low = self.config.pipe_min_height
        high = self.config.max_top_height
        top = self.rng.uniform(low, high)
        return min(max(top, low), high)

    def spawn_obstacle(self) -> Obstacle:
        """Generates a new obstacle at the right edge of the viewport."""
        top = self.random_top_height()
        obstacle = Obstacle(
            x=float(self.config.screen_width),
            top_height=top,
            bottom_y=top + self.config.pipe_gap,
        )
        self.obstacles.append(obstacle)
        return obstacle

    def move_obstacles(self):
        """Scrolls every obstacle left and drops the ones fully off-screen."""
        for obstacle in self.obstacles:
            obstacle.x -= self.config.pipe_speed
            obstacle.x = round(obstacle.x, 4)

        self.obstacles = [o for o in self.obstacles if o.x > -self.config.pipe_width]

    def step_obstacles(self):
        """Spawns on the interval, then moves. Call once per tick after advancing tick_count."""
        if self.tick_count % self.config.pipe_spawn_interval == 0:
            self.spawn_obstacle()
        self.move_obstacles()

    def score_passed_obstacles(self, player: Player) -> int:
        """Marks obstacles whose trailing edge is behind the player. Returns the points earned."""
        earned = 0
        for obstacle in self.obstacles:
            if not obstacle.scored and obstacle.x + self.config.pipe_width < player.x:
                obstacle.scored = True
                earned += 1
        return earned

    # ---------- Effects ----------

    def spawn_particles(self, x: float, y: float, count: int):
        rnd = self.effects_rng.random
        for _ in range(count):
            self.particles.append(Particle(
                x=x,
                y=y,
                vx=(rnd() - 0.5) * 4,
                vy=(rnd() - 0.5) * 4 - 2,
                size=rnd() * 3 + 1,
                life=PARTICLE_LIFE,
                max_life=PARTICLE_LIFE,
            ))

    def spawn_sparkles(self, x: float, y: float, count: int = SCORE_SPARKLES):
        rnd = self.effects_rng.random
        for _ in range(count):
            self.sparkles.append(Sparkle(
                x=x + (rnd() - 0.5) * 40,
                y=y + (rnd() - 0.5) * 40,
                size=rnd() * 8 + 4,
                life=SPARKLE_LIFE,
                rotation=rnd() * math.tau,
                rot_speed=(rnd() - 0.5) * 0.2,
            ))

    def step_effects(self):
        for particle in self.particles:
            particle.x += particle.vx
            particle.y += particle.vy
            particle.vy += PARTICLE_GRAVITY
            particle.life -= 1
        self.particles = [p for p in self.particles if p.life > 0]

        for sparkle in self.sparkles:
            sparkle.life -= 1
            sparkle.rotation += sparkle.rot_speed
            sparkle.scale = math.sin(sparkle.life * 0.2) * 0.5 + 0.5
        self.sparkles = [s for s in self.sparkles if s.life > 0]

    def scroll_background(self):
        self.bg_offset += self.config.bg_scroll_speed
