"""
session.py: One game session: state machine, latched input queue, scoring
and high-score bookkeeping.

Inputs arrive through handle_input() at any time but are only applied when
update() drains the queue at the start of the next tick.
"""

import logging
import random
from collections import deque
from typing import Callable, Deque, List, Optional

from .config import GameConfig
from .constants import JUMP_PARTICLES, DEATH_PARTICLES
from .data_models import (
    InputEvent, Obstacle, Particle, Player, SessionState, SoundCue, Sparkle
)
from .score_store import InMemoryScoreStore, ScoreStoreError
from .world_engine import WorldEngine

logger = logging.getLogger(__name__)

SoundListener = Callable[[SoundCue], None]


class GameSession:
    def __init__(self, config: Optional[GameConfig] = None, store=None,
                 sound: Optional[SoundListener] = None,
                 rng: Optional[random.Random] = None,
                 effects_rng: Optional[random.Random] = None):
        self.config = config or GameConfig()
        self.engine = WorldEngine(self.config, rng=rng, effects_rng=effects_rng)
        self.sound = sound
        self.store = store if store is not None else InMemoryScoreStore()

        self.state = SessionState.MENU
        self.score = 0
        self.player = Player()
        self.engine.reset_player(self.player)
        self.pending_inputs: Deque[InputEvent] = deque()

        self.high_score = self._load_high_score()

    # ---------- Read-only views for the renderer ----------

    @property
    def obstacles(self) -> List[Obstacle]:
        return self.engine.obstacles

    @property
    def particles(self) -> List[Particle]:
        return self.engine.particles

    @property
    def sparkles(self) -> List[Sparkle]:
        return self.engine.sparkles

    @property
    def tick(self) -> int:
        return self.engine.tick_count

    @property
    def bg_offset(self) -> float:
        return self.engine.bg_offset

    @property
    def is_new_record(self) -> bool:
        return self.score > 0 and self.score == self.high_score

    # ---------- Input ----------

    def handle_input(self, event: InputEvent = InputEvent.JUMP):
        """Latches an input; it takes effect on the next update()."""
        self.pending_inputs.append(event)

    def _apply_input(self, event: InputEvent):
        if self.state is SessionState.MENU:
            if event in (InputEvent.START, InputEvent.JUMP):
                self.start()
        elif self.state is SessionState.PLAYING:
            if event is InputEvent.JUMP:
                self.jump()
        elif self.state is SessionState.GAME_OVER:
            self.reset()

    # ---------- Transitions ----------

    def start(self):
        """Menu -> Playing"""
        self.state = SessionState.PLAYING
        self.score = 0
        self.engine.reset()
        self.engine.reset_player(self.player)
        logger.info("Session started (high score %d)", self.high_score)
        self._emit(SoundCue.START)

    def jump(self):
        self.engine.jump(self.player)
        cx, cy = self.player.center
        self.engine.spawn_particles(cx, cy, JUMP_PARTICLES)
        self._emit(SoundCue.JUMP)

    def game_over(self):
        """Playing -> GameOver"""
        self.state = SessionState.GAME_OVER
        if self.score > self.high_score:
            self.high_score = self.score
            self._save_high_score()
            logger.info("New high score: %d", self.high_score)
        logger.info("Game over at tick %d with score %d", self.tick, self.score)

        cx, cy = self.player.center
        self.engine.spawn_particles(cx, cy, DEATH_PARTICLES)
        self._emit(SoundCue.GAME_OVER)

    def reset(self):
        """GameOver -> Menu"""
        self.state = SessionState.MENU
        self.score = 0
        self.engine.reset()
        self.engine.reset_player(self.player)

    # ---------- Tick ----------

    def update(self):
        """Drains latched inputs, then advances the world one tick if playing."""
        while self.pending_inputs:
            self._apply_input(self.pending_inputs.popleft())

        if self.state is SessionState.PLAYING:
            self._step()
        elif self.state is SessionState.GAME_OVER:
            # Only the death burst keeps moving
            self.engine.step_effects()

    def _step(self):
        engine = self.engine
        engine.tick_count += 1

        # 1. Player physics
        engine.step_player(self.player)

        # 2. Spawn and move obstacles
        engine.step_obstacles()

        # 3. Collisions end the tick immediately
        if engine.check_collision(self.player, engine.obstacles):
            self.game_over()
            return

        # 4. Score passed obstacles
        earned = engine.score_passed_obstacles(self.player)
        if earned:
            self.score += earned
            engine.resize_for_score(self.player, self.score)
            engine.spawn_sparkles(self.player.x, self.player.y)
            self._emit(SoundCue.SCORE)

        # 5. Cosmetics
        engine.step_effects()
        engine.scroll_background()

    # ---------- Collaborators ----------

    def _emit(self, cue: SoundCue):
        if self.sound is not None:
            self.sound(cue)

    def _load_high_score(self) -> int:
        try:
            return self.store.get(self.config.high_score_key)
        except ScoreStoreError as e:
            logger.warning("High score unavailable, keeping it in memory: %s", e)
            self.store = InMemoryScoreStore()
            return 0

    def _save_high_score(self):
        try:
            self.store.save(self.config.high_score_key, self.high_score)
        except ScoreStoreError as e:
            logger.warning("Could not persist high score, keeping it in memory: %s", e)
            self.store = InMemoryScoreStore()
            self.store.save(self.config.high_score_key, self.high_score)
