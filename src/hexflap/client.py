"""
client.py

Desktop client: pygame window, input mapping and the fixed-timestep loop.
"""

import argparse
import logging
import random
from typing import List, Optional

import pygame

from .config import GameConfig
from .constants import RENDER_FPS, DB_FILE
from .data_models import InputEvent
from .driver import FrameDriver
from .renderer import Renderer
from .score_store import ScoreStore, ScoreStoreError, InMemoryScoreStore
from .session import GameSession
from .sfx import SfxManager

logger = logging.getLogger(__name__)

JUMP_KEYS = (pygame.K_SPACE, pygame.K_UP)
START_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)


def map_event(event: pygame.event.Event) -> Optional[InputEvent]:
    """Translates a pygame event into a logical game input, or None."""
    if event.type == pygame.KEYDOWN:
        if event.key in JUMP_KEYS:
            return InputEvent.JUMP
        if event.key in START_KEYS:
            return InputEvent.START
        if event.key == pygame.K_r:
            return InputEvent.RESET
        return None
    # SDL follows each FINGERDOWN with a synthetic click flagged `touch`
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and not getattr(event, "touch", False):
        return InputEvent.JUMP
    if event.type == pygame.FINGERDOWN:
        return InputEvent.JUMP
    return None


class HexFlapClient:
    def __init__(self, db_file: str = DB_FILE, seed: Optional[int] = None,
                 muted: bool = False, fps: int = RENDER_FPS):
        pygame.init()
        self.config = GameConfig()
        self.screen = pygame.display.set_mode(
            (self.config.screen_width, self.config.screen_height))
        pygame.display.set_caption("HEX FLAP")
        self.fps = fps

        self.sfx = SfxManager(muted=muted)
        self.session = GameSession(
            self.config,
            store=self._open_store(db_file),
            sound=self.sfx,
            rng=random.Random(seed) if seed is not None else None,
        )
        self.renderer = Renderer(self.screen)
        self.driver = FrameDriver(self.session.update, self._draw)

        self.clock = pygame.time.Clock()

    @staticmethod
    def _open_store(db_file: str):
        try:
            return ScoreStore(db_file)
        except ScoreStoreError as e:
            logger.warning("%s; high score will not be saved", e)
            return InMemoryScoreStore()

    def _draw(self):
        self.renderer.render(self.session)
        pygame.display.flip()

    def handle_events(self, events: List[pygame.event.Event]) -> bool:
        """Feeds inputs to the session. Returns False when the window should close."""
        for event in events:
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_m:
                logger.info("Sound %s", "on" if self.sfx.toggle() else "off")
                continue

            game_input = map_event(event)
            if game_input is not None:
                self.session.handle_input(game_input)
        return True

    def run(self):
        """The main client execution loop."""
        logger.info("HEX FLAP started. Space / Click = Flap | M = Mute | Esc = Quit")

        running = True
        try:
            while running:
                elapsed = self.clock.tick(self.fps) / 1000.0
                running = self.handle_events(pygame.event.get())
                if running:
                    self.driver.advance(elapsed)
        finally:
            self.session.store.close()
            pygame.quit()


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="hexflap", description="HEX FLAP arcade game")
    parser.add_argument("--db", default=DB_FILE, help="SQLite file holding the high score")
    parser.add_argument("--seed", type=int, default=None, help="seed for obstacle generation")
    parser.add_argument("--mute", action="store_true", help="start with sound cues off")
    parser.add_argument("--fps", type=int, default=RENDER_FPS, help="render frame rate cap")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    client = HexFlapClient(db_file=args.db, seed=args.seed, muted=args.mute, fps=args.fps)
    client.run()

