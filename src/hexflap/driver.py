"""
driver.py: Fixed-timestep driver. Runs whole update ticks for the elapsed
frame time, then renders once.
"""

from typing import Callable

from .constants import TICK_TIME, MAX_TICKS_PER_FRAME


class FrameDriver:
    def __init__(self, update: Callable[[], None], render: Callable[[], None],
                 tick_time: float = TICK_TIME,
                 max_ticks_per_frame: int = MAX_TICKS_PER_FRAME):
        self.update = update
        self.render = render
        self.tick_time = tick_time
        self.max_ticks_per_frame = max_ticks_per_frame
        self.accumulator = 0.0

    def advance(self, elapsed: float) -> int:
        """
        Adds elapsed seconds, runs the ticks that fit and renders one frame.
        Returns the number of ticks run.
        """
        self.accumulator += elapsed

        ticks = 0
        while self.accumulator >= self.tick_time and ticks < self.max_ticks_per_frame:
            self.accumulator -= self.tick_time
            self.update()
            ticks += 1

        # Drop time we could not catch up on instead of spiralling
        if ticks == self.max_ticks_per_frame:
            self.accumulator = min(self.accumulator, self.tick_time)

        self.render()
        return ticks
