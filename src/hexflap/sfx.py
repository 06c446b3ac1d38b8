"""
sfx.py: Synthesized sound cues played through pygame.mixer.

Every cue is rendered once into a 16-bit buffer from a list of tones, so no
audio files ship with the game. When no audio device is available the
manager disables itself and cues are dropped.
"""

import logging
import math
from array import array
from dataclasses import dataclass
from typing import Dict, List, Sequence

import pygame

from .constants import SAMPLE_RATE, MASTER_GAIN
from .data_models import SoundCue

logger = logging.getLogger(__name__)

ATTACK_MS = 5


@dataclass(frozen=True)
class Tone:
    freq: float
    duration_ms: int
    volume: float
    wave: str = "sine"
    delay_ms: int = 0


def _oscillator(wave: str, phase: float) -> float:
    """One sample of a unit waveform at phase in [0, 1)."""
    if wave == "sine":
        return math.sin(2 * math.pi * phase)
    if wave == "square":
        return 1.0 if phase < 0.5 else -1.0
    if wave == "triangle":
        return 4 * abs(phase - 0.5) - 1
    if wave == "sawtooth":
        return 2 * phase - 1
    raise ValueError(f"unknown waveform {wave!r}")


def _hover(vol: float) -> List[Tone]:
    return [Tone(440, 90, 0.018 * vol, "triangle")]


def _button(vol: float) -> List[Tone]:
    return [Tone(880, 110, 0.02 * vol, "sine")]


def _special(vol: float) -> List[Tone]:
    return [Tone(f, 80, 0.015 * vol, "sine", delay_ms=i * 50)
            for i, f in enumerate((440, 554, 659, 880))]


def _achievement(vol: float) -> List[Tone]:
    return [
        Tone(523, 120, 0.025 * vol, "triangle", 0),     # C5
        Tone(659, 120, 0.028 * vol, "sine", 80),        # E5
        Tone(784, 160, 0.032 * vol, "triangle", 160),   # G5
        Tone(1047, 200, 0.035 * vol, "sine", 280),      # C6
        Tone(1047, 250, 0.04 * vol, "triangle", 480),
        Tone(1319, 200, 0.03 * vol, "sine", 480),
    ]


CUE_TONES: Dict[SoundCue, List[Tone]] = {
    SoundCue.JUMP: _hover(0.3),
    SoundCue.SCORE: _special(0.5),
    SoundCue.GAME_OVER: _achievement(0.7),
    SoundCue.START: _button(0.5),
}


def synthesize(tones: Sequence[Tone], sample_rate: int = SAMPLE_RATE,
               channels: int = 1) -> array:
    """Mixes tones into signed 16-bit interleaved samples."""
    if not tones:
        return array("h")

    total_ms = max(t.delay_ms + t.duration_ms for t in tones)
    frames = int(sample_rate * total_ms / 1000)
    mix = [0.0] * frames

    for tone in tones:
        start = int(sample_rate * tone.delay_ms / 1000)
        length = int(sample_rate * tone.duration_ms / 1000)
        attack = max(1, int(sample_rate * ATTACK_MS / 1000))
        amplitude = min(1.0, tone.volume * MASTER_GAIN)
        for i in range(length):
            # Linear attack, then linear decay to silence
            if i < attack:
                env = i / attack
            else:
                env = 1.0 - (i - attack) / max(1, length - attack)
            phase = (tone.freq * i / sample_rate) % 1.0
            mix[start + i] += amplitude * env * _oscillator(tone.wave, phase)

    samples = array("h")
    for value in mix:
        sample = int(max(-1.0, min(1.0, value)) * 32767)
        samples.extend([sample] * channels)
    return samples


class SfxManager:
    """Plays SoundCue events; pass an instance as a session's sound listener."""

    def __init__(self, muted: bool = False):
        self.sounds: Dict[SoundCue, "pygame.mixer.Sound"] = {}
        self._init_mixer()
        self.enabled = bool(self.sounds) and not muted

    def _init_mixer(self):
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1)
            sample_rate, size, channels = pygame.mixer.get_init()
            if size != -16:
                logger.warning("Unsupported mixer sample size %d, sound cues disabled", size)
                return
            for cue, tones in CUE_TONES.items():
                buffer = synthesize(tones, sample_rate, channels).tobytes()
                self.sounds[cue] = pygame.mixer.Sound(buffer=buffer)
        except pygame.error as e:
            logger.warning("Audio unavailable, sound cues disabled: %s", e)
            self.sounds = {}

    def toggle(self) -> bool:
        self.enabled = not self.enabled and bool(self.sounds)
        return self.enabled

    def play(self, cue: SoundCue):
        if not self.enabled:
            return
        sound = self.sounds.get(cue)
        if sound is None:
            return
        try:
            sound.play()
        except pygame.error as e:
            logger.debug("Failed to play %s: %s", cue.value, e)

    __call__ = play
