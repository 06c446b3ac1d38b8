import os
import random

# Headless pygame for render and audio tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from hexflap.config import GameConfig
from hexflap.score_store import InMemoryScoreStore
from hexflap.session import GameSession


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def cues():
    return []


@pytest.fixture
def store():
    return InMemoryScoreStore()


@pytest.fixture
def make_session(store, cues):
    def _make(config=None, **kwargs):
        kwargs.setdefault("store", store)
        kwargs.setdefault("sound", cues.append)
        kwargs.setdefault("rng", random.Random(1234))
        kwargs.setdefault("effects_rng", random.Random(99))
        return GameSession(config or GameConfig(), **kwargs)
    return _make


@pytest.fixture
def session(make_session):
    return make_session()
