import copy

import pygame
import pytest

from hexflap.data_models import Obstacle, SessionState
from hexflap.renderer import COLORS, Renderer, hex_score


@pytest.fixture
def surface():
    return pygame.Surface((800, 600))


@pytest.fixture
def renderer(surface):
    return Renderer(surface)


def snapshot(session):
    return copy.deepcopy((
        session.state, session.score, session.high_score, session.tick,
        session.bg_offset, repr(session.player), repr(session.obstacles),
        repr(session.particles), repr(session.sparkles),
        list(session.pending_inputs),
    ))


def test_menu_renders_without_touching_state(session, renderer, surface):
    before = snapshot(session)
    renderer.render(session)
    assert snapshot(session) == before
    assert surface.get_at((1, 599))[:3] == COLORS["bg"]


def test_live_game_renders_without_touching_state(session, renderer):
    session.start()
    session.jump()
    for _ in range(12):
        session.update()
    session.engine.obstacles.append(Obstacle(x=400, top_height=120, bottom_y=260))
    session.engine.spawn_sparkles(200, 200)
    session.score = 11

    before = snapshot(session)
    for _ in range(3):
        renderer.render(session)
    assert snapshot(session) == before


def test_game_over_overlay_renders(session, renderer):
    session.start()
    session.player.y = 599.0
    session.update()
    assert session.state is SessionState.GAME_OVER

    before = snapshot(session)
    renderer.render(session)
    assert snapshot(session) == before


def test_renderer_counts_frames_only(session, renderer):
    renderer.render(session)
    renderer.render(session)
    assert renderer.frame == 2


@pytest.mark.parametrize("value, text", [(0, "0x0"), (10, "0xA"), (255, "0xFF")])
def test_hex_score(value, text):
    assert hex_score(value) == text
