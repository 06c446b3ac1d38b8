import pygame
import pytest

from hexflap.client import HexFlapClient, map_event, parse_args
from hexflap.constants import JUMP_PARTICLES
from hexflap.data_models import InputEvent, SessionState, SoundCue


@pytest.mark.parametrize("event, expected", [
    (pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE), InputEvent.JUMP),
    (pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP), InputEvent.JUMP),
    (pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN), InputEvent.START),
    (pygame.event.Event(pygame.KEYDOWN, key=pygame.K_r), InputEvent.RESET),
    (pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a), None),
    (pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10)), InputEvent.JUMP),
    (pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(10, 10)), None),
    (pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10), touch=True), None),
    (pygame.event.Event(pygame.FINGERDOWN, x=0.5, y=0.5, touch_id=0, finger_id=0), InputEvent.JUMP),
    (pygame.event.Event(pygame.MOUSEMOTION, pos=(10, 10)), None),
])
def test_map_event(event, expected):
    assert map_event(event) is expected


def test_parse_args_defaults():
    args = parse_args([])
    assert args.db == "hexflap_scores.db"
    assert args.seed is None
    assert not args.mute
    assert args.log_level == "INFO"


def test_parse_args_options():
    args = parse_args(["--db", "x.db", "--seed", "3", "--mute", "--fps", "30"])
    assert (args.db, args.seed, args.mute, args.fps) == ("x.db", 3, True, 30)


@pytest.fixture
def client(tmp_path):
    client = HexFlapClient(db_file=str(tmp_path / "scores.db"), seed=1, muted=True)
    yield client
    client.session.store.close()


def test_events_reach_the_session_through_the_queue(client):
    space = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE)
    assert client.handle_events([space])
    assert client.session.state is SessionState.MENU

    client.driver.advance(client.driver.tick_time)
    assert client.session.state is SessionState.PLAYING


def test_quit_and_escape_stop_the_loop(client):
    assert not client.handle_events([pygame.event.Event(pygame.QUIT)])
    escape = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)
    assert not client.handle_events([escape])


def tap():
    """A finger tap as SDL delivers it: the touch plus its synthetic click."""
    return [
        pygame.event.Event(pygame.FINGERDOWN, x=0.5, y=0.5, touch_id=0, finger_id=0),
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(400, 300), touch=True),
    ]


def queue_tap(session):
    for event in tap():
        game_input = map_event(event)
        if game_input is not None:
            session.handle_input(game_input)


def test_tap_on_game_over_returns_to_menu_only(session):
    session.start()
    session.player.y = session.config.screen_height - 1.0
    session.update()
    assert session.state is SessionState.GAME_OVER

    queue_tap(session)
    session.update()
    assert session.state is SessionState.MENU


def test_tap_while_playing_jumps_once(session, cues):
    session.start()
    session.update()
    cues.clear()
    particles = len(session.particles)

    queue_tap(session)
    session.update()
    assert cues.count(SoundCue.JUMP) == 1
    assert len(session.particles) == particles + JUMP_PARTICLES


def test_run_cleans_up_when_the_loop_raises(client, monkeypatch):
    closed = []
    monkeypatch.setattr(client.session.store, "close", lambda: closed.append(True))

    def broken(events):
        raise RuntimeError("boom")
    monkeypatch.setattr(client, "handle_events", broken)

    with pytest.raises(RuntimeError):
        client.run()
    assert closed
    assert not pygame.get_init()
