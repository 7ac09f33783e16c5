import math

import pytest

pygame = pytest.importorskip("pygame")

from client.input import BOOST_MOUSE_BUTTON, InputManager  # noqa: E402


@pytest.fixture
def playing_world(world):
    world.camera.viewport = (800, 600)
    world.player.mass = 30.0
    return world


def key(key_code, unicode=""):
    return pygame.event.Event(pygame.KEYDOWN, key=key_code, unicode=unicode, mod=0)


def test_pointer_steers_player(playing_world):
    manager = InputManager()
    # Straight below the screen centre, where the player is drawn.
    events = [pygame.event.Event(pygame.MOUSEMOTION, pos=(400, 500), rel=(0, 0), buttons=(0, 0, 0))]
    state = manager.process(events, playing_world, playing=True)
    assert state.angle == pytest.approx(math.pi / 2)
    assert playing_world.player.angle == pytest.approx(math.pi / 2)


def test_right_button_holds_boost(playing_world):
    manager = InputManager()
    down = pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(0, 0), button=BOOST_MOUSE_BUTTON)
    up = pygame.event.Event(pygame.MOUSEBUTTONUP, pos=(0, 0), button=BOOST_MOUSE_BUTTON)
    manager.process([down], playing_world, playing=True)
    assert playing_world.player.boosting
    manager.process([], playing_world, playing=True)
    assert playing_world.player.boosting
    manager.process([up], playing_world, playing=True)
    assert not playing_world.player.boosting


def test_left_button_does_not_boost(playing_world):
    manager = InputManager()
    down = pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(0, 0), button=1)
    manager.process([down], playing_world, playing=True)
    assert not playing_world.player.boosting


def test_typing_edits_name_outside_game(world):
    manager = InputManager()
    events = [key(pygame.K_a, "a"), key(pygame.K_b, "b"), key(pygame.K_BACKSPACE), key(pygame.K_c, "c")]
    state = manager.process(events, world, playing=False)
    assert manager.name == "ac"
    assert not state.submit


def test_typing_is_ignored_while_playing(playing_world):
    manager = InputManager("bob")
    manager.process([key(pygame.K_a, "a")], playing_world, playing=True)
    assert manager.name == "bob"


def test_enter_submits_and_escape_quits(world):
    manager = InputManager()
    state = manager.process([key(pygame.K_RETURN, "\r")], world, playing=False)
    assert state.submit
    state = manager.process([key(pygame.K_ESCAPE)], world, playing=False)
    assert state.quit
    state = manager.process([pygame.event.Event(pygame.QUIT)], world, playing=True)
    assert state.quit


def test_name_length_is_capped(world):
    manager = InputManager()
    manager.process([key(pygame.K_x, "x")] * 30, world, playing=False)
    assert manager.name == "x" * 16
