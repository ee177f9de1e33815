import pygame
import pytest

from pacmaze import config
from pacmaze.app import App
from pacmaze.geometry import Direction


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    application = App(seed=1)
    pygame.event.clear()
    yield application
    pygame.quit()


def send(app, kind, **attrs):
    pygame.event.post(pygame.event.Event(kind, **attrs))
    app.handle_events()


def finger(app, kind, finger_id, x, y):
    # SDL reports finger positions normalised to the window
    w, h = app.screen.get_size()
    send(app, kind, touch_id=0, finger_id=finger_id, x=x / w, y=y / h, dx=0.0, dy=0.0, pressure=1.0)


def test_pad_laid_out_for_window(app):
    w, h = app.screen.get_size()
    up = app.arrows.rects[Direction.UP]
    assert up.top == h - config.PAD_MARGIN - config.PAD_SIZE
    assert app.arrows.rects[Direction.RIGHT].right == w - config.PAD_MARGIN


def test_first_finger_switches_to_touch_mode(app):
    assert not app.touch_mode
    assert app.game.player.base_speed == pytest.approx(config.PLAYER_SPEED)

    down = app.arrows.rects[Direction.DOWN].center
    finger(app, pygame.FINGERDOWN, 7, *down)

    assert app.touch_mode
    assert app.game.player.base_speed == pytest.approx(config.PLAYER_SPEED * config.TOUCH_SPEED_FACTOR)
    assert app.requested_direction() is Direction.DOWN

    finger(app, pygame.FINGERUP, 7, *down)
    assert app.requested_direction() is None


def test_pad_press_steers_the_player(app):
    finger(app, pygame.FINGERDOWN, 1, *app.arrows.rects[Direction.DOWN].center)
    app.game.tick(app.requested_direction())
    # Start tile (1,1) has an open tile below it
    assert app.game.player.direction is Direction.DOWN


def test_finger_drag_off_the_pad_is_a_stick(app):
    finger(app, pygame.FINGERDOWN, 2, 100, 100)
    assert app.touch_stick.active
    assert app.requested_direction() is None

    finger(app, pygame.FINGERMOTION, 2, 140, 100)
    assert app.requested_direction() is Direction.RIGHT

    finger(app, pygame.FINGERUP, 2, 140, 100)
    assert not app.touch_stick.active
    assert app.requested_direction() is None


def test_mouse_ignored_outside_touch_mode(app):
    up = app.arrows.rects[Direction.UP].center
    send(app, pygame.MOUSEBUTTONDOWN, pos=up, button=1)
    assert app.requested_direction() is None


def test_mouse_drives_pad_in_touch_mode(app):
    app.game.set_touch_mode(True)
    up = app.arrows.rects[Direction.UP].center

    send(app, pygame.MOUSEBUTTONDOWN, pos=up, button=3)
    assert app.requested_direction() is None

    send(app, pygame.MOUSEBUTTONDOWN, pos=up, button=1)
    assert app.requested_direction() is Direction.UP
    send(app, pygame.MOUSEBUTTONUP, pos=up, button=1)
    assert app.requested_direction() is None


def test_touch_flag_starts_in_touch_mode(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    try:
        application = App(touch=True)
        assert application.touch_mode
        assert application.game.player.base_speed == pytest.approx(
            config.PLAYER_SPEED * config.TOUCH_SPEED_FACTOR)
    finally:
        pygame.quit()
