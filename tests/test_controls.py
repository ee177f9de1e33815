import math
from types import SimpleNamespace

import pygame
import pytest

from pacmaze.controls import (MOUSE_POINTER, ArrowPad, KeyboardInput, StickInput, TouchStick,
                              direction_from_angle, direction_from_vector, merge_requests)
from pacmaze.geometry import Direction


def key(kind, code):
    return SimpleNamespace(type=kind, key=code)


@pytest.mark.parametrize("degrees,expected", [
    (0, Direction.RIGHT),
    (40, Direction.RIGHT),
    (-40, Direction.RIGHT),
    (50, Direction.DOWN),
    (130, Direction.DOWN),
    (90, Direction.DOWN),
    (180, Direction.LEFT),
    (-170, Direction.LEFT),
    (-90, Direction.UP),
    (270, Direction.UP),
])
def test_direction_from_angle(degrees, expected):
    assert direction_from_angle(math.radians(degrees)) is expected


def test_direction_from_vector_dead_zone():
    assert direction_from_vector(0.1, 0.1) is None
    assert direction_from_vector(0.0, -1.0) is Direction.UP
    assert direction_from_vector(0.9, 0.2) is Direction.RIGHT


def test_merge_requests_last_writer_wins():
    assert merge_requests([None, Direction.UP, None, Direction.LEFT, None]) is Direction.LEFT
    assert merge_requests([None, None]) is None
    assert merge_requests([]) is None


def test_keyboard_most_recent_key_wins():
    kb = KeyboardInput()
    kb.handle_event(key(pygame.KEYDOWN, pygame.K_LEFT))
    kb.handle_event(key(pygame.KEYDOWN, pygame.K_w))
    assert kb.requested() is Direction.UP
    kb.handle_event(key(pygame.KEYUP, pygame.K_w))
    assert kb.requested() is Direction.LEFT
    kb.handle_event(key(pygame.KEYUP, pygame.K_LEFT))
    assert kb.requested() is None


def test_keyboard_ignores_other_keys():
    kb = KeyboardInput()
    kb.handle_event(key(pygame.KEYDOWN, pygame.K_SPACE))
    assert kb.requested() is None


def test_keyboard_clear():
    kb = KeyboardInput()
    kb.handle_event(key(pygame.KEYDOWN, pygame.K_DOWN))
    kb.clear()
    assert kb.requested() is None


def test_arrow_pad():
    pad = ArrowPad()
    assert pad.requested() is None
    pad.press(Direction.UP)
    pad.press(Direction.RIGHT)
    assert pad.requested() is Direction.RIGHT
    pad.release(Direction.RIGHT)
    assert pad.requested() is Direction.UP
    pad.release(Direction.UP)
    assert pad.requested() is None


def test_arrow_pad_layout_sits_in_bottom_right_corner():
    pad = ArrowPad(size=150, button=40, margin=20)
    pad.layout(400, 440)
    assert pad.rects[Direction.UP].center == (305, 290)
    assert pad.rects[Direction.DOWN].center == (305, 400)
    assert pad.rects[Direction.LEFT].center == (250, 345)
    assert pad.rects[Direction.RIGHT].center == (360, 345)
    assert pad.button_at(305, 345) is None
    assert pad.button_at(10, 10) is None


def test_arrow_pad_pointers():
    pad = ArrowPad(size=150, button=40, margin=20)
    pad.layout(400, 440)
    assert not pad.touch_down(0, 10, 10)
    assert pad.touch_down(0, 360, 345)
    assert pad.touch_down(MOUSE_POINTER, 362, 350)
    assert pad.requested() is Direction.RIGHT
    # Still held by the mouse
    assert pad.touch_up(0)
    assert pad.pressed[Direction.RIGHT]
    assert pad.touch_up(MOUSE_POINTER)
    assert pad.requested() is None
    assert not pad.touch_up(MOUSE_POINTER)


def test_touch_stick_drag():
    stick = TouchStick(radius=50)
    assert stick.requested() is None
    assert stick.begin(3, 100, 100)
    assert not stick.begin(4, 200, 200)
    assert stick.requested() is None

    stick.move(3, 110, 100)
    assert stick.requested() is None
    stick.move(3, 100, 40)
    assert stick.requested() is Direction.UP
    assert stick.offset == pytest.approx((0, -50))
    # Other fingers do not steer it
    assert not stick.move(4, 0, 100)
    assert stick.requested() is Direction.UP

    assert not stick.end(4)
    assert stick.end(3)
    assert not stick.active
    assert stick.requested() is None


class FakeStick:
    def __init__(self, x, y, axes=2):
        self.axes = [x, y][:axes]

    def get_numaxes(self):
        return len(self.axes)

    def get_axis(self, i):
        return self.axes[i]


def test_stick_input():
    assert StickInput(FakeStick(-0.8, 0.1)).requested() is Direction.LEFT
    assert StickInput(FakeStick(0.0, 0.0)).requested() is None
    assert StickInput(FakeStick(1.0, 0.0, axes=1)).requested() is None
