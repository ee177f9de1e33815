"""
Input sources. Each one boils its device state down to a single requested
direction (or ``None``) per frame; ``merge_requests`` picks between them.
"""

from __future__ import annotations
import math
from typing import Dict, Iterable, List, Optional, Tuple

import pygame

from pacmaze import config
from pacmaze.geometry import Direction

DIR_KEYS = {
    pygame.K_a: Direction.LEFT, pygame.K_LEFT: Direction.LEFT,
    pygame.K_d: Direction.RIGHT, pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_w: Direction.UP, pygame.K_UP: Direction.UP,
    pygame.K_s: Direction.DOWN, pygame.K_DOWN: Direction.DOWN,
}

STICK_DEAD_ZONE = 0.35

# Pointer id used for the mouse alongside touch finger ids
MOUSE_POINTER = -1


def direction_from_angle(angle: float) -> Direction:
    """Bucket a stick angle (radians, screen coordinates, y down) into an axis direction."""
    deg = math.degrees(math.atan2(math.sin(angle), math.cos(angle)))
    if -45 <= deg < 45:
        return Direction.RIGHT
    if 45 <= deg < 135:
        return Direction.DOWN
    if deg >= 135 or deg < -135:
        return Direction.LEFT
    return Direction.UP


def direction_from_vector(dx: float, dy: float,
                          dead_zone: float = STICK_DEAD_ZONE) -> Optional[Direction]:
    if math.hypot(dx, dy) < dead_zone:
        return None
    return direction_from_angle(math.atan2(dy, dx))


def merge_requests(requests: Iterable[Optional[Direction]]) -> Optional[Direction]:
    """Last writer wins: the final non-empty request in source order."""
    chosen = None
    for request in requests:
        if request is not None:
            chosen = request
    return chosen


class KeyboardInput:
    """Tracks held keys; the most recently pressed direction key wins."""

    def __init__(self, keymap: Optional[Dict[int, Direction]] = None):
        self.keymap = dict(DIR_KEYS if keymap is None else keymap)
        self.held: List[Direction] = []

    def handle_event(self, event):
        if event.type == pygame.KEYDOWN and event.key in self.keymap:
            d = self.keymap[event.key]
            if d in self.held:
                self.held.remove(d)
            self.held.append(d)
        elif event.type == pygame.KEYUP and event.key in self.keymap:
            d = self.keymap[event.key]
            if d in self.held:
                self.held.remove(d)

    def requested(self) -> Optional[Direction]:
        return self.held[-1] if self.held else None

    def clear(self):
        self.held.clear()


class ArrowPad:
    """On-screen arrow buttons: a pressed/released state map per direction.

    ``layout`` places the four buttons in a plus shape in the bottom-right
    corner of the window; ``touch_down`` / ``touch_up`` map pointers (finger
    ids, or ``MOUSE_POINTER``) onto button presses.
    """

    def __init__(self, size: int = config.PAD_SIZE, button: int = config.PAD_BUTTON,
                 margin: int = config.PAD_MARGIN):
        self.size = size
        self.button = button
        self.margin = margin
        self.pressed: Dict[Direction, bool] = {
            Direction.UP: False, Direction.DOWN: False,
            Direction.LEFT: False, Direction.RIGHT: False,
        }
        self.rects: Dict[Direction, pygame.Rect] = {}
        self.pointers: Dict[int, Direction] = {}
        self._last: Optional[Direction] = None

    def layout(self, width: int, height: int):
        left = width - self.margin - self.size
        top = height - self.margin - self.size
        cx = left + self.size // 2
        cy = top + self.size // 2
        b = self.button
        self.rects = {
            Direction.UP: pygame.Rect(cx - b // 2, top, b, b),
            Direction.DOWN: pygame.Rect(cx - b // 2, top + self.size - b, b, b),
            Direction.LEFT: pygame.Rect(left, cy - b // 2, b, b),
            Direction.RIGHT: pygame.Rect(left + self.size - b, cy - b // 2, b, b),
        }

    def button_at(self, x: float, y: float) -> Optional[Direction]:
        for direction, rect in self.rects.items():
            if rect.collidepoint(int(x), int(y)):
                return direction
        return None

    def touch_down(self, pointer: int, x: float, y: float) -> bool:
        """Press whatever button is under the pointer. Returns whether one was hit."""
        direction = self.button_at(x, y)
        if direction is None:
            return False
        self.pointers[pointer] = direction
        self.press(direction)
        return True

    def touch_up(self, pointer: int) -> bool:
        direction = self.pointers.pop(pointer, None)
        if direction is None:
            return False
        if direction not in self.pointers.values():
            self.release(direction)
        return True

    def press(self, direction: Direction):
        self.pressed[direction] = True
        self._last = direction

    def release(self, direction: Direction):
        self.pressed[direction] = False
        if self._last is direction:
            self._last = next((d for d, down in self.pressed.items() if down), None)

    def requested(self) -> Optional[Direction]:
        return self._last


class TouchStick:
    """Floating virtual joystick: anchored where the finger lands, steered by dragging."""

    def __init__(self, radius: float = config.TOUCH_STICK_RADIUS,
                 dead_zone: float = STICK_DEAD_ZONE):
        self.radius = radius
        self.dead_zone = dead_zone
        self.pointer: Optional[int] = None
        self.origin: Optional[Tuple[float, float]] = None
        self.offset = (0.0, 0.0)

    @property
    def active(self) -> bool:
        return self.pointer is not None

    def begin(self, pointer: int, x: float, y: float) -> bool:
        if self.active:
            return False
        self.pointer = pointer
        self.origin = (x, y)
        self.offset = (0.0, 0.0)
        return True

    def move(self, pointer: int, x: float, y: float) -> bool:
        if pointer != self.pointer:
            return False
        dx, dy = x - self.origin[0], y - self.origin[1]
        dist = math.hypot(dx, dy)
        if dist > self.radius:
            dx, dy = dx / dist * self.radius, dy / dist * self.radius
        self.offset = (dx, dy)
        return True

    def end(self, pointer: int) -> bool:
        if pointer != self.pointer:
            return False
        self.pointer = None
        self.origin = None
        self.offset = (0.0, 0.0)
        return True

    def requested(self) -> Optional[Direction]:
        if not self.active:
            return None
        dx, dy = self.offset
        return direction_from_vector(dx / self.radius, dy / self.radius, self.dead_zone)


class StickInput:
    """Analog stick (gamepad or touch joystick) read through pygame's joystick API."""

    def __init__(self, joystick, dead_zone: float = STICK_DEAD_ZONE):
        self.joystick = joystick
        self.dead_zone = dead_zone

    def requested(self) -> Optional[Direction]:
        if self.joystick.get_numaxes() < 2:
            return None
        return direction_from_vector(self.joystick.get_axis(0), self.joystick.get_axis(1),
                                     self.dead_zone)
