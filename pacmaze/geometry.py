"""Vectors, directions and tile-centre math shared by the maze and the actors."""

from __future__ import annotations
import math
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


@dataclass
class Vec2:
    x: float
    y: float

    def __add__(self, o): return Vec2(self.x + o.x, self.y + o.y)
    def __sub__(self, o): return Vec2(self.x - o.x, self.y - o.y)
    def __mul__(self, k): return Vec2(self.x * k, self.y * k)
    def __eq__(self, o): return abs(self.x - o.x) < 0.001 and abs(self.y - o.y) < 0.001

    def dist(self, o) -> float:
        return math.hypot(self.x - o.x, self.y - o.y)

    def dist_sq(self, o) -> float:
        dx = self.x - o.x
        dy = self.y - o.y
        return dx * dx + dy * dy

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def copy(self):
        return Vec2(self.x, self.y)

    def __repr__(self):
        return f"({self.x:.2f}, {self.y:.2f})"


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UNSET = (0, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def vector(self) -> Vec2:
        return Vec2(self.dx, self.dy)

    @property
    def is_horizontal(self) -> bool:
        return self.dx != 0

    @property
    def is_vertical(self) -> bool:
        return self.dy != 0

    @property
    def opposite(self) -> "Direction":
        return REVERSE[self]


REVERSE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UNSET: Direction.UNSET,
}

# Fixed enumeration order; earlier entries win distance ties
DECISION_ORDER = (Direction.RIGHT, Direction.LEFT, Direction.DOWN, Direction.UP)


def tile_of(x: float, y: float, tile_size: float) -> Tuple[int, int]:
    return int(math.floor(x / tile_size)), int(math.floor(y / tile_size))


def tile_center(tx: int, ty: int, tile_size: float) -> Vec2:
    return Vec2(tx * tile_size + tile_size / 2, ty * tile_size + tile_size / 2)


def near_center(pos: Vec2, tile_size: float, threshold: float) -> bool:
    """True when ``pos`` is within ``threshold`` tiles of its tile's centre on both axes."""
    center = tile_center(*tile_of(pos.x, pos.y, tile_size), tile_size)
    limit = tile_size * threshold
    return abs(pos.x - center.x) < limit and abs(pos.y - center.y) < limit
