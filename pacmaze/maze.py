"""
Maze grid and collision oracle.

The maze owns the tile grid. Actors keep a reference to it for collision
queries; only the round controller mutates it (through
``consume_if_collectible``) when the player steps on a dot or pellet.
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, List, Optional, Sequence, Tuple

from pacmaze import config
from pacmaze.geometry import Direction, Vec2, tile_center, tile_of

log = logging.getLogger(__name__)


class Tile(Enum):
    WALL = auto()
    DOT = auto()
    EMPTY_PATH = auto()
    GHOST_ONLY_PATH = auto()
    POWER_PELLET = auto()


LAYOUT_CHARS = {
    "#": Tile.WALL,
    ".": Tile.DOT,
    " ": Tile.EMPTY_PATH,
    "-": Tile.GHOST_ONLY_PATH,
    "o": Tile.POWER_PELLET,
}


@dataclass(frozen=True)
class Collectible:
    points: int = 0
    triggers_frightened: bool = False


NOTHING = Collectible()


class Maze:
    def __init__(self,
                 layout: Sequence[str] = config.MAZE_LAYOUT,
                 tile_size: float = config.TILE_SIZE,
                 tunnel_row: Optional[int] = config.TUNNEL_ROW,
                 house_row: Optional[int] = config.HOUSE_ROW,
                 house_span: Tuple[int, int] = config.HOUSE_SPAN):
        self.grid: List[List[Tile]] = self.parse(layout)
        self.rows = len(self.grid)
        self.cols = len(self.grid[0])
        self.tile_size = tile_size
        self.tunnel_row = tunnel_row
        self.house_row = house_row
        self.house_span = house_span

    @staticmethod
    def parse(layout: Sequence[str]) -> List[List[Tile]]:
        """Turn the text layout into rows of ``Tile`` tags."""
        if not layout:
            raise ValueError("maze layout is empty")
        width = len(layout[0])
        grid = []
        for r, row in enumerate(layout):
            if len(row) != width:
                raise ValueError(f"layout row {r} has {len(row)} columns, expected {width}")
            try:
                grid.append([LAYOUT_CHARS[ch] for ch in row])
            except KeyError as e:
                raise ValueError(f"unknown layout character {e.args[0]!r} in row {r}") from None
        return grid

    # --- Geometry ---

    @property
    def width(self) -> float:
        return self.cols * self.tile_size

    @property
    def height(self) -> float:
        return self.rows * self.tile_size

    def tile_of(self, x: float, y: float) -> Tuple[int, int]:
        return tile_of(x, y, self.tile_size)

    def tile_center(self, tx: int, ty: int) -> Vec2:
        return tile_center(tx, ty, self.tile_size)

    def neighbor(self, tx: int, ty: int, direction: Direction) -> Tuple[int, int]:
        """Adjacent tile in ``direction``, wrapping around on the tunnel row."""
        nx, ny = tx + direction.dx, ty + direction.dy
        if ny == self.tunnel_row:
            nx %= self.cols
        return nx, ny

    # --- Tile queries ---

    def in_bounds(self, tx: int, ty: int) -> bool:
        return 0 <= tx < self.cols and 0 <= ty < self.rows

    def tile(self, tx: int, ty: int) -> Optional[Tile]:
        if not self.in_bounds(tx, ty):
            return None
        return self.grid[ty][tx]

    def is_wall(self, tx: int, ty: int) -> bool:
        tile = self.tile(tx, ty)
        return tile is None or tile is Tile.WALL

    def in_house_span(self, tx: int, ty: int) -> bool:
        lo, hi = self.house_span
        return ty == self.house_row and lo <= tx <= hi

    def passable(self, tx: int, ty: int, for_ghost: bool = False) -> bool:
        tile = self.tile(tx, ty)
        if tile is None:
            return False
        if tile is Tile.WALL:
            return for_ghost and self.in_house_span(tx, ty)
        if tile is Tile.GHOST_ONLY_PATH:
            return for_ghost
        return True

    def collides(self, x: float, y: float, half_width: Optional[float] = None,
                 for_ghost: bool = False) -> bool:
        """Does a square hitbox centred on (x, y) overlap a tile the agent can't enter?"""
        if half_width is None:
            half_width = self.tile_size * config.HITBOX_RATIO
        reach = half_width - self.tile_size * config.COLLISION_BUFFER

        left = math.floor((x - reach) / self.tile_size)
        right = math.floor((x + reach) / self.tile_size)
        top = math.floor((y - reach) / self.tile_size)
        bottom = math.floor((y + reach) / self.tile_size)

        for ty in range(top, bottom + 1):
            for tx in range(left, right + 1):
                col = tx % self.cols if ty == self.tunnel_row else tx
                if not self.passable(col, ty, for_ghost):
                    return True
        return False

    def tiles_of(self, tag: Tile) -> Iterator[Tuple[int, int]]:
        for ty, row in enumerate(self.grid):
            for tx, tile in enumerate(row):
                if tile is tag:
                    yield tx, ty

    # --- Consumables ---

    def consume_if_collectible(self, tx: int, ty: int) -> Collectible:
        tile = self.tile(tx, ty)
        if tile is Tile.DOT:
            self.grid[ty][tx] = Tile.EMPTY_PATH
            return Collectible(config.DOT_POINTS)
        if tile is Tile.POWER_PELLET:
            self.grid[ty][tx] = Tile.EMPTY_PATH
            return Collectible(config.PELLET_POINTS, triggers_frightened=True)
        return NOTHING

    def remaining_dot_count(self) -> int:
        return sum(row.count(Tile.DOT) for row in self.grid)

    def clear_dots(self) -> int:
        """Developer shortcut: turn every dot into empty path, returning how many."""
        cleared = 0
        for tx, ty in list(self.tiles_of(Tile.DOT)):
            self.grid[ty][tx] = Tile.EMPTY_PATH
            cleared += 1
        log.debug("Cleared %d dots", cleared)
        return cleared

    # --- Tunnel ---

    def wrap_tunnel(self, pos: Vec2, direction: Direction) -> Vec2:
        """Teleport an agent that has run past the outermost tunnel tile centre."""
        if self.tunnel_row is None:
            return pos
        _, ty = self.tile_of(pos.x, pos.y)
        if ty != self.tunnel_row:
            return pos

        half = self.tile_size / 2
        shift = (self.cols - 1) * self.tile_size
        if direction is Direction.LEFT and pos.x < half:
            log.debug("Tunnel warp left -> right at %s", pos)
            return Vec2(pos.x + shift, pos.y)
        if direction is Direction.RIGHT and pos.x > self.width - half:
            log.debug("Tunnel warp right -> left at %s", pos)
            return Vec2(pos.x - shift, pos.y)
        return pos

    def contact_distance(self, a: Vec2, b: Vec2) -> float:
        """Distance between two agents, measured across the tunnel seam when both are in it.

        ``wrap_tunnel`` treats x and x + (cols - 1) * tile_size as one spot, so two
        agents on either side of the seam can be touching while far apart on screen.
        """
        dist = a.dist(b)
        if self.tunnel_row is None:
            return dist
        if self.tile_of(a.x, a.y)[1] != self.tunnel_row or self.tile_of(b.x, b.y)[1] != self.tunnel_row:
            return dist
        shift = (self.cols - 1) * self.tile_size
        return min(dist, a.dist(Vec2(b.x + shift, b.y)), a.dist(Vec2(b.x - shift, b.y)))
