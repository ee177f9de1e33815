from __future__ import annotations
import logging
from typing import Optional, Tuple

from pacmaze import config
from pacmaze.actor import Actor
from pacmaze.geometry import Direction
from pacmaze.maze import Maze

log = logging.getLogger(__name__)


class Player(Actor):
    def __init__(self, maze: Maze, start_tile: Tuple[int, int] = config.PLAYER_START,
                 base_speed: float = config.PLAYER_SPEED):
        super().__init__(start_tile, base_speed)
        self.next_direction = Direction.UNSET
        self.alive = True
        self.invulnerable_until = 0.0
        self.reset(maze)

    def reset(self, maze: Maze, invulnerable_until: float = 0.0):
        self.pos = maze.tile_center(*self.start_tile)
        self.direction = Direction.UNSET
        self.next_direction = Direction.UNSET
        self.alive = True
        self.invulnerable_until = invulnerable_until

    def request(self, direction: Optional[Direction]):
        """Queue a direction change; ``None`` keeps whatever was asked for last."""
        if direction is not None and direction is not Direction.UNSET:
            self.next_direction = direction

    def is_invulnerable(self, clock: float) -> bool:
        return clock < self.invulnerable_until

    def update(self, maze: Maze):
        # Turns are only taken close to a tile centre
        if (self.next_direction is not Direction.UNSET
                and self.next_direction is not self.direction
                and self.at_tile_center(maze)
                and self.can_enter(maze, self.next_direction)):
            self.direction = self.next_direction

        self.step(maze)
