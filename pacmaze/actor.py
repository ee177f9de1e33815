from __future__ import annotations
from typing import Tuple

from pacmaze import config
from pacmaze.geometry import Direction, Vec2, near_center
from pacmaze.maze import Maze


class Actor:
    """Something that moves through the maze one axis at a time."""

    is_ghost = False

    def __init__(self, start_tile: Tuple[int, int], base_speed: float):
        self.start_tile = start_tile
        self.base_speed = base_speed
        self.pos = Vec2(0.0, 0.0)
        self.direction = Direction.UNSET

    def tile(self, maze: Maze) -> Tuple[int, int]:
        return maze.tile_of(self.pos.x, self.pos.y)

    def tile_center(self, maze: Maze) -> Vec2:
        return maze.tile_center(*self.tile(maze))

    def at_tile_center(self, maze: Maze, tolerance: float = config.CENTER_THRESHOLD) -> bool:
        return near_center(self.pos, maze.tile_size, tolerance)

    def snap_to_center(self, maze: Maze):
        self.pos = self.tile_center(maze)

    def speed(self, maze: Maze) -> float:
        return self.base_speed * maze.tile_size

    def can_enter(self, maze: Maze, direction: Direction) -> bool:
        """Is the tile one step away in ``direction`` free for this actor?"""
        if direction is Direction.UNSET:
            return False
        nx, ny = maze.neighbor(*self.tile(maze), direction)
        center = maze.tile_center(nx, ny)
        return not maze.collides(center.x, center.y, for_ghost=self.is_ghost)

    def step(self, maze: Maze) -> bool:
        """Advance along the current direction, pinning the cross axis to the tile centre.

        The move is dropped when it would run into a wall. Returns whether the
        actor moved.
        """
        if self.direction is Direction.UNSET:
            return False

        center = self.tile_center(maze)
        speed = self.speed(maze)
        if self.direction.is_horizontal:
            nxt = Vec2(self.pos.x + self.direction.dx * speed, center.y)
        else:
            nxt = Vec2(center.x, self.pos.y + self.direction.dy * speed)

        moved = not maze.collides(nxt.x, nxt.y, for_ghost=self.is_ghost)
        if moved:
            self.pos = nxt
        self.pos = maze.wrap_tunnel(self.pos, self.direction)
        return moved

    def rescale(self, ratio: float):
        self.pos = self.pos * ratio
