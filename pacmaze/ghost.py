"""
Ghost behaviour: a per-ghost state machine plus greedy target seeking.

    IN_HOUSE -> SCATTER -> CHASE <-> FRIGHTENED -> EATEN -> SCATTER

Every timed transition compares accumulated simulation time, never wall
clock time, so a round replays identically from the same inputs and seed.
"""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple

from pacmaze import config
from pacmaze.actor import Actor
from pacmaze.geometry import DECISION_ORDER, Direction, Vec2
from pacmaze.maze import Maze
from pacmaze.player import Player

log = logging.getLogger(__name__)


class GhostMode(Enum):
    IN_HOUSE = auto()
    SCATTER = auto()
    CHASE = auto()
    FRIGHTENED = auto()
    EATEN = auto()


class Personality(Enum):
    AGGRESSIVE = auto()     # chases the player directly
    AMBUSH = auto()         # aims ahead of the player
    UNPREDICTABLE = auto()  # flanks off the leader ghost
    DEFENSIVE = auto()      # backs off when close


# The ghost the UNPREDICTABLE personality flanks off
LEADER = Personality.AGGRESSIVE


@dataclass(frozen=True)
class Decision:
    """One direction choice made at a tile centre."""
    tile: Tuple[int, int]
    previous: Direction
    legal: Tuple[Direction, ...]
    chosen: Direction


class Ghost(Actor):
    is_ghost = True

    def __init__(self, personality: Personality, maze: Maze,
                 exit_delay: Optional[float] = None,
                 rng: Optional[random.Random] = None,
                 base_speed: float = config.GHOST_SPEED):
        delay, slot, corner = config.GHOST_TABLE[personality.name]
        super().__init__(slot, base_speed)
        self.personality = personality
        self.exit_delay = delay if exit_delay is None else exit_delay
        self.scatter_tile = corner
        self.house_center_tile = config.HOUSE_CENTER
        self.rng = rng or random.Random()
        self.reset(maze)

    def reset(self, maze: Maze):
        """Back into the house with every timer cleared."""
        self.pos = maze.tile_center(*self.start_tile)
        self.direction = Direction.UP
        self.mode = GhostMode.IN_HOUSE
        self.previous_mode = GhostMode.SCATTER
        self.has_exited = False
        self.mode_elapsed = 0.0
        self.wave = 0
        self.frightened_elapsed = 0.0
        self.eaten_elapsed = 0.0
        self.target: Optional[Vec2] = None
        self.last_decision: Optional[Decision] = None
        self.stalled = False
        self._decision_tile: Optional[Tuple[int, int]] = None
        self._last_clock = 0.0

    # --- External events ---

    def frighten(self) -> bool:
        """Power pellet eaten. Returns whether this ghost turned (or stays) frightened."""
        if self.mode is GhostMode.FRIGHTENED:
            self.frightened_elapsed = 0.0
            return True
        if self.mode not in (GhostMode.SCATTER, GhostMode.CHASE):
            return False
        self.previous_mode = self.mode
        self.mode = GhostMode.FRIGHTENED
        self.frightened_elapsed = 0.0
        log.debug("%s frightened", self.personality.name)
        return True

    def mark_eaten(self):
        self.mode = GhostMode.EATEN
        self.frightened_elapsed = 0.0
        self.eaten_elapsed = 0.0
        self._decision_tile = None

    @property
    def is_frightened(self) -> bool:
        return self.mode is GhostMode.FRIGHTENED

    @property
    def is_eaten(self) -> bool:
        return self.mode is GhostMode.EATEN

    @property
    def respawn_progress(self) -> float:
        if self.mode is not GhostMode.EATEN:
            return 0.0
        return min(1.0, self.eaten_elapsed / config.RESPAWN_TIMEOUT)

    def speed(self, maze: Maze) -> float:
        speed = super().speed(maze)
        if self.mode is GhostMode.FRIGHTENED:
            speed *= config.FRIGHTENED_SPEED_FACTOR
        return speed

    def scatter_target(self, maze: Maze) -> Vec2:
        return maze.tile_center(*self.scatter_tile)

    def house_center(self, maze: Maze) -> Vec2:
        return maze.tile_center(*self.house_center_tile)

    # --- Per-tick update ---

    def update(self, maze: Maze, player: Player, clock: float,
               leader: Optional["Ghost"] = None):
        dt = max(0.0, clock - self._last_clock)
        self._last_clock = clock
        self.stalled = False

        if self.mode is GhostMode.IN_HOUSE:
            if clock <= self.exit_delay:
                self.pos = maze.tile_center(*self.start_tile)
                return
            self.has_exited = True
            self._enter(GhostMode.SCATTER)
            log.debug("%s leaves the house at %.2fs", self.personality.name, clock)

        if self.mode is GhostMode.EATEN:
            self._return_home(maze, dt)
            return

        self._advance_timers(dt)
        self.target = self.compute_target(maze, player, leader)

        tile = self.tile(maze)
        if tile != self._decision_tile and self.at_tile_center(maze):
            self.snap_to_center(maze)
            self._decision_tile = tile
            if not self._decide(maze):
                self.stalled = True
                self._decision_tile = None
                return

        if not self.step(maze):
            # Blocked; retry the decision next tick
            self._decision_tile = None

    def _enter(self, mode: GhostMode):
        self.mode = mode
        self.mode_elapsed = 0.0

    def _advance_timers(self, dt: float):
        if self.mode is GhostMode.FRIGHTENED:
            self.frightened_elapsed += dt
            if self.frightened_elapsed >= config.FRIGHTENED_DURATION:
                self.mode = self.previous_mode
                self.frightened_elapsed = 0.0
                log.debug("%s no longer frightened", self.personality.name)
            return

        self.mode_elapsed += dt
        scatter, chase = config.MODE_WAVES[min(self.wave, len(config.MODE_WAVES) - 1)]
        if self.mode is GhostMode.SCATTER and self.mode_elapsed >= scatter:
            self._enter(GhostMode.CHASE)
        elif self.mode is GhostMode.CHASE and chase is not None and self.mode_elapsed >= chase:
            self.wave += 1
            self._enter(GhostMode.SCATTER)

    def _return_home(self, maze: Maze, dt: float):
        """Eyes head straight for the house, one axis at a time, ignoring walls."""
        self.eaten_elapsed += dt
        home = self.house_center(maze)
        speed = super().speed(maze)

        if abs(home.x - self.pos.x) > 1e-9:
            delta = max(-speed, min(speed, home.x - self.pos.x))
            self.pos = Vec2(self.pos.x + delta, self.pos.y)
            self.direction = Direction.RIGHT if delta > 0 else Direction.LEFT
        elif abs(home.y - self.pos.y) > 1e-9:
            delta = max(-speed, min(speed, home.y - self.pos.y))
            self.pos = Vec2(self.pos.x, self.pos.y + delta)
            self.direction = Direction.DOWN if delta > 0 else Direction.UP

        if self.pos == home or self.eaten_elapsed >= config.RESPAWN_TIMEOUT:
            self.respawn(maze)

    def respawn(self, maze: Maze):
        self.pos = self.house_center(maze)
        self.eaten_elapsed = 0.0
        self.frightened_elapsed = 0.0
        self._decision_tile = None
        self._enter(GhostMode.SCATTER)
        log.debug("%s respawned", self.personality.name)

    # --- Targeting ---

    def compute_target(self, maze: Maze, player: Player,
                       leader: Optional["Ghost"] = None) -> Vec2:
        ts = maze.tile_size

        if self.mode is GhostMode.SCATTER:
            return self.scatter_target(maze)

        if self.mode is GhostMode.FRIGHTENED:
            # Mirror the player through the ghost: a point straight away from it
            away = self.pos + (self.pos - player.pos)
            if away == player.pos:
                return self._checked(self.scatter_target(maze), maze)
            return self._checked(away, maze)

        player_tile = player.tile_center(maze)

        if self.personality is Personality.AGGRESSIVE:
            return self._checked(player.pos.copy(), maze)

        if self.personality is Personality.AMBUSH:
            ahead = player.direction.vector * (config.AMBUSH_LOOKAHEAD * ts)
            return self._checked(player_tile + ahead, maze)

        if self.personality is Personality.UNPREDICTABLE:
            if leader is None:
                return self.scatter_target(maze)
            # Leader -> player vector, doubled from the leader
            leader_tile = leader.tile_center(maze)
            return self._checked(player_tile + (player_tile - leader_tile), maze)

        if self.pos.dist(player.pos) > config.DEFENSIVE_RADIUS * ts:
            return self._checked(player.pos.copy(), maze)
        return self.scatter_target(maze)

    def _checked(self, target: Vec2, maze: Maze) -> Vec2:
        if target.is_finite():
            return target
        if __debug__:
            raise ValueError(f"{self.personality.name} computed a non-finite target {target}")
        return self.scatter_target(maze)

    # --- Pathing ---

    def legal_directions(self, maze: Maze) -> Tuple[Direction, ...]:
        return tuple(d for d in DECISION_ORDER if self.can_enter(maze, d))

    def _decide(self, maze: Maze) -> bool:
        legal = self.legal_directions(maze)
        reverse = self.direction.opposite
        options = [d for d in legal if d is not reverse] or list(legal)
        if not options:
            return False

        if self.mode is GhostMode.FRIGHTENED:
            chosen = self.rng.choice(options)
        else:
            tx, ty = self.tile(maze)
            chosen = options[0]
            best = float("inf")
            for d in options:
                dist = maze.tile_center(*maze.neighbor(tx, ty, d)).dist(self.target)
                if dist < best:
                    best = dist
                    chosen = d

        self.last_decision = Decision(self.tile(maze), self.direction, legal, chosen)
        self.direction = chosen
        return True
