"""
Round controller: owns the clock, the maze and every actor, runs the
per-tick update order and turns overlaps into scoring events.

Tick order is fixed: player moves, the tile under the player is consumed,
ghosts move, then player/ghost overlaps are resolved.
"""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Sequence

from pacmaze import config
from pacmaze.geometry import Direction
from pacmaze.ghost import LEADER, Ghost, GhostMode, Personality
from pacmaze.maze import Maze
from pacmaze.player import Player

log = logging.getLogger(__name__)


class EventKind(Enum):
    DOT_EATEN = auto()
    PELLET_EATEN = auto()
    GHOST_EATEN = auto()
    PLAYER_CAUGHT = auto()
    GAME_OVER = auto()
    ROUND_WON = auto()


@dataclass(frozen=True)
class RoundEvent:
    kind: EventKind
    points: int = 0
    personality: Optional[Personality] = None


@dataclass
class GameState:
    game_clock: float = 0.0
    score: int = 0
    lives: int = config.START_LIVES
    won: bool = False
    game_over: bool = False

    @property
    def running(self) -> bool:
        return not (self.won or self.game_over)


class RoundController:
    def __init__(self, layout: Sequence[str] = config.MAZE_LAYOUT,
                 tile_size: float = config.TILE_SIZE,
                 lives: int = config.START_LIVES,
                 rng: Optional[random.Random] = None):
        self.layout = list(layout)
        self.tile_size = tile_size
        self.start_lives = lives
        self.rng = rng or random.Random()
        self.developer_mode = False
        self.touch_mode = False
        self.reset()

    def reset(self):
        """Rebuild maze, actors and state from scratch; pending deadlines go with them."""
        self.maze = Maze(self.layout, self.tile_size)
        self.player = Player(self.maze, base_speed=self.player_speed)
        self.ghosts = [Ghost(p, self.maze, rng=self.rng) for p in Personality]
        self.state = GameState(lives=self.start_lives)

    # --- Queries ---

    @property
    def leader(self) -> Optional[Ghost]:
        for ghost in self.ghosts:
            if ghost.personality is LEADER:
                return ghost
        return None

    @property
    def player_speed(self) -> float:
        if self.touch_mode:
            return config.PLAYER_SPEED * config.TOUCH_SPEED_FACTOR
        return config.PLAYER_SPEED

    @property
    def frightened_active(self) -> bool:
        return any(g.is_frightened for g in self.ghosts)

    @property
    def remaining_dot_count(self) -> int:
        return self.maze.remaining_dot_count()

    # --- Simulation ---

    def tick(self, requested: Optional[Direction] = None) -> List[RoundEvent]:
        """Advance the round by one fixed step."""
        if not self.state.running:
            return []

        events: List[RoundEvent] = []
        self.state.game_clock += config.TIMESTEP
        clock = self.state.game_clock

        self.player.request(requested)
        self.player.update(self.maze)
        self._collect(events)

        leader = self.leader
        for ghost in self.ghosts:
            ghost.update(self.maze, self.player, clock,
                         None if ghost is leader else leader)

        if self.state.running:
            self._resolve_contacts(events)

        return events

    def _collect(self, events: List[RoundEvent]):
        tx, ty = self.player.tile(self.maze)
        item = self.maze.consume_if_collectible(tx, ty)
        if not item.points:
            return

        self.state.score += item.points
        if item.triggers_frightened:
            events.append(RoundEvent(EventKind.PELLET_EATEN, item.points))
            for ghost in self.ghosts:
                ghost.frighten()
        else:
            events.append(RoundEvent(EventKind.DOT_EATEN, item.points))

        if not self.state.won and self.maze.remaining_dot_count() == 0:
            self.state.won = True
            events.append(RoundEvent(EventKind.ROUND_WON))
            log.info("All dots collected, final score %d", self.state.score)

    def _resolve_contacts(self, events: List[RoundEvent]):
        reach = config.CATCH_DISTANCE * self.maze.tile_size
        clock = self.state.game_clock

        for ghost in self.ghosts:
            if ghost.mode in (GhostMode.IN_HOUSE, GhostMode.EATEN):
                continue
            if self.maze.contact_distance(self.player.pos, ghost.pos) >= reach:
                continue

            if ghost.is_frightened:
                ghost.mark_eaten()
                self.state.score += config.GHOST_POINTS
                events.append(RoundEvent(EventKind.GHOST_EATEN, config.GHOST_POINTS,
                                         ghost.personality))
                log.info("%s eaten", ghost.personality.name)
            elif not (self.developer_mode or self.player.is_invulnerable(clock)):
                self._lose_life(events, ghost)
                return

    def _lose_life(self, events: List[RoundEvent], ghost: Ghost):
        self.state.lives -= 1
        events.append(RoundEvent(EventKind.PLAYER_CAUGHT, personality=ghost.personality))
        log.info("Caught by %s, lives remaining: %d", ghost.personality.name, self.state.lives)

        if self.state.lives <= 0:
            self.state.game_over = True
            self.player.alive = False
            events.append(RoundEvent(EventKind.GAME_OVER))
            log.info("Game over, final score %d", self.state.score)
            return

        # New life: actors home, clock restarts so the house releases again
        self.state.game_clock = 0.0
        self.player.reset(self.maze, invulnerable_until=config.INVULNERABLE_TIME)
        for g in self.ghosts:
            g.reset(self.maze)

    # --- Shell helpers ---

    def resize(self, tile_size: float):
        """Switch to a new tile size, keeping every actor at the same spot in the grid."""
        if tile_size <= 0:
            raise ValueError(f"tile size must be positive, got {tile_size}")
        ratio = tile_size / self.maze.tile_size
        self.tile_size = tile_size
        self.maze.tile_size = tile_size
        self.player.rescale(ratio)
        for ghost in self.ghosts:
            ghost.rescale(ratio)

    def collect_all_dots(self) -> List[RoundEvent]:
        """Developer shortcut that clears the board and wins the round."""
        if not self.state.running:
            return []
        cleared = self.maze.clear_dots()
        self.state.score += cleared * config.DOT_POINTS
        self.state.won = True
        log.info("Collected %d dots via developer shortcut", cleared)
        return [RoundEvent(EventKind.ROUND_WON)]

    def set_touch_mode(self, enabled: bool):
        """Touch play runs the player slower; survives ``reset``."""
        self.touch_mode = enabled
        self.player.base_speed = self.player_speed
        log.info("Touch mode: %s", "ON" if enabled else "OFF")

    def respawn_eaten(self):
        for ghost in self.ghosts:
            if ghost.is_eaten:
                ghost.respawn(self.maze)
