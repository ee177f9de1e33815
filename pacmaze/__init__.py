"""Pac-Man on a tile grid: maze, player and the ghost state machine."""

from pacmaze.geometry import Direction, Vec2
from pacmaze.ghost import Ghost, GhostMode, Personality
from pacmaze.maze import Collectible, Maze, Tile
from pacmaze.player import Player
from pacmaze.round import EventKind, GameState, RoundController, RoundEvent

__version__ = "1.0.0"

__all__ = [
    "Collectible", "Direction", "EventKind", "GameState", "Ghost", "GhostMode",
    "Maze", "Personality", "Player", "RoundController", "RoundEvent", "Tile", "Vec2",
]
