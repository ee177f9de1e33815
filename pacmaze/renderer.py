"""pygame drawing. Reads controller state, never writes it."""

from __future__ import annotations
import math
from typing import Optional

import pygame

from pacmaze import config
from pacmaze.controls import ArrowPad, TouchStick
from pacmaze.geometry import Direction
from pacmaze.ghost import Ghost, GhostMode
from pacmaze.maze import Tile
from pacmaze.round import RoundController

DIR_ANGLES = {
    Direction.RIGHT: 0, Direction.UP: 90, Direction.LEFT: 180,
    Direction.DOWN: 270, Direction.UNSET: 0,
}


class Renderer:
    def __init__(self, screen: pygame.Surface, font: Optional[pygame.font.Font] = None,
                 big_font: Optional[pygame.font.Font] = None):
        self.screen = screen
        self.font = font
        self.big_font = big_font
        self.offset_y = config.HUD_HEIGHT
        self.debug = False
        self.frame = 0

    def draw(self, game: RoundController):
        self.frame += 1
        self.screen.fill(config.BLACK)
        self.draw_maze(game)
        for ghost in game.ghosts:
            self.draw_ghost(ghost, game.maze.tile_size)
        self.draw_player(game)
        if self.debug:
            self.draw_targets(game)
        self.draw_hud(game)

    def _to_screen(self, x: float, y: float):
        return int(x), int(y + self.offset_y)

    def draw_maze(self, game: RoundController):
        maze = game.maze
        s = maze.tile_size
        for ty, row in enumerate(maze.grid):
            for tx, tile in enumerate(row):
                x, y = self._to_screen(tx * s, ty * s)
                if tile is Tile.WALL:
                    pygame.draw.rect(self.screen, config.WALL_BLUE, (x, y, math.ceil(s), math.ceil(s)))
                elif tile is Tile.GHOST_ONLY_PATH:
                    # House floor: thin door line across the middle
                    pygame.draw.rect(self.screen, config.HOUSE_PINK,
                                     (x, y + int(s // 2) - 1, math.ceil(s), 2))
                elif tile is Tile.DOT:
                    pygame.draw.circle(self.screen, config.DOT_COLOR,
                                       (x + int(s // 2), y + int(s // 2)), max(1, int(s * 0.1)))
                elif tile is Tile.POWER_PELLET and (self.frame // 10) % 2 == 0:
                    pygame.draw.circle(self.screen, config.DOT_COLOR,
                                       (x + int(s // 2), y + int(s // 2)), max(2, int(s * 0.3)))

    def draw_player(self, game: RoundController):
        player = game.player
        x, y = self._to_screen(player.pos.x, player.pos.y)
        r = max(2, int(game.maze.tile_size * 0.4))
        pygame.draw.circle(self.screen, config.YELLOW, (x, y), r)

        # Mouth wedge
        if player.direction is not Direction.UNSET and (self.frame // 6) % 2 == 0:
            base = DIR_ANGLES[player.direction]
            pts = [(x, y)]
            for a in (base + 35, base - 35):
                rad = math.radians(a)
                pts.append((x + math.cos(rad) * (r + 2), y - math.sin(rad) * (r + 2)))
            pygame.draw.polygon(self.screen, config.BLACK, pts)

    def draw_ghost(self, ghost: Ghost, tile_size: float):
        x, y = self._to_screen(ghost.pos.x, ghost.pos.y)
        r = max(2, int(tile_size * 0.4))

        if ghost.mode is GhostMode.EATEN:
            self._draw_eyes(ghost, x, y, r)
            return
        if ghost.mode is GhostMode.FRIGHTENED:
            remaining = config.FRIGHTENED_DURATION - ghost.frightened_elapsed
            flash = remaining < 2.0 and (self.frame // 8) % 2
            color = config.WHITE if flash else config.FRIGHTENED_BLUE
        else:
            color = config.GHOST_COLORS[ghost.personality.name]

        # Dome + skirt
        pygame.draw.circle(self.screen, color, (x, y), r)
        pygame.draw.rect(self.screen, color, (x - r, y, r * 2, r))
        feet = []
        for i in range(5):
            feet.append((x - r + i * (r * 2) // 4, y + r - (0 if i % 2 else 3)))
        feet += [(x + r, y), (x - r, y)]
        pygame.draw.polygon(self.screen, color, feet)

        self._draw_eyes(ghost, x, y, r)

    def _draw_eyes(self, ghost: Ghost, x: int, y: int, r: int):
        eye_r = max(1, r // 3)
        off_x = r // 2
        look_x, look_y = ghost.direction.dx * 2, ghost.direction.dy * 2
        for ex in (x - off_x, x + off_x):
            pygame.draw.circle(self.screen, config.WHITE, (ex, y - 3), eye_r)
            pygame.draw.circle(self.screen, config.WALL_BLUE, (ex + look_x, y - 3 + look_y),
                               max(1, eye_r // 2))

    def draw_targets(self, game: RoundController):
        """Debug overlay: a line from each ghost to the point it is steering for."""
        for ghost in game.ghosts:
            if ghost.target is None or ghost.mode in (GhostMode.IN_HOUSE, GhostMode.EATEN):
                continue
            color = config.GHOST_COLORS[ghost.personality.name]
            start = self._to_screen(ghost.pos.x, ghost.pos.y)
            end = self._to_screen(ghost.target.x, ghost.target.y)
            pygame.draw.line(self.screen, color, start, end, 2)
            pygame.draw.circle(self.screen, color, end, 4)

    def draw_arrow_pad(self, pad: ArrowPad):
        """Touch buttons; a held button is filled, the rest outlined."""
        for direction, rect in pad.rects.items():
            held = pad.pressed[direction]
            pygame.draw.rect(self.screen, config.WHITE if held else config.GREY, rect, 0 if held else 2)
            cx, cy = rect.center
            tip = rect.width // 3
            dx, dy = direction.dx, direction.dy
            # Arrowhead pointing along the button's direction
            pts = [
                (cx + dx * tip, cy + dy * tip),
                (cx - dx * tip // 2 - dy * tip, cy - dy * tip // 2 - dx * tip),
                (cx - dx * tip // 2 + dy * tip, cy - dy * tip // 2 + dx * tip),
            ]
            pygame.draw.polygon(self.screen, config.BLACK if held else config.WHITE, pts)

    def draw_touch_stick(self, stick: TouchStick):
        if not stick.active:
            return
        ox, oy = int(stick.origin[0]), int(stick.origin[1])
        pygame.draw.circle(self.screen, config.GREY, (ox, oy), int(stick.radius), 2)
        knob = (ox + int(stick.offset[0]), oy + int(stick.offset[1]))
        pygame.draw.circle(self.screen, config.WHITE, knob, max(4, int(stick.radius // 2)))

    def draw_hud(self, game: RoundController):
        s = game.maze.tile_size
        for i in range(max(0, game.state.lives)):
            pygame.draw.circle(self.screen, config.YELLOW,
                               (int(s) + i * int(s * 1.5), config.HUD_HEIGHT // 2), max(2, int(s * 0.4)))
        if self.font is None:
            return
        score = self.font.render(f"SCORE: {game.state.score}", True, config.WHITE)
        self.screen.blit(score, (self.screen.get_width() - score.get_width() - 10, 10))
        if game.developer_mode:
            dev = self.font.render("DEV", True, config.GREY)
            self.screen.blit(dev, (self.screen.get_width() // 2 - dev.get_width() // 2, 10))

    def draw_text_centered(self, text: str, y: int, color=config.WHITE, big: bool = False):
        font = self.big_font if big else self.font
        if font is None:
            return
        surf = font.render(text, True, color)
        rect = surf.get_rect(center=(self.screen.get_width() // 2, y))
        self.screen.blit(surf, rect)
