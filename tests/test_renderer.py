import random

import pygame
import pytest

from pacmaze import config
from pacmaze.controls import ArrowPad, TouchStick
from pacmaze.geometry import Direction
from pacmaze.ghost import GhostMode
from pacmaze.renderer import Renderer
from pacmaze.round import RoundController


@pytest.fixture
def game():
    return RoundController(rng=random.Random(2))


@pytest.fixture
def renderer(game):
    maze = game.maze
    surface = pygame.Surface((int(maze.width), int(maze.height) + config.HUD_HEIGHT), 0, 32)
    return Renderer(surface)


def pixel(renderer, x, y):
    return tuple(renderer.screen.get_at((int(x), int(y) + config.HUD_HEIGHT)))[:3]


def test_draws_walls_and_player(game, renderer):
    renderer.draw(game)
    assert pixel(renderer, 5, 5) == config.WALL_BLUE
    assert pixel(renderer, 30, 30) == config.YELLOW


def test_ghost_colors_follow_mode(game, renderer):
    ghost = game.ghosts[0]
    renderer.draw(game)
    assert pixel(renderer, ghost.pos.x, ghost.pos.y + 2) == config.RED

    ghost.mode = GhostMode.SCATTER
    ghost.frighten()
    renderer.draw(game)
    assert pixel(renderer, ghost.pos.x, ghost.pos.y + 2) == config.FRIGHTENED_BLUE


def test_eaten_ghost_draws_only_eyes(game, renderer):
    ghost = game.ghosts[0]
    ghost.pos = game.maze.tile_center(3, 9)
    ghost.mode = GhostMode.SCATTER
    ghost.mark_eaten()
    renderer.draw(game)
    assert pixel(renderer, ghost.pos.x, ghost.pos.y + 4) == config.BLACK


def test_debug_overlay_and_text_without_fonts(game, renderer):
    renderer.debug = True
    for _ in range(5):
        game.tick()
    renderer.draw(game)
    renderer.draw_text_centered("PAUSED", 100)
    assert renderer.frame == 1


def test_arrow_pad_fills_held_button(renderer):
    pad = ArrowPad()
    pad.layout(*renderer.screen.get_size())
    pad.touch_down(0, *pad.rects[Direction.UP].center)
    renderer.draw_arrow_pad(pad)

    up, down = pad.rects[Direction.UP], pad.rects[Direction.DOWN]
    assert tuple(renderer.screen.get_at((up.left + 2, up.top + 2)))[:3] == config.WHITE
    assert tuple(renderer.screen.get_at((down.left + 10, down.top)))[:3] == config.GREY
    assert tuple(renderer.screen.get_at((down.left + 2, down.top + 10)))[:3] == config.BLACK


def test_touch_stick_drawn_only_while_held(renderer):
    stick = TouchStick(radius=50)
    renderer.draw_touch_stick(stick)
    assert tuple(renderer.screen.get_at((100, 100)))[:3] == config.BLACK

    stick.begin(1, 100, 100)
    stick.move(1, 140, 100)
    renderer.draw_touch_stick(stick)
    assert tuple(renderer.screen.get_at((140, 100)))[:3] == config.WHITE
