import random

import pytest

from pacmaze.maze import Maze
from pacmaze.player import Player
from pacmaze.round import RoundController


# Three-tile corridor with no tunnel and no house
CORRIDOR = [
    "#####",
    "#   #",
    "#####",
]

BOX = [
    "###",
    "# #",
    "###",
]


@pytest.fixture
def maze():
    return Maze()


@pytest.fixture
def player(maze):
    return Player(maze)


@pytest.fixture
def corridor():
    return Maze(CORRIDOR, tunnel_row=None, house_row=None)


@pytest.fixture
def box():
    return Maze(BOX, tunnel_row=None, house_row=None)


@pytest.fixture
def controller():
    return RoundController(rng=random.Random(1))
