"""
PACMAZE CONFIGURATION
=====================
Tunable values for the simulation, the renderer and the app shell.

Speeds and hitboxes are expressed as fractions of one tile so that the
simulation stays consistent when the window (and with it the tile size)
is resized.
"""

# ---------------------------------------------------------------------------
# TIMING
# ---------------------------------------------------------------------------

FPS = 60
TIMESTEP = 1.0 / FPS
MAX_FRAME_TIME = 0.25
MAX_STEPS_PER_FRAME = 8

# ---------------------------------------------------------------------------
# GEOMETRY
# ---------------------------------------------------------------------------

TILE_SIZE = 20
HUD_HEIGHT = 40

# Collision box half-width and inward buffer (fractions of tile size)
HITBOX_RATIO = 0.4
COLLISION_BUFFER = 0.05

# Direction changes only happen this close to a tile centre
CENTER_THRESHOLD = 0.2

# Player / ghost overlap distance (fraction of tile size)
CATCH_DISTANCE = 0.625

# ---------------------------------------------------------------------------
# MAZE LAYOUT (20x20)
# '#' wall  '.' dot  'o' power pellet  ' ' empty path  '-' ghost-only path
# ---------------------------------------------------------------------------

MAZE_LAYOUT = [
    "####################",
    "#........##........#",
    "#.##.###.##.###.##.#",
    "#o##.###.##.###.##o#",
    "#..................#",
    "#.##.#.######.#.##.#",
    "#....#...##...#....#",
    "####.###.##.###.####",
    "####.#........#.####",
    "       #----#       ",
    "#.##.#........#.##.#",
    "#..#.###.##.###.#..#",
    "##.#.....##.....#.##",
    "#....###....###....#",
    "#.##.....##.....##.#",
    "#....###.##.###....#",
    "#o##.#........#.##o#",
    "#.##.#.######.#.##.#",
    "#..................#",
    "####################",
]

TUNNEL_ROW = 9

# Ghosts may walk through the house walls on this row / column span
HOUSE_ROW = 9
HOUSE_SPAN = (7, 12)
HOUSE_CENTER = (9, 9)

PLAYER_START = (1, 1)

# ---------------------------------------------------------------------------
# SPEEDS (tiles per tick)
# ---------------------------------------------------------------------------

PLAYER_SPEED = 0.15
GHOST_SPEED = 0.1
FRIGHTENED_SPEED_FACTOR = 0.5

# Touch sessions slow the player down a quarter
TOUCH_SPEED_FACTOR = 0.75

# ---------------------------------------------------------------------------
# TOUCH CONTROLS (pixels)
# ---------------------------------------------------------------------------

# On-screen arrow pad, anchored to the bottom-right corner
PAD_SIZE = 150
PAD_BUTTON = 40
PAD_MARGIN = 20

# Floating stick: drag distance that counts as full deflection
TOUCH_STICK_RADIUS = 50

# ---------------------------------------------------------------------------
# GHOST TIMING (seconds)
# ---------------------------------------------------------------------------

# (scatter, chase) pairs; a chase of None lasts for the rest of the round
MODE_WAVES = [(7.0, 20.0), (7.0, 20.0), (5.0, 20.0), (5.0, None)]

FRIGHTENED_DURATION = 7.0
RESPAWN_TIMEOUT = 3.0

# Personality name -> (exit delay, house slot tile, scatter corner tile)
GHOST_TABLE = {
    "AGGRESSIVE": (0.0, (8, 9), (19, 0)),
    "AMBUSH": (1.5, (9, 9), (0, 0)),
    "UNPREDICTABLE": (3.0, (10, 9), (19, 19)),
    "DEFENSIVE": (4.5, (11, 9), (0, 19)),
}

AMBUSH_LOOKAHEAD = 4
DEFENSIVE_RADIUS = 8

# ---------------------------------------------------------------------------
# SCORING / LIVES
# ---------------------------------------------------------------------------

DOT_POINTS = 10
PELLET_POINTS = 100
GHOST_POINTS = 200

START_LIVES = 3
INVULNERABLE_TIME = 2.0

# ---------------------------------------------------------------------------
# COLORS
# ---------------------------------------------------------------------------

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
WALL_BLUE = (0, 0, 255)
HOUSE_PINK = (255, 184, 222)
DOT_COLOR = (255, 255, 255)
YELLOW = (255, 255, 0)
RED = (255, 0, 0)
PINK = (255, 184, 222)
CYAN = (0, 255, 222)
ORANGE = (255, 184, 71)
FRIGHTENED_BLUE = (33, 33, 255)
GREY = (150, 150, 150)

GHOST_COLORS = {
    "AGGRESSIVE": RED,
    "AMBUSH": PINK,
    "UNPREDICTABLE": CYAN,
    "DEFENSIVE": ORANGE,
}
