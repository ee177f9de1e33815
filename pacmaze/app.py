"""
PACMAZE
=======
pygame shell: window, scenes, input and the fixed-timestep main loop.

Controls: WASD / arrow keys / gamepad stick to move, SPACE to start,
P to pause, ESC for the menu. F1 collects every dot, TAB toggles the target
overlay, R (with the overlay on) respawns eaten ghosts, V toggles developer
invulnerability.

Touch: the on-screen arrow pad (bottom right), or drag anywhere else for a
floating stick. The first finger on the screen switches to touch mode, which
shows the pad and slows the player down; ``--touch`` starts in it, and then
the mouse drives the pad and stick too.
"""

from __future__ import annotations
import logging
import random
import time
from enum import Enum, auto
from typing import List, Optional

import pygame

from pacmaze import config
from pacmaze.clock import FixedTimestep
from pacmaze.controls import (MOUSE_POINTER, ArrowPad, KeyboardInput, StickInput, TouchStick,
                              merge_requests)
from pacmaze.renderer import Renderer
from pacmaze.round import EventKind, RoundController

log = logging.getLogger(__name__)


class Scene(Enum):
    MENU = auto()
    READY = auto()
    PLAYING = auto()
    PAUSED = auto()
    GAMEOVER = auto()
    WON = auto()


READY_TIME = 2.0


class App:
    def __init__(self, tile_size: int = config.TILE_SIZE, lives: int = config.START_LIVES,
                 seed: Optional[int] = None, touch: bool = False):
        pygame.init()
        self.game = RoundController(tile_size=tile_size, lives=lives, rng=random.Random(seed))
        self.screen = pygame.display.set_mode(self._window_size(tile_size), pygame.RESIZABLE)
        pygame.display.set_caption("PACMAZE")
        self.clock = pygame.time.Clock()

        self.font = pygame.font.SysFont("monospace", 18, bold=True)
        self.big_font = pygame.font.SysFont("monospace", 36, bold=True)
        self.renderer = Renderer(self.screen, self.font, self.big_font)

        self.keyboard = KeyboardInput()
        self.arrows = ArrowPad()
        self.arrows.layout(*self.screen.get_size())
        self.touch_stick = TouchStick()
        self.sticks: List[StickInput] = []
        self._init_joysticks()
        if touch:
            self.game.set_touch_mode(True)

        self.stepper = FixedTimestep()
        self.scene = Scene.MENU
        self.scene_timer = 0.0
        self.running = True

    def _window_size(self, tile_size: float):
        return (int(len(config.MAZE_LAYOUT[0]) * tile_size),
                int(len(config.MAZE_LAYOUT) * tile_size) + config.HUD_HEIGHT)

    def _init_joysticks(self):
        try:
            pygame.joystick.init()
            for i in range(pygame.joystick.get_count()):
                stick = pygame.joystick.Joystick(i)
                stick.init()
                self.sticks.append(StickInput(stick))
        except pygame.error as e:
            log.warning("Joystick init failed: %s", e)
            self.sticks = []

    @property
    def touch_mode(self) -> bool:
        return self.game.touch_mode

    def requested_direction(self):
        sources = [s.requested() for s in self.sticks]
        sources += [self.touch_stick.requested(), self.arrows.requested(),
                    self.keyboard.requested()]
        return merge_requests(sources)

    # --- Events ---

    def on_resize(self, width: int, height: int):
        maze = self.game.maze
        tile = min(width / maze.cols, (height - config.HUD_HEIGHT) / maze.rows)
        tile = max(4, int(tile))
        self.game.resize(tile)
        self.screen = pygame.display.set_mode(self._window_size(tile), pygame.RESIZABLE)
        self.renderer.screen = self.screen
        self.arrows.layout(*self.screen.get_size())
        log.debug("Resized to tile size %d", tile)

    def handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                self.running = False
            elif e.type == pygame.VIDEORESIZE:
                self.on_resize(e.w, e.h)
            elif e.type in (pygame.KEYDOWN, pygame.KEYUP):
                self.keyboard.handle_event(e)
                if e.type == pygame.KEYDOWN:
                    self.on_key(e.key, e.mod)
            elif e.type in (pygame.FINGERDOWN, pygame.FINGERMOTION, pygame.FINGERUP):
                self.on_finger(e)
            elif e.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEMOTION, pygame.MOUSEBUTTONUP):
                # SDL mirrors touches as mouse events; those are already handled as fingers
                if self.touch_mode and not getattr(e, "touch", False):
                    self.on_mouse(e)

    def on_finger(self, e):
        if not self.touch_mode:
            self.game.set_touch_mode(True)
        # Finger coordinates are normalised to the window
        w, h = self.screen.get_size()
        self.on_pointer(e.type, e.finger_id, e.x * w, e.y * h)

    def on_mouse(self, e):
        if e.type == pygame.MOUSEBUTTONDOWN:
            if e.button != 1:
                return
            kind = pygame.FINGERDOWN
        elif e.type == pygame.MOUSEBUTTONUP:
            if e.button != 1:
                return
            kind = pygame.FINGERUP
        else:
            kind = pygame.FINGERMOTION
        self.on_pointer(kind, MOUSE_POINTER, *e.pos)

    def on_pointer(self, kind: int, pointer: int, x: float, y: float):
        if kind == pygame.FINGERDOWN:
            if not self.arrows.touch_down(pointer, x, y):
                self.touch_stick.begin(pointer, x, y)
        elif kind == pygame.FINGERMOTION:
            self.touch_stick.move(pointer, x, y)
        else:
            self.arrows.touch_up(pointer)
            self.touch_stick.end(pointer)

    def on_key(self, key: int, mod: int):
        if key == pygame.K_ESCAPE:
            if self.scene is Scene.MENU:
                self.running = False
            else:
                self.scene = Scene.MENU
            return

        if self.scene in (Scene.MENU, Scene.GAMEOVER, Scene.WON):
            if key in (pygame.K_SPACE, pygame.K_RETURN):
                self.start()
            return

        if key == pygame.K_p:
            self.scene = Scene.PLAYING if self.scene is Scene.PAUSED else Scene.PAUSED
        elif key == pygame.K_F1:
            self.game.collect_all_dots()
        elif key == pygame.K_TAB:
            self.renderer.debug = not self.renderer.debug
            log.info("Debug overlay: %s", "ON" if self.renderer.debug else "OFF")
        elif key == pygame.K_r and self.renderer.debug:
            self.game.respawn_eaten()
        elif key == pygame.K_v:
            self.game.developer_mode = not self.game.developer_mode
            log.info("Developer mode: %s", "ON" if self.game.developer_mode else "OFF")

    def start(self):
        self.game.reset()
        self.keyboard.clear()
        self.stepper.reset()
        self.scene = Scene.READY
        self.scene_timer = 0.0

    # --- Scenes ---

    def draw_touch_controls(self):
        if self.touch_mode:
            self.renderer.draw_arrow_pad(self.arrows)
            self.renderer.draw_touch_stick(self.touch_stick)

    def run_menu(self):
        self.renderer.draw(self.game)
        h = self.screen.get_height()
        self.renderer.draw_text_centered("PACMAZE", h // 3, config.YELLOW, big=True)
        if int(time.time() * 2) % 2:
            self.renderer.draw_text_centered("PRESS SPACE TO START", h // 2)
        self.renderer.draw_text_centered("ARROWS / WASD TO MOVE", h // 2 + 40, config.GREY)

    def run_ready(self, frame_dt: float):
        self.scene_timer += frame_dt
        self.renderer.draw(self.game)
        self.draw_touch_controls()
        self.renderer.draw_text_centered("READY!", self.screen.get_height() // 2, config.YELLOW, big=True)
        if self.scene_timer >= READY_TIME:
            self.scene = Scene.PLAYING
            self.stepper.reset()

    def run_game(self, frame_dt: float):
        for _ in range(self.stepper.advance(frame_dt)):
            events = self.game.tick(self.requested_direction())
            kinds = {e.kind for e in events}
            if EventKind.GAME_OVER in kinds:
                self.scene = Scene.GAMEOVER
                break
            if EventKind.ROUND_WON in kinds:
                self.scene = Scene.WON
                break
        if self.game.state.won and self.scene is Scene.PLAYING:
            self.scene = Scene.WON
        self.renderer.draw(self.game)
        self.draw_touch_controls()

    def run_paused(self):
        self.renderer.draw(self.game)
        self.renderer.draw_text_centered("PAUSED", self.screen.get_height() // 2, config.WHITE, big=True)

    def run_end(self, title: str, color):
        self.renderer.draw(self.game)
        h = self.screen.get_height()
        self.renderer.draw_text_centered(title, h // 2 - 40, color, big=True)
        self.renderer.draw_text_centered(f"FINAL SCORE: {self.game.state.score}", h // 2 + 10)
        if int(time.time() * 2) % 2:
            self.renderer.draw_text_centered("PRESS SPACE", h // 2 + 60)

    def run(self):
        """Main loop"""
        while self.running:
            frame_dt = self.clock.tick(config.FPS) / 1000.0
            self.handle_events()

            if self.scene is Scene.MENU:
                self.run_menu()
            elif self.scene is Scene.READY:
                self.run_ready(frame_dt)
            elif self.scene is Scene.PLAYING:
                self.run_game(frame_dt)
            elif self.scene is Scene.PAUSED:
                self.run_paused()
            elif self.scene is Scene.GAMEOVER:
                self.run_end("GAME OVER", config.RED)
            elif self.scene is Scene.WON:
                self.run_end("YOU WIN!", config.YELLOW)

            pygame.display.flip()

        pygame.quit()
