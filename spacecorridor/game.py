"""Game state, spaceship physics and collision detection."""

from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass, field, replace

import pygame

from .constants import (
    CAMERA_APPROACH_RATE,
    CRUISING_SPEED,
    DRAG_COEFFICIENT,
    INITIAL_CAMERA_OFFSET,
    MOVING_SPEED,
    SCREEN_DURATION_MS,
    SPACESHIP_SIZE,
)
from .resources import play_sound, stop_sound
from .utilities import clamp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its centre and its size."""

    x: float
    y: float
    w: float
    h: float

    @property
    def left(self):
        return self.x - self.w / 2

    @property
    def right(self):
        return self.x + self.w / 2

    @property
    def top(self):
        return self.y - self.h / 2

    @property
    def bottom(self):
        return self.y + self.h / 2


class GameState(enum.Enum):
    """Phases the game goes through."""

    STARTED = enum.auto()
    SPLASH_SCREEN = enum.auto()
    PLAYING = enum.auto()
    LEVEL_COMPLETE_SCREEN = enum.auto()
    END_SCREEN = enum.auto()
    QUIT = enum.auto()


@dataclass(frozen=True)
class Controls:
    """Directions the player is currently steering in."""

    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False


@dataclass
class World:
    """Everything that changes while the game runs."""

    level_count: int = 0
    game_state: GameState = GameState.STARTED
    last_frame_time: int = 0
    time_since_last_frame: int = 0
    screen_time: int = 0
    splash_screen_sound_channel: object = None
    playing_time: int = 0
    current_level: int = 0
    level_width: float = 1.0
    level_height: float = 1.0
    camera_offset: float = INITIAL_CAMERA_OFFSET
    spaceship_speed_x: float = 0.0
    spaceship_speed_y: float = 0.0
    spaceship_rect: Rect = field(default_factory=lambda: Rect(0.0, 0.0, SPACESHIP_SIZE, SPACESHIP_SIZE))
    finish_line_rect: Rect = field(default_factory=lambda: Rect(0.0, 0.0, 0.0, 0.0))
    meteorite_rects: list = field(default_factory=list)
    invincible: bool = False
    has_won: bool = False


def format_rect(name, rect):
    """Describe a rect as WxH+X+Y."""
    return f'Rect "{name}" : {rect.w:g}x{rect.h:g}{rect.x:+g}{rect.y:+g}'


def rects_collide(rect_1, rect_2):
    """Tell whether two rects overlap; touching edges count as overlap."""
    return (
        max(rect_1.left, rect_2.left) <= min(rect_1.right, rect_2.right)
        and max(rect_1.top, rect_2.top) <= min(rect_1.bottom, rect_2.bottom)
    )


def _round_half_away(value):
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _alpha_channel(surface):
    return pygame.image.tobytes(surface, "RGBA")[3::4]


def _projects_onto(src_surface, src_rect, dst_surface, dst_rect):
    """Map each pixel of src into dst and look for a combined alpha above 0xFF."""
    src_w, src_h = src_surface.get_size()
    dst_w, dst_h = dst_surface.get_size()
    src_alpha = _alpha_channel(src_surface)
    dst_alpha = _alpha_channel(dst_surface)
    for sx in range(src_w):
        x = src_rect.x + src_rect.w * (sx / src_w - 0.5)
        dx = _round_half_away(((x - dst_rect.x) / dst_rect.w + 0.5) * dst_w)
        if not 0 <= dx < dst_w:
            continue
        for sy in range(src_h):
            y = src_rect.y + src_rect.h * (sy / src_h - 0.5)
            dy = _round_half_away(((y - dst_rect.y) / dst_rect.h + 0.5) * dst_h)
            if 0 <= dy < dst_h and src_alpha[sy * src_w + sx] + dst_alpha[dy * dst_w + dx] > 0xFF:
                return True
    return False


def objects_collide(surface_1, rect_1, surface_2, rect_2):
    """Pixel-accurate collision between two images placed in world rects."""
    if not rects_collide(rect_1, rect_2):
        return False
    return _projects_onto(surface_1, rect_1, surface_2, rect_2) or _projects_onto(
        surface_2, rect_2, surface_1, rect_1
    )


def controls_from_keys(pressed):
    """Build Controls from a key-state mapping such as pygame.key.get_pressed()."""
    return Controls(
        left=bool(pressed[pygame.K_LEFT] or pressed[pygame.K_a] or pressed[pygame.K_q]),
        right=bool(pressed[pygame.K_RIGHT] or pressed[pygame.K_d]),
        up=bool(pressed[pygame.K_UP] or pressed[pygame.K_w] or pressed[pygame.K_z]),
        down=bool(pressed[pygame.K_DOWN] or pressed[pygame.K_s]),
    )


def handle_event(game, event):
    """React to a single pygame event."""
    if event.type == pygame.QUIT:
        game.quit()
    elif event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            game.quit()
        elif event.key == pygame.K_i:
            game.toggle_invincible()
        elif event.key == pygame.K_SPACE:
            game.skip_splash_screen()


class Game:
    """Drives the world through its states, one frame at a time."""

    def __init__(self, exe_dir, resources, level_count, level_loader):
        self.exe_dir = exe_dir
        self.resources = resources
        self.level_loader = level_loader
        self.world = World(level_count=level_count)

    def update(self, elapsed_ms, controls=None):
        """Advance the game by elapsed_ms milliseconds and return the new state."""
        world = self.world
        world.time_since_last_frame = elapsed_ms
        world.last_frame_time += elapsed_ms
        state = world.game_state

        if state is GameState.STARTED:
            self._to_splash_screen()
        elif state is GameState.SPLASH_SCREEN:
            if self._screen_elapsed(elapsed_ms):
                self._to_playing()
        elif state is GameState.PLAYING:
            self._update_playing(elapsed_ms, controls or Controls())
        elif state is GameState.LEVEL_COMPLETE_SCREEN:
            if self._screen_elapsed(elapsed_ms):
                world.current_level += 1
                self._to_playing()
        elif state is GameState.END_SCREEN:
            if self._screen_elapsed(elapsed_ms):
                self.quit()
        return world.game_state

    def toggle_invincible(self):
        """Switch invincibility on or off while playing."""
        if self.world.game_state is GameState.PLAYING:
            self.world.invincible = not self.world.invincible

    def skip_splash_screen(self):
        """Start playing at once if the splash screen is showing."""
        if self.world.game_state is GameState.SPLASH_SCREEN:
            self._to_playing()

    def quit(self):
        """Ask the game to stop."""
        self.world.game_state = GameState.QUIT

    def _screen_elapsed(self, elapsed_ms):
        self.world.screen_time += elapsed_ms
        return self.world.screen_time >= SCREEN_DURATION_MS

    def _to_splash_screen(self):
        world = self.world
        world.game_state = GameState.SPLASH_SCREEN
        world.screen_time = 0
        world.level_width = 1.0
        world.level_height = 1.0
        world.splash_screen_sound_channel = play_sound(self.resources.splash_screen_sound)

    def _to_playing(self):
        world = self.world
        world.game_state = GameState.PLAYING
        world.camera_offset = INITIAL_CAMERA_OFFSET
        world.has_won = False
        world.invincible = False
        world.spaceship_rect = Rect(0.0, 0.0, SPACESHIP_SIZE, SPACESHIP_SIZE)
        logger.debug(format_rect("spaceship", world.spaceship_rect))
        world.spaceship_speed_x = 0.0
        world.spaceship_speed_y = 0.0

        level = self.level_loader(self.exe_dir, world.current_level, self.resources.finish_line)
        world.level_width = level.width
        world.level_height = level.height
        world.finish_line_rect = level.finish_line
        world.meteorite_rects = list(level.meteorites)

        stop_sound(world.splash_screen_sound_channel)

    def _to_level_complete_screen(self):
        world = self.world
        world.game_state = GameState.LEVEL_COMPLETE_SCREEN
        world.screen_time = 0
        world.meteorite_rects = []
        print(f"Level {world.current_level + 1} complete!")

    def _to_end_screen(self, won):
        world = self.world
        world.game_state = GameState.END_SCREEN
        world.screen_time = 0
        world.has_won = won
        world.meteorite_rects = []
        if won:
            print(f"You finished in {world.playing_time / 1000.0:.2f} s!")
            play_sound(self.resources.win_sound)
        else:
            print("You lost!")
            play_sound(self.resources.loss_sound)

    def _update_playing(self, dt, controls):
        world = self.world
        world.playing_time += dt

        accel_x = 0.0
        accel_y = -CRUISING_SPEED
        if controls.left:
            accel_x -= MOVING_SPEED
        if controls.right:
            accel_x += MOVING_SPEED
        if controls.up:
            accel_y -= MOVING_SPEED
        if controls.down:
            accel_y += MOVING_SPEED
        accel_x -= world.spaceship_speed_x * DRAG_COEFFICIENT
        accel_y -= world.spaceship_speed_y * DRAG_COEFFICIENT

        world.spaceship_speed_x += accel_x * dt
        world.spaceship_speed_y += accel_y * dt

        ship = world.spaceship_rect
        half_room = world.level_width / 2 - ship.w / 2
        x = clamp(ship.x + world.spaceship_speed_x * dt, -half_room, half_room)
        y = ship.y + world.spaceship_speed_y * dt
        ship = world.spaceship_rect = replace(ship, x=x, y=y)

        target = -ship.y + INITIAL_CAMERA_OFFSET
        world.camera_offset += (target - world.camera_offset) * (
            1.0 - math.exp(-CAMERA_APPROACH_RATE * dt)
        )

        resources = self.resources
        if objects_collide(resources.spaceship, ship, resources.finish_line, world.finish_line_rect):
            if world.current_level == world.level_count - 1:
                self._to_end_screen(won=True)
            else:
                self._to_level_complete_screen()
            return

        if not world.invincible and any(
            objects_collide(resources.spaceship, ship, resources.meteorite, meteorite)
            for meteorite in world.meteorite_rects
        ):
            self._to_end_screen(won=False)