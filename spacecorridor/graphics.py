"""Drawing the world onto the screen."""

from __future__ import annotations

import math

import pygame

from .constants import (
    BACKGROUND_SPEED,
    FLAME_SCALE,
    FONT_SIZE,
    MAX_FPS,
    MAX_SCREEN_RATIO,
    MAX_USUAL_SPEED,
)
from .game import GameState, Rect
from .sdl_light import draw_text
from .utilities import clamp, positive_fmod

CLEAR_COLOR = (0, 0, 0)


def camera_scale(screen_w, screen_h, world):
    """Number of screen pixels per world unit."""
    return min(screen_w, screen_h * MAX_SCREEN_RATIO) / world.level_width


def camera_transform(screen_w, screen_h, world, rect):
    """Map a world rect to a screen rect, both given by centre and size."""
    scale = camera_scale(screen_w, screen_h, world)
    return Rect(
        rect.x * scale + screen_w / 2,
        (rect.y + world.camera_offset) * scale + screen_h / 2,
        rect.w * scale,
        rect.h * scale,
    )


def background_tile_offsets(screen_w, screen_h, scale, image_w, image_h, scroll_offset):
    """Top edges of the background copies that cover the screen vertically."""
    rect_height = screen_w * image_h / image_w
    if rect_height <= 0:
        return []
    initial_y = scroll_offset * scale + screen_h / 2 - rect_height / 2
    start_y = positive_fmod(initial_y, rect_height) - rect_height
    # The cap keeps a degenerate image from producing an endless number of tiles.
    count = int(min(math.ceil(screen_h / rect_height) + 2, screen_h * 2))
    return [start_y + rect_height * i for i in range(count)]


def _flame_intensity(world):
    return clamp(-world.spaceship_speed_y / MAX_USUAL_SPEED, 0.0, 1.0)


def flame_rect(world, flame_w, flame_h):
    """World rect of the engine flame, sized by the ship's forward speed."""
    ship = world.spaceship_rect
    width = ship.w * FLAME_SCALE * _flame_intensity(world)
    height = width * flame_h / flame_w
    return Rect(ship.x, ship.y + ship.h / 2 + height / 2, width, height)


def _with_alpha(texture, alpha):
    alpha = int(clamp(alpha, 0, 255))
    if alpha >= 255:
        return texture
    faded = texture.copy()
    faded.set_alpha(alpha)
    return faded


def draw_texture(screen, texture, rect):
    """Draw a texture stretched over a screen rect given by its centre.

    Returns the pixel rect drawn, or None when the rect is too small to show.
    """
    width = round(rect.w)
    height = round(rect.h)
    if width <= 0 or height <= 0:
        return None
    scaled = pygame.transform.smoothscale(texture, (width, height))
    target = pygame.Rect(round(rect.x - rect.w / 2), round(rect.y - rect.h / 2), width, height)
    screen.blit(scaled, target)
    return target


def draw_background(screen, world, texture, scroll_offset):
    """Tile a texture down the screen, shifted by scroll_offset world units."""
    screen_w, screen_h = screen.get_size()
    image_w, image_h = texture.get_size()
    if image_w <= 0 or image_h <= 0:
        return
    scale = camera_scale(screen_w, screen_h, world)
    rect_height = screen_w * image_h / image_w
    tile_height = math.ceil(rect_height)
    if screen_w <= 0 or tile_height <= 0:
        return
    tile = pygame.transform.smoothscale(texture, (screen_w, tile_height))
    for top in background_tile_offsets(screen_w, screen_h, scale, image_w, image_h, scroll_offset):
        screen.blit(tile, (0, math.floor(top)))


def _draw_playing(screen, resources, world, font):
    screen_w, screen_h = screen.get_size()
    draw_background(screen, world, resources.background, world.camera_offset * BACKGROUND_SPEED)

    opacity = 0.5 if world.invincible else 1.0
    draw_texture(
        screen,
        _with_alpha(resources.spaceship, opacity * 255),
        camera_transform(screen_w, screen_h, world, world.spaceship_rect),
    )

    flame_w, flame_h = resources.flame.get_size()
    draw_texture(
        screen,
        _with_alpha(resources.flame, _flame_intensity(world) * opacity * 255),
        camera_transform(screen_w, screen_h, world, flame_rect(world, flame_w, flame_h)),
    )

    draw_texture(
        screen,
        resources.finish_line,
        camera_transform(screen_w, screen_h, world, world.finish_line_rect),
    )
    for meteorite in world.meteorite_rects:
        draw_texture(screen, resources.meteorite, camera_transform(screen_w, screen_h, world, meteorite))

    draw_text(screen, 10, 10, False, font, f"Time: {world.playing_time / 1000.0:.2f} s")


def draw_graphics(exe_dir, screen, resources, world):
    """Redraw the whole screen for the current state of the world."""
    screen.fill(CLEAR_COLOR)
    screen_w, screen_h = screen.get_size()
    font = resources.refresh_font(exe_dir, screen_w * FONT_SIZE)
    state = world.game_state

    if state is GameState.SPLASH_SCREEN:
        draw_background(screen, world, resources.splash_screen, 0.0)
    elif state is GameState.LEVEL_COMPLETE_SCREEN:
        draw_background(screen, world, resources.background, 0.0)
        draw_text(screen, screen_w / 2, screen_h / 2, True, font, f"Level {world.current_level + 1} complete!")
    elif state is GameState.END_SCREEN:
        draw_background(screen, world, resources.background, 0.0)
        message = "You won!" if world.has_won else "You lost!"
        draw_text(screen, screen_w / 2, screen_h / 2, True, font, message)
    elif state is GameState.PLAYING:
        _draw_playing(screen, resources, world, font)

    if screen is pygame.display.get_surface():
        pygame.display.flip()


def frame_delay(last_frame_time, now):
    """Milliseconds to wait so that frames come no faster than MAX_FPS."""
    next_frame_time = last_frame_time + 1000 // MAX_FPS
    return max(0, next_frame_time - now)


def wait_for_next_frame(world):
    """Sleep until the next frame is due; return the milliseconds waited."""
    delay = frame_delay(world.last_frame_time, pygame.time.get_ticks())
    if delay > 0:
        pygame.time.delay(delay)
    return delay