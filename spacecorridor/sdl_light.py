"""Helpers over pygame for the window, images, pixels and text."""

from __future__ import annotations

import pygame

from .utilities import concat_paths

TEXT_COLOR = (230, 212, 175, 255)


class ResourceLoadError(Exception):
    """Raised when an image, font or sound cannot be loaded."""


def _full_path(exe_dir, path):
    return concat_paths(exe_dir, path) if exe_dir is not None else path


def init_display(width, height):
    """Open a resizable window of the given size and return its surface."""
    pygame.display.init()
    pygame.font.init()
    return pygame.display.set_mode((width, height), pygame.RESIZABLE)


def load_image(exe_dir, path):
    """Load an image as a 32-bit surface with per-pixel alpha."""
    full_path = _full_path(exe_dir, path)
    try:
        image = pygame.image.load(full_path)
    except (pygame.error, OSError) as exc:
        raise ResourceLoadError(f"cannot load image {full_path}: {exc}") from exc
    data = pygame.image.tobytes(image, "RGBA")
    return pygame.image.frombytes(data, image.get_size(), "RGBA")


def try_load_image(exe_dir, path):
    """Load an image, or return None if it cannot be loaded."""
    try:
        return load_image(exe_dir, path)
    except ResourceLoadError:
        return None


def get_pixel_rgba32(surface, x, y):
    """Return the pixel at (x, y) packed as 0xRRGGBBAA."""
    if surface.get_bitsize() != 32:
        raise ValueError(f"surface must be 32 bits per pixel, not {surface.get_bitsize()}")
    width, height = surface.get_size()
    if not (0 <= x < width and 0 <= y < height):
        raise IndexError(f"pixel ({x}, {y}) outside a {width}x{height} surface")
    color = surface.get_at((x, y))
    return (color.r << 24) | (color.g << 16) | (color.b << 8) | color.a


def load_font(exe_dir, path, font_size):
    """Load a TrueType font at the given point size."""
    if not pygame.font.get_init():
        pygame.font.init()
    full_path = _full_path(exe_dir, path)
    try:
        return pygame.font.Font(full_path, font_size)
    except (pygame.error, OSError) as exc:
        raise ResourceLoadError(f"cannot load font {full_path}: {exc}") from exc


def draw_text(screen, x, y, center, font, text):
    """Draw text at (x, y), centred or from the top-left; return its rect."""
    rendered = font.render(text, True, TEXT_COLOR)
    rect = rendered.get_rect()
    position = (round(x), round(y))
    if center:
        rect.center = position
    else:
        rect.topleft = position
    screen.blit(rendered, rect)
    return rect