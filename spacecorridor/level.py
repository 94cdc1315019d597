"""Building levels from their map images."""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field

from .constants import METEORITE_SIZE
from .game import Rect, format_rect
from .sdl_light import get_pixel_rgba32, load_image, try_load_image

logger = logging.getLogger(__name__)

_METEORITE_MASK = 0xFFFFFF


@dataclass
class Level:
    """Size, finish line and meteorites of one level."""

    width: float
    height: float
    finish_line: Rect
    meteorites: list = field(default_factory=list)


def level_path(index):
    """Path of a level's map image, relative to the game directory."""
    return f"resources/level_{index}.png"


def count_levels(exe_dir):
    """Count the level images present, numbered from 0 without gaps."""
    for index in itertools.count():
        if try_load_image(exe_dir, level_path(index)) is None:
            return index


def build_level(level_surface, finish_line_surface):
    """Turn a level map into a Level: each white pixel is a meteorite."""
    width, height = level_surface.get_size()
    finish_w, finish_h = finish_line_surface.get_size()
    finish_line = Rect(0.0, -METEORITE_SIZE * height, float(width), width * finish_h / finish_w)
    logger.debug(format_rect("finish line", finish_line))

    meteorites = [
        Rect(x - width / 2 + 0.5, -float(height - y - 1), METEORITE_SIZE, METEORITE_SIZE)
        for x in range(width)
        for y in range(height)
        if get_pixel_rgba32(level_surface, x, y) & _METEORITE_MASK == _METEORITE_MASK
    ]
    for meteorite in meteorites:
        logger.debug(format_rect("meteorite", meteorite))

    return Level(float(width), float(height), finish_line, meteorites)


def load_level(exe_dir, index, finish_line_surface):
    """Load and build the level with the given index."""
    return build_level(load_image(exe_dir, level_path(index)), finish_line_surface)