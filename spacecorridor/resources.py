"""Loading and holding the game's images, sounds and font."""

from __future__ import annotations

import sys
from dataclasses import dataclass

import pygame

from .sdl_light import ResourceLoadError, load_font, load_image
from .utilities import concat_paths

SPLASH_SCREEN_IMAGE = "resources/splash_screen.png"
BACKGROUND_IMAGE = "resources/background.png"
SPACESHIP_IMAGE = "resources/spaceship.png"
FLAME_IMAGE = "resources/flame.png"
FINISH_LINE_IMAGE = "resources/finish_line.png"
METEORITE_IMAGE = "resources/meteorite.png"
SPLASH_SCREEN_SOUND = "resources/splash_screen.wav"
LOSS_SOUND = "resources/loss.wav"
WIN_SOUND = "resources/win.wav"
FONT_PATH = "resources/COOPBL.ttf"


def _init_mixer():
    if pygame.mixer.get_init():
        return
    try:
        pygame.mixer.init(44100, -16, 2, 2048)
    except pygame.error as exc:
        print(f"Cannot open audio: {exc}", file=sys.stderr)


def load_sound(exe_dir, path):
    """Load a sound effect."""
    full_path = concat_paths(exe_dir, path) if exe_dir is not None else path
    try:
        return pygame.mixer.Sound(full_path)
    except (pygame.error, OSError) as exc:
        raise ResourceLoadError(f"cannot load sound {full_path}: {exc}") from exc


def _load_optional_sound(exe_dir, path):
    try:
        return load_sound(exe_dir, path)
    except ResourceLoadError as exc:
        print(exc, file=sys.stderr)
        return None


def play_sound(sound):
    """Play a sound once; return the channel it plays on, or None."""
    if sound is None:
        return None
    return sound.play()


def stop_sound(channel):
    """Stop a channel returned by play_sound, if there is one."""
    if channel is not None:
        channel.stop()


@dataclass
class Resources:
    """Images, sounds and font used by the game."""

    splash_screen: pygame.Surface
    background: pygame.Surface
    spaceship: pygame.Surface
    flame: pygame.Surface
    finish_line: pygame.Surface
    meteorite: pygame.Surface
    splash_screen_sound: pygame.mixer.Sound | None = None
    loss_sound: pygame.mixer.Sound | None = None
    win_sound: pygame.mixer.Sound | None = None
    font: pygame.font.Font | None = None
    font_size: int | None = None

    @classmethod
    def load(cls, exe_dir):
        """Load every image and sound from the resources directory."""
        _init_mixer()
        return cls(
            splash_screen=load_image(exe_dir, SPLASH_SCREEN_IMAGE),
            background=load_image(exe_dir, BACKGROUND_IMAGE),
            spaceship=load_image(exe_dir, SPACESHIP_IMAGE),
            flame=load_image(exe_dir, FLAME_IMAGE),
            finish_line=load_image(exe_dir, FINISH_LINE_IMAGE),
            meteorite=load_image(exe_dir, METEORITE_IMAGE),
            splash_screen_sound=_load_optional_sound(exe_dir, SPLASH_SCREEN_SOUND),
            loss_sound=_load_optional_sound(exe_dir, LOSS_SOUND),
            win_sound=_load_optional_sound(exe_dir, WIN_SOUND),
        )

    def refresh_font(self, exe_dir, font_size):
        """Make the font available at the given size and return it."""
        size = int(font_size)
        if self.font is None or self.font_size != size:
            self.font = load_font(exe_dir, FONT_PATH, size)
            self.font_size = size
        return self.font