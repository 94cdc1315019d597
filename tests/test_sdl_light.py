import os
import shutil

import pygame
import pytest

from spacecorridor.sdl_light import (
    ResourceLoadError,
    draw_text,
    get_pixel_rgba32,
    init_display,
    load_font,
    load_image,
    try_load_image,
)


def _default_font_file():
    return os.path.join(os.path.dirname(pygame.__file__), pygame.font.get_default_font())


@pytest.fixture
def rgba_png(tmp_path):
    surface = pygame.Surface((3, 2), pygame.SRCALPHA, 32)
    surface.fill((0, 0, 0, 0))
    surface.set_at((0, 0), (255, 255, 255, 255))
    surface.set_at((2, 1), (10, 20, 30, 128))
    pygame.image.save(surface, str(tmp_path / "sprite.png"))
    return tmp_path


def test_init_display_opens_window_of_requested_size(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    screen = init_display(320, 200)
    try:
        assert screen.get_size() == (320, 200)
    finally:
        pygame.display.quit()


def test_load_image_keeps_size_and_pixels(rgba_png):
    image = load_image(str(rgba_png), "sprite.png")
    assert image.get_size() == (3, 2)
    assert image.get_bitsize() == 32
    assert tuple(image.get_at((0, 0))) == (255, 255, 255, 255)
    assert tuple(image.get_at((2, 1))) == (10, 20, 30, 128)


def test_load_image_without_exe_dir_uses_path(rgba_png):
    image = load_image(None, str(rgba_png / "sprite.png"))
    assert image.get_size() == (3, 2)


def test_load_image_opaque_source_gets_full_alpha(tmp_path):
    surface = pygame.Surface((2, 2))
    surface.fill((40, 50, 60))
    pygame.image.save(surface, str(tmp_path / "opaque.png"))
    image = load_image(str(tmp_path), "opaque.png")
    assert tuple(image.get_at((1, 1))) == (40, 50, 60, 255)


def test_load_image_missing_raises(tmp_path):
    with pytest.raises(ResourceLoadError):
        load_image(str(tmp_path), "missing.png")


def test_try_load_image_missing_returns_none(tmp_path):
    assert try_load_image(str(tmp_path), "missing.png") is None


def test_try_load_image_present_returns_surface(rgba_png):
    image = try_load_image(str(rgba_png), "sprite.png")
    assert image.get_size() == (3, 2)


def test_get_pixel_packs_channels_red_first():
    surface = pygame.Surface((2, 2), pygame.SRCALPHA, 32)
    surface.fill((0, 0, 0, 0))
    surface.set_at((1, 0), (1, 2, 3, 4))
    assert get_pixel_rgba32(surface, 1, 0) == 0x01020304
    assert get_pixel_rgba32(surface, 0, 1) == 0


def test_get_pixel_white_opaque_is_all_ones(rgba_png):
    image = load_image(str(rgba_png), "sprite.png")
    assert get_pixel_rgba32(image, 0, 0) == 0xFFFFFFFF


@pytest.mark.parametrize("x, y", [(2, 0), (0, 2), (-1, 0), (0, -1)])
def test_get_pixel_out_of_bounds_raises(x, y):
    surface = pygame.Surface((2, 2), pygame.SRCALPHA, 32)
    with pytest.raises(IndexError):
        get_pixel_rgba32(surface, x, y)


def test_get_pixel_rejects_non_32_bit_surface():
    surface = pygame.Surface((2, 2), 0, 8)
    with pytest.raises(ValueError):
        get_pixel_rgba32(surface, 0, 0)


def test_load_font_from_directory(tmp_path):
    shutil.copy(_default_font_file(), tmp_path / "font.ttf")
    font = load_font(str(tmp_path), "font.ttf", 20)
    width, height = font.size("Time")
    assert width > 0 and height > 0


def test_load_font_missing_raises(tmp_path):
    with pytest.raises(ResourceLoadError):
        load_font(str(tmp_path), "missing.ttf", 20)


def test_draw_text_centered_positions_rect():
    pygame.font.init()
    font = pygame.font.Font(None, 24)
    screen = pygame.Surface((200, 100))
    screen.fill((0, 0, 0))
    rect = draw_text(screen, 100, 50, True, font, "You won!")
    assert abs(rect.centerx - 100) <= 1
    assert abs(rect.centery - 50) <= 1
    drawn = [
        screen.get_at((px, py))
        for px in range(rect.left, rect.right)
        for py in range(rect.top, rect.bottom)
    ]
    assert any(tuple(color)[:3] != (0, 0, 0) for color in drawn)


def test_draw_text_top_left_positions_rect():
    pygame.font.init()
    font = pygame.font.Font(None, 24)
    screen = pygame.Surface((200, 100))
    rect = draw_text(screen, 10, 10, False, font, "Time: 0.00 s")
    assert rect.topleft == (10, 10)
    assert rect.size == font.size("Time: 0.00 s")