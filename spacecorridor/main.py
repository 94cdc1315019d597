"""Entry point: open the window and run the game loop."""

from __future__ import annotations

import os
import sys

import pygame

from .constants import INITIAL_SCREEN_HEIGHT, INITIAL_SCREEN_WIDTH
from .game import Game, GameState, controls_from_keys, handle_event
from .graphics import draw_graphics, wait_for_next_frame
from .level import count_levels, load_level
from .resources import Resources
from .sdl_light import ResourceLoadError, init_display

WINDOW_TITLE = "Spacecorridor"


def resolve_exe_dir(argv):
    """Directory holding the program, from which resources are found."""
    if not argv:
        raise ValueError("program path required")
    return os.path.dirname(argv[0]) or "."


def run(exe_dir):
    """Run the game until the player quits; return the exit status."""
    try:
        init_display(INITIAL_SCREEN_WIDTH, INITIAL_SCREEN_HEIGHT)
        pygame.display.set_caption(WINDOW_TITLE)
        resources = Resources.load(exe_dir)
        game = Game(exe_dir, resources, count_levels(exe_dir), load_level)
        game.world.last_frame_time = pygame.time.get_ticks()

        while True:
            for event in pygame.event.get():
                handle_event(game, event)

            now = pygame.time.get_ticks()
            elapsed = now - game.world.last_frame_time
            game.update(elapsed, controls_from_keys(pygame.key.get_pressed()))
            if game.world.game_state is GameState.QUIT:
                break

            draw_graphics(exe_dir, pygame.display.get_surface(), resources, game.world)
            wait_for_next_frame(game.world)
    finally:
        pygame.quit()
    return 0


def main(argv=None):
    """Start the game from the command line."""
    if argv is None:
        argv = sys.argv
    try:
        exe_dir = resolve_exe_dir(argv)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    try:
        return run(exe_dir)
    except ResourceLoadError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())