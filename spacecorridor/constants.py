"""Game-wide tuning constants."""

MAX_FPS = 240
"""Upper bound on rendered frames per second."""

INITIAL_SCREEN_WIDTH = 400
INITIAL_SCREEN_HEIGHT = 640

MAX_SCREEN_RATIO = 0.8
"""Largest width/height ratio of the playing field on screen."""

FONT_SIZE = 0.08
"""Font size as a fraction of the screen width."""

INITIAL_CAMERA_OFFSET = 5.0

SPACESHIP_SIZE = 1.0
FLAME_SCALE = 0.27
"""Flame width relative to the spaceship."""
METEORITE_SIZE = 1.0

DRAG_COEFFICIENT = 0.003
CRUISING_SPEED = 0.000005
"""Constant forward acceleration of the spaceship."""
MOVING_SPEED = 0.00001
"""Acceleration added by the movement keys."""
MAX_USUAL_SPEED = 0.005
CAMERA_APPROACH_RATE = 0.001
BACKGROUND_SPEED = 0.5

SCREEN_DURATION_MS = 3000
"""How long splash, level-complete and end screens stay up."""