#!/usr/bin/env python3
"""
Shared constants for Heart Hunt (pixels and seconds unless stated otherwise).

Keeping constants in one place helps ensure values are consistent across the
codebase and makes tuning easier.
"""

# Game rules
GUESS_BUDGET = 10  # wrong guesses allowed before the round is lost
DEFAULT_STAR_COUNT = 10  # decorative stationary stars added to the catalog

# Rendering (viewport)
VIEW_WIDTH = 800
VIEW_HEIGHT = 800
ORBIT_CENTER = (VIEW_WIDTH / 2, VIEW_HEIGHT / 2)
BACKGROUND_COLOR = (0, 0, 0)
HUD_COLOR = (200, 200, 200)
HEART_COLOR = (235, 60, 90)
TARGET_FPS = 60

# Orbits: offset is applied twice on screen, hence the 2x scale
ORBIT_PIXEL_SCALE = 2.0
ORBIT_RATE_SCALE = 10.0  # rad/s = ORBIT_RATE_SCALE / orbit_speed
ANIMATION_INTERVAL = 1 / 120.0  # seconds between orbit ticks

# Stationary stars
STAR_RADIUS = 4
STAR_POSITION_RANGE = (50, 750)
STAR_COLORS = [
    (255, 255, 255),  # white
    (128, 128, 128),  # gray
    (0, 122, 255),  # blue
    (255, 204, 0),  # yellow
]

# Picking
MIN_PICK_RADIUS = 8  # px; tiny bodies stay tappable

# Planet palette
SUN_YELLOW = (255, 214, 0)
VENUS_YELLOW = (240, 230, 140)
GOLD = (255, 214, 0)
JUPITER_ORANGE = (227, 150, 79)
LIGHT_BLUE_GREEN = (173, 217, 230)
NEPTUNE_BLUE = (64, 105, 224)
MERCURY_GRAY = (142, 142, 147)
EARTH_BLUE = (0, 122, 255)
MARS_RED = (255, 59, 48)
