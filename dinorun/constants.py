"""Gameplay and tuning constants.

All sizes and speeds are in design units; components multiply them by the
current scale ratio before use. Times are milliseconds.
"""

# Design canvas
GAME_WIDTH = 800
GAME_HEIGHT = 200

# Game speed
GAME_SPEED_START = 1
GAME_SPEED_INCREMENT = 0.00001  # per ms, unbounded linear growth

# Player
PLAYER_WIDTH = 88 / 1.75
PLAYER_HEIGHT = 94 / 1.75
PLAYER_X = 10  # fixed horizontal position
PLAYER_GROUND_GAP = 1.5  # distance from canvas bottom when standing
MIN_JUMP_HEIGHT = 150
MAX_JUMP_HEIGHT = GAME_HEIGHT
JUMP_SPEED = 0.6  # ascent per ms
GRAVITY = 0.4  # descent per ms
RUN_ANIMATION_TIMER = 200
PLAYER_RUN_IMAGES = ("player/run1.png", "player/run3.png", "player/run5.png")
PLAYER_JUMP_IMAGE = "player/jumping.png"

# Ground
GROUND_WIDTH = 859
GROUND_HEIGHT = 2
GROUND_AND_OBSTACLE_SPEED = 0.5
GROUND_IMAGE = "ground.png"

# Obstacles
OBSTACLE_INTERVAL_MIN = 500
OBSTACLE_INTERVAL_MAX = 2000
OBSTACLE_SPAWN_X_FACTOR = 1.5  # spawn at this multiple of canvas width
COLLISION_ADJUST = 1.25  # AABB shrink factor, must be >= 1
OBSTACLE_CATALOG = ({"width": 50, "height": 75, "image": "obstacle_1.png"},)
CUTSCENE_UNLOCKS = (
    {"width": 50, "height": 75, "image": "obstacle_1.png"},
    {"width": 50, "height": 75, "image": "fence.png"},
)

# Score
SCORE_RATE = 0.01  # points per ms
CUTSCENE_INIT_SCORE = 25

# Restart debounce
GAME_OVER_RESTART_DELAY = 500
CUTSCENE_RESTART_DELAY = 5000

# Overlays (font sizes in design units)
BACKGROUND_COLOR = (255, 255, 255)
SCORE_FONT_SIZE = 20
SCORE_COLOR = (0, 0, 255)
GAME_OVER_FONT_SIZE = 70
GAME_OVER_COLOR = (255, 0, 0)
START_FONT_SIZE = 50
START_COLOR = (0, 0, 255)
CUTSCENE_FONT_SIZE = 70
CUTSCENE_COLOR = (255, 255, 0)
LETTERBOX_COLOR = (0, 0, 0)

__all__ = [name for name in globals().keys() if name.isupper()]
