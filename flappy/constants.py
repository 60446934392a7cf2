"""
constants.py: Centralized defaults for the game world, physics and window.
"""

# -------- Window & Loop Config --------
SCREEN_WIDTH = 480
SCREEN_HEIGHT = 720
RENDER_FPS = 60
MAX_DT = 0.033                  # Largest step the simulation accepts (seconds)

# -------- Physics Config (Pixels / Second / Second) --------
GRAVITY = 2000.0                # Vertical acceleration (pixels/s^2)
JUMP_VY = -520.0                # Velocity set by a jump (pixels/s)
FLOOR_EPSILON = 1.0             # Safety gap kept above the floor (pixels)

# -------- Pipe Config --------
PIPE_SPEED = 180.0              # Horizontal speed (pixels/second)
PIPE_INTERVAL = 1.4             # Seconds between spawns
PIPE_WIDTH = 60
GAP_MIN = 140
GAP_MAX = 180
MARGIN_TOP = 30
MARGIN_BOTTOM = 30

# -------- Bird Config (derived from play-area size) --------
BIRD_MIN_SIZE = 28
BIRD_MAX_SIZE = 44
BIRD_SIZE_RATIO = 0.08
BIRD_MIN_X = 40
BIRD_X_RATIO = 0.12
BIRD_START_Y_RATIO = 0.45

# -------- Colors --------
SKY_COLOR = (112, 197, 206)
PIPE_COLOR = (46, 204, 113)
BIRD_COLOR = (255, 220, 0)
EYE_COLOR = (0, 0, 0)
OVERLAY_COLOR = (0, 0, 0, 115)
TEXT_COLOR = (255, 255, 255)
BUTTON_COLOR = (231, 76, 60)

GAME_OVER_TEXT = "Game over, try again!"
