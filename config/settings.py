"""
Signal-Cycle: Configuration & Constants
All limits, defaults, colours, and tunable parameters in one place.
"""

# ─────────────────────────────────────────────
# PHASE DURATIONS (seconds)
# ─────────────────────────────────────────────
MIN_DURATION = 1           # anything shorter is too fast to see
MAX_DURATION = 60
DEFAULT_RED_SECONDS = 6
DEFAULT_GREEN_SECONDS = 6
DEFAULT_AMBER_SECONDS = 2  # also used for RED + AMBER
DEFAULT_UK_SEQUENCE = True

# ─────────────────────────────────────────────
# TIMING
# ─────────────────────────────────────────────
ONE_SECOND_MS = 1000.0
TICK_INTERVAL_MS = 250     # driver cadence – display smoothness only

# ─────────────────────────────────────────────
# WINDOW / DISPLAY
# ─────────────────────────────────────────────
SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
FPS = 60
BACKGROUND_COLOR = (30, 30, 30)  # Dark theme

# Signal head geometry
HEAD_CENTER_X = 160
HEAD_CENTER_Y = 230
HEAD_WIDTH = 120
HEAD_HEIGHT = 330
LAMP_RADIUS = 45
LAMP_SPACING = 105

# ─────────────────────────────────────────────
# LAMPS
# ─────────────────────────────────────────────
LAMP_RED = (255, 0, 0)
LAMP_AMBER = (255, 165, 0)
LAMP_GREEN = (0, 255, 0)

LAMP_RED_DIM = (80, 0, 0)
LAMP_AMBER_DIM = (120, 80, 0)
LAMP_GREEN_DIM = (0, 60, 0)

HOUSING_COLOR = (25, 25, 25)
HOUSING_BORDER = (60, 60, 60)

# ─────────────────────────────────────────────
# UI COLOURS / THEME
# ─────────────────────────────────────────────
UI_PANEL_BG = (20, 20, 20)
UI_PANEL_BORDER = (60, 60, 60)
UI_TEXT_PRIMARY = (240, 240, 240)
UI_TEXT_SECONDARY = (180, 180, 180)
UI_TEXT_DISABLED = (90, 90, 90)
UI_ACCENT_BLUE = (52, 152, 219)
UI_ACCENT_GREEN = (46, 204, 113)
UI_ACCENT_RED = (231, 76, 60)
UI_ACCENT_YELLOW = (241, 196, 15)

FIELD_MAX_CHARS = 3
