from __future__ import annotations

from .config import CFG


# --- Palette ----------------------------------------------------------------
BG = (0, 0, 0)
INK = (235, 235, 235)
ROAD_COLOR = (17, 17, 17)
LANE_LINE_COLOR = (51, 51, 51)
LANE_DASH_COLOR = (255, 68, 68)
SIDE_PANEL_COLOR = (0, 0, 0, 204)
SIDE_BLOB_COLOR = (150, 0, 0, 26)
CAR_BODY_COLOR = (68, 0, 0)
HEADLIGHT_COLOR = (255, 255, 136)
OBSTACLE_COLOR = (255, 50, 50)
PARTICLE_COLOR = (255, 68, 68)
PASS_PARTICLE_COLOR = (255, 102, 102)
PANEL_BG = (10, 0, 0, 220)
PANEL_BORDER = (255, 68, 68)

# --- Window -----------------------------------------------------------------
FPS = int(CFG.get("display", {}).get("fps", 60))
CANVAS_SIZE = tuple(CFG.get("display", {}).get("size", [400, 600]))
CANVAS_WIDTH, CANVAS_HEIGHT = CANVAS_SIZE
WINDOW_TITLE = "Lane Rush"

# --- Road layout ------------------------------------------------------------
LANES = 4
LANE_WIDTH = 80
ROAD_LEFT = 40                    # width of the dark side panel left of lane 0
LANE_DASH = 25                    # dash and gap length of the animated lane markers

# --- Player -----------------------------------------------------------------
CAR_WIDTH = 50
CAR_HEIGHT = 80
CAR_BOTTOM_MARGIN = 20
START_LANE = 1

# --- Obstacles --------------------------------------------------------------
OBSTACLE_SIZE = 60
OBSTACLE_ROT_STEP = 0.1           # radians per tick
OBSTACLE_PULSE_FREQ = 0.01        # per millisecond
OBSTACLE_PULSE_BASE = 0.8
OBSTACLE_PULSE_AMP = 0.2
PASS_REWARD = 10

# --- Particles --------------------------------------------------------------
LANE_BURST_COUNT = 10
LANE_BURST_LIFE = 30
PASS_BURST_COUNT = 5
PASS_BURST_LIFE = 20
PARTICLE_GRAVITY = 0.1
PARTICLE_RADIUS = 3

# --- Shake ------------------------------------------------------------------
SHAKE_KICK = 10.0
SHAKE_DECAY = 0.9
SHAKE_EPSILON = 0.05
SHAKE_ROAD_FACTOR = 0.1
SHAKE_CAR_FACTOR = 0.3

# --- HUD --------------------------------------------------------------------
HUD_FONT_SIZE = 20
PANEL_TITLE_FONT_SIZE = 44
PANEL_FONT_SIZE = 24
GAME_OVER_TITLE = "GAME OVER"
RESTART_LABEL = "RESTART"
