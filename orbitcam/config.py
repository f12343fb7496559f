from __future__ import annotations

# Window
WINDOW_WIDTH = 1024
WINDOW_HEIGHT = 768
FPS_CAP = 60  # 0 = uncapped

# App
APP_VERSION = "0.3.0"

# Camera (fixed for every camera instance)
WORLD_UP = (0.0, 1.0, 0.0)
FOVY_DEG = 45.0
NEAR = 0.1
FAR = 1000.0
EPSILON = 1e-5  # minimal eye/target distance and polar clamp margin
DOLLY_BASE = 0.95  # radius scale per dolly step

# Default pose (restored with the space key)
DEFAULT_POSITION = (0.0, 0.0, 5.0)
DEFAULT_TARGET = (0.0, 0.0, 0.0)

# Scene
DEFAULT_GRID_EXTENT = 10.0
DEFAULT_GRID_STEP = 1.0
GRID_COLOR = (0.45, 0.47, 0.52)
CUBE_COLOR = (0.95, 0.85, 0.35)
AXIS_X_COLOR = (0.90, 0.25, 0.25)
AXIS_Y_COLOR = (0.25, 0.85, 0.30)
AXIS_Z_COLOR = (0.30, 0.45, 0.95)
CLEAR_COLOR = (0.12, 0.13, 0.16)

# Rendering
FADE_START = 40.0
FADE_END = 120.0
