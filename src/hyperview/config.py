"""
Configuration & Global Constants
================================
This module serves as the central registry for tunable constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (step sizes, clamps, colors)
   from being scattered throughout the engine, camera and renderer.
2. Consistency: The Qt front-end and the headless core read the same
   defaults, so a test run and an interactive run behave identically.

Exports:
    CAMERA_POSITION (tuple): Default 4D camera position (x, y, z, w).
    VIEWER_DISTANCE (float): Default 4D -> 3D projection distance.
    SCREEN_DISTANCE (float): Default 3D -> 2D projection distance.
    ROTATION_SPEED (float): Default angular speed in radians per second.
"""
# Numerical tolerances
EPSILON: float = 1e-9  # normalization of near-zero vectors
PROJECTION_EPSILON: float = 1e-6  # perspective divide denominators

# Camera
CAMERA_POSITION: tuple[float, float, float, float] = (0.0, 0.0, 0.0, -5.0)
VIEWER_DISTANCE: float = 5.0
SCREEN_DISTANCE: float = 5.0
DISTANCE_STEP: float = 0.2
MIN_DISTANCE: float = 0.1
CAMERA_STEP: float = 0.1
DEFAULT_SCALE: float = 100.0

# Rotation engine (radians per second)
ROTATION_SPEED: float = 0.5
ROTATION_SPEED_STEP: float = 0.1
MIN_ROTATION_SPEED: float = 0.01

# Front-end
WINDOW_WIDTH: int = 800
WINDOW_HEIGHT: int = 600
MIN_WINDOW_WIDTH: int = 400
MIN_WINDOW_HEIGHT: int = 300
FRAME_INTERVAL_MS: int = 16  # ~60 FPS
CULL_MARGIN: int = 1000  # px around the visible area

# Colors (RGB)
BACKGROUND_COLOR: tuple[int, int, int] = (0, 0, 0)
OVERLAY_COLOR: tuple[int, int, int] = (255, 255, 0)
HELP_COLOR: tuple[int, int, int] = (211, 211, 211)
