"""
Shared constants for the wmm_sim package.

Default rig geometry, surface sizing, and the colour palette used by the
scene composer and renderers.
"""

from __future__ import annotations

import math
from typing import Tuple

# ---------------------------------------------------------------------------
# Mobile base geometry (pixels)
# ---------------------------------------------------------------------------
BASE_WIDTH: float = 100.0
BASE_HEIGHT: float = 40.0
WHEEL_RADIUS: float = 10.0

# The shoulder sits on top of the base at width / SHOULDER_MOUNT_DIVISOR.
SHOULDER_MOUNT_DIVISOR: float = 1.25

# ---------------------------------------------------------------------------
# Arm geometry
# ---------------------------------------------------------------------------
ARM_LINK_LENGTHS: Tuple[float, float, float] = (60.0, 80.0, 60.0)
ARM_JOINT_ANGLES: Tuple[float, float, float] = (math.pi / 2, 0.0, -math.pi / 2)
GRIPPER_WIDTH: float = 30.0

# ---------------------------------------------------------------------------
# Drawing surface sizing
# ---------------------------------------------------------------------------
SURFACE_HEIGHT: int = 300
SURFACE_WIDTH_FRACTION: float = 0.8
GROUND_OFFSET: float = 40.0
DEFAULT_CONTAINER_WIDTH: int = 1000
DEFAULT_FPS: int = 30

# Tolerance on inverse-cosine ratios before a target counts as unreachable
IK_RATIO_TOL: float = 1e-9

# ---------------------------------------------------------------------------
# Colour palette (RGB 0-255)
# ---------------------------------------------------------------------------
Color = Tuple[int, int, int]

COLOR_BACKGROUND: Color = (235, 228, 214)
COLOR_GROUND: Color = (0, 0, 0)
COLOR_BASE: Color = (0, 0, 0)
COLOR_WHEEL: Color = (146, 143, 142)
COLOR_LINK_1: Color = (255, 0, 0)
COLOR_LINK_2: Color = (0, 255, 0)
COLOR_LINK_3: Color = (255, 0, 0)
COLOR_FINGER_1: Color = (238, 0, 255)
COLOR_FINGER_2: Color = (0, 0, 255)
