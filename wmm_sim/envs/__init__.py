"""
Gymnasium-compatible headless environment for the mobile manipulator.

Drives the base with click actions and returns the rig state plus an
optional rendered frame in the LeRobot-style observation dictionary.
"""

from wmm_sim.envs.configs import WmmSimConfig
from wmm_sim.envs.wmm_env import WmmSimEnv

__all__ = [
    "WmmSimConfig",
    "WmmSimEnv",
]
