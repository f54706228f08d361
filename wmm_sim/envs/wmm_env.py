"""
Headless mobile-manipulator environment (Gymnasium-compatible).

Each action is a click x-coordinate on the drawing surface; the base is
centred under it (clamped to the surface) and the scene is recomposed.
There is no task: the reward is always zero and episodes only truncate.
The environment exists so that the rig can be driven and rendered
through the standard ``reset`` / ``step`` / ``render`` API.

Classes:
    WmmSimEnv: Gymnasium environment wrapping ``WmmCanvas``.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces
from gymnasium.utils import seeding

from wmm_sim.envs.configs import WmmSimConfig
from wmm_sim.visualization.canvas import WmmCanvas
from wmm_sim.visualization.surfaces import NumpySurface


class WmmSimEnv(gym.Env):
    """Gymnasium environment for clicking the mobile base around.

    Attributes:
        metadata: Gymnasium metadata with supported render modes.
        cfg: ``WmmSimConfig`` controlling episode length, sizing, etc.
    """

    metadata: Dict[str, Any] = {"render_modes": ["rgb_array"]}

    def __init__(self, cfg: WmmSimConfig | None = None) -> None:
        """Initialise the environment.

        Args:
            cfg: Optional configuration; a default ``WmmSimConfig`` is used
                when *None*.
        """
        super().__init__()
        self.cfg = cfg or WmmSimConfig()
        self.render_mode = self.cfg.render_mode
        self.np_random, _ = seeding.np_random(self.cfg.seed)
        self._step_count = 0
        self._surface = NumpySurface(self.cfg.observation_width, self.cfg.observation_height)
        self._canvas = self._new_canvas()
        self._init_spaces()

    # ------------------------------------------------------------------
    # Initialisation helpers
    # ------------------------------------------------------------------

    def _init_spaces(self) -> None:
        """Define action and observation Gymnasium spaces."""
        w, h = self.cfg.observation_width, self.cfg.observation_height
        self.action_space = spaces.Box(
            low=0.0, high=float(w), shape=(self.cfg.action_dim,), dtype=np.float32
        )
        obs_dict: Dict[str, spaces.Space] = {}
        obs_dict["agent_pos"] = spaces.Box(
            low=-np.inf, high=np.inf, shape=(self.cfg.state_dim,), dtype=np.float32
        )
        if "pixels" in self.cfg.obs_type:
            obs_dict["pixels"] = spaces.Box(low=0, high=255, shape=(h, w, 3), dtype=np.uint8)
        self.observation_space = spaces.Dict(obs_dict)

    def _new_canvas(self) -> WmmCanvas:
        """Create a canvas with a fresh, unset base pose."""
        canvas = WmmCanvas(config=self.cfg.scene)
        canvas.attach(self._surface)
        canvas.resize(self.cfg.container_width)
        return canvas

    # ------------------------------------------------------------------
    # Gymnasium API
    # ------------------------------------------------------------------

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None
    ) -> Tuple[Dict[str, np.ndarray], Dict[str, Any]]:
        """Reset the base to its rest pose and return the first observation.

        Args:
            seed: Optional seed for ``np_random``; without one the generator
                seeded from ``cfg.seed`` carries on.
            options: Unused; reserved for Gymnasium compatibility.

        Returns:
            Tuple of (observation dict, info dict).
        """
        super().reset(seed=seed)
        self._step_count = 0
        self._canvas = self._new_canvas()
        return self._build_observation(), self._build_info()

    def step(
        self, action: np.ndarray
    ) -> Tuple[Dict[str, np.ndarray], float, bool, bool, Dict[str, Any]]:
        """Click at the given x-coordinate and advance one step.

        Args:
            action: Array whose first entry is the click x in pixels.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        action = np.asarray(action, dtype=np.float32).reshape(-1)
        self._canvas.click(float(action[0]), 0.0)
        self._step_count += 1
        truncated = self._step_count >= self.cfg.episode_length
        return self._build_observation(), 0.0, False, truncated, self._build_info()

    # ------------------------------------------------------------------
    # Observation builder
    # ------------------------------------------------------------------

    def _agent_state(self) -> np.ndarray:
        """Return ``[base_x, base_y, tip_x, tip_y]`` in surface pixels."""
        pose = self._canvas.pose
        tip = self._canvas.compose().end_effector
        return np.array([pose.x, pose.y, tip[0], tip[1]], dtype=np.float32)

    def _build_observation(self) -> Dict[str, np.ndarray]:
        """Assemble the observation dictionary.

        Returns:
            Dictionary with ``'agent_pos'`` and optionally ``'pixels'``.
        """
        obs: Dict[str, np.ndarray] = {"agent_pos": self._agent_state()}
        if "pixels" in self.cfg.obs_type:
            obs["pixels"] = self.render()
        return obs

    def _build_info(self) -> Dict[str, Any]:
        """Return the info dictionary with the current base pose."""
        return {"base_pose": self._canvas.pose, "step": self._step_count}

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> np.ndarray:
        """Render the current scene as an RGB image.

        Returns:
            (H, W, 3) uint8 NumPy array.
        """
        self._canvas.redraw()
        return self._surface.canvas.copy()
