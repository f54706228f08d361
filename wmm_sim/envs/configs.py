"""
Dataclass configuration for the mobile-manipulator environment.

Classes:
    WmmSimConfig: Episode, observation, and scene settings.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from wmm_sim.robots.rig import Viewport
from wmm_sim.utils.constants import DEFAULT_CONTAINER_WIDTH, DEFAULT_FPS
from wmm_sim.visualization.scene import SceneConfig


@dataclass
class WmmSimConfig:
    """Configuration for ``WmmSimEnv`` and the interactive viewer.

    Attributes:
        fps: Frames per second of the live viewer.
        episode_length: Maximum steps per episode.
        obs_type: Observation mode (``'pixels_agent_pos'`` or ``'agent_pos'``).
        render_mode: Gymnasium render mode; only ``'rgb_array'`` is supported.
        container_width: Width of the layout hosting the surface.
        seed: Seed for the first ``reset`` that is not given one.
        scene: Static rig and surface configuration.
        state_dim: Size of the ``agent_pos`` vector (base xy, tip xy).
        action_dim: Size of the action vector (click x).
    """

    fps: int = DEFAULT_FPS
    episode_length: int = 200
    obs_type: str = "pixels_agent_pos"
    render_mode: str = "rgb_array"
    container_width: float = DEFAULT_CONTAINER_WIDTH
    seed: int = 42
    scene: SceneConfig = field(default_factory=SceneConfig)
    state_dim: int = 4
    action_dim: int = 1

    def __post_init__(self) -> None:
        """Reject settings that cannot produce a surface."""
        if self.container_width <= 0:
            raise ValueError(f"container_width must be positive, got {self.container_width}")
        if self.episode_length < 1:
            raise ValueError("`episode_length` must be at least 1")
        if self.render_mode != "rgb_array":
            raise ValueError(f"Unsupported render_mode '{self.render_mode}'")

    @property
    def viewport(self) -> Viewport:
        """Surface viewport derived from ``container_width``."""
        return self.scene.viewport_for(self.container_width)

    @property
    def observation_width(self) -> int:
        """Pixel width of rendered observations."""
        return self.viewport.size[0]

    @property
    def observation_height(self) -> int:
        """Pixel height of rendered observations."""
        return self.viewport.size[1]
