"""
Event-driven recompute-and-render loop for the mobile manipulator.

``WmmCanvas`` is the glue between a host UI and the pure parts of the
package: the host reports resizes and clicks, the canvas updates the base
pose through its controller and then synchronously composes and renders
a brand-new scene.

Classes:
    WmmCanvas: Owns configuration, base state, and the attached surface.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from wmm_sim.robots.base_controller import BasePositionController
from wmm_sim.robots.rig import BasePose, Viewport
from wmm_sim.visualization.renderer import DrawingSurface, SurfaceUnavailable, render_scene
from wmm_sim.visualization.scene import Scene, SceneConfig, compose_scene

logger = logging.getLogger(__name__)


@dataclass
class WmmCanvas:
    """Visualisation instance for one rig on one drawing surface.

    Attributes:
        config: Static rig and surface configuration.
        controller: Owner of the mutable base pose.
        surface: Attached drawing surface, or *None* before mount.
        viewport: Current surface size, or *None* before the first resize.
    """

    config: SceneConfig = field(default_factory=SceneConfig)
    controller: Optional[BasePositionController] = None
    surface: Optional[DrawingSurface] = None
    viewport: Optional[Viewport] = None

    def __post_init__(self) -> None:
        """Create a controller sized for the configured base if none given."""
        if self.controller is None:
            self.controller = BasePositionController(base=self.config.base)

    @property
    def pose(self) -> Optional[BasePose]:
        """Current base pose, or *None* until initialised."""
        return self.controller.pose

    # ------------------------------------------------------------------
    # Triggers
    # ------------------------------------------------------------------

    def attach(self, surface: DrawingSurface) -> Optional[Scene]:
        """Attach a surface and draw the first frame if already sized.

        Args:
            surface: The surface to draw on from now on.

        Returns:
            The drawn scene, or *None* if nothing could be drawn yet.
        """
        self.surface = surface
        return self.redraw()

    def resize(self, container_width: float) -> Optional[Scene]:
        """Resize the surface to fit its container and redraw.

        The first resize places the base at its rest pose; later resizes
        keep the pose and only re-clamp it to the new width.

        Args:
            container_width: Available width of the containing layout.

        Returns:
            The drawn scene, or *None* if no surface is attached.
        """
        self.viewport = self.config.viewport_for(container_width)
        self.controller.initialize(self.viewport)
        self.controller.reclamp(self.viewport)
        return self.redraw()

    def click(self, local_x: float, local_y: float) -> Optional[Scene]:
        """Move the base under a click and redraw.

        Args:
            local_x: Click x relative to the surface's left edge.
            local_y: Click y relative to the surface's top edge.

        Returns:
            The drawn scene, or *None* if no surface is attached.
        """
        if self.surface is None:
            logger.debug("Click ignored: no surface attached")
            return None
        self.controller.on_surface_click(local_x, local_y, self.viewport)
        return self.redraw()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def compose(self) -> Optional[Scene]:
        """Compose the current scene without drawing it."""
        if self.viewport is None:
            return None
        pose = self.controller.initialize(self.viewport)
        return compose_scene(pose, self.config, self.viewport)

    def redraw(self) -> Optional[Scene]:
        """Compose a fresh scene and render it onto the attached surface.

        Returns:
            The drawn scene, or *None* if the surface is not ready.
        """
        if self.surface is None or self.viewport is None:
            return None
        scene = self.compose()
        try:
            render_scene(self.surface, scene)
        except SurfaceUnavailable:
            logger.debug("Redraw skipped: surface context not ready")
            return None
        return scene
