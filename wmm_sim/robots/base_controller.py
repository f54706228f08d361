"""
Horizontal position control for the mobile base.

The base rests on the ground line and only slides left and right.  Its
pose starts out unset and is placed at a centred rest position the first
time a viewport is known; afterwards only clicks move it, and every move
is clamped so the body stays fully on the surface.

Classes:
    BasePositionController: Owner of the mutable ``BasePose``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Optional

from wmm_sim.robots.rig import BaseDimensions, BasePose, Viewport
from wmm_sim.utils.helpers import clamp

logger = logging.getLogger(__name__)


@dataclass
class BasePositionController:
    """Owns the base pose and updates it from surface clicks.

    Attributes:
        base: Fixed dimensions of the base body and wheels.
        pose: Current pose, or *None* until the first ``initialize``.
    """

    base: BaseDimensions = field(default_factory=BaseDimensions)
    pose: Optional[BasePose] = None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def initialized(self) -> bool:
        """Whether the rest pose has been set."""
        return self.pose is not None

    def rest_pose(self, viewport: Viewport) -> BasePose:
        """Return the centred resting pose for *viewport*.

        Args:
            viewport: Surface the base is placed on.

        Returns:
            Pose with the body centred and its wheels on the ground line.
        """
        x = (viewport.width - self.base.width) / 2
        y = viewport.ground_y - self.base.height - self.base.wheel_radius
        return BasePose(x=self.clamp_x(x, viewport), y=y)

    def initialize(self, viewport: Viewport) -> BasePose:
        """Place the base at its rest pose unless it already has a pose.

        Calling this again, even with a different viewport, leaves the
        pose untouched.

        Args:
            viewport: Surface the base is placed on.

        Returns:
            The current pose.
        """
        if self.pose is None:
            self.pose = self.rest_pose(viewport)
            logger.debug("Base initialised at %s", self.pose)
        return self.pose

    def clamp_x(self, x: float, viewport: Viewport) -> float:
        """Clamp a candidate base x to ``[0, viewport.width - base.width]``."""
        return clamp(x, 0.0, viewport.max_base_x(self.base))

    def on_surface_click(
        self, local_x: float, local_y: float, viewport: Optional[Viewport]
    ) -> Optional[BasePose]:
        """Centre the base under a click, clamped to the surface.

        Only x changes; ``local_y`` is accepted for the click contract but
        does not move the base.  A click that arrives before the pose is
        set initialises it first.

        Args:
            local_x: Click x relative to the surface's left edge.
            local_y: Click y relative to the surface's top edge.
            viewport: Current surface size, or *None* when no surface is
                attached yet.

        Returns:
            The updated pose, or *None* if the surface is unavailable.
        """
        if viewport is None:
            logger.debug("Click at (%s, %s) ignored: no surface", local_x, local_y)
            return None
        pose = self.initialize(viewport)
        new_x = self.clamp_x(local_x - self.base.width / 2, viewport)
        self.pose = replace(pose, x=new_x)
        logger.debug("Click at x=%s moved base to x=%s", local_x, new_x)
        return self.pose

    def reclamp(self, viewport: Viewport) -> Optional[BasePose]:
        """Re-apply the x clamp after the surface has been resized.

        Args:
            viewport: The new surface size.

        Returns:
            The (possibly moved) pose, or *None* if still unset.
        """
        if self.pose is None:
            return None
        self.pose = replace(self.pose, x=self.clamp_x(self.pose.x, viewport))
        return self.pose
