"""
Immediate-mode rendering of a composed scene.

A ``DrawingSurface`` exposes the handful of primitives the scene needs;
``render_scene`` clears the surface and redraws every primitive in order.

Classes:
    SurfaceUnavailable: The surface has no backing context yet.
    DrawingSurface: Protocol implemented by concrete surfaces.

Functions:
    render_scene: Clear and fully redraw a scene onto a surface.
"""

from __future__ import annotations

import logging
from typing import Protocol, Tuple

from wmm_sim.utils.constants import Color
from wmm_sim.utils.helpers import Point
from wmm_sim.visualization.scene import Circle, Rect, Scene, Segment

logger = logging.getLogger(__name__)


class SurfaceUnavailable(RuntimeError):
    """Raised when a surface is drawn to before its context is attached.

    This is an expected startup state, so callers facing the event loop
    treat it as a no-op.
    """


class DrawingSurface(Protocol):
    """Minimal 2-D drawing context."""

    @property
    def size(self) -> Tuple[int, int]:
        """Pixel ``(width, height)`` of the surface."""
        ...

    def clear(self, color: Color) -> None:
        ...

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        ...

    def stroke_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        ...

    def fill_circle(self, center: Point, radius: float, color: Color) -> None:
        ...

    def stroke_line(self, start: Point, end: Point, color: Color) -> None:
        ...


def _draw_rect(surface: DrawingSurface, rect: Rect) -> None:
    """Fill *rect*, then stroke its outline if it has one."""
    surface.fill_rect(rect.x, rect.y, rect.width, rect.height, rect.fill)
    if rect.stroke is not None:
        surface.stroke_rect(rect.x, rect.y, rect.width, rect.height, rect.stroke)


def render_scene(surface: DrawingSurface, scene: Scene) -> None:
    """Clear *surface* and draw every primitive of *scene*.

    Args:
        surface: Target drawing surface.
        scene: Freshly composed scene.

    Raises:
        SurfaceUnavailable: If the surface has no context attached.
    """
    surface.clear(scene.background)
    for primitive in scene.primitives():
        if isinstance(primitive, Rect):
            _draw_rect(surface, primitive)
        elif isinstance(primitive, Circle):
            surface.fill_circle(primitive.center, primitive.radius, primitive.fill)
        elif isinstance(primitive, Segment):
            surface.stroke_line(primitive.start, primitive.end, primitive.stroke)
        else:
            raise TypeError(f"Unknown primitive {type(primitive).__name__}")
    logger.debug("Rendered scene, end-effector at %s", scene.end_effector)
