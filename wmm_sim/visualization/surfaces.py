"""
Concrete drawing surfaces.

Classes:
    NumpySurface: Headless rasteriser into an (H, W, 3) uint8 array.
    PygameSurface: Adapter over a ``pygame.Surface``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

import numpy as np

from wmm_sim.utils.constants import Color
from wmm_sim.utils.helpers import Point
from wmm_sim.visualization.renderer import SurfaceUnavailable

# Half thickness of rasterised strokes, in pixels
_STROKE_HALF_WIDTH = 0.75


@dataclass
class NumpySurface:
    """Rasterises primitives into an RGB NumPy canvas.

    Pixel ``(row, col)`` covers ``[col, col + 1) x [row, row + 1)`` in
    surface coordinates and is tested at its centre.

    Attributes:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        canvas: Mutable (H, W, 3) uint8 array.
    """

    width: int
    height: int
    canvas: np.ndarray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Allocate a black canvas."""
        self.canvas = np.zeros((self.height, self.width, 3), dtype=np.uint8)

    @property
    def size(self) -> Tuple[int, int]:
        """Pixel ``(width, height)`` of the surface."""
        return self.width, self.height

    # ------------------------------------------------------------------
    # Rasterisation helpers
    # ------------------------------------------------------------------

    def _window(self, x0: float, y0: float, x1: float, y1: float) -> Tuple[slice, slice]:
        """Return row/column slices covering a bounding box, clipped."""
        c0 = max(int(np.floor(min(x0, x1))), 0)
        c1 = min(int(np.ceil(max(x0, x1))) + 1, self.width)
        r0 = max(int(np.floor(min(y0, y1))), 0)
        r1 = min(int(np.ceil(max(y0, y1))) + 1, self.height)
        return slice(r0, max(r0, r1)), slice(c0, max(c0, c1))

    @staticmethod
    def _centres(rows: slice, cols: slice) -> Tuple[np.ndarray, np.ndarray]:
        """Return broadcastable pixel-centre coordinates for a window."""
        ys, xs = np.ogrid[rows, cols]
        return ys + 0.5, xs + 0.5

    # ------------------------------------------------------------------
    # DrawingSurface API
    # ------------------------------------------------------------------

    def clear(self, color: Color) -> None:
        """Fill the whole canvas with *color*."""
        self.canvas[:] = color

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        """Fill pixels whose centres lie inside the rectangle."""
        rows, cols = self._window(x, y, x + width, y + height)
        cy, cx = self._centres(rows, cols)
        mask = (cx >= x) & (cx < x + width) & (cy >= y) & (cy < y + height)
        self.canvas[rows, cols][mask] = color

    def stroke_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        """Stroke the four edges of the rectangle."""
        corners = [(x, y), (x + width, y), (x + width, y + height), (x, y + height)]
        for start, end in zip(corners, corners[1:] + corners[:1]):
            self.stroke_line(start, end, color)

    def fill_circle(self, center: Point, radius: float, color: Color) -> None:
        """Fill pixels whose centres lie within *radius* of *center*."""
        cx0, cy0 = center
        rows, cols = self._window(cx0 - radius, cy0 - radius, cx0 + radius, cy0 + radius)
        cy, cx = self._centres(rows, cols)
        mask = (cx - cx0) ** 2 + (cy - cy0) ** 2 <= radius**2
        self.canvas[rows, cols][mask] = color

    def stroke_line(self, start: Point, end: Point, color: Color) -> None:
        """Set pixels whose centres lie within the stroke of the segment."""
        (x0, y0), (x1, y1) = start, end
        pad = _STROKE_HALF_WIDTH
        rows, cols = self._window(
            min(x0, x1) - pad, min(y0, y1) - pad, max(x0, x1) + pad, max(y0, y1) + pad
        )
        if rows.start == rows.stop or cols.start == cols.stop:
            return
        cy, cx = self._centres(rows, cols)
        dx, dy = x1 - x0, y1 - y0
        length_sq = dx * dx + dy * dy
        if length_sq == 0.0:
            t = np.zeros_like(cx * cy)
        else:
            t = np.clip(((cx - x0) * dx + (cy - y0) * dy) / length_sq, 0.0, 1.0)
        dist_sq = (cx - (x0 + t * dx)) ** 2 + (cy - (y0 + t * dy)) ** 2
        self.canvas[rows, cols][dist_sq <= pad * pad] = color


def _pixel_rect(x: float, y: float, width: float, height: float) -> Any:
    """Round a float rectangle onto the pixel grid as a ``pygame.Rect``."""
    import pygame

    return pygame.Rect(round(x), round(y), round(width), round(height))


@dataclass
class PygameSurface:
    """Adapter that draws onto a ``pygame.Surface``.

    The underlying surface is attached once the display exists; until
    then every call raises ``SurfaceUnavailable``.

    Attributes:
        target: The attached ``pygame.Surface``, or *None*.
    """

    target: Optional[Any] = None

    def attach(self, target: Any) -> None:
        """Attach the ``pygame.Surface`` to draw on."""
        self.target = target

    def _require(self) -> Any:
        """Return the attached surface or raise ``SurfaceUnavailable``."""
        if self.target is None:
            raise SurfaceUnavailable("No pygame surface attached")
        return self.target

    @property
    def size(self) -> Tuple[int, int]:
        """Pixel ``(width, height)`` of the surface."""
        return tuple(self._require().get_size())

    def clear(self, color: Color) -> None:
        """Fill the whole surface with *color*."""
        self._require().fill(color)

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        """Draw a filled rectangle."""
        import pygame

        pygame.draw.rect(self._require(), color, _pixel_rect(x, y, width, height))

    def stroke_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        """Draw a one-pixel rectangle outline."""
        import pygame

        pygame.draw.rect(self._require(), color, _pixel_rect(x, y, width, height), width=1)

    def fill_circle(self, center: Point, radius: float, color: Color) -> None:
        """Draw a filled circle."""
        import pygame

        pygame.draw.circle(self._require(), color, center, radius)

    def stroke_line(self, start: Point, end: Point, color: Color) -> None:
        """Draw an anti-aliased line segment."""
        import pygame

        pygame.draw.aaline(self._require(), color, start, end)
