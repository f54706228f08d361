"""
Immutable data types describing the mobile manipulator rig.

Classes:
    LinkLengths: Lengths of the three arm links.
    JointAngles: Absolute joint angles of the three arm links.
    BaseDimensions: Size of the base body and its wheels.
    Viewport: Pixel size of the drawing surface and its ground line.
    BasePose: Top-left corner of the base body on the surface.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

import numpy as np

from wmm_sim.utils.constants import (
    ARM_JOINT_ANGLES,
    ARM_LINK_LENGTHS,
    BASE_HEIGHT,
    BASE_WIDTH,
    GROUND_OFFSET,
    SURFACE_HEIGHT,
    SURFACE_WIDTH_FRACTION,
    WHEEL_RADIUS,
)


@dataclass(frozen=True)
class LinkLengths:
    """Lengths of the three arm links.

    Attributes:
        l1: Shoulder to elbow.
        l2: Elbow to wrist.
        l3: Wrist to end-effector.
    """

    l1: float = ARM_LINK_LENGTHS[0]
    l2: float = ARM_LINK_LENGTHS[1]
    l3: float = ARM_LINK_LENGTHS[2]

    def __post_init__(self) -> None:
        """Reject non-positive link lengths."""
        for name, value in zip(("l1", "l2", "l3"), self):
            if not value > 0.0:
                raise ValueError(f"Link length {name} must be positive, got {value}")

    def __iter__(self) -> Iterator[float]:
        return iter((self.l1, self.l2, self.l3))

    @property
    def total(self) -> float:
        """Length of the fully stretched chain."""
        return self.l1 + self.l2 + self.l3

    def as_array(self) -> np.ndarray:
        """Return the lengths as a float64 array of shape ``(3,)``."""
        return np.array([self.l1, self.l2, self.l3], dtype=np.float64)


@dataclass(frozen=True)
class JointAngles:
    """Absolute joint angles in radians.

    Each angle is measured from the arm-local horizontal, not relative to
    the previous link.  No normalisation is applied.

    Attributes:
        theta1: Shoulder angle.
        theta2: Elbow angle.
        theta3: Wrist angle.
    """

    theta1: float = ARM_JOINT_ANGLES[0]
    theta2: float = ARM_JOINT_ANGLES[1]
    theta3: float = ARM_JOINT_ANGLES[2]

    def __iter__(self) -> Iterator[float]:
        return iter((self.theta1, self.theta2, self.theta3))

    def as_array(self) -> np.ndarray:
        """Return the angles as a float64 array of shape ``(3,)``."""
        return np.array([self.theta1, self.theta2, self.theta3], dtype=np.float64)


@dataclass(frozen=True)
class BaseDimensions:
    """Size of the base body and its wheels, in pixels."""

    width: float = BASE_WIDTH
    height: float = BASE_HEIGHT
    wheel_radius: float = WHEEL_RADIUS


@dataclass(frozen=True)
class Viewport:
    """Pixel size of the drawing surface.

    Attributes:
        width: Surface width in pixels.
        height: Surface height in pixels.
        ground_offset: Distance of the ground line above the bottom edge.
    """

    width: float
    height: float = SURFACE_HEIGHT
    ground_offset: float = GROUND_OFFSET

    @classmethod
    def from_container(
        cls,
        container_width: float,
        fraction: float = SURFACE_WIDTH_FRACTION,
        height: float = SURFACE_HEIGHT,
        ground_offset: float = GROUND_OFFSET,
    ) -> "Viewport":
        """Size a viewport as a fraction of the containing layout's width.

        The width is snapped to whole pixels so the clamp range matches the
        raster the surface is drawn into.

        Args:
            container_width: Available width of the containing layout.
            fraction: Share of that width given to the surface.
            height: Fixed surface height.
            ground_offset: Ground line offset from the bottom edge.

        Returns:
            A new ``Viewport``.
        """
        width = float(round(container_width * fraction))
        return cls(width=width, height=height, ground_offset=ground_offset)

    @property
    def size(self) -> Tuple[int, int]:
        """Integer ``(width, height)`` of the pixel grid."""
        return round(self.width), round(self.height)

    @property
    def ground_y(self) -> float:
        """Screen y-coordinate of the ground line."""
        return self.height - self.ground_offset

    def max_base_x(self, base: BaseDimensions) -> float:
        """Largest base x that keeps the body fully on the surface."""
        return max(0.0, self.width - base.width)


@dataclass(frozen=True)
class BasePose:
    """Top-left corner of the base body in surface pixels."""

    x: float
    y: float
