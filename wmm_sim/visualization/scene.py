"""
Scene composition for the mobile manipulator.

Turns the base pose and the static rig configuration into a flat,
immutable list of drawing primitives.  A scene is rebuilt from scratch on
every redraw and never mutated.

Classes:
    SceneConfig: Static rig and surface configuration.
    Rect, Circle, Segment: Drawing primitives.
    Scene: The composed, ordered set of primitives.

Functions:
    compose_scene: Build a ``Scene`` from a pose, config and viewport.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple, Union

from wmm_sim.robots.kinematics import gripper_fingers, link_endpoints, shoulder_anchor
from wmm_sim.robots.rig import BaseDimensions, BasePose, JointAngles, LinkLengths, Viewport
from wmm_sim.utils.constants import (
    COLOR_BACKGROUND,
    COLOR_BASE,
    COLOR_FINGER_1,
    COLOR_FINGER_2,
    COLOR_GROUND,
    COLOR_LINK_1,
    COLOR_LINK_2,
    COLOR_LINK_3,
    COLOR_WHEEL,
    GRIPPER_WIDTH,
    GROUND_OFFSET,
    SURFACE_HEIGHT,
    SURFACE_WIDTH_FRACTION,
    Color,
)
from wmm_sim.utils.helpers import Point


@dataclass(frozen=True)
class SceneConfig:
    """Static configuration of the rig and its drawing surface.

    Fixed for the life of a visualisation; only the base pose changes.

    Attributes:
        base: Base body and wheel dimensions.
        link_lengths: Arm link lengths.
        joint_angles: Absolute arm joint angles.
        gripper_width: Distance between the two finger ends.
        surface_height: Fixed surface height in pixels.
        ground_offset: Ground line offset from the bottom edge.
        width_fraction: Share of the container width given to the surface.
    """

    base: BaseDimensions = field(default_factory=BaseDimensions)
    link_lengths: LinkLengths = field(default_factory=LinkLengths)
    joint_angles: JointAngles = field(default_factory=JointAngles)
    gripper_width: float = GRIPPER_WIDTH
    surface_height: float = SURFACE_HEIGHT
    ground_offset: float = GROUND_OFFSET
    width_fraction: float = SURFACE_WIDTH_FRACTION

    def viewport_for(self, container_width: float) -> Viewport:
        """Return the viewport for a container of the given width."""
        return Viewport.from_container(
            container_width,
            fraction=self.width_fraction,
            height=self.surface_height,
            ground_offset=self.ground_offset,
        )


# ----------------------------------------------------------------------
# Primitives
# ----------------------------------------------------------------------


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle, filled and optionally stroked."""

    x: float
    y: float
    width: float
    height: float
    fill: Color
    stroke: Optional[Color] = None


@dataclass(frozen=True)
class Circle:
    """Filled circle."""

    center: Point
    radius: float
    fill: Color


@dataclass(frozen=True)
class Segment:
    """Stroked line segment."""

    start: Point
    end: Point
    stroke: Color


Primitive = Union[Rect, Circle, Segment]


@dataclass(frozen=True)
class Scene:
    """Everything drawn in one frame.

    Attributes:
        width: Surface width in pixels.
        height: Surface height in pixels.
        background: Colour that clears the whole surface.
        ground: The ground line.
        body: The base body.
        wheels: Left and right wheel.
        links: Arm links, shoulder to tip.
        fingers: The two gripper fingers.
    """

    width: float
    height: float
    background: Color
    ground: Segment
    body: Rect
    wheels: Tuple[Circle, Circle]
    links: Tuple[Segment, Segment, Segment]
    fingers: Tuple[Segment, Segment]

    @property
    def end_effector(self) -> Point:
        """Screen position of the arm tip."""
        return self.links[-1].end

    def primitives(self) -> Iterator[Primitive]:
        """Yield every primitive in draw order (background excluded)."""
        yield self.ground
        yield self.body
        yield from self.wheels
        yield from self.links
        yield from self.fingers


# ----------------------------------------------------------------------
# Composition
# ----------------------------------------------------------------------


def _compose_base(
    pose: BasePose, base: BaseDimensions, viewport: Viewport
) -> Tuple[Rect, Tuple[Circle, Circle]]:
    """Build the base body and its wheels pinned to the ground line."""
    body = Rect(pose.x, pose.y, base.width, base.height, fill=COLOR_BASE, stroke=COLOR_BASE)
    r = base.wheel_radius
    wheel_y = viewport.ground_y - r
    wheels = (
        Circle((pose.x + r, wheel_y), r, COLOR_WHEEL),
        Circle((pose.x + base.width - r, wheel_y), r, COLOR_WHEEL),
    )
    return body, wheels


def _compose_arm(
    pose: BasePose, config: SceneConfig
) -> Tuple[Tuple[Segment, Segment, Segment], Tuple[Segment, Segment]]:
    """Build the arm links and gripper fingers as a kinematic chain."""
    anchor = shoulder_anchor(pose, config.base)
    chain = link_endpoints(anchor, config.joint_angles, config.link_lengths)
    points = [(float(x), float(y)) for x, y in chain]
    colors = (COLOR_LINK_1, COLOR_LINK_2, COLOR_LINK_3)
    links = tuple(Segment(points[i], points[i + 1], colors[i]) for i in range(3))
    finger_1, finger_2 = gripper_fingers(
        points[-1], config.joint_angles.theta3, config.gripper_width
    )
    fingers = (
        Segment(finger_1[0], finger_1[1], COLOR_FINGER_1),
        Segment(finger_2[0], finger_2[1], COLOR_FINGER_2),
    )
    return links, fingers


def compose_scene(pose: BasePose, config: SceneConfig, viewport: Viewport) -> Scene:
    """Compose the full rig for one frame.

    Never fails for finite angles and positive link lengths.

    Args:
        pose: Current base pose.
        config: Static rig configuration.
        viewport: Surface size.

    Returns:
        A freshly built ``Scene``.
    """
    ground = Segment((0.0, viewport.ground_y), (viewport.width, viewport.ground_y), COLOR_GROUND)
    body, wheels = _compose_base(pose, config.base, viewport)
    links, fingers = _compose_arm(pose, config)
    return Scene(
        width=viewport.width,
        height=viewport.height,
        background=COLOR_BACKGROUND,
        ground=ground,
        body=body,
        wheels=wheels,
        links=links,
        fingers=fingers,
    )
