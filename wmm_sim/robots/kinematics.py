"""
Closed-form kinematics for the planar 3-link arm.

All joint angles are absolute (measured from the arm-local horizontal), so
each link endpoint is the previous endpoint plus ``l_i * (cos, sin)`` of
its own angle.  The arm-local frame is y-up with the shoulder at the
origin; screen space is y-down, which only flips the sign of the vertical
component.

Functions:
    inverse_kinematics: Target point to joint angles.
    forward_kinematics: Joint angles to joint positions (arm frame).
    end_effector: Tip position in the arm frame.
    link_endpoints: Joint positions in screen space from a shoulder anchor.
    shoulder_anchor: Where the arm mounts on the base.
    gripper_fingers: Finger segments around the end-effector.
    reachable_bands: Radius intervals the solver can reach.
    is_reachable: Non-raising reachability predicate.
"""

from __future__ import annotations

import logging
import math
from typing import List, Tuple

import numpy as np

from wmm_sim.robots.rig import BaseDimensions, BasePose, JointAngles, LinkLengths
from wmm_sim.utils.constants import IK_RATIO_TOL, SHOULDER_MOUNT_DIVISOR
from wmm_sim.utils.helpers import Point, clamp, polar_offset

logger = logging.getLogger(__name__)

Segment = Tuple[Point, Point]


class ReachabilityError(ValueError):
    """Raised when no joint configuration places the tip on the target.

    Attributes:
        target: The requested ``(x, y)`` in the arm-local frame.
        link_lengths: The link lengths the solve was attempted with.
        reason: Short description of the failed condition.
    """

    def __init__(self, target: Point, link_lengths: LinkLengths, reason: str) -> None:
        self.target = (float(target[0]), float(target[1]))
        self.link_lengths = link_lengths
        self.reason = reason
        super().__init__(
            f"Target {self.target} unreachable with links "
            f"{tuple(link_lengths)}: {reason}"
        )


# ----------------------------------------------------------------------
# Inverse kinematics
# ----------------------------------------------------------------------


def _checked_acos(
    numerator: float,
    denominator: float,
    target: Point,
    lengths: LinkLengths,
    what: str,
) -> float:
    """Return ``acos(numerator / denominator)`` or raise if out of domain.

    Ratios within ``IK_RATIO_TOL`` of the [-1, 1] interval are clamped onto
    it; anything further out is unreachable.

    Raises:
        ReachabilityError: On a zero denominator or an out-of-range ratio.
    """
    if denominator == 0.0:
        raise ReachabilityError(target, lengths, f"degenerate {what} triangle")
    ratio = numerator / denominator
    if not abs(ratio) <= 1.0 + IK_RATIO_TOL:
        raise ReachabilityError(
            target, lengths, f"{what} cosine ratio {ratio:.6g} outside [-1, 1]"
        )
    return float(np.arccos(clamp(ratio, -1.0, 1.0)))


def inverse_kinematics(target: Point, link_lengths: LinkLengths) -> JointAngles:
    """Solve absolute joint angles that put the end-effector on *target*.

    The shoulder is aimed along the target bearing, which places the elbow
    ``l1`` along that bearing.  The remaining links close a triangle with
    sides ``l2``, ``l3`` and the residual distance ``d = |r - l1|``; the law
    of cosines gives the elbow and wrist angles on the elbow-up branch.

    Args:
        target: ``(x, y)`` in the arm-local, y-up frame.
        link_lengths: Lengths of the three links.

    Returns:
        Absolute ``JointAngles``; no normalisation is applied.

    Raises:
        ReachabilityError: If the target lies outside the workspace or the
            geometry degenerates.
    """
    x, y = float(target[0]), float(target[1])
    if not (math.isfinite(x) and math.isfinite(y)):
        raise ReachabilityError(target, link_lengths, "target is not finite")
    l1, l2, l3 = link_lengths

    theta1 = math.atan2(y, x)
    r = math.hypot(x, y)
    residual = r - l1
    d = abs(residual)
    # Bearing from the elbow to the target; reversed when the target is
    # closer to the shoulder than the elbow.
    phi = theta1 if residual >= 0.0 else theta1 + math.pi

    if d == 0.0 and l2 == l3:
        # Tip folded back onto the elbow: limit of both ratios is 0
        gamma = delta = math.pi / 2
    else:
        gamma = _checked_acos(
            l2 * l2 + d * d - l3 * l3, 2.0 * l2 * d, target, link_lengths, "elbow"
        )
        delta = _checked_acos(
            l3 * l3 + d * d - l2 * l2, 2.0 * l3 * d, target, link_lengths, "wrist"
        )

    angles = JointAngles(theta1, phi + gamma, phi - delta)
    logger.debug("IK %s -> %s", (x, y), angles)
    return angles


def reachable_bands(link_lengths: LinkLengths) -> List[Tuple[float, float]]:
    """Return the radial bands ``[(r_lo, r_hi), ...]`` the solver can reach.

    With the shoulder aimed at the target, the residual distance
    ``|r - l1|`` must lie within ``[|l2 - l3|, l2 + l3]``.  That yields an
    outer band beyond the elbow and, when the arm can fold back past the
    shoulder, an inner band; the two merge when ``l2 == l3``.

    Args:
        link_lengths: Lengths of the three links.

    Returns:
        Disjoint closed radius intervals, sorted inner to outer.
    """
    l1, l2, l3 = link_lengths
    inner, outer = abs(l2 - l3), l2 + l3
    bands = []
    if l1 - inner >= 0.0:
        bands.append((max(0.0, l1 - outer), l1 - inner))
    bands.append((l1 + inner, l1 + outer))
    if len(bands) == 2 and bands[0][1] >= bands[1][0]:
        bands = [(bands[0][0], bands[1][1])]
    return bands


def is_reachable(target: Point, link_lengths: LinkLengths) -> bool:
    """Return True when ``inverse_kinematics`` would succeed for *target*."""
    try:
        inverse_kinematics(target, link_lengths)
    except ReachabilityError:
        return False
    return True


# ----------------------------------------------------------------------
# Forward kinematics
# ----------------------------------------------------------------------


def _chain(
    anchor: Point, angles: JointAngles, lengths: LinkLengths, y_sign: float
) -> np.ndarray:
    """Accumulate link vectors from *anchor*.

    Returns:
        Array of shape ``(4, 2)``: anchor, elbow, wrist, tip.
    """
    theta = angles.as_array()
    steps = np.column_stack(
        [lengths.as_array() * np.cos(theta), y_sign * lengths.as_array() * np.sin(theta)]
    )
    points = np.vstack([np.zeros((1, 2)), np.cumsum(steps, axis=0)])
    return points + np.asarray(anchor, dtype=np.float64)


def forward_kinematics(
    angles: JointAngles, lengths: LinkLengths, anchor: Point = (0.0, 0.0)
) -> np.ndarray:
    """Compute joint positions in the arm-local, y-up frame.

    Args:
        angles: Absolute joint angles.
        lengths: Link lengths.
        anchor: Shoulder position.

    Returns:
        Array of shape ``(4, 2)`` holding shoulder, elbow, wrist and
        end-effector positions.
    """
    return _chain(anchor, angles, lengths, 1.0)


def end_effector(
    angles: JointAngles, lengths: LinkLengths, anchor: Point = (0.0, 0.0)
) -> Point:
    """Return the end-effector ``(x, y)`` in the arm-local, y-up frame."""
    tip = forward_kinematics(angles, lengths, anchor)[-1]
    return float(tip[0]), float(tip[1])


def link_endpoints(
    anchor: Point, angles: JointAngles, lengths: LinkLengths, y_down: bool = True
) -> np.ndarray:
    """Compute joint positions in screen space starting from *anchor*.

    Args:
        anchor: Shoulder position on the surface.
        angles: Absolute joint angles (positive is up on screen).
        lengths: Link lengths.
        y_down: Whether the target frame grows downward.

    Returns:
        Array of shape ``(4, 2)``; row ``i`` to row ``i + 1`` is link ``i + 1``.
    """
    return _chain(anchor, angles, lengths, -1.0 if y_down else 1.0)


def shoulder_anchor(pose: BasePose, base: BaseDimensions) -> Point:
    """Return the shoulder mount point on top of the base body."""
    return pose.x + base.width / SHOULDER_MOUNT_DIVISOR, pose.y


def gripper_fingers(tip: Point, theta3: float, gripper_width: float) -> Tuple[Segment, Segment]:
    """Return the two finger segments of an open gripper.

    Both fingers share the end-effector point and extend by half the
    gripper width along the screen-space perpendicular of the last link.

    Args:
        tip: End-effector position on screen.
        theta3: Absolute angle of the last link.
        gripper_width: Distance between the two finger ends.

    Returns:
        ``(finger_1, finger_2)``, each a ``(start, end)`` segment.
    """
    half = gripper_width / 2.0
    perp = theta3 - math.pi / 2
    center = (float(tip[0]), float(tip[1]))
    finger_1 = (polar_offset(center, -half, perp, y_down=True), center)
    finger_2 = (center, polar_offset(center, half, perp, y_down=True))
    return finger_1, finger_2
