"""3D vector math and geometry utilities.

Points and vectors are plain ``(x, y, z)`` tuples. All angles are radians.
"""

from __future__ import annotations

import math

from ..models.types import Vector3D, Point3D, DegenerateVectorError
from .tolerances import ZERO_MAGNITUDE


def is_zero(value: float, tolerance: float = ZERO_MAGNITUDE) -> bool:
    """Return True if value lies within tolerance of zero (inclusive)."""
    return abs(value) <= tolerance


def add(v1: Vector3D, v2: Vector3D) -> Vector3D:
    return (v1[0] + v2[0], v1[1] + v2[1], v1[2] + v2[2])


def subtract(v1: Vector3D, v2: Vector3D) -> Vector3D:
    """Return v1 - v2; for two points, the displacement from v2 to v1."""
    return (v1[0] - v2[0], v1[1] - v2[1], v1[2] - v2[2])


def scale(v: Vector3D, factor: float) -> Vector3D:
    return (v[0] * factor, v[1] * factor, v[2] * factor)


def negate(v: Vector3D) -> Vector3D:
    return (-v[0], -v[1], -v[2])


def cross_product(v1: Vector3D, v2: Vector3D) -> Vector3D:
    """
    Calculate the cross product of two 3D vectors.

    Args:
        v1: First vector (x, y, z)
        v2: Second vector (x, y, z)

    Returns:
        Cross product vector (x, y, z)
    """
    return (
        v1[1] * v2[2] - v1[2] * v2[1],
        v1[2] * v2[0] - v1[0] * v2[2],
        v1[0] * v2[1] - v1[1] * v2[0]
    )


def dot_product(v1: Vector3D, v2: Vector3D) -> float:
    """
    Calculate the dot product of two 3D vectors.

    Args:
        v1: First vector (x, y, z)
        v2: Second vector (x, y, z)

    Returns:
        Scalar dot product
    """
    return v1[0] * v2[0] + v1[1] * v2[1] + v1[2] * v2[2]


def magnitude(v: Vector3D) -> float:
    """Calculate the magnitude (length) of a 3D vector."""
    return math.sqrt(v[0]**2 + v[1]**2 + v[2]**2)


def _checked_magnitude(v: Vector3D, label: str) -> float:
    mag = magnitude(v)
    if mag < ZERO_MAGNITUDE:
        raise DegenerateVectorError(
            f"{label} has zero length (magnitude={mag}): {v}"
        )
    return mag


def normalize(v: Vector3D) -> Vector3D:
    """
    Return the unit vector pointing the same way as v.

    Raises:
        DegenerateVectorError: If v has zero or near-zero length
    """
    mag = _checked_magnitude(v, "Vector")
    return (v[0] / mag, v[1] / mag, v[2] / mag)


def angle_between(v1: Vector3D, v2: Vector3D) -> float:
    """
    Calculate the unsigned angle between two vectors.

    Args:
        v1: First vector
        v2: Second vector

    Returns:
        Angle in radians (0 to pi)

    Raises:
        DegenerateVectorError: If either vector has zero length
    """
    mag_product = _checked_magnitude(v1, "First vector") * _checked_magnitude(v2, "Second vector")
    cos_angle: float = dot_product(v1, v2) / mag_product
    cos_angle = max(-1.0, min(1.0, cos_angle))  # Clamp for floating point errors
    return math.acos(cos_angle)


def angle_on_plane(reference: Vector3D, target: Vector3D, plane_normal: Vector3D) -> float:
    """
    Calculate the signed angle from reference to target around a plane normal.

    The angle is measured counter-clockwise when looking down the normal
    (right-hand rule), so with a Z-up normal X to Y is a quarter turn.

    Args:
        reference: Direction the angle is measured from
        target: Direction the angle is measured to
        plane_normal: Axis the angle is measured around

    Returns:
        Angle in radians (0 to 2*pi, excluding 2*pi)

    Raises:
        DegenerateVectorError: If any input vector has zero length
    """
    _checked_magnitude(reference, "Reference vector")
    _checked_magnitude(target, "Target vector")
    normal = normalize(plane_normal)
    angle = math.atan2(
        dot_product(cross_product(reference, target), normal),
        dot_product(reference, target),
    )
    if angle < 0:
        angle += 2.0 * math.pi
    # -0.0 and tiny negative values can round up to a full turn
    return 0.0 if angle >= 2.0 * math.pi else angle


def distance_between_points(p1: Point3D, p2: Point3D) -> float:
    """Calculate the Euclidean distance between two 3D points."""
    return math.sqrt(
        (p2[0] - p1[0])**2 +
        (p2[1] - p1[1])**2 +
        (p2[2] - p1[2])**2
    )


def points_are_close(p1: Point3D, p2: Point3D, tolerance: float) -> bool:
    """
    Check if two points are within tolerance of each other.

    Args:
        p1: First point
        p2: Second point
        tolerance: Maximum distance to consider "close"

    Returns:
        True if points are within or equal to tolerance distance
    """
    return distance_between_points(p1, p2) <= tolerance
