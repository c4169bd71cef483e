"""Shared type aliases and value constants for model geometry."""

from __future__ import annotations

from typing import Literal, TypeAlias

# Coordinates are in the host's internal length unit (feet)
Point3D: TypeAlias = tuple[float, float, float]
Vector3D: TypeAlias = tuple[float, float, float]

# 0 = start point, 1 = end point, as used by the host's join queries
EndpointIndex: TypeAlias = Literal[0, 1]

ORIGIN: Point3D = (0.0, 0.0, 0.0)
BASIS_X: Vector3D = (1.0, 0.0, 0.0)
BASIS_Y: Vector3D = (0.0, 1.0, 0.0)
BASIS_Z: Vector3D = (0.0, 0.0, 1.0)


class GeometryError(ValueError):
    """Base class for recoverable, per-call geometry failures."""

    pass


class DegenerateVectorError(GeometryError):
    """Raised when a zero-length vector is used where a direction is required."""

    pass
