"""Boundary face and solid value types extracted from a host solid."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TypeAlias

from .types import Point3D, Vector3D, ORIGIN, DegenerateVectorError

_ZERO_MAGNITUDE: float = 1e-10


def _unit(v: Vector3D) -> Vector3D:
    length = math.sqrt(v[0]**2 + v[1]**2 + v[2]**2)
    if length < _ZERO_MAGNITUDE:
        raise DegenerateVectorError(f"Face direction has zero length: {v}")
    return (v[0] / length, v[1] / length, v[2] / length)


@dataclass(frozen=True, slots=True)
class PlanarFace:
    """Planar boundary patch. The normal is stored unit length."""

    normal: Vector3D
    origin: Point3D = ORIGIN
    area: float = 0.0
    host_ref: object | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'normal', _unit(self.normal))


@dataclass(frozen=True, slots=True)
class CylindricalFace:
    """Cylindrical boundary patch. The axis is stored unit length."""

    axis: Vector3D
    radius: float
    host_ref: object | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.radius <= 0:
            raise ValueError(f"radius must be positive, got {self.radius}")
        object.__setattr__(self, 'axis', _unit(self.axis))


Face: TypeAlias = PlanarFace | CylindricalFace


@dataclass(frozen=True, slots=True)
class Solid:
    """Ordered, read-only collection of boundary faces.

    Hosts may hand over face kinds this package does not model; they are
    kept in order and skipped by the classifier.
    """

    faces: tuple[Face | object, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, 'faces', tuple(self.faces))

    def __iter__(self):
        return iter(self.faces)

    def __len__(self) -> int:
        return len(self.faces)
