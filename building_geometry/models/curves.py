"""Parametric curve value types.

Curves are frozen: rebinding a domain returns a new curve so that a curve
examined from several call sites never changes underneath any of them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import ClassVar, TypeAlias

from .types import Point3D, Vector3D, GeometryError

# Shortest allowed curve span, and zero-length vector threshold.
# These values are also defined in core/tolerances.py. We duplicate them
# here to avoid circular imports (models -> core -> models).
_MIN_CURVE_LENGTH: float = 1e-9
_ZERO_MAGNITUDE: float = 1e-10

TWO_PI: float = 2.0 * math.pi

Domain: TypeAlias = tuple[float, float]


class DegenerateCurveError(GeometryError):
    """Raised when a curve would have coincident endpoints or no extent."""

    pass


class UnboundCurveError(GeometryError):
    """Raised when endpoints are requested from a curve without a domain."""

    pass


def _unit(v: Vector3D, what: str) -> Vector3D:
    length = math.sqrt(v[0]**2 + v[1]**2 + v[2]**2)
    if length < _ZERO_MAGNITUDE:
        raise DegenerateCurveError(f"{what} has zero length: {v}")
    return (v[0] / length, v[1] / length, v[2] / length)


@dataclass(frozen=True, slots=True)
class Line:
    """Straight line ``origin + t * direction`` with a unit direction.

    Parameters are arc lengths measured from ``origin``. ``domain=None``
    means the line is unbound (infinite in both directions).
    """

    origin: Point3D
    direction: Vector3D
    domain: Domain | None = None

    period: ClassVar[float | None] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, 'direction', _unit(self.direction, "Line direction"))
        if self.domain is not None:
            t0, t1 = self.domain
            if t1 - t0 < _MIN_CURVE_LENGTH:
                raise DegenerateCurveError(
                    f"Line domain [{t0}, {t1}] has no length"
                )

    @classmethod
    def bound(cls, start: Point3D, end: Point3D) -> Line:
        """Create a bound line running from start to end."""
        d = (end[0] - start[0], end[1] - start[1], end[2] - start[2])
        length = math.sqrt(d[0]**2 + d[1]**2 + d[2]**2)
        if length < _MIN_CURVE_LENGTH:
            raise DegenerateCurveError(
                f"Line endpoints coincide: {start} and {end}"
            )
        return cls(start, d, (0.0, length))

    @classmethod
    def unbound(cls, origin: Point3D, direction: Vector3D) -> Line:
        return cls(origin, direction)

    @property
    def is_bound(self) -> bool:
        return self.domain is not None

    def evaluate(self, t: float) -> Point3D:
        o, d = self.origin, self.direction
        return (o[0] + t * d[0], o[1] + t * d[1], o[2] + t * d[2])

    def make_bound(self, t0: float, t1: float) -> Line:
        """Return a copy of this line bound to [t0, t1]."""
        return replace(self, domain=(t0, t1))


@dataclass(frozen=True, slots=True)
class Ellipse:
    """Ellipse ``center + rx*cos(t)*x_axis + ry*sin(t)*y_axis``.

    A circle is an ellipse with equal radii. An unbound ellipse is the
    full closed curve over one period.
    """

    center: Point3D
    x_radius: float
    y_radius: float
    x_axis: Vector3D
    y_axis: Vector3D
    domain: Domain | None = None

    period: ClassVar[float | None] = TWO_PI

    def __post_init__(self) -> None:
        if self.x_radius <= 0 or self.y_radius <= 0:
            raise DegenerateCurveError(
                f"Ellipse radii must be positive, got {self.x_radius}, {self.y_radius}"
            )
        x_axis = _unit(self.x_axis, "Ellipse x axis")
        y_axis = _unit(self.y_axis, "Ellipse y axis")
        if abs(x_axis[0] * y_axis[0] + x_axis[1] * y_axis[1] + x_axis[2] * y_axis[2]) > _MIN_CURVE_LENGTH:
            raise DegenerateCurveError("Ellipse axes must be perpendicular")
        object.__setattr__(self, 'x_axis', x_axis)
        object.__setattr__(self, 'y_axis', y_axis)
        if self.domain is not None:
            t0, t1 = self.domain
            span = t1 - t0
            # A full period would close the curve onto its own start point
            if span < _MIN_CURVE_LENGTH or span > TWO_PI - _MIN_CURVE_LENGTH:
                raise DegenerateCurveError(
                    f"Ellipse domain [{t0}, {t1}] does not give distinct endpoints"
                )

    @classmethod
    def circle(
        cls,
        center: Point3D,
        radius: float,
        x_axis: Vector3D = (1.0, 0.0, 0.0),
        y_axis: Vector3D = (0.0, 1.0, 0.0),
    ) -> Ellipse:
        return cls(center, radius, radius, x_axis, y_axis)

    @property
    def is_bound(self) -> bool:
        return self.domain is not None

    @property
    def normal(self) -> Vector3D:
        x, y = self.x_axis, self.y_axis
        return (
            x[1] * y[2] - x[2] * y[1],
            x[2] * y[0] - x[0] * y[2],
            x[0] * y[1] - x[1] * y[0],
        )

    def evaluate(self, t: float) -> Point3D:
        c, x, y = self.center, self.x_axis, self.y_axis
        a = self.x_radius * math.cos(t)
        b = self.y_radius * math.sin(t)
        return (
            c[0] + a * x[0] + b * y[0],
            c[1] + a * x[1] + b * y[1],
            c[2] + a * x[2] + b * y[2],
        )

    def make_bound(self, t0: float, t1: float) -> Ellipse:
        """Return a copy of this ellipse bound to [t0, t1]."""
        return replace(self, domain=(t0, t1))


Curve: TypeAlias = Line | Ellipse
