"""Analytic curve/curve intersection.

Each result pair is ``(parameter_on_a, parameter_on_b)``. Results on a
bound curve are restricted to its domain; unbound curves accept any
parameter (an unbound ellipse reports parameters in [0, 2*pi)).
"""

from __future__ import annotations

import math

from ..models.curves import Curve, Line, Ellipse, TWO_PI
from ..models.types import GeometryError, Vector3D
from .geometry import cross_product, dot_product, subtract
from .tolerances import PARAMETER, POINT_ON_CURVE

IntersectionPair = tuple[float, float]


class UnsupportedIntersectionError(GeometryError):
    """Raised for curve pairs without an analytic intersection routine."""

    pass


def _line_accepts(line: Line, t: float) -> bool:
    if line.domain is None:
        return True
    t0, t1 = line.domain
    return t0 - PARAMETER <= t <= t1 + PARAMETER


def _ellipse_parameter(ellipse: Ellipse, s: float) -> float | None:
    """Shift an angle into the ellipse domain, or None if it falls outside."""
    s = s % TWO_PI
    if ellipse.domain is None:
        return s
    t0, t1 = ellipse.domain
    # Move s into the period starting at t0
    s = t0 + (s - t0) % TWO_PI
    if s > t1 + PARAMETER:
        # Allow a hit right at the start of the period to match t0
        if abs(s - TWO_PI - t0) <= PARAMETER:
            return t0
        return None
    return s


def intersect_lines(a: Line, b: Line) -> list[IntersectionPair]:
    """
    Intersect two lines.

    Parallel lines (including coincident ones) and skew lines report no
    intersection.
    """
    n = cross_product(a.direction, b.direction)
    n_sq = dot_product(n, n)
    if n_sq < PARAMETER**2:
        return []
    offset = subtract(b.origin, a.origin)
    if abs(dot_product(offset, n)) / math.sqrt(n_sq) > POINT_ON_CURVE:
        return []
    t = dot_product(cross_product(offset, b.direction), n) / n_sq
    s = dot_product(cross_product(offset, a.direction), n) / n_sq
    if _line_accepts(a, t) and _line_accepts(b, s):
        return [(t, s)]
    return []


def _ellipse_frame(ellipse: Ellipse, v: Vector3D) -> tuple[float, float, float]:
    return (
        dot_product(v, ellipse.x_axis),
        dot_product(v, ellipse.y_axis),
        dot_product(v, ellipse.normal),
    )


def intersect_line_ellipse(line: Line, ellipse: Ellipse) -> list[IntersectionPair]:
    """
    Intersect a line with an ellipse.

    Returns:
        Up to two (parameter_on_line, parameter_on_ellipse) pairs
    """
    rx, ry = ellipse.x_radius, ellipse.y_radius
    u0, v0, w0 = _ellipse_frame(ellipse, subtract(line.origin, ellipse.center))
    du, dv, dw = _ellipse_frame(ellipse, line.direction)

    line_params: list[float]
    if abs(dw) > PARAMETER:
        # Line crosses the ellipse plane at a single point
        t = -w0 / dw
        u, v = u0 + t * du, v0 + t * dv
        radial = math.hypot(u / rx, v / ry)
        if abs(radial - 1.0) * min(rx, ry) > POINT_ON_CURVE:
            return []
        line_params = [t]
    elif abs(w0) > POINT_ON_CURVE:
        # Parallel to the plane, off it
        return []
    else:
        # Coplanar: ((u0 + t*du)/rx)^2 + ((v0 + t*dv)/ry)^2 = 1
        qa = (du / rx)**2 + (dv / ry)**2
        qb = 2.0 * (u0 * du / rx**2 + v0 * dv / ry**2)
        qc = (u0 / rx)**2 + (v0 / ry)**2 - 1.0
        disc = qb * qb - 4.0 * qa * qc
        if disc < -PARAMETER:
            return []
        if disc <= PARAMETER:
            line_params = [-qb / (2.0 * qa)]
        else:
            root = math.sqrt(disc)
            line_params = [(-qb - root) / (2.0 * qa), (-qb + root) / (2.0 * qa)]

    results: list[IntersectionPair] = []
    for t in line_params:
        if not _line_accepts(line, t):
            continue
        u, v = u0 + t * du, v0 + t * dv
        s = _ellipse_parameter(ellipse, math.atan2(v / ry, u / rx))
        if s is not None:
            results.append((t, s))
    return results


def intersect(curve_a: Curve, curve_b: Curve) -> list[IntersectionPair]:
    """
    Intersect two curves.

    Args:
        curve_a: First curve
        curve_b: Second curve

    Returns:
        Zero or more (parameter_on_a, parameter_on_b) pairs, in no
        guaranteed order

    Raises:
        UnsupportedIntersectionError: For ellipse/ellipse pairs and unknown
            curve kinds
    """
    if isinstance(curve_a, Line) and isinstance(curve_b, Line):
        return intersect_lines(curve_a, curve_b)
    if isinstance(curve_a, Line) and isinstance(curve_b, Ellipse):
        return intersect_line_ellipse(curve_a, curve_b)
    if isinstance(curve_a, Ellipse) and isinstance(curve_b, Line):
        return [(s, t) for t, s in intersect_line_ellipse(curve_b, curve_a)]
    raise UnsupportedIntersectionError(
        f"Cannot intersect {type(curve_a).__name__} with {type(curve_b).__name__}"
    )
