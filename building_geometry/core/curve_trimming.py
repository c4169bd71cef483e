"""Curve endpoint extraction and trimming.

Trimming never mutates the curve it is given; it returns a new bound
curve (or the original when there is nothing to trim).
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from ..models.curves import Curve, UnboundCurveError
from ..models.types import Point3D
from .intersection import IntersectionPair, intersect
from .tolerances import MIN_CURVE_LENGTH


def endpoints(curve: Curve) -> tuple[Point3D, Point3D]:
    """
    Extract the start and end points of a bound curve.

    Args:
        curve: A bound Line or Ellipse

    Returns:
        Tuple of (start_point, end_point) in parameter order

    Raises:
        UnboundCurveError: If the curve has no domain
    """
    if curve.domain is None:
        raise UnboundCurveError(
            f"{type(curve).__name__} is unbound and has no endpoints"
        )
    t0, t1 = curve.domain
    return curve.evaluate(t0), curve.evaluate(t1)


def upper_bound(curve: Curve, domain_start: float) -> float:
    """Current upper parameter bound of a curve trimmed from domain_start."""
    if curve.domain is not None:
        return curve.domain[1]
    if curve.period is not None:
        return domain_start + curve.period
    return math.inf


def trim_to_shortest(
    curve: Curve,
    domain_start: float,
    intersections: Iterable[IntersectionPair],
) -> Curve:
    """
    Bind a curve to the shortest span starting at domain_start.

    Among the intersection parameters on this curve (the first element of
    each pair), picks the smallest one lying at least MIN_CURVE_LENGTH
    above domain_start and below the current upper bound. On an unbound
    periodic curve each parameter is first shifted by whole periods into
    the window that starts at domain_start.

    Args:
        curve: Curve to trim
        domain_start: Start parameter of the resulting domain
        intersections: Pairs as returned by intersect(curve, other)

    Returns:
        New curve bound to [domain_start, selected]. When no parameter
        qualifies the curve is returned unchanged.
    """
    end = upper_bound(curve, domain_start)
    selected = end
    wrap = curve.period if curve.domain is None else None
    for param, _ in intersections:
        if wrap is not None:
            param = domain_start + (param - domain_start) % wrap
        # A hit this close to either bound would leave a zero-length span
        if param - domain_start < MIN_CURVE_LENGTH or end - param < MIN_CURVE_LENGTH:
            continue
        if param < selected:
            selected = param
    if selected == end:
        return curve
    return curve.make_bound(domain_start, selected)


def bound_by_intersection(curve: Curve, other: Curve, domain_start: float = 0.0) -> Curve:
    """
    Trim a curve where it first meets another curve after domain_start.

    For example, an ellipse bounded by a ray from its center becomes an
    elliptical arc ending on the ray.
    """
    return trim_to_shortest(curve, domain_start, intersect(curve, other))
