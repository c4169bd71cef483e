"""Direction angles of linear elements relative to project axes.

All results are radians. The reference axis defaults to project east
(+X) and the up axis to +Z.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass

from ..models.elements import LinearElementLike
from ..models.types import BASIS_X, BASIS_Z, GeometryError, Point3D, Vector3D
from .batch import BatchResult, process_elements
from .curve_trimming import endpoints
from .geometry import (
    angle_between,
    angle_on_plane,
    cross_product,
    magnitude,
    negate,
    normalize,
    subtract,
)
from .tolerances import ZERO_MAGNITUDE


class NoCurveError(GeometryError):
    """Raised when an element has no curve-valued location."""

    pass


@dataclass(frozen=True, slots=True)
class AzimuthResult:
    """Angles describing the direction of one linear element."""

    element_id: Hashable
    start: Point3D
    end: Point3D
    angle_from_axis: float
    angle_around: float
    facing: float | None = None
    position_angle: float | None = None


def angle_from_axis(p: Point3D, q: Point3D, reference_axis: Vector3D = BASIS_X) -> float:
    """Unsigned angle between the reference axis and the direction p -> q."""
    return angle_between(reference_axis, subtract(q, p))


def angle_around_axis(
    p: Point3D,
    q: Point3D,
    reference_axis: Vector3D = BASIS_X,
    up_axis: Vector3D = BASIS_Z,
) -> float:
    """Azimuth of p -> q measured counter-clockwise around the up axis."""
    return angle_on_plane(reference_axis, subtract(q, p), up_axis)


def facing_angle(
    p: Point3D,
    q: Point3D,
    flipped: bool,
    reference_axis: Vector3D = BASIS_X,
    up_axis: Vector3D = BASIS_Z,
) -> float:
    """
    Azimuth of the direction pointing out of an oriented element.

    The outward direction is ``up x (q - p)``, reversed when the element
    is flipped.

    Raises:
        DegenerateVectorError: If p -> q is parallel to the up axis
    """
    w = normalize(cross_product(up_axis, subtract(q, p)))
    if flipped:
        w = negate(w)
    return angle_on_plane(reference_axis, w, up_axis)


def _position_angle(p: Point3D, q: Point3D) -> float | None:
    # Angle between the position vectors from the project origin
    if magnitude(p) < ZERO_MAGNITUDE or magnitude(q) < ZERO_MAGNITUDE:
        return None
    return angle_between(p, q)


def calculate_azimuth(
    element: LinearElementLike,
    reference_axis: Vector3D = BASIS_X,
    up_axis: Vector3D = BASIS_Z,
    include_facing: bool = True,
) -> AzimuthResult:
    """
    Calculate the direction angles of a linear element.

    Args:
        element: Element with a bound location curve
        reference_axis: Axis angles are measured from
        up_axis: Axis the azimuth is measured around
        include_facing: Also report the facing angle when the element
            exposes a flip flag

    Returns:
        AzimuthResult with all angles in radians

    Raises:
        NoCurveError: If the element has no location curve
        UnboundCurveError: If the location curve is unbound
    """
    curve = element.location
    if curve is None:
        raise NoCurveError(f"Element {element.element_id!r} has no location curve")

    p, q = endpoints(curve)
    facing: float | None = None
    flipped = getattr(element, 'flipped', None)
    if include_facing and flipped is not None:
        facing = facing_angle(p, q, flipped, reference_axis, up_axis)

    return AzimuthResult(
        element_id=element.element_id,
        start=p,
        end=q,
        angle_from_axis=angle_from_axis(p, q, reference_axis),
        angle_around=angle_around_axis(p, q, reference_axis, up_axis),
        facing=facing,
        position_angle=_position_angle(p, q),
    )


def calculate_azimuths(
    elements: Iterable[LinearElementLike],
    reference_axis: Vector3D = BASIS_X,
    up_axis: Vector3D = BASIS_Z,
    include_facing: bool = True,
) -> BatchResult[AzimuthResult]:
    """Calculate azimuths for many elements, collecting per-element failures."""
    return process_elements(
        elements,
        lambda element: calculate_azimuth(element, reference_axis, up_axis, include_facing),
    )
