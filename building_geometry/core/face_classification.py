"""Vertical ("side") face classification for solids.

Only planar and cylindrical faces are judged. Any other face kind a host
hands over is skipped rather than treated as an error.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..lib.hostAddInUtils import log
from ..models.faces import Face, PlanarFace, CylindricalFace, Solid
from ..models.types import Vector3D
from .formatting import format_side_face_count
from .tolerances import VERTICAL_FACE


def _is_horizontal_direction(v: Vector3D, tolerance: float) -> bool:
    """A direction lying in the XY plane within tolerance."""
    return abs(v[2]) <= tolerance


def is_vertical(face: Face | object, tolerance: float = VERTICAL_FACE) -> bool | None:
    """
    Determine whether a boundary face is vertical.

    A planar face is vertical when its normal is horizontal. A cylindrical
    face applies the same test to its axis.

    Args:
        face: Face to classify
        tolerance: Largest allowed absolute Z component (inclusive)

    Returns:
        True or False for planar and cylindrical faces,
        None for face kinds that are not classified
    """
    if isinstance(face, PlanarFace):
        return _is_horizontal_direction(face.normal, tolerance)
    if isinstance(face, CylindricalFace):
        return _is_horizontal_direction(face.axis, tolerance)
    return None


def collect_vertical_faces(solid: Solid, tolerance: float = VERTICAL_FACE) -> list[Face]:
    """Return the vertical faces of a solid in the solid's face order."""
    vertical: list[Face] = []
    for face in solid:
        result = is_vertical(face, tolerance)
        if result is None:
            log(f"Skipping unsupported face kind {type(face).__name__}", logging.DEBUG)
        elif result:
            vertical.append(face)
    return vertical


def collect_side_faces(solids: Iterable[Solid], tolerance: float = VERTICAL_FACE) -> list[Face]:
    """
    Collect the vertical faces of several solids, e.g. all solids of a slab.

    Args:
        solids: Solids in host geometry order
        tolerance: Vertical tolerance passed to is_vertical()

    Returns:
        Vertical faces, solid by solid, each in face order
    """
    faces: list[Face] = []
    for solid in solids:
        faces.extend(collect_vertical_faces(solid, tolerance))
    log(format_side_face_count(len(faces)))
    return faces
