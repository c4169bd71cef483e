"""Value types for building-model geometry."""

from .types import (
    Point3D,
    Vector3D,
    EndpointIndex,
    ORIGIN,
    BASIS_X,
    BASIS_Y,
    BASIS_Z,
    GeometryError,
    DegenerateVectorError,
)
from .curves import (
    Curve,
    Line,
    Ellipse,
    DegenerateCurveError,
    UnboundCurveError,
)
from .faces import Face, PlanarFace, CylindricalFace, Solid
from .elements import LinearElement, LinearElementLike

__all__ = [
    # Types
    'Point3D',
    'Vector3D',
    'EndpointIndex',
    'ORIGIN',
    'BASIS_X',
    'BASIS_Y',
    'BASIS_Z',
    'GeometryError',
    'DegenerateVectorError',
    # Curves
    'Curve',
    'Line',
    'Ellipse',
    'DegenerateCurveError',
    'UnboundCurveError',
    # Faces
    'Face',
    'PlanarFace',
    'CylindricalFace',
    'Solid',
    # Elements
    'LinearElement',
    'LinearElementLike',
]
