"""Core geometry algorithms."""

from .geometry import (
    is_zero,
    add,
    subtract,
    scale,
    negate,
    cross_product,
    dot_product,
    magnitude,
    normalize,
    angle_between,
    angle_on_plane,
    distance_between_points,
    points_are_close,
)
from .face_classification import (
    is_vertical,
    collect_vertical_faces,
    collect_side_faces,
)
from .intersection import (
    UnsupportedIntersectionError,
    intersect,
    intersect_lines,
    intersect_line_ellipse,
)
from .curve_trimming import (
    endpoints,
    trim_to_shortest,
    bound_by_intersection,
)
from .neighbor_graph import (
    NeighborGraph,
    quantize_point,
    build_neighbor_graph,
    neighbors_at,
    shared_endpoint_index,
)
from .azimuth import (
    NoCurveError,
    AzimuthResult,
    angle_from_axis,
    angle_around_axis,
    facing_angle,
    calculate_azimuth,
    calculate_azimuths,
)
from .batch import (
    ElementFailure,
    BatchResult,
    process_elements,
)
from .formatting import (
    real_string,
    angle_string,
    point_string,
    plural_suffix,
    dot_or_colon,
    format_neighbor_report,
    format_azimuth_report,
    format_side_face_count,
)
from .tolerances import (
    ZERO_MAGNITUDE,
    VERTICAL_FACE,
    JOIN_GRID,
    PARAMETER,
    POINT_ON_CURVE,
    MIN_CURVE_LENGTH,
)

__all__ = [
    # Geometry
    'is_zero',
    'add',
    'subtract',
    'scale',
    'negate',
    'cross_product',
    'dot_product',
    'magnitude',
    'normalize',
    'angle_between',
    'angle_on_plane',
    'distance_between_points',
    'points_are_close',
    # Face classification
    'is_vertical',
    'collect_vertical_faces',
    'collect_side_faces',
    # Intersection and trimming
    'UnsupportedIntersectionError',
    'intersect',
    'intersect_lines',
    'intersect_line_ellipse',
    'endpoints',
    'trim_to_shortest',
    'bound_by_intersection',
    # Neighbor graph
    'NeighborGraph',
    'quantize_point',
    'build_neighbor_graph',
    'neighbors_at',
    'shared_endpoint_index',
    # Azimuth
    'NoCurveError',
    'AzimuthResult',
    'angle_from_axis',
    'angle_around_axis',
    'facing_angle',
    'calculate_azimuth',
    'calculate_azimuths',
    # Batch
    'ElementFailure',
    'BatchResult',
    'process_elements',
    # Formatting
    'real_string',
    'angle_string',
    'point_string',
    'plural_suffix',
    'dot_or_colon',
    'format_neighbor_report',
    'format_azimuth_report',
    'format_side_face_count',
    # Tolerances
    'ZERO_MAGNITUDE',
    'VERTICAL_FACE',
    'JOIN_GRID',
    'PARAMETER',
    'POINT_ON_CURVE',
    'MIN_CURVE_LENGTH',
]
