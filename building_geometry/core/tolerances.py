"""Tolerance constants for geometric calculations.

Centralizes all tolerance values used throughout the codebase for
consistency and easy tuning. Lengths are in feet, the host's internal unit.
"""

# Zero vector detection threshold
# Vectors with magnitude below this are considered zero-length
ZERO_MAGNITUDE: float = 1e-10

# Vertical face tolerance on the Z component of a face normal (or axis)
# Matches the host utility epsilon used for IsZero() comparisons
VERTICAL_FACE: float = 1e-9

# Endpoint join lattice spacing: 0.1 mm expressed in feet
# Endpoints that round to the same lattice cell are treated as joined
JOIN_GRID: float = 0.1 / 304.8

# Parameter comparison tolerance for intersection results
PARAMETER: float = 1e-9

# Distance tolerance for deciding a point lies on a curve or plane
POINT_ON_CURVE: float = 1e-9

# Shortest allowed curve span (also duplicated in models/curves.py)
MIN_CURVE_LENGTH: float = 1e-9
