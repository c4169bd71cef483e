"""building_geometry - geometry core for building-model add-ins.

Face classification, endpoint neighbor graphs, azimuth angles and curve
trimming over plain value types. Host adapters translate their native
objects into ``models`` values and present the results.
"""

from . import core
from . import models

__all__ = ['core', 'models']
