"""
PyIDW: Inverse Distance Weighting interpolation of scattered data.

This library provides:
- The IDW model for 1-D, 2-D and 3-D scattered points, with a configurable
  power parameter and an optional weight transform
- Batch evaluation and evaluation onto regular xarray grids
- An xarray accessor (.pyidw) on point datasets

Basic usage::

    from pyidw import IDW

    idw = IDW([(0.0, 0.0), (1.0, 1.0)], [0.0, 1.0]).power(2.0)
    idw.evaluate((0.5, 0.5))
"""

__version__ = "0.1.0"

from .exceptions import InvalidInput, DimensionMismatch  # noqa: F401
from .idw import IDW, DEFAULT_POWER  # noqa: F401
from .utils.grid_from_points import grid_from_points  # noqa: F401

# Importing the accessor module registers .pyidw on xarray objects
from .accessors import PyIDWAccessor  # noqa: F401

# Public API
__all__ = [
    "IDW",
    "DEFAULT_POWER",
    "InvalidInput",
    "DimensionMismatch",
    "grid_from_points",
    "PyIDWAccessor",
]
