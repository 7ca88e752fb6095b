"""
Utility functions module for PyIDW.

This module contains helpers built on top of the IDW model:
- Evaluation onto regular grids labelled with xarray coordinates
"""

from .grid_from_points import grid_from_points  # noqa: F401
