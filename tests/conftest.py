"""
Test fixtures for PyIDW library.

This module contains shared test fixtures for creating common sample sets
used throughout the test suite.
"""

import pytest
import numpy as np
import xarray as xr

from pyidw import IDW


@pytest.fixture
def line_model():
    """1-D model with points and values [1, 2, 3]."""
    return IDW([1.0, 2.0, 3.0], [1.0, 2.0, 3.0])


@pytest.fixture
def diagonal_model_2d():
    """2-D model with points on the diagonal and values [1, 2, 3]."""
    return IDW([(1.0, 1.0), (2.0, 2.0), (3.0, 3.0)], [1.0, 2.0, 3.0])


@pytest.fixture
def diagonal_model_3d():
    """3-D model with points on the diagonal and values [1, 2, 3]."""
    return IDW([(1.0, 1.0, 1.0), (2.0, 2.0, 2.0), (3.0, 3.0, 3.0)], [1.0, 2.0, 3.0])


@pytest.fixture
def unit_square_model():
    """2-D model with the corners of the unit square as sample points."""
    points = [(0.0, 0.0), (1.0, 0.0), (0.0, 1.0), (1.0, 1.0)]
    return IDW(points, [0.0, 1.0, 2.0, 3.0])


@pytest.fixture
def station_dataset():
    """Scattered station observations as an xarray Dataset."""
    return xr.Dataset(
        {
            'temperature': (['points'], np.array([20.0, 25.0, 30.0])),
        },
        coords={
            'lon': (['points'], np.array([-5.0, 0.0, 5.0])),
            'lat': (['points'], np.array([42.0, 45.0, 48.0])),
        }
    )
