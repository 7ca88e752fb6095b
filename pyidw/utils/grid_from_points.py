"""
Grid from points utility function.

This module provides the grid_from_points function for evaluating an IDW
model on a regular grid.
"""

import xarray as xr
import numpy as np
from typing import Union, Optional, Dict, Sequence
import warnings

from pyidw.idw import IDW
from pyidw.coords import infer_coord_names
from pyidw.exceptions import DimensionMismatch


def grid_from_points(
    model: IDW,
    target_grid: Union[xr.Dataset, xr.DataArray, Dict[str, np.ndarray]],
    coords: Optional[Sequence[str]] = None,
    name: Optional[str] = None,
) -> xr.DataArray:
    """
    Evaluate an IDW model at every node of a regular grid.

    Parameters
    ----------
    model : IDW
        The model to evaluate
    target_grid : xr.Dataset, xr.DataArray, or dict
        The target grid definition. For xarray objects the 1-D coordinate
        variables are used; for dict, coordinate arrays like
        {'x': [...], 'y': [...]}.
    coords : sequence of str, optional
        Names of the grid coordinates in x, y, z order. One name per model
        dimension. If None, inferred from common coordinate names.
    name : str, optional
        Name of the returned DataArray

    Returns
    -------
    xr.DataArray
        Interpolated values with dimensions in reverse axis order, e.g.
        ``(y, x)`` for a 2-D model. Cells where the weights sum to zero
        are NaN.
    """
    if not isinstance(model, IDW):
        raise TypeError(f"model must be IDW, got {type(model)}")

    if isinstance(target_grid, dict):
        available = list(target_grid.keys())
    elif isinstance(target_grid, (xr.Dataset, xr.DataArray)):
        available = list(target_grid.coords)
    else:
        raise TypeError(
            f"target_grid must be xr.Dataset, xr.DataArray, or dict, "
            f"got {type(target_grid)}"
        )

    if coords is None:
        coords = infer_coord_names(available, model.ndim)
    coords = list(coords)

    if len(coords) != model.ndim:
        raise DimensionMismatch(
            f"Grid has {len(coords)} axes but the model has {model.ndim} dimensions"
        )

    axes = []
    for coord in coords:
        if coord not in available:
            raise ValueError(f"Could not find coordinate '{coord}' in target_grid")
        axis = np.asarray(target_grid[coord], dtype=float)
        if axis.ndim != 1:
            raise ValueError(f"Coordinate '{coord}' must be 1-D, got shape {axis.shape}")
        axes.append(axis)

    # Build the nodes with the last coordinate varying slowest, so the
    # result reshapes to (..., y, x)
    mesh = np.meshgrid(*axes[::-1], indexing='ij')
    nodes = np.column_stack([m.ravel() for m in mesh[::-1]])
    shape = tuple(len(axis) for axis in axes[::-1])

    values = model.evaluate_many(nodes).reshape(shape)

    n_nan = int(np.isnan(values).sum())
    if n_nan:
        warnings.warn(
            f"{n_nan} grid cells are NaN because their weights sum to zero "
            f"(or the sample values contain NaN).",
            UserWarning
        )

    dims = coords[::-1]
    result = xr.DataArray(
        values,
        dims=dims,
        coords={dim: axis for dim, axis in zip(dims, axes[::-1])},
        name=name,
    )

    result.attrs["interpolation_method"] = "idw"
    result.attrs["power"] = model.power_parameter
    result.attrs["n_points"] = len(model)

    return result
