"""
PyIDW Accessor implementation.

This module implements the xarray accessor that provides the .pyidw interface
on point collections, i.e. objects whose coordinates and data share a single
"points" dimension.
"""

import xarray as xr
import numpy as np
from typing import Union, Optional, Dict, Sequence, Callable, List

from ..coords import COORD_ALIASES, MAX_DIMENSIONS, infer_coord_names
from ..idw import IDW, DEFAULT_POWER


@xr.register_dataset_accessor("pyidw")
@xr.register_dataarray_accessor("pyidw")
class PyIDWAccessor:
    """
    xarray accessor for PyIDW functionality.

    This accessor provides methods for:
    - Building an IDW model from scattered point data
    - Interpolating scattered point data to a regular grid
    """

    def __init__(self, xarray_obj: Union[xr.Dataset, xr.DataArray]):
        self._obj = xarray_obj
        self._name = "pyidw"

    def model(self, var: Optional[str] = None, coords: Optional[Sequence[str]] = None) -> IDW:
        """
        Build an IDW model from the point collection.

        Parameters
        ----------
        var : str, optional
            Data variable holding the sample values. Required for a Dataset
            with more than one data variable; ignored for a DataArray.
        coords : sequence of str, optional
            Coordinate names in x, y, z order. If None, inferred from common
            coordinate names (x/lon, y/lat, z/height...).

        Returns
        -------
        IDW
            A model with the default configuration
        """
        data = self._select_data(var)

        if coords is None:
            coords = self._detect_point_coords(data)

        point_columns = []
        for coord in coords:
            if coord not in self._obj.coords:
                raise ValueError(f"Could not find coordinate '{coord}' in source data")
            if self._obj.coords[coord].dims != data.dims:
                raise ValueError(
                    f"Coordinate '{coord}' has dims {self._obj.coords[coord].dims}, "
                    f"expected the point dims {data.dims}"
                )
            point_columns.append(np.asarray(self._obj.coords[coord].values))

        return IDW(np.column_stack(point_columns), np.asarray(data.values))

    def to_grid(
        self,
        target_grid: Union[xr.Dataset, xr.DataArray, Dict[str, np.ndarray]],
        var: Optional[str] = None,
        coords: Optional[Sequence[str]] = None,
        power: float = DEFAULT_POWER,
        weight_fn: Optional[Callable[[float], float]] = None,
    ) -> xr.DataArray:
        """
        Interpolate the point collection to a regular grid.

        Parameters
        ----------
        target_grid : xr.Dataset, xr.DataArray, or dict
            The target grid definition
        var : str, optional
            Data variable to interpolate (see :meth:`model`)
        coords : sequence of str, optional
            Coordinate names in x, y, z order, shared by the source points
            and the target grid. If None, inferred separately for each.
        power : float, optional
            Power parameter (default: 2)
        weight_fn : callable, optional
            Transform applied to each raw weight

        Returns
        -------
        xr.DataArray
            The interpolated grid, named after the source variable
        """
        from ..utils.grid_from_points import grid_from_points

        model = self.model(var=var, coords=coords).power(power).weighted_function(weight_fn)
        name = self._select_data(var).name
        return grid_from_points(model, target_grid, coords=coords, name=name)

    def _select_data(self, var: Optional[str]) -> xr.DataArray:
        """Return the 1-D DataArray holding the sample values."""
        if isinstance(self._obj, xr.DataArray):
            data = self._obj
        else:
            if var is None:
                names = list(self._obj.data_vars)
                if len(names) != 1:
                    raise ValueError(
                        f"Dataset has data variables {names}; pass var to select one"
                    )
                var = names[0]
            if var not in self._obj.data_vars:
                raise ValueError(f"Could not find data variable '{var}' in Dataset")
            data = self._obj[var]

        if data.ndim != 1:
            raise ValueError(
                f"Point data must be 1-D along a points dimension, got dims {data.dims}"
            )
        return data

    def _detect_point_coords(self, data: xr.DataArray) -> List[str]:
        """Infer as many of the x, y, z coordinates as the point data carries."""
        names = [str(name) for name, coord in self._obj.coords.items() if coord.dims == data.dims]
        for ndim in range(MAX_DIMENSIONS, 1, -1):
            try:
                return infer_coord_names(names, ndim)
            except ValueError:
                continue

        # A single coordinate along any axis makes a 1-D model
        lowered = {name.lower(): name for name in names}
        for aliases in COORD_ALIASES:
            for alias in aliases:
                if alias in lowered:
                    return [lowered[alias]]

        raise ValueError(
            f"Could not find point coordinates along {data.dims} among {names}; "
            f"pass coords explicitly"
        )
