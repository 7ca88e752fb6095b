"""
Tests for the grid_from_points utility.
This module checks evaluation of IDW models onto regular grids.
"""

import pytest
import numpy as np
import xarray as xr

from pyidw import IDW, DimensionMismatch, grid_from_points


class TestGridFromPoints:
    """Test grid_from_points function."""

    def test_dict_grid_2d(self, unit_square_model):
        """A dict of axes gives a (y, x) DataArray."""
        result = grid_from_points(
            unit_square_model,
            {'x': np.linspace(0, 1, 3), 'y': np.array([0.0, 1.0])},
            name='field'
        )

        assert isinstance(result, xr.DataArray)
        assert result.dims == ('y', 'x')
        assert result.shape == (2, 3)
        assert result.name == 'field'
        np.testing.assert_array_equal(result['x'].values, [0.0, 0.5, 1.0])

    def test_grid_nodes_match_evaluate(self, unit_square_model):
        """Every grid cell equals evaluate() at its node."""
        xs = np.array([-0.5, 0.25, 1.0])
        ys = np.array([0.0, 0.6])
        result = grid_from_points(unit_square_model, {'x': xs, 'y': ys})

        for j, y in enumerate(ys):
            for i, x in enumerate(xs):
                assert result.values[j, i] == unit_square_model.evaluate((x, y))

        assert float(result.sel(x=1.0, y=0.0)) == 1.0

    def test_dataset_grid_with_inferred_names(self, unit_square_model):
        """lon/lat coordinates of a Dataset are picked up automatically."""
        target = xr.Dataset(
            coords={
                'lon': (['lon'], np.linspace(0, 1, 4)),
                'lat': (['lat'], np.linspace(0, 1, 2))
            }
        )

        result = grid_from_points(unit_square_model, target)

        assert result.dims == ('lat', 'lon')
        assert result.shape == (2, 4)
        assert result.attrs['interpolation_method'] == 'idw'
        assert result.attrs['power'] == 2.0
        assert result.attrs['n_points'] == 4

    def test_explicit_coords(self, unit_square_model):
        """Coordinate names can be given in x, y order."""
        grid = {'east': np.array([0.0, 1.0]), 'north': np.array([0.0, 0.5, 1.0])}
        result = grid_from_points(unit_square_model, grid, coords=['east', 'north'])

        assert result.dims == ('north', 'east')
        assert float(result.sel(east=0.0, north=1.0)) == 2.0

    def test_grid_1d(self, line_model):
        """A 1-D model evaluates along a single axis."""
        result = grid_from_points(line_model.power(0.5), {'x': np.array([0.0, 2.0, 4.0])})

        assert result.dims == ('x',)
        np.testing.assert_allclose(result.values, [1.814988, 2.0, 2.185011], rtol=1e-6)
        assert result.attrs['power'] == 0.5

    def test_grid_3d(self, diagonal_model_3d):
        """A 3-D model gives a (z, y, x) DataArray."""
        grid = {
            'x': np.array([0.0, 1.0]),
            'y': np.array([0.0, 1.0, 2.0]),
            'z': np.array([1.0, 2.0, 3.0, 4.0])
        }
        result = grid_from_points(diagonal_model_3d, grid)

        assert result.dims == ('z', 'y', 'x')
        assert result.shape == (4, 3, 2)
        assert float(result.sel(x=1.0, y=1.0, z=1.0)) == 1.0
        assert float(result.sel(x=0.0, y=0.0, z=4.0)) == pytest.approx(
            diagonal_model_3d.evaluate((0.0, 0.0, 4.0))
        )

    def test_axes_must_match_model(self, unit_square_model):
        """The number of axes must equal the model dimensionality."""
        with pytest.raises(DimensionMismatch):
            grid_from_points(unit_square_model, {'x': np.array([0.0])}, coords=['x'])

    def test_missing_coordinate(self, unit_square_model):
        """Unknown coordinate names are rejected."""
        with pytest.raises(ValueError, match="Could not find coordinate"):
            grid_from_points(unit_square_model, {'x': [0.0], 'y': [0.0]}, coords=['x', 'v'])

    def test_invalid_target_grid_type(self, unit_square_model):
        """Unsupported grid containers raise TypeError."""
        with pytest.raises(TypeError, match="target_grid must be"):
            grid_from_points(unit_square_model, [[0.0, 1.0], [0.0, 1.0]])

    def test_invalid_model_type(self):
        """Only IDW models can be evaluated."""
        with pytest.raises(TypeError, match="model must be IDW"):
            grid_from_points(object(), {'x': [0.0]})

    def test_nan_cells_warn(self):
        """Cells with a zero weight sum are NaN and reported."""
        model = IDW([0.0, 1.0], [0.0, 1.0]).weighted_function(lambda w: 0.0)

        with pytest.warns(UserWarning, match="2 grid cells are NaN"):
            result = grid_from_points(model, {'x': np.array([0.25, 0.5, 1.0])})

        assert np.isnan(result.values[:2]).all()
        assert result.values[2] == 1.0

    def test_dataarray_grid(self, unit_square_model):
        """The coordinates of a DataArray template define the grid."""
        template = xr.DataArray(
            np.zeros((2, 3)),
            dims=['y', 'x'],
            coords={'x': [0.0, 0.5, 1.0], 'y': [0.0, 1.0]}
        )

        result = grid_from_points(unit_square_model, template)

        assert result.dims == ('y', 'x')
        assert result.shape == (2, 3)
        assert float(result.sel(x=0.0, y=1.0)) == 2.0
        assert float(result.sel(x=0.5, y=0.0)) == pytest.approx(
            unit_square_model.evaluate((0.5, 0.0))
        )
