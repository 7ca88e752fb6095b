"""
Inverse Distance Weighting module.

This module provides the IDW class, which estimates the value at a query
position as the weighted average of scattered sample values, with weights
``1 / distance ** power``.
"""

import copy
import warnings
import numpy as np
import pandas as pd
from typing import Any, Callable, Optional, Sequence

from .coords import as_points, as_position, as_positions, distances
from .exceptions import InvalidInput

DEFAULT_POWER = 2.0


class IDW:
    """
    Inverse Distance Weighting interpolator over 1-D, 2-D or 3-D points.

    The weight of sample ``i`` for a query position is
    ``1 / distance(point_i, position) ** power``, optionally passed through
    a user transform set with :meth:`weighted_function`. The power defaults
    to 2 and can be set with :meth:`power`.

    Configuration calls return a new model and leave the original
    untouched, so a constructed model can be shared between threads.

    Examples
    --------
    >>> IDW([0.0, 1.0], [0.0, 1.0]).evaluate(0.5)
    0.5
    >>> IDW([(0, 0, 0), (1, 1, 1)], [0, 1]).evaluate((0.5, 0.5, 0.5))
    0.5
    """

    def __init__(self, points: Any, values: Any):
        """
        Initialize the model.

        Parameters
        ----------
        points : sequence or np.ndarray
            Sample points: scalars (1-D), pairs (2-D) or triples (3-D)
        values : sequence or np.ndarray
            Value associated with each point, in the same order

        Raises
        ------
        InvalidInput
            If there are no points, the points are malformed, or points and
            values have different lengths.
        """
        points_arr = as_points(points)

        try:
            values_arr = np.array(values, dtype=float)
        except (TypeError, ValueError) as err:
            raise InvalidInput(f"Values must be numeric: {err}") from err

        if values_arr.ndim != 1:
            raise InvalidInput(f"Values must be a flat sequence, got an array of shape {values_arr.shape}")

        if len(points_arr) != len(values_arr):
            raise InvalidInput(
                f"Points and values must have the same length, "
                f"got {len(points_arr)} points and {len(values_arr)} values"
            )

        # Duplicates are kept; the first one wins on an exact match
        n_unique = len(np.unique(points_arr, axis=0))
        if n_unique != len(points_arr):
            warnings.warn(
                f"Found {len(points_arr) - n_unique} duplicate points in source data. "
                f"The value of the first occurrence is returned at those positions.",
                UserWarning
            )

        points_arr.setflags(write=False)
        values_arr.setflags(write=False)

        self._points = points_arr
        self._values = values_arr
        self._power = DEFAULT_POWER
        self._weight_fn: Optional[Callable[[float], float]] = None

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame, coords: Sequence[str], value: str) -> "IDW":
        """
        Build a model from the columns of a DataFrame.

        Parameters
        ----------
        df : pandas.DataFrame
            Table with one row per sample
        coords : sequence of str
            Names of the coordinate columns, in x, y, z order
        value : str
            Name of the value column

        Returns
        -------
        IDW
            A model with the default configuration
        """
        if not isinstance(df, pd.DataFrame):
            raise TypeError(f"df must be pandas.DataFrame, got {type(df)}")

        columns = list(coords) + [value]
        missing = [col for col in columns if col not in df.columns]
        if missing:
            raise InvalidInput(f"Columns {missing} not found in DataFrame")

        return cls(df[list(coords)].to_numpy(), df[value].to_numpy())

    def power(self, power: float) -> "IDW":
        """
        Return a copy of the model using ``power`` as the distance exponent.

        Any real value is accepted. A power of 0 makes every weight 1, so
        evaluation degrades to the arithmetic mean of the values.
        """
        model = copy.copy(self)
        model._power = float(power)
        return model

    def weighted_function(self, func: Optional[Callable[[float], float]]) -> "IDW":
        """
        Return a copy of the model that transforms each raw weight with ``func``.

        ``func`` receives ``1 / distance ** power`` for one sample and returns
        the weight actually used. It is called once per sample and query, so
        it has to be pure. ``None`` removes the transform.
        """
        if func is not None and not callable(func):
            raise TypeError(f"func must be callable, got {type(func)}")

        model = copy.copy(self)
        model._weight_fn = func
        return model

    @property
    def points(self) -> np.ndarray:
        """Sample points as a read-only ``(n, d)`` array."""
        return self._points

    @property
    def values(self) -> np.ndarray:
        return self._values

    @property
    def ndim(self) -> int:
        return self._points.shape[1]

    @property
    def power_parameter(self) -> float:
        return self._power

    @property
    def weight_fn(self) -> Optional[Callable[[float], float]]:
        return self._weight_fn

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return (
            f"IDW(n_points={len(self)}, ndim={self.ndim}, power={self._power}, "
            f"weight_fn={'set' if self._weight_fn is not None else None})"
        )

    def evaluate(self, position: Any) -> float:
        """
        Calculate the interpolated value at a position.

        Parameters
        ----------
        position : float or tuple
            Query position with the dimensionality of the sample points

        Returns
        -------
        float
            The interpolated value. If the position coincides with a sample
            point, that sample's value is returned as is. The result is NaN
            when the weights sum to zero, which can happen with an extreme
            power or weight transform; callers should check for it.

        Raises
        ------
        DimensionMismatch
            If the position does not match the model's dimensionality.
        """
        query = as_position(position, self.ndim)
        row = distances(query[None, :], self._points)[0]
        return self._weighted_average(row)

    def evaluate_many(self, positions: Any) -> np.ndarray:
        """
        Calculate the interpolated value at many positions.

        Parameters
        ----------
        positions : sequence or np.ndarray
            Array of shape ``(m, d)``, or ``(m,)`` for a 1-D model

        Returns
        -------
        np.ndarray
            Array of shape ``(m,)``; entry ``k`` equals ``evaluate(positions[k])``
        """
        queries = as_positions(positions, self.ndim)
        dist = distances(queries, self._points)
        return np.array([self._weighted_average(row) for row in dist], dtype=float)

    def _weighted_average(self, dist: np.ndarray) -> float:
        """Weighted average of the sample values for one row of distances."""
        exact = np.flatnonzero(dist == 0.0)
        if exact.size:
            return float(self._values[exact[0]])

        # A zero weight sum yields NaN
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            weights = 1.0 / dist ** self._power
            if self._weight_fn is not None:
                weights = np.array([self._weight_fn(w) for w in weights.tolist()], dtype=float)
            return float(np.sum(weights * self._values) / np.sum(weights))
