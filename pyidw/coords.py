"""
Coordinate handling module.

This module normalizes sample points and query positions of 1, 2 or 3
dimensions to float arrays and computes the distances used by the
interpolation engine.
"""

import numpy as np
from typing import Any, List, Optional, Sequence
from scipy.spatial.distance import cdist

from .exceptions import InvalidInput, DimensionMismatch

MAX_DIMENSIONS = 3

# Common names for the x, y and z axes, in order of preference
COORD_ALIASES = (
    ('x', 'lon', 'longitude'),
    ('y', 'lat', 'latitude'),
    ('z', 'height', 'depth', 'level', 'elevation'),
)


def _numeric_array(obj: Any, error: type, what: str) -> np.ndarray:
    """Copy ``obj`` to a float array, rejecting None and non-numeric entries."""
    try:
        raw = np.asarray(obj)
    except (TypeError, ValueError) as err:
        raise error(f"{what} must be numeric with a consistent dimensionality: {err}") from err

    # None and strings would otherwise turn into NaN or raise deep inside numpy
    if raw.size and raw.dtype.kind not in "biuf":
        raise error(f"{what} must be numeric, got {raw.dtype} data")
    return np.array(raw, dtype=float)


def as_points(points: Any) -> np.ndarray:
    """
    Convert a sequence of sample points to an ``(n, d)`` float array.

    Parameters
    ----------
    points : sequence or np.ndarray
        Scalars for 1-D data, pairs for 2-D data or triples for 3-D data.
        Arrays of shape ``(n,)`` or ``(n, d)`` are accepted as well.

    Returns
    -------
    np.ndarray
        Array of shape ``(n, d)`` with ``1 <= d <= 3``

    Raises
    ------
    InvalidInput
        If the points are ragged, non-numeric, non-finite, empty, or have
        an unsupported number of dimensions.
    """
    arr = _numeric_array(points, InvalidInput, "Points")

    if arr.ndim == 1:
        arr = arr.reshape(-1, 1)
    elif arr.ndim != 2:
        raise InvalidInput(f"Points must be scalars or coordinate tuples, got an array of shape {arr.shape}")

    if arr.shape[0] == 0:
        raise InvalidInput("At least one sample point is required")

    if not 1 <= arr.shape[1] <= MAX_DIMENSIONS:
        raise InvalidInput(
            f"Points must have between 1 and {MAX_DIMENSIONS} dimensions, got {arr.shape[1]}"
        )

    if not np.isfinite(arr).all():
        raise InvalidInput("Point coordinates must be finite")

    return arr


def as_position(position: Any, ndim: int) -> np.ndarray:
    """Convert a single query position to a ``(ndim,)`` float array."""
    arr = _numeric_array(position, DimensionMismatch, f"Position of a {ndim}-D model")

    if arr.ndim == 0:
        arr = arr.reshape(1)

    if arr.shape != (ndim,):
        raise DimensionMismatch(
            f"Position has shape {arr.shape}, expected a {ndim}-D coordinate"
        )
    return arr


def as_positions(positions: Any, ndim: int) -> np.ndarray:
    """
    Convert a batch of query positions to an ``(m, ndim)`` float array.

    A flat sequence is only accepted for 1-D models, where each entry is
    one position.
    """
    arr = _numeric_array(positions, DimensionMismatch, f"Positions of a {ndim}-D model")

    if arr.ndim == 1 and ndim == 1:
        arr = arr.reshape(-1, 1)

    if arr.ndim != 2 or arr.shape[1] != ndim:
        raise DimensionMismatch(
            f"Positions have shape {arr.shape}, expected (m, {ndim})"
        )
    return arr


def distances(positions: np.ndarray, points: np.ndarray) -> np.ndarray:
    """
    Distance from every query position to every sample point.

    Parameters
    ----------
    positions : np.ndarray
        Query positions of shape ``(m, d)``
    points : np.ndarray
        Sample points of shape ``(n, d)``

    Returns
    -------
    np.ndarray
        Distances of shape ``(m, n)``. The 1-D case is the plain absolute
        difference; 2-D and 3-D use the Euclidean norm.
    """
    if points.shape[1] == 1:
        return np.abs(positions[:, 0][:, None] - points[:, 0][None, :])
    return cdist(positions, points, metric='euclidean')


def infer_coord_names(names: Sequence[Any], ndim: int) -> List[str]:
    """
    Pick the x, y and z coordinate names (first ``ndim`` of them) from a
    collection of names using common aliases.
    """
    available = [str(name) for name in names]
    lowered = {name.lower(): name for name in available}

    selected = []
    for axis in range(ndim):
        found: Optional[str] = None
        for alias in COORD_ALIASES[axis]:
            if alias in lowered:
                found = lowered[alias]
                break
        if found is None:
            raise ValueError(
                f"Could not find a coordinate for axis {axis} among {available}; "
                f"pass the coordinate names explicitly"
            )
        selected.append(found)
    return selected
