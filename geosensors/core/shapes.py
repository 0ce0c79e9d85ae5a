from __future__ import annotations

"""Public shape/orientation utilities.

Conventions
-----------
- locations are 2D: (n_locations, 3) with columns (x, y, z)
- readings are 1D: (n_locations,)
- vector fields are 1D: (3,)

All helpers return float64 arrays that are C-contiguous and read-only, so value
objects built from them cannot be mutated in place after construction.
"""

from typing import Any, Optional

import numpy as np

LOCATION_COLUMNS = 3


def _frozen(arr: np.ndarray) -> np.ndarray:
    out = np.array(arr, dtype=np.float64, order="C", copy=True)
    out.setflags(write=False)
    return out


def empty_locations() -> np.ndarray:
    return _frozen(np.zeros((0, LOCATION_COLUMNS)))


def empty_readings() -> np.ndarray:
    return _frozen(np.zeros((0,)))


def coerce_locations(arr: Optional[Any]) -> np.ndarray:
    """Coerce a location table to a read-only 2D float array.

    - None or any empty input becomes a (0, 3) matrix.
    - A single 1D row of length 3 becomes (1, 3).
    - Any other 2D shape is kept as-is; the column count is a validation
      concern, not a construction one.
    """

    if arr is None:
        return empty_locations()

    a = np.asarray(arr, dtype=np.float64)
    if a.size == 0:
        return empty_locations()
    if a.ndim == 1:
        a = a[None, :]
    if a.ndim != 2:
        raise ValueError(f"locations must be 2D (n_locations, 3); got shape {a.shape}")
    return _frozen(a)


def coerce_readings(arr: Optional[Any]) -> np.ndarray:
    """Coerce readings to a read-only 1D float array (column tables are raveled)."""

    if arr is None:
        return empty_readings()

    a = np.asarray(arr, dtype=np.float64)
    if a.size == 0:
        return empty_readings()
    if a.ndim == 2 and 1 in a.shape:
        a = a.ravel()
    elif a.ndim == 0:
        a = a.reshape(1)
    if a.ndim != 1:
        raise ValueError(f"readings must be 1D (n_locations,); got shape {a.shape}")
    return _frozen(a)


def coerce_vector3(arr: Optional[Any]) -> np.ndarray:
    if arr is None:
        return _frozen(np.zeros(3))
    a = np.asarray(arr, dtype=np.float64).ravel()
    if a.shape != (3,):
        raise ValueError(f"expected a 3-vector; got shape {a.shape}")
    return _frozen(a)
