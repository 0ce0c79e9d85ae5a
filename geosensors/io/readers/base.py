from __future__ import annotations

"""Reader contracts and the sensor table rules applied to every reader.

A location table has one row per sensor and three columns (x, y, z); a
single 1-D row is accepted for a one-sensor survey. A reading table is a
single column (or a single row) with one value per sensor. Empty files are
empty tables of either kind.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Optional, Protocol, Union

import numpy as np

from geosensors.core.shapes import LOCATION_COLUMNS
from geosensors.errors import MalformedTable

PathLike = Union[str, Path]
TableKind = Literal["locations", "readings"]


@dataclass
class LoadedTable:
    """Parsed numeric table, optionally with column names and its source path."""

    array: np.ndarray
    column_names: Optional[list[str]] = None
    path: Optional[Path] = None


class TableReader(Protocol):
    """The table-reader collaborator used by sensor parsing.

    ``kind`` is passed as a keyword so format readers can pick the matching
    table (e.g. an HDF5 dataset); readers are free to ignore it.
    """

    def read(self, path: PathLike, **kwargs) -> LoadedTable: ...


def coerce_numeric_table(arr, *, path: PathLike) -> np.ndarray:
    """Return ``arr`` as a contiguous float64 array of at most two dimensions.

    Non-numeric cells and missing values (NaN) are rejected.
    """

    a = np.asarray(arr)
    if a.dtype == object or not np.issubdtype(a.dtype, np.number):
        try:
            a = a.astype(np.float64)
        except (TypeError, ValueError) as e:
            raise MalformedTable(path, f"non-numeric values (dtype={a.dtype})") from e
    a = np.ascontiguousarray(a, dtype=np.float64)

    if a.ndim > 2:
        raise MalformedTable(path, f"expected a 1-D or 2-D table; got shape {a.shape}")
    n_nan = int(np.isnan(a).sum())
    if n_nan:
        raise MalformedTable(path, f"{n_nan} missing/non-numeric cell(s)")
    return a


def check_table_shape(arr: np.ndarray, *, kind: TableKind, path: PathLike) -> np.ndarray:
    """Enforce the location/reading table layout; returns ``arr`` unchanged."""

    a = np.asarray(arr)
    if a.size == 0:
        return a

    if kind == "locations":
        n_cols = a.shape[-1] if a.ndim in (1, 2) else None
        if n_cols != LOCATION_COLUMNS:
            raise MalformedTable(
                path, f"location table must have {LOCATION_COLUMNS} columns (x, y, z); got shape {a.shape}"
            )
        return a

    if a.ndim <= 1 or (a.ndim == 2 and 1 in a.shape):
        return a
    raise MalformedTable(path, f"reading table must be a single column; got shape {a.shape}")


def read_sensor_table(reader: TableReader, path: PathLike, kind: TableKind) -> np.ndarray:
    """Read one location or reading table through ``reader`` and check its layout."""

    table = reader.read(path, kind=kind)
    return check_table_shape(table.array, kind=kind, path=path)
