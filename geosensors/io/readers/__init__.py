"""Table readers.

Readers are responsible for *format parsing* only (CSV/TSV/TXT, NPY, HDF5).
The location/reading layout rules live in :func:`check_table_shape`;
orientation coercion lives in :mod:`geosensors.core.shapes`.
"""

from .base import (
    LoadedTable,
    TableKind,
    TableReader,
    check_table_shape,
    coerce_numeric_table,
    read_sensor_table,
)
from .dispatch import AutoReader, read_table_auto
from .hdf5_reader import Hdf5Reader, load_hdf5_table
from .npy_reader import NpyReader, load_npy_table
from .tabular_reader import TabularReader, load_delimited_table

__all__ = [
    "LoadedTable",
    "TableReader",
    "TableKind",
    "coerce_numeric_table",
    "check_table_shape",
    "read_sensor_table",
    "AutoReader",
    "read_table_auto",
    "TabularReader",
    "load_delimited_table",
    "NpyReader",
    "load_npy_table",
    "Hdf5Reader",
    "load_hdf5_table",
]
