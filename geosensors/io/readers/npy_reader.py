from __future__ import annotations

"""NumPy ``.npy`` tables (one array per file)."""

from dataclasses import dataclass
from pathlib import Path

import numpy as np

from geosensors.errors import MalformedTable

from .base import LoadedTable, PathLike, coerce_numeric_table


def load_npy_table(file_path: PathLike) -> LoadedTable:
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"table file not found: {path}")
    try:
        # pickled object arrays are refused; tables are plain numeric arrays
        arr = np.load(path, allow_pickle=False)
    except ValueError as e:
        raise MalformedTable(path, f"not a numeric .npy array ({e})") from e
    return LoadedTable(coerce_numeric_table(arr, path=path), None, path)


@dataclass
class NpyReader:
    def read(self, path: PathLike, **kwargs) -> LoadedTable:
        # a .npy file holds exactly one array, so ``kind`` has nothing to select
        return load_npy_table(path)
