from __future__ import annotations

"""Auto-dispatching table reader (by extension).

This module is responsible only for selecting the correct format reader based on
file extension and calling it with the appropriate parameters.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .base import LoadedTable, TableKind
from .hdf5_reader import Hdf5Reader
from .npy_reader import NpyReader
from .tabular_reader import TabularReader


def read_table_auto(
    path: Union[str, Path],
    *,
    # tabular
    delimiter: Optional[str] = None,
    has_header: Optional[bool] = None,
    encoding: Optional[str] = None,
    # hdf5
    dataset_key: Optional[str] = None,
    kind: Optional[TableKind] = None,
) -> LoadedTable:
    """Read a numeric table from ``path`` based on file extension.

    ``kind`` only matters for HDF5 files holding several datasets.
    """

    p = Path(path)
    suf = p.suffix.lower()

    if suf == ".npy":
        return NpyReader().read(p)
    if suf in {".csv", ".tsv", ".txt"}:
        return TabularReader(delimiter=delimiter, has_header=has_header, encoding=encoding).read(p)
    if suf in {".h5", ".hdf5"}:
        return Hdf5Reader(dataset_key=dataset_key).read(p, kind=kind)

    raise ValueError(
        f"Unsupported file extension '{p.suffix}' for path: {p}. "
        "Supported: .npy, .csv/.tsv/.txt, .h5/.hdf5"
    )


@dataclass
class AutoReader:
    """Default table-reader collaborator; stateful wrapper for dependency injection."""

    has_header: Optional[bool] = None

    def read(self, path: Union[str, Path], **kwargs) -> LoadedTable:
        kwargs.setdefault("has_header", self.has_header)
        return read_table_auto(path, **kwargs)
