from __future__ import annotations

"""HDF5 (``.h5``/``.hdf5``) survey files.

One file may hold both tables of a survey, e.g. ``/gravity/locations`` and
``/gravity/readings``. Without an explicit ``dataset_key`` the dataset whose
name matches the requested table kind is used; a file holding a single
dataset needs no key at all.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import h5py
import numpy as np

from geosensors.errors import MalformedTable

from .base import LoadedTable, PathLike, TableKind, coerce_numeric_table


def list_datasets(f: h5py.File) -> List[str]:
    names: List[str] = []

    def visit(name, obj) -> None:
        if isinstance(obj, h5py.Dataset):
            names.append(name)

    f.visititems(visit)
    return names


def _select_dataset(path: Path, names: List[str], kind: Optional[TableKind]) -> str:
    if not names:
        raise MalformedTable(path, "no datasets in HDF5 file")
    if len(names) == 1:
        return names[0]
    if kind is not None:
        matches = [n for n in names if n.rsplit("/", 1)[-1].lower() == kind]
        if len(matches) == 1:
            return matches[0]
    raise MalformedTable(
        path,
        f"cannot tell which dataset holds the {kind or 'table'}; pass dataset_key (datasets: {names[:30]})",
    )


def load_hdf5_table(
    file_path: PathLike,
    *,
    dataset_key: Optional[str] = None,
    kind: Optional[TableKind] = None,
) -> LoadedTable:
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"table file not found: {path}")

    with h5py.File(path, "r") as f:
        names = list_datasets(f)
        key = dataset_key if dataset_key is not None else _select_dataset(path, names, kind)
        if key.lstrip("/") not in names:
            raise MalformedTable(path, f"dataset '{key}' not found (datasets: {names[:30]})")
        arr = np.asarray(f[key][()])

    return LoadedTable(coerce_numeric_table(arr, path=f"{path}:{key}"), None, path)


@dataclass
class Hdf5Reader:
    dataset_key: Optional[str] = None

    def read(self, path: PathLike, **kwargs) -> LoadedTable:
        return load_hdf5_table(
            path,
            dataset_key=kwargs.get("dataset_key", self.dataset_key),
            kind=kwargs.get("kind"),
        )
