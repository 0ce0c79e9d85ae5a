from __future__ import annotations

"""Delimited text table reader (CSV/TSV/TXT)."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union

import numpy as np
import pandas as pd

from .base import LoadedTable, coerce_numeric_table


def _read_first_line(path: Path, encoding: Optional[str] = None) -> str:
    with path.open("r", encoding=encoding or "utf-8", errors="replace") as f:
        return f.readline().strip("\n")


def _infer_delimiter(sample_line: str) -> str:
    if "\t" in sample_line:
        return "\t"
    if "," in sample_line:
        return ","
    if ";" in sample_line:
        return ";"
    return "whitespace"


def _split_line(line: str, delimiter: str) -> list[str]:
    if delimiter == "whitespace":
        return [t for t in line.strip().split() if t != ""]
    return [t.strip() for t in line.split(delimiter)]


def _row_is_numeric(tokens: Sequence[str]) -> bool:
    if len(tokens) == 0:
        return False
    try:
        for t in tokens:
            if t == "":
                return False
            float(t)
        return True
    except ValueError:
        return False


def load_delimited_table(
    file_path: Union[str, Path],
    *,
    delimiter: Optional[str] = None,
    has_header: Optional[bool] = None,
    encoding: Optional[str] = None,
) -> LoadedTable:
    """Load a numeric table from CSV/TSV/TXT.

    - If has_header is None, header is inferred by checking whether the first row is numeric.
    - If delimiter is None, it is inferred from the first line.
    - An empty file yields a (0, 0) table.
    """

    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"table file not found: {path}")

    first = _read_first_line(path, encoding=encoding)
    if not first.strip():
        return LoadedTable(np.zeros((0, 0)), None, path)

    delim = delimiter
    if delim is None:
        delim = _infer_delimiter(first)
    if delim == "\\t":
        delim = "\t"

    tokens = _split_line(first, delim)
    inferred_header = not _row_is_numeric(tokens)
    use_header = inferred_header if has_header is None else bool(has_header)

    sep = r"\s+" if delim == "whitespace" else delim
    header_arg = 0 if use_header else None
    df = pd.read_csv(
        path.as_posix(),
        sep=sep,
        header=header_arg,
        encoding=encoding or "utf-8",
        engine="c",
        # written values must parse back to the same float64
        float_precision="round_trip",
    )

    column_names: Optional[list[str]] = None
    if use_header:
        column_names = [str(c) for c in df.columns.tolist()]

    # non-numeric cells become NaN here and are rejected below
    df_num = df.apply(pd.to_numeric, errors="coerce")
    arr = coerce_numeric_table(df_num.to_numpy(), path=path)
    return LoadedTable(arr, column_names, path)


@dataclass
class TabularReader:
    delimiter: Optional[str] = None
    has_header: Optional[bool] = None
    encoding: Optional[str] = None

    def read(self, path: Union[str, Path], **kwargs) -> LoadedTable:
        return load_delimited_table(
            path,
            delimiter=kwargs.get("delimiter", self.delimiter),
            has_header=kwargs.get("has_header", self.has_header),
            encoding=kwargs.get("encoding", self.encoding),
        )
