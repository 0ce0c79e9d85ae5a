from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
from typing import Any, Iterable, List, Optional, Sequence, TypedDict, Union

import numpy as np

from geosensors.contracts.emit import EmitPlan

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class ExportResult(TypedDict):
    """
    Description of an exported table.

    - content:  CSV payload as bytes
    - filename: file name (with extension)
    - size:     length of content in bytes
    - path:     filesystem path if the export was written to disk
    """
    content: bytes
    filename: str
    size: int
    path: Optional[Path]


def _format_cell(v: Any) -> str:
    # repr() round-trips floats exactly
    if isinstance(v, float):
        return repr(v)
    return str(v)


def _to_rows(data: Any) -> Iterable[Sequence[str]]:
    """
    Convert a numeric table into CSV rows.

    - 1D arrays become a single column (one value per row)
    - 2D arrays are written row by row
    """
    arr = np.asarray(data, dtype=np.float64)
    if arr.ndim == 1:
        arr = arr.reshape(-1, 1)
    if arr.ndim != 2:
        raise ValueError(f"Only 1D/2D tables can be exported; got shape {arr.shape}")
    return ([_format_cell(float(x)) for x in arr[i, :]] for i in range(arr.shape[0]))


def table_to_csv_bytes(data: Any, *, encoding: str = "utf-8") -> bytes:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    for row in _to_rows(data):
        writer.writerow(row)
    return buf.getvalue().encode(encoding)


def export_table_to_csv(
    data: Any,
    *,
    dest: Optional[PathLike] = None,
    encoding: str = "utf-8",
) -> ExportResult:
    """
    Export a numeric table to headerless CSV.

    Parameters
    ----------
    data:
        1D or 2D numeric array.
    dest:
        Optional destination file path.

        - None: do not write to disk; just return `ExportResult` with bytes.
        - File path: write exactly to that path (overwriting if exists);
          missing parent directories are created.

    Returns
    -------
    ExportResult:
        Contains file content (bytes), filename, size and optional path.
    """
    content = table_to_csv_bytes(data, encoding=encoding)

    path: Optional[Path] = None
    filename = "table.csv"
    if dest is not None:
        path = Path(dest)
        filename = path.name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        logger.debug("wrote table %s (%d bytes)", path, len(content))

    return ExportResult(content=content, filename=filename, size=len(content), path=path)


def write_emit_plan(plan: EmitPlan, *, encoding: str = "utf-8") -> List[Path]:
    """Write every table an :class:`EmitPlan` describes. Returns the written paths.

    Callers running emitters concurrently must give them distinct prefixes;
    no path coordination happens here.
    """
    written: List[Path] = []
    for dest, table in plan.tables.items():
        result = export_table_to_csv(table, dest=dest, encoding=encoding)
        if result["path"] is not None:
            written.append(result["path"])
    return written
