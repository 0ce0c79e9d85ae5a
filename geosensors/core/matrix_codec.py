"""Flat byte encoding for numeric matrices and vectors.

Layout: row-major, little-endian float64, no header. The column count is fixed
by the call site and the row count travels next to the bytes in the enclosing
message, so the encoding itself carries no shape.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from geosensors.errors import ShapeMismatch

_DTYPE = np.dtype("<f8")


def encode_matrix(matrix: Any) -> bytes:
    m = np.asarray(matrix)
    if m.size == 0:
        return b""
    return np.ascontiguousarray(m, dtype=_DTYPE).tobytes(order="C")


def decode_matrix(data: bytes, rows: int, *, cols: int) -> np.ndarray:
    """Inverse of :func:`encode_matrix`.

    Raises :class:`~geosensors.errors.ShapeMismatch` when ``len(data)`` does
    not equal ``rows * cols * 8``.
    """

    if rows < 0 or cols < 0:
        raise ShapeMismatch(f"negative shape ({rows}, {cols})")

    expected = rows * cols * _DTYPE.itemsize
    if len(data) != expected:
        raise ShapeMismatch(
            f"matrix payload has {len(data)} bytes; expected {expected} for shape ({rows}, {cols})"
        )

    if expected == 0:
        out = np.zeros((rows, cols), dtype=np.float64)
    else:
        out = np.frombuffer(data, dtype=_DTYPE).astype(np.float64).reshape(rows, cols)
    out.setflags(write=False)
    return out


def encode_vector(vector: Any) -> bytes:
    return encode_matrix(np.asarray(vector).ravel())


def decode_vector(data: bytes, length: int) -> np.ndarray:
    out = decode_matrix(data, length, cols=1).reshape(length)
    out.setflags(write=False)
    return out
