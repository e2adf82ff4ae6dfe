"""Integer matrix helpers shared by the oracles and the suites."""

from __future__ import annotations

from typing import Iterable, Tuple

import numpy as np


DTYPE = np.int64
SENTINEL = np.iinfo(DTYPE).min

Matrix = np.ndarray


def as_matrix(value, name: str = "matrix") -> Matrix:
    arr = np.asarray(value, dtype=DTYPE)
    if arr.ndim != 2:
        raise ValueError(f"{name} must be a 2D matrix")
    return arr


def zeros(rows: int, cols: int) -> Matrix:
    return np.zeros((rows, cols), dtype=DTYPE)


def identity(n: int) -> Matrix:
    return np.eye(n, dtype=DTYPE)


def diagonal(values: Iterable[int]) -> Matrix:
    return np.diag(np.asarray(list(values), dtype=DTYPE))


def add(a: Matrix, b: Matrix) -> Matrix:
    a = as_matrix(a, "a")
    b = as_matrix(b, "b")
    if a.shape != b.shape:
        raise ValueError("cannot add matrices of different shapes")
    return a + b


def dims_of(a: Matrix, b: Matrix) -> Tuple[int, int, int]:
    """Return ``(rows_a, cols_a, cols_b)`` read from the containers themselves."""
    a = as_matrix(a, "a")
    b = as_matrix(b, "b")
    return a.shape[0], a.shape[1], b.shape[1]


def scratch(rows: int = 50, cols: int = 50) -> Matrix:
    return np.full((rows, cols), SENTINEL, dtype=DTYPE)


def written_extent(buffer: Matrix) -> Tuple[int, int]:
    """Rows and columns of the smallest top-left block covering every write."""
    touched = np.argwhere(buffer != SENTINEL)
    if touched.size == 0:
        return 0, 0
    rows, cols = touched.max(axis=0)
    return int(rows) + 1, int(cols) + 1


def format_matrix(m) -> str:
    arr = np.asarray(m)
    if arr.ndim != 2:
        return repr(arr.tolist())
    return "[" + ", ".join(str(row) for row in arr.tolist()) + "]"
