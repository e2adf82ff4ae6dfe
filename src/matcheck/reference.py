"""Trusted reference multiplication used as the differential oracle."""

from __future__ import annotations

from .matrix import Matrix, as_matrix, zeros


def _check_dims(a: Matrix, b: Matrix, c: Matrix, rows_a: int, cols_a: int, cols_b: int) -> None:
    if min(rows_a, cols_a, cols_b) < 0:
        raise ValueError("matrix dimensions must be non-negative")
    if a.shape != (rows_a, cols_a) or b.shape != (cols_a, cols_b):
        raise ValueError("incompatible matrix dimensions")
    if c.shape[0] < rows_a or c.shape[1] < cols_b:
        raise ValueError("output matrix is too small")


def multiply_matrices_without_errors(a, b, c, rows_a: int, cols_a: int, cols_b: int) -> None:
    """Write ``a @ b`` into the top-left ``rows_a x cols_b`` block of ``c``.

    Plain triple loop over Python ints so the result is exact regardless of
    what the candidate does with its own accumulator.
    """
    a = as_matrix(a, "a")
    b = as_matrix(b, "b")
    c_arr = as_matrix(c, "c")
    _check_dims(a, b, c_arr, rows_a, cols_a, cols_b)

    for i in range(rows_a):
        for j in range(cols_b):
            acc = 0
            for k in range(cols_a):
                acc += int(a[i, k]) * int(b[k, j])
            c[i][j] = acc


def mat_mul(a, b) -> Matrix:
    a = as_matrix(a, "a")
    b = as_matrix(b, "b")
    if a.shape[1] != b.shape[0]:
        raise ValueError("incompatible matrix dimensions")
    rows_a, cols_a = a.shape
    cols_b = b.shape[1]
    c = zeros(rows_a, cols_b)
    multiply_matrices_without_errors(a, b, c, rows_a, cols_a, cols_b)
    return c
