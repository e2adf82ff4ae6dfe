"""Catalog of value-triggered fault hypotheses for the candidate multiplier.

Each code pairs a message with a pure predicate over ``(a, b, c)``. The
harness never raises these; it evaluates them next to a mismatch so that a
failure can be attributed to the input or output pattern that was present.
"""

from __future__ import annotations

import enum
from typing import Callable, Dict, Iterable, List

import numpy as np


class FaultCode(enum.IntEnum):
    ONES_PRODUCT = 1
    A_HAS_SEVEN = 2
    A_HAS_NEGATIVE = 3
    B_HAS_THREE = 4
    B_HAS_NEGATIVE = 5
    C_ABOVE_HUNDRED = 6
    C_IN_ELEVEN_TWENTY = 7
    C_HAS_ZERO = 8
    C_HAS_99 = 9
    A_ROW_MANY_ONES = 10
    B_ROWS_ALL_HAVE_ZERO = 11
    ROWS_A_EQ_COLS_B = 12
    FIRST_ELEMENTS_EQUAL = 13
    C_EVEN_ROWS = 14
    A_ROW_ALL_FIVES = 15
    B_HAS_SIX = 16
    C_HAS_SEVENTEEN = 17
    A_SQUARE = 18
    A_ROWS_ALL_HAVE_EIGHT = 19
    A_ODD_COLS = 20


MESSAGES: Dict[FaultCode, str] = {
    FaultCode.ONES_PRODUCT: "Element-wise multiplication of ones detected",
    FaultCode.A_HAS_SEVEN: "Matrix A contains the number 7",
    FaultCode.A_HAS_NEGATIVE: "Matrix A contains a negative number",
    FaultCode.B_HAS_THREE: "Matrix B contains the number 3",
    FaultCode.B_HAS_NEGATIVE: "Matrix B contains a negative number",
    FaultCode.C_ABOVE_HUNDRED: "Result matrix contains a number bigger than 100",
    FaultCode.C_IN_ELEVEN_TWENTY: "Result matrix contains a number between 11 and 20",
    FaultCode.C_HAS_ZERO: "Result matrix contains zero",
    FaultCode.C_HAS_99: "Result matrix contains the number 99",
    FaultCode.A_ROW_MANY_ONES: "A row in matrix A contains more than one '1'",
    FaultCode.B_ROWS_ALL_HAVE_ZERO: "Every row in matrix B contains at least one '0'",
    FaultCode.ROWS_A_EQ_COLS_B: "The number of rows in A is equal to the number of columns in B",
    FaultCode.FIRST_ELEMENTS_EQUAL: "The first element of matrix A is equal to the first element of matrix B",
    FaultCode.C_EVEN_ROWS: "The result matrix C has an even number of rows",
    FaultCode.A_ROW_ALL_FIVES: "A row in matrix A is filled entirely with 5s",
    FaultCode.B_HAS_SIX: "Matrix B contains the number 6",
    FaultCode.C_HAS_SEVENTEEN: "Result matrix C contains the number 17",
    FaultCode.A_SQUARE: "Matrix A is a square matrix",
    FaultCode.A_ROWS_ALL_HAVE_EIGHT: "Every row in matrix A contains the number 8",
    FaultCode.A_ODD_COLS: "Number of columns in matrix A is odd",
}

Predicate = Callable[[np.ndarray, np.ndarray, np.ndarray], bool]


def _ones_product(a, b, c) -> bool:
    inner = min(a.shape[1], b.shape[0])
    if inner == 0 or a.shape[0] == 0 or b.shape[1] == 0:
        return False
    a_ones = (a[:, :inner] == 1).any(axis=0)
    b_ones = (b[:inner, :] == 1).any(axis=1)
    return bool((a_ones & b_ones).any())


def _rows_all(m, row_test) -> bool:
    if m.shape[0] == 0:
        return False
    return bool(all(row_test(row) for row in m))


def _first_equal(a, b, c) -> bool:
    if a.size == 0 or b.size == 0:
        return False
    return bool(a[0, 0] == b[0, 0])


PREDICATES: Dict[FaultCode, Predicate] = {
    FaultCode.ONES_PRODUCT: _ones_product,
    FaultCode.A_HAS_SEVEN: lambda a, b, c: bool((a == 7).any()),
    FaultCode.A_HAS_NEGATIVE: lambda a, b, c: bool((a < 0).any()),
    FaultCode.B_HAS_THREE: lambda a, b, c: bool((b == 3).any()),
    FaultCode.B_HAS_NEGATIVE: lambda a, b, c: bool((b < 0).any()),
    FaultCode.C_ABOVE_HUNDRED: lambda a, b, c: bool((c > 100).any()),
    FaultCode.C_IN_ELEVEN_TWENTY: lambda a, b, c: bool(((c >= 11) & (c <= 20)).any()),
    FaultCode.C_HAS_ZERO: lambda a, b, c: bool((c == 0).any()),
    FaultCode.C_HAS_99: lambda a, b, c: bool((c == 99).any()),
    FaultCode.A_ROW_MANY_ONES: lambda a, b, c: bool(((a == 1).sum(axis=1) > 1).any()),
    FaultCode.B_ROWS_ALL_HAVE_ZERO: lambda a, b, c: _rows_all(b, lambda row: (row == 0).any()),
    FaultCode.ROWS_A_EQ_COLS_B: lambda a, b, c: a.shape[0] == b.shape[1],
    FaultCode.FIRST_ELEMENTS_EQUAL: _first_equal,
    FaultCode.C_EVEN_ROWS: lambda a, b, c: c.shape[0] % 2 == 0,
    FaultCode.A_ROW_ALL_FIVES: lambda a, b, c: a.shape[1] > 0 and bool((a == 5).all(axis=1).any()),
    FaultCode.B_HAS_SIX: lambda a, b, c: bool((b == 6).any()),
    FaultCode.C_HAS_SEVENTEEN: lambda a, b, c: bool((c == 17).any()),
    FaultCode.A_SQUARE: lambda a, b, c: a.shape[0] == a.shape[1],
    FaultCode.A_ROWS_ALL_HAVE_EIGHT: lambda a, b, c: _rows_all(a, lambda row: (row == 8).any()),
    FaultCode.A_ODD_COLS: lambda a, b, c: a.shape[1] % 2 == 1,
}


def message(code: FaultCode) -> str:
    return MESSAGES[FaultCode(code)]


def triggered_faults(a, b, c) -> List[FaultCode]:
    a = np.asarray(a)
    b = np.asarray(b)
    c = np.asarray(c)
    if a.ndim != 2 or b.ndim != 2 or c.ndim != 2:
        raise ValueError("fault predicates need 2D matrices")
    return [code for code, pred in PREDICATES.items() if pred(a, b, c)]


def describe_faults(codes: Iterable[FaultCode]) -> str:
    codes = list(codes)
    if not codes:
        return "none"
    return "; ".join(f"{int(code)} ({MESSAGES[FaultCode(code)]})" for code in codes)
