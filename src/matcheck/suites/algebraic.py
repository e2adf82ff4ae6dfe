"""Algebraic law cases: zero, identity, split-sum associativity, shape, commutation.

Every law is exercised on even/even, even/odd, odd/even and odd/odd shapes so
that parity-dependent faults show up. Sub-cases use aborting assertions.
"""

from __future__ import annotations

import numpy as np

from ..harness import CaseContext, register
from ..matrix import add, as_matrix, identity, scratch, written_extent, zeros


# (rows_a, cols_a, cols_b), keyed on the parity of A's rows/cols; the law's subject A is never square
PARITY_SHAPES = {
    "even/even": (2, 4, 2),
    "even/odd": (2, 3, 4),
    "odd/even": (3, 2, 3),
    "odd/odd": (3, 5, 3),
}


def _filled(rows: int, cols: int):
    return as_matrix(np.arange(1, rows * cols + 1).reshape(rows, cols))


@register("algebraic", "zero_matrices")
def zero_matrices(ctx: CaseContext) -> None:
    for label, (m, n, p) in PARITY_SHAPES.items():
        a = _filled(m, n)
        right = ctx.multiply(a, zeros(n, p))
        ctx.assert_equal(right, zeros(m, p), f"{label}: A x 0 should be the {m}x{p} zero matrix", inputs=(a, zeros(n, p)))
        left = ctx.multiply(zeros(p, m), a)
        ctx.assert_equal(left, zeros(p, n), f"{label}: 0 x A should be the {p}x{n} zero matrix", inputs=(zeros(p, m), a))


@register("algebraic", "identity_matrices")
def identity_matrices(ctx: CaseContext) -> None:
    for label, (m, n, _p) in PARITY_SHAPES.items():
        a = _filled(m, n)
        right = ctx.multiply(a, identity(n))
        ctx.assert_equal(right, a, f"{label}: A x I should yield A", inputs=(a, identity(n)))
        left = ctx.multiply(identity(m), a)
        ctx.assert_equal(left, a, f"{label}: I x A should yield A", inputs=(identity(m), a))


SPLIT_SUM_CASES = [
    (
        [[1, 2, 3], [4, 5, 6]],
        [[10, 0], [0, 0], [9, 0]],
        [[0, 0], [0, 10], [0, 9]],
    ),
    (
        [[2, 1, 4], [3, 3, 1], [1, 5, 2]],
        [[4, 0, 0], [0, 2, 0], [7, 0, 1]],
        [[0, 3, 6], [1, 0, 5], [0, 8, 0]],
    ),
]


@register("algebraic", "associativity_split_sum")
def associativity_split_sum(ctx: CaseContext) -> None:
    for a, b1, b2 in SPLIT_SUM_CASES:
        a, b1, b2 = as_matrix(a), as_matrix(b1), as_matrix(b2)
        if np.any((b1 != 0) & (b2 != 0)):
            raise ValueError("split-sum operands must have disjoint support")
        b = add(b1, b2)
        whole = ctx.multiply(a, b)
        rebuilt = add(ctx.multiply(a, b1), ctx.multiply(a, b2))
        ctx.assert_equal(whole, rebuilt, "A x (B1 + B2) should equal A x B1 + A x B2", inputs=(a, b))


@register("algebraic", "not_permitted_multiplication")
def not_permitted_multiplication(ctx: CaseContext) -> None:
    a = as_matrix([[17]])
    b = as_matrix([[1, 1, 1], [22, 23, 24]])
    c = zeros(50, 50)
    ctx.assert_raises(
        lambda: ctx.candidate(a, b, c, 1, 1, 3),
        "multiplication must be refused when cols(A) != rows(B)",
    )


PARITY_PRODUCTS = {
    "even_even": (
        [[1, 2], [3, 4]],
        [[5, 6], [7, 8]],
        [[19, 22], [43, 50]],
    ),
    "even_odd": (
        [[1, 2], [3, 4]],
        [[5, 6, 7], [8, 9, 10]],
        [[21, 24, 27], [47, 54, 61]],
    ),
    "odd_even": (
        [[1, 2, 3], [4, 5, 6]],
        [[7, 8], [9, 10], [11, 12]],
        [[58, 64], [139, 154]],
    ),
    "odd_odd": (
        [[1, 2, 3], [4, 5, 6], [7, 8, 9]],
        [[10, 11, 12], [13, 14, 15], [16, 17, 18]],
        [[84, 90, 96], [201, 216, 231], [318, 342, 366]],
    ),
}


def _product_case(label: str, a, b, expected):
    def case(ctx: CaseContext) -> None:
        result = ctx.multiply(a, b)
        ctx.assert_equal(result, expected, f"{label} product is wrong", inputs=(as_matrix(a), as_matrix(b)))

    case.__name__ = f"product_{label}"
    return case


for _label, (_a, _b, _expected) in PARITY_PRODUCTS.items():
    register("algebraic", f"product_{_label}")(_product_case(_label, _a, _b, _expected))


@register("algebraic", "result_shape")
def result_shape(ctx: CaseContext) -> None:
    a = as_matrix([[1, 2, 3, 4, 5]] * 7)
    b = as_matrix([list(range(1, 11))] * 5)

    exact = ctx.multiply(a, b)
    ctx.assert_true(exact.shape[0] == a.shape[0], "result should have as many rows as A")
    ctx.assert_true(exact.shape[1] == b.shape[1], "result should have as many columns as B")

    buf = scratch(50, 50)
    ctx.multiply(a, b, out=buf)
    rows, cols = written_extent(buf)
    ctx.assert_true(
        (rows, cols) == (7, 10),
        f"candidate wrote a {rows}x{cols} block into the scratch buffer, expected 7x10",
    )


COMMUTING_PAIRS = [
    ([[1, 2], [0, 3]], [[1, 0], [0, 1]]),
    ([[2, 1], [1, 2]], [[3, 1], [1, 3]]),
    ([[1, 2, 0], [0, 1, 2], [2, 0, 1]], [[0, 1, 3], [3, 0, 1], [1, 3, 0]]),
]


@register("algebraic", "commutation")
def commutation(ctx: CaseContext) -> None:
    for a, b in COMMUTING_PAIRS:
        a, b = as_matrix(a), as_matrix(b)
        if not np.array_equal(ctx.expected(a, b), ctx.expected(b, a)):
            raise ValueError("commutation case uses matrices that do not commute")
        ab = ctx.multiply(a, b)
        ba = ctx.multiply(b, a)
        ctx.assert_equal(ab, ba, "commuting matrices should give A x B == B x A", inputs=(a, b))
