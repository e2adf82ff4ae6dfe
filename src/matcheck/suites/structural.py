"""Structural and boundary probes.

What the candidate does when the declared sizes disagree with the containers
is not part of its contract, so those cases only record what happened. The
numeric range sweep is a real differential check against the reference.
"""

from __future__ import annotations

from ..harness import CaseContext, register
from ..matrix import as_matrix, diagonal, format_matrix, zeros


def _probe_sizes(ctx: CaseContext, a, b, variants) -> None:
    rows_a, cols_a, cols_b = a.shape[0], a.shape[1], b.shape[1]
    for label, dims in variants:
        c = zeros(rows_a, cols_b)
        exc = ctx.probe(lambda: ctx.candidate(a, b, c, *dims), f"{label} {dims}")
        if exc is None:
            ctx.observe(f"{label}: output left as {format_matrix(c)}")


@register("structural", "non_coherent_sizes")
def non_coherent_sizes(ctx: CaseContext) -> None:
    a = as_matrix([[1, 0, 1], [0, 1, 0]])
    b = as_matrix([[0, 1], [2, 1], [1, 2]])
    rows_a, cols_a, cols_b = 2, 3, 2
    _probe_sizes(
        ctx,
        a,
        b,
        [
            ("rows_a does not match A", (rows_a - 1, cols_a, cols_b)),
            ("cols_a does not match B", (rows_a, cols_a - 1, cols_b)),
            ("cols_b does not match B", (rows_a, cols_a, cols_b - 1)),
        ],
    )


@register("structural", "negative_sizes")
def negative_sizes(ctx: CaseContext) -> None:
    a = as_matrix([[12, 1, 1], [2, 1, 12]])
    b = as_matrix([[0, 1], [2, 1], [1, 2]])
    rows_a, cols_a, cols_b = 2, 3, 2
    _probe_sizes(
        ctx,
        a,
        b,
        [
            ("negative rows_a", (-rows_a, cols_a, cols_b)),
            ("negative cols_a", (rows_a, -cols_a, cols_b)),
            ("negative cols_b", (rows_a, cols_a, -cols_b)),
        ],
    )


@register("structural", "numerical_range")
def numerical_range(ctx: CaseContext) -> None:
    stride = ctx.config.sweep_stride
    for i in range(ctx.config.sweep_steps):
        for value in (i * stride, -i * stride):
            a = diagonal([value, value])
            b = diagonal([value, value])
            c = zeros(2, 2)
            if not ctx.invoke(lambda: ctx.candidate(a, b, c, 2, 2, 2), f"diag{{{value},{value}}}"):
                continue
            ctx.expect_equal(
                c,
                ctx.expected(a, b),
                f"failed to multiply diagonal matrices diag{{{value},{value}}}",
                inputs=(a, b),
            )
