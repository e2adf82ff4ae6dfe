"""Exhaustive scalar enumeration through 1x1 products.

A 1x1 product is a scalar product, so this isolates faults that depend on
values from anything that depends on dimensions. Mismatches never stop the
enumeration.
"""

from __future__ import annotations

from ..harness import CaseContext, register
from ..matrix import zeros


@register("combinatorial", "enumerate_scalar_pairs")
def enumerate_scalar_pairs(ctx: CaseContext) -> None:
    low, high = ctx.config.scalar_low, ctx.config.scalar_high
    a = zeros(1, 1)
    b = zeros(1, 1)
    c = zeros(1, 1)
    pairs = 0
    for i in range(low, high + 1):
        for j in range(low, high + 1):
            a[0, 0] = i
            b[0, 0] = j
            c[0, 0] = 0
            pairs += 1
            if not ctx.invoke(lambda: ctx.candidate(a, b, c, 1, 1, 1), f"{i} * {j}"):
                continue
            ctx.expect_equal(c, [[i * j]], f"{i} * {j} should be {i * j}", inputs=(a, b))
    ctx.observe(f"enumerated {pairs} scalar pairs in [{low}, {high}]")
