"""Differential fuzzing against the trusted reference.

Draw order per trial is rows_a, cols_a, cols_b, then A row-major, then B
row-major, all from one stream. Changing that order breaks replay of logged
seeds.
"""

from __future__ import annotations

from typing import Optional, Tuple

from ..harness import CaseContext, register
from ..matrix import Matrix, as_matrix, zeros
from ..rng import SeededStream


def draw_trial(stream: SeededStream, low: int, high: int) -> Tuple[Matrix, Matrix]:
    rows_a = stream.draw(low, high)
    cols_a = stream.draw(low, high)
    cols_b = stream.draw(low, high)
    a = as_matrix(stream.draw_matrix(rows_a, cols_a, low, high), "a")
    b = as_matrix(stream.draw_matrix(cols_a, cols_b, low, high), "b")
    return a, b


def replay_trial(seed: int, trial: int, low: int = 1, high: int = 10) -> Tuple[Matrix, Matrix]:
    """Regenerate the inputs of trial ``trial`` from a logged seed."""
    stream = SeededStream(seed)
    for _ in range(trial):
        draw_trial(stream, low, high)
    return draw_trial(stream, low, high)


def _stream(seed: Optional[int]) -> SeededStream:
    return SeededStream(seed) if seed is not None else SeededStream.from_entropy()


@register("fuzz", "random_matrices")
def random_matrices(ctx: CaseContext) -> None:
    cfg = ctx.config
    stream = _stream(cfg.seed)
    ctx.observe(f"seed: {stream.seed}")
    for trial in range(cfg.fuzz_trials):
        a, b = draw_trial(stream, cfg.fuzz_low, cfg.fuzz_high)
        rows_a, cols_a = a.shape
        cols_b = b.shape[1]
        where = f"Seed: {stream.seed}, iteration: {trial}"

        c = zeros(rows_a, cols_b)
        if not ctx.invoke(lambda: ctx.candidate(a, b, c, rows_a, cols_a, cols_b), where):
            continue
        ctx.expect_equal(c, ctx.expected(a, b), f"Matrix multiplication test failed! {where}", inputs=(a, b))
