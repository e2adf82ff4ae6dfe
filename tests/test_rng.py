"""Reproducibility tests for the seeded stream."""

import pytest

from matcheck.rng import SeededStream


def test_same_seed_same_draws():
    first = SeededStream(3922693891)
    second = SeededStream(3922693891)
    assert [first.draw(1, 10) for _ in range(200)] == [second.draw(1, 10) for _ in range(200)]


def test_draws_stay_in_range():
    stream = SeededStream(7)
    values = {stream.draw(1, 10) for _ in range(2000)}
    assert values == set(range(1, 11))


def test_draw_matrix_consumes_row_major():
    stream = SeededStream(99)
    matrix = stream.draw_matrix(3, 4, 1, 10)
    replay = SeededStream(99)
    assert matrix == [[replay.draw(1, 10) for _ in range(4)] for _ in range(3)]
    assert stream.draws == 12


def test_from_entropy_gives_32_bit_seed():
    stream = SeededStream.from_entropy()
    assert 0 <= stream.seed < 2**32


@pytest.mark.parametrize("seed", [-1, 2**32])
def test_rejects_out_of_range_seed(seed):
    with pytest.raises(ValueError):
        SeededStream(seed)


def test_rejects_empty_range():
    with pytest.raises(ValueError):
        SeededStream(1).draw(5, 4)


def test_known_draws_are_pinned():
    stream = SeededStream(1234)
    assert [stream.draw(1, 10) for _ in range(12)] == [10, 5, 1, 10, 10, 6, 7, 1, 8, 3, 1, 8]

    stream = SeededStream(3922693891)
    assert [stream.draw(1, 10) for _ in range(12)] == [1, 7, 8, 7, 2, 4, 2, 10, 10, 5, 6, 10]


def test_known_draws_over_signed_range():
    stream = SeededStream(7)
    assert [stream.draw(-100, 100) for _ in range(8)] == [-35, -70, 30, -86, 7, -27, -89, 1]
