"""Basic unit tests for the trusted reference multiplier."""

import numpy as np
import pytest

from matcheck.matrix import zeros
from matcheck.reference import mat_mul, multiply_matrices_without_errors


PRODUCTS = [
    ([[1, 2], [3, 4]], [[5, 6], [7, 8]], [[19, 22], [43, 50]]),
    ([[1, 2, 3], [4, 5, 6]], [[7, 8], [9, 10], [11, 12]], [[58, 64], [139, 154]]),
    (
        [[1, 2, 3], [4, 5, 6], [7, 8, 9]],
        [[10, 11, 12], [13, 14, 15], [16, 17, 18]],
        [[84, 90, 96], [201, 216, 231], [318, 342, 366]],
    ),
    ([[3]], [[-4, 0, 2]], [[-12, 0, 6]]),
]


@pytest.mark.parametrize("a,b,expected", PRODUCTS)
def test_in_place_product(a, b, expected):
    rows_a, cols_a, cols_b = len(a), len(b), len(b[0])
    c = zeros(rows_a, cols_b)
    assert multiply_matrices_without_errors(a, b, c, rows_a, cols_a, cols_b) is None
    np.testing.assert_array_equal(c, expected)


def test_in_place_product_into_nested_lists():
    c = [[0, 0], [0, 0]]
    multiply_matrices_without_errors([[1, 1], [0, 1]], [[2, 0], [1, 3]], c, 2, 2, 2)
    assert c == [[3, 3], [1, 3]]


def test_mat_mul_allocates_and_checks_inner_dimension():
    np.testing.assert_array_equal(mat_mul([[2, 0], [0, 2]], [[1], [5]]), [[2], [10]])
    with pytest.raises(ValueError, match="incompatible"):
        mat_mul([[1, 2, 3], [4, 5, 6]], [[1, 2], [3, 4]])


def test_writes_in_place_into_larger_buffer():
    a = np.array([[2, 0], [0, 2]])
    b = np.array([[1, 2], [3, 4]])
    c = zeros(4, 4)
    multiply_matrices_without_errors(a, b, c, 2, 2, 2)
    np.testing.assert_array_equal(c[:2, :2], [[2, 4], [6, 8]])
    assert not c[2:, :].any() and not c[:, 2:].any()


@pytest.mark.parametrize(
    "dims",
    [(1, 3, 2), (2, 2, 2), (2, 3, 1), (-2, 3, 2), (2, -3, 2), (2, 3, -2)],
)
def test_rejects_declared_sizes_that_disagree(dims):
    a = np.array([[1, 0, 1], [0, 1, 0]])
    b = np.array([[0, 1], [2, 1], [1, 2]])
    c = zeros(2, 2)
    with pytest.raises(ValueError):
        multiply_matrices_without_errors(a, b, c, *dims)


def test_rejects_small_output():
    with pytest.raises(ValueError, match="too small"):
        multiply_matrices_without_errors([[1, 2]], [[1], [2]], zeros(0, 0), 1, 2, 1)


def test_large_values_stay_exact():
    big = 2450
    result = mat_mul(np.diag([big, -big]), np.diag([big, -big]))
    np.testing.assert_array_equal(result, [[big * big, 0], [0, big * big]])
