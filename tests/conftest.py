"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylinalg import Matrix, to_f64


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square4():
    """Well-conditioned 4×4 matrix used throughout the original examples."""
    return Matrix.new(4, 4, to_f64(
        1, 2, 3, 4,
        5, 5, 4, 3,
        2, 3, -4, 3,
        3, 1, 3, -4,
    ))


@pytest.fixture
def wide2x4():
    """2×4 matrix with a pivot in each of the first two columns."""
    return Matrix.new(2, 4, to_f64(
        3, -2, -3, 3,
        2, 3, 3, 2,
    ))


@pytest.fixture
def row_constant4():
    """4×4 matrix whose rows are (mostly) constant."""
    return Matrix.new(4, 4, to_f64(
        1, 1, 1, 1,
        4, 2, 2, 6,
        3, 3, 3, 3,
        4, 4, 4, 4,
    ))


@pytest.fixture
def invertible3():
    """3×3 matrix with determinant -1 and an integer inverse."""
    return Matrix.new(3, 3, to_f64(
        2, 1, 1,
        1, 3, 2,
        1, 0, 0,
    ))


@pytest.fixture
def singular3():
    """3×3 matrix whose third row is the sum of the first two."""
    return Matrix.new(3, 3, to_f64(
        1, 2, 3,
        4, 5, 6,
        5, 7, 9,
    ))


@pytest.fixture
def well_conditioned(rng):
    """Random diagonally dominant 5×5 matrix with entries of order 1."""
    n = 5
    A = 2.0 * np.eye(n) + 0.3 * rng.standard_normal((n, n))
    return Matrix.from_numpy(A)
