"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from densemat import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def a_2x3():
    """[[-2, -1, 0], [1, 2, 3]]"""
    return Matrix(2, 3, [-2, -1, 0, 1, 2, 3])


@pytest.fixture
def b_3x2():
    """[[1, 2], [3, 4], [5, 6]]"""
    return Matrix(3, 2, [1, 2, 3, 4, 5, 6])


@pytest.fixture
def random_int_matrix(rng):
    """Factory for integer matrices of a given shape."""
    def make(row, col):
        values = rng.integers(-9, 10, size=row * col).tolist()
        return Matrix(row, col, values)
    return make
