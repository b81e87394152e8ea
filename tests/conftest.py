"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from litemath.matrix import DenseMatrix, from_numpy


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def m3():
    """Non-symmetric 3x3 with det = -1, trace = 4."""
    return from_numpy([[2.0, 1.0, 0.0], [1.0, 3.0, 1.0], [4.0, 0.0, -1.0]])


@pytest.fixture
def m3_col(m3):
    """Same logical matrix as m3, column-major."""
    return m3.with_storage_order('col')


@pytest.fixture
def rect():
    """2x3 row-major [[1, 2, 3], [4, 5, 6]]."""
    return DenseMatrix(2, 3, data=[1, 2, 3, 4, 5, 6])


@pytest.fixture
def plane_points(rng):
    """200 points scattered in the plane z = 0.5 x - 0.25 y + 3, plus tiny noise."""
    xy = rng.uniform(-5.0, 5.0, size=(200, 2))
    z = 0.5 * xy[:, 0] - 0.25 * xy[:, 1] + 3.0 + rng.normal(0.0, 1e-3, size=200)
    return np.column_stack([xy, z])
