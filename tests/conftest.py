"""
Pytest fixtures for disteval tests.
"""

import pytest
import numpy as np

from disteval.config import reset_settings
from disteval.core.matrix import Matrix


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings after each test."""
    yield
    reset_settings()


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random generator."""
    return np.random.default_rng(42)


@pytest.fixture
def vector_pair(rng: np.random.Generator):
    """Two random vectors of equal length."""
    return rng.normal(size=10), rng.normal(size=10)


@pytest.fixture
def small_matrix() -> Matrix:
    """2 rows x 3 columns, i.e. three points of dimension 2."""
    return Matrix([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])


@pytest.fixture
def labelled_matrix() -> Matrix:
    """2 x 3 matrix with row and column labels."""
    return Matrix(
        [[0.0, 3.0, 1.0], [0.0, 4.0, 1.0]],
        row_labels=["x", "y"],
        column_labels=["a", "b", "c"],
    )
