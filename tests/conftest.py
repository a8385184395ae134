"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square_system(rng):
    """Well-conditioned 5x5 system with known solution."""
    n = 5
    A = rng.standard_normal((n, n)) + n * np.eye(n)
    x_true = rng.standard_normal(n)
    b = A @ x_true
    return A, b, x_true


@pytest.fixture
def rank_one_matrix(rng):
    """4x4 matrix of rank 1 (outer product); singular."""
    u = rng.standard_normal(4)
    v = rng.standard_normal(4)
    return np.outer(u, v)
