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
def linear_data():
    """y = 2x on five points: an exact line through the origin."""
    x = np.array([1.0, 2.0, 3.0, 4.0, 5.0])
    y = np.array([2.0, 4.0, 6.0, 8.0, 10.0])
    return x, y


@pytest.fixture
def exponential_data():
    """y = e^(0.1 x) for x = 1..100."""
    x = np.arange(1, 101, dtype=np.float64)
    y = np.exp(0.1 * x)
    return x, y


@pytest.fixture
def noisy_quadratic_data(rng):
    """y = 0.5x² - 3x + 2 plus small noise, x symmetric about 0."""
    x = np.linspace(-10.0, 10.0, 60)
    y = 0.5 * x ** 2 - 3.0 * x + 2.0 + rng.standard_normal(60) * 0.05
    return x, y
