import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest


@pytest.fixture
def squares():
    """Samples of x**2 with one isolated gap and one run of three."""
    x = np.array([0, 2, 4, 8, 10, 12, 14, 16, 18, 20], dtype=float)
    y = np.array([0, np.nan, 16, 64, np.nan, np.nan, np.nan, 256, 324, 400])
    return x, y


@pytest.fixture
def squares_invalid():
    return np.array([False, True, False, False, True, True, True, False, False, False])
