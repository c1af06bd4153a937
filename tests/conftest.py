import matplotlib
matplotlib.use("Agg")

import pytest

from mac_navstokes import new_simulation


@pytest.fixture
def grid():
    """20x20 tunnel with the default obstacle"""
    return new_simulation(20, 20, 1.0, 1.0 / 30)


@pytest.fixture
def small_grid():
    """20x20 tunnel using the default physical cell size"""
    return new_simulation(20, 20, 0.4, 1.0 / 30)
