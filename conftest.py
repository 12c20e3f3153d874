import matplotlib
import numpy as np
import pytest

matplotlib.use('Agg')


@pytest.fixture
def ramp_bands():
    """ Four identical bands: 1, 2, ..., 10 """
    ramp = np.arange(1, 11, dtype=float)
    return ramp, ramp.copy(), ramp.copy(), ramp.copy()


@pytest.fixture
def random_bands():
    rng = np.random.default_rng(42)
    return tuple(rng.standard_normal(300) for _ in range(4))


@pytest.fixture
def random_mv_bands():
    rng = np.random.default_rng(7)
    return tuple(rng.standard_normal((3, 200)) for _ in range(4))
