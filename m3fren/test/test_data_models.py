import numpy as np
import pytest
from m3fren.utils.data_models import BandSet, EntropyConfig, resolve_config
from m3fren.utils.exceptions import InvalidParameterError, ShapeMismatchError


def test_defaults():
    cfg = EntropyConfig()
    assert (cfg.m, cfg.tau, cfg.scale) == (2, 1, 20)
    assert resolve_config() == cfg


def test_options_override_config():
    cfg = resolve_config(EntropyConfig(m=3), tau=2)
    assert (cfg.m, cfg.tau, cfg.scale) == (3, 2, 20)


def test_matlab_aliases():
    cfg = resolve_config(t=4, Scale=7)
    assert (cfg.tau, cfg.scale) == (4, 7)


def test_numpy_integers_accepted():
    assert EntropyConfig(m=np.int64(3)).m == 3


@pytest.mark.parametrize("kwargs", [{'m': 0}, {'tau': -1}, {'scale': 0},
                                    {'m': 2.0}, {'scale': True}])
def test_invalid_values(kwargs):
    with pytest.raises(InvalidParameterError):
        EntropyConfig(**kwargs)


def test_unknown_option():
    with pytest.raises(InvalidParameterError):
        resolve_config(r=0.2)


def test_config_type_checked():
    with pytest.raises(InvalidParameterError):
        resolve_config({'m': 2})


def test_bandset_derived_fields():
    bands = BandSet(*(np.zeros((3, 50)) for _ in range(4)))
    assert bands.n_channels == 3
    assert bands.n_samples == 50
    single = bands.channel(1)
    assert single.alpha.shape == (50,)
    assert single.n_channels == 1


def test_bandset_converts_lists():
    bands = BandSet([1, 2, 3], [1, 2, 3], [1, 2, 3], [1, 2, 3])
    assert bands.alpha.dtype == float
    assert len(bands.as_tuple()) == 4


def test_bandset_shape_mismatch():
    with pytest.raises(ShapeMismatchError):
        BandSet(np.zeros(10), np.zeros(10), np.zeros(10), np.zeros(9))


def test_bandset_rejects_3d():
    with pytest.raises(ShapeMismatchError):
        BandSet(*(np.zeros((2, 2, 5)) for _ in range(4)))
