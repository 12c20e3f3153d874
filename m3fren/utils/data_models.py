"""
Script storing dataclasses and the shared option parsing

© 2023-2025 Infant Neuromotor Control Laboratory. All rights reserved.
"""
from dataclasses import dataclass, field, fields
import numpy as np
from m3fren.utils.exceptions import InvalidParameterError, ShapeMismatchError

BANDS = ('alpha', 'beta', 'theta', 'delta')

# MATLAB-style name-value keys (t, Scale) are accepted as aliases
OPTION_ALIASES = {'t': 'tau', 'Scale': 'scale'}


def check_positive_int(value, name):
    """
    Reject anything that is not a positive integer.
    bool is an int subclass, so it is excluded explicitly.

    Returns
    -------
    int
    """
    if isinstance(value, (bool, np.bool_)) or \
            not isinstance(value, (int, np.integer)):
        raise InvalidParameterError(
                f"{name} should be a positive integer, got {value!r}")
    if value < 1:
        raise InvalidParameterError(
                f"{name} should be a positive integer, got {value}")
    return int(value)


@dataclass
class EntropyConfig:
    """
    Parameters shared by mFreEn, M2FrEn and M3FrEn.

    Attributes
    ----------
    m : int
        Embedding dimension (default 2)
    tau : int
        Time lag (default 1)
    scale : int
        Largest coarse-graining scale (default 20).
        Only the multiscale functions read it.
    """
    m: int = 2
    tau: int = 1
    scale: int = 20

    def __post_init__(self):
        self.m = check_positive_int(self.m, 'm')
        self.tau = check_positive_int(self.tau, 'tau')
        self.scale = check_positive_int(self.scale, 'scale')


def resolve_config(config=None, **options):
    """
    Merge a (possibly missing) EntropyConfig with keyword options.

    Every entry point goes through here so that defaults live in one place.

    Parameters
    ----------
    config : EntropyConfig | None
        Base configuration. None means the defaults {m: 2, tau: 1, scale: 20}.
    **options
        m, tau (or t), scale (or Scale). These override `config`.

    Returns
    -------
    EntropyConfig
        A new, validated configuration.
    """
    if config is not None and not isinstance(config, EntropyConfig):
        raise InvalidParameterError(
                f"config should be an EntropyConfig, got {type(config).__name__}")
    known = {f.name for f in fields(EntropyConfig)}
    merged = {} if config is None else \
        {name: getattr(config, name) for name in known}
    for key, value in options.items():
        key = OPTION_ALIASES.get(key, key)
        if key not in known:
            raise InvalidParameterError(f"Unknown option: {key}")
        merged[key] = value
    return EntropyConfig(**merged)


@dataclass
class BandSet:
    """
    Four band-filtered versions of the same recording.

    Attributes
    ----------
    alpha, beta, theta, delta : numpy.ndarray
        (N,) arrays, or (z, N) matrices for multichannel signals.
        All four must share one shape.
    n_channels : int
        1 for a 1-D band, z otherwise.
    n_samples : int
        N
    """
    alpha: np.ndarray
    beta: np.ndarray
    theta: np.ndarray
    delta: np.ndarray
    n_channels: int = field(init=False)
    n_samples: int = field(init=False)

    def __post_init__(self):
        for name in BANDS:
            setattr(self, name, np.asarray(getattr(self, name), dtype=float))

        shapes = {name: getattr(self, name).shape for name in BANDS}
        if len(set(shapes.values())) != 1:
            raise ShapeMismatchError(
                    f"All four bands should share one shape: {shapes}")

        shape = self.alpha.shape
        if len(shape) not in (1, 2):
            raise ShapeMismatchError(
                    f"A band should be (N,) or (z, N), got {shape}")

        self.n_channels = 1 if len(shape) == 1 else shape[0]
        self.n_samples = shape[-1]

    def as_tuple(self):
        """ Bands in the alphabet order: alpha, beta, theta, delta """
        return tuple(getattr(self, name) for name in BANDS)

    def channel(self, idx):
        """ Single-channel (1-D) BandSet for channel `idx` """
        if self.alpha.ndim == 1:
            if idx != 0:
                raise IndexError("A 1-D BandSet has only channel 0")
            return self
        return BandSet(*(band[idx] for band in self.as_tuple()))

    def single_channel(self):
        """
        1-D BandSet from (N,) bands or (1, N) rows.
        Wider (z, N) input belongs to the multivariate functions.
        """
        if self.alpha.ndim == 1:
            return self
        if self.n_channels != 1:
            raise ShapeMismatchError(
                    f"Expected single-channel bands, got {self.n_channels} "
                    "channels; use m3fren or channelwise for (z, N) input")
        return self.channel(0)
