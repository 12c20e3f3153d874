"""
Simulated EEG bands following the MIX model: a sinusoid per band,
with a fraction p of its time points replaced by uniform noise.

© 2023-2025 Infant Neuromotor Control Laboratory. All rights reserved.
"""
import numpy as np
from m3fren.utils.data_models import BandSet, check_positive_int
from m3fren.utils.exceptions import InvalidParameterError

# Frequency (Hz) and amplitude per EEG band
BAND_SINUSOIDS = {
        'delta': {'f': 2, 'A': 7 / 2 * np.sqrt(2)},
        'theta': {'f': 6, 'A': 3 * np.sqrt(2)},
        'alpha': {'f': 10, 'A': 2 * np.sqrt(2)},
        'beta': {'f': 20, 'A': np.sqrt(2)},
        }


def mix_bands(n_samples=1000, fs=500, n_channels=3, p=0.2, seed=None):
    """
    Generate four (n_channels, n_samples) band signals with the MIX model.

    Parameters
    ----------
    n_samples : int
        Signal length (default 1000)
    fs : float
        Sampling frequency in Hz (default 500)
    n_channels : int
        Number of channels (default 3)
    p : float
        Fraction of the sinusoid replaced by noise, 0 <= p <= 1 (default 0.2)
    seed : int | numpy.random.Generator | None
        For reproducible noise.

    Returns
    -------
    BandSet
        (n_channels, n_samples) alpha, beta, theta and delta matrices.
    """
    n_samples = check_positive_int(n_samples, 'n_samples')
    n_channels = check_positive_int(n_channels, 'n_channels')
    if not 0 <= p <= 1:
        raise InvalidParameterError(f"p should be within [0, 1], got {p}")
    if fs <= 0:
        raise InvalidParameterError(f"fs should be positive, got {fs}")

    rng = np.random.default_rng(seed)
    t = np.arange(n_samples) / fs
    num_noise = int(round(p * n_samples))

    data = {}
    for band, par in BAND_SINUSOIDS.items():
        signal = np.tile(par['A'] * np.sin(2 * np.pi * par['f'] * t),
                         (n_channels, 1))
        # Uniform noise in range [-sqrt(3), sqrt(3)]
        noise = rng.uniform(-np.sqrt(3), np.sqrt(3), (n_channels, n_samples))
        # Same noisy time points for every channel of a band
        idx = rng.choice(n_samples, size=num_noise, replace=False)
        signal[:, idx] = noise[:, idx]
        data[band] = signal

    return BandSet(**data)
