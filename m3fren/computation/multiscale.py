"""
Multiscale Multi-Frequency Entropy (M2FrEn) and its multivariate
generalization (M3FrEn).

Script from "A Novel Entropy Metric for Unified Analysis of Temporal,
Spatial, and Spectral EEG Properties"

© 2023-2025 Infant Neuromotor Control Laboratory. All rights reserved.
"""
import warnings
from functools import partial
import numpy as np
import pandas as pd
from m3fren.core.coarse_grain import coarse_grain, multivariate_coarse_grain
from m3fren.core.embedding import embed, flatten_channels, multivariate_embed
from m3fren.computation.entropy import band_entropy
from m3fren.utils.data_models import BandSet, resolve_config
from m3fren.utils.exceptions import (ComputationCancelled,
                                     InsufficientSamplesError)


def _profile(bands, scale_max, entropy_at, truncate=False,
             cancel_event=None, verbose=False, label='M2FrEn'):
    """
    Loop over scales 1..scale_max and collect one entropy value per scale.

    Parameters
    ----------
    bands : BandSet
    scale_max : int
    entropy_at : callable
        entropy_at(bands, scale) -> float
    truncate : bool
        If True, stop at the first scale without enough samples and
        return the values computed so far (with a warning).
        If False (default), the InsufficientSamplesError propagates.
    cancel_event : threading.Event | None
        Checked before every scale.
    verbose : bool
        Print each value as it is computed.

    Returns
    -------
    numpy.ndarray
        (scale_max,) profile, or shorter if truncated.
    """
    profile = []
    for scale in range(1, scale_max + 1):
        if cancel_event is not None and cancel_event.is_set():
            raise ComputationCancelled(np.array(profile))
        try:
            value = entropy_at(bands, scale)
        except InsufficientSamplesError as err:
            if not truncate:
                raise InsufficientSamplesError(err.n_vectors, scale) from err
            warnings.warn(
                    f"{label} truncated at scale {scale - 1} of {scale_max}: "
                    f"{err.n_vectors} embedded vector(s) at scale {scale}")
            break
        if verbose:
            print(f"{label} scale {scale}: {value:.4f}")
        profile.append(value)
    return np.array(profile)


def _univariate_at(bands, scale, m, tau):
    if scale == 1:
        scaled = bands.as_tuple()
    else:
        scaled = [coarse_grain(band, scale) for band in bands.as_tuple()]
    return band_entropy(*scaled, m=m, tau=tau, embedder=embed)


def _multivariate_at(bands, scale, m, tau):
    n_ch = bands.n_channels
    # U_S: coarse-grained, then each band flattened channel by channel
    u_s = [flatten_channels(multivariate_coarse_grain(band, scale))
           for band in bands.as_tuple()]
    embedder = partial(multivariate_embed, n_channels=n_ch)
    return band_entropy(*u_s, m=[m] * n_ch, tau=[tau] * n_ch,
                        embedder=embedder)


def m2fren(alpha, beta, theta, delta, config=None, truncate=False,
           cancel_event=None, verbose=False, **options):
    """
    Multiscale Multi-Frequency Entropy for four bands of a single channel.

    Scale 1 is mFreEn of the raw bands. From scale 2 on, each band is
    coarse-grained (block mean) before mFreEn is computed.

    Parameters
    ----------
    alpha, beta, theta, delta : list or numpy.ndarray
        (N,) signal filtered in each of the four bands.
    config : EntropyConfig | None
        Default is None (m=2, tau=1, scale=20).
    truncate : bool
        Return a shorter profile (with a warning) instead of raising
        when a scale leaves fewer than two embedded vectors.
    cancel_event : threading.Event | None
        If set, computation stops before the next scale
        with ComputationCancelled.
    verbose : bool
        Print per-scale values.
    **options
        m, tau (or t), scale (or Scale) - override `config`.

    Returns
    -------
    numpy.ndarray
        (scale,) array of M2FrEn values, index 0 holding scale 1.
    """
    cfg = resolve_config(config, **options)
    bands = BandSet(alpha, beta, theta, delta).single_channel()

    entropy_at = partial(_univariate_at, m=cfg.m, tau=cfg.tau)
    return _profile(bands, cfg.scale, entropy_at, truncate=truncate,
                    cancel_event=cancel_event, verbose=verbose,
                    label='M2FrEn')


def m3fren(alpha, beta, theta, delta, config=None, truncate=False,
           cancel_event=None, verbose=False, **options):
    """
    Multivariate Multiscale Multi-Frequency Entropy.

    For every scale S the (z, N) bands are coarse-grained per channel,
    flattened channel by channel, and embedded with the same m and tau
    for every channel, so each delay vector spans all z channels.

    Parameters
    ----------
    alpha, beta, theta, delta : numpy.ndarray
        (z, N) multichannel signal filtered in each of the four bands.
        A 1-D band is treated as a single channel.
    config : EntropyConfig | None
        Default is None (m=2, tau=1, scale=20).
    truncate, cancel_event, verbose
        Same as m2fren.
    **options
        m, tau (or t), scale (or Scale) - override `config`.

    Returns
    -------
    numpy.ndarray
        (scale,) array of M3FrEn values.
    """
    cfg = resolve_config(config, **options)
    bands = BandSet(*(np.atleast_2d(band) for band in
                      (alpha, beta, theta, delta)))

    entropy_at = partial(_multivariate_at, m=cfg.m, tau=cfg.tau)
    return _profile(bands, cfg.scale, entropy_at, truncate=truncate,
                    cancel_event=cancel_event, verbose=verbose,
                    label='M3FrEn')


def channelwise(alpha, beta, theta, delta, config=None, multiscale=True,
                **options):
    """
    Apply mFreEn (or M2FrEn) to each channel separately.

    Parameters
    ----------
    alpha, beta, theta, delta : numpy.ndarray
        (z, N) multichannel signal filtered in each of the four bands.
    config : EntropyConfig | None
    multiscale : bool
        True (default): M2FrEn per channel. False: mFreEn per channel.
    **options
        m, tau (or t), scale (or Scale)

    Returns
    -------
    pandas.DataFrame | pandas.Series
        DataFrame (channel x scale) if multiscale, else a Series of
        mFreEn values indexed by channel.
    """
    cfg = resolve_config(config, **options)
    bands = BandSet(*(np.atleast_2d(band) for band in
                      (alpha, beta, theta, delta)))
    channels = [bands.channel(c) for c in range(bands.n_channels)]

    if not multiscale:
        values = [band_entropy(*ch.as_tuple(), m=cfg.m, tau=cfg.tau)
                  for ch in channels]
        return pd.Series(values, name='mFreEn',
                         index=pd.RangeIndex(bands.n_channels, name='channel'))

    rows = [m2fren(*ch.as_tuple(), config=cfg) for ch in channels]
    return pd.DataFrame(np.vstack(rows),
                        index=pd.RangeIndex(bands.n_channels, name='channel'),
                        columns=pd.RangeIndex(1, cfg.scale + 1, name='scale'))
