"""
Multi-Frequency Entropy (mFreEn) and the band-entropy engine
shared by the multiscale metrics.

References:
[1] Niu, Y., et al. (2024). Multi-frequency entropy for quantifying complex
    dynamics and its application on EEG Data. Entropy, 26(9), 728.

© 2023-2025 Infant Neuromotor Control Laboratory. All rights reserved.
"""
from itertools import permutations
from math import factorial, log
import numpy as np
import pandas as pd
from scipy.spatial.distance import pdist
from m3fren.core.embedding import embed
from m3fren.utils.data_models import BandSet, resolve_config
from m3fren.utils.exceptions import InsufficientSamplesError

SYMBOLS = ('A', 'B', 'T', 'D')      # alpha, beta, theta, delta
N_BANDS = len(SYMBOLS)
N_PERMS = factorial(N_BANDS)        # 24
# (3!, 2!, 1!, 0!) - place values of the Lehmer code
_PLACE = np.array([factorial(N_BANDS - 1 - i) for i in range(N_BANDS)])


def permutation_labels():
    """
    The 24 orderings of the band alphabet, position k holding the
    ordering whose Lehmer code is k ('ABTD' first, 'DTBA' last).
    itertools.permutations already yields them in that order.
    """
    return [''.join(SYMBOLS[i] for i in perm)
            for perm in permutations(range(N_BANDS))]


def chebyshev_distances(vectors):
    """
    Maximum absolute distance between every pair of embedded vectors.

    Pairs are listed as (0, 1), (0, 2), ..., (1, 2), ... - the same
    order for any input with the same number of rows.
    """
    return pdist(vectors, 'chebyshev')


def symbolize(d_max):
    """
    Rank the bands by distance, per pair.

    Parameters
    ----------
    d_max : numpy.ndarray
        (4, C) matrix of distances, rows in the order alpha, beta, theta, delta

    Returns
    -------
    numpy.ndarray
        (4, C) matrix; column k lists band indices from the smallest
        to the largest distance. Ties keep the band order
        (alpha < beta < theta < delta) because the sort is stable.
    """
    return np.argsort(d_max, axis=0, kind='stable')


def permutation_index(order):
    """
    Lehmer code of each column of `order`, an integer in [0, 23].

    For column p: sum_i #{j > i : p[j] < p[i]} * (3 - i)!
    """
    order = np.asarray(order)
    codes = np.zeros(order.shape[1], dtype=np.intp)
    for i in range(N_BANDS - 1):
        smaller = np.sum(order[i + 1:] < order[i], axis=0)
        codes += smaller * _PLACE[i]
    return codes


def permutation_counts(order):
    """ Occurrences of each of the 24 permutations (indexed by Lehmer code) """
    return np.bincount(permutation_index(order), minlength=N_PERMS)


def normalized_shannon(counts):
    """
    Shannon entropy of the permutation frequencies divided by ln(4!).

    Parameters
    ----------
    counts : numpy.ndarray
        (24,) occurrences of each permutation

    Returns
    -------
    float
        Value in [0, 1]. 0*ln(0) is taken as 0.

    Raises
    ------
    InsufficientSamplesError
        If no pair was tallied.
    """
    counts = np.asarray(counts, dtype=float)
    if counts.sum() == 0:
        raise InsufficientSamplesError(0)
    probs = counts / counts.sum()
    probs = probs[probs > 0]
    h_p = -np.sum(probs * np.log(probs))
    # -0.0 when a single permutation takes all the mass
    return float(h_p / log(N_PERMS)) + 0.0


def _band_counts(bands, m, tau, embedder):
    """ Embed -> distance -> symbolize -> tally. Returns (24,) counts """
    vectors = [embedder(m, tau, band) for band in bands]
    n_vec = vectors[0].shape[0]
    if n_vec < 2:
        raise InsufficientSamplesError(n_vec)

    d_max = np.vstack([chebyshev_distances(v) for v in vectors])
    return permutation_counts(symbolize(d_max))


def band_entropy(alpha, beta, theta, delta, m=2, tau=1, embedder=embed):
    """
    Normalized permutation entropy across four frequency bands.

    The bands are embedded with the same (m, tau) and distances between
    every pair of vectors are computed per band. For each pair the four
    distances are sorted, the resulting ordering of {A, B, T, D} is
    tallied, and the Shannon entropy of the tally is normalized by ln(24).

    Parameters
    ----------
    alpha, beta, theta, delta : numpy.ndarray
        Band sequences of identical shape, already coarse-grained
        (and flattened, or kept as (z, L), for the multivariate embedder).
    m, tau : int or list
        Embedding dimension and time lag, passed to `embedder` as-is
        (per-channel lists for multivariate_embed).
    embedder : callable
        embed, or multivariate_embed (with n_channels bound for a
        flattened sequence)

    Returns
    -------
    float
        Entropy in [0, 1].

    Raises
    ------
    ShapeMismatchError
        If the bands differ in shape.
    InsufficientSamplesError
        If fewer than two embedded vectors are available.
    """
    bands = BandSet(alpha, beta, theta, delta)
    return normalized_shannon(
            _band_counts(bands.as_tuple(), m, tau, embedder))


def mfren(alpha, beta, theta, delta, config=None, **options):
    """
    Multi-Frequency Entropy (mFreEn) of a single-channel signal.

    Parameters
    ----------
    alpha, beta, theta, delta : list or numpy.ndarray
        (N,) or (1, N) signal filtered in the alpha [8-13 Hz], beta [13-30 Hz],
        theta [4-8 Hz] and delta [0.5-4 Hz] bands.
    config : EntropyConfig | None
        Default is None (m=2, tau=1).
    **options
        m, tau (or t) - override `config`.

    Returns
    -------
    float
        mFreEn value
    """
    cfg = resolve_config(config, **options)
    bands = BandSet(alpha, beta, theta, delta).single_channel()
    return band_entropy(*bands.as_tuple(), m=cfg.m, tau=cfg.tau)


def permutation_distribution(alpha, beta, theta, delta, config=None,
                             **options):
    """
    Relative frequency of every band ordering, the distribution whose
    entropy mfren reports.

    Returns
    -------
    pandas.Series
        24 probabilities indexed by labels such as 'ABTD', summing to 1.
    """
    cfg = resolve_config(config, **options)
    bands = BandSet(alpha, beta, theta, delta).single_channel()
    counts = _band_counts(bands.as_tuple(), cfg.m, cfg.tau, embed)
    return pd.Series(counts / counts.sum(), index=permutation_labels(),
                     name='probability')
