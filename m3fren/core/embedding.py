"""
Delay embedding of band signals (univariate and multivariate)

Ref: M. U. Ahmed and D. P. Mandic, "Multivariate multiscale entropy
analysis", IEEE Signal Processing Letters, vol. 19, no. 2, pp.91-94. 2012

© 2023-2025 Infant Neuromotor Control Laboratory. All rights reserved.
"""
import numpy as np
from m3fren.utils.data_models import check_positive_int
from m3fren.utils.exceptions import ShapeMismatchError


def n_vectors(n_samp, m, tau):
    """
    Number of delay vectors taken from a series of n_samp samples.

    N - m rows, but never a row whose last element, i + (m-1)*tau,
    would run past the end of the series.
    """
    return max(0, min(n_samp - m, n_samp - (m - 1) * tau))


def embed(m, tau, ts):
    """
    Create delay-embedded vectors with embedding dimension m and lag tau.

    Parameters
    ----------
    m : int
        Embedding dimension
    tau : int
        Time lag
    ts : list or numpy.ndarray
        (N,) time series

    Returns
    -------
    numpy.ndarray
        (R, m) matrix, R = n_vectors(N, m, tau).
        Row i is [ts[i], ts[i+tau], ..., ts[i+(m-1)*tau]].
    """
    m = check_positive_int(m, 'm')
    tau = check_positive_int(tau, 'tau')
    ts = np.asarray(ts, dtype=float)
    if ts.ndim != 1:
        raise ShapeMismatchError(
                f"embed expects a 1-D series, got shape {ts.shape}")

    nrows = n_vectors(ts.shape[0], m, tau)
    # (R, m) index grid - one allocation for the whole matrix
    idx = np.arange(nrows)[:, None] + tau * np.arange(m)[None, :]
    return ts[idx]


def flatten_channels(arr):
    """
    Channel-major flattening of a (z, L) matrix:
    all L samples of channel 1, then channel 2, ...
    """
    arr = np.asarray(arr, dtype=float)
    if arr.ndim == 1:
        return arr.copy()
    if arr.ndim != 2:
        raise ShapeMismatchError(
                f"flatten_channels expects a (z, L) matrix, got {arr.shape}")
    return arr.reshape(-1)


def multivariate_embed(m_vec, tau_vec, data, n_channels=None):
    """
    Multivariate delay embedding.

    Parameters
    ----------
    m_vec : list or numpy.ndarray
        Embedding dimension per channel (length z)
    tau_vec : list or numpy.ndarray
        Time lag per channel (length z)
    data : numpy.ndarray
        (z, L) matrix, or the (z * L,) channel-major sequence
        returned by flatten_channels.
    n_channels : int | None
        z for a flattened sequence. None means a 1-D `data` is a
        single channel. Ignored (but checked) for a (z, L) matrix.

    Returns
    -------
    numpy.ndarray
        (R, sum(m_vec)) matrix. Row i concatenates the i-th univariate
        delay vector of every channel. R is bounded by the most
        restrictive channel, L - max(m_c) (and the lag rule of embed).
    """
    m_vec = [check_positive_int(m, 'm') for m in np.atleast_1d(m_vec)]
    tau_vec = [check_positive_int(t, 'tau') for t in np.atleast_1d(tau_vec)]
    if len(m_vec) != len(tau_vec):
        raise ShapeMismatchError(
                f"{len(m_vec)} embedding dimensions but {len(tau_vec)} lags")

    data = np.asarray(data, dtype=float)
    if data.ndim == 2:
        n_ch = data.shape[0]
        if n_channels is not None and n_channels != n_ch:
            raise ShapeMismatchError(
                    f"n_channels={n_channels} but data has {n_ch} channels")
    elif data.ndim == 1:
        n_ch = 1 if n_channels is None else \
            check_positive_int(n_channels, 'n_channels')
    else:
        raise ShapeMismatchError(
                "multivariate_embed expects a (z, L) matrix or a flattened "
                f"sequence, got {data.shape}")

    if len(m_vec) != n_ch:
        raise ShapeMismatchError(
                f"{len(m_vec)} embedding dimensions given for {n_ch} channel(s)")

    if data.ndim == 2:
        segments = data
    else:
        if data.shape[0] % n_ch:
            raise ShapeMismatchError(
                    f"Sequence of length {data.shape[0]} cannot be split "
                    f"into {n_ch} channels")
        segments = data.reshape(n_ch, -1)
    seg_len = segments.shape[1]

    nrows = min(n_vectors(seg_len, m, t) for m, t in zip(m_vec, tau_vec))
    out = np.empty((nrows, sum(m_vec)))

    col = 0
    for seg, m, t in zip(segments, m_vec, tau_vec):
        out[:, col:col + m] = embed(m, t, seg)[:nrows]
        col += m
    return out
