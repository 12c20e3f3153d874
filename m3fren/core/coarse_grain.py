"""
Coarse-graining (block-mean downsampling) for the multiscale metrics

© 2023-2025 Infant Neuromotor Control Laboratory. All rights reserved.
"""
import numpy as np
from m3fren.utils.data_models import check_positive_int
from m3fren.utils.exceptions import ShapeMismatchError


def coarse_grain(arr, scale):
    """
    Generate the consecutive coarse-grained time series based on mean.

    Parameters
    ----------
    arr : list or numpy.ndarray
        (N,) time series. A (1, N) row is accepted too.
    scale : int
        The scale factor S.

    Returns
    -------
    numpy.ndarray
        (N // S,) array. Sample i is the mean of arr[i*S:(i+1)*S].
        The last N % S samples are dropped. If S > N the result is empty.
    """
    scale = check_positive_int(scale, 'scale')
    arr = np.asarray(arr, dtype=float)
    if arr.ndim == 2 and arr.shape[0] == 1:
        arr = arr[0]
    if arr.ndim != 1:
        raise ShapeMismatchError(
                f"coarse_grain expects a 1-D series, got shape {arr.shape}")

    if scale == 1:
        return arr.copy()

    n_out = arr.shape[0] // scale
    return arr[:n_out * scale].reshape(n_out, scale).mean(axis=1)


def multivariate_coarse_grain(arr, scale):
    """
    Multivariate coarse-graining: the univariate rule applied per channel.

    Parameters
    ----------
    arr : numpy.ndarray
        (z, N) matrix with z channels and N samples.
    scale : int
        The scale factor S.

    Returns
    -------
    numpy.ndarray
        (z, N // S) matrix.
    """
    scale = check_positive_int(scale, 'scale')
    arr = np.asarray(arr, dtype=float)
    if arr.ndim != 2:
        raise ShapeMismatchError(
                "multivariate_coarse_grain expects a (z, N) matrix, "
                f"got shape {arr.shape}")

    if scale == 1:
        return arr.copy()

    n_ch, n_samp = arr.shape
    n_out = n_samp // scale
    return arr[:, :n_out * scale].reshape(n_ch, n_out, scale).mean(axis=2)
