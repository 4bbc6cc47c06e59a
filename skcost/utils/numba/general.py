"""Numba-optimized functions for general array manipulation."""

import numpy as np

from skcost.utils.numba import njit


@njit
def truncate_below(x: np.ndarray, lower_bound: float) -> np.ndarray:
    """Truncate values below a lower bound in place.

    Parameters
    ----------
    x : np.ndarray
        2D array.
    lower_bound : float
        Lower bound.

    Returns
    -------
    x : np.ndarray
        The input array with values below `lower_bound` replaced by `lower_bound`.
    """
    p = x.shape[1]
    for j in range(p):
        # Numba doesn't support multidimensional boolean indexing.
        x[x[:, j] < lower_bound, j] = lower_bound
    return x
