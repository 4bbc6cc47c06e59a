"""Numba-optimized functions for calculating running statistics."""

import numpy as np
from numpy.typing import ArrayLike

from skcost.utils.numba import njit, prange
from skcost.utils.validation.data import as_2d_array


@njit
def col_cumsum(x: np.ndarray, init_zero: bool = False) -> np.ndarray:
    """Calculate the cumulative sum of each column in a 2D array.

    Each row of the output is obtained by adding one row of `x` to the previous
    row of the output, so the total work is linear in the size of `x`. The columns
    are independent and are summed in parallel if ``NUMBA_PARALLEL`` is enabled.

    Parameters
    ----------
    x : np.ndarray
        2D array.
    init_zero : bool
        Whether to let the first row be a row of zeros before the summing is
        started or not.

    Returns
    -------
    np.ndarray : Cumulative sums. If init_zero, the output contains one more
        row compared to the input x.
    """
    n = x.shape[0]
    p = x.shape[1]
    if init_zero:
        sums = np.zeros((n + 1, p))
        start = 1
    else:
        sums = np.zeros((n, p))
        start = 0

    for j in prange(p):
        sums[start:, j] = np.cumsum(x[:, j])

    return sums


def compute_cumulative_sum(X: ArrayLike) -> np.ndarray:
    """Compute the zero-initialised cumulative sum table of a data matrix.

    Row ``k`` of the output holds the column-wise sum of the first ``k`` rows of
    `X`, such that the sum over the rows ``start, ..., end - 1`` is
    ``sums[end] - sums[start]``.

    Parameters
    ----------
    X : array-like
        Data matrix of shape ``(n, p)``. A 1D input is treated as a single column.
        `X` may have zero rows.

    Returns
    -------
    sums : np.ndarray
        Array of shape ``(n + 1, p)`` where the first row is all zeros.

    Examples
    --------
    >>> compute_cumulative_sum([[1.0], [2.0], [3.0], [4.0]]).ravel()
    array([ 0.,  1.,  3.,  6., 10.])
    """
    X = as_2d_array(X, dtype=np.float64)
    return col_cumsum(X, init_zero=True)
