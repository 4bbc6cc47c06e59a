"""Validation functions for input data."""

import numpy as np
import pandas as pd
from numpy.typing import ArrayLike


def check_data(X: pd.DataFrame | pd.Series | ArrayLike) -> np.ndarray:
    """Check input data and return it as a read-only 2D float array.

    Parameters
    ----------
    X : pd.DataFrame, pd.Series, np.ndarray or array-like
        Input data to check. Must be at most 2-dimensional. A 1D input is treated
        as a single column. Zero rows are allowed.

    Returns
    -------
    X : np.ndarray
        A copy of the input data as a 2D ``float64`` array that cannot be written to.

    Raises
    ------
    ValueError
        If `X` has more than two dimensions or contains missing values.
    """
    if not isinstance(X, (pd.DataFrame, pd.Series)):
        X = as_2d_array(X)
    X = pd.DataFrame(X)

    if X.isna().any(axis=None):
        raise ValueError(
            f"X cannot contain missing values: X.isna().sum()={X.isna().sum()}."
        )

    X = X.to_numpy(dtype=np.float64, copy=True)
    X.flags.writeable = False
    return X


def as_2d_array(X: ArrayLike, vector_as_column=True, dtype=None) -> np.ndarray:
    """Convert an array-like object to a 2D numpy array.

    Parameters
    ----------
    X : `ArrayLike`
        Array-like object.
    vector_as_column : bool, optional (default=True)
        Whether a 1D input becomes a single column or a single row.
    dtype : data-type, optional
        Data type of the output. Inferred from `X` if ``None``.

    Returns
    -------
    X : `np.ndarray`
        2D numpy array.
    """
    X = np.asarray(X, dtype=dtype)
    if X.ndim == 1:
        X = X.reshape(-1, 1) if vector_as_column else X.reshape(1, -1)
    elif X.ndim > 2:
        raise ValueError("X must be at most 2-dimensional.")
    return X
