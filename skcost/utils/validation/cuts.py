"""Validation of segment bounds and cut arrays."""

import numbers

import numpy as np


class InvalidSegmentBoundsError(ValueError):
    """Raised when a segment ``[start, end)`` is not a valid non-empty interval."""


def check_segment_bounds(start: int, end: int, n_samples: int) -> tuple[int, int]:
    """Check the bounds of a single half-open segment ``[start, end)``.

    Parameters
    ----------
    start : int
        Start index of the segment (inclusive).
    end : int
        End index of the segment (exclusive).
    n_samples : int
        Number of samples in the data.

    Returns
    -------
    start, end : tuple of int
        The bounds as plain Python integers.

    Raises
    ------
    InvalidSegmentBoundsError
        If the bounds are not integers, ``start < 0``, ``end > n_samples`` or
        ``start >= end``.
    """
    for name, value in (("start", start), ("end", end)):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise InvalidSegmentBoundsError(
                f"`{name}` must be an integer. Got {name}={value!r}."
            )

    start, end = int(start), int(end)
    if start < 0 or end > n_samples:
        raise InvalidSegmentBoundsError(
            f"The segment [{start}, {end}) is out of bounds. Both start and end must"
            f" be non-negative and at most the number of samples=({n_samples})."
        )
    if start >= end:
        raise InvalidSegmentBoundsError(
            f"The segment [{start}, {end}) is empty. `start` must be strictly"
            " less than `end`."
        )
    return start, end


def check_cuts_array(
    cuts: np.ndarray,
    n_samples: int,
    min_size: int | None = None,
    last_dim_size: int = 2,
) -> np.ndarray:
    """Check array type cuts.

    Parameters
    ----------
    cuts : np.ndarray
        Array of cuts to check.
    n_samples : int
        Number of samples in the data.
    min_size : int, optional (default=1)
        Minimum size of the intervals obtained by the cuts.
    last_dim_size : int, optional (default=2)
        Size of the last dimension.

    Returns
    -------
    cuts : np.ndarray
        The unmodified input cuts array.

    Raises
    ------
    InvalidSegmentBoundsError
        If the cuts does not meet the requirements.
    """
    if min_size is None:
        min_size = 1

    if cuts.ndim != 2:
        raise InvalidSegmentBoundsError("The cuts must be a 2D array.")

    if not np.issubdtype(cuts.dtype, np.integer):
        raise InvalidSegmentBoundsError("The cuts must be of integer type.")

    if cuts.shape[-1] != last_dim_size:
        raise InvalidSegmentBoundsError(
            "The cuts must be specified as an array with length "
            f"{last_dim_size} in the last dimension."
        )

    if not np.all(cuts >= 0) or not np.all(cuts <= n_samples):
        raise InvalidSegmentBoundsError(
            "All cuts must be non-negative, and less than "
            f"or equal to the number of samples=({n_samples})."
        )

    interval_sizes = np.diff(cuts, axis=1)
    if not np.all(interval_sizes >= min_size):
        min_interval_size = np.min(interval_sizes)
        raise InvalidSegmentBoundsError(
            "All rows in `cuts` must be strictly increasing and each entry must"
            f" be at least min_size={min_size} apart."
            f" Found a minimum interval size of {min_interval_size}."
        )
    return cuts
