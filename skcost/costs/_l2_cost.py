"""L2 cost."""

import warnings

import numpy as np

from ..utils.numba import njit
from ..utils.numba.general import truncate_below
from ..utils.numba.stats import col_cumsum
from .base import BaseCost

# Relative accuracy of the efficient costs, compared to the total cost of the data,
# below which `fit` warns about cancellation in the cumulative sums.
PRECISION_WARNING_TOLERANCE = 1.0e-9


@njit
def l2_cost_naive(X: np.ndarray, start: int, end: int) -> float:
    """Calculate the L2 cost of one segment directly from the data rows.

    Parameters
    ----------
    X : np.ndarray
        2D data array.
    start : int
        Start index of the segment (inclusive).
    end : int
        End index of the segment (exclusive).

    Returns
    -------
    cost : float
        Sum of squared Euclidean distances between each row of ``X[start:end]``
        and the mean row of the segment.
    """
    p = X.shape[1]
    n = end - start

    mean = np.zeros(p)
    for i in range(start, end):
        mean += X[i]
    mean /= n

    cost = 0.0
    for i in range(start, end):
        deviation = X[i] - mean
        cost += np.sum(deviation * deviation)
    return cost


@njit
def l2_cost_interval(start: int, end: int, sums: np.ndarray, sums2: np.ndarray) -> float:
    """Calculate the L2 cost of one segment from cumulative sums.

    Uses that the sum of squared deviations from the mean equals the sum of squares
    minus the squared norm of the sum divided by the segment length, where both sums
    are differences of two rows of the cumulative sum tables.

    Parameters
    ----------
    start : int
        Start index of the segment (inclusive).
    end : int
        End index of the segment (exclusive). Must be larger than `start`.
    sums : np.ndarray
        Cumulative sum of the input data, with a row of 0-entries as the first row.
    sums2 : np.ndarray
        Cumulative sum of the squared input data, with a row of 0-entries as the first
        row.

    Returns
    -------
    cost : float
        The L2 cost of the segment, truncated below at zero. Single-row segments
        have a cost of exactly zero.
    """
    if end - start == 1:
        return 0.0

    sum_of_squares = np.sum(sums2[end] - sums2[start])
    partial_sums = sums[end] - sums[start]
    cross_term = np.sum(partial_sums * partial_sums) / (end - start)
    cost = sum_of_squares - cross_term
    return max(cost, 0.0)


@njit
def l2_cost_optim(
    starts: np.ndarray,
    ends: np.ndarray,
    sums: np.ndarray,
    sums2: np.ndarray,
) -> np.ndarray:
    """Calculate the L2 cost for an optimal constant mean for each segment.

    Parameters
    ----------
    starts : np.ndarray
        Start indices of the segments.
    ends : np.ndarray
        End indices of the segments.
    sums : np.ndarray
        Cumulative sum of the input data, with a row of 0-entries as the first row.
    sums2 : np.ndarray
        Cumulative sum of the squared input data, with a row of 0-entries as the first
        row.

    Returns
    -------
    costs : np.ndarray
        A 2D array of costs. One row for each interval. The number of columns
        is equal to the number of columns in the input data, where each column
        represents the univariate cost for the corresponding input data column.
        Rows of single-row segments are exactly zero.
    """
    partial_sums = sums[ends] - sums[starts]
    partial_sums2 = sums2[ends] - sums2[starts]
    n = (ends - starts).reshape(-1, 1)
    costs = partial_sums2 - partial_sums**2 / n
    for i in range(n.shape[0]):
        if n[i, 0] == 1:
            costs[i, :] = 0.0
    return costs


class L2Cost(BaseCost):
    """L2 cost of a constant mean.

    The cost of a segment ``X[start:end]`` is the sum of squared Euclidean
    distances between each row and the mean row of the segment, summed jointly
    over all variables. Fitting precomputes the cumulative sums of the data and of
    the squared data, after which every evaluation costs ``O(p)`` operations
    regardless of the segment length.

    Examples
    --------
    >>> from skcost.costs import L2Cost
    >>> cost = L2Cost().fit([[1.0], [2.0], [3.0], [4.0]])
    >>> cost.efficient_eval(0, 4)
    5.0
    >>> cost.naive_eval(1, 3)
    0.5
    """

    _tags = {
        "authors": ["skcost developers"],
        "maintainers": "skcost developers",
        "is_aggregated": True,
    }

    def __init__(self):
        super().__init__()

    def _fit(self, X: np.ndarray, y=None):
        """Fit the cost.

        This method precomputes quantities that speed up the cost evaluation.

        Parameters
        ----------
        X : np.ndarray
            Data to evaluate. Must be a 2D array.
        y: None
            Ignored. Included for API consistency by convention.
        """
        self.sums_ = col_cumsum(X, init_zero=True)
        self.sums2_ = col_cumsum(X**2, init_zero=True)
        self.sums_.flags.writeable = False
        self.sums2_.flags.writeable = False

        if self._loses_precision(X):
            warnings.warn(
                "The sum of squares of the data is large compared to its total"
                " squared deviation from the mean. Costs from `efficient_eval` and"
                " `evaluate` may lose precision due to cancellation. Use `naive_eval`"
                " or center the data if accurate costs are needed.",
                RuntimeWarning,
                stacklevel=3,
            )

        return self

    def _loses_precision(self, X: np.ndarray) -> bool:
        """Check if cancellation may dominate the efficiently evaluated costs.

        The absolute rounding error of the cumulative sum formula is of the order of
        the machine epsilon times the sum of squares, which is compared to the exact
        cost of the full data. Data with zero total cost is not checked.
        """
        n = X.shape[0]
        if n == 0:
            return False

        total_cost = l2_cost_naive(X, 0, n)
        if total_cost == 0.0:
            return False

        rounding_error = np.finfo(np.float64).eps * np.sum(self.sums2_[-1])
        return rounding_error > PRECISION_WARNING_TOLERANCE * total_cost

    def _naive_eval(self, start: int, end: int) -> float:
        return l2_cost_naive(self._X, start, end)

    def _efficient_eval(self, start: int, end: int) -> float:
        return l2_cost_interval(start, end, self.sums_, self.sums2_)

    def _evaluate_optim_param(self, starts: np.ndarray, ends: np.ndarray) -> np.ndarray:
        """Evaluate the cost for the optimal parameter.

        Parameters
        ----------
        starts : np.ndarray
            Start indices of the intervals (inclusive).
        ends : np.ndarray
            End indices of the intervals (exclusive).

        Returns
        -------
        costs : np.ndarray
            A 2D array of costs with one row for each interval and a single column,
            the cost summed over all variables.
        """
        costs = l2_cost_optim(starts, ends, self.sums_, self.sums2_)
        costs = np.sum(costs, axis=1, keepdims=True)
        return truncate_below(costs, 0.0)

    @classmethod
    def get_test_params(cls, parameter_set="default"):
        """Return testing parameter settings for the estimator.

        Parameters
        ----------
        parameter_set : str, default="default"
            Name of the set of test parameters to return, for use in tests. If no
            special parameters are defined for a value, will return `"default"` set.

        Returns
        -------
        params : dict or list of dict, default = {}
            Parameters to create testing instances of the class.
            `L2Cost` has no parameters, so a single empty dict is returned.
        """
        return [{}]
