"""Cost functions as interval scorers."""

import numpy as np

from ..base import BaseIntervalScorer


class BaseCost(BaseIntervalScorer):
    """Base class template for cost functions.

    A cost measures how poorly a single model fits the data in an interval
    ``[start, end)``. Concrete costs are evaluated in two ways:

    - `naive_eval` computes the cost of one interval directly from the data rows.
      It is the reference definition of the cost.
    - `efficient_eval` and the batch method `evaluate` compute the cost from
      quantities precomputed in `fit`, and must agree with `naive_eval` up to
      floating-point rounding.
    """

    _tags = {
        "authors": ["skcost developers"],
        "maintainers": "skcost developers",
        "task": "cost",
    }

    def naive_eval(self, start: int, end: int) -> float:
        """Evaluate the cost of ``X[start:end]`` directly from the data.

        Parameters
        ----------
        start : int
            Start index of the interval (inclusive).
        end : int
            End index of the interval (exclusive).

        Returns
        -------
        cost : float
            The cost of the interval.

        Raises
        ------
        InvalidSegmentBoundsError
            If ``start < 0``, ``end > n_samples`` or ``start >= end``.
        """
        start, end = self._check_interval(start, end)
        return float(self._naive_eval(start, end))

    def efficient_eval(self, start: int, end: int) -> float:
        """Evaluate the cost of ``X[start:end]`` from the precomputed quantities.

        Parameters
        ----------
        start : int
            Start index of the interval (inclusive).
        end : int
            End index of the interval (exclusive).

        Returns
        -------
        cost : float
            The cost of the interval.

        Raises
        ------
        InvalidSegmentBoundsError
            If ``start < 0``, ``end > n_samples`` or ``start >= end``.
        """
        start, end = self._check_interval(start, end)
        return float(self._efficient_eval(start, end))

    def _evaluate(self, cuts: np.ndarray) -> np.ndarray:
        """Evaluate the cost on a set of intervals.

        Parameters
        ----------
        cuts : np.ndarray
            A 2D array with two columns of integer location-based
            intervals to evaluate the cost on.
            The subsets ``X[cuts[i, 0]:cuts[i, 1]]`` for
            ``i = 0, ..., len(cuts)`` are evaluated.

        Returns
        -------
        costs : np.ndarray
            A 2D array of costs. One row for each interval.
        """
        starts, ends = cuts[:, 0], cuts[:, 1]
        return self._evaluate_optim_param(starts, ends)

    def _evaluate_optim_param(self, starts: np.ndarray, ends: np.ndarray) -> np.ndarray:
        """Evaluate the cost for the optimal parameter on a batch of intervals.

        Parameters
        ----------
        starts : np.ndarray
            Start indices of the intervals (inclusive).
        ends : np.ndarray
            End indices of the intervals (exclusive).

        Returns
        -------
        costs : np.ndarray
            A 2D array of costs. One row for each interval.
        """
        raise NotImplementedError("abstract method")

    def _naive_eval(self, start: int, end: int) -> float:
        raise NotImplementedError("abstract method")

    def _efficient_eval(self, start: int, end: int) -> float:
        raise NotImplementedError("abstract method")
