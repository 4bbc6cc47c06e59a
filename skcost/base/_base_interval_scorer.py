"""Interval scorer base class.

    class name: BaseIntervalScorer

Scitype defining methods:
    fitting                         - fit(self, X, y=None)
    evaluating                      - evaluate(self, cuts)

Needs to be implemented for a concrete interval scorer:
    _fit(self, X, y=None)
    _evaluate(self, cuts)

Recommended but optional to implement for a concrete interval scorer:
    min_size(self)
    get_model_size(self, p)
"""

__all__ = ["BaseIntervalScorer"]

import numpy as np
from numpy.typing import ArrayLike
from sktime.base import BaseEstimator

from skcost.utils.validation.cuts import check_cuts_array, check_segment_bounds
from skcost.utils.validation.data import as_2d_array, check_data


class BaseIntervalScorer(BaseEstimator):
    """Base class template for interval scorers.

    An interval scorer is fitted once to a data matrix and then evaluated on any
    number of integer location-based intervals of that matrix. Fitting is the only
    state-changing operation. All evaluation methods are read-only queries, so a
    fitted scorer can be shared between threads.

    Attributes
    ----------
    _is_fitted : bool
        Indicates whether the interval scorer has been fitted.
    _X : np.ndarray
        Read-only copy of the data input to `fit`, coerced to a 2D float array.
    """

    _tags = {
        "object_type": "interval_scorer",  # type of object
        "authors": ["skcost developers"],  # author(s) of the object
        "maintainers": "skcost developers",  # current maintainer(s) of the object
        "task": None,  # "cost"
        # is_aggregated: whether the scorer always returns a single value per cut,
        # irrespective of the number of variables in the input data.
        "is_aggregated": False,
        "capability:multivariate": True,
        "capability:missing_values": False,
        "capability:update": False,
    }

    # Number of entries per row in the cuts array of `evaluate`.
    expected_cut_entries = 2

    def __init__(self):
        self._is_fitted = False
        self._X = None

        super().__init__()

    def fit(self, X, y=None):
        """Fit the interval scorer to the training data.

        Parameters
        ----------
        X : pd.Series, pd.DataFrame, np.ndarray or array-like
            Data to evaluate. A 1D input is treated as a single variable. `X` may
            have zero rows, in which case no interval can be evaluated.
        y : None
            Ignored. Included for API consistency by convention.

        Returns
        -------
        self :
            Reference to self.

        Notes
        -----
        Updates the fitted model and sets attributes ending in ``"_"``.
        """
        self._X = check_data(X)

        self._fit(X=self._X, y=y)
        self._is_fitted = True
        return self

    def _fit(self, X: np.ndarray, y=None):
        """Fit the interval scorer to training data.

        Parameters
        ----------
        X : np.ndarray
            Data to evaluate. Must be a 2D array.
        y : None
            Ignored. Included for API consistency by convention.

        Returns
        -------
        self :
            Reference to self.
        """
        return self

    def evaluate(self, cuts: ArrayLike) -> np.ndarray:
        """Evaluate the score according to a set of cuts.

        Parameters
        ----------
        cuts : ArrayLike
            A 2D array of integer location-based cuts to evaluate where each row gives
            a single ``[start, end]`` interval. If a 1D array is passed, it is
            assumed to be a single row.

        Returns
        -------
        scores : np.ndarray
            A 2D array of scores. One row for each row in cuts.

        Raises
        ------
        InvalidSegmentBoundsError
            If any of the cuts is not a valid interval of the fitted data.
        """
        self.check_is_fitted()
        cuts = as_2d_array(cuts, vector_as_column=False)
        cuts = self._check_cuts(cuts)
        return self._evaluate(cuts)

    def _evaluate(self, cuts: np.ndarray) -> np.ndarray:
        """Evaluate the score on a set of validated cuts.

        Parameters
        ----------
        cuts : np.ndarray
            A 2D array of integer location-based cuts to evaluate.

        Returns
        -------
        values : np.ndarray
            A 2D array of scores. One row for each row in cuts.
        """
        raise NotImplementedError("abstract method")

    @property
    def min_size(self) -> int | None:
        """Minimum valid size of an interval to evaluate.

        Returns
        -------
        int or None
            The minimum valid size of an interval to evaluate. If ``None``, it is
            unknown what the minimum size is.
        """
        return 1

    def get_model_size(self, p: int) -> int:
        """Get the number of model parameters to estimate for each interval.

        Parameters
        ----------
        p : int
            Number of variables in the data.
        """
        return p

    def _check_cuts(self, cuts: np.ndarray) -> np.ndarray:
        return check_cuts_array(
            cuts,
            n_samples=self._X.shape[0],
            min_size=self.min_size,
            last_dim_size=self.expected_cut_entries,
        )

    def _check_interval(self, start: int, end: int) -> tuple[int, int]:
        """Check a single ``[start, end)`` interval against the fitted data."""
        self.check_is_fitted()
        return check_segment_bounds(start, end, n_samples=self._X.shape[0])

    @property
    def n_samples(self) -> int:
        """Return the number of samples in the input data."""
        self.check_is_fitted()
        return self._X.shape[0]

    @property
    def n_variables(self) -> int:
        """Return the number of variables in the input data."""
        self.check_is_fitted()
        return self._X.shape[1]
