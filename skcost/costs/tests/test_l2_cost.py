import warnings

import numpy as np
import pandas as pd
import pytest
from skbase._exceptions import NotFittedError

from skcost.costs import L2Cost
from skcost.utils.validation.cuts import InvalidSegmentBoundsError


@pytest.fixture
def ladder_cost():
    return L2Cost().fit(np.array([[1.0], [2.0], [3.0], [4.0]]))


@pytest.fixture
def multivariate_data():
    rng = np.random.default_rng(4)
    X = rng.normal(size=(60, 3))
    X[20:40] += np.array([5.0, -2.0, 0.5])
    return X


def all_segments(n):
    return [(start, end) for start in range(n) for end in range(start + 1, n + 1)]


def test_l2_cost_cumulative_sums(ladder_cost):
    np.testing.assert_array_equal(ladder_cost.sums_.ravel(), [0, 1, 3, 6, 10])
    np.testing.assert_array_equal(ladder_cost.sums2_.ravel(), [0, 1, 5, 14, 30])


@pytest.mark.parametrize("start, end, expected", [(0, 4, 5.0), (1, 3, 0.5)])
def test_l2_cost_ladder_example(ladder_cost, start, end, expected):
    assert ladder_cost.efficient_eval(start, end) == pytest.approx(expected)
    assert ladder_cost.naive_eval(start, end) == pytest.approx(expected)


def test_efficient_eval_equals_naive_eval(multivariate_data):
    cost = L2Cost().fit(multivariate_data)
    for start, end in all_segments(multivariate_data.shape[0]):
        naive = cost.naive_eval(start, end)
        efficient = cost.efficient_eval(start, end)
        assert efficient == pytest.approx(naive, rel=1e-9, abs=1e-9)


def test_naive_eval_matches_definition(multivariate_data):
    cost = L2Cost().fit(multivariate_data)
    segment = multivariate_data[10:35]
    expected = np.sum((segment - segment.mean(axis=0)) ** 2)
    assert cost.naive_eval(10, 35) == pytest.approx(expected)


def test_single_row_segment_has_zero_cost(multivariate_data):
    cost = L2Cost().fit(multivariate_data)
    for i in range(multivariate_data.shape[0]):
        assert cost.efficient_eval(i, i + 1) == 0.0
        assert cost.naive_eval(i, i + 1) == 0.0


def test_single_row_segment_has_zero_cost_with_large_offset():
    X = np.array([[1.0e6 + 0.1 * k] for k in range(40)])
    with pytest.warns(RuntimeWarning, match="lose precision"):
        cost = L2Cost().fit(X)

    singleton_cuts = np.array([[i, i + 1] for i in range(X.shape[0])])
    assert all(cost.efficient_eval(i, i + 1) == 0.0 for i in range(X.shape[0]))
    np.testing.assert_array_equal(cost.evaluate(singleton_cuts), 0.0)


def test_naive_eval_is_permutation_invariant(multivariate_data):
    rng = np.random.default_rng(10)
    start, end = 15, 45
    shuffled = multivariate_data.copy()
    shuffled[start:end] = rng.permutation(shuffled[start:end])

    cost = L2Cost().fit(multivariate_data).naive_eval(start, end)
    shuffled_cost = L2Cost().fit(shuffled).naive_eval(start, end)
    assert shuffled_cost == pytest.approx(cost, rel=1e-12)


def test_cost_is_non_negative_for_constant_data():
    cost = L2Cost().fit(np.full((50, 2), 0.1))
    costs = cost.evaluate(np.array([[0, 50], [3, 17], [10, 11]]))
    assert np.all(costs >= 0.0)
    assert cost.efficient_eval(0, 50) >= 0.0


@pytest.mark.parametrize("method", ["naive_eval", "efficient_eval"])
@pytest.mark.parametrize("start", [0, 2, 4])
def test_empty_segment_raises(ladder_cost, method, start):
    with pytest.raises(InvalidSegmentBoundsError, match="empty"):
        getattr(ladder_cost, method)(start, start)


@pytest.mark.parametrize("method", ["naive_eval", "efficient_eval"])
@pytest.mark.parametrize("start, end", [(-1, 2), (0, 5), (3, 1), (2.0, 3)])
def test_invalid_segment_bounds_raise(ladder_cost, method, start, end):
    with pytest.raises(InvalidSegmentBoundsError):
        getattr(ladder_cost, method)(start, end)


def test_invalid_segment_bounds_is_value_error(ladder_cost):
    with pytest.raises(ValueError):
        ladder_cost.efficient_eval(3, 3)


def test_numpy_integer_bounds_are_accepted(ladder_cost):
    assert ladder_cost.efficient_eval(np.int64(0), np.int32(4)) == pytest.approx(5.0)


def test_evaluate_matches_efficient_eval(multivariate_data):
    cost = L2Cost().fit(multivariate_data)
    cuts = np.array(all_segments(multivariate_data.shape[0]))
    costs = cost.evaluate(cuts)

    assert costs.shape == (len(cuts), 1)
    expected = [cost.efficient_eval(start, end) for start, end in cuts]
    np.testing.assert_allclose(costs[:, 0], expected, rtol=1e-9, atol=1e-9)


def test_evaluate_single_cut(ladder_cost):
    costs = ladder_cost.evaluate(np.array([0, 4]))
    np.testing.assert_allclose(costs, [[5.0]])


@pytest.mark.parametrize(
    "cuts", [np.array([[0, 2], [2, 2]]), np.array([[0, 5]]), np.array([[0.0, 2.0]])]
)
def test_evaluate_invalid_cuts_raise(ladder_cost, cuts):
    with pytest.raises(InvalidSegmentBoundsError):
        ladder_cost.evaluate(cuts)


def test_not_fitted_raises():
    cost = L2Cost()
    with pytest.raises(NotFittedError):
        cost.efficient_eval(0, 1)
    with pytest.raises(NotFittedError):
        cost.naive_eval(0, 1)
    with pytest.raises(NotFittedError):
        cost.evaluate(np.array([[0, 1]]))


def test_empty_input_rejects_all_segments():
    cost = L2Cost().fit(np.zeros((0, 2)))
    assert cost.n_samples == 0
    np.testing.assert_array_equal(cost.sums_, np.zeros((1, 2)))
    with pytest.raises(InvalidSegmentBoundsError):
        cost.efficient_eval(0, 0)
    with pytest.raises(InvalidSegmentBoundsError):
        cost.efficient_eval(0, 1)


def test_fitted_arrays_are_read_only(ladder_cost):
    for array in [ladder_cost._X, ladder_cost.sums_, ladder_cost.sums2_]:
        assert not array.flags.writeable
        with pytest.raises(ValueError):
            array[0, 0] = 100.0


def test_fit_does_not_modify_input():
    X = np.array([[1.0, 2.0], [3.0, 4.0], [5.0, 7.0]])
    X_copy = X.copy()
    cost = L2Cost().fit(X)
    X[0, 0] = 1000.0

    assert X.flags.writeable
    assert cost.efficient_eval(0, 3) == pytest.approx(
        L2Cost().fit(X_copy).efficient_eval(0, 3)
    )


def test_fit_accepts_pandas_and_vectors():
    values = [1.0, 2.0, 3.0, 4.0]
    for X in [pd.Series(values), pd.DataFrame({"a": values}), values, np.array(values)]:
        cost = L2Cost().fit(X)
        assert cost.n_variables == 1
        assert cost.efficient_eval(0, 4) == pytest.approx(5.0)


def test_fit_rejects_missing_values():
    with pytest.raises(ValueError, match="missing values"):
        L2Cost().fit(np.array([[1.0], [np.nan], [3.0]]))


def test_fit_warns_on_large_offset_relative_to_variation():
    X = 1.0e8 + np.random.default_rng(3).normal(size=(20, 2))
    with pytest.warns(RuntimeWarning, match="lose precision"):
        L2Cost().fit(X)


@pytest.mark.parametrize(
    "X",
    [
        np.random.default_rng(11).normal(size=(50, 3)),
        np.full((10, 2), 1.0e8),
        np.zeros((0, 2)),
    ],
)
def test_fit_does_not_warn_without_cancellation(X):
    with warnings.catch_warnings():
        warnings.simplefilter("error", RuntimeWarning)
        L2Cost().fit(X)
