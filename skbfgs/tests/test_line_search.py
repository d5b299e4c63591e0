import warnings

import pytest
import numpy as np
from numpy.testing import assert_allclose
from sklearn.exceptions import ConvergenceWarning

from skbfgs.objectives import FunctionObjective
from skbfgs.penalties import Ridge, TuningParametersEnet
from skbfgs.solvers import glmnet_line_search


labels = ("x",)
tuning = TuningParametersEnet.broadcast(1, alpha=1.)
square = FunctionObjective(lambda x, labels: float(x[0] ** 2),
                           lambda x, labels: 2 * x)


def _line_search(objective, w, direction, **params):
    search_params = dict(step_size=0.5, sigma=0.5, gamma=0., max_iter_line=30)
    search_params.update(params)
    fit = objective.value(w, labels)
    grad = objective.gradient(w, labels)
    return glmnet_line_search(
        objective, Ridge(), w, labels, direction, fit, grad, np.eye(1), tuning,
        **search_params)


def test_full_newton_step():
    w, converged = _line_search(square, np.array([10.]), np.array([-10.]))
    assert converged
    assert_allclose(w, [0.])


@pytest.mark.parametrize("sigma, expected", [(0., [-1.]), (0.5, [0.])])
def test_sufficient_decrease(sigma, expected):
    # the full step from 1 to -1 does not decrease the fit
    with warnings.catch_warnings():
        warnings.simplefilter("error", ConvergenceWarning)
        w, converged = _line_search(square, np.array([1.]), np.array([-2.]),
                                    sigma=sigma)
    assert converged
    assert_allclose(w, expected)


def test_sigma_zero_accepts_first_finite_candidate():
    objective = FunctionObjective(
        lambda x, labels: np.inf if x[0] < -0.5 else float(x[0] ** 2),
        lambda x, labels: 2 * x)
    w, converged = _line_search(objective, np.array([1.]), np.array([-2.]),
                                sigma=0.)
    assert converged
    assert_allclose(w, [0.])


def test_non_finite_gradient_is_skipped():
    objective = FunctionObjective(
        lambda x, labels: float(x[0] ** 2),
        lambda x, labels: np.array([np.nan]) if abs(x[0]) < 1e-12 else 2 * x)
    w, converged = _line_search(objective, np.array([10.]), np.array([-10.]))
    assert converged
    assert_allclose(w, [5.])


def test_single_line_search_iteration():
    # an ascent direction is always rejected, the full step is returned
    with pytest.warns(ConvergenceWarning, match="Line search did not converge"):
        w, converged = _line_search(square, np.array([1.]), np.array([1.]),
                                    max_iter_line=1)
    assert not converged
    assert_allclose(w, [2.])


@pytest.mark.parametrize("gamma, expected", [(0.5, [0.]), (1., [-1.])])
def test_gamma_curvature_term(gamma, expected):
    # gamma * d^T H d relaxes the required decrease
    w, converged = _line_search(square, np.array([1.]), np.array([-2.]),
                                sigma=0.5, gamma=gamma)
    assert converged
    assert_allclose(w, expected)


@pytest.mark.parametrize("step_size", [0.5, 1.5])
def test_random_restart_is_reproducible(step_size):
    w_1, _ = _line_search(square, np.array([1.]), np.array([-2.]),
                          step_size=step_size, random_restart=True, random_state=0)
    w_2, _ = _line_search(square, np.array([1.]), np.array([-2.]),
                          step_size=step_size, random_restart=True, random_state=0)
    assert_allclose(w_1, w_2)
    assert abs(w_1[0]) < 1.


if __name__ == "__main__":
    pass
