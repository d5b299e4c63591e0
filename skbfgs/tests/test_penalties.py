import pytest
import numpy as np
from numpy.testing import assert_allclose, assert_array_equal
from scipy.optimize import check_grad

from skbfgs.penalties import Ridge, TuningParametersEnet


n_params = 10
rng = np.random.RandomState(0)
w = rng.randn(n_params)
labels = tuple(f"w{j}" for j in range(n_params))


@pytest.mark.parametrize("lambda_, weights", [(0., 1.), (1., 1.), (10., 3.)])
def test_ridge_disabled(lambda_, weights):
    tuning = TuningParametersEnet.broadcast(
        n_params, alpha=1., lambda_=lambda_, weights=weights)
    penalty = Ridge()

    assert penalty.value(w, labels, tuning) == 0.
    assert_array_equal(penalty.gradient(w, labels, tuning), np.zeros(n_params))


def test_ridge_gradient():
    tuning = TuningParametersEnet(
        alpha=rng.uniform(0, 1, n_params),
        lambda_=rng.uniform(0, 2, n_params),
        weights=rng.uniform(0, 2, n_params))
    lambdas = (1 - tuning.alpha) * tuning.lambda_ * tuning.weights

    penalty = Ridge()
    assert_allclose(penalty.gradient(w, labels, tuning), 2 * lambdas * w)
    assert_allclose(penalty.value(w, labels, tuning), np.sum(lambdas * w ** 2))

    err = check_grad(lambda x: penalty.value(x, labels, tuning),
                     lambda x: penalty.gradient(x, labels, tuning), w)
    assert err < 1e-6


def test_ridge_value():
    tuning = TuningParametersEnet(alpha=[0.5, 0.5], lambda_=[1., 1.],
                                  weights=[1., 1.])
    penalty = Ridge()
    np.testing.assert_almost_equal(
        penalty.value(np.array([2., 3.]), ("a", "b"), tuning), 6.5)
    assert_allclose(
        penalty.gradient(np.array([2., 3.]), ("a", "b"), tuning), [2., 3.])


def test_ridge_unpenalized_parameters():
    # one alpha below 1 enables the ridge, zero weights leave parameters free
    tuning = TuningParametersEnet(alpha=[1., 0.], lambda_=[5., 5.],
                                  weights=[1., 0.])
    penalty = Ridge()
    w_ = np.array([1., 1.])

    assert penalty.value(w_, ("a", "b"), tuning) == 0.
    assert_array_equal(penalty.gradient(w_, ("a", "b"), tuning), [0., 0.])


if __name__ == "__main__":
    pass
