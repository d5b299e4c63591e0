import pytest
import numpy as np
from numpy.testing import assert_allclose

from skbfgs.utils.data import make_correlated_data


def test_correlated_data():
    X, y, w_true = make_correlated_data(200, 10, rho=0.5, snr=2., density=0.3,
                                        random_state=0)
    assert X.shape == (200, 10) and y.shape == (200,)
    assert np.count_nonzero(w_true) == 3

    noise = y - X @ w_true
    assert_allclose(np.linalg.norm(X @ w_true) / np.linalg.norm(noise), 2.)

    X_2, y_2, _ = make_correlated_data(200, 10, rho=0.5, snr=2., density=0.3,
                                       random_state=0)
    assert_allclose(X, X_2)
    assert_allclose(y, y_2)


def test_noiseless_data():
    X, y, w_true = make_correlated_data(50, 5, snr=np.inf, random_state=0)
    assert_allclose(y, X @ w_true)


@pytest.mark.parametrize("params", [dict(rho=1.), dict(density=0.), dict(snr=0.)])
def test_invalid_data_parameters(params):
    with pytest.raises(ValueError):
        make_correlated_data(random_state=0, **params)
