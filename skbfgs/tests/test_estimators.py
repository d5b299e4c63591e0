import pytest
import numpy as np
from numpy.testing import assert_allclose
from sklearn.linear_model import Ridge as RidgeRegression, LogisticRegression

from skbfgs import GeneralizedLinearEstimator, BFGS
from skbfgs.objectives import Logistic, Poisson, Quadratic
from skbfgs.penalties import Ridge, TuningParametersEnet
from skbfgs.utils.data import make_correlated_data


n_samples, n_features = 60, 8
X, y, _ = make_correlated_data(n_samples, n_features, random_state=0)


def test_regression_default():
    estimator = GeneralizedLinearEstimator().fit(X, y)

    # default ridge with lambda_ = 1
    sk_estimator = RidgeRegression(alpha=2 * n_samples, fit_intercept=False)
    sk_estimator.fit(X, y)

    assert estimator.converged_
    assert estimator.coef_.shape == (n_features,)
    assert_allclose(estimator.coef_, sk_estimator.coef_, atol=1e-6)
    assert_allclose(estimator.predict(X), sk_estimator.predict(X), atol=1e-5)
    assert_allclose(estimator.score(X, y), sk_estimator.score(X, y), atol=1e-5)
    assert estimator.hessian_.shape == (n_features, n_features)
    assert estimator.n_iter_ >= 1


@pytest.mark.parametrize("classes", [(0, 1), ("neg", "pos")])
def test_binary_classification(classes):
    lambda_ = 0.05
    y_classif = np.where(y > 0, classes[1], classes[0])
    tuning = TuningParametersEnet.broadcast(n_features, lambda_=lambda_)
    estimator = GeneralizedLinearEstimator(
        objective=Logistic(), penalty=Ridge(), tuning=tuning,
        solver=BFGS(convergence_criterion="gradients", tol=1e-7)).fit(X, y_classif)

    sk_estimator = LogisticRegression(
        C=1 / (2 * n_samples * lambda_), fit_intercept=False, tol=1e-12,
        max_iter=10_000).fit(X, y_classif)

    assert estimator.coef_.shape == (1, n_features)
    assert_allclose(estimator.coef_, sk_estimator.coef_, atol=1e-5)
    np.testing.assert_array_equal(estimator.classes_, sk_estimator.classes_)
    np.testing.assert_array_equal(estimator.predict(X), sk_estimator.predict(X))
    assert estimator.score(X, y_classif) == sk_estimator.score(X, y_classif)


def test_multiclass_not_supported():
    y_classif = np.digitize(y, np.quantile(y, [1 / 3, 2 / 3]))
    with pytest.raises(ValueError, match="binary classification"):
        GeneralizedLinearEstimator(objective=Logistic()).fit(X, y_classif)


def test_poisson_regression():
    y_count = np.random.RandomState(0).poisson(np.exp(X @ np.full(n_features, 0.1)))
    estimator = GeneralizedLinearEstimator(
        objective=Poisson(),
        tuning=TuningParametersEnet.broadcast(n_features, lambda_=0.01)
    ).fit(X, y_count)
    assert estimator.converged_
    assert np.all(np.isfinite(estimator.coef_))


def test_refit_classification_as_regression():
    estimator = GeneralizedLinearEstimator(objective=Logistic()).fit(X, y > 0)
    assert estimator.coef_.shape == (1, n_features)

    estimator.set_params(objective=Quadratic()).fit(X, y)
    assert not hasattr(estimator, "classes_")
    assert estimator.coef_.shape == (n_features,)

    y_pred = estimator.predict(X)
    assert y_pred.dtype == np.float64
    assert_allclose(y_pred, X @ estimator.coef_)
    assert np.isfinite(estimator.score(X, y))


def test_predict_before_fit():
    with pytest.raises(Exception, match="not fitted"):
        GeneralizedLinearEstimator().predict(X)


if __name__ == "__main__":
    pass
