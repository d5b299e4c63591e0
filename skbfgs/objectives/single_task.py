import numpy as np
from numba import njit

from skbfgs.objectives.base import BaseObjective


class Quadratic(BaseObjective):
    """Quadratic objective.

    The objective reads:

    .. math:: 1 / (2 xx  n_"samples") ||y - Xw||_2 ^ 2

    Attributes
    ----------
    X : array, shape (n_samples, n_features)
        Design matrix, set by ``initialize``.

    y : array, shape (n_samples,)
        Target vector, set by ``initialize``.

    Xty : array, shape (n_features,)
        Pre-computed quantity used during the gradient evaluation.
        Equal to ``X.T @ y``.
    """

    def __init__(self):
        pass

    def initialize(self, X, y):
        self.X, self.y = X, y
        self.Xty = X.T @ y

    def value(self, w, labels):
        Xw = self.X @ w
        return np.sum((self.y - Xw) ** 2) / (2 * len(Xw))

    def gradient(self, w, labels):
        Xw = self.X @ w
        return (self.X.T @ Xw - self.Xty) / len(Xw)

    def hessian(self, w, labels):
        return self.X.T @ self.X / len(self.y)


@njit
def sigmoid(x):
    """Vectorwise sigmoid."""
    out = 1 / (1 + np.exp(- x))
    return out


class Logistic(BaseObjective):
    r"""Logistic objective with labels in {-1, 1}.

    The objective reads:

    .. math:: 1 / n_"samples" \sum_(i=1)^(n_"samples") log(1 + exp(-y_i (Xw)_i))
    """

    def __init__(self):
        pass

    def initialize(self, X, y):
        self.X, self.y = X, y

    def raw_grad(self, y, Xw):
        """Compute gradient of objective w.r.t ``Xw``."""
        return -y * sigmoid(-y * Xw) / len(y)

    def value(self, w, labels):
        Xw = self.X @ w
        return np.mean(np.logaddexp(0., -self.y * Xw))

    def gradient(self, w, labels):
        return self.X.T @ self.raw_grad(self.y, self.X @ w)


class Poisson(BaseObjective):
    r"""Poisson objective with log link.

    The objective reads:

    .. math:: 1 / n_"samples" \sum_(i=1)^(n_"samples") (exp((Xw)_i) - y_i (Xw)_i)

    Note
    ----
    Large values of ``Xw`` overflow the exponential, the objective then
    returns ``inf``. The line search of the solvers handles it by trying
    shorter steps.
    """

    def __init__(self):
        pass

    def initialize(self, X, y):
        if np.any(y < 0):
            raise ValueError(
                "Target vector `y` should only take positive values "
                "when fitting a Poisson model.")
        self.X, self.y = X, y

    def raw_grad(self, y, Xw):
        """Compute gradient of objective w.r.t ``Xw``."""
        return (np.exp(Xw) - y) / len(y)

    def value(self, w, labels):
        Xw = self.X @ w
        with np.errstate(over='ignore'):
            return np.sum(np.exp(Xw) - self.y * Xw) / len(self.y)

    def gradient(self, w, labels):
        Xw = self.X @ w
        with np.errstate(over='ignore', invalid='ignore'):
            return self.X.T @ self.raw_grad(self.y, Xw)
