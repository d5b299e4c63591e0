import numpy as np
from numba import njit

from skbfgs.penalties.base import BaseSmoothPenalty


class Ridge(BaseSmoothPenalty):
    r"""Ridge penalty with glmnet parametrization.

    The penalty reads:

    .. math:: \sum_(i=1)^(n_"params") (1 - alpha_i) lambda_i "weights"_i w_i^2

    When all ``alpha`` equal 1, the penalty is disabled and both its value and
    gradient are exactly 0, whatever ``lambda_`` and ``weights``.

    Note
    ----
    The per-parameter computations are jit compiled with Numba.
    """

    def __init__(self):
        pass

    def value(self, w, labels, tuning):
        """Compute ridge penalty value."""
        if _ridge_disabled(tuning.alpha):
            return 0.
        return _ridge_value(np.asarray(w, dtype=np.float64), tuning.alpha,
                            tuning.lambda_, tuning.weights)

    def gradient(self, w, labels, tuning):
        """Compute ridge penalty gradient."""
        w = np.asarray(w, dtype=np.float64)
        if _ridge_disabled(tuning.alpha):
            return np.zeros(len(w))
        return _ridge_gradient(w, tuning.alpha, tuning.lambda_, tuning.weights)


def _ridge_disabled(alpha):
    return np.all(alpha == 1.)


@njit
def _ridge_value(w, alpha, lambda_, weights):
    penalty = 0.
    for j in range(len(w)):
        lambda_j = (1. - alpha[j]) * lambda_[j] * weights[j]
        penalty += lambda_j * w[j] ** 2
    return penalty


@njit
def _ridge_gradient(w, alpha, lambda_, weights):
    grad = np.zeros(len(w))
    for j in range(len(w)):
        lambda_j = (1. - alpha[j]) * lambda_[j] * weights[j]
        grad[j] = lambda_j * 2 * w[j]
    return grad
