import numpy as np


class TuningParametersEnet:
    """Elastic-net tuning parameters, one entry per parameter.

    Parameters
    ----------
    alpha : array, shape (n_params,)
        Mixing weight in [0, 1]. ``alpha = 1`` means no ridge contribution.

    lambda_ : array, shape (n_params,)
        Penalty strength.

    weights : array, shape (n_params,)
        Per-parameter scaling of the penalty. A weight of 0 leaves the
        parameter unpenalized.
    """

    def __init__(self, alpha, lambda_, weights):
        self.alpha = np.atleast_1d(np.asarray(alpha, dtype=np.float64))
        self.lambda_ = np.atleast_1d(np.asarray(lambda_, dtype=np.float64))
        self.weights = np.atleast_1d(np.asarray(weights, dtype=np.float64))

    @classmethod
    def broadcast(cls, n_params, alpha=0., lambda_=0., weights=1.):
        """Build tuning parameters of size ``n_params`` from scalars or arrays."""
        shape = (n_params,)
        return cls(
            np.broadcast_to(np.asarray(alpha, dtype=np.float64), shape).copy(),
            np.broadcast_to(np.asarray(lambda_, dtype=np.float64), shape).copy(),
            np.broadcast_to(np.asarray(weights, dtype=np.float64), shape).copy(),
        )

    def params_to_dict(self):
        return dict(alpha=self.alpha, lambda_=self.lambda_, weights=self.weights)

    def __len__(self):
        return len(self.alpha)

    def __repr__(self):
        return ("TuningParametersEnet(alpha=%s, lambda_=%s, weights=%s)"
                % (self.alpha, self.lambda_, self.weights))
