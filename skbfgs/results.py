from typing import NamedTuple, Tuple

import numpy as np


class FitResult(NamedTuple):
    """Outcome of a BFGS optimization.

    Attributes
    ----------
    converged : bool
        Whether the convergence criterion was met before ``max_iter_out``.

    fit : float
        Penalized fit (objective + smooth penalty) at ``w``.

    fits : array, shape (max_iter_out + 1,)
        Penalized fit at every outer iteration, ``fits[0]`` being the fit at
        the starting values. Iterations that were not run are ``nan``.

    w : array, shape (n_params,)
        Final parameter vector.

    hessian : array, shape (n_params, n_params)
        Final BFGS approximation of the Hessian.

    labels : tuple of str
        Parameter labels, in the order of ``w``.

    n_iter : int
        Number of outer iterations run.

    warnings : tuple of str
        Non-fatal warnings raised during the optimization.
    """

    converged: bool
    fit: float
    fits: np.ndarray
    w: np.ndarray
    hessian: np.ndarray
    labels: Tuple[str, ...]
    n_iter: int
    warnings: Tuple[str, ...] = ()

    def named_parameters(self):
        """Return the final parameters as a ``{label: value}`` dict."""
        return dict(zip(self.labels, self.w))
