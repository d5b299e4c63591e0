import numpy as np
from numba import njit
from scipy.linalg import cholesky, LinAlgError


def bfgs_update(w_prev, grad_prev, hessian_prev, w_new, grad_new,
                cautious=True, hessian_eps=1e-3, verbose=False, printer=print):
    r"""BFGS update of the Hessian approximation.

    With :math:`s = w_"new" - w_"prev"` and :math:`y = g_"new" - g_"prev"`,
    the update reads:

    .. math:: H_"new" = H - (H s s^T H) / (s^T H s) + (y y^T) / (y^T s)

    Parameters
    ----------
    w_prev : array, shape (n_params,)
        Parameters of the previous iteration.

    grad_prev : array, shape (n_params,)
        Gradient at ``w_prev``.

    hessian_prev : array, shape (n_params, n_params)
        Hessian approximation at ``w_prev``.

    w_new : array, shape (n_params,)
        Parameters of the current iteration.

    grad_new : array, shape (n_params,)
        Gradient at ``w_new``.

    cautious : bool, default True
        If ``True``, the update is skipped when the curvature condition
        :math:`y^T s \geq` ``hessian_eps`` does not hold.

    hessian_eps : float, default 1e-3
        Threshold of the curvature condition.

    verbose : bool, default False
        If ``True``, report skipped updates through ``printer``.

    printer : callable, default print
        Sink for the debug messages.

    Returns
    -------
    hessian : array, shape (n_params, n_params)
        Updated symmetric positive definite Hessian approximation. A copy of
        ``hessian_prev`` is returned when the update is skipped.

    References
    ----------
    .. [1] Li, D.-H. and Fukushima, M.
        "On the global convergence of the BFGS method for nonconvex
        unconstrained optimization problems", SIAM J. Optim., 2001.
    """
    s = np.asarray(w_new, dtype=np.float64) - w_prev
    y = np.asarray(grad_new, dtype=np.float64) - grad_prev
    hessian_prev = np.ascontiguousarray(hessian_prev, dtype=np.float64)

    yTs = y @ s
    if cautious and yTs < hessian_eps:
        if verbose:
            printer(f"Curvature condition violated (y's = {yTs:.3e}), "
                    "Hessian not updated.")
        return hessian_prev.copy()

    sTHs = s @ hessian_prev @ s
    if not sTHs > 0 or not np.isfinite(yTs) or yTs == 0:
        if verbose:
            printer("Degenerate BFGS update, Hessian not updated.")
        return hessian_prev.copy()

    hessian = _bfgs_formula(hessian_prev, s, y, sTHs, yTs)

    if not _is_positive_definite(hessian):
        if verbose:
            printer("Updated Hessian is not positive definite, "
                    "Hessian not updated.")
        return hessian_prev.copy()
    return hessian


@njit
def _bfgs_formula(hessian, s, y, sTHs, yTs):
    Hs = hessian @ s
    updated = hessian - np.outer(Hs, Hs) / sTHs + np.outer(y, y) / yTs
    # remove rounding asymmetries
    return (updated + updated.T) / 2


def _is_positive_definite(hessian):
    if not np.all(np.isfinite(hessian)):
        return False
    try:
        cholesky(hessian, lower=True)
    except LinAlgError:
        return False
    return True
