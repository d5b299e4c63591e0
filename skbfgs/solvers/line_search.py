import warnings

import numpy as np
from sklearn.exceptions import ConvergenceWarning
from sklearn.utils import check_random_state

# probability of randomly resetting the base step size
RESTART_PROBA = 0.25
LINE_SEARCH_WARNING = "Line search did not converge."


def glmnet_line_search(objective, penalty, w_prev, labels, direction, fit_prev,
                       grad_prev, hessian_prev, tuning, step_size, sigma, gamma,
                       max_iter_line, random_restart=False, random_state=None,
                       verbose=0, printer=print):
    r"""Backtracking line search along a quasi-Newton direction.

    Step lengths :math:`t = b^k`, for :math:`k = 0, 1, ...`, are tried until

    .. math:: F(w + t d) - F(w) \leq \sigma t (\nabla F(w)^T d + \gamma d^T H d)

    where :math:`F` is the objective + penalty, see Eq. 20 in [1]. Candidates
    where :math:`F` or its gradient is not finite are skipped.

    Parameters
    ----------
    objective : instance of Objective
        Data-fit term.

    penalty : instance of Penalty
        Smooth penalty.

    w_prev : array, shape (n_params,)
        Current parameters.

    labels : tuple of str
        Parameter labels.

    direction : array, shape (n_params,)
        Descent direction.

    fit_prev : float
        Objective + penalty at ``w_prev``.

    grad_prev : array, shape (n_params,)
        Gradient of objective + penalty at ``w_prev``.

    hessian_prev : array, shape (n_params, n_params)
        Hessian approximation at ``w_prev``.

    tuning : instance of TuningParametersEnet
        Tuning parameters of the penalty.

    step_size : float
        Base :math:`b` of the backtracking schedule.

    sigma : float
        Sufficient decrease parameter.

    gamma : float
        Weight of the curvature term.

    max_iter_line : int
        Maximum number of step lengths tried.

    random_restart : bool, default False
        If ``True``, the base is clamped to 0.9 when ``step_size >= 1`` and,
        with probability 0.25, replaced by a uniform draw in ]0, 1[.

    random_state : int | RandomState instance | None
        Random number generator used when ``random_restart=True``.

    verbose : int, default 0
        Amount of verbosity. 0 is silent.

    printer : callable, default print
        Sink for progress messages.

    Returns
    -------
    w : array, shape (n_params,)
        Accepted parameters, or the last candidate if no step was accepted.

    converged : bool
        Whether a step satisfied the sufficient decrease condition.

    References
    ----------
    .. [1] Yuan, G.-X., Ho, C.-H. and Lin, C.-J.
        "An improved GLMNET for l1-regularized logistic regression", JMLR, 2012.
        https://doi.org/10.1145/2020408.2020421
    """
    if random_restart:
        base = _restart_step_size(step_size, check_random_state(random_state))
    else:
        base = step_size

    # gradients and direction have opposite signs, compare_to is negative
    compare_to = grad_prev @ direction
    if gamma != 0:
        compare_to += gamma * (direction @ hessian_prev @ direction)

    w = np.full(len(w_prev), np.nan)
    converged = False
    for iteration in range(max_iter_line):
        step = base ** iteration
        w = w_prev + step * direction

        fit = objective.value(w, labels) + penalty.value(w, labels, tuning)
        if not np.isfinite(fit):
            continue

        converged = fit - fit_prev <= sigma * step * compare_to
        if converged:
            grad = (objective.gradient(w, labels)
                    + penalty.gradient(w, labels, tuning))
            if np.all(np.isfinite(grad)):
                break
            converged = False

    if max(verbose - 1, 0):
        printer(f"Line search: step {step:.3e} after {iteration + 1} iterations")

    if not converged:
        warnings.warn(LINE_SEARCH_WARNING, category=ConvergenceWarning)
    return w, converged


def _restart_step_size(step_size, rng):
    # a base >= 1 would not shrink the steps
    current = 0.9 if step_size >= 1 else step_size
    # a random base can help when the optimizer is stuck
    if rng.uniform(0., 1.) < RESTART_PROBA:
        current = rng.uniform(0., 1.)
    return current
