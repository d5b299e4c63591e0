import warnings
from numbers import Real

import numpy as np
from scipy.linalg import solve, LinAlgError
from scipy.optimize import approx_fprime
from sklearn.exceptions import ConvergenceWarning
from sklearn.utils import check_random_state

from skbfgs.exceptions import (ConvergenceCheckError, FitInterrupted,
                               NonFiniteGradientError, SingularHessianError)
from skbfgs.results import FitResult
from skbfgs.solvers.base import BaseSolver
from skbfgs.solvers.control import ControlBFGS, ConvergenceCriterion, DEBUG_VERBOSE
from skbfgs.solvers.line_search import glmnet_line_search, LINE_SEARCH_WARNING
from skbfgs.utils.hessian import bfgs_update, _is_positive_definite
from skbfgs.utils.validation import check_parameters, check_tuning_parameters

# curvature threshold of the cautious BFGS update
HESSIAN_EPS = 1e-3


class BFGS(BaseSolver):
    """BFGS solver with GLMNET line search for smooth penalized objectives.

    The solver minimizes ``objective(w) + penalty(w)``. The descent direction
    solves ``H d = -grad`` with a BFGS approximation ``H`` of the Hessian, and
    the step length is found by the backtracking line search of glmnet [1, 2].

    Parameters
    ----------
    initial_hessian : None | float | array | "compute", default None
        Initial Hessian approximation, see :class:`ControlBFGS`.

    step_size : float, default 0.9
        Base of the backtracking schedule, in ]0, 1[.

    sigma : float, default 1e-5
        Sufficient decrease parameter of the line search.

    gamma : float, default 0.
        Weight of the curvature term of the line search.

    max_iter : int, default 1000
        Maximum number of outer iterations.

    max_iter_in : int, default 1000
        Maximum number of inner iterations. Unused by this solver.

    max_iter_line : int, default 500
        Maximum number of line search iterations.

    tol : float, default 1e-8
        Tolerance of the convergence criterion.

    tol_in : float, default 1e-10
        Tolerance of inner iterations. Unused by this solver.

    convergence_criterion : {"GLMNET", "fitChange", "gradients"}, default "GLMNET"
        Stopping criterion of the outer iterations.

    verbose : int, default 0
        Amount of verbosity. 0 is silent, ``verbose > 0`` prints the fit every
        ``verbose`` iterations, ``-99`` adds debug output of the Hessian update.

    random_restart : bool, default False
        Randomly reset the base of the line search schedule.

    random_state : int | RandomState instance | None, default None
        Random number generator used when ``random_restart=True``.

    printer : callable, default print
        Sink for the progress messages.

    References
    ----------
    .. [1] Friedman, J., Hastie, T. and Tibshirani, R.
        "Regularization Paths for Generalized Linear Models via Coordinate
        Descent", Journal of Statistical Software, 2010.
        https://doi.org/10.18637/jss.v033.i01

    .. [2] Yuan, G.-X., Ho, C.-H. and Lin, C.-J.
        "An improved GLMNET for l1-regularized logistic regression", JMLR, 2012.
        https://doi.org/10.1145/2020408.2020421
    """

    _objective_required_attr = ("value", "gradient")
    _penalty_required_attr = ("value", "gradient")

    def __init__(self, initial_hessian=None, step_size=0.9, sigma=1e-5, gamma=0.,
                 max_iter=1000, max_iter_in=1000, max_iter_line=500, tol=1e-8,
                 tol_in=1e-10, convergence_criterion="GLMNET", verbose=0,
                 random_restart=False, random_state=None, printer=print):
        self.initial_hessian = initial_hessian
        self.step_size = step_size
        self.sigma = sigma
        self.gamma = gamma
        self.max_iter = max_iter
        self.max_iter_in = max_iter_in
        self.max_iter_line = max_iter_line
        self.tol = tol
        self.tol_in = tol_in
        self.convergence_criterion = convergence_criterion
        self.verbose = verbose
        self.random_restart = random_restart
        self.random_state = random_state
        self.printer = printer

    def get_control(self):
        """Freeze the solver settings into a validated :class:`ControlBFGS`."""
        return ControlBFGS(
            initial_hessian=self.initial_hessian,
            step_size=self.step_size,
            sigma=self.sigma,
            gamma=self.gamma,
            max_iter_out=self.max_iter,
            max_iter_in=self.max_iter_in,
            max_iter_line=self.max_iter_line,
            break_outer=self.tol,
            break_inner=self.tol_in,
            convergence_criterion=self.convergence_criterion,
            verbose=self.verbose,
            random_restart=self.random_restart,
        ).validate()

    def _solve(self, objective, penalty, tuning, w_init, labels=None,
               should_stop=None):
        return bfgs_optim(objective, w_init, penalty, tuning, self.get_control(),
                          labels=labels, should_stop=should_stop,
                          random_state=self.random_state, printer=self.printer)

    def custom_checks(self, objective, penalty, tuning, w_init):
        w, _ = check_parameters(w_init)
        check_tuning_parameters(tuning, len(w))


def bfgs_optim(objective, w_init, penalty, tuning, control=None, labels=None,
               should_stop=None, random_state=None, printer=print):
    """Minimize objective + smooth penalty with BFGS and a GLMNET line search.

    Parameters
    ----------
    objective : instance of Objective
        Data-fit term, implementing ``value(w, labels)`` and
        ``gradient(w, labels)``.

    w_init : array, shape (n_params,) | mapping
        Starting values. A mapping ``{label: value}`` also provides the labels.

    penalty : instance of Penalty
        Smooth penalty, implementing ``value(w, labels, tuning)`` and
        ``gradient(w, labels, tuning)``.

    tuning : instance of TuningParametersEnet
        Tuning parameters of the penalty.

    control : instance of ControlBFGS, optional
        Optimizer settings. Defaults to ``ControlBFGS()``.

    labels : sequence of str, optional
        Parameter labels, defaults to ``("w0", "w1", ...)``.

    should_stop : callable, optional
        Called without argument before every outer iteration. If it returns
        ``True``, the optimization is aborted with :class:`FitInterrupted`.

    random_state : int | RandomState instance | None
        Random number generator of the line search restarts.

    printer : callable, default print
        Sink for the progress messages.

    Returns
    -------
    result : FitResult
        Outcome of the optimization.

    Raises
    ------
    SingularHessianError
        if no descent direction can be computed from the Hessian approximation.

    NonFiniteGradientError
        if the gradient at the current parameters is not finite.

    ConvergenceCheckError
        if the convergence criterion cannot be evaluated.

    FitInterrupted
        if ``should_stop`` requests the optimization to stop.
    """
    control = (ControlBFGS() if control is None else control).validate()
    w_start, labels = check_parameters(w_init, labels)
    n_params = len(w_start)
    check_tuning_parameters(tuning, n_params)
    rng = check_random_state(random_state)
    verbose = control.verbose

    if verbose != 0:
        printer("Optimizing with bfgs.")

    def fit_fun(w):
        return objective.value(w, labels) + penalty.value(w, labels, tuning)

    def grad_fun(w):
        return objective.gradient(w, labels) + penalty.gradient(w, labels, tuning)

    w_k, w_prev = w_start.copy(), w_start.copy()
    fit_k = fit_prev = fit_fun(w_prev)
    grad_k = grad_prev = grad_fun(w_prev)

    fits = np.full(control.max_iter_out + 1, np.nan)
    fits[0] = fit_prev

    hessian_prev = _initial_hessian(control.initial_hessian, w_prev, grad_fun)
    hessian_k = hessian_prev.copy()

    messages = []
    converged = False
    n_iter = 0

    for t in range(control.max_iter_out):
        if should_stop is not None and should_stop():
            raise FitInterrupted(t, fits.copy())

        grad_prev = grad_fun(w_prev)
        direction = _descent_direction(hessian_prev, grad_prev)

        w_k, line_converged = glmnet_line_search(
            objective, penalty, w_prev, labels, direction, fit_prev, grad_prev,
            hessian_prev, tuning, control.step_size, control.sigma, control.gamma,
            control.max_iter_line, random_restart=control.random_restart,
            random_state=rng, verbose=verbose, printer=printer)
        if not line_converged and LINE_SEARCH_WARNING not in messages:
            messages.append(LINE_SEARCH_WARNING)

        grad_k = grad_fun(w_k)
        fit_k = fit_fun(w_k)
        fits[t + 1] = fit_k
        n_iter = t + 1

        if verbose > 0 and t % verbose == 0:
            printer(f"Fit in iteration {t + 1}: {fit_k:.10f}\n{w_k}")

        hessian_k = bfgs_update(w_prev, grad_prev, hessian_prev, w_k, grad_k,
                                cautious=True, hessian_eps=HESSIAN_EPS,
                                verbose=verbose == DEBUG_VERBOSE, printer=printer)

        stop_crit = _stop_criterion(control.convergence_criterion, hessian_k,
                                    direction, fits[t + 1], fits[t], grad_k)
        if stop_crit < control.break_outer:
            converged = True
            if verbose != 0:
                printer(f"Stopping criterion {stop_crit:.2e} after "
                        f"{t + 1} iterations")
            break

        # for next iteration: save current values as previous values
        fit_prev = fit_k
        w_prev = w_k
        grad_prev = grad_k
        hessian_prev = hessian_k
    else:
        message = (
            f"Outer iterations did not converge for "
            f"tol={control.break_outer:.3e} and "
            f"max_iter={control.max_iter_out}.\n"
            "Consider increasing `max_iter` and/or `tol`.")
        warnings.warn(message, category=ConvergenceWarning)
        messages.append(message)

    return FitResult(
        converged=converged,
        fit=fit_k,
        fits=fits,
        w=w_k.copy(),
        hessian=hessian_k.copy(),
        labels=labels,
        n_iter=n_iter,
        warnings=tuple(messages),
    )


def _descent_direction(hessian, grad):
    if not np.all(np.isfinite(grad)):
        raise NonFiniteGradientError(
            f"Cannot compute the descent direction: non-finite gradient {grad}.")
    # quasi-Newton direction: solve H d = -grad without inverting H
    try:
        return solve(hessian, -grad)
    except (LinAlgError, ValueError) as e:
        raise SingularHessianError(
            f"Cannot compute the descent direction: {e}") from e


def _stop_criterion(criterion, hessian, direction, fit_k, fit_prev, grad_k):
    try:
        with np.errstate(all="raise", under="ignore"):
            if criterion is ConvergenceCriterion.GLMNET:
                # expected decrease of the fit, see Yuan et al. (2012)
                stop_crit = np.max(np.diag(hessian) * direction ** 2)
            elif criterion is ConvergenceCriterion.FIT_CHANGE:
                stop_crit = np.abs(fit_k - fit_prev)
            else:
                stop_crit = np.max(np.abs(grad_k))
    except (FloatingPointError, ValueError) as e:
        raise ConvergenceCheckError(criterion, e) from e

    if not np.isfinite(stop_crit):
        raise ConvergenceCheckError(
            criterion, f"criterion value is {stop_crit}")
    return stop_crit


def _initial_hessian(initial_hessian, w, grad_fun):
    n_params = len(w)
    if initial_hessian is None:
        return np.eye(n_params)

    if isinstance(initial_hessian, str):
        # finite differences of the gradient, initial_hessian == "compute"
        hessian = np.atleast_2d(approx_fprime(w, grad_fun))
        hessian = (hessian + hessian.T) / 2
        if not _is_positive_definite(hessian):
            warnings.warn(
                "The computed initial Hessian is not positive definite. "
                "Using the identity matrix instead.")
            return np.eye(n_params)
        return hessian

    if isinstance(initial_hessian, Real):
        return initial_hessian * np.eye(n_params)

    hessian = np.array(initial_hessian, dtype=np.float64)
    if hessian.shape != (n_params, n_params):
        raise ValueError(
            "initial_hessian should be of shape (n_params, n_params): "
            f"expected {(n_params, n_params)}, got {hessian.shape}.")
    if not np.allclose(hessian, hessian.T):
        raise ValueError("initial_hessian should be symmetric.")
    return hessian