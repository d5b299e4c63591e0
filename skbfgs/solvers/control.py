from enum import Enum
from numbers import Real
from typing import Any, NamedTuple

import numpy as np

# verbose value switching on the debug output of the Hessian update
DEBUG_VERBOSE = -99


class ConvergenceCriterion(Enum):
    """Stopping criteria of the BFGS outer iterations."""

    GLMNET = "GLMNET"
    FIT_CHANGE = "fitChange"
    GRADIENTS = "gradients"

    @property
    def display_name(self):
        return self.value

    @classmethod
    def from_name(cls, name):
        """Get a criterion from its member name or display name."""
        if isinstance(name, cls):
            return name
        key = str(name).lower().replace("_", "")
        for criterion in cls:
            if key in (criterion.name.lower().replace("_", ""),
                       criterion.value.lower()):
                return criterion
        raise ValueError(
            f"Unknown convergence criterion {name!r}, expected one of "
            f"{[criterion.display_name for criterion in cls]}.")


class ControlBFGS(NamedTuple):
    """Settings of the BFGS optimizer.

    Attributes
    ----------
    initial_hessian : None | float | array, shape (n_params, n_params) | "compute"
        Initial Hessian approximation. ``None`` is the identity, a float
        scales the identity, ``"compute"`` approximates the Hessian of the
        objective + penalty at the starting values by finite differences of
        the gradient.

    step_size : float, default 0.9
        Base of the backtracking schedule: step lengths are
        ``step_size ** iteration``. Should be in ]0, 1[.

    sigma : float, default 1e-5
        Sufficient decrease parameter of the line search, see Eq. 20 in [1].
        ``sigma = 0`` only requires the fit not to increase.

    gamma : float, default 0.
        Weight of the curvature term in the sufficient decrease condition [1].

    max_iter_out : int, default 1000
        Maximum number of outer iterations.

    max_iter_in : int, default 1000
        Maximum number of inner iterations, for solvers with an inner loop.

    max_iter_line : int, default 500
        Maximum number of line search iterations.

    break_outer : float, default 1e-8
        Threshold of the outer convergence criterion.

    break_inner : float, default 1e-10
        Threshold of the inner convergence criterion, for solvers with an
        inner loop.

    convergence_criterion : ConvergenceCriterion, default GLMNET
        Criterion used to stop the outer iterations.

    verbose : int, default 0
        0 is silent, ``verbose > 0`` prints the fit every ``verbose`` outer
        iterations, ``-99`` prints debug information of the Hessian update.

    random_restart : bool, default False
        If ``True``, the base of the line search schedule is clamped to 0.9
        when ``step_size >= 1`` and randomly reset to a uniform draw with
        probability 0.25 at every line search.

    References
    ----------
    .. [1] Yuan, G.-X., Ho, C.-H. and Lin, C.-J.
        "An improved GLMNET for l1-regularized logistic regression", JMLR, 2012.
    """

    initial_hessian: Any = None
    step_size: float = 0.9
    sigma: float = 1e-5
    gamma: float = 0.
    max_iter_out: int = 1000
    max_iter_in: int = 1000
    max_iter_line: int = 500
    break_outer: float = 1e-8
    break_inner: float = 1e-10
    convergence_criterion: ConvergenceCriterion = ConvergenceCriterion.GLMNET
    verbose: int = 0
    random_restart: bool = False

    def validate(self):
        """Check the settings and return a normalized copy.

        Raises
        ------
        ValueError
            if any setting is out of its range.
        """
        for name in ("max_iter_out", "max_iter_in", "max_iter_line"):
            if getattr(self, name) < 1:
                raise ValueError(f"`{name}` should be a positive integer, "
                                 f"got {getattr(self, name)}.")
        for name in ("break_outer", "break_inner", "sigma", "gamma"):
            value = getattr(self, name)
            if not np.isfinite(value) or value < 0:
                raise ValueError(
                    f"`{name}` should be a non-negative number, got {value}.")
        if not np.isfinite(self.step_size) or self.step_size <= 0:
            raise ValueError(
                f"`step_size` should be positive, got {self.step_size}.")

        initial_hessian = self.initial_hessian
        if isinstance(initial_hessian, str):
            if initial_hessian != "compute":
                raise ValueError(
                    "`initial_hessian` should be None, a float, an array or "
                    f"'compute', got {initial_hessian!r}.")
        elif isinstance(initial_hessian, Real) and initial_hessian <= 0:
            raise ValueError(
                f"A scalar `initial_hessian` should be positive, got {initial_hessian}.")

        return self._replace(
            convergence_criterion=ConvergenceCriterion.from_name(
                self.convergence_criterion),
            max_iter_out=int(self.max_iter_out),
            max_iter_in=int(self.max_iter_in),
            max_iter_line=int(self.max_iter_line),
        )
