import numpy as np


class OptimizationError(Exception):
    """Base class for fatal errors aborting an optimization."""


class ConvergenceCheckError(OptimizationError, ArithmeticError):
    """Numerical breakdown while evaluating a convergence criterion.

    Attributes
    ----------
    criterion : ConvergenceCriterion
        The criterion whose evaluation failed.
    """

    def __init__(self, criterion, reason):
        self.criterion = criterion
        super().__init__(
            f"Error while computing convergence criterion "
            f"'{criterion.display_name}': {reason}")


class SingularHessianError(OptimizationError, np.linalg.LinAlgError):
    """The Hessian approximation cannot be solved for a descent direction."""


class FitInterrupted(OptimizationError):
    """The optimization was cancelled between two outer iterations.

    Attributes
    ----------
    n_iter : int
        Number of outer iterations completed before the interruption.

    fits : array, shape (max_iter_out + 1,)
        Fit trace up to the interruption, ``nan`` for iterations not run.
    """

    def __init__(self, n_iter, fits):
        self.n_iter = n_iter
        self.fits = fits
        super().__init__(f"Optimization interrupted after {n_iter} iterations.")


class NonFiniteGradientError(OptimizationError, ArithmeticError):
    """The gradient at the current parameters has non-finite entries."""
