__version__ = '0.1dev'

from skbfgs.estimators import GeneralizedLinearEstimator  # noqa F401
from skbfgs.results import FitResult  # noqa F401
from skbfgs.solvers import BFGS, ControlBFGS, ConvergenceCriterion, bfgs_optim  # noqa F401
from skbfgs.exceptions import (  # noqa F401
    OptimizationError, ConvergenceCheckError, SingularHessianError, FitInterrupted,
    NonFiniteGradientError,
)
