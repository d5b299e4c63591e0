from .base import BaseSolver
from .control import ControlBFGS, ConvergenceCriterion
from .line_search import glmnet_line_search
from .bfgs import BFGS, bfgs_optim


__all__ = [BaseSolver, ControlBFGS, ConvergenceCriterion, glmnet_line_search,
           BFGS, bfgs_optim]
