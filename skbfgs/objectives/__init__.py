from .base import BaseObjective
from .single_task import Quadratic, Logistic, Poisson
from .functional import FunctionObjective


__all__ = [BaseObjective, Quadratic, Logistic, Poisson, FunctionObjective]
