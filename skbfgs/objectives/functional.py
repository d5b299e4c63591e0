import numpy as np

from skbfgs.objectives.base import BaseObjective


class FunctionObjective(BaseObjective):
    """Objective defined by two callables.

    Parameters
    ----------
    value_fun : callable
        ``value_fun(w, labels)`` returns the objective value at ``w``.

    gradient_fun : callable
        ``gradient_fun(w, labels)`` returns the gradient at ``w``, an array
        with the same length as ``w``.

    Examples
    --------
    >>> square = FunctionObjective(lambda w, labels: w @ w,
    ...                            lambda w, labels: 2 * w)
    >>> square.value(np.array([3.]), ("x",))
    9.0
    """

    def __init__(self, value_fun, gradient_fun):
        self.value_fun = value_fun
        self.gradient_fun = gradient_fun

    def params_to_dict(self):
        return dict(value_fun=self.value_fun, gradient_fun=self.gradient_fun)

    def value(self, w, labels):
        return float(self.value_fun(w, labels))

    def gradient(self, w, labels):
        return np.asarray(self.gradient_fun(w, labels), dtype=np.float64)
