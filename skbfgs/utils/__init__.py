from .data import make_correlated_data
from .hessian import bfgs_update


__all__ = [make_correlated_data, bfgs_update]
