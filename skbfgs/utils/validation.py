import re
from collections.abc import Mapping

import numpy as np


def check_obj_solver_attr(obj, solver, required_attr):
    """Check whether objective or penalty is compatible with solver.

    Parameters
    ----------
    obj : Instance of Objective or Penalty
        The instance Objective (or Penalty) to check.

    solver : Instance of Solver
        The instance of Solver to check.

    required_attr : List or tuple of strings
        The attributes that ``obj`` must have.

    Raises
    ------
        AttributeError
            if any of the attribute in ``required_attr`` is missing
            from ``obj`` attributes.
    """
    missing_attrs = []

    # if `attr` is a list check that at least one of them
    # is within `obj` attributes
    for attr in required_attr:
        attributes = attr if not isinstance(attr, str) else (attr,)

        for a in attributes:
            if callable(getattr(obj, a, None)):
                break
        else:
            missing_attrs.append(_join_attrs_with_or(attributes))

    if len(missing_attrs):
        required_attr = [_join_attrs_with_or(attrs) for attrs in required_attr]

        obj_name = _class_name(obj)
        solver_name = _class_name(solver)

        err_message = (f"{obj_name} is not compatible with solver {solver_name}."
                       f" It must implement {' and '.join(required_attr)}.\n"
                       f"Missing {' and '.join(missing_attrs)}.")

        raise AttributeError(err_message)


def check_tuning_parameters(tuning, n_params):
    """Check the consistency of elastic-net tuning parameters.

    Parameters
    ----------
    tuning : instance of TuningParametersEnet
        Tuning parameters to check.

    n_params : int
        Number of parameters of the problem.

    Raises
    ------
    ValueError
        if ``alpha``, ``lambda_`` and ``weights`` do not all have length
        ``n_params``, contain non-finite values, or if ``alpha`` is not in
        [0, 1].
    """
    for name in ("alpha", "lambda_", "weights"):
        values = getattr(tuning, name)
        if values.ndim != 1 or len(values) != n_params:
            raise ValueError(
                f"Tuning parameter `{name}` should be of size n_params: "
                f"expected {n_params}, got {values.size}.")
        if not np.all(np.isfinite(values)):
            raise ValueError(f"Tuning parameter `{name}` has non-finite values.")

    if np.any(tuning.alpha < 0) or np.any(tuning.alpha > 1):
        raise ValueError("Tuning parameter `alpha` should be chosen in [0, 1].")


def check_parameters(w_init, labels=None):
    """Separate starting values and labels, and check their consistency.

    Parameters
    ----------
    w_init : array-like, shape (n_params,) | mapping
        Starting values. A mapping ``{label: value}`` provides both the
        values and the labels.

    labels : sequence of str, optional
        Parameter labels. Defaults to ``("w0", "w1", ...)``. Must be None when
        ``w_init`` is a mapping.

    Returns
    -------
    w : array, shape (n_params,)
        Copy of the starting values, as float64.

    labels : tuple of str
        Unique parameter labels.
    """
    if isinstance(w_init, Mapping):
        if labels is not None:
            raise ValueError(
                "`labels` must be None when starting values are given as a mapping.")
        labels = tuple(w_init.keys())
        w_init = list(w_init.values())

    w = np.array(w_init, dtype=np.float64)
    if w.ndim != 1:
        raise ValueError(
            f"Starting values should be a 1D array, got {w.ndim} dimensions.")

    if labels is None:
        labels = tuple(f"w{j}" for j in range(len(w)))
    labels = tuple(str(label) for label in labels)

    if len(labels) != len(w):
        raise ValueError(
            "labels should be of size n_params: "
            f"expected {len(w)}, got {len(labels)}.")
    if len(set(labels)) != len(labels):
        raise ValueError("Parameter labels must be unique.")
    return w, labels


def _class_name(obj):
    name_matcher = re.compile(r"\.(\w+)'>")
    match = name_matcher.search(str(obj.__class__))
    return match.group(1) if match else obj.__class__.__name__


def _join_attrs_with_or(attrs):
    if isinstance(attrs, str):
        return f"`{attrs}`"

    if len(attrs) == 1:
        return f"`{attrs[0]}`"

    out = " or ".join([f"`{a}`" for a in attrs])
    return f"({out})"
