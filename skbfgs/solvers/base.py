from abc import abstractmethod, ABC

from skbfgs.utils.validation import check_obj_solver_attr


class BaseSolver(ABC):
    """Base class for solvers.

    Attributes
    ----------
    _objective_required_attr : list
        List of attributes that must be implemented in Objective.

    _penalty_required_attr : list
        List of attributes that must be implemented in Penalty.

    Notes
    -----
    For required attributes, if an attribute is given as a list of attributes
    it means at least one of them should be implemented.
    For instance, if

        _objective_required_attr = (
            "value",
            ("gradient", "gradient_scalar")
        )

    it mean objective must implement the methods ``value``
    and (``gradient`` or ``gradient_scalar``).
    """

    _objective_required_attr: list
    _penalty_required_attr: list

    @abstractmethod
    def _solve(self, objective, penalty, tuning, w_init, labels, should_stop):
        """Solve an optimization problem.

        Parameters
        ----------
        objective : instance of Objective
            Data-fit term.

        penalty : instance of Penalty
            Smooth penalty.

        tuning : instance of TuningParametersEnet
            Tuning parameters of the penalty.

        w_init : array, shape (n_params,) | mapping
            Starting values, optionally as ``{label: value}``.

        labels : sequence of str | None
            Parameter labels.

        should_stop : callable | None
            Cancellation check, called once per outer iteration.

        Returns
        -------
        result : FitResult
            Outcome of the optimization.
        """

    def custom_checks(self, objective, penalty, tuning, w_init):
        """Ensure the solver is suited for the `objective` + `penalty` problem.

        This method includes extra checks to perform
        aside from checking attributes compatibility.
        """
        pass

    def solve(self, objective, penalty, tuning, w_init, labels=None, *,
              should_stop=None, run_checks=True):
        """Solve the optimization problem after validating its compatibility.

        A proxy of ``_solve`` method that implicitly ensures the compatibility
        of ``objective`` and ``penalty`` with the solver.

        Examples
        --------
        >>> ...
        >>> result = solver.solve(objective, penalty, tuning, w_init)
        """
        if run_checks:
            self._validate(objective, penalty, tuning, w_init)

        return self._solve(objective, penalty, tuning, w_init, labels, should_stop)

    def get_params(self, deep=True):
        """Get parameters for this solver."""
        return {key: value for key, value in vars(self).items()
                if not key.startswith("_")}

    def set_params(self, **params):
        """Set the parameters of this solver."""
        for key, value in params.items():
            setattr(self, key, value)
        return self

    def _validate(self, objective, penalty, tuning, w_init):
        # execute: `custom_checks` then check attributes
        self.custom_checks(objective, penalty, tuning, w_init)

        check_obj_solver_attr(objective, self, self._objective_required_attr)
        check_obj_solver_attr(penalty, self, self._penalty_required_attr)
