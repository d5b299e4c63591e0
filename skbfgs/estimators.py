# License: BSD 3 clause

import numpy as np
from sklearn.linear_model._base import LinearModel
from sklearn.preprocessing import LabelEncoder
from sklearn.multiclass import check_classification_targets
from sklearn.utils.validation import check_is_fitted, validate_data

from skbfgs.objectives import Quadratic, Logistic
from skbfgs.penalties import Ridge, TuningParametersEnet
from skbfgs.solvers import BFGS


class GeneralizedLinearEstimator(LinearModel):
    r"""Generic generalized linear estimator with a smooth penalty.

    This estimator takes an objective and a smooth penalty and runs the BFGS
    solver to solve the optimization problem. It handles regression tasks and
    binary classification with the :class:`.Logistic` objective.

    Parameters
    ----------
    objective : instance of BaseObjective, optional
        Objective. If ``None``, ``objective`` is initialized as a
        :class:`.Quadratic` objective.

    penalty : instance of BaseSmoothPenalty, optional
        Penalty. If ``None``, ``penalty`` is initialized as a :class:`.Ridge`
        penalty.

    tuning : instance of TuningParametersEnet, optional
        Tuning parameters of the penalty. If ``None``, a ridge of strength 1
        on every feature is used.

    solver : instance of BaseSolver, optional
        Solver. If ``None``, ``solver`` is initialized as a :class:`.BFGS`
        solver with the ``gradients`` convergence criterion.

    Attributes
    ----------
    coef_ : array, shape (n_features,) or (1, n_features)
        parameter array (:math:`w` in the cost function formula)

    intercept_ : float
        constant term in decision function, always 0.

    n_iter_ : int
        Number of outer iterations run by the solver.

    fits_ : array, shape (max_iter + 1,)
        Penalized fit along the iterations.

    converged_ : bool
        Whether the solver converged.

    hessian_ : array, shape (n_features, n_features)
        Final BFGS approximation of the Hessian.
    """

    def __init__(self, objective=None, penalty=None, tuning=None, solver=None):
        self.objective = objective
        self.penalty = penalty
        self.tuning = tuning
        self.solver = solver

    def __repr__(self):
        return (
            'GeneralizedLinearEstimator(objective=%s, penalty=%s, solver=%s)'
            % (self.objective.__class__.__name__, self.penalty.__class__.__name__,
               self.solver.__class__.__name__))

    def fit(self, X, y):
        """Fit estimator.

        Parameters
        ----------
        X : array, shape (n_samples, n_features)
            Design matrix.

        y : array, shape (n_samples,)
            Target array.

        Returns
        -------
        self : object
            Fitted estimator.
        """
        objective = self.objective if self.objective is not None else Quadratic()
        penalty = self.penalty if self.penalty is not None else Ridge()
        solver = (self.solver if self.solver is not None
                  else BFGS(convergence_criterion="gradients", tol=1e-8))

        is_classif = isinstance(objective, Logistic)
        X, y = validate_data(self, X, y, dtype=np.float64, y_numeric=not is_classif)
        n_features = X.shape[1]

        if is_classif:
            check_classification_targets(y)
            enc = LabelEncoder()
            y = enc.fit_transform(y)
            self.classes_ = enc.classes_
            if len(self.classes_) > 2:
                raise ValueError(
                    "GeneralizedLinearEstimator only supports binary "
                    f"classification, got {len(self.classes_)} classes.")
            y = 2. * y - 1
        elif hasattr(self, "classes_"):
            # refit as a regression after a classification fit
            del self.classes_

        tuning = self.tuning
        if tuning is None:
            tuning = TuningParametersEnet.broadcast(
                n_features, alpha=0., lambda_=1., weights=1.)

        if hasattr(self, "feature_names_in_"):
            labels = tuple(self.feature_names_in_)
        else:
            labels = tuple(f"w{j}" for j in range(n_features))

        objective.initialize(X, y)
        result = solver.solve(objective, penalty, tuning, np.zeros(n_features),
                              labels)

        self.coef_ = result.w[np.newaxis, :] if is_classif else result.w
        self.intercept_ = 0.
        self.n_iter_ = result.n_iter
        self.fits_ = result.fits
        self.converged_ = result.converged
        self.hessian_ = result.hessian
        return self

    def predict(self, X):
        """Predict target values for samples in X.

        Parameters
        ----------
        X : array, shape (n_samples, n_features)
            The data matrix to predict from.

        Returns
        -------
        y_pred : array, shape (n_samples)
            Contain the target values for each sample.
        """
        check_is_fitted(self)
        if hasattr(self, "classes_"):
            scores = self._decision_function(X).ravel()
            return self.classes_[(scores > 0).astype(int)]
        return self._decision_function(X)

    def score(self, X, y):
        """Return the score of the model on the data X and y.

        For regression problems, this is the R² score.
        For classification problems, this is the accuracy score.
        """
        y_pred = self.predict(X)
        if hasattr(self, "classes_"):
            return np.mean(y_pred == y)
        return 1 - np.sum((y - y_pred) ** 2) / np.sum((y - np.mean(y)) ** 2)
