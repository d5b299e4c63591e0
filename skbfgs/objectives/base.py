class BaseObjective:
    """Base class for objectives.

    An objective is the smooth data-fit part of the function minimized by the
    solvers, e.g. a negative log-likelihood. Solvers only rely on the ``value``
    and ``gradient`` capabilities: any object implementing them can be used,
    subclassing is optional.
    """

    def params_to_dict(self):
        """Get the parameters to initialize an instance of the class.

        Returns
        -------
        dict_of_params : dict
            The parameters to instantiate an object of the class.
        """
        return dict()

    def get_params(self, deep=True):
        """Get parameters for this objective."""
        return self.params_to_dict()

    def initialize(self, X, y):
        """Store the data before fitting on X and y.

        Parameters
        ----------
        X : array, shape (n_samples, n_features)
            Design matrix.

        y : array, shape (n_samples,)
            Target vector.
        """

    def value(self, w, labels):
        """Value of objective at vector w.

        Parameters
        ----------
        w : array, shape (n_params,)
            Parameter vector.

        labels : tuple of str, shape (n_params,)
            Parameter labels, in the same order as ``w``.

        Returns
        -------
        value : float
            The objective value at vector w. May be non-finite when ``w`` is
            outside the domain of the objective.
        """

    def gradient(self, w, labels):
        """Gradient of objective at vector w, an array of shape (n_params,)."""
