class BaseSmoothPenalty:
    """Base class for smooth penalty subclasses.

    Solvers only rely on the ``value`` and ``gradient`` capabilities: any object
    implementing them can be passed as a penalty, subclassing is optional.
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
        """Get parameters for this penalty.

        Parameters
        ----------
        deep : bool, default=True
            If True, will return the parameters for this penalty and
            contained subobjects that are penalties.

        Returns
        -------
        params : dict
            Parameter names mapped to their values.
        """
        return self.params_to_dict()

    def set_params(self, **params):
        """Set the parameters of this penalty.

        Parameters
        ----------
        **params : dict
            Penalty parameters.

        Returns
        -------
        self : object
            Returns self.
        """
        for key, value in params.items():
            setattr(self, key, value)
        return self

    def value(self, w, labels, tuning):
        """Value of penalty at vector w.

        Parameters
        ----------
        w : array, shape (n_params,)
            Parameter vector.

        labels : tuple of str, shape (n_params,)
            Parameter labels, in the same order as ``w``.

        tuning : instance of TuningParametersEnet
            Tuning parameters of the penalty.

        Returns
        -------
        value : float
            The penalty value at vector w.
        """

    def gradient(self, w, labels, tuning):
        """Gradient of penalty at vector w, an array of shape (n_params,)."""
