import numpy as np
from sklearn.utils import check_random_state


def make_correlated_data(n_samples=100, n_features=50, rho=0.6, snr=3,
                         density=0.2, random_state=None):
    """Simulate ``y = X w_true + noise`` with AR(1) correlated features.

    Successive columns of ``X`` have correlation ``rho``, ``w_true`` has a
    fraction ``density`` of standard Gaussian non zero entries, and the noise
    is scaled so that ``||X w_true|| / ||noise|| = snr``.

    Returns
    -------
    X : array, shape (n_samples, n_features)
    y : array, shape (n_samples,)
    w_true : array, shape (n_features,)
    """
    if not 0 <= rho < 1:
        raise ValueError("The correlation `rho` should be chosen in [0, 1[.")
    if not 0 < density <= 1:
        raise ValueError("The density should be chosen in ]0, 1].")
    if not snr > 0:
        raise ValueError("The snr should be positive.")
    rng = check_random_state(random_state)

    innovations = rng.randn(n_samples, n_features)
    X = np.empty_like(innovations)
    X[:, 0] = innovations[:, 0]
    scale = np.sqrt(1 - rho ** 2)
    for j in range(1, n_features):
        X[:, j] = rho * X[:, j - 1] + scale * innovations[:, j]

    w_true = np.zeros(n_features)
    nnz = max(int(density * n_features), 1)
    support = rng.choice(n_features, nnz, replace=False)
    w_true[support] = rng.randn(nnz)

    y = X @ w_true
    if np.isfinite(snr):
        noise = rng.randn(n_samples)
        y += noise * np.linalg.norm(y) / (snr * np.linalg.norm(noise))
    return X, y, w_true
