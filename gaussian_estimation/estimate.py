"""
Gaussian belief containers.

A belief is represented by its first two moments: a mean vector and a
covariance matrix. Every estimator operation consumes and produces these.
"""

import numpy as np


class MeanAndCovariance:
    """
    Gaussian belief over a vector space.

    Parameters
    ----------
    mean : array_like
        Mean vector (dim,)
    covariance : array_like
        Covariance matrix (dim, dim)

    Attributes
    ----------
    mean : np.ndarray
        Mean vector
    covariance : np.ndarray
        Covariance matrix. Expected to be symmetric positive semi-definite,
        but this is not enforced after construction.

    Examples
    --------
    >>> belief = MeanAndCovariance([0.0, 0.0], np.eye(2))
    >>> belief.dim
    2
    """

    def __init__(self, mean, covariance):
        mean = np.array(mean, dtype=float)
        covariance = np.array(covariance, dtype=float)

        if mean.ndim != 1:
            raise ValueError(f"mean must be a vector, got shape {mean.shape}")
        n = mean.shape[0]
        if covariance.shape != (n, n):
            raise ValueError(
                f"covariance must have shape ({n}, {n}), got {covariance.shape}"
            )

        self.mean = mean
        self.covariance = covariance

    @property
    def dim(self):
        """Dimension of the underlying vector space."""
        return self.mean.shape[0]

    def copy(self):
        return MeanAndCovariance(self.mean.copy(), self.covariance.copy())

    def __repr__(self):
        return (f"{type(self).__name__}(mean={self.mean!r}, "
                f"covariance={self.covariance!r})")


class PredictedObservation(MeanAndCovariance):
    """
    Belief in observation space together with its state cross-covariance.

    Produced by ``StateEstimator.predict_observation`` and consumed by
    ``StateEstimator.assimilate``. It can also be inspected before an update
    is committed, e.g. for gating or data association.

    Parameters
    ----------
    mean : array_like
        Predicted observation mean (dim_z,)
    covariance : array_like
        Predicted observation covariance (dim_z, dim_z), excluding sensor noise
    cross_covariance : array_like
        State-observation cross-covariance (dim_x, dim_z)
    """

    def __init__(self, mean, covariance, cross_covariance):
        super().__init__(mean, covariance)
        cross_covariance = np.array(cross_covariance, dtype=float)
        if cross_covariance.ndim != 2 or cross_covariance.shape[1] != self.dim:
            raise ValueError(
                f"cross_covariance must have shape (dim_x, {self.dim}), "
                f"got {cross_covariance.shape}"
            )
        self.cross_covariance = cross_covariance

    @property
    def state_dim(self):
        return self.cross_covariance.shape[0]

    def copy(self):
        return PredictedObservation(self.mean.copy(), self.covariance.copy(),
                                    self.cross_covariance.copy())

    def __repr__(self):
        return (f"{type(self).__name__}(mean={self.mean!r}, "
                f"covariance={self.covariance!r}, "
                f"cross_covariance={self.cross_covariance!r})")
