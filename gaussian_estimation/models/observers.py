"""
Observation models for the state estimator.

Belief-level observers map a state belief to the predicted observation mean
and expose a ``jacobian`` used to project the covariance. Sigma-point
observers (``accepts_sigma_points = True``) map a sigma-point set into
observation space point by point.

Extra positional arguments given to ``StateEstimator.predict_observation``
are forwarded to the observer, e.g. a sensor position.
"""

import numpy as np


class LinearObserver:
    """
    Linear observation z = H x.

    Parameters
    ----------
    matrix : np.ndarray
        Observation matrix H (dim_z, dim_x)
    """

    accepts_sigma_points = False

    def __init__(self, matrix):
        matrix = np.atleast_2d(np.asarray(matrix, dtype=float))
        self.matrix = matrix

    @property
    def dim_z(self):
        return self.matrix.shape[0]

    def __call__(self, belief, *extras):
        return self.matrix @ belief.mean

    def jacobian(self, belief, *extras):
        return self.matrix


class ExtendedObserver:
    """
    Differentiable observation linearised at the state mean.

    Parameters
    ----------
    h : callable
        Measurement function: h(x, *extras) -> z
    jacobian : callable or np.ndarray
        Jacobian of h. Can be:
        - Callable: jacobian(x, *extras) -> H matrix
        - np.ndarray: Pre-computed Jacobian matrix
    """

    accepts_sigma_points = False

    def __init__(self, h, jacobian):
        if not callable(h):
            raise ValueError("Measurement function h(x) must be provided")
        if jacobian is None:
            raise ValueError("Jacobian H must be provided (callable or matrix)")
        self.h = h
        self._jacobian = jacobian

    def __call__(self, belief, *extras):
        return np.atleast_1d(np.asarray(self.h(belief.mean, *extras), dtype=float))

    def jacobian(self, belief, *extras):
        if callable(self._jacobian):
            H = self._jacobian(belief.mean, *extras)
        else:
            H = self._jacobian
        return np.atleast_2d(np.asarray(H, dtype=float))


class SigmaPointObserver:
    """
    Nonlinear observation evaluated on sigma points.

    Parameters
    ----------
    h : callable
        Measurement function applied to each sigma point: h(x, *extras) -> z
    """

    accepts_sigma_points = True

    def __init__(self, h):
        if not callable(h):
            raise ValueError("Measurement function h(x) must be provided")
        self.h = h

    def __call__(self, sigma_points, *extras):
        return sigma_points.map(self.h, *extras)
