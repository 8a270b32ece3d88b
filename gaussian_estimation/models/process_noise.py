"""
Process noise models.

A process noise model is any callable ``(dt, mean, covariance) -> covariance``
that inflates the predicted covariance. The mean is handed over read-only:
models may depend on the state but must not modify it.
"""

import numpy as np

from ..common.discretization import discrete_white_noise


class TimeDependentAdditiveProcessNoise:
    """
    Continuous white-noise approximation: P += dt * Q_rate.

    Parameters
    ----------
    process_noise_per_second : np.ndarray
        Covariance rate Q_rate (dim_x, dim_x)

    Examples
    --------
    >>> noise = TimeDependentAdditiveProcessNoise(np.diag([0.0, 0.01]))
    >>> noise(2.0, np.zeros(2), np.eye(2))
    array([[1.  , 0.  ],
           [0.  , 1.02]])
    """

    def __init__(self, process_noise_per_second):
        rate = np.atleast_2d(np.asarray(process_noise_per_second, dtype=float))
        if rate.shape[0] != rate.shape[1]:
            raise ValueError(f"process noise rate must be square, got shape {rate.shape}")
        self.process_noise_per_second = rate

    def __call__(self, dt, mean, covariance):
        return covariance + dt * self.process_noise_per_second


class DiscreteWhiteNoise:
    """
    Piecewise white noise Q(dt) for position/velocity style states.

    Parameters
    ----------
    dim : int
        Dimension of the state
    var : float, optional
        Variance of the white noise (default: 1.0)
    order : int, optional
        1 for velocity-driven noise, 2 for acceleration-driven noise
    """

    def __init__(self, dim, var=1.0, order=2):
        # Raises ValueError for unsupported orders
        discrete_white_noise(dim, 1.0, var=var, order=order)
        self.dim = dim
        self.var = var
        self.order = order

    def __call__(self, dt, mean, covariance):
        return covariance + discrete_white_noise(self.dim, dt, var=self.var, order=self.order)
