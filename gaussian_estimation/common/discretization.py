"""
Discretization methods for continuous-time dynamics.

Provides Euler and Runge-Kutta 4th order (RK4) integration methods
for discretizing continuous-time system dynamics, and a helper for
discrete white-noise process covariance.
"""

import numpy as np


def euler_discretization(f, x, dt, substeps=1):
    """
    Euler method for discretizing continuous dynamics.

    First-order integration, repeated over ``substeps`` equal steps of
    h = dt / substeps: x <- x + h * f(x)

    Parameters
    ----------
    f : callable
        Continuous dynamics function f(x) returning dx/dt
    x : np.ndarray
        Current state vector
    dt : float
        Time step
    substeps : int, optional
        Number of integration steps spanning dt (default: 1)

    Returns
    -------
    np.ndarray
        State after dt
    """
    h = dt / substeps
    for _ in range(substeps):
        x = x + h * f(x)
    return x


def rk4_discretization(f, x, dt, substeps=1):
    """
    Runge-Kutta 4th order method for discretizing continuous dynamics.

    Parameters
    ----------
    f : callable
        Continuous dynamics function f(x) returning dx/dt
    x : np.ndarray
        Current state vector
    dt : float
        Time step
    substeps : int, optional
        Number of integration steps spanning dt (default: 1)

    Returns
    -------
    np.ndarray
        State after dt

    Notes
    -----
    Each step of size h = dt / substeps evaluates the dynamics at four points:
        k1 = f(x)
        k2 = f(x + h/2 * k1)
        k3 = f(x + h/2 * k2)
        k4 = f(x + h * k3)
        x <- x + h/6 * (k1 + 2*k2 + 2*k3 + k4)
    """
    h = dt / substeps
    for _ in range(substeps):
        k1 = f(x)
        k2 = f(x + 0.5 * h * k1)
        k3 = f(x + 0.5 * h * k2)
        k4 = f(x + h * k3)
        x = x + (h / 6.0) * (k1 + 2*k2 + 2*k3 + k4)
    return x


INTEGRATORS = {
    'euler': euler_discretization,
    'rk4': rk4_discretization,
}


def discrete_white_noise(dim, dt, var=1.0, order=1):
    """
    Generate discrete white noise covariance matrix Q.

    Parameters
    ----------
    dim : int
        Dimension of the state space
    dt : float
        Time step
    var : float, optional
        Variance of the white noise
    order : int, optional
        Order of integration (1 for velocity, 2 for acceleration)

    Returns
    -------
    np.ndarray
        Process noise covariance matrix Q (dim, dim)

    Examples
    --------
    >>> Q = discrete_white_noise(2, dt=0.1, var=0.1, order=2)
    >>> Q.shape
    (2, 2)
    """
    if order == 1:
        Q = np.array([[dt, 0],
                      [0, dt]]) * var
    elif order == 2:
        Q = np.array([[dt**4/4, dt**3/2],
                      [dt**3/2, dt**2]]) * var
    else:
        raise ValueError(f"Order {order} not supported. Use 1 or 2.")

    if dim == 1:
        return Q[1:, 1:]

    # Extend to full dimension if needed
    if dim > 2:
        Q_full = np.eye(dim) * var * dt
        Q_full[:2, :2] = Q
        return Q_full

    return Q
