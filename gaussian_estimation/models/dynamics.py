"""
Dynamics models for the state estimator.

A dynamics model advances a belief by ``dt`` seconds. Models come in two
kinds, distinguished by the ``accepts_sigma_points`` attribute:

- belief-level models (linear or differentiable): ``model(belief, dt)``
  returns a new ``MeanAndCovariance`` directly
- sigma-point models (nonlinear): ``model(sigma_points, dt)`` returns the
  propagated ``SigmaPoints``; the estimator samples and recombines

Any plain function ``f(belief, dt) -> MeanAndCovariance`` can be used as a
belief-level model without wrapping.
"""

import numpy as np

from ..common.discretization import INTEGRATORS
from ..estimate import MeanAndCovariance


def _check_callable(fn, name):
    if not callable(fn):
        raise ValueError(f"{name} must be callable, got {type(fn).__name__}")


class LinearDynamics:
    """
    Linear dynamics x_{k+1} = F(dt) x_k (+ B(dt) u).

    Parameters
    ----------
    transition : callable or np.ndarray
        State transition matrix F. Can be:
        - Callable: transition(dt) -> F matrix
        - np.ndarray: constant F, independent of dt
    control : callable or np.ndarray, optional
        Additive control term B u. Can be:
        - Callable: control(dt) -> vector
        - np.ndarray: constant vector

    Examples
    --------
    >>> cv = LinearDynamics(lambda dt: np.array([[1.0, dt], [0.0, 1.0]]))
    >>> prior = MeanAndCovariance([0.0, 1.0], np.eye(2))
    >>> cv(prior, 2.0).mean
    array([2., 1.])
    """

    accepts_sigma_points = False

    def __init__(self, transition, control=None):
        if not callable(transition):
            transition = np.asarray(transition, dtype=float)
        if control is not None and not callable(control):
            control = np.asarray(control, dtype=float)
        self.transition = transition
        self.control = control

    def transition_matrix(self, dt):
        if callable(self.transition):
            return np.asarray(self.transition(dt), dtype=float)
        return self.transition

    def control_term(self, dt):
        if self.control is None:
            return 0.0
        if callable(self.control):
            return np.asarray(self.control(dt), dtype=float)
        return self.control

    def __call__(self, belief, dt):
        F = self.transition_matrix(dt)
        mean = F @ belief.mean + self.control_term(dt)
        covariance = F @ belief.covariance @ F.T
        return MeanAndCovariance(mean, covariance)


class ExtendedDynamics:
    """
    Differentiable dynamics linearised at the prior mean (EKF-style).

    Parameters
    ----------
    f : callable
        Discrete dynamics function: f(x, dt) -> x_next
    jacobian : callable or np.ndarray
        Jacobian of f. Can be:
        - Callable: jacobian(x, dt) -> F matrix
        - np.ndarray: Pre-computed Jacobian matrix
    """

    accepts_sigma_points = False

    def __init__(self, f, jacobian):
        _check_callable(f, "Dynamics function f(x, dt)")
        if jacobian is None:
            raise ValueError("Jacobian must be provided (callable or matrix)")
        self.f = f
        self.jacobian = jacobian

    def jacobian_matrix(self, x, dt):
        if callable(self.jacobian):
            return np.asarray(self.jacobian(x, dt), dtype=float)
        return np.asarray(self.jacobian, dtype=float)

    def __call__(self, belief, dt):
        # Linearise about the prior mean, before it is propagated
        F = self.jacobian_matrix(belief.mean, dt)
        mean = np.asarray(self.f(belief.mean, dt), dtype=float)
        return MeanAndCovariance(mean, F @ belief.covariance @ F.T)


class SigmaPointDynamics:
    """
    Nonlinear dynamics propagated through sigma points.

    Parameters
    ----------
    f : callable
        Discrete dynamics function applied to each sigma point:
        f(x, dt) -> x_next
    """

    accepts_sigma_points = True

    def __init__(self, f):
        _check_callable(f, "Dynamics function f(x, dt)")
        self.f = f

    def __call__(self, sigma_points, dt):
        return sigma_points.map(self.f, dt)


class ContinuousDynamics(SigmaPointDynamics):
    """
    Continuous-time dynamics dx/dt = g(x), integrated over each step.

    Parameters
    ----------
    derivative : callable
        Continuous dynamics g(x) returning dx/dt
    method : str, optional
        Integration method, 'rk4' (default) or 'euler'
    substeps : int, optional
        Number of integration steps per predict call (default: 1)
    """

    def __init__(self, derivative, method='rk4', substeps=1):
        _check_callable(derivative, "Derivative function g(x)")
        if method not in INTEGRATORS:
            raise ValueError(
                f"Unknown integration method: {method}. "
                f"Use one of {sorted(INTEGRATORS)}."
            )
        if substeps < 1:
            raise ValueError(f"substeps must be at least 1, got {substeps}")
        self.derivative = derivative
        self.method = method
        self.substeps = substeps
        super().__init__(self._integrate)

    def _integrate(self, x, dt):
        return INTEGRATORS[self.method](self.derivative, x, dt, self.substeps)
