"""
Recursive Gaussian state estimator.

Tracks a belief (mean and covariance) through the predict /
predict_observation / assimilate cycle. Each call picks its path from the
model it is given:

- belief-level models (linear or differentiable) are applied to the belief
  directly, giving the exact Kalman filter / EKF equations
- sigma-point models are driven through the unscented transform: the belief
  is sampled, each point is propagated, and the set is recombined

The fusion step is the same linear Kalman update for both paths.
"""

import logging

import numpy as np
from scipy.linalg import lu_factor, lu_solve

from ..common.timing import duration_to_seconds
from ..estimate import MeanAndCovariance, PredictedObservation
from ..exceptions import InvalidTimeOrder
from ..models.capabilities import accepts_sigma_points
from .unscented import CubatureSigmaPoints, sample

logger = logging.getLogger(__name__)


class StateEstimator:
    """
    Gaussian state estimator with linear and sigma-point model support.

    Parameters
    ----------
    initial_time
        Time of the initial estimate. Any type whose difference converts
        to seconds (float, datetime, np.datetime64, ...).
    initial_estimate : MeanAndCovariance
        Initial belief
    sigma_points : CubatureSigmaPoints or MerweScaledSigmaPoints, optional
        Sigma-point rule used for nonlinear models (default: cubature)

    Attributes
    ----------
    time
        Time of the current estimate
    estimate : MeanAndCovariance
        Current belief
    last_innovation : np.ndarray or None
        Innovation of the most recent assimilate call
    last_innovation_covariance : np.ndarray or None
        Innovation covariance S of the most recent assimilate call

    Examples
    --------
    >>> estimator = StateEstimator(0.0, MeanAndCovariance([0, 0], np.eye(2)))
    >>> cv = LinearDynamics(lambda dt: np.array([[1, dt], [0, 1]]))
    >>> noise = TimeDependentAdditiveProcessNoise(np.diag([0.0, 0.01]))
    >>> estimator.predict(1.0, cv, noise)
    >>> predicted = estimator.predict_observation(LinearObserver([[1, 0]]))
    >>> estimator.assimilate(predicted, MeanAndCovariance([1.0], [[0.1]]))
    """

    def __init__(self, initial_time, initial_estimate, sigma_points=None):
        if isinstance(initial_estimate, MeanAndCovariance):
            initial_estimate = initial_estimate.copy()
        else:
            initial_estimate = MeanAndCovariance(*initial_estimate)
        self.time = initial_time
        self.estimate = initial_estimate
        self.sigma_points = sigma_points if sigma_points is not None else CubatureSigmaPoints()

        self.last_innovation = None
        self.last_innovation_covariance = None

    def predict(self, t, dynamics, process_noise=None):
        """
        Propagate the estimate forward to time ``t``.

        Parameters
        ----------
        t
            Target time, not earlier than ``self.time``. Predicting to the
            current time is a no-op.
        dynamics : callable
            Either a belief-level model ``dynamics(belief, dt) -> belief`` or
            a sigma-point model (``accepts_sigma_points = True``)
            ``dynamics(sigma_points, dt) -> sigma_points``
        process_noise : callable, optional
            ``process_noise(dt, mean, covariance) -> covariance``. The mean
            is passed as a read-only array.

        Raises
        ------
        InvalidTimeOrder
            If ``t`` is earlier than the current time. The estimator is
            left unchanged.
        """
        dt = duration_to_seconds(t - self.time)

        if dt == 0:
            return
        if dt < 0:
            raise InvalidTimeOrder(self.time, t)

        if accepts_sigma_points(dynamics):
            logger.debug("predict dt=%g via sigma points (%r)", dt, self.sigma_points)
            sigmas = sample(self.estimate, self.sigma_points)
            predicted = dynamics(sigmas, dt).statistics()
        else:
            logger.debug("predict dt=%g via belief-level dynamics", dt)
            predicted = dynamics(self.estimate, dt)

        # Fresh arrays, so nothing below can alias the current estimate
        mean = np.array(predicted.mean, dtype=float)
        covariance = np.array(predicted.covariance, dtype=float)

        if process_noise is not None:
            frozen_mean = mean.view()
            frozen_mean.flags.writeable = False
            covariance = np.asarray(process_noise(dt, frozen_mean, covariance), dtype=float)

        self.estimate = MeanAndCovariance(mean, covariance)
        self.time = t

    def predict_observation(self, observer, *extras):
        """
        Project the current estimate into observation space.

        Does not modify the estimator, so it can be used for gating and
        association before deciding whether to assimilate.

        Parameters
        ----------
        observer : callable
            Either a belief-level observer ``observer(belief, *extras)`` with
            a ``jacobian(belief, *extras)`` method, or a sigma-point observer
            (``accepts_sigma_points = True``)
        *extras
            Additional arguments forwarded to the observer

        Returns
        -------
        PredictedObservation
            Predicted observation mean and covariance (without sensor noise)
            plus the state-observation cross-covariance
        """
        P = self.estimate.covariance

        if accepts_sigma_points(observer):
            sigmas = sample(self.estimate, self.sigma_points)
            observed = observer(sigmas, *extras)
            statistics = observed.statistics()
            return PredictedObservation(statistics.mean, statistics.covariance,
                                        sigmas.cross_covariance(observed))

        jacobian = getattr(observer, 'jacobian', None)
        if jacobian is None:
            raise ValueError(
                f"{type(observer).__name__} has no jacobian(); belief-level "
                "observers must provide one, otherwise set accepts_sigma_points"
            )
        H = np.atleast_2d(np.asarray(jacobian(self.estimate, *extras), dtype=float))
        z_pred = np.atleast_1d(np.asarray(observer(self.estimate, *extras), dtype=float))
        PHt = P @ H.T
        return PredictedObservation(z_pred, H @ PHt, PHt)

    def assimilate(self, predicted_observation, observation):
        """
        Fuse an observation into the estimate (Kalman update).

        The innovation covariance ``predicted.covariance +
        observation.covariance`` must be positive definite. This is not
        checked; a singular matrix gives undefined (inf/NaN) results.

        Parameters
        ----------
        predicted_observation : PredictedObservation
            Output of ``predict_observation`` for the current estimate
        observation : MeanAndCovariance
            Measurement and its noise covariance
        """
        S = predicted_observation.covariance + observation.covariance

        # K = C S^-1, solved as S^T K^T = C^T
        K = lu_solve(lu_factor(S), predicted_observation.cross_covariance.T, trans=1).T

        y = observation.mean - predicted_observation.mean
        logger.debug("assimilate innovation=%s", y)

        self.estimate = MeanAndCovariance(self.estimate.mean + K @ y,
                                          self.estimate.covariance - K @ S @ K.T)

        self.last_innovation = y
        self.last_innovation_covariance = S

    def __repr__(self):
        return f"StateEstimator(time={self.time!r}, estimate={self.estimate!r})"
