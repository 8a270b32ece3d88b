"""
Measurement gating against a predicted observation.

Used between ``predict_observation`` and ``assimilate`` to decide whether a
measurement is plausible for a track before fusing it.
"""

import numpy as np
from scipy.stats import chi2


def innovation(predicted_observation, observation):
    """
    Innovation (residual) and its covariance.

    Parameters
    ----------
    predicted_observation : PredictedObservation
        Output of ``StateEstimator.predict_observation``
    observation : MeanAndCovariance
        Measurement and its noise covariance

    Returns
    -------
    tuple of np.ndarray
        (y, S) with y = z - z_pred and S = predicted + measurement covariance
    """
    y = observation.mean - predicted_observation.mean
    S = predicted_observation.covariance + observation.covariance
    return y, S


def mahalanobis(predicted_observation, observation):
    """Squared Mahalanobis distance of the innovation."""
    y, S = innovation(predicted_observation, observation)
    return float(y @ np.linalg.solve(S, y))


def gate_threshold(dim_z, probability=0.99):
    """Chi-squared gate for ``dim_z`` degrees of freedom."""
    if not 0 < probability < 1:
        raise ValueError(f"probability must be in (0, 1), got {probability}")
    return float(chi2.ppf(probability, dim_z))


def within_gate(predicted_observation, observation, probability=0.99):
    """
    Test whether an observation falls inside the validation gate.

    Parameters
    ----------
    predicted_observation : PredictedObservation
    observation : MeanAndCovariance
    probability : float, optional
        Gate probability (default: 0.99)

    Returns
    -------
    bool
    """
    d2 = mahalanobis(predicted_observation, observation)
    return d2 <= gate_threshold(predicted_observation.dim, probability)
