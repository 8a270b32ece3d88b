"""
Gaussian State Estimation Library

Recursive Bayesian state estimation with a single Gaussian belief. The
estimator runs a predict / predict_observation / assimilate cycle and
switches per call between exact linear Kalman equations and the unscented
(sigma-point) transform, depending on the models it is given.

License: MIT
"""

__version__ = "1.0.0"

from .estimate import MeanAndCovariance, PredictedObservation
from .exceptions import EstimationError, InvalidTimeOrder
from .filters.state_estimator import StateEstimator
from .filters.unscented import (CubatureSigmaPoints, MerweScaledSigmaPoints,
                                SigmaPoints, sample)
from .models.dynamics import (LinearDynamics, ExtendedDynamics,
                              SigmaPointDynamics, ContinuousDynamics)
from .models.observers import LinearObserver, ExtendedObserver, SigmaPointObserver
from .models.process_noise import TimeDependentAdditiveProcessNoise, DiscreteWhiteNoise

__all__ = [
    'MeanAndCovariance',
    'PredictedObservation',
    'EstimationError',
    'InvalidTimeOrder',
    'StateEstimator',
    'CubatureSigmaPoints',
    'MerweScaledSigmaPoints',
    'SigmaPoints',
    'sample',
    'LinearDynamics',
    'ExtendedDynamics',
    'SigmaPointDynamics',
    'ContinuousDynamics',
    'LinearObserver',
    'ExtendedObserver',
    'SigmaPointObserver',
    'TimeDependentAdditiveProcessNoise',
    'DiscreteWhiteNoise',
]
