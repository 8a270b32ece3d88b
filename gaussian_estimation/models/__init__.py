"""
Dynamics, observation and process noise models.

These wrap user functions so the estimator knows whether to apply them to
the belief directly or through sigma points.
"""

from .capabilities import accepts_sigma_points
from .dynamics import (LinearDynamics, ExtendedDynamics, SigmaPointDynamics,
                       ContinuousDynamics)
from .observers import LinearObserver, ExtendedObserver, SigmaPointObserver
from .process_noise import TimeDependentAdditiveProcessNoise, DiscreteWhiteNoise

__all__ = [
    'LinearDynamics',
    'ExtendedDynamics',
    'SigmaPointDynamics',
    'ContinuousDynamics',
    'accepts_sigma_points',
    'LinearObserver',
    'ExtendedObserver',
    'SigmaPointObserver',
    'TimeDependentAdditiveProcessNoise',
    'DiscreteWhiteNoise',
]
