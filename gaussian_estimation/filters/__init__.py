"""
State estimation filters.

- StateEstimator: Kalman / unscented predict-assimilate cycle
- Sigma-point rules and sets used by the unscented path
"""

from .state_estimator import StateEstimator
from .unscented import CubatureSigmaPoints, MerweScaledSigmaPoints, SigmaPoints, sample

__all__ = [
    'StateEstimator',
    'CubatureSigmaPoints',
    'MerweScaledSigmaPoints',
    'SigmaPoints',
    'sample',
]
