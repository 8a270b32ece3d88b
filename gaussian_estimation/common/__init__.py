"""
Common utilities for state estimation.

Includes time conversion and discretization methods.
"""

from .timing import duration_to_seconds
from .discretization import euler_discretization, rk4_discretization, discrete_white_noise

__all__ = [
    'duration_to_seconds',
    'euler_discretization',
    'rk4_discretization',
    'discrete_white_noise',
]
