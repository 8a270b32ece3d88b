"""
Visualization utilities for state estimation.
"""

from .covariances import plot_covariance_ellipse, plot_nis

__all__ = [
    'plot_covariance_ellipse',
    'plot_nis',
]
