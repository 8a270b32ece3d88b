"""
Performance metrics and gating for state estimation.
"""

from .performance import rmse, mae, nees, nis, compute_all_metrics
from .gating import innovation, mahalanobis, gate_threshold, within_gate

__all__ = [
    'rmse',
    'mae',
    'nees',
    'nis',
    'compute_all_metrics',
    'innovation',
    'mahalanobis',
    'gate_threshold',
    'within_gate',
]
