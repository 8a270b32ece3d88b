"""
Performance metrics for evaluating state estimation quality.

Includes RMSE, MAE, NEES, and NIS for filter evaluation.
"""

import numpy as np


def rmse(estimates, ground_truth, axis=0):
    """
    Root Mean Square Error.

    Parameters
    ----------
    estimates : np.ndarray
        Estimated states (N, dim) or (N,)
    ground_truth : np.ndarray
        True states (N, dim) or (N,)
    axis : int, optional
        Axis along which to compute RMSE

    Returns
    -------
    float or np.ndarray
        RMSE value(s)
    """
    estimates = np.asarray(estimates, dtype=float)
    ground_truth = np.asarray(ground_truth, dtype=float)

    squared_errors = (estimates - ground_truth) ** 2
    return np.sqrt(np.mean(squared_errors, axis=axis))


def mae(estimates, ground_truth, axis=0):
    """Mean Absolute Error along ``axis``."""
    estimates = np.asarray(estimates, dtype=float)
    ground_truth = np.asarray(ground_truth, dtype=float)

    return np.mean(np.abs(estimates - ground_truth), axis=axis)


def _normalized_squares(errors, covariances):
    errors = np.atleast_2d(np.asarray(errors, dtype=float))
    covariances = np.asarray(covariances, dtype=float).reshape(
        len(errors), errors.shape[1], errors.shape[1]
    )
    values = np.zeros(len(errors))
    for i, (e, C) in enumerate(zip(errors, covariances)):
        values[i] = e @ np.linalg.solve(C, e)
    return values


def nees(estimates, ground_truth, covariances):
    """
    Normalized Estimation Error Squared (NEES).

    Measures consistency of the estimator. For a consistent filter,
    NEES should follow a chi-squared distribution with dim_x degrees of freedom.

    Parameters
    ----------
    estimates : np.ndarray
        Estimated states (N, dim_x)
    ground_truth : np.ndarray
        True states (N, dim_x)
    covariances : np.ndarray
        Estimation error covariances (N, dim_x, dim_x)

    Returns
    -------
    np.ndarray
        NEES values for each time step (N,)
    """
    errors = np.asarray(estimates, dtype=float) - np.asarray(ground_truth, dtype=float)
    return _normalized_squares(errors, covariances)


def nis(innovations, innovation_covariances):
    """
    Normalized Innovation Squared (NIS).

    For a consistent filter, NIS should follow a chi-squared distribution
    with dim_z degrees of freedom.

    Parameters
    ----------
    innovations : np.ndarray
        Innovation vectors (N, dim_z)
    innovation_covariances : np.ndarray
        Innovation covariances (N, dim_z, dim_z)

    Returns
    -------
    np.ndarray
        NIS values for each time step (N,)
    """
    return _normalized_squares(innovations, innovation_covariances)


def compute_all_metrics(estimates, ground_truth, covariances=None,
                        innovations=None, innovation_covariances=None):
    """
    Compute all available metrics.

    Returns
    -------
    dict
        'rmse', 'mae', 'rmse_total', 'mae_total', and when the inputs are
        given 'nees', 'nees_mean', 'nis', 'nis_mean'
    """
    metrics = {}

    metrics['rmse'] = rmse(estimates, ground_truth, axis=0)
    metrics['mae'] = mae(estimates, ground_truth, axis=0)
    metrics['rmse_total'] = float(np.mean(metrics['rmse']))
    metrics['mae_total'] = float(np.mean(metrics['mae']))

    if covariances is not None:
        nees_vals = nees(estimates, ground_truth, covariances)
        metrics['nees'] = nees_vals
        metrics['nees_mean'] = float(np.mean(nees_vals))

    if innovations is not None and innovation_covariances is not None:
        nis_vals = nis(innovations, innovation_covariances)
        metrics['nis'] = nis_vals
        metrics['nis_mean'] = float(np.mean(nis_vals))

    return metrics
