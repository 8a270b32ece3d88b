"""
Covariance and consistency visualization.

Functions for plotting uncertainty ellipses of beliefs and NIS consistency
with chi-squared bounds.
"""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Ellipse
from scipy.stats import chi2

from ..metrics.performance import nis


def plot_covariance_ellipse(belief, n_std=3.0, ax=None, indices=(0, 1), **kwargs):
    """
    Plot the covariance ellipse of two components of a belief.

    Parameters
    ----------
    belief : MeanAndCovariance
        Belief to draw
    n_std : float, optional
        Number of standard deviations for ellipse (default: 3-sigma)
    ax : matplotlib.axes.Axes, optional
        Axes to plot on. If None, uses the current axes.
    indices : tuple of int, optional
        The two state components to plot (default: (0, 1))
    **kwargs : dict
        Additional arguments passed to Ellipse patch
        (e.g., facecolor, edgecolor, alpha, linewidth)

    Returns
    -------
    matplotlib.patches.Ellipse
        The ellipse patch object
    """
    if ax is None:
        ax = plt.gca()

    i, j = indices
    mean = belief.mean[[i, j]]
    cov = belief.covariance[np.ix_([i, j], [i, j])]

    eigenvalues, eigenvectors = np.linalg.eigh(cov)
    eigenvalues = np.maximum(eigenvalues, 0)

    # eigh sorts ascending; orient the ellipse along the major axis
    angle = np.degrees(np.arctan2(eigenvectors[1, 1], eigenvectors[0, 1]))
    height, width = 2 * n_std * np.sqrt(eigenvalues)

    kwargs.setdefault('fill', False)
    ellipse = Ellipse(xy=mean, width=width, height=height, angle=angle, **kwargs)
    ax.add_patch(ellipse)
    ax.autoscale_view()

    return ellipse


def plot_nis(innovations, innovation_covariances, confidence=0.95, ax=None, **kwargs):
    """
    Plot the NIS of an assimilation history against chi-squared bounds.

    Parameters
    ----------
    innovations : sequence of np.ndarray
        Innovations collected from ``StateEstimator.last_innovation``
        after each assimilate call (N, dim_z)
    innovation_covariances : sequence of np.ndarray
        Matching ``StateEstimator.last_innovation_covariance`` values
        (N, dim_z, dim_z)
    confidence : float, optional
        Two-sided confidence level of the band (default: 0.95)
    ax : matplotlib.axes.Axes, optional
        Axes to plot on. If None, uses the current axes.
    **kwargs : dict
        Additional arguments for the NIS line

    Returns
    -------
    np.ndarray
        NIS value per assimilation (N,)
    """
    innovations = np.atleast_2d(np.asarray(innovations, dtype=float))
    if innovations.size == 0:
        raise ValueError("innovation history is empty")
    dim_z = innovations.shape[1]
    nis_values = nis(innovations, innovation_covariances)

    if ax is None:
        ax = plt.gca()

    steps = np.arange(len(nis_values))
    lower, upper = chi2.interval(confidence, dim_z)

    kwargs.setdefault('label', 'NIS')
    ax.plot(steps, nis_values, **kwargs)
    ax.axhline(dim_z, color='k', linestyle='--', label=f'E[NIS] = {dim_z}')
    ax.fill_between(steps, lower, upper, color='red', alpha=0.1,
                    label=f'{confidence:.0%} band')

    outside = (nis_values < lower) | (nis_values > upper)
    if np.any(outside):
        ax.plot(steps[outside], nis_values[outside], 'rx', label='Outside band')

    ax.set_xlabel('Assimilation')
    ax.set_ylabel('NIS')
    ax.legend()

    return nis_values
