"""
Tests for plotting helpers
==========================
pytest tests/test_visualization.py -v
"""

import matplotlib
matplotlib.use('Agg')

import matplotlib.pyplot as plt
import numpy as np
import pytest

from gaussian_estimation import LinearObserver, MeanAndCovariance, StateEstimator
from gaussian_estimation.visualization import plot_covariance_ellipse, plot_nis


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close('all')


def test_covariance_ellipse_axes():
    fig, ax = plt.subplots()
    belief = MeanAndCovariance([1.0, 2.0, 0.0], np.diag([4.0, 1.0, 9.0]))
    ellipse = plot_covariance_ellipse(belief, n_std=3.0, ax=ax)

    assert ellipse.width == pytest.approx(12.0)
    assert ellipse.height == pytest.approx(6.0)
    assert tuple(ellipse.center) == pytest.approx((1.0, 2.0))
    assert ellipse in ax.patches


def test_covariance_ellipse_selected_indices():
    fig, ax = plt.subplots()
    belief = MeanAndCovariance([1.0, 2.0, 3.0], np.diag([4.0, 1.0, 9.0]))
    ellipse = plot_covariance_ellipse(belief, n_std=1.0, ax=ax, indices=(1, 2))
    assert ellipse.width == pytest.approx(6.0)
    assert ellipse.height == pytest.approx(2.0)


def test_plot_nis_from_estimator_history():
    estimator = StateEstimator(0.0, MeanAndCovariance([0.0, 0.0], np.eye(2)))
    observer = LinearObserver([[1.0, 0.0]])
    innovations, covariances = [], []
    for z in (0.5, -0.2, 9.0):
        estimator.assimilate(estimator.predict_observation(observer),
                             MeanAndCovariance([z], [[1.0]]))
        innovations.append(estimator.last_innovation)
        covariances.append(estimator.last_innovation_covariance)

    fig, ax = plt.subplots()
    values = plot_nis(innovations, covariances, ax=ax)

    assert values.shape == (3,)
    assert values[0] == pytest.approx(0.5**2 / 2.0)
    assert ax.get_ylabel() == 'NIS'
    labels = [line.get_label() for line in ax.get_lines()]
    assert 'Outside band' in labels


def test_plot_nis_rejects_empty_history():
    with pytest.raises(ValueError, match="empty"):
        plot_nis([], [])
