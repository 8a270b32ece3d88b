"""
Tests for metrics and gating
============================
pytest tests/test_metrics.py -v
"""

import numpy as np
import pytest

from gaussian_estimation import MeanAndCovariance, PredictedObservation
from gaussian_estimation.common import duration_to_seconds
from gaussian_estimation.metrics import (compute_all_metrics, gate_threshold, innovation,
                                         mahalanobis, nees, nis, rmse, within_gate)


@pytest.fixture
def predicted():
    return PredictedObservation([0.0], [[0.9]], [[0.9], [0.0]])


class TestGating:
    def test_innovation_adds_measurement_noise(self, predicted):
        y, S = innovation(predicted, MeanAndCovariance([2.0], [[0.1]]))
        np.testing.assert_allclose(y, [2.0])
        np.testing.assert_allclose(S, [[1.0]])

    def test_mahalanobis(self, predicted):
        assert mahalanobis(predicted, MeanAndCovariance([2.0], [[0.1]])) == pytest.approx(4.0)

    def test_gate_threshold_one_dof(self):
        assert gate_threshold(1, 0.99) == pytest.approx(6.6349, abs=1e-3)

    def test_gate_threshold_rejects_bad_probability(self):
        with pytest.raises(ValueError):
            gate_threshold(2, 1.0)

    def test_within_gate(self, predicted):
        assert within_gate(predicted, MeanAndCovariance([0.5], [[0.1]]))
        assert not within_gate(predicted, MeanAndCovariance([10.0], [[0.1]]))


class TestPerformance:
    def test_rmse_per_dimension(self):
        estimates = np.array([[1.0, 0.0], [3.0, 0.0]])
        truth = np.zeros((2, 2))
        np.testing.assert_allclose(rmse(estimates, truth), [np.sqrt(5.0), 0.0])

    def test_nees_identity_covariance(self):
        values = nees([[1.0, 0.0], [0.0, 2.0]], np.zeros((2, 2)), [np.eye(2), np.eye(2)])
        np.testing.assert_allclose(values, [1.0, 4.0])

    def test_nis_scalar_innovations(self):
        values = nis(np.array([[2.0], [1.0]]), np.array([[[4.0]], [[1.0]]]))
        np.testing.assert_allclose(values, [1.0, 1.0])

    def test_compute_all_metrics(self):
        estimates = np.array([[1.0], [-1.0]])
        truth = np.zeros((2, 1))
        metrics = compute_all_metrics(estimates, truth, covariances=np.ones((2, 1, 1)))
        assert metrics['rmse_total'] == pytest.approx(1.0)
        assert metrics['nees_mean'] == pytest.approx(1.0)
        assert 'nis' not in metrics


class TestDurations:
    def test_plain_numbers_are_seconds(self):
        assert duration_to_seconds(3) == 3.0

    def test_timedelta(self):
        from datetime import timedelta
        assert duration_to_seconds(timedelta(minutes=1, milliseconds=5)) == pytest.approx(60.005)

    def test_timedelta64(self):
        assert duration_to_seconds(np.timedelta64(1500, 'ms')) == pytest.approx(1.5)
