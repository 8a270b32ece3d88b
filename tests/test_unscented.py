"""
Tests for sigma-point sampling
==============================
pytest tests/test_unscented.py -v
"""

import numpy as np
import pytest

from gaussian_estimation import (CubatureSigmaPoints, MeanAndCovariance,
                                 MerweScaledSigmaPoints, SigmaPoints, sample)

RULES = [CubatureSigmaPoints(), MerweScaledSigmaPoints(),
         MerweScaledSigmaPoints(alpha=1.0, beta=0.0, kappa=1.0)]


@pytest.fixture
def belief():
    A = np.array([[2.0, 0.4, 0.1],
                  [0.4, 1.0, -0.2],
                  [0.1, -0.2, 0.5]])
    return MeanAndCovariance([1.0, -2.0, 0.5], A)


class TestRules:
    def test_cubature_point_count_and_weights(self, belief):
        sigmas = sample(belief, CubatureSigmaPoints())
        assert len(sigmas) == 6
        np.testing.assert_allclose(sigmas.mean_weights, np.full(6, 1 / 6))

    def test_merwe_point_count(self, belief):
        sigmas = sample(belief, MerweScaledSigmaPoints())
        assert len(sigmas) == 7
        np.testing.assert_allclose(sigmas.points[0], belief.mean)

    @pytest.mark.parametrize("rule", RULES, ids=repr)
    def test_mean_weights_sum_to_one(self, rule):
        Wm, _ = rule.weights(4)
        assert np.sum(Wm) == pytest.approx(1.0)

    def test_merwe_default_weights(self):
        # alpha=0.1, beta=2, kappa=0 with n=1: lambda = -0.99
        Wm, Wc = MerweScaledSigmaPoints().weights(1)
        np.testing.assert_allclose(Wm, [-99.0, 50.0, 50.0])
        np.testing.assert_allclose(Wc, [-96.01, 50.0, 50.0])

    def test_merwe_rejects_non_positive_alpha(self):
        with pytest.raises(ValueError):
            MerweScaledSigmaPoints(alpha=0.0)

    def test_default_rule_is_cubature(self, belief):
        assert len(sample(belief)) == 2 * belief.dim


class TestMomentMatching:
    @pytest.mark.parametrize("rule", RULES, ids=repr)
    def test_statistics_reproduce_belief(self, belief, rule):
        stats = sample(belief, rule).statistics()
        np.testing.assert_allclose(stats.mean, belief.mean, atol=1e-10)
        np.testing.assert_allclose(stats.covariance, belief.covariance, atol=1e-10)

    def test_singular_covariance_falls_back_to_eigendecomposition(self):
        P = np.array([[1.0, 1.0],
                      [1.0, 1.0]])
        belief = MeanAndCovariance([0.0, 0.0], P)
        stats = sample(belief, CubatureSigmaPoints()).statistics()
        np.testing.assert_allclose(stats.covariance, P, atol=1e-10)

    def test_mean_centered_samples(self, belief):
        mean, centered = sample(belief).mean_centered_samples()
        np.testing.assert_allclose(mean, belief.mean, atol=1e-12)
        np.testing.assert_allclose(centered.sum(axis=0), np.zeros(3), atol=1e-12)


class TestPropagation:
    def test_map_changes_dimension_and_keeps_weights(self, belief):
        sigmas = sample(belief)
        observed = sigmas.map(lambda x: x[:1])
        assert observed.dim == 1
        assert len(observed) == len(sigmas)
        np.testing.assert_array_equal(observed.mean_weights, sigmas.mean_weights)

    def test_map_forwards_extra_arguments(self, belief):
        sigmas = sample(belief)
        shifted = sigmas.map(lambda x, offset: x + offset, 10.0)
        np.testing.assert_allclose(shifted.mean(), belief.mean + 10.0)

    def test_linear_map_is_exact(self, belief):
        A = np.array([[1.0, 2.0, 0.0],
                      [0.0, 1.0, -1.0]])
        stats = sample(belief).map(lambda x: A @ x).statistics()
        np.testing.assert_allclose(stats.mean, A @ belief.mean, atol=1e-10)
        np.testing.assert_allclose(stats.covariance, A @ belief.covariance @ A.T, atol=1e-10)

    def test_cross_covariance_of_linear_map(self, belief):
        A = np.array([[0.5, 0.0, 1.0]])
        sigmas = sample(belief, MerweScaledSigmaPoints())
        cross = sigmas.cross_covariance(sigmas.map(lambda x: A @ x))
        np.testing.assert_allclose(cross, belief.covariance @ A.T, atol=1e-10)

    def test_cross_covariance_requires_equal_sizes(self, belief):
        sigmas = sample(belief)
        other = SigmaPoints(np.zeros((3, 1)), np.full(3, 1 / 3))
        with pytest.raises(ValueError, match="differ in size"):
            sigmas.cross_covariance(other)


class TestSigmaPointsValidation:
    def test_rejects_one_dimensional_points(self):
        with pytest.raises(ValueError):
            SigmaPoints(np.zeros(3), np.full(3, 1 / 3))

    def test_rejects_weight_count_mismatch(self):
        with pytest.raises(ValueError, match="one entry per sigma point"):
            SigmaPoints(np.zeros((3, 2)), np.full(2, 0.5))
