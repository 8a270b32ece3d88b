"""Shared fixtures for the estimation tests."""

import numpy as np
import pytest

from gaussian_estimation import (MeanAndCovariance, LinearDynamics, LinearObserver,
                                 SigmaPointDynamics, SigmaPointObserver,
                                 TimeDependentAdditiveProcessNoise)


def cv_transition(dt):
    return np.array([[1.0, dt],
                     [0.0, 1.0]])


@pytest.fixture
def prior():
    return MeanAndCovariance([0.0, 0.0], np.eye(2))


@pytest.fixture
def correlated_prior():
    return MeanAndCovariance([1.0, -0.5], np.array([[2.0, 0.3],
                                                    [0.3, 0.5]]))


@pytest.fixture
def cv_linear():
    return LinearDynamics(cv_transition)


@pytest.fixture
def cv_sigma():
    return SigmaPointDynamics(lambda x, dt: cv_transition(dt) @ x)


@pytest.fixture
def position_observer():
    return LinearObserver([[1.0, 0.0]])


@pytest.fixture
def position_sigma_observer():
    return SigmaPointObserver(lambda x: x[:1])


@pytest.fixture
def velocity_noise():
    return TimeDependentAdditiveProcessNoise(np.diag([0.0, 0.01]))
