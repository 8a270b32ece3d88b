"""
Constant Velocity Tracking Example

Tracks a 1-D target with position measurements, running the exact linear
Kalman path and the cubature (sigma-point) path side by side. For linear
models both give the same answer.
"""

import numpy as np
import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from gaussian_estimation import (StateEstimator, MeanAndCovariance, LinearDynamics,
                                 SigmaPointDynamics, LinearObserver, SigmaPointObserver,
                                 TimeDependentAdditiveProcessNoise)
from gaussian_estimation.metrics import rmse


def transition(dt):
    return np.array([[1.0, dt],
                     [0.0, 1.0]])


def simulate(n_steps=50, dt=0.5, velocity=1.0, r_std=0.3, seed=0):
    """Ground truth positions/velocities and noisy position measurements."""
    rng = np.random.default_rng(seed)
    times = dt * np.arange(1, n_steps + 1)
    truth = np.column_stack([velocity * times, np.full(n_steps, velocity)])
    measurements = truth[:, 0] + rng.normal(0.0, r_std, n_steps)
    return times, truth, measurements


def run_constant_velocity_example():
    print("\n" + "="*60)
    print("Constant Velocity Example - Linear vs Cubature")
    print("="*60 + "\n")

    r_std = 0.3
    times, truth, measurements = simulate(r_std=r_std)

    prior = MeanAndCovariance([0.0, 0.0], np.diag([1.0, 1.0]))
    noise = TimeDependentAdditiveProcessNoise(np.diag([0.0, 0.01]))

    linear = StateEstimator(0.0, prior)
    cubature = StateEstimator(0.0, prior)
    dynamics = LinearDynamics(transition)
    sigma_dynamics = SigmaPointDynamics(lambda x, dt: transition(dt) @ x)
    observer = LinearObserver([[1.0, 0.0]])
    sigma_observer = SigmaPointObserver(lambda x: x[:1])

    linear_estimates = np.zeros_like(truth)
    cubature_estimates = np.zeros_like(truth)

    for k, (t, z) in enumerate(zip(times, measurements)):
        observation = MeanAndCovariance([z], [[r_std**2]])

        linear.predict(t, dynamics, noise)
        linear.assimilate(linear.predict_observation(observer), observation)
        linear_estimates[k] = linear.estimate.mean

        cubature.predict(t, sigma_dynamics, noise)
        cubature.assimilate(cubature.predict_observation(sigma_observer), observation)
        cubature_estimates[k] = cubature.estimate.mean

    print(f"Linear   RMSE [pos, vel]: {rmse(linear_estimates, truth)}")
    print(f"Cubature RMSE [pos, vel]: {rmse(cubature_estimates, truth)}")
    print(f"Max difference between paths: "
          f"{np.max(np.abs(linear_estimates - cubature_estimates)):.3e}")

    print("\n" + "="*60)
    print("Constant Velocity Example Complete!")
    print("="*60)


if __name__ == "__main__":
    run_constant_velocity_example()
