"""
Range-Bearing Tracking Example

Tracks a 2-D constant velocity target from a fixed sensor that measures
range and bearing. The observation is nonlinear, so it is handled through
sigma points, and each measurement is gated before it is assimilated.
"""

import numpy as np
import matplotlib.pyplot as plt
import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from gaussian_estimation import (StateEstimator, MeanAndCovariance, LinearDynamics,
                                 SigmaPointObserver, DiscreteWhiteNoise)
from gaussian_estimation.metrics import within_gate
from gaussian_estimation.visualization import plot_covariance_ellipse, plot_nis


SENSOR = np.array([0.0, -20.0])


def transition(dt):
    F = np.eye(4)
    F[0, 2] = dt
    F[1, 3] = dt
    return F


def range_bearing(x, sensor):
    dx, dy = x[:2] - sensor
    return np.array([np.hypot(dx, dy), np.arctan2(dy, dx)])


def run_range_bearing_example(show=True):
    print("\n" + "="*60)
    print("Range-Bearing Tracking Example")
    print("="*60 + "\n")

    rng = np.random.default_rng(1)
    dt = 1.0
    n_steps = 40
    R = np.diag([0.5**2, np.radians(1.0)**2])

    true_state = np.array([-30.0, 10.0, 1.5, 0.2])
    estimator = StateEstimator(
        0.0, MeanAndCovariance([-28.0, 12.0, 0.0, 0.0], np.diag([25.0, 25.0, 4.0, 4.0]))
    )
    dynamics = LinearDynamics(transition)
    noise = DiscreteWhiteNoise(4, var=0.01, order=2)
    observer = SigmaPointObserver(range_bearing)

    fig, ax = plt.subplots(figsize=(10, 8))
    innovations, innovation_covariances = [], []
    rejected = 0

    for k in range(1, n_steps + 1):
        true_state = transition(dt) @ true_state
        z = range_bearing(true_state, SENSOR) + rng.multivariate_normal(np.zeros(2), R)
        observation = MeanAndCovariance(z, R)

        estimator.predict(k * dt, dynamics, noise)
        predicted = estimator.predict_observation(observer, SENSOR)

        if not within_gate(predicted, observation, probability=0.999):
            rejected += 1
            continue

        estimator.assimilate(predicted, observation)
        innovations.append(estimator.last_innovation)
        innovation_covariances.append(estimator.last_innovation_covariance)

        ax.plot(*true_state[:2], 'k.', alpha=0.6)
        if k % 5 == 0:
            plot_covariance_ellipse(estimator.estimate, n_std=3.0, ax=ax,
                                    edgecolor='blue', alpha=0.5)

    ax.plot(*SENSOR, 'r^', markersize=10, label='Sensor')
    ax.set_xlabel('X Position (m)')
    ax.set_ylabel('Y Position (m)')
    ax.legend()
    ax.axis('equal')

    fig_nis, ax_nis = plt.subplots(figsize=(12, 6))
    nis_values = plot_nis(innovations, innovation_covariances, ax=ax_nis)
    print(f"Final position error: "
          f"{np.linalg.norm(estimator.estimate.mean[:2] - true_state[:2]):.3f} m")
    print(f"Mean NIS: {np.mean(nis_values):.2f} (expected 2)")
    print(f"Gated out: {rejected}/{n_steps}")

    if show:
        plt.show()

    print("\n" + "="*60)
    print("Range-Bearing Example Complete!")
    print("="*60)


if __name__ == "__main__":
    run_range_bearing_example()
