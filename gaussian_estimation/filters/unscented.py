"""
Sigma-point sampling (unscented transform).

Deterministic weighted sample sets that reproduce the first two moments of a
Gaussian belief. A set can be pushed through any nonlinear function and
recombined into a belief again, which is how the estimator handles models
that have no Jacobian.

Two placement rules are provided:
- CubatureSigmaPoints: 2n equally weighted points (Arasaratnam/Haykin)
- MerweScaledSigmaPoints: 2n+1 scaled points (van der Merwe)
"""

import logging

import numpy as np
from scipy.linalg import cholesky

from ..estimate import MeanAndCovariance

logger = logging.getLogger(__name__)


def _matrix_square_root(P):
    """
    Return S such that S @ S.T == P.

    Uses the lower Cholesky factor. Positive semi-definite matrices that
    Cholesky rejects fall back to an eigendecomposition with negative
    eigenvalues clipped to zero.
    """
    try:
        return cholesky(P, lower=True)
    except np.linalg.LinAlgError:
        logger.debug("Cholesky failed, using eigendecomposition square root")
        eigval, eigvec = np.linalg.eigh(P)
        eigval = np.maximum(eigval, 0)
        return eigvec @ np.diag(np.sqrt(eigval))


class CubatureSigmaPoints:
    """
    Third-degree spherical-radial cubature rule.

    Generates 2n points ``x ± sqrt(n) * S[:, k]`` with equal weights
    ``1 / (2n)``, where ``S`` is a square root of the covariance.
    """

    def num_points(self, n):
        return 2 * n

    def weights(self, n):
        """
        Mean and covariance weights for an n-dimensional belief.

        Returns
        -------
        tuple of np.ndarray
            (Wm, Wc), both of shape (2n,)
        """
        W = np.full(2 * n, 1.0 / (2 * n))
        return W, W.copy()

    def sigma_points(self, x, P):
        """
        Generate cubature points around (x, P).

        Parameters
        ----------
        x : np.ndarray
            Mean state vector (n,)
        P : np.ndarray
            Covariance matrix (n, n)

        Returns
        -------
        np.ndarray
            Sigma points (2n, n)
        """
        n = len(x)
        S = np.sqrt(n) * _matrix_square_root(P)
        return np.vstack([x + S.T, x - S.T])

    def __repr__(self):
        return "CubatureSigmaPoints()"


class MerweScaledSigmaPoints:
    """
    Merwe's scaled sigma points.

    Parameters
    ----------
    alpha : float, optional
        Spread of sigma points around mean (typically 1e-3 to 1)
    beta : float, optional
        Incorporate prior knowledge of distribution (2 is optimal for Gaussian)
    kappa : float, optional
        Secondary scaling parameter (typically 0 or 3-n)
    """

    def __init__(self, alpha=0.1, beta=2.0, kappa=0.0):
        if alpha <= 0:
            raise ValueError(f"alpha must be positive, got {alpha}")
        self.alpha = alpha
        self.beta = beta
        self.kappa = kappa

    def _lambda(self, n):
        return (self.alpha**2) * (n + self.kappa) - n

    def num_points(self, n):
        return 2 * n + 1

    def weights(self, n):
        """
        Mean and covariance weights for an n-dimensional belief.

        Returns
        -------
        tuple of np.ndarray
            (Wm, Wc), both of shape (2n+1,)
        """
        lambda_ = self._lambda(n)
        Wm = np.full(2 * n + 1, 0.5 / (n + lambda_))
        Wc = np.copy(Wm)
        Wm[0] = lambda_ / (n + lambda_)
        Wc[0] = lambda_ / (n + lambda_) + (1 - self.alpha**2 + self.beta)
        return Wm, Wc

    def sigma_points(self, x, P):
        """
        Generate sigma points around (x, P).

        Parameters
        ----------
        x : np.ndarray
            Mean state vector (n,)
        P : np.ndarray
            Covariance matrix (n, n)

        Returns
        -------
        np.ndarray
            Sigma points (2n+1, n); the first row is the mean
        """
        n = len(x)
        S = np.sqrt(self._lambda(n) + n) * _matrix_square_root(P)
        return np.vstack([x[np.newaxis, :], x + S.T, x - S.T])

    def __repr__(self):
        return (f"MerweScaledSigmaPoints(alpha={self.alpha}, "
                f"beta={self.beta}, kappa={self.kappa})")


class SigmaPoints:
    """
    Weighted sigma-point set.

    Attributes
    ----------
    points : np.ndarray
        Samples, one per row (num_points, dim)
    mean_weights : np.ndarray
        Weights used to recombine the mean (num_points,)
    covariance_weights : np.ndarray
        Weights used to recombine covariances (num_points,)
    """

    def __init__(self, points, mean_weights, covariance_weights=None):
        points = np.asarray(points, dtype=float)
        if points.ndim != 2:
            raise ValueError(f"points must be 2-D (num_points, dim), got shape {points.shape}")
        mean_weights = np.asarray(mean_weights, dtype=float)
        if covariance_weights is None:
            covariance_weights = mean_weights
        covariance_weights = np.asarray(covariance_weights, dtype=float)
        if mean_weights.shape != (len(points),) or covariance_weights.shape != (len(points),):
            raise ValueError("weights must have one entry per sigma point")

        self.points = points
        self.mean_weights = mean_weights
        self.covariance_weights = covariance_weights

    @property
    def dim(self):
        return self.points.shape[1]

    def __len__(self):
        return len(self.points)

    def map(self, fn, *args):
        """
        Propagate every point through ``fn(point, *args)``.

        The weights are carried over unchanged. The output dimension may
        differ from the input dimension (e.g. state -> observation).

        Returns
        -------
        SigmaPoints
            The propagated set
        """
        propagated = np.array([np.atleast_1d(fn(s, *args)) for s in self.points],
                              dtype=float)
        return SigmaPoints(propagated, self.mean_weights, self.covariance_weights)

    def mean(self):
        return np.dot(self.mean_weights, self.points)

    def mean_centered_samples(self):
        """
        Weighted mean and the samples with that mean subtracted.

        Returns
        -------
        tuple
            (mean (dim,), centered samples (num_points, dim))
        """
        mean = self.mean()
        return mean, self.points - mean

    def statistics(self):
        """
        Recombine the weighted samples into a Gaussian belief.

        Returns
        -------
        MeanAndCovariance
        """
        mean, centered = self.mean_centered_samples()
        covariance = centered.T @ (self.covariance_weights[:, np.newaxis] * centered)
        return MeanAndCovariance(mean, covariance)

    def cross_covariance(self, other):
        """
        Weighted cross-covariance between this set and a propagated set.

        Parameters
        ----------
        other : SigmaPoints
            Set with the same number of points, e.g. ``self.map(h)``

        Returns
        -------
        np.ndarray
            Cross-covariance (self.dim, other.dim)
        """
        if len(other) != len(self):
            raise ValueError(
                f"sigma point sets differ in size: {len(self)} vs {len(other)}"
            )
        _, centered = self.mean_centered_samples()
        _, other_centered = other.mean_centered_samples()
        return centered.T @ (self.covariance_weights[:, np.newaxis] * other_centered)


def sample(belief, rule=None):
    """
    Draw a sigma-point set matching the mean and covariance of ``belief``.

    Parameters
    ----------
    belief : MeanAndCovariance
        Belief to sample from
    rule : CubatureSigmaPoints or MerweScaledSigmaPoints, optional
        Placement rule (default: cubature)

    Returns
    -------
    SigmaPoints
    """
    if rule is None:
        rule = CubatureSigmaPoints()
    Wm, Wc = rule.weights(belief.dim)
    points = rule.sigma_points(belief.mean, belief.covariance)
    return SigmaPoints(points, Wm, Wc)
