"""
Path selection for models handed to the estimator.

Dynamics and observers declare ``accepts_sigma_points = True`` when they
work on ``SigmaPoints``. Anything without the attribute, including plain
functions, is applied to the belief directly.
"""


def accepts_sigma_points(model):
    """True if ``model`` must be driven with sigma points."""
    return bool(getattr(model, 'accepts_sigma_points', False))
