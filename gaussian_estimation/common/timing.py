"""
Time handling for estimators.

Estimators accept any time point type whose difference is a duration that
can be expressed in seconds: plain numbers, ``datetime`` objects and
``numpy.datetime64`` all work.
"""

import numpy as np


def duration_to_seconds(duration):
    """
    Convert a duration to a float number of seconds.

    Parameters
    ----------
    duration : float, int, datetime.timedelta, np.timedelta64
        Difference of two time points. Plain numbers are taken to be seconds
        already. Any object with a ``total_seconds()`` method is accepted.

    Returns
    -------
    float
        Duration in seconds

    Examples
    --------
    >>> from datetime import timedelta
    >>> duration_to_seconds(timedelta(milliseconds=250))
    0.25
    >>> duration_to_seconds(np.timedelta64(2, 's'))
    2.0
    """
    if isinstance(duration, np.timedelta64):
        return float(duration / np.timedelta64(1, 's'))
    if hasattr(duration, 'total_seconds'):
        return float(duration.total_seconds())
    return float(duration)
